"""Component registry tests."""

import pytest
from hypothesis import given, strategies as st
from returns.result import Failure, Success

from mockup.registry import (
    COMPONENT_REGISTRY,
    ComponentRegistry,
    audit_spec,
    describe,
    generate_docs,
    is_present,
    schema_for,
    validate_component,
)
from mockup.spec import UiSpec

EXPECTED_TYPES = {
    "text", "button", "input", "toggle", "image", "icon", "box", "divider",
    "spacer", "listItem", "card", "stat", "badge", "navbar", "header", "tabs",
}


@pytest.mark.unit
def test_registry_has_every_type(registry):
    """Test the built-in table covers all sixteen element types."""
    assert set(registry.types()) == EXPECTED_TYPES
    assert len(registry) == 16
    assert "card" in registry
    assert "carousel" not in registry


@pytest.mark.unit
def test_registry_is_read_only():
    """Test the table cannot be mutated."""
    with pytest.raises(TypeError):
        COMPONENT_REGISTRY["carousel"] = COMPONENT_REGISTRY["card"]


@pytest.mark.unit
def test_validate_missing_type():
    """Test elements without a type tag are rejected."""
    assert validate_component({}).error == "Component missing type"
    assert validate_component(None).error == "Component missing type"
    assert validate_component({"type": ""}).valid is False


@pytest.mark.unit
def test_validate_unknown_type():
    result = validate_component({"type": "carousel"})
    assert result.valid is False
    assert result.error == "Unknown component type: carousel"


@pytest.mark.unit
def test_validate_missing_required_prop():
    """Test a stat without a value is invalid."""
    result = validate_component({"type": "stat", "label": "Orders"})
    assert result.valid is False
    assert result.error == "Missing required prop: value"


@pytest.mark.unit
@pytest.mark.parametrize("value", ["0", 0, 0.0, "12"])
def test_validate_zero_counts_as_present(value):
    """Test numeric zero and the string "0" satisfy a required prop."""
    assert validate_component({"type": "stat", "value": value, "label": "Orders"}).valid


@pytest.mark.unit
@pytest.mark.parametrize("value", [None, "", False])
def test_validate_falsy_counts_as_missing(value):
    assert not validate_component({"type": "text", "content": value}).valid


@pytest.mark.unit
def test_validate_ignores_enum_domain():
    """Test out-of-domain enum values are not flagged."""
    assert validate_component({"type": "button", "content": "Go", "variant": "neon"}).valid


@pytest.mark.unit
def test_check_result_pattern(registry):
    """Test the Result-returning validator."""
    ok = registry.check({"type": "text", "content": "Hello"})
    assert isinstance(ok, Success)
    assert ok.unwrap().type_name == "text"

    bad = registry.check({"type": "text"})
    assert isinstance(bad, Failure)
    assert bad.failure() == "Missing required prop: content"


@pytest.mark.unit
def test_describe_format():
    """Test the schema dump lists each type with its props."""
    docs = describe()
    assert docs == generate_docs()
    assert "\nTEXT: Text content with various styles\n" in docs
    assert "content (string) *required*" in docs
    assert "style (heading|subheading|body|muted|label|caption)" in docs
    assert "\nDIVIDER: " in docs


@pytest.mark.unit
def test_describe_lists_types_in_order(registry):
    docs = registry.describe()
    positions = [docs.index(f"\n{t.upper()}: ") for t in registry.types()]
    assert positions == sorted(positions)


@pytest.mark.unit
def test_audit_collects_nested_issues():
    """Test audit walks box children and reports paths."""
    spec = UiSpec.model_validate({
        "screens": [{
            "id": "s1",
            "elements": [
                {"type": "text", "content": "ok"},
                {"type": "box", "children": [
                    {"type": "button"},
                    {"type": "mystery"},
                ]},
            ],
        }],
    })
    issues = audit_spec(spec)
    assert [(i.screen_id, i.path) for i in issues] == [
        ("s1", "elements[1].children[0]"),
        ("s1", "elements[1].children[1]"),
    ]
    assert issues[1].error == "Unknown component type: mystery"


@pytest.mark.unit
def test_audit_clean_spec_has_no_issues():
    spec = UiSpec.model_validate({
        "screens": [{"id": "s1", "elements": [{"type": "divider"}, {"type": "spacer"}]}],
    })
    assert audit_spec(spec) == []


@pytest.mark.unit
def test_custom_registry_table():
    """Test a registry can be built over a subset of the table."""
    subset = ComponentRegistry({"text": COMPONENT_REGISTRY["text"]})
    assert subset.types() == ["text"]
    assert subset.validate({"type": "card", "title": "x"}).error == "Unknown component type: card"


@given(st.text(min_size=1))
def test_non_empty_strings_are_present(value):
    """Property test: any non-empty string satisfies a required prop."""
    assert is_present(value)
    assert validate_component({"type": "text", "content": value}).valid


@given(st.integers() | st.floats(allow_nan=False))
def test_numbers_are_present(value):
    """Property test: every non-NaN number is present, zero included."""
    assert is_present(value)


@pytest.mark.unit
def test_schema_for_known_type(registry):
    schema = schema_for("listItem")
    assert schema == registry.schema_for("listItem")
    assert schema.type_name == "listItem"
    assert schema.name == "List Item"
    assert "title" in schema.required_props()


@pytest.mark.unit
def test_schema_for_unknown_type(registry):
    assert schema_for("carousel") is None
    assert registry.schema_for("") is None
