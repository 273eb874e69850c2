"""DOM backend tests."""

import pytest

from mockup.backends import DomBackend, DomNode, icon_svg
from mockup.spec import Element


def el(**props) -> Element:
    return Element.model_validate(props)


def render(interpreter, element, **backend_kwargs) -> DomNode:
    return DomBackend(**backend_kwargs).materialize(interpreter.resolve(element))


@pytest.mark.unit
def test_text_classes(interpreter):
    node = render(interpreter, el(type="text", id="t1", content="Hello", style="heading"))
    assert node.classes[:3] == ["wf-element", "wf-text", "wf-text-heading"]
    assert node.attrs["data-element-id"] == "t1"
    assert node.attrs["data-element-type"] == "text"
    assert node.text == "Hello"


@pytest.mark.unit
def test_button_classes(interpreter):
    node = render(interpreter, el(type="button", content="Go", variant="outline"))
    assert node.has_class("wf-button")
    assert node.has_class("wf-button-outline")
    assert node.text == "Go"


@pytest.mark.unit
def test_selection_predicate(interpreter):
    """Test selection is driven only by the injected predicate."""
    picked = {("home", "a")}

    def is_selected(screen_id, element_id):
        return (screen_id, element_id) in picked

    backend = DomBackend("home", is_selected)
    a = backend.materialize(interpreter.resolve(el(type="text", id="a")))
    b = backend.materialize(interpreter.resolve(el(type="text", id="b")))
    assert a.has_class("selected")
    assert not b.has_class("selected")

    other_screen = DomBackend("detail", is_selected).materialize(interpreter.resolve(el(type="text", id="a")))
    assert not other_screen.has_class("selected")


@pytest.mark.unit
def test_default_backend_selects_nothing(interpreter):
    node = render(interpreter, el(type="card", id="c"))
    assert not any(n.has_class("selected") for n in node.walk())


@pytest.mark.unit
def test_markup_is_escaped(interpreter):
    node = render(interpreter, el(type="text", content="<script>alert(1)</script>"))
    html = node.to_html()
    assert "<script>" not in html
    assert "&lt;script&gt;" in html


@pytest.mark.unit
def test_card_markup(interpreter):
    node = render(interpreter, el(type="card", title="Shoe", price="$9", action="Buy", imagePosition="top"))
    assert node.has_class("wf-card-image-top")
    assert node.find("wf-card-image") is not None
    assert node.find("wf-card-title").text == "Shoe"
    action = node.find("wf-card-action")
    assert action.tag == "button"
    assert not any(c.startswith("wf-button") for c in action.classes)
    assert action.text == "Buy"


@pytest.mark.unit
def test_card_without_image(interpreter):
    node = render(interpreter, el(type="card", image=False))
    assert node.find("wf-card-image") is None


@pytest.mark.unit
def test_input_markup(interpreter):
    node = render(interpreter, el(type="input", label="Email", icon="mail"))
    assert node.find("wf-input-label").text == "Email"
    assert node.find("wf-input-placeholder").text == "Enter text..."
    assert node.find("wf-input-icon").raw == icon_svg("mail")


@pytest.mark.unit
def test_unknown_icon_uses_fallback_glyph():
    assert icon_svg("nonexistent") == icon_svg("star")
    assert icon_svg(None, "search") == icon_svg("search")


@pytest.mark.unit
def test_toggle_switch_checked(interpreter):
    node = render(interpreter, el(type="toggle", label="Wifi", checked=True))
    switch = node.find("wf-toggle-switch")
    assert switch.has_class("checked")
    assert node.find("wf-toggle-label").text == "Wifi"


@pytest.mark.unit
def test_badge_variant(interpreter):
    node = render(interpreter, el(type="badge", content="New", variant="success"))
    assert node.has_class("wf-badge")
    assert node.has_class("wf-badge-success")
    assert node.has_class("wf-hug")


@pytest.mark.unit
def test_navbar_active_class(interpreter):
    node = render(interpreter, el(type="navbar", items=["Home", "Search"], active=1))
    items = node.find_all("wf-nav-item")
    assert [item.has_class("active") for item in items] == [False, True]
    assert [n.text for n in node.find_all("wf-nav-label")] == ["Home", "Search"]


@pytest.mark.unit
def test_stat_trend_class(interpreter):
    node = render(interpreter, el(type="stat", value="3", label="Visits", trend="down", trendValue="-2"))
    trend = node.find("wf-stat-trend")
    assert trend.has_class("negative")
    assert trend.text == "↓ -2"


@pytest.mark.unit
def test_box_children_in_order(interpreter):
    node = render(interpreter, el(
        type="box", id="b", variant="row",
        children=[{"type": "text", "content": "one"}, {"type": "text", "content": "two"}],
    ))
    assert node.has_class("wf-box-row")
    assert node.attrs["data-direction"] == "horizontal"
    assert [c.text for c in node.children] == ["one", "two"]
    assert [c.attrs["data-element-id"] for c in node.children] == ["b-0", "b-1"]


@pytest.mark.unit
def test_fallback_renders_body_text(interpreter):
    node = render(interpreter, el(type="foo", content="bar"))
    assert node.has_class("wf-text-body")
    assert node.text_content() == "bar"
    assert node.attrs["data-element-type"] == "foo"


@pytest.mark.unit
def test_dom_node_html():
    node = DomNode(tag="span", classes=["a", "b"], attrs={"data-x": "1"}, text="hi")
    assert str(node) == '<span class="a b" data-x="1">hi</span>'
