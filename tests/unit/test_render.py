"""Renderer tests."""

import pytest
from prometheus_client import CollectorRegistry

from mockup.backends import FontLoadError, FontName, LocalFontProvider
from mockup.core.config import Settings
from mockup.monitoring import MetricsCollector
from mockup.render import Renderer
from mockup.spec import Element, Screen, UiSpec


@pytest.mark.unit
def test_render_element_selected(renderer):
    node = renderer.render_element(Element(type="text", id="t", content="Hi"), selected=True, screen_id="s")
    assert node.has_class("selected")
    assert node.attrs["data-element-id"] == "t"


@pytest.mark.unit
def test_render_element_selects_only_root(renderer):
    box = Element.model_validate({"type": "box", "id": "b", "children": [{"type": "text"}]})
    node = renderer.render_element(box, selected=True)
    assert node.has_class("selected")
    assert not node.children[0].has_class("selected")


@pytest.mark.unit
def test_render_element_selected_without_id(renderer):
    node = renderer.render_element(Element(type="text", content="Hi"), selected=True)
    assert node.has_class("selected")
    assert node.attrs["data-element-id"] == ""


@pytest.mark.unit
def test_render_element_without_id_selects_only_root(renderer):
    box = Element.model_validate({"type": "box", "children": [{"type": "text"}, {"type": "divider"}]})
    node = renderer.render_element(box, selected=True)
    assert node.has_class("selected")
    assert not any(child.has_class("selected") for child in node.walk() if child is not node)


@pytest.mark.unit
def test_render_element_unselected(renderer):
    node = renderer.render_element(Element(type="text", content="Hi"))
    assert not node.has_class("selected")


@pytest.mark.unit
def test_render_screen(renderer):
    screen = Screen.model_validate({
        "id": "s", "name": "Login",
        "elements": [{"type": "input"}, {"type": "button", "content": "Sign in"}],
    })
    node = renderer.render_screen(screen, lambda screen_id, element_id: element_id == "s-el-2")
    assert node.has_class("wf-screen")
    assert node.attrs["data-screen-id"] == "s"
    assert node.find("wf-screen-name").text == "Login"
    content = node.find("wf-screen-content")
    assert [c.attrs["data-element-type"] for c in content.children] == ["input", "button"]
    assert content.children[1].has_class("selected")


@pytest.mark.unit
def test_render_canvas(renderer, sample_spec):
    html = renderer.render_canvas(sample_spec)
    assert html.startswith('<div class="wf-canvas">')
    assert html.count('class="wf-screen"') == 2
    assert "left: 420px; top: 0px;" in html
    assert 'class="flow-arrows"' in html
    assert "Tap card" in html


@pytest.mark.unit
def test_render_canvas_does_not_mutate_input(renderer):
    spec = UiSpec.model_validate({"screens": [{"elements": [{"type": "text"}]}]})
    html = renderer.render_canvas(spec)
    assert 'data-screen-id="screen-1"' in html
    assert spec.screens[0].id is None


@pytest.mark.unit
def test_render_canvas_without_flows(renderer):
    html = renderer.render_canvas(UiSpec.model_validate({"screens": [{"id": "a"}]}))
    assert "flow-arrows" not in html


@pytest.mark.unit
def test_render_canvas_is_repeatable(renderer, sample_spec):
    assert renderer.render_canvas(sample_spec) == renderer.render_canvas(sample_spec)


@pytest.mark.unit
@pytest.mark.asyncio
async def test_build_native(renderer, sample_spec):
    document = await renderer.build_native(sample_spec, LocalFontProvider())
    assert len(document.frames) == 2


@pytest.mark.unit
@pytest.mark.asyncio
async def test_build_native_font_failure(renderer, sample_spec):
    provider = LocalFontProvider(available={FontName("Inter", "Bold")})
    with pytest.raises(FontLoadError):
        await renderer.build_native(sample_spec, provider)


@pytest.mark.unit
def test_metrics_collector_records(monkeypatch, sample_spec):
    """Test render passes and routed edges reach the collector."""
    collector = MetricsCollector(CollectorRegistry())
    monkeypatch.setattr("mockup.render.metrics_collector", collector)
    monkeypatch.setattr("mockup.flows.router.metrics_collector", collector)

    Renderer(settings=Settings(enable_metrics=True)).render_canvas(sample_spec)

    registry = collector.registry
    assert registry.get_sample_value(
        "mockup_render_passes_total", {"backend": "dom", "status": "success"}
    ) == 1
    assert registry.get_sample_value("mockup_flow_edges_total", {"outcome": "routed"}) == 1
    assert registry.get_sample_value(
        "mockup_plans_materialized_total", {"backend": "dom", "kind": "container"}
    ) > 0
    assert b"mockup_uptime_seconds" in collector.get_metrics()
