"""Flow edge router tests."""

import re

import pytest
from hypothesis import given, strategies as st

from mockup.flows import (
    END_MARKER,
    START_MARKER,
    FlowDirection,
    FlowRouter,
    Point,
    ScreenRect,
    format_number,
    render_flow_svg,
    rounded_path,
    route,
    screen_rects,
)
from mockup.spec import FlowEdge, UiSpec


def edge(source: str, target: str, label: str | None = None) -> FlowEdge:
    return FlowEdge.model_validate({"from": source, "to": target, "label": label})


@pytest.mark.unit
def test_horizontal_route():
    """Test side-by-side screens connect right edge to left edge."""
    screens = [ScreenRect("a", 0, 0, 280, 600), ScreenRect("b", 420, 0, 280, 600)]
    (path,) = route(screens, [edge("a", "b")])

    assert path.direction is FlowDirection.RIGHT
    assert path.points[0] == Point(280, 300)
    assert path.points[-1] == Point(420, 300)
    assert len(path.points) == 4
    assert path.d.startswith("M 280 300")
    assert path.d.endswith("L 420 300")
    assert path.start_marker == START_MARKER
    assert path.end_marker == END_MARKER


@pytest.mark.unit
def test_backward_route():
    screens = [ScreenRect("a", 0, 0), ScreenRect("b", 420, 0)]
    (path,) = route(screens, [edge("b", "a")])
    assert path.direction is FlowDirection.LEFT
    assert path.points[0] == Point(420, 300)
    assert path.points[-1] == Point(280, 300)


@pytest.mark.unit
def test_vertical_route():
    screens = [ScreenRect("a", 0, 0), ScreenRect("b", 0, 800)]
    down, up = route(screens, [edge("a", "b"), edge("b", "a")])
    assert down.direction is FlowDirection.DOWN
    assert down.points[0] == Point(140, 600)
    assert down.points[-1] == Point(140, 800)
    assert up.direction is FlowDirection.UP
    assert up.points[0] == Point(140, 800)


@pytest.mark.unit
def test_dangling_edges_are_dropped():
    screens = [ScreenRect("a", 0, 0)]
    assert route(screens, [edge("a", "ghost"), edge("ghost", "a")]) == []


@pytest.mark.unit
def test_short_segments_keep_sharp_corners():
    """Test corners next to a segment shorter than twice the radius are not rounded."""
    points = [Point(0, 0), Point(20, 0), Point(20, 100), Point(120, 100)]
    d = rounded_path(points, 12)
    assert d.startswith("M 0 0 L 20 0")
    assert "Q 20 0" not in d


@pytest.mark.unit
def test_long_segments_get_quadratic_corners():
    points = [Point(0, 0), Point(100, 0), Point(100, 100), Point(200, 100)]
    d = rounded_path(points, 12)
    assert d == "M 0 0 L 88 0 Q 100 0 100 12 L 100 88 Q 100 100 112 100 L 200 100"


@pytest.mark.unit
def test_offset_screens_route_with_curves():
    screens = [ScreenRect("a", 0, 0), ScreenRect("b", 500, 200)]
    (path,) = route(screens, [edge("a", "b")])
    assert path.d.count(" Q ") == 2
    assert path.points[1] == Point(390, 300)
    assert path.points[2] == Point(390, 500)


@pytest.mark.unit
def test_horizontal_label_box():
    screens = [ScreenRect("a", 0, 0), ScreenRect("b", 420, 0)]
    (path,) = route(screens, [edge("a", "b", "Next")])
    label = path.label
    assert (label.x, label.y) == (350, 290)
    assert (label.box.x, label.box.y) == (346, 276)
    assert label.box.width == 4 * 7 + 8
    assert label.box.height == 20
    assert label.box.rx == 4


@pytest.mark.unit
def test_vertical_label_box():
    screens = [ScreenRect("a", 0, 0), ScreenRect("b", 0, 800)]
    (path,) = route(screens, [edge("a", "b", "Go")])
    assert (path.label.x, path.label.y) == (150, 700)


@pytest.mark.unit
def test_unlabelled_edge_has_no_label():
    screens = [ScreenRect("a", 0, 0), ScreenRect("b", 420, 0)]
    (path,) = route(screens, [edge("a", "b", "")])
    assert path.label is None


@pytest.mark.unit
def test_format_number():
    assert format_number(140.0) == "140"
    assert format_number(152.5) == "152.5"
    assert format_number(-3) == "-3"


@pytest.mark.unit
def test_screen_rects_from_spec(settings):
    spec = UiSpec.model_validate({
        "screens": [
            {"id": "a", "position": {"x": 10, "y": 20}},
            {"id": "b"},
            {"name": "no id"},
        ],
    })
    rects = screen_rects(spec, 280, 600)
    assert [r.id for r in rects] == ["a", "b"]
    assert (rects[0].x, rects[0].y, rects[0].right, rects[0].bottom) == (10, 20, 290, 620)
    assert (rects[1].x, rects[1].y) == (500, 100)


@pytest.mark.unit
def test_flow_router_uses_settings(settings, sample_spec):
    paths = FlowRouter(settings).route(sample_spec)
    assert [(p.source, p.target) for p in paths] == [("home", "detail")]
    assert paths[0].label.text == "Tap card"


@pytest.mark.unit
def test_render_flow_svg():
    screens = [ScreenRect("a", 0, 0), ScreenRect("b", 420, 0)]
    svg = render_flow_svg(route(screens, [edge("a", "b", "<go>")]))
    assert svg.startswith('<svg class="flow-arrows"')
    assert f'<marker id="{START_MARKER}"' in svg
    assert f'<marker id="{END_MARKER}"' in svg
    assert 'marker-start="url(#arrow-start-dot)"' in svg
    assert "&lt;go&gt;" in svg
    assert render_flow_svg([]) == ""


coords = st.integers(min_value=-3000, max_value=3000)


@given(coords, coords, coords, coords)
def test_route_endpoints_touch_rectangles(ax, ay, bx, by):
    """Property test: anchors sit on the source and target rectangle edges."""
    a = ScreenRect("a", ax, ay)
    b = ScreenRect("b", bx, by)
    (path,) = route([a, b], [edge("a", "b")])
    start, end = path.points[0], path.points[-1]

    assert start.x in (a.x, a.right, a.center_x)
    assert start.y in (a.y, a.bottom, a.center_y)
    assert end.x in (b.x, b.right, b.center_x)
    assert end.y in (b.y, b.bottom, b.center_y)


@given(coords, coords, coords, coords)
def test_route_is_orthogonal(ax, ay, bx, by):
    """Property test: every polyline segment is axis-aligned."""
    (path,) = route([ScreenRect("a", ax, ay), ScreenRect("b", bx, by)], [edge("a", "b")])
    for p, q in zip(path.points, path.points[1:]):
        assert p.x == q.x or p.y == q.y


@given(coords, coords, coords, coords)
def test_path_data_is_well_formed(ax, ay, bx, by):
    """Property test: path data is one move followed by line/curve commands."""
    (path,) = route([ScreenRect("a", ax, ay), ScreenRect("b", bx, by)], [edge("a", "b")])
    commands = re.findall(r"[A-Z]", path.d)
    assert commands[0] == "M"
    assert commands[-1] == "L"
    assert set(commands[1:]) <= {"L", "Q"}
