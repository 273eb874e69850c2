"""
Element Dispatch Table
Maps every element type to its operative defaults and its expansion into
primitive/container plans. Both back ends materialize what this table
produces, so a new element type is added here and nowhere else.
"""

from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from ..registry.components import ICON_NAMES
from ..spec.models import Element
from .plan import (
    Align,
    Direction,
    Layout,
    MaterializationPlan,
    NO_PAINT,
    Paint,
    PlanKind,
    Sizing,
    TextStyle,
)
from .tokens import (
    BADGE_COLORS,
    GAP_SCALE,
    ICON_SIZES,
    IMAGE_SIZES,
    MUTED_STYLES,
    NAV_ICONS,
    RADIUS,
    SPACER_SIZES,
    SPACING,
    TEXT_STYLES,
)


@dataclass(frozen=True)
class Resolution:
    """Everything an expansion needs for one element."""

    element: Element
    props: Mapping[str, Any]
    element_id: str | None
    resolve_child: Callable[[Element, str | None], MaterializationPlan]

    def __getitem__(self, name: str) -> Any:
        return self.props[name]

    def get(self, name: str, default: Any = None) -> Any:
        return self.props.get(name, default)

    def supplied(self, name: str) -> bool:
        """True when the producer set ``name`` itself."""
        return _is_supplied(self.element.prop(name))

    def children(self) -> tuple[MaterializationPlan, ...]:
        """Resolve nested elements in array order."""
        plans = []
        for idx, child in enumerate(self.element.children):
            child_id = child.id or (f"{self.element_id}-{idx}" if self.element_id else None)
            plans.append(self.resolve_child(child, child_id))
        return tuple(plans)


@dataclass(frozen=True)
class VariantRule:
    type_name: str
    defaults: Mapping[str, Any]
    expand: Callable[[Resolution], MaterializationPlan]

    def effective_props(self, element: Element) -> dict[str, Any]:
        """Operative defaults overlaid with whatever the producer supplied."""
        props = dict(self.defaults)
        for name, value in element.as_props().items():
            if name in ("type", "id", "children"):
                continue
            if _is_supplied(value):
                props[name] = value
        return props


_RULES: dict[str, VariantRule] = {}


def rule(type_name: str, **defaults: Any) -> Callable[[Callable[[Resolution], MaterializationPlan]], Callable[[Resolution], MaterializationPlan]]:
    """Register an expansion for ``type_name``."""
    def decorator(fn: Callable[[Resolution], MaterializationPlan]) -> Callable[[Resolution], MaterializationPlan]:
        _RULES[type_name] = VariantRule(type_name, MappingProxyType(defaults), fn)
        return fn
    return decorator


def _is_supplied(value: Any) -> bool:
    return value is not None and not (isinstance(value, str) and value == "")


def _index(value: Any, default: int = 0) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _items(value: Any, default: Sequence[str]) -> list[str]:
    if isinstance(value, (list, tuple)):
        return [str(item) for item in value]
    return list(default)


# ============================================================================
# Primitive builders
# ============================================================================

def text_style(style: str, color: str | None = None, weight: str | None = None, align: Align = Align.MIN) -> TextStyle:
    size, default_weight = TEXT_STYLES.get(style, TEXT_STYLES["body"])
    if color is None:
        color = "textMuted" if style in MUTED_STYLES else "text"
    return TextStyle(style=style, size=size, weight=weight or default_weight, color=color, align=align)


def text(
    content: Any,
    style: str = "body",
    role: str = "text",
    *,
    color: str | None = None,
    weight: str | None = None,
    sizing: Sizing = Sizing.FILL,
    **extra: Any,
) -> MaterializationPlan:
    return MaterializationPlan(
        kind=PlanKind.TEXT,
        element_type="text",
        role=role,
        props=MappingProxyType({"content": str(content), "style": style, **extra}),
        text_style=text_style(style, color, weight),
        layout=Layout(width_sizing=sizing),
    )


def button_paint(variant: str) -> Paint:
    if variant == "primary":
        return Paint(fill="primary", corner_radius=RADIUS["md"])
    if variant == "outline":
        return Paint(stroke="primary", stroke_weight=2, corner_radius=RADIUS["md"])
    return Paint(fill="surface", corner_radius=RADIUS["md"])


def button(content: Any, variant: str = "primary", role: str = "button", sizing: Sizing = Sizing.FILL, **extra: Any) -> MaterializationPlan:
    return MaterializationPlan(
        kind=PlanKind.BUTTON,
        element_type="button",
        role=role,
        props=MappingProxyType({"content": str(content), "variant": variant, **extra}),
        text_style=TextStyle(style="button", size=15, weight="Semi Bold", color="text", align=Align.CENTER),
        paint=button_paint(variant),
        layout=Layout(
            direction=Direction.HORIZONTAL,
            padding=(14, 24),
            align=Align.CENTER,
            cross_align=Align.CENTER,
            width_sizing=sizing,
        ),
    )


def image(size: str = "medium", role: str = "image", label: str = "Image", shape: str = "rounded") -> MaterializationPlan:
    width, height = IMAGE_SIZES.get(size, IMAGE_SIZES["medium"])
    banner = size == "banner"
    if shape == "circle":
        radius = min(width, height) / 2
    elif shape == "square":
        radius = 0
    else:
        radius = RADIUS["lg"] if banner else RADIUS["md"]
    return MaterializationPlan(
        kind=PlanKind.IMAGE,
        element_type="image",
        role=role,
        props=MappingProxyType({"size": size, "label": label, "shape": shape}),
        paint=Paint(gradient=("primary", "secondary"), gradient_alpha=(0.3, 0.2), corner_radius=radius),
        layout=Layout(
            width_sizing=Sizing.FILL if banner else Sizing.FIXED,
            height_sizing=Sizing.FIXED,
            width=width,
            height=height,
        ),
    )


def icon(name: str, role: str = "icon", label: str | None = None, size: str = "medium", color: str = "text") -> MaterializationPlan:
    edge = ICON_SIZES.get(size, ICON_SIZES["medium"])
    return MaterializationPlan(
        kind=PlanKind.ICON,
        element_type="icon",
        role=role,
        props=MappingProxyType({"name": name, "label": label, "size": size}),
        text_style=text_style("label", color=color),
        layout=Layout(
            direction=Direction.HORIZONTAL,
            gap=SPACING["xs"],
            cross_align=Align.CENTER,
            width_sizing=Sizing.HUG if label else Sizing.FIXED,
            height_sizing=Sizing.FIXED,
            width=None if label else edge,
            height=edge,
        ),
    )


def container(
    role: str,
    children: Sequence[MaterializationPlan],
    direction: Direction = Direction.VERTICAL,
    paint: Paint = NO_PAINT,
    *,
    padding: tuple[float, float] = (0, 0),
    gap: float = 0,
    align: Align = Align.MIN,
    cross_align: Align = Align.MIN,
    sizing: Sizing = Sizing.FILL,
    element_type: str = "box",
    **props: Any,
) -> MaterializationPlan:
    return MaterializationPlan(
        kind=PlanKind.CONTAINER,
        element_type=element_type,
        role=role,
        props=MappingProxyType(props),
        paint=paint,
        layout=Layout(
            direction=direction,
            padding=padding,
            gap=gap,
            align=align,
            cross_align=cross_align,
            width_sizing=sizing,
        ),
        children=tuple(children),
    )


def fallback_text(element: Element) -> MaterializationPlan:
    """Text plan for an unrecognised element type."""
    content = element.prop("content")
    if not _is_supplied(content):
        content = element.type
    return text(content, "body")


BOX_PAINTS: Mapping[str, Paint] = MappingProxyType({
    "card": Paint(fill="surface", fill_opacity=0.5, stroke="border", stroke_weight=1, corner_radius=RADIUS["lg"]),
    "highlight": Paint(gradient=("primary", "secondary"), gradient_alpha=(0.15, 0.1), corner_radius=RADIUS["lg"]),
    "outline": Paint(stroke="border", stroke_weight=1, corner_radius=RADIUS["lg"]),
})

PADDED_BOXES = frozenset({"card", "highlight", "outline"})


# ============================================================================
# Element rules
# ============================================================================

@rule("text", content="Text", style="body")
def _text(r: Resolution) -> MaterializationPlan:
    return text(r["content"], r["style"])


@rule("button", content="Button", variant="primary", size="medium")
def _button(r: Resolution) -> MaterializationPlan:
    return button(r["content"], r["variant"], size=r["size"])


@rule("input", placeholder="Enter text...", icon="search", inputType="text")
def _input(r: Resolution) -> MaterializationPlan:
    return MaterializationPlan(
        kind=PlanKind.INPUT,
        element_type="input",
        role="input",
        props=MappingProxyType({
            "placeholder": str(r["placeholder"]),
            "icon": r["icon"],
            "label": r.get("label"),
            "inputType": r["inputType"],
        }),
        text_style=text_style("body", color="textMuted"),
        paint=Paint(fill="surface", stroke="border", stroke_weight=1, corner_radius=RADIUS["md"]),
        layout=Layout(
            direction=Direction.HORIZONTAL,
            padding=(14, 16),
            gap=12,
            cross_align=Align.CENTER,
        ),
    )


@rule("toggle", label="Toggle", checked=False)
def _toggle(r: Resolution) -> MaterializationPlan:
    checked = bool(r["checked"])
    switch = MaterializationPlan(
        kind=PlanKind.SWITCH,
        element_type="toggle",
        role="toggle-switch",
        props=MappingProxyType({"checked": checked}),
        paint=Paint(fill="primary" if checked else "border", corner_radius=12),
        layout=Layout(width_sizing=Sizing.FIXED, height_sizing=Sizing.FIXED, width=44, height=24),
    )
    return container(
        "toggle",
        [text(r["label"], "body", "toggle-label"), switch],
        Direction.HORIZONTAL,
        gap=SPACING["md"],
        cross_align=Align.CENTER,
        element_type="toggle",
        checked=checked,
    )


@rule("image", label="Image", size="medium", shape="rounded")
def _image(r: Resolution) -> MaterializationPlan:
    return image(r["size"], label=str(r["label"]), shape=r["shape"])


@rule("icon", name="star", size="medium")
def _icon(r: Resolution) -> MaterializationPlan:
    return icon(r["name"], label=r.get("label"), size=r["size"])


@rule("box", variant="card", padding="medium", gap="medium")
def _box(r: Resolution) -> MaterializationPlan:
    variant = r["variant"]
    is_row = variant == "row"
    pad = GAP_SCALE.get(r["padding"], SPACING["md"]) if variant in PADDED_BOXES or r.supplied("padding") else 0
    return container(
        "box",
        r.children(),
        Direction.HORIZONTAL if is_row else Direction.VERTICAL,
        BOX_PAINTS.get(variant, NO_PAINT),
        padding=(pad, pad),
        gap=GAP_SCALE.get(r["gap"], SPACING["md"]),
        cross_align=Align.CENTER if is_row else Align.MIN,
        variant=variant,
    )


@rule("divider")
def _divider(r: Resolution) -> MaterializationPlan:
    return MaterializationPlan(
        kind=PlanKind.DIVIDER,
        element_type="divider",
        role="divider",
        paint=Paint(stroke="border", stroke_weight=1),
        layout=Layout(width_sizing=Sizing.FILL, height_sizing=Sizing.FIXED, height=0),
    )


@rule("spacer", size="medium")
def _spacer(r: Resolution) -> MaterializationPlan:
    size = r["size"]
    return MaterializationPlan(
        kind=PlanKind.SPACER,
        element_type="spacer",
        role="spacer",
        props=MappingProxyType({"size": size}),
        layout=Layout(
            width_sizing=Sizing.FILL,
            height_sizing=Sizing.FIXED,
            width=1,
            height=SPACER_SIZES.get(size, SPACER_SIZES["medium"]),
        ),
    )


@rule("listItem", title="List Item", trailingIcon="arrow-right")
def _list_item(r: Resolution) -> MaterializationPlan:
    parts: list[MaterializationPlan] = []
    if r.get("leadingImage"):
        parts.append(image("small", role="list-leading"))
    elif r.get("leadingIcon"):
        parts.append(icon(str(r["leadingIcon"]), role="list-leading"))

    content = [text(r["title"], "body", "list-title", weight="Medium")]
    if r.get("subtitle"):
        content.append(text(r["subtitle"], "muted", "list-subtitle"))
    parts.append(container("list-content", content, gap=2))

    if r.get("trailingText"):
        parts.append(text(r["trailingText"], "body", "list-trailing", color="primary", sizing=Sizing.HUG))
    else:
        parts.append(icon(str(r["trailingIcon"]), role="list-trailing", color="textMuted"))

    return container(
        "list-item",
        parts,
        Direction.HORIZONTAL,
        Paint(fill="surface", fill_opacity=0.5, corner_radius=RADIUS["md"]),
        padding=(SPACING["md"], SPACING["md"]),
        gap=SPACING["md"],
        cross_align=Align.CENTER,
        element_type="listItem",
    )


@rule("card", title="Card Title", image=True, imagePosition="left")
def _card(r: Resolution) -> MaterializationPlan:
    parts: list[MaterializationPlan] = []
    if r["image"] is not False:
        parts.append(image("medium", role="card-image"))

    content = [text(r["title"], "subheading", "card-title")]
    if r.get("badge"):
        content.append(text(r["badge"], "label", "card-badge", color="secondary", sizing=Sizing.HUG))
    if r.get("subtitle"):
        content.append(text(r["subtitle"], "muted", "card-subtitle"))
    if r.get("description"):
        content.append(text(r["description"], "body", "card-desc"))
    if r.get("price"):
        content.append(text(r["price"], "heading", "card-price", color="secondary"))
    parts.append(container("card-content", content, gap=SPACING["xs"]))

    if r.get("action"):
        parts.append(button(r["action"], "primary", role="card-action", sizing=Sizing.HUG))

    return container(
        "card",
        parts,
        Direction.HORIZONTAL,
        BOX_PAINTS["card"],
        padding=(SPACING["md"], SPACING["md"]),
        gap=SPACING["md"],
        element_type="card",
        imagePosition=r["imagePosition"],
    )


@rule("stat", value="0", label="Stat")
def _stat(r: Resolution) -> MaterializationPlan:
    parts = [
        text(r["value"], "heading", "stat-value"),
        text(r["label"], "muted", "stat-label"),
    ]
    if r.get("trendValue"):
        trend = r.get("trend")
        arrow = {"up": "↑", "down": "↓"}.get(trend, "")
        color = {"up": "positive", "down": "negative"}.get(trend, "textMuted")
        content = f"{arrow} {r['trendValue']}" if arrow else str(r["trendValue"])
        parts.append(text(content, "label", "stat-trend", color=color, trend=trend))
    return container(
        "stat",
        parts,
        paint=BOX_PAINTS["card"],
        padding=(SPACING["md"], SPACING["md"]),
        gap=SPACING["xs"],
        element_type="stat",
    )


@rule("badge", content="Badge", variant="neutral")
def _badge(r: Resolution) -> MaterializationPlan:
    variant = r["variant"]
    return text(
        r["content"],
        "label",
        "badge",
        color=BADGE_COLORS.get(variant, "textMuted"),
        sizing=Sizing.HUG,
        variant=variant,
    )


@rule("navbar", items=("Home", "Search", "Cart", "Profile"), active=0)
def _navbar(r: Resolution) -> MaterializationPlan:
    active = _index(r["active"])
    entries = []
    for idx, item in enumerate(_items(r["items"], _RULES["navbar"].defaults["items"])):
        is_active = idx == active
        color = "primary" if is_active else "textMuted"
        entries.append(container(
            "nav-item",
            [
                icon(NAV_ICONS.get(item, "home"), role="nav-icon", color=color),
                text(item, "label", "nav-label", color=color, sizing=Sizing.HUG),
            ],
            gap=SPACING["xs"],
            cross_align=Align.CENTER,
            sizing=Sizing.HUG,
            active=is_active,
        ))
    return container(
        "navbar",
        entries,
        Direction.HORIZONTAL,
        Paint(fill="surface"),
        padding=(SPACING["sm"], SPACING["md"]),
        gap=SPACING["md"],
        align=Align.CENTER,
        element_type="navbar",
        active=active,
    )


@rule("header", title="Screen Title", showBack=False)
def _header(r: Resolution) -> MaterializationPlan:
    parts: list[MaterializationPlan] = []
    if r.get("showBack"):
        parts.append(icon("back", role="header-back"))
    parts.append(text(r["title"], "subheading", "header-title"))
    action = r.get("rightAction")
    if action:
        if action in ICON_NAMES:
            parts.append(icon(action, role="header-action"))
        else:
            parts.append(text(action, "body", "header-action", color="primary", sizing=Sizing.HUG))
    return container(
        "header",
        parts,
        Direction.HORIZONTAL,
        gap=SPACING["sm"],
        cross_align=Align.CENTER,
        element_type="header",
    )


@rule("tabs", items=("Tab 1", "Tab 2", "Tab 3"), active=0)
def _tabs(r: Resolution) -> MaterializationPlan:
    active = _index(r["active"])
    tabs = []
    for idx, item in enumerate(_items(r["items"], _RULES["tabs"].defaults["items"])):
        is_active = idx == active
        tabs.append(text(
            item,
            "body",
            "tab",
            color="text" if is_active else "textMuted",
            weight="Semi Bold" if is_active else None,
            sizing=Sizing.HUG,
            active=is_active,
        ))
    return container(
        "tabs",
        tabs,
        Direction.HORIZONTAL,
        Paint(fill="surface", corner_radius=RADIUS["md"]),
        padding=(SPACING["xs"], SPACING["xs"]),
        gap=SPACING["xs"],
        element_type="tabs",
        active=active,
    )


RULES: Mapping[str, VariantRule] = MappingProxyType(_RULES)
