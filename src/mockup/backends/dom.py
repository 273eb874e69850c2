"""DOM Backend - wireframe preview markup."""

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from html import escape
from typing import Any

from ..interpreter.plan import MaterializationPlan, PlanKind, Sizing
from .base import BackendAdapter
from .icons import icon_svg

SelectionPredicate = Callable[[str, str], bool]


def never_selected(screen_id: str, element_id: str) -> bool:
    return False


@dataclass
class DomNode:
    """Markup fragment: one element with ordered children."""

    tag: str = "div"
    classes: list[str] = field(default_factory=list)
    attrs: dict[str, Any] = field(default_factory=dict)
    text: str | None = None
    raw: str | None = None  # trusted inline markup (SVG glyphs)
    children: list["DomNode"] = field(default_factory=list)

    def has_class(self, name: str) -> bool:
        return name in self.classes

    def walk(self) -> Iterator["DomNode"]:
        yield self
        for child in self.children:
            yield from child.walk()

    def find_all(self, class_name: str) -> list["DomNode"]:
        return [node for node in self.walk() if node.has_class(class_name)]

    def find(self, class_name: str) -> "DomNode | None":
        return next((node for node in self.walk() if node.has_class(class_name)), None)

    def text_content(self) -> str:
        parts = [self.text or ""]
        parts.extend(child.text_content() for child in self.children)
        return "".join(parts)

    def to_html(self) -> str:
        attrs = ""
        if self.classes:
            attrs += f' class="{escape(" ".join(self.classes))}"'
        for key, value in self.attrs.items():
            attrs += f' {key}="{escape(str(value))}"'
        inner = (self.raw or "") + escape(self.text or "")
        inner += "".join(child.to_html() for child in self.children)
        return f"<{self.tag}{attrs}>{inner}</{self.tag}>"

    __str__ = to_html


class DomBackend(BackendAdapter[DomNode]):
    """
    Emits ``wf-*`` markup per plan.

    Selection comes in through ``is_selected(screen_id, element_id)``; the
    backend never reads shared state.
    """

    name = "dom"

    def __init__(self, screen_id: str = "", is_selected: SelectionPredicate | None = None) -> None:
        self.screen_id = screen_id
        self.is_selected = is_selected or never_selected

    # ------------------------------------------------------------------
    # Leaves
    # ------------------------------------------------------------------

    def create_leaf(self, plan: MaterializationPlan) -> DomNode:
        builder = self._leaf_builders.get(plan.kind)
        if builder is None:
            raise ValueError(f"No DOM leaf for plan kind {plan.kind}")
        node = builder(self, plan)
        self._mark_element(node, plan)
        return node

    def _text(self, plan: MaterializationPlan) -> DomNode:
        style = plan.prop("style", "body")
        if plan.role == "text":
            classes = ["wf-text", f"wf-text-{style}"]
        elif plan.role == "badge":
            classes = ["wf-badge", f"wf-badge-{plan.prop('variant', 'neutral')}"]
        else:
            classes = [f"wf-{plan.role}"]
        if plan.prop("trend") in ("up", "down"):
            classes.append("positive" if plan.prop("trend") == "up" else "negative")
        if plan.prop("active"):
            classes.append("active")
        tag = "span" if plan.role in ("nav-label", "list-trailing", "card-badge") else "div"
        return DomNode(tag=tag, classes=classes, text=plan.prop("content", ""))

    def _button(self, plan: MaterializationPlan) -> DomNode:
        if plan.role == "card-action":
            return DomNode(tag="button", classes=["wf-card-action"], text=plan.prop("content"))
        variant = plan.prop("variant", "primary")
        return DomNode(classes=["wf-button", f"wf-button-{variant}"], text=plan.prop("content"))

    def _input(self, plan: MaterializationPlan) -> DomNode:
        node = DomNode(classes=["wf-input"])
        if plan.prop("label"):
            node.children.append(DomNode(tag="label", classes=["wf-input-label"], text=str(plan.prop("label"))))
        node.children.append(DomNode(tag="span", classes=["wf-input-icon"], raw=icon_svg(plan.prop("icon"), "search")))
        node.children.append(DomNode(tag="span", classes=["wf-input-placeholder"], text=plan.prop("placeholder")))
        return node

    def _image(self, plan: MaterializationPlan) -> DomNode:
        size = plan.prop("size", "medium")
        if plan.role == "card-image":
            return DomNode(classes=["wf-card-image"])
        classes = ["wf-image", f"wf-image-{size}"]
        if plan.role != "image":
            classes.append(f"wf-{plan.role}")
            return DomNode(classes=classes)
        node = DomNode(classes=classes)
        node.children.append(DomNode(tag="span", classes=["wf-image-label"], text=plan.prop("label", "Image")))
        return node

    def _icon(self, plan: MaterializationPlan) -> DomNode:
        classes = ["wf-icon"] if plan.role == "icon" else [f"wf-{plan.role}"]
        node = DomNode(classes=classes, raw=icon_svg(plan.prop("name")))
        if plan.prop("label"):
            node.children.append(DomNode(tag="span", classes=["wf-icon-label"], text=str(plan.prop("label"))))
        return node

    def _divider(self, plan: MaterializationPlan) -> DomNode:
        return DomNode(classes=["wf-divider"])

    def _spacer(self, plan: MaterializationPlan) -> DomNode:
        return DomNode(classes=["wf-spacer", f"wf-spacer-{plan.prop('size', 'medium')}"])

    def _switch(self, plan: MaterializationPlan) -> DomNode:
        classes = ["wf-toggle-switch"]
        if plan.prop("checked"):
            classes.append("checked")
        return DomNode(classes=classes, children=[DomNode(classes=["wf-toggle-knob"])])

    _leaf_builders: dict[PlanKind, Callable[["DomBackend", MaterializationPlan], DomNode]] = {
        PlanKind.TEXT: _text,
        PlanKind.BUTTON: _button,
        PlanKind.INPUT: _input,
        PlanKind.IMAGE: _image,
        PlanKind.ICON: _icon,
        PlanKind.DIVIDER: _divider,
        PlanKind.SPACER: _spacer,
        PlanKind.SWITCH: _switch,
    }

    # ------------------------------------------------------------------
    # Containers
    # ------------------------------------------------------------------

    def create_container(self, plan: MaterializationPlan, children: Sequence[DomNode]) -> DomNode:
        if plan.role == "box":
            classes = ["wf-box", f"wf-box-{plan.prop('variant', 'card')}"]
        elif plan.role == "card":
            classes = ["wf-card", f"wf-card-image-{plan.prop('imagePosition', 'left')}"]
        else:
            classes = [f"wf-{plan.role}"]
        if plan.role == "nav-item" and plan.prop("active"):
            classes.append("active")
        node = DomNode(classes=classes, children=list(children))
        self._mark_element(node, plan)
        return node

    def configure_layout(self, node: DomNode, plan: MaterializationPlan) -> None:
        if plan.is_container and plan.layout.direction is not None:
            node.attrs["data-direction"] = plan.layout.direction.value
        if not plan.is_container and plan.layout.width_sizing is Sizing.HUG:
            node.classes.append("wf-hug")

    def _mark_element(self, node: DomNode, plan: MaterializationPlan) -> None:
        if not plan.is_element:
            return
        element_id = plan.element_id or ""
        node.classes.insert(0, "wf-element")
        if self.is_selected(self.screen_id, element_id):
            node.classes.append("selected")
        node.attrs["data-element-id"] = element_id
        node.attrs["data-element-type"] = plan.element_type
