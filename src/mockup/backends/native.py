"""
Native Backend
Builds a design-tool frame graph (frames, text, lines) from materialization plans.
"""

import asyncio
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Protocol

from ..core import Settings, get_logger, get_settings
from ..interpreter.interpreter import Interpreter
from ..interpreter.plan import Align, MaterializationPlan, Paint, PlanKind, TextStyle
from ..interpreter.tokens import COLORS, FONT_WEIGHTS, RADIUS
from ..spec.models import Screen, UiSpec
from .base import BackendAdapter

logger = get_logger(__name__)

RGB = tuple[float, float, float]


class FontLoadError(Exception):
    """Typography resources could not be acquired; the render pass is aborted."""

    def __init__(self, message: str, original: Exception | None = None) -> None:
        super().__init__(message)
        self.original = original


class FontsNotLoadedError(RuntimeError):
    """A text node was requested before ``load_fonts()`` completed."""


# ============================================================================
# Node graph
# ============================================================================

@dataclass(frozen=True)
class FontName:
    family: str
    style: str


@dataclass(frozen=True)
class SolidPaint:
    color: RGB
    opacity: float = 1.0
    type: str = "SOLID"


@dataclass(frozen=True)
class GradientStop:
    position: float
    color: RGB
    alpha: float


@dataclass(frozen=True)
class GradientPaint:
    stops: tuple[GradientStop, ...]
    type: str = "GRADIENT_LINEAR"


@dataclass
class SceneNode:
    name: str = ""
    fills: list[SolidPaint | GradientPaint] = field(default_factory=list)
    strokes: list[SolidPaint] = field(default_factory=list)
    stroke_weight: float = 0
    x: float = 0
    y: float = 0
    width: float = 0
    height: float = 0
    layout_sizing_horizontal: str = "HUG"
    layout_sizing_vertical: str = "HUG"

    def resize(self, width: float, height: float) -> None:
        self.width = width
        self.height = height


@dataclass
class FrameNode(SceneNode):
    layout_mode: str = "NONE"
    primary_axis_align_items: str = "MIN"
    counter_axis_align_items: str = "MIN"
    padding_top: float = 0
    padding_bottom: float = 0
    padding_left: float = 0
    padding_right: float = 0
    item_spacing: float = 0
    corner_radius: float = 0
    clips_content: bool = False
    children: list[SceneNode] = field(default_factory=list)

    def append_child(self, node: SceneNode) -> None:
        self.children.append(node)

    def set_padding(self, vertical: float, horizontal: float) -> None:
        self.padding_top = self.padding_bottom = vertical
        self.padding_left = self.padding_right = horizontal


@dataclass
class TextNode(SceneNode):
    characters: str = ""
    font_size: float = 14
    font_name: FontName = FontName("Inter", "Regular")
    text_align_horizontal: str = "LEFT"


@dataclass
class LineNode(SceneNode):
    pass


@dataclass
class NativeDocument:
    """Result of one native render pass."""
    app_name: str
    frames: list[FrameNode] = field(default_factory=list)

    @property
    def notice(self) -> str:
        return f"Created {len(self.frames)} screens for {self.app_name or 'your app'}"


# ============================================================================
# Font acquisition
# ============================================================================

class FontProvider(Protocol):
    """Host hook that makes a font usable for text nodes."""

    async def load_font(self, font: FontName) -> None:
        ...


class LocalFontProvider:
    """In-process provider; ``available=None`` accepts every font."""

    def __init__(self, available: set[FontName] | None = None) -> None:
        self.available = available
        self.loaded: list[FontName] = []

    async def load_font(self, font: FontName) -> None:
        await asyncio.sleep(0)
        if self.available is not None and font not in self.available:
            raise FontLoadError(f"Font not available: {font.family} {font.style}")
        self.loaded.append(font)


# ============================================================================
# Backend
# ============================================================================

_ALIGN = {Align.MIN: "MIN", Align.CENTER: "CENTER"}
_TEXT_ALIGN = {Align.MIN: "LEFT", Align.CENTER: "CENTER"}

_FRAME_NAMES = {
    "box": "Box",
    "card": "Card",
    "card-content": "Content",
    "list-item": "List Item",
    "list-content": "Content",
    "stat": "Stat",
    "navbar": "Navigation Bar",
    "nav-item": "Nav Item",
    "header": "Header",
    "tabs": "Tabs",
    "toggle": "Toggle",
}


def solid(token: str, opacity: float = 1.0) -> SolidPaint:
    return SolidPaint(color=COLORS[token], opacity=opacity)


def paint_fills(paint: Paint) -> list[SolidPaint | GradientPaint]:
    if paint.gradient is not None:
        start, end = paint.gradient
        start_alpha, end_alpha = paint.gradient_alpha
        return [GradientPaint(stops=(
            GradientStop(0, COLORS[start], start_alpha),
            GradientStop(1, COLORS[end], end_alpha),
        ))]
    if paint.fill is not None:
        return [solid(paint.fill, paint.fill_opacity)]
    return []


class NativeBackend(BackendAdapter[SceneNode]):
    """
    Frame-graph back end.

    ``await load_fonts()`` once per session before materializing; it is the
    only suspension point and is safe to repeat.
    """

    name = "native"

    def __init__(self, font_provider: FontProvider | None = None, settings: Settings | None = None) -> None:
        self.settings = settings or get_settings()
        self.font_provider = font_provider or LocalFontProvider()
        self._fonts_loaded = False
        self._font_lock = asyncio.Lock()

    @property
    def fonts_loaded(self) -> bool:
        return self._fonts_loaded

    def font(self, weight: str) -> FontName:
        return FontName(self.settings.font_family, weight)

    async def load_fonts(self) -> None:
        """
        Acquire every font weight the plans may ask for.

        Raises:
            FontLoadError: If any weight cannot be loaded
        """
        async with self._font_lock:
            if self._fonts_loaded:
                return
            for weight in FONT_WEIGHTS:
                font = self.font(weight)
                try:
                    await self.font_provider.load_font(font)
                except FontLoadError:
                    logger.error("font_load_failed", family=font.family, style=font.style)
                    raise
                except Exception as e:
                    logger.error("font_load_failed", family=font.family, style=font.style, error=str(e))
                    raise FontLoadError(f"Failed to load {font.family} {font.style}: {e}", e) from e
            self._fonts_loaded = True
            logger.info("fonts_loaded", family=self.settings.font_family, weights=len(FONT_WEIGHTS))

    # ------------------------------------------------------------------
    # Leaves
    # ------------------------------------------------------------------

    def create_leaf(self, plan: MaterializationPlan) -> SceneNode:
        if plan.kind is PlanKind.TEXT:
            return self._text(plan.prop("content", ""), plan.text_style)
        if plan.kind is PlanKind.BUTTON:
            return self._button(plan)
        if plan.kind is PlanKind.INPUT:
            return self._input(plan)
        if plan.kind is PlanKind.IMAGE:
            return self._image(plan)
        if plan.kind is PlanKind.ICON:
            return self._icon(plan)
        if plan.kind is PlanKind.DIVIDER:
            line = LineNode(name="Divider", strokes=[solid("border")], stroke_weight=1)
            return line
        if plan.kind is PlanKind.SPACER:
            return FrameNode(name="Spacer")
        if plan.kind is PlanKind.SWITCH:
            return self._switch(plan)
        raise ValueError(f"No native leaf for plan kind {plan.kind}")

    def _text(self, characters: str, style: TextStyle | None) -> TextNode:
        if not self._fonts_loaded:
            raise FontsNotLoadedError("load_fonts() must complete before text nodes are created")
        style = style or TextStyle(style="body", size=14, weight="Regular", color="text")
        return TextNode(
            name=characters,
            characters=characters,
            font_size=style.size,
            font_name=self.font(style.weight),
            fills=[solid(style.color)],
            text_align_horizontal=_TEXT_ALIGN[style.align],
        )

    def _button(self, plan: MaterializationPlan) -> FrameNode:
        frame = FrameNode(name="Button")
        if plan.role == "card-action":
            # Card actions always use the primary treatment
            frame.fills = [solid("primary")]
            frame.corner_radius = RADIUS["md"]
        else:
            self._apply_paint(frame, plan.paint)
        frame.append_child(self._text(plan.prop("content", "Button"), plan.text_style))
        return frame

    def _input(self, plan: MaterializationPlan) -> FrameNode:
        frame = FrameNode(name="Input")
        self._apply_paint(frame, plan.paint)
        placeholder = self._text(plan.prop("placeholder", ""), plan.text_style)
        placeholder.layout_sizing_horizontal = "FILL"
        frame.append_child(placeholder)
        return frame

    def _image(self, plan: MaterializationPlan) -> FrameNode:
        frame = FrameNode(name=plan.prop("label") or "Image")
        self._apply_paint(frame, plan.paint)
        return frame

    def _icon(self, plan: MaterializationPlan) -> FrameNode:
        edge = plan.layout.height or 20
        glyph = FrameNode(name=f"Icon/{plan.prop('name')}", strokes=[solid(plan.text_style.color if plan.text_style else "text")], stroke_weight=2)
        glyph.resize(edge, edge)
        if not plan.prop("label"):
            return glyph
        frame = FrameNode(name="Icon")
        frame.append_child(glyph)
        frame.append_child(self._text(str(plan.prop("label")), plan.text_style))
        return frame

    def _switch(self, plan: MaterializationPlan) -> FrameNode:
        frame = FrameNode(name="Switch")
        self._apply_paint(frame, plan.paint)
        knob = FrameNode(name="Knob", fills=[solid("text")], corner_radius=10)
        knob.resize(20, 20)
        frame.layout_mode = "HORIZONTAL"
        frame.primary_axis_align_items = "MAX" if plan.prop("checked") else "MIN"
        frame.counter_axis_align_items = "CENTER"
        frame.set_padding(2, 2)
        frame.append_child(knob)
        return frame

    # ------------------------------------------------------------------
    # Containers and layout
    # ------------------------------------------------------------------

    def create_container(self, plan: MaterializationPlan, children: Sequence[SceneNode]) -> FrameNode:
        frame = FrameNode(name=_FRAME_NAMES.get(plan.role, plan.role.replace("-", " ").title()))
        self._apply_paint(frame, plan.paint)
        for child in children:
            frame.append_child(child)
        return frame

    def configure_layout(self, node: SceneNode, plan: MaterializationPlan) -> None:
        layout = plan.layout
        if isinstance(node, FrameNode) and layout.direction is not None:
            node.layout_mode = layout.direction.value.upper()
            node.primary_axis_align_items = _ALIGN[layout.align]
            node.counter_axis_align_items = _ALIGN[layout.cross_align]
            node.set_padding(*layout.padding)
            node.item_spacing = layout.gap
        if layout.width is not None or layout.height is not None:
            node.resize(layout.width or node.width, layout.height or node.height)
        node.layout_sizing_horizontal = layout.width_sizing.value.upper()
        node.layout_sizing_vertical = layout.height_sizing.value.upper()

    def _apply_paint(self, frame: FrameNode, paint: Paint) -> None:
        frame.fills = paint_fills(paint)
        if paint.stroke is not None:
            frame.strokes = [solid(paint.stroke)]
            frame.stroke_weight = paint.stroke_weight
        frame.corner_radius = paint.corner_radius

    # ------------------------------------------------------------------
    # Screens
    # ------------------------------------------------------------------

    def create_screen_frame(self, screen: Screen, index: int) -> FrameNode:
        """Device frame with vertical auto-layout."""
        frame = FrameNode(
            name=screen.name or f"Screen {index + 1}",
            fills=[solid("background")],
            corner_radius=44,
            clips_content=True,
            layout_mode="VERTICAL",
            primary_axis_align_items="MIN",
            counter_axis_align_items="CENTER",
            padding_top=60,
            padding_bottom=100,
            padding_left=20,
            padding_right=20,
            item_spacing=12,
            layout_sizing_horizontal="FIXED",
            layout_sizing_vertical="FIXED",
        )
        frame.resize(self.settings.device_width, self.settings.device_height)
        if screen.position is not None:
            frame.x, frame.y = screen.position.x, screen.position.y
        else:
            frame.x, frame.y = index * 450, 0
        return frame

    async def build_document(self, spec: UiSpec, interpreter: Interpreter | None = None) -> NativeDocument:
        """
        Render every screen of ``spec`` into device frames.

        Raises:
            FontLoadError: Fonts could not be acquired; nothing is returned
        """
        await self.load_fonts()
        interpreter = interpreter or Interpreter()

        document = NativeDocument(app_name=spec.app_name)
        for index, screen in enumerate(spec.screens):
            frame = self.create_screen_frame(screen, index)
            for plan in interpreter.resolve_screen(screen):
                frame.append_child(self.materialize(plan))
            document.frames.append(frame)

        logger.info("native_document_built", screens=len(document.frames), app=spec.app_name)
        return document

