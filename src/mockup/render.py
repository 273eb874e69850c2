"""
Render Interface
Entry points that run the interpreter and hand plans to a back end.
"""

import time
from typing import Iterable, Optional

from .backends import DomBackend, DomNode, FontLoadError, FontProvider, NativeBackend, NativeDocument
from .backends.dom import SelectionPredicate
from .core import LogContext, Settings, get_logger, get_settings
from .flows import FlowRouter, render_flow_svg
from .interpreter import Interpreter, MaterializationPlan
from .monitoring import metrics_collector
from .registry import ComponentRegistry, default_registry
from .spec import Element, Screen, UiSpec, ensure_ids, grid_position

logger = get_logger(__name__)


class Renderer:
    """
    Renders spec documents to preview markup or to native frame graphs.

    Every call is an independent pass: nothing is memoised between calls and
    the input spec is never mutated. Registry findings are logged, never
    used to skip elements.
    """

    def __init__(
        self,
        registry: Optional[ComponentRegistry] = None,
        settings: Optional[Settings] = None,
        interpreter: Optional[Interpreter] = None,
        router: Optional[FlowRouter] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.registry = registry or default_registry
        self.interpreter = interpreter or Interpreter()
        self.router = router or FlowRouter(self.settings)

    # ------------------------------------------------------------------
    # DOM
    # ------------------------------------------------------------------

    def render_element(self, element: Element, selected: bool = False, screen_id: str = "") -> DomNode:
        """Preview markup for a single element; ``selected`` marks only the root."""
        plan = self.interpreter.resolve(element)
        node = DomBackend(screen_id).materialize(plan)
        if selected:
            node.classes.append("selected")
        self._record_plans("dom", [plan])
        return node

    def render_screen(self, screen: Screen, is_selected: Optional[SelectionPredicate] = None) -> DomNode:
        """Device screen with a name header and its elements in order."""
        screen_id = screen.id or ""
        backend = DomBackend(screen_id, is_selected)
        plans = self.interpreter.resolve_screen(screen)

        content = DomNode(classes=["wf-screen-content"], children=backend.materialize_all(plans))
        header = DomNode(
            classes=["wf-screen-header"],
            children=[DomNode(tag="span", classes=["wf-screen-name"], text=screen.name or screen_id)],
        )
        self._record_plans("dom", plans)
        return DomNode(
            classes=["wf-screen"],
            attrs={"data-screen-id": screen_id},
            children=[header, content],
        )

    def render_canvas(self, spec: UiSpec, is_selected: Optional[SelectionPredicate] = None) -> str:
        """
        Full preview: every screen at its canvas position plus the flow overlay.

        Args:
            spec: Mockup document; ids and positions are filled in on a copy
            is_selected: Host selection predicate ``(screen_id, element_id) -> bool``

        Returns:
            HTML markup string
        """
        start = time.perf_counter()
        spec = ensure_ids(spec)

        with LogContext(backend="dom", app=spec.app_name):
            self._audit(spec)
            canvas = DomNode(classes=["wf-canvas"])
            for index, screen in enumerate(spec.screens):
                node = self.render_screen(screen, is_selected)
                position = screen.position or grid_position(index)
                node.attrs["style"] = (
                    f"left: {position.x:g}px; top: {position.y:g}px; "
                    f"width: {self.settings.screen_width:g}px; height: {self.settings.screen_height:g}px;"
                )
                canvas.children.append(node)

            paths = self.router.route(spec)
            if paths:
                canvas.raw = render_flow_svg(paths)

            html = canvas.to_html()
            logger.info("canvas_rendered", screens=len(spec.screens), flows=len(paths))

        self._record_render("dom", "success", time.perf_counter() - start)
        return html

    # ------------------------------------------------------------------
    # Native
    # ------------------------------------------------------------------

    async def build_native(
        self, spec: UiSpec, font_provider: Optional[FontProvider] = None
    ) -> NativeDocument:
        """
        Build native device frames for every screen.

        Raises:
            FontLoadError: Fonts could not be acquired; no frames are produced
        """
        start = time.perf_counter()
        backend = NativeBackend(font_provider, self.settings)

        with LogContext(backend="native", app=spec.app_name):
            self._audit(spec)
            try:
                document = await backend.build_document(spec, self.interpreter)
            except FontLoadError as e:
                logger.error("native_render_failed", error=str(e))
                if self.settings.enable_metrics:
                    metrics_collector.record_error("FontLoadError", "native")
                self._record_render("native", "error", time.perf_counter() - start)
                raise

        self._record_render("native", "success", time.perf_counter() - start)
        return document

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    def _audit(self, spec: UiSpec) -> None:
        issues = self.registry.audit(spec)
        if issues:
            logger.debug("spec_audit", issues=len(issues))

    def _record_plans(self, backend: str, plans: Iterable[MaterializationPlan]) -> None:
        if not self.settings.enable_metrics:
            return
        for root in plans:
            for plan in root.walk():
                metrics_collector.record_plan(backend, plan.kind.value)
                if plan.fallback:
                    metrics_collector.record_fallback(plan.element_type)

    def _record_render(self, backend: str, status: str, duration: float) -> None:
        if self.settings.enable_metrics:
            metrics_collector.record_render(backend, status, duration)
