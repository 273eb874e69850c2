"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from .config import Settings, get_settings
from ..flows import FlowRouter
from ..interpreter import Interpreter
from ..registry import ComponentRegistry
from ..render import Renderer


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings | None = None) -> None:
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        return self.settings or get_settings()

    @singleton
    @provider
    def provide_registry(self) -> ComponentRegistry:
        """Provide component registry singleton."""
        return ComponentRegistry()

    @singleton
    @provider
    def provide_interpreter(self) -> Interpreter:
        return Interpreter()

    @singleton
    @provider
    def provide_router(self, settings: Settings) -> FlowRouter:
        return FlowRouter(settings)

    @singleton
    @provider
    def provide_renderer(
        self,
        registry: ComponentRegistry,
        settings: Settings,
        interpreter: Interpreter,
        router: FlowRouter,
    ) -> Renderer:
        """Provide renderer with all dependencies."""
        return Renderer(registry=registry, settings=settings, interpreter=interpreter, router=router)


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector."""
    return Injector([CoreModule(settings)])
