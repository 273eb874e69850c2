"""
Metrics Collection
Prometheus metrics for render passes and flow routing
"""

import time
from typing import Optional

from prometheus_client import REGISTRY, CollectorRegistry, Counter, Gauge, Histogram, generate_latest


class MetricsCollector:
    """
    Collects and exposes Prometheus metrics for the renderer.
    """

    def __init__(self, registry: Optional[CollectorRegistry] = None) -> None:
        self.registry = registry if registry is not None else REGISTRY

        # Render pass metrics
        self.render_passes_total = Counter(
            "mockup_render_passes_total",
            "Total number of render passes",
            ["backend", "status"],
            registry=self.registry,
        )
        self.render_duration = Histogram(
            "mockup_render_duration_seconds",
            "Render pass duration in seconds",
            ["backend"],
            buckets=[0.001, 0.005, 0.01, 0.05, 0.1, 0.5, 1.0],
            registry=self.registry,
        )

        # Interpreter metrics
        self.plans_total = Counter(
            "mockup_plans_materialized_total",
            "Plans materialised by a backend",
            ["backend", "kind"],
            registry=self.registry,
        )
        self.fallback_elements = Counter(
            "mockup_fallback_elements_total",
            "Elements rendered through the unknown-type fallback",
            ["element_type"],
            registry=self.registry,
        )

        # Flow metrics
        self.flow_edges_total = Counter(
            "mockup_flow_edges_total",
            "Flow edges seen by the router",
            ["outcome"],
            registry=self.registry,
        )

        # Error metrics
        self.errors_total = Counter(
            "mockup_errors_total",
            "Total number of errors",
            ["error_type", "component"],
            registry=self.registry,
        )

        self.uptime = Gauge(
            "mockup_uptime_seconds",
            "Process uptime in seconds",
            registry=self.registry,
        )
        self.start_time = time.time()

    def record_render(self, backend: str, status: str, duration: float) -> None:
        """Record a render pass."""
        self.render_passes_total.labels(backend=backend, status=status).inc()
        self.render_duration.labels(backend=backend).observe(duration)

    def record_plan(self, backend: str, kind: str) -> None:
        self.plans_total.labels(backend=backend, kind=kind).inc()

    def record_fallback(self, element_type: str) -> None:
        self.fallback_elements.labels(element_type=element_type or "<none>").inc()

    def record_edges(self, routed: int, dropped: int) -> None:
        """Record the outcome of one routing pass."""
        if routed:
            self.flow_edges_total.labels(outcome="routed").inc(routed)
        if dropped:
            self.flow_edges_total.labels(outcome="dropped").inc(dropped)

    def record_error(self, error_type: str, component: str) -> None:
        """Record an error."""
        self.errors_total.labels(error_type=error_type, component=component).inc()

    def update_uptime(self) -> None:
        self.uptime.set(time.time() - self.start_time)

    def get_metrics(self) -> bytes:
        """Get metrics in Prometheus format."""
        self.update_uptime()
        return generate_latest(self.registry)


# Global metrics collector instance
metrics_collector = MetricsCollector()
