"""Prometheus metrics for quote lookups."""

from prometheus_client import Counter, Histogram

lookup_latency_ms = Histogram(
    "lookup_latency_ms",
    "Quote lookup latency in milliseconds",
    ["operation", "outcome"],
    buckets=[10, 50, 100, 200, 400, 600, 800, 1000, 2000],
)

lookup_errors_total = Counter(
    "lookup_errors_total",
    "Total quote lookup errors",
    ["operation", "reason"],
)

fx_fallbacks_total = Counter(
    "fx_fallbacks_total",
    "Exchange rate lookups answered with the identity fallback table",
)


class LookupMetrics:
    """Interface for lookup metrics (no-op)."""

    def record_latency(self, operation: str, outcome: str, latency_ms: float) -> None:
        """Record lookup latency."""
        pass

    def inc_error(self, operation: str, reason: str) -> None:
        """Increment error counter."""
        pass

    def inc_fx_fallback(self) -> None:
        """Increment exchange rate fallback counter."""
        pass


class PrometheusLookupMetrics(LookupMetrics):
    """Prometheus-based lookup metrics implementation."""

    def record_latency(self, operation: str, outcome: str, latency_ms: float) -> None:
        """Record lookup latency."""
        lookup_latency_ms.labels(operation=operation, outcome=outcome).observe(latency_ms)

    def inc_error(self, operation: str, reason: str) -> None:
        """Increment error counter."""
        lookup_errors_total.labels(operation=operation, reason=reason).inc()

    def inc_fx_fallback(self) -> None:
        """Increment exchange rate fallback counter."""
        fx_fallbacks_total.inc()
