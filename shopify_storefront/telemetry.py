"""OpenTelemetry helpers for metrics instrumentation."""

from opentelemetry import metrics
from opentelemetry.metrics import Histogram
from opentelemetry.sdk.metrics import MeterProvider
from opentelemetry.sdk.metrics.export import ConsoleMetricExporter, PeriodicExportingMetricReader


_meter_provider_initialized = False


def init_metrics() -> None:
    """Initialize OpenTelemetry metrics with a console exporter."""
    global _meter_provider_initialized
    if _meter_provider_initialized:
        return
    reader = PeriodicExportingMetricReader(ConsoleMetricExporter())
    provider = MeterProvider(metric_readers=[reader])
    metrics.set_meter_provider(provider)
    _meter_provider_initialized = True


def get_fetch_duration_histogram(console_export: bool = False) -> Histogram:
    """Return a histogram for Storefront API call durations."""
    if console_export:
        init_metrics()
    meter = metrics.get_meter("shopify_storefront")
    return meter.create_histogram(
        name="storefront.shopify.fetch.duration",
        unit="ms",
        description="Duration of Shopify Storefront API calls",
    )
