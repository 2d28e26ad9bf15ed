"""
OTLP/HTTP export to LangSmith.

Spans are batched by the SDK's BatchSpanProcessor and posted to
``<endpoint>/otel/v1/traces``. The API key and the project name travel as
headers; LangSmith routes on ``Langsmith-Project``.
"""
import logging

from opentelemetry.exporter.otlp.proto.http.trace_exporter import OTLPSpanExporter
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor

from core.config import Settings

logger = logging.getLogger(__name__)

BATCH_DELAY_MILLIS = 1000


def langsmith_headers(settings: Settings) -> dict[str, str]:
    return {
        "x-api-key": settings.langsmith_api_key,
        "Langsmith-Project": settings.project_name,
    }


def build_tracer_provider(settings: Settings, service_name: str) -> TracerProvider:
    """Create a provider exporting to LangSmith. The caller owns its lifetime."""
    provider = TracerProvider(resource=Resource.create({SERVICE_NAME: service_name}))
    exporter = OTLPSpanExporter(
        endpoint=settings.otlp_traces_endpoint,
        headers=langsmith_headers(settings),
    )
    provider.add_span_processor(
        BatchSpanProcessor(exporter, schedule_delay_millis=BATCH_DELAY_MILLIS)
    )
    logger.debug(
        "Exporting traces to %s (project %s)",
        settings.otlp_traces_endpoint, settings.project_name,
    )
    return provider
