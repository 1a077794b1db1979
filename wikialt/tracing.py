from opentelemetry import trace
from opentelemetry.sdk.resources import SERVICE_NAME, Resource
from opentelemetry.sdk.trace import TracerProvider
from opentelemetry.sdk.trace.export import BatchSpanProcessor
from opentelemetry.exporter.otlp.proto.grpc.trace_exporter import OTLPSpanExporter

def setup_tracing(service_name: str = "wikialt-pipeline"):
    resource = Resource(attributes={
        SERVICE_NAME: service_name
    })

    provider = TracerProvider(resource=resource)

    # Default OTLP exporter points to localhost:4317
    processor = BatchSpanProcessor(OTLPSpanExporter())
    provider.add_span_processor(processor)

    trace.set_tracer_provider(provider)

def instrument_span(span, phase: str = None, **attributes):
    """Adds the pipeline phase and any counters to a span."""
    if phase:
        span.set_attribute("wikialt.phase", phase)
    for key, value in attributes.items():
        span.set_attribute(f"wikialt.{key}", value)

def get_tracer(name: str):
    return trace.get_tracer(name)
