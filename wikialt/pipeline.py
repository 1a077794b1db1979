from typing import Any, Dict, Iterable, Optional
import logging

from .config import DEFAULT_CONFIG, Config
from .exporter import build_document, export_json
from .metrics import compute_metrics
from .models import PageRecord
from .registry import PageRegistry
from .resolver import resolve
from .tracing import get_tracer, instrument_span

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


def ingest(records: Iterable[PageRecord]) -> PageRegistry:
    registry = PageRegistry()
    with tracer.start_as_current_span("ingest") as span:
        logger.info("Reading pages...")
        count = registry.ingest(records)
        instrument_span(span, phase="ingest", records=count, pages=len(registry))
    logger.info(f"Read {count} records into {len(registry)} pages")
    return registry


def run(records: Iterable[PageRecord], output_path: Optional[str] = None, config: Config = DEFAULT_CONFIG) -> Dict[str, Any]:
    """Ingest, resolve and export. Returns the exported document."""
    registry = ingest(records)
    resolve(registry)

    with tracer.start_as_current_span("export") as span:
        metrics = compute_metrics(registry)
        document = build_document(registry, metrics, author=config.author)
        instrument_span(span, phase="export", **metrics.as_info())
        if output_path:
            export_json(output_path, document, js_variable=config.js_variable or None, indent=config.indent)
    logger.info(f"Metrics: {metrics.as_info()}")
    return document
