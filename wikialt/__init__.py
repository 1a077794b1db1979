"""wikialt package: alternative titles and anchor texts from MediaWiki dumps."""
from .config import Config, DEFAULT_CONFIG
from .models import Page, PageRecord, XMLMultiPageDoc
from .registry import PageRegistry
from .links import extract_links, LinkExtractor
from .resolver import resolve, ResolutionStats
from .metrics import compute_metrics, Metrics
from .exporter import build_document, export_json

__all__ = [
    "Config", "DEFAULT_CONFIG",
    "Page", "PageRecord", "XMLMultiPageDoc",
    "PageRegistry",
    "extract_links", "LinkExtractor",
    "resolve", "ResolutionStats",
    "compute_metrics", "Metrics",
    "build_document", "export_json",
]
