"""Configuration defaults and helpers for wikialt runs."""
from dataclasses import dataclass, field
from typing import FrozenSet
import os


def _parse_namespaces(raw: str) -> FrozenSet[int]:
    return frozenset(int(ns) for ns in raw.split(",") if ns.strip())


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")


@dataclass
class Config:
    dump_path: str = os.getenv("WIKIALT_DUMP_PATH", "enwiki-latest-pages-articles.xml")
    output_path: str = os.getenv("WIKIALT_OUTPUT_PATH", "alternative_titles.json")
    author: str = os.getenv("WIKIALT_AUTHOR", "wikialt")
    # Pages outside these namespaces are kept for lookups but never exported
    content_namespaces: FrozenSet[int] = field(
        default_factory=lambda: _parse_namespaces(os.getenv("WIKIALT_CONTENT_NAMESPACES", "0"))
    )
    js_variable: str = os.getenv("WIKIALT_JS_VARIABLE", "")
    indent: int = int(os.getenv("WIKIALT_INDENT", "2"))
    log_level: str = os.getenv("WIKIALT_LOG_LEVEL", "INFO")
    tracing_enabled: bool = _parse_bool(os.getenv("WIKIALT_TRACING", "false"))
    service_name: str = os.getenv("WIKIALT_SERVICE_NAME", "wikialt-pipeline")


DEFAULT_CONFIG = Config()
