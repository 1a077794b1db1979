"""Serializes a resolved PageRegistry and its metrics to JSON."""
from typing import Any, Dict, List, Optional
import json
import logging
import os

from .metrics import Metrics
from .registry import PageRegistry

logger = logging.getLogger(__name__)


def build_document(registry: PageRegistry, metrics: Metrics, author: str) -> Dict[str, Any]:
    info: Dict[str, Any] = {"author": author}
    info.update(metrics.as_info())

    pages: List[Dict[str, Any]] = []
    for page in registry:
        if page.is_excluded:
            continue
        pages.append({
            "title": page.title,
            "alternative": page.alternative_titles.to_list(),
            "anchor": page.anchor_texts.to_list(),
        })

    return {"info": info, "pages": pages}


def export_json(path: str, document: Dict[str, Any], js_variable: Optional[str] = None, indent: int = 2):
    """Write `document` to `path` as UTF-8 JSON.

    With `js_variable` set the output is wrapped as ``var <name> = ...;`` so
    a browser page can load it with a plain script tag.
    """
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)

    payload = json.dumps(document, ensure_ascii=False, indent=indent)
    with open(path, 'w', encoding='utf-8') as fh:
        if js_variable:
            fh.write(f"var {js_variable} = {payload};")
        else:
            fh.write(payload)
    logger.info(f"Saved {len(document['pages'])} pages to {path}")
