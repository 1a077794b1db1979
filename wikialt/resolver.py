"""Redirect linkage and anchor-text attribution over a PageRegistry."""
from dataclasses import dataclass
import logging

from .links import extract_links
from .registry import PageRegistry
from .tracing import get_tracer, instrument_span

logger = logging.getLogger(__name__)
tracer = get_tracer(__name__)


@dataclass
class ResolutionStats:
    redirects_resolved: int = 0
    redirects_dangling: int = 0
    links_seen: int = 0
    links_resolved: int = 0


def clear_alternatives(registry: PageRegistry):
    for page in registry:
        page.clear_alternatives()


def resolve(registry: PageRegistry) -> ResolutionStats:
    """Attach alternative titles and anchor texts to the pages they name.

    A redirect page credits its own title to the page it points at and is
    never scanned for links. Only one redirect hop is followed: if A -> B and
    B -> C, A is credited to B, not C. Every other page with text has its
    piped links extracted and each anchor text added to the linked page.

    Previous results are cleared first, so calling this twice gives the same
    result as calling it once.
    """
    stats = ResolutionStats()
    with tracer.start_as_current_span("resolve") as span:
        clear_alternatives(registry)

        for page in registry:
            if page.redirects_to_title is not None:
                target = registry.get(page.redirects_to_title)
                page.redirects_to_page = target
                if target is None:
                    stats.redirects_dangling += 1
                    logger.debug(f"Dangling redirect '{page.title}' -> '{page.redirects_to_title}'")
                else:
                    target.add_alternative_title(page.title)
                    stats.redirects_resolved += 1
                continue

            if page.text is None:
                continue

            for target_title, anchor_text in extract_links(page.text):
                stats.links_seen += 1
                target = registry.get(target_title)
                if target is None:
                    continue
                target.add_anchor_text(anchor_text)
                stats.links_resolved += 1

        instrument_span(
            span, phase="resolve",
            redirects_resolved=stats.redirects_resolved,
            redirects_dangling=stats.redirects_dangling,
            links_seen=stats.links_seen,
            links_resolved=stats.links_resolved,
        )
    logger.info(
        f"Resolved {stats.redirects_resolved} redirects ({stats.redirects_dangling} dangling), "
        f"{stats.links_resolved}/{stats.links_seen} links"
    )
    return stats
