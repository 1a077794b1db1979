"""Case-insensitive title index over every ingested page."""
from typing import Dict, Iterable, Iterator, List, Optional
import logging

from .models import Page, PageRecord

logger = logging.getLogger(__name__)


def normalize_title(title: str) -> str:
    return title.lower()


class PageRegistry:
    """Ordered mapping of title -> Page, compared case-insensitively.

    Iteration yields pages sorted by their lower-cased title, which is also
    the order of the exported document.
    """

    def __init__(self):
        self._pages: Dict[str, Page] = {}

    def put(self, page: Page) -> Optional[Page]:
        key = normalize_title(page.title)
        previous = self._pages.get(key)
        if previous is not None:
            logger.debug(f"Page '{page.title}' overwrites '{previous.title}'")
        self._pages[key] = page
        return previous

    def get(self, title: str) -> Optional[Page]:
        return self._pages.get(normalize_title(title))

    def __contains__(self, title) -> bool:
        return normalize_title(title) in self._pages

    def __len__(self) -> int:
        return len(self._pages)

    def __iter__(self) -> Iterator[Page]:
        for key in sorted(self._pages):
            yield self._pages[key]

    def pages(self) -> List[Page]:
        return list(self)

    def ingest(self, records: Iterable[PageRecord]) -> int:
        count = 0
        for record in records:
            self.put(Page.from_record(record))
            count += 1
            if count % 100000 == 0:
                logger.info(f"Ingested {count} pages")
        return count
