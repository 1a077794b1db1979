from dataclasses import dataclass, field
from typing import Dict, Iterable, Iterator, List, Optional, FrozenSet, Set
import bz2
import logging
import weakref

import mwxml

from .config import DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class OrderedStringSet:
    """Insertion-ordered set of strings; repeated adds are ignored."""

    def __init__(self, items: Iterable[str] = ()):
        self._items: List[str] = []
        self._seen: Set[str] = set()
        for item in items:
            self.add(item)

    def add(self, item: str) -> bool:
        if item in self._seen:
            return False
        self._seen.add(item)
        self._items.append(item)
        return True

    def clear(self):
        self._items.clear()
        self._seen.clear()

    def __contains__(self, item) -> bool:
        return item in self._seen

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other) -> bool:
        if isinstance(other, OrderedStringSet):
            return self._items == other._items
        if isinstance(other, list):
            return self._items == other
        return NotImplemented

    def __repr__(self) -> str:
        return f"OrderedStringSet({self._items!r})"

    def to_list(self) -> List[str]:
        return list(self._items)


@dataclass(frozen=True)
class PageRecord:
    title: str
    text: Optional[str] = None
    redirect_target: Optional[str] = None
    is_excluded: bool = False


@dataclass(eq=False)
class Page:
    title: str
    text: Optional[str] = None
    is_excluded: bool = False
    redirects_to_title: Optional[str] = None
    alternative_titles: OrderedStringSet = field(default_factory=OrderedStringSet)
    anchor_texts: OrderedStringSet = field(default_factory=OrderedStringSet)
    _redirect_ref: Optional[weakref.ReferenceType] = field(default=None, repr=False)

    @classmethod
    def from_record(cls, record: PageRecord) -> "Page":
        return cls(
            title=record.title,
            text=record.text,
            is_excluded=record.is_excluded,
            redirects_to_title=record.redirect_target,
        )

    @property
    def is_redirect(self) -> bool:
        return self.redirects_to_title is not None

    @property
    def redirects_to_page(self) -> Optional["Page"]:
        # Weak so that redirect pages never keep their targets alive
        if self._redirect_ref is None:
            return None
        return self._redirect_ref()

    @redirects_to_page.setter
    def redirects_to_page(self, page: Optional["Page"]):
        self._redirect_ref = weakref.ref(page) if page is not None else None

    def add_alternative_title(self, title: str) -> bool:
        return self.alternative_titles.add(title)

    def add_anchor_text(self, text: str) -> bool:
        return self.anchor_texts.add(text)

    def clear_alternatives(self):
        self.alternative_titles.clear()
        self.anchor_texts.clear()
        self.redirects_to_page = None


class XMLMultiPageDoc:
    """Streams a MediaWiki XML export as PageRecords, one page at a time.

    Plain ``.xml`` and ``.xml.bz2`` files are accepted. Pages whose namespace
    is not one of ``content_namespaces`` are flagged as excluded rather than
    dropped so that links and redirects pointing at them still resolve.
    """

    def __init__(self, file_path: str, content_namespaces: FrozenSet[int] = DEFAULT_CONFIG.content_namespaces):
        self.file_path = file_path
        self.content_namespaces = frozenset(content_namespaces)

    def _open(self):
        if self.file_path.endswith(".bz2"):
            return bz2.open(self.file_path, "rb")
        return open(self.file_path, "rb")

    def __iter__(self) -> Iterator[PageRecord]:
        with self._open() as f:
            dump = mwxml.Dump.from_file(f)
            namespace_names = self._namespace_names(dump)

            for page in dump:
                revision = self._latest_revision(page)
                text = revision.text if revision is not None else None
                if text is None:
                    logger.debug(f"Page '{page.title}' has no revision text")

                yield PageRecord(
                    title=self._full_title(page, namespace_names),
                    text=text,
                    redirect_target=page.redirect or None,
                    is_excluded=page.namespace not in self.content_namespaces,
                )

    @staticmethod
    def _namespace_names(dump: mwxml.Dump) -> Dict[int, str]:
        site_info = dump.site_info
        if site_info is None or not site_info.namespaces:
            return {}
        return {ns.id: ns.name for ns in site_info.namespaces if ns.name}

    @staticmethod
    def _full_title(page: mwxml.Page, namespace_names: Dict[int, str]) -> str:
        # mwxml may strip the namespace prefix; put it back so that
        # "Category:Foo" and "Foo" stay distinct
        prefix = namespace_names.get(page.namespace)
        if not prefix or page.title.startswith(f"{prefix}:"):
            return page.title
        return f"{prefix}:{page.title}"

    @staticmethod
    def _latest_revision(page: mwxml.Page) -> Optional[mwxml.Revision]:
        latest = None
        for rev in page:
            if rev.text is None:
                continue
            latest = rev
        return latest
