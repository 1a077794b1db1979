from dataclasses import dataclass
from typing import Dict

from .registry import PageRegistry


@dataclass(frozen=True)
class Metrics:
    pages_cnt: int = 0
    redir_pages_cnt: int = 0
    excluded_pages_cnt: int = 0
    pages_alt_cnt: int = 0
    pages_anch_cnt: int = 0
    alt_titles_cnt: int = 0
    anch_texts_cnt: int = 0

    def as_info(self) -> Dict[str, int]:
        return {
            "pagesCnt": self.pages_cnt,
            "redirPagesCnt": self.redir_pages_cnt,
            "excludedPagesCnt": self.excluded_pages_cnt,
            "pagesAltCnt": self.pages_alt_cnt,
            "pagesAnchCnt": self.pages_anch_cnt,
            "altTitlesCnt": self.alt_titles_cnt,
            "anchTextsCnt": self.anch_texts_cnt,
        }


def compute_metrics(registry: PageRegistry) -> Metrics:
    """Count pages, redirects, exclusions and attached alternative names.

    Excluded and redirect are independent categories. Redirect pages are not
    counted towards the alternative-title or anchor-text totals.
    """
    redir_pages_cnt = 0
    excluded_pages_cnt = 0
    pages_alt_cnt = 0
    pages_anch_cnt = 0
    alt_titles_cnt = 0
    anch_texts_cnt = 0

    for page in registry:
        if page.is_excluded:
            excluded_pages_cnt += 1

        if page.is_redirect:
            redir_pages_cnt += 1
            continue

        if len(page.alternative_titles) > 0:
            pages_alt_cnt += 1
            alt_titles_cnt += len(page.alternative_titles)

        if len(page.anchor_texts) > 0:
            pages_anch_cnt += 1
            anch_texts_cnt += len(page.anchor_texts)

    return Metrics(
        pages_cnt=len(registry),
        redir_pages_cnt=redir_pages_cnt,
        excluded_pages_cnt=excluded_pages_cnt,
        pages_alt_cnt=pages_alt_cnt,
        pages_anch_cnt=pages_anch_cnt,
        alt_titles_cnt=alt_titles_cnt,
        anch_texts_cnt=anch_texts_cnt,
    )
