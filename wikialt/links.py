"""Internal wiki link extraction.

Only piped links of the form ``[[Target|anchor text]]`` are extracted. A
target containing ``:`` is treated as namespaced (``Category:``, ``File:``,
interwiki prefixes) and skipped, which also skips the rare article title
that legitimately contains a colon.
"""
from typing import Iterator, Tuple
import re

WIKI_LINK_RE = re.compile(r'\[\[([^\[\]:]+)\|([^\[\]]+)\]\]')


def extract_links(text: str) -> Iterator[Tuple[str, str]]:
    """Yield ``(target_title, anchor_text)`` for each piped internal link."""
    if not text:
        return
    for match in WIKI_LINK_RE.finditer(text):
        yield match.group(1), match.group(2)


class LinkExtractor:
    def __init__(self, text: str):
        self.text = text

    def __iter__(self) -> Iterator[Tuple[str, str]]:
        return extract_links(self.text)
