import gc

from wikialt.models import Page, PageRecord
from wikialt.registry import PageRegistry
from wikialt.resolver import resolve


def build_registry(*records):
    registry = PageRegistry()
    registry.ingest(records)
    return registry


def snapshot(registry):
    return {p.title: (p.alternative_titles.to_list(), p.anchor_texts.to_list()) for p in registry}


def test_redirect_and_anchor_scenario():
    registry = build_registry(
        PageRecord(title="A", text="see [[B|Bee]]"),
        PageRecord(title="B", text="hello"),
        PageRecord(title="C", text="#REDIRECT [[B]]", redirect_target="B"),
    )
    resolve(registry)

    b = registry.get("B")
    a = registry.get("A")
    assert b.alternative_titles == ["C"]
    assert b.anchor_texts == ["Bee"]
    assert a.alternative_titles == []
    assert a.anchor_texts == []
    assert registry.get("C").redirects_to_page is b


def test_single_hop_redirect_chain():
    registry = build_registry(
        PageRecord(title="A", redirect_target="B"),
        PageRecord(title="B", redirect_target="C"),
        PageRecord(title="C", text="content"),
    )
    resolve(registry)

    a, b, c = registry.get("A"), registry.get("B"), registry.get("C")
    assert c.alternative_titles == ["B"]
    assert "A" not in c.alternative_titles
    assert b.alternative_titles == ["A"]
    assert a.redirects_to_page is b
    assert b.redirects_to_page is c


def test_dangling_redirect():
    registry = build_registry(
        PageRecord(title="Old Name", redirect_target="Nowhere"),
        PageRecord(title="B", text="hello"),
    )
    stats = resolve(registry)

    assert registry.get("Old Name").redirects_to_page is None
    assert stats.redirects_dangling == 1
    assert stats.redirects_resolved == 0
    assert all(len(p.alternative_titles) == 0 for p in registry)


def test_redirect_target_lookup_is_case_insensitive():
    registry = build_registry(
        PageRecord(title="Target Page", text=""),
        PageRecord(title="Alias", redirect_target="target page"),
    )
    resolve(registry)
    assert registry.get("Target Page").alternative_titles == ["Alias"]


def test_duplicate_anchor_text_added_once():
    registry = build_registry(
        PageRecord(title="A", text="[[Target|Anchor Text]] and again [[Target|Anchor Text]]"),
        PageRecord(title="D", text="[[target|Anchor Text]] [[Target|Other]]"),
        PageRecord(title="Target", text="body"),
    )
    resolve(registry)
    assert registry.get("Target").anchor_texts == ["Anchor Text", "Other"]


def test_redirect_pages_are_not_scanned():
    registry = build_registry(
        PageRecord(title="R", text="#REDIRECT [[T]] [[T|should not count]]", redirect_target="T"),
        PageRecord(title="T", text="body"),
    )
    resolve(registry)
    assert registry.get("T").anchor_texts == []
    assert registry.get("T").alternative_titles == ["R"]


def test_dangling_redirect_is_not_scanned_either():
    registry = build_registry(
        PageRecord(title="R", text="#REDIRECT [[Gone]] [[T|anchor]]", redirect_target="Gone"),
        PageRecord(title="T", text="body"),
    )
    resolve(registry)
    assert registry.get("T").anchor_texts == []


def test_unresolvable_links_are_dropped():
    registry = build_registry(
        PageRecord(title="A", text="[[Elsewhere|somewhere]] [[B|bee]]"),
        PageRecord(title="B", text=None),
    )
    stats = resolve(registry)
    assert registry.get("B").anchor_texts == ["bee"]
    assert stats.links_seen == 2
    assert stats.links_resolved == 1


def test_links_into_excluded_pages_still_resolve():
    registry = build_registry(
        PageRecord(title="A", text="[[Help|the help page]]"),
        PageRecord(title="Help", text="", is_excluded=True),
    )
    resolve(registry)
    assert registry.get("Help").anchor_texts == ["the help page"]


def test_resolve_is_idempotent():
    registry = build_registry(
        PageRecord(title="A", text="see [[B|Bee]] and [[C|Sea]]"),
        PageRecord(title="B", text="[[A|Ay]]"),
        PageRecord(title="C", redirect_target="B"),
        PageRecord(title="D", redirect_target="B"),
    )
    resolve(registry)
    first = snapshot(registry)
    resolve(registry)
    assert snapshot(registry) == first
    assert registry.get("B").alternative_titles == ["C", "D"]


def test_redirect_reference_is_weak():
    source = Page(title="Alias", redirects_to_title="Gone")
    target = Page(title="Gone")
    source.redirects_to_page = target
    assert source.redirects_to_page is target
    del target
    gc.collect()
    assert source.redirects_to_page is None
