# File: tests/test_registry.py
from gitbook_crawler.crawler.models import PageEntry
from gitbook_crawler.crawler.registry import PageRegistry


def test_first_registration_wins():
    registry = PageRegistry()
    assert registry.register(PageEntry(title="Guide", link="guide", content="<p>first</p>"))
    assert not registry.register(PageEntry(title="Guide again", link="guide", content="<p>second</p>"))

    assert len(registry) == 1
    entry = registry.get("guide")
    assert entry.title == "Guide"
    assert entry.content == "<p>first</p>"


def test_registration_order_is_preserved():
    registry = PageRegistry()
    for link in ("index", "b", "a", "c/d"):
        registry.register(PageEntry(title=link, link=link))
    registry.register(PageEntry(title="dup", link="b"))

    assert [e.link for e in registry] == ["index", "b", "a", "c/d"]
    assert "c/d" in registry
    assert "missing" not in registry


def test_iteration_yields_live_entries():
    registry = PageRegistry()
    registry.register(PageEntry(title="Guide", link="guide"))
    for entry in registry:
        entry.content = "<p>filled</p>"
    assert registry.get("guide").content == "<p>filled</p>"
    assert registry.entries()[0] is registry.get("guide")


def test_page_entry_round_trips_with_empty_children():
    entry = PageEntry(title="Home", link="index", content="<p>Welcome</p>")
    data = entry.as_dict()
    assert data == {"title": "Home", "link": "index", "content": "<p>Welcome</p>", "children": []}
    assert PageEntry.from_dict(data) == entry
    assert PageEntry.from_dict({"title": "x", "link": "y"}).children == []
