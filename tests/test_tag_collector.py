from apidoc.document.model import Tag
from apidoc.document.tags import TagCollector


def test_same_name_keeps_first_description():
    c = TagCollector()
    c.add(Tag(name="users", description="first"))
    c.add(Tag(name="users", description="second"))

    assert len(c) == 1
    assert c.snapshot() == [Tag(name="users", description="first")]


def test_snapshot_is_first_seen_order_not_alphabetical():
    c = TagCollector()
    c.update([Tag(name="zeta"), Tag(name="alpha"), Tag(name="zeta"), Tag(name="mid")])

    assert [t.name for t in c.snapshot()] == ["zeta", "alpha", "mid"]


def test_contains_by_name_or_tag():
    c = TagCollector()
    c.add(Tag(name="a"))

    assert "a" in c
    assert Tag(name="a", description="other") in c
    assert "b" not in c


def test_snapshot_is_a_copy():
    c = TagCollector()
    c.add(Tag(name="a"))
    snap = c.snapshot()
    snap.append(Tag(name="b"))

    assert len(c) == 1
