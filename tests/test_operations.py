from apidoc.document.model import Tag
from apidoc.document.operations import build_operation, build_operations
from apidoc.document.tags import TagCollector
from apidoc.domain.models import EndpointDescription


def _desc(method="GET", metadata=None, resource="todos", **kw):
    return EndpointDescription.model_validate(
        {
            "relative_path": kw.pop("relative_path", "/todos"),
            "method": method,
            "resource": resource,
            "metadata": metadata or [],
            **kw,
        }
    )


def test_summary_and_description_last_item_wins_independently():
    d = _desc(
        metadata=[
            {"kind": "summary", "summary": "first"},
            {"kind": "description", "description": "only description"},
            {"kind": "other", "name": "rate-limit", "data": {"rps": 5}},
            {"kind": "summary", "summary": "second"},
        ]
    )
    op = build_operation(d, TagCollector())

    assert op.summary == "second"
    assert op.description == "only description"


def test_missing_summary_and_description_are_none():
    op = build_operation(_desc(), TagCollector())
    assert op.summary is None
    assert op.description is None


def test_last_tags_item_wins_and_all_its_names_are_used():
    collector = TagCollector()
    d = _desc(
        metadata=[
            {"kind": "tags", "tags": ["old"]},
            {"kind": "tags", "tags": ["todos", "admin"]},
        ]
    )
    op = build_operation(d, collector)

    assert [t.name for t in op.tags] == ["todos", "admin"]
    assert [t.name for t in collector.snapshot()] == ["todos", "admin"]
    assert "old" not in collector


def test_fallback_tag_is_resource_name():
    collector = TagCollector()
    op = build_operation(_desc(resource="users"), collector)

    assert op.tags == [Tag(name="users")]
    assert "users" in collector


def test_no_tags_metadata_and_no_resource_gives_empty_tags():
    collector = TagCollector()
    op = build_operation(_desc(resource=None), collector)

    assert op.tags == []
    assert len(collector) == 0


def test_operations_keyed_by_verb_and_repeated_verb_last_wins():
    descriptions = [
        _desc("GET", metadata=[{"kind": "summary", "summary": "list v1"}]),
        _desc("POST", metadata=[{"kind": "summary", "summary": "create"}]),
        _desc("get", metadata=[{"kind": "summary", "summary": "list v2"}]),
    ]
    ops = build_operations(descriptions, TagCollector())

    assert set(ops) == {"get", "post"}
    assert ops["get"].summary == "list v2"
    assert ops["post"].summary == "create"


def test_operation_responses_come_from_response_shapes():
    d = _desc(responses=[{"status_code": 204}, {"status_code": 404}])
    op = build_operation(d, TagCollector())
    assert set(op.responses) == {"204", "404"}


def test_empty_tags_item_wins_over_resource_fallback():
    collector = TagCollector()
    d = _desc(resource="users", metadata=[{"kind": "tags", "tags": []}])
    op = build_operation(d, collector)

    assert op.tags == []
    assert "users" not in collector
