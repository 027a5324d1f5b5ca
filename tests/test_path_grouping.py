import pytest

from apidoc.document.paths import InvalidPathKeyError, group_by_path, normalize_path
from apidoc.domain.models import EndpointDescription


def test_normalize_path_route_template_styles():
    assert normalize_path("users") == "/users"  # missing leading slash on purpose
    assert normalize_path("api/users/{id:int}") == "/api/users/{id}"
    assert normalize_path("/items/{id?}") == "/items/{id}"
    assert normalize_path("/pages/{page=1}") == "/pages/{page}"
    assert normalize_path("/files/{*slug}") == "/files/{slug}"
    assert normalize_path("/files/<path:name>") == "/files/{name}"
    assert normalize_path("/orgs/:org/repos/") == "/orgs/{org}/repos"
    assert normalize_path("//a//b") == "/a/b"


def test_normalize_path_keeps_root_and_non_param_colons():
    assert normalize_path("") == "/"
    assert normalize_path("/") == "/"
    assert normalize_path("/items:batch") == "/items:batch"


def test_group_by_path_preserves_first_seen_and_source_order():
    descriptions = [
        EndpointDescription(relative_path="api/b", method="GET"),
        EndpointDescription(relative_path="api/a/{id:int}", method="GET"),
        EndpointDescription(relative_path="/api/b/", method="POST"),
        EndpointDescription(relative_path="api/a/{id}", method="DELETE"),
    ]
    groups = group_by_path(descriptions)

    assert list(groups) == ["/api/b", "/api/a/{id}"]
    assert [d.method for d in groups["/api/b"]] == ["GET", "POST"]
    assert [d.method for d in groups["/api/a/{id}"]] == ["GET", "DELETE"]


def test_group_by_path_rejects_empty_key():
    descriptions = [
        EndpointDescription(relative_path="ok", method="GET"),
        EndpointDescription(relative_path="broken", method="GET"),
    ]

    def normalize(path):
        return None if path == "broken" else "/" + path

    with pytest.raises(InvalidPathKeyError):
        group_by_path(descriptions, normalize=normalize)

    with pytest.raises(AssertionError):
        group_by_path(descriptions, normalize=lambda p: "")
