from __future__ import annotations

import re
from typing import Callable, Iterable, Optional

from apidoc.domain.models import EndpointDescription

PathNormalizer = Callable[[str], Optional[str]]

# {id}, {id:int}, {id?}, {id=5}, {*slug}, {**slug}
_PARAM_BRACE = re.compile(r"\{\*{0,2}([A-Za-z_][A-Za-z0-9_]*)[^}/]*\}")
_PARAM_ANGLE = re.compile(r"<(?:[A-Za-z_][A-Za-z0-9_]*:)?([A-Za-z_][A-Za-z0-9_]*)>")
_PARAM_COLON = re.compile(r"(?<=/):([A-Za-z_][A-Za-z0-9_]*)")
_MULTI_SLASH = re.compile(r"/{2,}")


class InvalidPathKeyError(AssertionError):
    """A relative route mapped to no path key. Upstream discovery is broken."""


def normalize_path(path: str) -> str:
    """
    Map a relative route template to an OpenAPI path-item key.

        api/users/{id:int}  -> /api/users/{id}
        /files/<path:name>  -> /files/{name}
        /orgs/:org/repos/   -> /orgs/{org}/repos
    """
    p = (path or "").strip()
    if not p.startswith("/"):
        p = "/" + p

    # normalize common param styles into "{param}"
    p = _PARAM_BRACE.sub(r"{\1}", p)
    p = _PARAM_ANGLE.sub(r"{\1}", p)
    p = _PARAM_COLON.sub(r"{\1}", p)

    # collapse accidental double slashes
    p = _MULTI_SLASH.sub("/", p)

    # keep "/" as-is, otherwise strip trailing slash for stability
    if p != "/" and p.endswith("/"):
        p = p[:-1]
    return p


def group_by_path(
    descriptions: Iterable[EndpointDescription],
    normalize: PathNormalizer = normalize_path,
) -> dict[str, list[EndpointDescription]]:
    """
    Group descriptions by normalized path key.

    Keys appear in first-seen order, members keep source order.
    """
    groups: dict[str, list[EndpointDescription]] = {}

    for d in descriptions:
        key = normalize(d.relative_path)
        if not key:
            raise InvalidPathKeyError(
                f"Relative path {d.relative_path!r} ({d.method}) mapped to an empty path key"
            )
        groups.setdefault(key, []).append(d)

    return groups
