from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any, Optional

OPENAPI_VERSION = "3.0.1"


@dataclass(frozen=True)
class Info:
    title: str
    version: str


@dataclass(frozen=True)
class Tag:
    name: str
    description: Optional[str] = None


@dataclass(frozen=True)
class MediaType:
    # schema generation is not done here; the body stays empty
    pass


@dataclass
class Response:
    description: str
    content: dict[str, MediaType] = field(default_factory=dict)


@dataclass
class Operation:
    summary: Optional[str] = None
    description: Optional[str] = None
    tags: list[Tag] = field(default_factory=list)
    responses: dict[str, Response] = field(default_factory=dict)


@dataclass
class Document:
    info: Info
    paths: dict[str, dict[str, Operation]] = field(default_factory=dict)
    tags: list[Tag] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Render the OpenAPI wire shape; absent optional fields are omitted."""
        return {
            "openapi": OPENAPI_VERSION,
            "info": {"title": self.info.title, "version": self.info.version},
            "paths": {
                path: {verb: _operation_to_dict(op) for verb, op in operations.items()}
                for path, operations in self.paths.items()
            },
            "tags": [_tag_to_dict(t) for t in self.tags],
        }

    def to_json(self, indent: int = 2) -> str:
        return json.dumps(self.to_dict(), indent=indent)


def _tag_to_dict(tag: Tag) -> dict[str, Any]:
    out: dict[str, Any] = {"name": tag.name}
    if tag.description is not None:
        out["description"] = tag.description
    return out


def _operation_to_dict(op: Operation) -> dict[str, Any]:
    out: dict[str, Any] = {}
    if op.tags:
        out["tags"] = [t.name for t in op.tags]
    if op.summary is not None:
        out["summary"] = op.summary
    if op.description is not None:
        out["description"] = op.description
    out["responses"] = {
        status: {
            "description": r.description,
            **({"content": {ct: {} for ct in r.content}} if r.content else {}),
        }
        for status, r in op.responses.items()
    }
    return out
