from __future__ import annotations

from typing import Iterable, Optional

from apidoc.document.model import Operation, Tag
from apidoc.document.responses import ReasonPhraseLookup, build_responses, reason_phrase
from apidoc.document.tags import TagCollector
from apidoc.domain.models import (
    DescriptionMetadata,
    EndpointDescription,
    SummaryMetadata,
    TagsMetadata,
)


def _summary(description: EndpointDescription) -> Optional[str]:
    found: Optional[str] = None
    for m in description.metadata:
        if isinstance(m, SummaryMetadata):
            found = m.summary
    return found


def _description(description: EndpointDescription) -> Optional[str]:
    found: Optional[str] = None
    for m in description.metadata:
        if isinstance(m, DescriptionMetadata):
            found = m.description
    return found


def _tags(description: EndpointDescription) -> list[Tag]:
    chosen: Optional[TagsMetadata] = None
    for m in description.metadata:
        if isinstance(m, TagsMetadata):
            chosen = m

    if chosen is not None:
        return [Tag(name=name) for name in chosen.tags]

    # no explicit tags: group by the owning resource (users, todos, ...)
    if description.resource:
        return [Tag(name=description.resource)]
    return []


def build_operation(
    description: EndpointDescription,
    tags: TagCollector,
    reason_phrase: ReasonPhraseLookup = reason_phrase,
) -> Operation:
    op_tags = _tags(description)
    tags.update(op_tags)

    return Operation(
        summary=_summary(description),
        description=_description(description),
        tags=op_tags,
        responses=build_responses(description, reason_phrase),
    )


def build_operations(
    descriptions: Iterable[EndpointDescription],
    tags: TagCollector,
    reason_phrase: ReasonPhraseLookup = reason_phrase,
) -> dict[str, Operation]:
    """
    Operations for one path, keyed by lower-case verb.

    A verb seen twice keeps the later description's operation. Tags of the
    replaced operation stay in the collector.
    """
    operations: dict[str, Operation] = {}
    for d in descriptions:
        operations[d.method.lower()] = build_operation(d, tags, reason_phrase)
    return operations
