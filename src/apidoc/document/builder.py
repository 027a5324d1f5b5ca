from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional

from apidoc.document.model import Document, Info
from apidoc.document.operations import build_operations
from apidoc.document.paths import PathNormalizer, group_by_path, normalize_path
from apidoc.document.responses import ReasonPhraseLookup, reason_phrase
from apidoc.document.tags import TagCollector
from apidoc.domain.models import EndpointDescription

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT_VERSION = "1.0.0"

InclusionPredicate = Callable[[EndpointDescription], bool]
DescriptionProvider = Callable[[], Iterable[EndpointDescription]]


def include_by_group_name(document_name: str) -> InclusionPredicate:
    """Ungrouped endpoints go in every document, grouped ones only in their own."""

    def _include(description: EndpointDescription) -> bool:
        return description.group_name is None or description.group_name == document_name

    return _include


def build_info(application_name: str, document_name: str) -> Info:
    return Info(title=f"{application_name} | {document_name}", version=DEFAULT_DOCUMENT_VERSION)


def build_document(
    descriptions: Iterable[EndpointDescription],
    *,
    application_name: str,
    document_name: str,
    should_include: Optional[InclusionPredicate] = None,
    normalize: PathNormalizer = normalize_path,
    reason_phrase: ReasonPhraseLookup = reason_phrase,
) -> Document:
    """
    Assemble one document from endpoint descriptions.

    Steps:
      - keep descriptions accepted by `should_include`
      - group them by normalized path (first-seen order)
      - one operation per verb per path, sharing a single TagCollector
      - document tags = every tag seen on any operation, first-seen order

    Raises InvalidPathKeyError if a description maps to an empty path key;
    nothing is returned in that case.
    """
    if should_include is None:
        should_include = include_by_group_name(document_name)

    included = [d for d in descriptions if should_include(d)]
    groups = group_by_path(included, normalize=normalize)

    tags = TagCollector()
    paths = {key: build_operations(members, tags, reason_phrase) for key, members in groups.items()}

    logger.debug(
        "Built document %r: %d descriptions included, %d paths, %d tags",
        document_name,
        len(included),
        len(paths),
        len(tags),
    )

    return Document(
        info=build_info(application_name, document_name),
        paths=paths,
        tags=tags.snapshot(),
    )


@dataclass
class DocumentOptions:
    document_name: str
    should_include: Optional[InclusionPredicate] = field(default=None)

    def inclusion_predicate(self) -> InclusionPredicate:
        return self.should_include or include_by_group_name(self.document_name)


class DocumentService:
    """
    Builds the document for one document name.

    The provider is asked for descriptions on every call; nothing is cached,
    so two calls never share mutable state.
    """

    def __init__(
        self,
        options: DocumentOptions,
        provider: DescriptionProvider,
        application_name: str,
    ) -> None:
        self.options = options
        self.provider = provider
        self.application_name = application_name

    @property
    def document_name(self) -> str:
        return self.options.document_name

    def get_info(self) -> Info:
        return build_info(self.application_name, self.document_name)

    def get_document(self) -> Document:
        return build_document(
            self.provider(),
            application_name=self.application_name,
            document_name=self.document_name,
            should_include=self.options.inclusion_predicate(),
        )
