from __future__ import annotations

from http import HTTPStatus
from typing import Callable

from apidoc.document.model import MediaType, Response
from apidoc.domain.models import EndpointDescription, ProducesMetadata, ResponseShape

ReasonPhraseLookup = Callable[[int], str]

DEFAULT_STATUS_CODE = 200


def reason_phrase(status_code: int) -> str:
    """Standard reason phrase for a status code, "" when the code is unknown."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return ""


def _explicit_content_types(description: EndpointDescription) -> list[str]:
    # produces metadata applies to every response of the endpoint
    out: list[str] = []
    for m in description.metadata:
        if isinstance(m, ProducesMetadata):
            out.extend(m.content_types)
    return out


def build_response(
    description: EndpointDescription,
    status_code: int,
    shape: ResponseShape,
    reason_phrase: ReasonPhraseLookup = reason_phrase,
) -> Response:
    # dict keys double as an ordered set: exact-string dedup, first-seen order
    content: dict[str, MediaType] = {}
    for ct in _explicit_content_types(description):
        content.setdefault(ct, MediaType())
    for ct in shape.media_types:
        content.setdefault(ct, MediaType())

    return Response(description=reason_phrase(status_code), content=content)


def build_responses(
    description: EndpointDescription,
    reason_phrase: ReasonPhraseLookup = reason_phrase,
) -> dict[str, Response]:
    """
    One Response per effective status code.

    - no declared shapes -> a single plain 200
    - a shape flagged default counts as 200
    - two shapes landing on the same status: the later one replaces the earlier
    """
    shapes = description.responses or [ResponseShape(status_code=DEFAULT_STATUS_CODE)]

    responses: dict[str, Response] = {}
    for shape in shapes:
        status_code = DEFAULT_STATUS_CODE if shape.is_default else shape.status_code
        responses[str(status_code)] = build_response(description, status_code, shape, reason_phrase)
    return responses
