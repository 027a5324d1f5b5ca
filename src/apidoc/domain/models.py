from __future__ import annotations

from typing import Annotated, Any, Literal, Optional, Union

from pydantic import BaseModel, Field, field_validator

HttpMethod = Literal["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS", "HEAD", "TRACE"]


class ResponseShape(BaseModel):
    status_code: int = 200
    is_default: bool = False
    media_types: list[str] = Field(default_factory=list)


class SummaryMetadata(BaseModel):
    kind: Literal["summary"] = "summary"
    summary: str


class DescriptionMetadata(BaseModel):
    kind: Literal["description"] = "description"
    description: str


class TagsMetadata(BaseModel):
    kind: Literal["tags"] = "tags"
    tags: list[str] = Field(default_factory=list)


class ProducesMetadata(BaseModel):
    kind: Literal["produces"] = "produces"
    content_types: list[str] = Field(default_factory=list)


class OtherMetadata(BaseModel):
    # anything assembly does not consume (auth hints, rate limits, ...)
    kind: Literal["other"] = "other"
    name: str = ""
    data: dict[str, Any] = Field(default_factory=dict)


EndpointMetadata = Annotated[
    Union[SummaryMetadata, DescriptionMetadata, TagsMetadata, ProducesMetadata, OtherMetadata],
    Field(discriminator="kind"),
]


class EndpointDescription(BaseModel):
    """
    One reachable operation as reported by endpoint discovery.

    `metadata` is ordered: later items override earlier ones of the same kind.
    """

    relative_path: str
    method: HttpMethod
    resource: Optional[str] = None  # owning controller/router, used as fallback tag
    group_name: Optional[str] = None  # document the endpoint belongs to (None = all)

    metadata: list[EndpointMetadata] = Field(default_factory=list)
    responses: list[ResponseShape] = Field(default_factory=list)

    @field_validator("method", mode="before")
    @classmethod
    def _upper_method(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v
