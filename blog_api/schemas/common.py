"""Response envelope shared by every endpoint."""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

T = TypeVar("T")


class MessageResponse(BaseModel):
    """Envelope without a payload."""

    success: bool = True
    message: str


class DataResponse(MessageResponse, Generic[T]):
    """Envelope carrying a single payload."""

    data: T


class Pagination(BaseModel):
    """Pagination metadata for list responses."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int


class PageResponse(MessageResponse, Generic[T]):
    """Envelope carrying one page of results."""

    data: list[T]
    pagination: Pagination
