"""Article schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ArticleCreate(BaseModel):
    """Create a new article."""

    title: str = Field(..., min_length=1, max_length=255)
    content: str = Field(..., min_length=1)
    published_at: datetime | None = None


class ArticleUpdate(BaseModel):
    """Update an article; only the fields sent are changed."""

    title: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = Field(None, min_length=1)
    published_at: datetime | None = None  # explicit null un-publishes

    @field_validator("title", "content")
    @classmethod
    def not_null(cls, v: str | None) -> str:
        if v is None:
            raise ValueError("may not be null")
        return v


class AuthorSummary(BaseModel):
    """Author fields embedded in article responses."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str


class ArticleResponse(BaseModel):
    """Article response."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    content: str
    slug: str
    author_id: int
    created_at: datetime
    updated_at: datetime
    published_at: datetime | None
    author: AuthorSummary
