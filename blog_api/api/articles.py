"""Article API endpoints."""

from typing import Annotated, Literal

from fastapi import APIRouter, Depends, Query, status

from blog_api.api.dependencies import get_article_service, get_current_claims
from blog_api.schemas.article import ArticleCreate, ArticleResponse, ArticleUpdate
from blog_api.schemas.common import DataResponse, MessageResponse, PageResponse, Pagination
from blog_api.services.articles import ArticleService
from blog_api.services.tokens import TokenClaims

router = APIRouter(prefix="/articles", tags=["articles"])


@router.get("", response_model=PageResponse[ArticleResponse])
def list_articles(
    article_service: Annotated[ArticleService, Depends(get_article_service)],
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    sort: Literal["asc", "desc"] = Query(default="desc"),
):
    """Get a page of articles ordered by creation time."""
    result = article_service.list_articles(page=page, limit=limit, sort=sort)
    return PageResponse[ArticleResponse](
        message="Articles retrieved successfully",
        data=[ArticleResponse.model_validate(article) for article in result.items],
        pagination=Pagination(
            page=result.page,
            limit=result.limit,
            total=result.total,
            total_pages=result.total_pages,
        ),
    )


@router.get("/{article_id}", response_model=DataResponse[ArticleResponse])
def get_article(
    article_id: int,
    article_service: Annotated[ArticleService, Depends(get_article_service)],
):
    """Get a specific article."""
    article = article_service.get_by_id(article_id)
    return DataResponse[ArticleResponse](
        message="Article retrieved successfully",
        data=ArticleResponse.model_validate(article),
    )


@router.post(
    "",
    response_model=DataResponse[ArticleResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_article(
    article_data: ArticleCreate,
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
    article_service: Annotated[ArticleService, Depends(get_article_service)],
):
    """Create a new article authored by the caller."""
    article = article_service.create(
        author_id=claims.user_id,
        title=article_data.title,
        content=article_data.content,
        published_at=article_data.published_at,
    )
    return DataResponse[ArticleResponse](
        message="Article created successfully",
        data=ArticleResponse.model_validate(article),
    )


@router.put("/{article_id}", response_model=DataResponse[ArticleResponse])
def update_article(
    article_id: int,
    article_data: ArticleUpdate,
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
    article_service: Annotated[ArticleService, Depends(get_article_service)],
):
    """Update an article (author only)."""
    article = article_service.update(
        article_id,
        claims.user_id,
        article_data.model_dump(exclude_unset=True),
    )
    return DataResponse[ArticleResponse](
        message="Article updated successfully",
        data=ArticleResponse.model_validate(article),
    )


@router.delete("/{article_id}", response_model=MessageResponse)
def delete_article(
    article_id: int,
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
    article_service: Annotated[ArticleService, Depends(get_article_service)],
):
    """Delete an article (author only)."""
    article_service.delete(article_id, claims.user_id)
    return MessageResponse(message="Article deleted successfully")
