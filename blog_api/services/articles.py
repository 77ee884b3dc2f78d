"""Article service: create, read, list, update and delete with author-only mutation."""

import logging
import math
import secrets
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from blog_api.errors import ArticleNotFound, NotAuthor
from blog_api.models.article import Article
from blog_api.repositories.article import ArticleRepository
from blog_api.services.slug import generate_slug

logger = logging.getLogger(__name__)

# Numeric suffixes tried before falling back to a random one
MAX_SLUG_ATTEMPTS = 100
FALLBACK_SLUG = "article"


@dataclass
class Page:
    """One page of a listing with its pagination metadata."""

    items: list[Article]
    page: int
    limit: int
    total: int

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.limit)


class ArticleService:
    """Service for article-related operations."""

    def __init__(self, articles: ArticleRepository):
        self.articles = articles

    def create(
        self,
        author_id: int,
        title: str,
        content: str,
        published_at: datetime | None = None,
    ) -> Article:
        """Create an article owned by author_id with a unique slug."""
        slug = self.unique_slug(title)
        article = self.articles.create(
            {
                "title": title,
                "content": content,
                "slug": slug,
                "author_id": author_id,
                "published_at": published_at,
            }
        )
        logger.info(f"User {author_id} created article {article.id} ({slug})")
        return self.get_by_id(article.id)

    def get_by_id(self, article_id: int) -> Article:
        article = self.articles.get_by_id(article_id)
        if not article:
            raise ArticleNotFound()
        return article

    def list_articles(self, page: int = 1, limit: int = 10, sort: str = "desc") -> Page:
        """Get a page of articles ordered by creation time."""
        items, total = self.articles.list_page(page, limit, sort)
        return Page(items=items, page=page, limit=limit, total=total)

    def update(self, article_id: int, author_id: int, fields: dict[str, Any]) -> Article:
        """Apply the supplied fields to an article owned by author_id.

        The ownership check runs before anything else, so a missing article
        and someone else's article both fail with NotAuthor.
        """
        if not self.articles.is_author(article_id, author_id):
            raise NotAuthor()

        changes = dict(fields)
        if changes.get("title"):
            changes["slug"] = self.unique_slug(changes["title"], exclude_id=article_id)

        if not self.articles.update(article_id, author_id, changes):
            raise ArticleNotFound()

        logger.info(f"User {author_id} updated article {article_id}: {sorted(changes)}")
        return self.get_by_id(article_id)

    def delete(self, article_id: int, author_id: int) -> None:
        if not self.articles.is_author(article_id, author_id):
            raise NotAuthor()

        if not self.articles.delete(article_id, author_id):
            raise ArticleNotFound()

        logger.info(f"User {author_id} deleted article {article_id}")

    def unique_slug(self, title: str, exclude_id: int | None = None) -> str:
        """Derive a slug from title that no other article uses.

        Tries the base slug, then base-1, base-2, ... up to MAX_SLUG_ATTEMPTS,
        then a random suffix. The unique index on the slug column still has the
        final word if a concurrent writer takes the same slug.
        """
        base = generate_slug(title) or FALLBACK_SLUG

        if not self.articles.slug_exists(base, exclude_id):
            return base

        for counter in range(1, MAX_SLUG_ATTEMPTS + 1):
            candidate = f"{base}-{counter}"
            if not self.articles.slug_exists(candidate, exclude_id):
                return candidate

        candidate = f"{base}-{secrets.token_hex(4)}"
        logger.warning(f"Slug '{base}' exhausted numeric suffixes, using {candidate}")
        return candidate
