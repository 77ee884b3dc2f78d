"""Article persistence: CRUD, slug lookups and ownership checks."""

import logging
from typing import Any, NoReturn

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from blog_api.errors import SlugConflict
from blog_api.models.article import Article

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = {"title", "content", "slug", "published_at"}


class ArticleRepository:
    """Queries and writes against the articles table.

    Reads always load the author so responses can embed the author summary.
    Update and delete are single conditional statements on (id, author_id),
    so they cannot touch a row the caller does not own even if ownership
    changed between the check and the write.
    """

    def __init__(self, db: Session):
        self.db = db

    def _with_author(self):
        return self.db.query(Article).options(joinedload(Article.author))

    def get_by_id(self, article_id: int) -> Article | None:
        return self._with_author().filter(Article.id == article_id).first()

    def list_page(self, page: int, limit: int, sort: str = "desc") -> tuple[list[Article], int]:
        """Get one page of articles ordered by creation time, plus the total count."""
        total = self.db.query(func.count(Article.id)).scalar() or 0

        if sort == "asc":
            ordering = (Article.created_at.asc(), Article.id.asc())
        else:
            ordering = (Article.created_at.desc(), Article.id.desc())

        articles = (
            self._with_author()
            .order_by(*ordering)
            .offset((page - 1) * limit)
            .limit(limit)
            .all()
        )
        return articles, total

    def slug_exists(self, slug: str, exclude_id: int | None = None) -> bool:
        """Check whether a slug is taken, optionally ignoring one article."""
        query = self.db.query(Article.id).filter(Article.slug == slug)
        if exclude_id is not None:
            query = query.filter(Article.id != exclude_id)
        return query.first() is not None

    def is_author(self, article_id: int, author_id: int) -> bool:
        """Check that the article exists and belongs to author_id."""
        return (
            self.db.query(Article.id)
            .filter(Article.id == article_id, Article.author_id == author_id)
            .first()
            is not None
        )

    def create(self, fields: dict[str, Any]) -> Article:
        article = Article(**fields)
        self.db.add(article)
        self._commit()
        self.db.refresh(article)
        return article

    def update(self, article_id: int, author_id: int, fields: dict[str, Any]) -> bool:
        """Apply fields to the article if author_id owns it.

        Returns False when no row matched (deleted or not owned).
        """
        values = {key: value for key, value in fields.items() if key in UPDATABLE_FIELDS}
        if not values:
            return self.is_author(article_id, author_id)

        # Query.update executes immediately, so a unique violation surfaces here
        # rather than at commit
        try:
            updated = (
                self.db.query(Article)
                .filter(Article.id == article_id, Article.author_id == author_id)
                .update(values, synchronize_session=False)
            )
            self.db.commit()
        except IntegrityError as e:
            self._slug_conflict(e)
        self.db.expire_all()
        return updated > 0

    def delete(self, article_id: int, author_id: int) -> bool:
        deleted = (
            self.db.query(Article)
            .filter(Article.id == article_id, Article.author_id == author_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        return deleted > 0

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError as e:
            self._slug_conflict(e)

    def _slug_conflict(self, error: IntegrityError) -> NoReturn:
        self.db.rollback()
        logger.warning(f"Unique violation writing article: {error.orig}")
        raise SlugConflict() from error
