"""Article model."""

from sqlalchemy import Column, DateTime, ForeignKey, Index, Integer, String, Text
from sqlalchemy.orm import relationship

from blog_api.database import Base
from blog_api.models.mixins import TimestampMixin


class Article(Base, TimestampMixin):
    """Blog article owned by its author."""

    __tablename__ = "articles"
    __table_args__ = (Index("ix_articles_created_at", "created_at"),)

    id = Column(Integer, primary_key=True, index=True)
    title = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    # Unique constraint is the final arbiter for concurrent slug generation
    slug = Column(String(300), unique=True, nullable=False, index=True)
    author_id = Column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    published_at = Column(DateTime(timezone=True), nullable=True)  # null = draft

    # Relationships
    author = relationship("User", backref="articles")