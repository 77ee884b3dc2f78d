"""Tests for article persistence against the test database."""

from unittest.mock import patch

import pytest

from blog_api.errors import SlugConflict
from blog_api.models import Article, User
from blog_api.repositories.article import ArticleRepository
from blog_api.services.articles import ArticleService


@pytest.fixture
def author(db):
    user = User(email="repo@example.com", password_hash="x", name="Repo Author")
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture
def repository(db):
    return ArticleRepository(db)


def add_article(repository, author, title, slug):
    return repository.create(
        {"title": title, "content": "Body", "slug": slug, "author_id": author.id}
    )


class TestSlugConflict:
    """Unique-slug violations raised by the store surface as SlugConflict."""

    def test_create_with_taken_slug(self, db, repository, author):
        add_article(repository, author, "Alpha", "alpha")

        with pytest.raises(SlugConflict):
            add_article(repository, author, "Alpha again", "alpha")

        # The session was rolled back and is usable again
        assert db.query(Article).count() == 1

    def test_update_to_taken_slug(self, db, repository, author):
        add_article(repository, author, "Alpha", "alpha")
        beta = add_article(repository, author, "Beta", "beta")

        with pytest.raises(SlugConflict):
            repository.update(beta.id, author.id, {"slug": "alpha"})

        assert repository.get_by_id(beta.id).slug == "beta"

    def test_update_collision_returns_409(self, client, auth_headers, create_article):
        create_article("Alpha")
        beta = create_article("Beta")

        # Simulate a concurrent writer taking the slug after it was checked
        with patch.object(ArticleService, "unique_slug", return_value="alpha"):
            response = client.put(
                f"/api/articles/{beta['id']}",
                headers=auth_headers,
                json={"title": "Alpha"},
            )

        assert response.status_code == 409
        body = response.json()
        assert body["success"] is False
        assert body["message"] == SlugConflict.default_message
        assert client.get(f"/api/articles/{beta['id']}").json()["data"]["slug"] == "beta"


class TestUpdate:
    def test_update_by_owner(self, repository, author):
        article = add_article(repository, author, "Alpha", "alpha")

        assert repository.update(article.id, author.id, {"content": "Changed"}) is True
        assert repository.get_by_id(article.id).content == "Changed"

    def test_update_ignores_unknown_fields(self, repository, author):
        article = add_article(repository, author, "Alpha", "alpha")

        assert repository.update(article.id, author.id, {"author_id": 999}) is True
        assert repository.get_by_id(article.id).author_id == author.id

    def test_update_by_other_user_matches_nothing(self, repository, author):
        article = add_article(repository, author, "Alpha", "alpha")

        assert repository.update(article.id, author.id + 1, {"content": "Nope"}) is False
        assert repository.get_by_id(article.id).content == "Body"
