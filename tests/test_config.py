"""Tests for application settings."""

import pytest
from pydantic import ValidationError
from sqlalchemy.engine import make_url

from blog_api.config import DEVELOPMENT_CORS_ORIGINS, Settings


def test_default_database_url_pins_psycopg2():
    """The default URL names the installed driver explicitly."""
    url = make_url(Settings.model_fields["database_url"].default)
    assert url.drivername == "postgresql+psycopg2"


def test_production_rejects_default_secret():
    with pytest.raises(ValidationError):
        Settings(environment="production", database_url="postgresql+psycopg2://db.internal/blog")


def test_cors_origins():
    assert Settings(cors_origin="https://a.example, https://b.example").cors_origins == [
        "https://a.example",
        "https://b.example",
    ]
    assert Settings(cors_origin=None, environment="development").cors_origins == (
        DEVELOPMENT_CORS_ORIGINS
    )
