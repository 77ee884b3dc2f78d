"""Tests for how route handlers are registered."""

import inspect

import pytest
from fastapi.routing import APIRoute

from blog_api.main import app

# Handlers that hash passwords or query the database synchronously
BLOCKING_HANDLERS = {
    "signup",
    "login",
    "refresh",
    "list_articles",
    "get_article",
    "create_article",
    "update_article",
    "delete_article",
    "health_check",
}


def routes_by_name() -> dict[str, APIRoute]:
    return {route.name: route for route in app.routes if isinstance(route, APIRoute)}


@pytest.mark.parametrize("name", sorted(BLOCKING_HANDLERS))
def test_blocking_handlers_run_in_threadpool(name):
    """Sync handlers are run by FastAPI in its threadpool, off the event loop."""
    route = routes_by_name()[name]
    assert not inspect.iscoroutinefunction(route.endpoint)


def test_api_routes_are_mounted_under_prefix():
    paths = {route.path for route in routes_by_name().values()}
    assert "/api/auth/signup" in paths
    assert "/api/articles/{article_id}" in paths
    assert "/health" in paths
