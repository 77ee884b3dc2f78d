"""Tests for slug generation."""

import re

import pytest

from blog_api.services.slug import generate_slug


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("Hello World", "hello-world"),
        ("Hello, World!", "hello-world"),
        ("  Leading and trailing  ", "leading-and-trailing"),
        ("Multiple   spaces\tand\nlines", "multiple-spaces-and-lines"),
        ("already-slugged-title", "already-slugged-title"),
        ("Dots.and(parens)", "dotsandparens"),
        ("Quotes 'single' \"double\"", "quotes-single-double"),
        ("me@example: *stars* +plus ~tilde", "meexample-stars-plus-tilde"),
        ("Crème Brûlée", "creme-brulee"),
        ("Straße in København", "strasse-in-kobenhavn"),
        ("Salt & Pepper", "salt-and-pepper"),
        ("100% Python", "100percent-python"),
        ("C# vs. F#", "c-vs-f"),
    ],
)
def test_generate_slug(title, expected):
    assert generate_slug(title) == expected


@pytest.mark.parametrize(
    ("title", "expected"),
    [
        ("snake_case_title", "snakecasetitle"),
        ("either/or", "eitheror"),
        ("a, b; c?", "a-b-c"),
    ],
)
def test_strict_mode_removes_punctuation_without_separating(title, expected):
    """Underscores, slashes and other punctuation are deleted, only whitespace and hyphens separate."""
    assert generate_slug(title) == expected


def test_cyrillic_is_transliterated():
    assert generate_slug("Привет мир") == "privet-mir"


def test_cjk_is_transliterated():
    slug = generate_slug("日本語")
    assert slug
    assert re.fullmatch(r"[a-z0-9]+(-[a-z0-9]+)*", slug)


def test_generate_slug_nothing_usable():
    """Titles without slug-able characters produce an empty slug."""
    assert generate_slug("!!! ???") == ""
