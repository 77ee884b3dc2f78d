"""Deterministic slug generation from article titles - no database access."""

import re

from slugify import slugify

# Characters dropped outright before transliteration.
REMOVED_CHARS = re.compile(r"[*+~.()'\"!:@]")

# Symbols spelled out as words rather than dropped.
SYMBOL_WORDS = {
    "&": "and",
    "%": "percent",
    "$": "dollar",
    "€": "euro",
    "£": "pound",
    "<": "less",
    ">": "greater",
    "|": "or",
}

# Anything that is not a letter, digit, whitespace or hyphen, in any script.
# Underscores and slashes fall in this set too and are removed, not separated.
STRICT_REMOVED = re.compile(r"[^\w\s-]|_")


def generate_slug(title: str) -> str:
    """Turn a title into a lowercase, hyphen-separated ASCII URL segment.

    Examples:
    - "Hello World" -> "hello-world"
    - "Hello, World!" -> "hello-world"
    - "Crème brûlée & coffee" -> "creme-brulee-and-coffee"
    - "Привет мир" -> "privet-mir"

    Returns an empty string when the title has nothing slug-able in it.
    """
    text = REMOVED_CHARS.sub("", title)
    text = "".join(SYMBOL_WORDS.get(char, char) for char in text)
    text = STRICT_REMOVED.sub("", text)
    # Transliterates non-Latin scripts, lowercases and collapses separators
    return slugify(text)
