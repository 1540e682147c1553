# =============================================================================
# core/strings.py  -  String Engine
# =============================================================================
#
# Pure text transformations: uppercase, lowercase, reverse, slug, capitalize
# and title.  Each one is a str -> str function registered in _TRANSFORMS.
# =============================================================================

import re
from typing import Callable

from core.errors import UnsupportedOperation
from core.models import StringResult

# Word characters are ASCII letters, digits and underscore; whitespace is any
# Unicode whitespace.
_NON_SLUG_CHARS = re.compile(r"[^A-Za-z0-9_\s-]")
_SEPARATOR_RUNS = re.compile(r"[\s_-]+")


def slugify(text: str) -> str:
    """Turn arbitrary text into a lowercase, hyphen-separated slug.

    >>> slugify("Hello World")
    'hello-world'
    >>> slugify("  Rock & Roll -- 2024!  ")
    'rock-roll-2024'
    """
    slug = _NON_SLUG_CHARS.sub("", text.lower().strip())
    slug = _SEPARATOR_RUNS.sub("-", slug)
    return slug.strip("-")


def capitalize(text: str) -> str:
    """First character uppercased, the rest lowercased."""
    return text[:1].upper() + text[1:].lower()


def title_case(text: str) -> str:
    """Capitalize every space-separated token.

    Splits on single spaces so runs of spaces survive the round trip.
    """
    return " ".join(word[:1].upper() + word[1:] for word in text.lower().split(" "))


_TRANSFORMS: dict[str, Callable[[str], str]] = {
    "uppercase": str.upper,
    "lowercase": str.lower,
    "reverse": lambda text: text[::-1],
    "slug": slugify,
    "capitalize": capitalize,
    "title": title_case,
}


def transform(text: str, operation: str) -> StringResult:
    """Apply a named string transformation.

    Args:
        text: The input text.
        operation: uppercase, lowercase, reverse, slug, capitalize or title
            (case-insensitive).

    Raises:
        UnsupportedOperation: The operation name is not recognized.
    """
    func = _TRANSFORMS.get(operation.lower())
    if func is None:
        raise UnsupportedOperation(
            f"Unsupported operation: {operation}. "
            f"Use 'uppercase', 'lowercase', 'reverse', 'slug', 'capitalize', or 'title'",
            value=operation,
        )
    return StringResult(original=text, operation=operation, result=func(text))
