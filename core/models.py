# =============================================================================
# core/models.py  -  Data Models (the shapes every operation returns)
# =============================================================================
#
# These dataclasses define the *shape* of each operation's result.  They carry
# no behavior; the registry turns them into plain dicts for the tool layer.
#
# Field names are snake_case here.  The few wire names that differ (such as
# "from", a Python keyword, or the camelCase text statistics) are mapped in
# core/registry.py.
# =============================================================================

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Mapping, Optional


# -----------------------------------------------------------------------------
# OperationRequest: one invocation as seen by the dispatcher
# -----------------------------------------------------------------------------
@dataclass(frozen=True)
class OperationRequest:
    """An operation name plus its resolved parameter bag.  Created once per call.

    The registry passes a read-only mapping, so handlers cannot alter it.
    """

    name: str                              # "math-calculator", "greeting", ...
    parameters: Mapping[str, Any] = field(default_factory=lambda: MappingProxyType({}))


# -----------------------------------------------------------------------------
# Per-operation results
# -----------------------------------------------------------------------------
@dataclass
class GreetingResult:
    """A rendered greeting and the language it was rendered for."""

    greeting: str                          # "Hello, Ada! How are you?"
    language: str                          # As supplied, or the random pick


@dataclass
class DateResult:
    """Today's date rendered with one of the recognized format tokens."""

    date: str                              # "2026-10-19"
    format: str                            # The token that was requested
    timestamp: float                       # Seconds since epoch (fractional)


@dataclass
class RandomResult:
    """A generated random value.

    Exactly one of ``range`` (number mode) or ``length`` (password mode) is
    set; uuid mode sets neither.
    """

    type: str                              # "number", "uuid" or "password"
    value: Any                             # int for number, str otherwise
    range: Optional[str] = None            # "0-100"
    length: Optional[int] = None           # Password length


@dataclass
class StringResult:
    """A transformed string alongside its input."""

    original: str
    operation: str                         # Echoed as supplied
    result: str


@dataclass
class MathResult:
    """The outcome of one arithmetic operation.

    ``input`` holds ``{"a": ...}`` for unary calls and ``{"a": ..., "b": ...}``
    for binary ones (or whenever ``b`` was non-zero).
    """

    operation: str
    input: dict[str, float]
    result: float


@dataclass
class ConversionResult:
    """A unit conversion, rounded to 2 decimal places."""

    value: float
    from_unit: str                         # Wire name: "from"
    to_unit: str                           # Wire name: "to"
    category: str
    result: float


@dataclass
class WordCount:
    """One entry of the most-common-words list."""

    word: str
    count: int


@dataclass
class TextStatistics:
    """Aggregate statistics for a block of text."""

    characters: int
    characters_no_spaces: int
    words: int
    sentences: int
    paragraphs: int
    average_word_length: float             # Rounded to 2 places
    average_sentence_length: float         # Rounded to 2 places
    most_common_words: list[WordCount] = field(default_factory=list)
    reading_time_minutes: int = 0          # ceil(words / 200)
