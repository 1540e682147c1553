# =============================================================================
# core/randomizer.py  -  Random Generator
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Produces one random value of a requested type:
#     - number:   uniform integer in [min, max], both inclusive
#     - uuid:     version-4 layout  xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx
#     - password: `length` characters drawn with replacement from ALPHABET
#
# All randomness comes from the RandomSource passed in (core/sources.py).
# =============================================================================

from typing import Any

from core.errors import InvalidRange, UnsupportedType
from core.models import RandomResult
from core.sources import RandomSource

DEFAULT_MIN = 0
DEFAULT_MAX = 100
DEFAULT_PASSWORD_LENGTH = 12

ALPHABET = (
    "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    "abcdefghijklmnopqrstuvwxyz"
    "0123456789"
    "!@#$%^&*()"
)

_UUID_TEMPLATE = "xxxxxxxx-xxxx-4xxx-yxxx-xxxxxxxxxxxx"
_HEX = "0123456789abcdef"


def _whole_number(value: Any, name: str) -> int:
    """Accept ints and integral floats (JSON numbers arrive as either)."""
    if isinstance(value, bool):
        raise InvalidRange(f"{name} must be a whole number, got {value!r}", value=value)
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    raise InvalidRange(f"{name} must be a whole number, got {value!r}", value=value)


def random_number(source: RandomSource, minimum: int = DEFAULT_MIN, maximum: int = DEFAULT_MAX) -> int:
    """Uniform integer in [minimum, maximum]."""
    if minimum > maximum:
        raise InvalidRange(f"min ({minimum}) must not be greater than max ({maximum})", value=minimum)
    return source.randint(minimum, maximum)


def random_uuid(source: RandomSource) -> str:
    """A UUIDv4-shaped string; the variant nibble is always 8, 9, a or b."""
    chars = []
    for c in _UUID_TEMPLATE:
        if c == "x":
            chars.append(_HEX[source.randint(0, 15)])
        elif c == "y":
            chars.append(_HEX[(source.randint(0, 15) & 0x3) | 0x8])
        else:
            chars.append(c)
    return "".join(chars)


def random_password(source: RandomSource, length: int = DEFAULT_PASSWORD_LENGTH) -> str:
    """``length`` characters sampled uniformly, with replacement, from ALPHABET."""
    if length < 0:
        raise InvalidRange(f"Password length must not be negative, got {length}", value=length)
    return "".join(source.choice(ALPHABET) for _ in range(length))


def generate(
    source: RandomSource,
    type: str,
    minimum: Any = DEFAULT_MIN,
    maximum: Any = DEFAULT_MAX,
    length: Any = DEFAULT_PASSWORD_LENGTH,
) -> RandomResult:
    """Generate a random number, UUID or password.

    Args:
        source: Where the randomness comes from.
        type: "number", "uuid" or "password" (case-insensitive).
        minimum: Lower bound for numbers (default 0).
        maximum: Upper bound for numbers (default 100).
        length: Password length (default 12).

    Raises:
        UnsupportedType: ``type`` is not one of the three above.
        InvalidRange: ``minimum > maximum``, a non-integral bound, or a
            negative/non-integral length.
    """
    kind = type.lower()

    if kind == "number":
        low = _whole_number(minimum, "min")
        high = _whole_number(maximum, "max")
        return RandomResult(type="number", value=random_number(source, low, high), range=f"{low}-{high}")

    if kind == "uuid":
        return RandomResult(type="uuid", value=random_uuid(source))

    if kind == "password":
        size = _whole_number(length, "length")
        return RandomResult(type="password", value=random_password(source, size), length=size)

    raise UnsupportedType(
        f"Unsupported type: {type}. Use 'number', 'uuid', or 'password'",
        value=type,
    )
