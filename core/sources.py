# =============================================================================
# core/sources.py  -  Randomness Source & Clock (injected capabilities)
# =============================================================================
#
# The random generator, the greeting selector and the date formatter never
# touch the `random` module or the system clock directly.  They receive a
# source object instead, so tests can pass a seeded or scripted fake and get
# deterministic results.
#
# Any `random.Random` instance already satisfies RandomSource.
# =============================================================================

import random
from datetime import datetime, timezone
from typing import Protocol, Sequence, TypeVar

T = TypeVar("T")


class RandomSource(Protocol):
    """Supplies uniform random integers and picks."""

    def randint(self, a: int, b: int) -> int:
        """Return a uniform integer N with a <= N <= b."""
        ...

    def choice(self, seq: Sequence[T]) -> T:
        """Return a uniformly chosen element of a non-empty sequence."""
        ...


class Clock(Protocol):
    """Supplies the current instant."""

    def now(self) -> datetime:
        """Return the current time as a timezone-aware datetime."""
        ...


class SystemClock:
    """Reads the real wall clock, in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class FixedClock:
    """Always returns the same instant.  Handy for tests and replays."""

    def __init__(self, instant: datetime) -> None:
        if instant.tzinfo is None:
            instant = instant.replace(tzinfo=timezone.utc)
        self._instant = instant

    def now(self) -> datetime:
        return self._instant


def default_random_source() -> RandomSource:
    """OS-entropy backed source; suitable for passwords and UUIDs."""
    return random.SystemRandom()
