"""Shared fixtures: deterministic randomness and time for the core engines."""
from __future__ import annotations

import random
from datetime import datetime, timezone
from typing import Any, Sequence

import pytest

from core.sources import FixedClock

FIXED_INSTANT = datetime(2026, 3, 5, 14, 30, 15, tzinfo=timezone.utc)


class ScriptedSource:
    """RandomSource fake: randint returns a fixed value (clamped), choice a fixed index."""

    def __init__(self, value: int = 0, pick: int = 0) -> None:
        self.value = value
        self.pick = pick
        self.randint_calls: list[tuple[int, int]] = []

    def randint(self, a: int, b: int) -> int:
        self.randint_calls.append((a, b))
        return min(max(self.value, a), b)

    def choice(self, seq: Sequence[Any]) -> Any:
        return seq[self.pick % len(seq)]


@pytest.fixture
def seeded_random() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def scripted_source():
    """Factory fixture: scripted_source(value=..., pick=...)."""
    return ScriptedSource


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(FIXED_INSTANT)
