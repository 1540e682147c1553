"""Unit tests for the random generator, using seeded and scripted sources."""
from __future__ import annotations

import re

import pytest

from core.errors import InvalidRange, UnsupportedType
from core.randomizer import ALPHABET, generate

UUID_V4 = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-4[0-9a-f]{3}-[89ab][0-9a-f]{3}-[0-9a-f]{12}$")


# ── number ──────────────────────────────────────────────────────────────


class TestNumber:
    def test_defaults(self, seeded_random):
        result = generate(seeded_random, "number")
        assert result.type == "number"
        assert 0 <= result.value <= 100
        assert result.range == "0-100"
        assert result.length is None

    def test_degenerate_range(self, seeded_random):
        for _ in range(20):
            assert generate(seeded_random, "number", 5, 5).value == 5

    def test_stays_in_range(self, seeded_random):
        values = {generate(seeded_random, "number", -3, 3).value for _ in range(500)}
        assert values == {-3, -2, -1, 0, 1, 2, 3}

    def test_passes_bounds_to_source(self, scripted_source):
        source = scripted_source(value=7)
        assert generate(source, "number", 1, 10).value == 7
        assert source.randint_calls == [(1, 10)]

    def test_min_greater_than_max(self, seeded_random):
        with pytest.raises(InvalidRange):
            generate(seeded_random, "number", 10, 1)

    def test_integral_floats_accepted(self, seeded_random):
        result = generate(seeded_random, "number", 2.0, 2.0)
        assert result.value == 2
        assert result.range == "2-2"

    def test_fractional_bound_rejected(self, seeded_random):
        with pytest.raises(InvalidRange):
            generate(seeded_random, "number", 1.5, 3)


# ── uuid ────────────────────────────────────────────────────────────────


class TestUuid:
    def test_matches_v4_layout(self, seeded_random):
        for _ in range(200):
            result = generate(seeded_random, "uuid")
            assert UUID_V4.match(result.value), result.value
            assert result.range is None and result.length is None

    @pytest.mark.parametrize("nibble, variant", [(0, "8"), (3, "b"), (12, "8"), (15, "b")])
    def test_variant_nibble(self, scripted_source, nibble, variant):
        value = generate(scripted_source(value=nibble), "uuid").value
        assert value[19] == variant
        assert value[14] == "4"

    def test_type_is_case_insensitive(self, seeded_random):
        assert generate(seeded_random, "UUID").type == "uuid"


# ── password ────────────────────────────────────────────────────────────


class TestPassword:
    def test_alphabet(self):
        assert len(ALPHABET) == 72
        assert len(set(ALPHABET)) == 72

    def test_default_length(self, seeded_random):
        result = generate(seeded_random, "password")
        assert result.length == 12
        assert len(result.value) == 12
        assert set(result.value) <= set(ALPHABET)

    def test_custom_length(self, seeded_random):
        assert len(generate(seeded_random, "password", length=40).value) == 40

    def test_zero_length(self, seeded_random):
        assert generate(seeded_random, "password", length=0).value == ""

    def test_negative_length(self, seeded_random):
        with pytest.raises(InvalidRange):
            generate(seeded_random, "password", length=-1)

    def test_scripted_pick(self, scripted_source):
        assert generate(scripted_source(pick=26), "password", length=3).value == "aaa"


def test_unknown_type(seeded_random):
    with pytest.raises(UnsupportedType) as exc_info:
        generate(seeded_random, "color")
    assert "color" in str(exc_info.value)
