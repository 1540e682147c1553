# =============================================================================
# core/units.py  -  Unit Conversion Engine
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Converts a numeric value between units inside one category:
#     - temperature: celsius, fahrenheit, kelvin
#     - distance:    meter, kilometer, mile, foot, inch, yard
#     - weight:      gram, kilogram, pound, ounce, ton
#
# TWO CONVERSION MODELS:
#   Distance and weight are linear, so each unit is stored as a single factor
#   relative to a base unit (meter, gram) and any pair converts through it:
#       result = value * from_factor / to_factor
#
#   Temperature scales have offsets, so there is no shared factor.  It keeps
#   a table of direct formulas keyed by the ordered (from, to) pair, including
#   the identity pairs.
#
# ROUNDING:
#   Every result is rounded to 2 decimal places, halves away from zero.
#   round_2dp() is also used by core/text_analysis.py.
# =============================================================================

import math
from functools import partial
from typing import Callable

from core.errors import MathDomainError, UnsupportedCategory, UnsupportedConversion, UnsupportedUnit
from core.models import ConversionResult


_WHOLE_FLOATS = 2.0 ** 52


def round_2dp(value: float) -> float:
    """Round to 2 decimal places, halves away from zero.

    >>> round_2dp(0.125)
    0.13
    >>> round_2dp(-0.125)
    -0.13
    """
    # Floats this large have no fractional part, and scaling could overflow.
    if abs(value) >= _WHOLE_FLOATS or not math.isfinite(value):
        return value
    scaled = math.floor(abs(value) * 100 + 0.5) / 100
    return math.copysign(scaled, value) if scaled else 0.0


# -----------------------------------------------------------------------------
# Conversion tables
# -----------------------------------------------------------------------------
# Factors express one unit in terms of the category's base unit.
_METERS_PER_UNIT: dict[str, float] = {
    "meter": 1,
    "kilometer": 1000,
    "mile": 1609.34,
    "foot": 0.3048,
    "inch": 0.0254,
    "yard": 0.9144,
}

_GRAMS_PER_UNIT: dict[str, float] = {
    "gram": 1,
    "kilogram": 1000,
    "pound": 453.592,
    "ounce": 28.3495,
    "ton": 1_000_000,
}

_TEMPERATURE_FORMULAS: dict[tuple[str, str], Callable[[float], float]] = {
    ("celsius", "celsius"): lambda v: v,
    ("celsius", "fahrenheit"): lambda v: (v * 9 / 5) + 32,
    ("celsius", "kelvin"): lambda v: v + 273.15,
    ("fahrenheit", "fahrenheit"): lambda v: v,
    ("fahrenheit", "celsius"): lambda v: (v - 32) * 5 / 9,
    ("fahrenheit", "kelvin"): lambda v: ((v - 32) * 5 / 9) + 273.15,
    ("kelvin", "kelvin"): lambda v: v,
    ("kelvin", "celsius"): lambda v: v - 273.15,
    ("kelvin", "fahrenheit"): lambda v: ((v - 273.15) * 9 / 5) + 32,
}

_FACTOR_TABLES: dict[str, dict[str, float]] = {
    "distance": _METERS_PER_UNIT,
    "weight": _GRAMS_PER_UNIT,
}

CATEGORIES = ("temperature", *_FACTOR_TABLES)


def _convert_temperature(value: float, from_unit: str, to_unit: str) -> float:
    formula = _TEMPERATURE_FORMULAS.get((from_unit.lower(), to_unit.lower()))
    if formula is None:
        raise UnsupportedConversion(
            f"Unsupported temperature conversion: {from_unit} to {to_unit}",
            value=(from_unit, to_unit),
        )
    return formula(value)


def _convert_linear(value: float, from_unit: str, to_unit: str, category: str) -> float:
    table = _FACTOR_TABLES[category]
    for unit in (from_unit, to_unit):
        if unit.lower() not in table:
            raise UnsupportedUnit(
                f"Unsupported {category} unit: {unit}. Use one of: {', '.join(table)}",
                value=unit,
            )
    return value * (table[from_unit.lower()] / table[to_unit.lower()])


def convert(value: float, from_unit: str, to_unit: str, category: str) -> ConversionResult:
    """Convert ``value`` from one unit to another within a category.

    Unit and category names are case-insensitive; the result echoes them as
    supplied.

    Args:
        value: The quantity to convert.
        from_unit: Source unit (e.g. "kilometer").
        to_unit: Target unit (e.g. "mile").
        category: "temperature", "distance" or "weight".

    Returns:
        A ConversionResult whose ``result`` is rounded to 2 decimal places.

    Raises:
        UnsupportedCategory: The category is not one of the three above.
        UnsupportedUnit: A distance/weight unit is not in the table.
        UnsupportedConversion: No temperature formula for the pair.
        MathDomainError: The converted value is too large for a float.
    """
    key = category.lower()
    if key == "temperature":
        convert_pair = _convert_temperature
    elif key in _FACTOR_TABLES:
        convert_pair = partial(_convert_linear, category=key)
    else:
        raise UnsupportedCategory(
            f"Unsupported category: {category}. Use one of: {', '.join(CATEGORIES)}",
            value=category,
        )

    try:
        raw = convert_pair(value, from_unit, to_unit)
        if isinstance(raw, float) and not math.isfinite(raw):
            raise OverflowError(raw)
    except OverflowError as exc:
        raise MathDomainError(
            f"Converting {value} {from_unit} to {to_unit} overflows a float",
            value=value,
        ) from exc

    return ConversionResult(
        value=value,
        from_unit=from_unit,
        to_unit=to_unit,
        category=category,
        result=round_2dp(raw),
    )
