# =============================================================================
# core/dates.py  -  Date Formatter
# =============================================================================
#
# Renders the Clock's current instant with one of three format tokens:
#
#   "%Y-%m-%d"    ->  2026-10-19          (ISO date, the default)
#   "%B %d, %Y"   ->  October 19, 2026    (day is not zero-padded)
#   "%d/%m/%Y"    ->  19/10/2026
#
# Unrecognized tokens fall back to the ISO date but are still echoed back in
# the result's `format` field.  Month names are fixed English names, so the
# output does not depend on the process locale.
# =============================================================================

from datetime import datetime
from typing import Callable, Optional

from core.models import DateResult
from core.sources import Clock

ISO_FORMAT = "%Y-%m-%d"
LONG_FORMAT = "%B %d, %Y"
DAY_FIRST_FORMAT = "%d/%m/%Y"

_MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)


def _iso(moment: datetime) -> str:
    return f"{moment.year:04d}-{moment.month:02d}-{moment.day:02d}"


def _long(moment: datetime) -> str:
    return f"{_MONTH_NAMES[moment.month - 1]} {moment.day}, {moment.year}"


def _day_first(moment: datetime) -> str:
    return f"{moment.day:02d}/{moment.month:02d}/{moment.year:04d}"


_FORMATTERS: dict[str, Callable[[datetime], str]] = {
    ISO_FORMAT: _iso,
    LONG_FORMAT: _long,
    DAY_FIRST_FORMAT: _day_first,
}


def format_today(clock: Clock, format: Optional[str] = None) -> DateResult:
    """Format the current date.

    An absent or empty ``format`` means ISO; any unknown token also renders
    ISO.
    """
    token = format or ISO_FORMAT
    moment = clock.now()
    render = _FORMATTERS.get(token, _iso)
    return DateResult(date=render(moment), format=token, timestamp=moment.timestamp())
