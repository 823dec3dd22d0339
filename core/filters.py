# =============================================================================
# core/filters.py  -  Ownership and Date-Range Filters
# =============================================================================
#
# The two building blocks every query tool is made of:
#
#   filter_by_owner()       keep records whose owner/professional/user id
#                           equals the loaded user's id (exact match)
#   filter_by_date_range()  keep records whose date falls inside an
#                           inclusive [start, end] window, compared by day
#
# Records without the date field always pass the date filter.
# =============================================================================

import logging
from datetime import date, datetime
from typing import Iterable, Optional, TypeVar

from core.errors import InvalidDateError

logger = logging.getLogger(__name__)

T = TypeVar("T")


def parse_date(value: str) -> date:
    """Parse an ISO-8601 date or timestamp into a calendar date.

    Accepts the forms datetime.fromisoformat takes on Python 3.11+, including
    a "Z" suffix, basic offsets like +0200 and fractions of any length.

    The date is taken as written; a time-of-day or UTC offset does not move
    it to another day.

    Raises:
        ValueError: if ``value`` is not ISO-8601.
    """
    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    return datetime.fromisoformat(text).date()


def parse_bound(argument: str, value: Optional[str]) -> Optional[date]:
    """Parse a startDate/endDate tool argument; empty means no bound."""
    if not value:
        return None
    try:
        return parse_date(str(value))
    except ValueError as e:
        raise InvalidDateError(argument, value) from e


def filter_by_owner(records: Iterable[T], user_id: str, field: str) -> list[T]:
    """Keep the records whose ``field`` user reference has id ``user_id``."""
    return [r for r in records if getattr(r, field).id == user_id]


def filter_by_date_range(
    records: Iterable[T],
    start: Optional[str],
    end: Optional[str],
    field: str,
) -> list[T]:
    """Keep the records whose ``field`` date lies within [start, end].

    Both bounds are inclusive and either may be omitted.  With no bounds at
    all the records are returned unchanged.

    Raises:
        InvalidDateError: if a bound is not an ISO date.
    """
    start_day = parse_bound("startDate", start)
    end_day = parse_bound("endDate", end)
    if start_day is None and end_day is None:
        return list(records)

    kept = []
    for record in records:
        raw = getattr(record, field, None)
        if not raw:
            kept.append(record)
            continue
        try:
            day = parse_date(str(raw))
        except ValueError:
            logger.warning("Record %s has unparseable %s %r; not filtering it out",
                           getattr(record, "id", "?"), field, raw)
            kept.append(record)
            continue
        if start_day is not None and day < start_day:
            continue
        if end_day is not None and day > end_day:
            continue
        kept.append(record)
    return kept
