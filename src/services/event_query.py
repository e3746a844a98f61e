"""
Sanitizer for the paged event listing.

Turns untrusted ``page``/``size``/``sortBy``/``direction``/``afterDate``
query parameters into a ``QueryDescriptor``. Each parameter is normalized
independently and falls back to its own default; only a malformed
``afterDate`` is reported to the caller.

Example:
    >>> q = sanitize_query(page="-3", size=500, sort_by="title; DROP TABLE", direction="DESC")
    >>> (q.page, q.size, q.sort_by, q.direction.value)
    (0, 10, 'id', 'desc')
"""

import datetime as dt
from typing import Optional, Union

from src.core.exceptions import InvalidFilterDateError
from src.models.domain.query import QueryDescriptor, SortDirection

DEFAULT_PAGE = 0
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
DEFAULT_SORT_FIELD = "id"

# Public sort name -> Event attribute. Nothing outside this mapping reaches ORDER BY.
SORT_FIELDS: dict[str, str] = {
    "id": "id",
    "eventDate": "event_date",
    "title": "title",
    "reminderTime": "reminder_time",
}

RawInt = Union[int, str, None]


def _to_int(value: RawInt) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        return None


def sanitize_page(page: RawInt) -> int:
    value = _to_int(page)
    if value is None or value < 0:
        return DEFAULT_PAGE
    return value


def sanitize_size(size: RawInt) -> int:
    value = _to_int(size)
    if value is None or value < 1 or value > MAX_PAGE_SIZE:
        return DEFAULT_PAGE_SIZE
    return value


def sanitize_sort_by(sort_by: Optional[str]) -> str:
    if sort_by is None or sort_by not in SORT_FIELDS:
        return DEFAULT_SORT_FIELD
    return sort_by


def sanitize_direction(direction: Optional[str]) -> SortDirection:
    if direction is None:
        return SortDirection.ASC
    try:
        return SortDirection(direction.strip().lower())
    except ValueError:
        return SortDirection.ASC


def parse_filter_date(after_date: Union[str, dt.date, None]) -> Optional[dt.date]:
    """
    Parse the optional ``afterDate`` filter.

    Returns:
        None when absent or empty, otherwise the parsed calendar date

    Raises:
        InvalidFilterDateError: If the value is not an ISO 8601 date
    """
    if after_date is None:
        return None
    if isinstance(after_date, dt.datetime):
        return after_date.date()
    if isinstance(after_date, dt.date):
        return after_date
    if after_date.strip() == "":
        return None
    try:
        return dt.date.fromisoformat(after_date.strip())
    except ValueError as e:
        raise InvalidFilterDateError(after_date) from e


def sanitize_query(
    page: RawInt = None,
    size: RawInt = None,
    sort_by: Optional[str] = None,
    direction: Optional[str] = None,
    after_date: Union[str, dt.date, None] = None,
) -> QueryDescriptor:
    """
    Build a safe ``QueryDescriptor`` from raw listing parameters.

    Args:
        page: Zero-based page index; negative or unparseable -> 0
        size: Page size; outside 1..100 or unparseable -> 10
        sort_by: Public sort field; anything outside ``SORT_FIELDS`` -> "id"
        direction: "asc"/"desc" in any case; anything else -> ascending
        after_date: Optional ISO date lower bound on ``eventDate``

    Returns:
        QueryDescriptor ordered by the sort field, then id, in one direction

    Raises:
        InvalidFilterDateError: If ``after_date`` is present but malformed
    """
    sort_field = sanitize_sort_by(sort_by)
    return QueryDescriptor(
        page=sanitize_page(page),
        size=sanitize_size(size),
        sort_by=sort_field,
        sort_attribute=SORT_FIELDS[sort_field],
        direction=sanitize_direction(direction),
        after_date=parse_filter_date(after_date),
    )
