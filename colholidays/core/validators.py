import datetime

from colholidays.core.config import MAX_SUPPORTED_YEAR, MIN_SUPPORTED_YEAR
from colholidays.core.errors import InvalidDate, InvalidYear


def validate_year(year: int) -> int:
    """
    Ensure year is an integer within MIN_SUPPORTED_YEAR..MAX_SUPPORTED_YEAR.

    Returns the year if valid, otherwise raises InvalidYear.
    """
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidYear(year, f"Year must be an integer, got {year!r}")
    if not MIN_SUPPORTED_YEAR <= year <= MAX_SUPPORTED_YEAR:
        raise InvalidYear(
            year,
            f"Year {year} is outside the supported range {MIN_SUPPORTED_YEAR}-{MAX_SUPPORTED_YEAR}",
        )
    return year


def make_date(year: int, month: int, day: int) -> datetime.date:
    """
    Build a date, raising InvalidDate instead of ValueError.

    - Month must be 1-12 and day must exist in that month (leap years respected).
    """
    try:
        return datetime.date(year, month, day)
    except (TypeError, ValueError) as e:
        raise InvalidDate(f"Invalid date {year}-{month}-{day}: {e}") from e


def shift_date(date_: datetime.date, days: int) -> datetime.date:
    """Add days to a date, raising InvalidDate if the result leaves the datetime range."""
    try:
        return date_ + datetime.timedelta(days=days)
    except OverflowError as e:
        raise InvalidDate(f"{date_.isoformat()} shifted by {days} days is out of range") from e
