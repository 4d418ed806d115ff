import datetime
from functools import lru_cache

from colholidays.core.config import (
    EASTER_CENTURY_CONSTANTS,
    EASTER_DEFAULT_CONSTANTS,
    MIN_SUPPORTED_YEAR,
)
from colholidays.core.constants import DAYS_PER_WEEK
from colholidays.core.errors import InvalidYear
from colholidays.core.types import Weekday
from colholidays.core.validators import make_date, shift_date


def easter_constants(year: int) -> tuple[int, int]:
    """Century constants (m, n) for year; years outside the table get the default."""
    for first, last, m, n in EASTER_CENTURY_CONSTANTS:
        if first <= year <= last:
            return m, n
    return EASTER_DEFAULT_CONSTANTS


@lru_cache(maxsize=None)
def easter_sunday(year: int) -> datetime.date:
    """
    Gauss' Easter algorithm with century constants.

    Raises InvalidYear for years before the Gregorian reform.
    """
    if year < MIN_SUPPORTED_YEAR:
        raise InvalidYear(year, f"Easter is not defined for years before {MIN_SUPPORTED_YEAR}")

    m, n = easter_constants(year)
    a = year % 19
    b = year % 4
    c = year % 7
    d = (19 * a + m) % 30
    e = (2 * b + 4 * c + 6 * d + n) % 7
    day = d + e

    if day < 10:
        return make_date(year, 3, day + 22)

    day -= 9
    if day == 26:
        day = 19
    elif day == 25 and d == 28 and e == 6 and a > 10:
        day = 18
    return make_date(year, 4, day)


def nearest_weekday(anchor: datetime.date, target: Weekday) -> datetime.date:
    """
    Date closest to anchor that falls on target.

    Looks at the occurrence in the anchor's ISO week (t1) and the one a week
    away on the other side of the anchor (t2); ties cannot happen.
    """
    t1 = shift_date(anchor, int(target) - anchor.weekday())
    if t1 < anchor:
        t2 = shift_date(t1, DAYS_PER_WEEK)
    else:
        t2 = shift_date(t1, -DAYS_PER_WEEK)
    return t1 if abs((t1 - anchor).days) < abs((t2 - anchor).days) else t2


def nearest_weekday_of(year: int, month: int, day: int, target: Weekday) -> datetime.date:
    """Same as nearest_weekday, with the anchor given as year/month/day."""
    return nearest_weekday(make_date(year, month, day), target)
