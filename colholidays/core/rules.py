# colholidays/core/rules.py
"""
Holiday rules.

A rule is one of three variants, told apart by its ``kind`` field:

- Fixed: always on the same month/day.
- NearestWeekday: moved to the nearest given weekday (Ley Emiliani).
- EasterRelative: counted from Easter Sunday, optionally moved to the
  nearest given weekday and then pushed a number of days forward.

resolve_rule() turns a rule into a date for a given year.
"""

import datetime
from typing import Annotated, Literal, Union

from pydantic import BaseModel, ConfigDict, Field

from colholidays.core.holidays import nearest_weekday, nearest_weekday_of
from colholidays.core.types import Weekday
from colholidays.core.validators import make_date, shift_date


class Fixed(BaseModel):
    """Holiday that always falls on month/day."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["fixed"] = "fixed"
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)


class NearestWeekday(BaseModel):
    """Holiday moved from month/day to the nearest occurrence of weekday."""
    model_config = ConfigDict(frozen=True)

    kind: Literal["nearest_weekday"] = "nearest_weekday"
    month: int = Field(ge=1, le=12)
    day: int = Field(ge=1, le=31)
    weekday: Weekday = Weekday.MONDAY


class EasterRelative(BaseModel):
    """
    Holiday counted from Easter Sunday.

    The anchor is Easter + offset_days. If weekday is set the anchor moves
    to the nearest occurrence of it; plus_days is added last.
    """
    model_config = ConfigDict(frozen=True)

    kind: Literal["easter_relative"] = "easter_relative"
    offset_days: int = 0
    weekday: Weekday | None = None
    plus_days: int = 0


HolidayRule = Annotated[Union[Fixed, NearestWeekday, EasterRelative], Field(discriminator="kind")]


def resolve_rule(rule: HolidayRule, year: int, easter: datetime.date) -> datetime.date:
    """
    Resolve a rule to a date in year.

    Args:
        rule: Rule to resolve
        year: Calendar year
        easter: Easter Sunday of that year (computed once by the caller)

    Returns:
        The holiday date

    Raises:
        InvalidDate: If the rule describes a date that does not exist
        TypeError: If rule is not a known variant
    """
    if isinstance(rule, Fixed):
        return make_date(year, rule.month, rule.day)

    if isinstance(rule, NearestWeekday):
        return nearest_weekday_of(year, rule.month, rule.day, rule.weekday)

    if isinstance(rule, EasterRelative):
        anchor = shift_date(easter, rule.offset_days)
        if rule.weekday is not None:
            anchor = nearest_weekday(anchor, rule.weekday)
        return shift_date(anchor, rule.plus_days)

    raise TypeError(f"Unknown holiday rule: {rule!r}")
