# colholidays/core/resolver.py
"""
Resolution of the holiday catalog for a year.

HolidayResolver pairs the rules with configured names, resolves every
rule against the year's Easter Sunday, sorts the result chronologically
and merges holidays that land on the same date.
"""

import datetime
from functools import lru_cache
from itertools import groupby
from operator import attrgetter

from colholidays.core.catalog import HOLIDAY_RULES, build_catalog
from colholidays.core.config import DEFAULT_LANGUAGE, MERGED_NAME_SEPARATOR
from colholidays.core.errors import ResolutionError
from colholidays.core.holidays import easter_sunday
from colholidays.core.logging_config import get_logger
from colholidays.core.models import HolidayConfig, HolidaysResponse, ResolvedHoliday
from colholidays.core.rules import HolidayRule, resolve_rule
from colholidays.core.storage import load_holiday_config
from colholidays.core.types import Weekday
from colholidays.core.validators import shift_date, validate_year

logger = get_logger(__name__)


def merge_same_day(holidays: list[ResolvedHoliday]) -> list[ResolvedHoliday]:
    """
    Merge holidays sharing a date into one entry.

    Input must be sorted by date; names are joined in input order, so a
    stable sort keeps catalog order within a day.
    """
    merged: list[ResolvedHoliday] = []
    for day, group in groupby(holidays, key=attrgetter("date")):
        names = [holiday.name for holiday in group]
        if len(names) > 1:
            logger.debug(
                "Merging %d holidays on %s",
                len(names),
                day.isoformat(),
                extra={"extra_fields": {"date": day.isoformat(), "holiday": names}},
            )
        merged.append(ResolvedHoliday(date=day, name=MERGED_NAME_SEPARATOR.join(names)))
    return merged


class HolidayResolver:
    """
    Resolves holiday rules to dates for a given year.

    Args:
        config: Holiday names and date format
        rules: Rules in catalog order, one per configured name
    """

    def __init__(self, config: HolidayConfig, rules: tuple[HolidayRule, ...] = HOLIDAY_RULES):
        self.config = config
        self.rules = rules

    def resolve(self, year: int) -> list[ResolvedHoliday]:
        """
        Resolve all holidays for year.

        Returns:
            Holidays sorted by date, same-date holidays merged

        Raises:
            InvalidYear: If year is outside the supported range
            ConfigurationError: If the configuration is not ready or incomplete
            ResolutionError: If any rule fails to resolve
        """
        year = validate_year(year)
        catalog = build_catalog(self.config, self.rules)
        easter = easter_sunday(year)

        holidays: list[ResolvedHoliday] = []
        for position, entry in enumerate(catalog, start=1):
            try:
                day = resolve_rule(entry.rule, year, easter)
            except Exception as e:
                logger.error(
                    "Failed to resolve holiday #%d for %d: %s",
                    position,
                    year,
                    e,
                    extra={"extra_fields": {"year": year, "holiday": entry.name, "position": position}},
                )
                raise ResolutionError(
                    f"Could not resolve holiday #{position} ({entry.name}) for {year}: {e}",
                    cause=e,
                ) from e
            holidays.append(ResolvedHoliday(date=day, name=entry.name))

        resolved = merge_same_day(sorted(holidays, key=attrgetter("date")))
        logger.debug("Resolved %d holidays", len(resolved), extra={"extra_fields": {"year": year}})
        return resolved

    def get_holidays(self, year: int) -> HolidaysResponse:
        """Resolve year and key the holidays by date formatted with the configured pattern."""
        items = self.resolve(year)
        date_format = self.config.date_format or ""
        return HolidaysResponse(
            year=year,
            date_format=date_format,
            holidays={holiday.date.strftime(date_format): holiday.name for holiday in items},
            items=items,
        )

    def holiday_name(self, day: datetime.date) -> str | None:
        """Name of the holiday on day, or None if it is not a holiday."""
        for holiday in self.resolve(day.year):
            if holiday.date == day:
                return holiday.name
        return None

    def is_holiday(self, day: datetime.date) -> bool:
        return self.holiday_name(day) is not None

    def next_business_day(self, day: datetime.date) -> datetime.date:
        """
        Return day if it is a business day, otherwise the next one.

        A business day is neither Saturday, Sunday nor a holiday.
        """
        holidays = {holiday.date for holiday in self.resolve(day.year)}
        d = day
        while d.weekday() >= Weekday.SATURDAY or d in holidays:
            d = shift_date(d, 1)
            if d.month == 1 and d.day == 1:
                holidays |= {holiday.date for holiday in self.resolve(d.year)}
        return d


@lru_cache(maxsize=None)
def get_resolver(lang: str = DEFAULT_LANGUAGE) -> HolidayResolver:
    """Process-wide resolver built from the bundled configuration for lang."""
    logger.info("Loading holiday configuration", extra={"extra_fields": {"lang": lang}})
    return HolidayResolver(load_holiday_config(lang))


def clear_resolver_cache() -> None:
    """Forget loaded configurations so the next call reads the data files again."""
    get_resolver.cache_clear()


def resolve_holidays(year: int, lang: str = DEFAULT_LANGUAGE) -> list[ResolvedHoliday]:
    """Resolve year with the bundled configuration."""
    return get_resolver(lang).resolve(year)
