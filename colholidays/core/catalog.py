"""The Colombian holiday rules and their pairing with configured names."""

import logging

from pydantic import ValidationError

from colholidays.core.constants import (
    ASCENSION_DAYS,
    CORPUS_CHRISTI_DAYS,
    PALM_SUNDAY_OFFSET,
    SACRED_HEART_DAYS,
)
from colholidays.core.errors import ConfigurationError, ResolutionError
from colholidays.core.models import CatalogEntry, HolidayConfig
from colholidays.core.rules import EasterRelative, Fixed, HolidayRule, NearestWeekday
from colholidays.core.types import Weekday

logger = logging.getLogger(__name__)

HolidayCatalog = tuple[CatalogEntry, ...]

#: Rules in catalog order. Names come from configuration, position by position.
HOLIDAY_RULES: tuple[HolidayRule, ...] = (
    Fixed(month=1, day=1),  # New Year's Day
    NearestWeekday(month=1, day=6, weekday=Weekday.MONDAY),  # Epiphany
    NearestWeekday(month=3, day=19, weekday=Weekday.MONDAY),  # Saint Joseph
    EasterRelative(offset_days=PALM_SUNDAY_OFFSET, weekday=Weekday.SUNDAY),  # Palm Sunday
    EasterRelative(weekday=Weekday.THURSDAY),  # Maundy Thursday
    EasterRelative(weekday=Weekday.FRIDAY),  # Good Friday
    EasterRelative(),  # Easter Sunday
    Fixed(month=5, day=1),  # Labour Day
    EasterRelative(weekday=Weekday.MONDAY, plus_days=ASCENSION_DAYS),  # Ascension Day
    EasterRelative(weekday=Weekday.MONDAY, plus_days=CORPUS_CHRISTI_DAYS),  # Corpus Christi
    EasterRelative(weekday=Weekday.MONDAY, plus_days=SACRED_HEART_DAYS),  # Sacred Heart
    NearestWeekday(month=6, day=29, weekday=Weekday.MONDAY),  # Saint Peter and Saint Paul
    Fixed(month=7, day=20),  # Independence Day
    Fixed(month=8, day=7),  # Battle of Boyacá
    NearestWeekday(month=8, day=15, weekday=Weekday.MONDAY),  # Assumption
    NearestWeekday(month=10, day=12, weekday=Weekday.MONDAY),  # Day of the Races
    NearestWeekday(month=11, day=1, weekday=Weekday.MONDAY),  # All Saints
    NearestWeekday(month=11, day=11, weekday=Weekday.MONDAY),  # Cartagena
    Fixed(month=12, day=8),  # Immaculate Conception
    Fixed(month=12, day=25),  # Christmas Day
)


def build_catalog(
    config: HolidayConfig,
    rules: tuple[HolidayRule, ...] = HOLIDAY_RULES,
) -> HolidayCatalog:
    """
    Pair each rule with the configured name at the same position.

    Raises:
        ConfigurationError: If the config is not ready or the number of
            names does not match the number of rules
        ResolutionError: If a rule is not a valid holiday rule
    """
    if not config.is_ready:
        raise ConfigurationError("Holiday configuration is not ready (date format or names missing)")

    names = config.holiday_names or []
    if len(names) != len(rules):
        logger.error("Holiday configuration has %d names for %d rules", len(names), len(rules))
        raise ConfigurationError(f"Holiday configuration has {len(names)} names, expected {len(rules)}")

    catalog = []
    for position, (rule, name) in enumerate(zip(rules, names), start=1):
        try:
            catalog.append(CatalogEntry(rule=rule, name=name))
        except ValidationError as e:
            logger.error(
                "Malformed holiday rule #%d (%s)",
                position,
                name,
                extra={"extra_fields": {"position": position, "holiday": name}},
            )
            raise ResolutionError(f"Malformed holiday rule #{position} ({name}): {e}", cause=e) from e
    return tuple(catalog)
