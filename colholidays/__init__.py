"""
colholidays - Colombian public holidays.

Exports the public functions of the holiday core.
"""

__version__ = "0.1.0"

from colholidays.core.errors import (  # noqa: E402
    ConfigurationError,
    HolidayError,
    InvalidDate,
    InvalidYear,
    ResolutionError,
)
from colholidays.core.holidays import easter_sunday, nearest_weekday, nearest_weekday_of  # noqa: E402
from colholidays.core.models import HolidayConfig, HolidaysResponse, ResolvedHoliday  # noqa: E402
from colholidays.core.resolver import (  # noqa: E402
    HolidayResolver,
    clear_resolver_cache,
    get_resolver,
    resolve_holidays,
)
from colholidays.core.types import Weekday  # noqa: E402

__all__ = [
    "ConfigurationError",
    "HolidayConfig",
    "HolidayError",
    "HolidayResolver",
    "HolidaysResponse",
    "InvalidDate",
    "InvalidYear",
    "ResolutionError",
    "ResolvedHoliday",
    "Weekday",
    "clear_resolver_cache",
    "easter_sunday",
    "get_resolver",
    "nearest_weekday",
    "nearest_weekday_of",
    "resolve_holidays",
]
