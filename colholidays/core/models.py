# colholidays/core/models.py
"""
Pydantic models for holiday configuration, catalog entries and results.
"""

import datetime

from pydantic import BaseModel, ConfigDict, field_validator

from colholidays.core.rules import HolidayRule

# Any date with distinct day, month and year digits works for the round trip.
_FORMAT_PROBE_DATE = datetime.date(2000, 12, 31)


class HolidayConfig(BaseModel):
    """Holiday names and output date format, as loaded from a data file."""
    date_format: str | None = None
    holiday_names: list[str] | None = None

    @field_validator("holiday_names", mode="before")
    @classmethod
    def _split_names(cls, value):
        # "Año Nuevo; Navidad" is accepted as well as a JSON list
        if isinstance(value, str):
            value = value.split(";")
        if isinstance(value, list):
            value = [str(name).strip() for name in value if str(name).strip()]
        return value

    @property
    def has_valid_date_format(self) -> bool:
        if not self.date_format or not self.date_format.strip():
            return False
        try:
            text = _FORMAT_PROBE_DATE.strftime(self.date_format)
            parsed = datetime.datetime.strptime(text, self.date_format).date()
        except (TypeError, ValueError):
            return False
        return parsed == _FORMAT_PROBE_DATE

    @property
    def is_ready(self) -> bool:
        """True when the date format round-trips a date and there is at least one name."""
        return self.has_valid_date_format and bool(self.holiday_names)


class CatalogEntry(BaseModel):
    """One holiday rule paired with its display name."""
    model_config = ConfigDict(frozen=True)

    rule: HolidayRule
    name: str


class ResolvedHoliday(BaseModel):
    """A holiday resolved to a concrete date."""
    model_config = ConfigDict(frozen=True)

    date: datetime.date
    name: str


class HolidaysResponse(BaseModel):
    """Holidays for one year, keyed by formatted date in chronological order."""
    year: int
    date_format: str
    holidays: dict[str, str]
    items: list[ResolvedHoliday]
