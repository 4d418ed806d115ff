# colholidays/core/errors.py
"""
Error types raised by the holiday core.

Every error derives from HolidayError so callers can catch the whole
family in one place (the HTTP layer maps each subclass to a status code).
"""


class HolidayError(Exception):
    """Base class for all holiday computation errors."""

    pass


class InvalidYear(HolidayError, ValueError):
    """Year outside the supported computation range."""

    def __init__(self, year: int, message: str | None = None):
        self.year = year
        super().__init__(message or f"Year {year} is outside the supported range")


class InvalidDate(HolidayError, ValueError):
    """A calendar date could not be constructed."""

    pass


class ConfigurationError(HolidayError):
    """Holiday configuration is missing, incomplete or not ready."""

    pass


class ResolutionError(HolidayError):
    """
    Failure while resolving a holiday rule.

    The triggering exception is kept on ``cause`` and chained as
    ``__cause__``.
    """

    def __init__(self, message: str, cause: BaseException | None = None):
        self.cause = cause
        super().__init__(message)
