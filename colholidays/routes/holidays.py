# colholidays/routes/holidays.py
"""
API endpoints for Colombian holidays.
"""

import datetime

from fastapi import APIRouter, HTTPException, Query, status
from fastapi.responses import Response

from colholidays.core.calendar_export import generate_ical
from colholidays.core.config import DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from colholidays.core.constants import WEEKDAY_NAMES
from colholidays.core.errors import ConfigurationError, HolidayError, InvalidDate, InvalidYear
from colholidays.core.logging_config import get_logger
from colholidays.core.models import HolidaysResponse
from colholidays.core.resolver import HolidayResolver, get_resolver
from colholidays.core.sentry_config import capture_exception

logger = get_logger(__name__)

router = APIRouter(prefix="/api/holidays", tags=["holidays"])


def _resolver_for(lang: str) -> HolidayResolver:
    if lang not in SUPPORTED_LANGUAGES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"Unsupported language, expected one of {', '.join(SUPPORTED_LANGUAGES)}",
        )
    try:
        return get_resolver(lang)
    except HolidayError as e:
        raise _to_http_error(e, lang=lang) from e


def _to_http_error(error: HolidayError, **context) -> HTTPException:
    """
    Map a holiday error to an HTTP error response.

    context (lang, year or date) goes to the log record and to Sentry.
    """
    extra = {"extra_fields": context}
    if isinstance(error, (InvalidYear, InvalidDate)):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))

    if isinstance(error, ConfigurationError):
        logger.error("Holiday configuration unavailable: %s", error, extra=extra)
        return HTTPException(status_code=status.HTTP_503_SERVICE_UNAVAILABLE, detail="Holiday configuration not ready")

    logger.error("Holiday resolution failed: %s", error, exc_info=error, extra=extra)
    capture_exception(error, **context)
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail="Holiday resolution failed")


@router.get("/check/{day}", name="check_holiday")
async def check_holiday(day: datetime.date, lang: str = Query(DEFAULT_LANGUAGE)):
    """Tell whether day is a holiday, and the next business day from it."""
    resolver = _resolver_for(lang)
    try:
        name = resolver.holiday_name(day)
        next_business_day = resolver.next_business_day(day)
    except HolidayError as e:
        raise _to_http_error(e, lang=lang, date=day.isoformat()) from e

    return {
        "date": day.isoformat(),
        "weekday": WEEKDAY_NAMES[lang][day.weekday()],
        "is_holiday": name is not None,
        "name": name,
        "next_business_day": next_business_day.isoformat(),
    }


@router.get("/{year}", response_model=HolidaysResponse, name="holidays_for_year")
async def holidays_for_year(year: int, lang: str = Query(DEFAULT_LANGUAGE)) -> HolidaysResponse:
    """All holidays of year, keyed by formatted date in chronological order."""
    resolver = _resolver_for(lang)
    try:
        return resolver.get_holidays(year)
    except HolidayError as e:
        raise _to_http_error(e, lang=lang, year=year) from e


@router.get("/{year}/calendar.ics", response_class=Response, name="holidays_calendar")
async def holidays_calendar(year: int, lang: str = Query(DEFAULT_LANGUAGE)) -> Response:
    """Export the holidays of year as an iCal file."""
    resolver = _resolver_for(lang)
    try:
        holidays = resolver.resolve(year)
    except HolidayError as e:
        raise _to_http_error(e, lang=lang, year=year) from e

    return Response(
        content=generate_ical(holidays, year, lang),
        media_type="text/calendar; charset=utf-8",
        headers={
            "Content-Disposition": f'attachment; filename="festivos-{year}.ics"',
        },
    )
