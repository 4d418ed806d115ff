"""iCal export of resolved holidays."""

import datetime
import re
import unicodedata

from icalendar import Calendar, Event

from colholidays.core.models import ResolvedHoliday

CALENDAR_TIMEZONE = "America/Bogota"


def _slugify(name: str) -> str:
    """ASCII slug of a holiday name, used in UIDs."""
    ascii_name = unicodedata.normalize("NFKD", name).encode("ascii", "ignore").decode("ascii")
    return re.sub(r"[^a-z0-9]+", "-", ascii_name.lower()).strip("-")


def generate_ical(holidays: list[ResolvedHoliday], year: int, lang: str = "en") -> str:
    """
    Generate an iCal file with one all-day event per holiday.

    Args:
        holidays: Resolved holidays for year
        year: Year the holidays belong to (used in the calendar name)
        lang: Language of the holiday names

    Returns:
        iCal formatted string
    """
    cal = Calendar()
    cal.add("prodid", "-//colholidays//Colombian Holidays//")
    cal.add("version", "2.0")
    cal.add("calscale", "GREGORIAN")
    cal.add("method", "PUBLISH")
    cal.add("x-wr-calname", f"Colombia {year}")
    cal.add("x-wr-timezone", CALENDAR_TIMEZONE)

    for holiday in holidays:
        cal.add_component(_create_holiday_event(holiday, lang))

    return cal.to_ical().decode("utf-8")


def _create_holiday_event(holiday: ResolvedHoliday, lang: str) -> Event:
    """
    Create an all-day VEVENT for a holiday.

    Args:
        holiday: Resolved holiday
        lang: Language tag, part of the UID so calendars in different
            languages do not collide

    Returns:
        icalendar Event object
    """
    event = Event()
    event.add("summary", holiday.name)
    event.add("uid", f"{holiday.date.isoformat()}_{_slugify(holiday.name)}_{lang}@colholidays")
    event.add("dtstart", holiday.date)
    event.add("dtend", holiday.date + datetime.timedelta(days=1))
    event.add("transp", "TRANSPARENT")
    event.add("categories", ["Holiday"])
    event.add("dtstamp", datetime.datetime.now(datetime.timezone.utc))
    return event
