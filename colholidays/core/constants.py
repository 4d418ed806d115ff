# colholidays/core/constants.py
from typing import Final

# ==========================
# Week structure / dates
# ==========================

#: Days per week. Used instead of a bare "7" in date arithmetic.
DAYS_PER_WEEK: Final[int] = 7


# ==========================
# Easter offsets (days from Easter Sunday)
# ==========================

#: Palm Sunday anchor: one week before Easter.
PALM_SUNDAY_OFFSET: Final[int] = -7

#: Ascension Day, counted from the Monday after Easter.
ASCENSION_DAYS: Final[int] = 42

#: Corpus Christi, counted from the Monday after Easter.
CORPUS_CHRISTI_DAYS: Final[int] = 63

#: Sacred Heart, counted from the Monday after Easter.
SACRED_HEART_DAYS: Final[int] = 70


# ==========================
# Weekday names (presentation)
# ==========================

#: Weekday names per language, indexed like datetime.weekday() (0=Monday, 6=Sunday).
WEEKDAY_NAMES: Final[dict[str, tuple[str, ...]]] = {
    "en": ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday"),
    "es": ("Lunes", "Martes", "Miércoles", "Jueves", "Viernes", "Sábado", "Domingo"),
}
