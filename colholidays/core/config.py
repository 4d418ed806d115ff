# colholidays/core/config.py

import os
from pathlib import Path
from typing import Final


# ==========================
# Supported years
# ==========================

#: First year the Easter computation is defined for (Gregorian calendar).
MIN_SUPPORTED_YEAR: Final[int] = 1583

#: Last year representable by datetime.date.
MAX_SUPPORTED_YEAR: Final[int] = 9999


# ==========================
# Easter computation
# ==========================

#: Century constants (first_year, last_year, m, n), both bounds inclusive.
#: m seeds the month offset and n the epact.
EASTER_CENTURY_CONSTANTS: Final[tuple[tuple[int, int, int, int], ...]] = (
    (1583, 1699, 22, 2),
    (1700, 1799, 23, 3),
    (1800, 1899, 23, 4),
    (1900, 2099, 24, 5),
    (2100, 2199, 24, 6),
    (2200, 2299, 25, 0),
)

#: (m, n) used for any year outside the brackets above.
EASTER_DEFAULT_CONSTANTS: Final[tuple[int, int]] = (24, 5)


# ==========================
# Presentation
# ==========================

#: Joins the names of holidays that resolve to the same date.
MERGED_NAME_SEPARATOR: Final[str] = "; "


# ==========================
# Configuration files
# ==========================

#: Languages with a bundled holiday name file.
SUPPORTED_LANGUAGES: Final[tuple[str, ...]] = ("en", "es")

#: Language used when none is given.
DEFAULT_LANGUAGE: Final[str] = "en"

#: Directory holding holidays_<lang>.json. Override with HOLIDAYS_CONFIG_DIR.
CONFIG_DIR: Final[Path] = Path(
    os.getenv("HOLIDAYS_CONFIG_DIR", str(Path(__file__).resolve().parent.parent / "data"))
)

#: File name pattern of the name files.
CONFIG_FILE_TEMPLATE: Final[str] = "holidays_{lang}.json"
