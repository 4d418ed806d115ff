# colholidays/core/logging_config.py
"""
Logging configuration for colholidays.

Every record can carry holiday context: the request id of the HTTP
request being served, plus whatever a caller passes through
``extra={"extra_fields": {...}}`` (year, lang, date, holiday). In
production the context becomes top-level JSON keys; in development it
is appended to the console line as ``key=value`` pairs.
"""

import json
import logging
import logging.handlers
import os
import sys
from contextvars import ContextVar
from datetime import datetime, timezone
from pathlib import Path


IS_PRODUCTION = os.getenv("PRODUCTION", "false").lower() == "true"

LOG_DIR = Path(os.getenv("LOG_DIR", "logs"))
LOG_FILE = LOG_DIR / "colholidays.log"

#: Id of the HTTP request being served, set by RequestLoggingMiddleware.
request_id_var: ContextVar[str | None] = ContextVar("request_id", default=None)

#: Context keys shown first, in this order.
CONTEXT_FIELDS = ("request_id", "lang", "year", "date", "holiday")


def log_context(record: logging.LogRecord) -> dict:
    """Holiday context of a record: the current request id plus its extra_fields."""
    context = {}
    request_id = request_id_var.get()
    if request_id:
        context["request_id"] = request_id
    context.update(getattr(record, "extra_fields", None) or {})

    ordered = {key: context.pop(key) for key in CONTEXT_FIELDS if key in context}
    ordered.update(context)
    return ordered


class JSONFormatter(logging.Formatter):
    """One JSON object per record, with the holiday context as top-level keys."""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(log_context(record))

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, ensure_ascii=False, default=str)


class ColoredFormatter(logging.Formatter):
    """
    Console formatter for development: coloured level, context as key=value.
    """

    COLORS = {
        "DEBUG": "\033[36m",
        "INFO": "\033[32m",
        "WARNING": "\033[33m",
        "ERROR": "\033[31m",
        "CRITICAL": "\033[35m",
    }
    RESET = "\033[0m"

    def format(self, record: logging.LogRecord) -> str:
        # Work on a copy so the file handler sees the plain level name
        record = logging.makeLogRecord(record.__dict__)
        if record.levelname in self.COLORS:
            record.levelname = f"{self.COLORS[record.levelname]}{record.levelname}{self.RESET}"

        line = super().format(record)
        context = log_context(record)
        if context:
            line += " | " + " ".join(f"{key}={value}" for key, value in context.items())
        return line


def _file_handler(formatter: logging.Formatter, level: int, max_bytes: int, backups: int) -> logging.Handler:
    handler = logging.handlers.RotatingFileHandler(
        LOG_FILE, maxBytes=max_bytes, backupCount=backups, encoding="utf-8"
    )
    handler.setLevel(level)
    handler.setFormatter(formatter)
    return handler


def setup_logging() -> None:
    """
    Configure the root logger.

    Production writes JSON to a rotating file (INFO) and to stdout
    (WARNING). Development writes coloured lines to stdout and plain
    lines to the rotating file, both at DEBUG.
    """
    LOG_DIR.mkdir(parents=True, exist_ok=True)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.INFO if IS_PRODUCTION else logging.DEBUG)
    root_logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    if IS_PRODUCTION:
        root_logger.addHandler(_file_handler(JSONFormatter(), logging.INFO, 10_000_000, 5))
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(JSONFormatter())
    else:
        root_logger.addHandler(
            _file_handler(
                logging.Formatter("%(levelname)s %(asctime)s [%(name)s:%(lineno)d] %(message)s"),
                logging.DEBUG,
                5_000_000,
                2,
            )
        )
        console_handler.setLevel(logging.DEBUG)
        console_handler.setFormatter(
            ColoredFormatter(fmt="%(levelname)-8s %(asctime)s [%(name)s] %(message)s", datefmt="%Y-%m-%d %H:%M:%S")
        )
    root_logger.addHandler(console_handler)

    logging.getLogger(__name__).info(
        "Logging configured (production=%s)",
        IS_PRODUCTION,
        extra={"extra_fields": {"log_file": str(LOG_FILE.absolute())}},
    )


def get_logger(name: str) -> logging.Logger:
    """Logger for a module (pass __name__)."""
    return logging.getLogger(name)
