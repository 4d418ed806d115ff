# colholidays/core/storage.py
"""
Data loading for the holiday configuration files.
"""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from colholidays.core.config import CONFIG_DIR, CONFIG_FILE_TEMPLATE, DEFAULT_LANGUAGE, SUPPORTED_LANGUAGES
from colholidays.core.errors import ConfigurationError
from colholidays.core.models import HolidayConfig

logger = logging.getLogger(__name__)


def _load_json(file_path: Path) -> list[Any] | dict[str, Any]:
    """
    Read and parse JSON with robust error handling.
    Args:
        file_path: Path to the JSON file
    Returns:
        Parsed JSON data as list or dict
    Raises:
        ConfigurationError: If file cannot be read or JSON is invalid
    """
    try:
        raw = file_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.exception("Failed to read JSON file %s", file_path)
        raise ConfigurationError(f"Could not read JSON file {file_path}: {e}") from e

    try:
        return json.loads(raw)
    except json.JSONDecodeError as e:
        logger.exception("Invalid JSON in file %s", file_path)
        raise ConfigurationError(f"Invalid JSON in file {file_path}: {e}") from e


def config_path(lang: str = DEFAULT_LANGUAGE, config_dir: Path | None = None) -> Path:
    """Path of the holiday name file for lang."""
    if lang not in SUPPORTED_LANGUAGES:
        raise ConfigurationError(f"Unsupported language {lang!r}, expected one of {SUPPORTED_LANGUAGES}")
    return (config_dir or CONFIG_DIR) / CONFIG_FILE_TEMPLATE.format(lang=lang)


def load_holiday_config(lang: str = DEFAULT_LANGUAGE, config_dir: Path | None = None) -> HolidayConfig:
    """
    Load holiday names and date format from data file.

    A file that parses but lacks a usable date format or names is returned
    as a config that is not ready; resolving with it fails later.
    Returns:
        Holiday configuration
    Raises:
        ConfigurationError: If file cannot be loaded or parsed
    """
    file_path = config_path(lang, config_dir)
    data = _load_json(file_path)
    try:
        if not isinstance(data, dict):
            raise TypeError("Expected holiday configuration dict")
        config = HolidayConfig(**data)
    except (TypeError, ValidationError) as e:
        logger.exception("Failed to parse holiday configuration from %s", file_path)
        raise ConfigurationError(f"Could not parse holiday configuration from {file_path}: {e}") from e

    if not config.is_ready:
        logger.warning("Holiday configuration in %s is not ready", file_path)
    else:
        logger.debug("Loaded %d holiday names from %s", len(config.holiday_names or []), file_path)
    return config
