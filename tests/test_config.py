# tests/test_config.py
"""
Tests for the holiday configuration: readiness rules and file loading.
"""

import json
import sys
from pathlib import Path

import pytest

project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# ruff: noqa: E402
from colholidays.core.errors import ConfigurationError
from colholidays.core.models import HolidayConfig
from colholidays.core.storage import config_path, load_holiday_config


class TestHolidayConfig:
    def test_ready_with_valid_properties(self):
        config = HolidayConfig(date_format="%d/%m/%Y", holiday_names=["Año Nuevo", "Navidad"])
        assert config.is_ready
        assert config.holiday_names == ["Año Nuevo", "Navidad"]

    def test_names_from_semicolon_separated_string(self):
        config = HolidayConfig(date_format="%d/%m/%Y", holiday_names=" Año Nuevo ; Navidad;; ")
        assert config.holiday_names == ["Año Nuevo", "Navidad"]
        assert config.is_ready

    def test_not_ready_by_empty_date_format(self):
        config = HolidayConfig(date_format="", holiday_names=["Navidad"])
        assert not config.is_ready

    def test_not_ready_by_null_date_format(self):
        config = HolidayConfig(date_format=None, holiday_names=["Navidad"])
        assert not config.is_ready

    def test_not_ready_by_invalid_date_format(self):
        config = HolidayConfig(date_format="wtf", holiday_names=["Navidad"])
        assert not config.has_valid_date_format
        assert not config.is_ready

    def test_not_ready_by_ambiguous_date_format(self):
        config = HolidayConfig(date_format="%Y", holiday_names=["Navidad"])
        assert not config.is_ready

    def test_not_ready_by_empty_holiday_names(self):
        config = HolidayConfig(date_format="%d/%m/%Y", holiday_names="")
        assert config.holiday_names == []
        assert not config.is_ready

    def test_not_ready_by_null_holiday_names(self):
        config = HolidayConfig(date_format="%d/%m/%Y", holiday_names=None)
        assert config.has_valid_date_format
        assert not config.is_ready

    def test_not_ready_when_empty(self):
        assert not HolidayConfig().is_ready


class TestStorage:
    def _write(self, directory: Path, lang: str, content: str) -> Path:
        path = directory / f"holidays_{lang}.json"
        path.write_text(content, encoding="utf-8")
        return path

    def test_bundled_configs_are_ready(self):
        for lang in ("en", "es"):
            config = load_holiday_config(lang)
            assert config.is_ready
            assert len(config.holiday_names) == 20

    def test_load_from_custom_directory(self, tmp_path):
        self._write(tmp_path, "en", json.dumps({"date_format": "%Y-%m-%d", "holiday_names": "A;B"}))

        config = load_holiday_config("en", config_dir=tmp_path)

        assert config.date_format == "%Y-%m-%d"
        assert config.holiday_names == ["A", "B"]

    def test_missing_file(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Could not read"):
            load_holiday_config("en", config_dir=tmp_path)

    def test_invalid_json(self, tmp_path):
        self._write(tmp_path, "en", "{not json")
        with pytest.raises(ConfigurationError, match="Invalid JSON"):
            load_holiday_config("en", config_dir=tmp_path)

    def test_wrong_shape(self, tmp_path):
        self._write(tmp_path, "en", json.dumps(["New Year's Day"]))
        with pytest.raises(ConfigurationError, match="Could not parse"):
            load_holiday_config("en", config_dir=tmp_path)

    def test_wrong_field_type(self, tmp_path):
        self._write(tmp_path, "en", json.dumps({"date_format": 5, "holiday_names": ["A"]}))
        with pytest.raises(ConfigurationError, match="Could not parse"):
            load_holiday_config("en", config_dir=tmp_path)

    def test_parseable_but_unready_config_loads(self, tmp_path):
        self._write(tmp_path, "en", json.dumps({"date_format": "", "holiday_names": ["A"]}))

        config = load_holiday_config("en", config_dir=tmp_path)

        assert not config.is_ready

    def test_unsupported_language(self, tmp_path):
        with pytest.raises(ConfigurationError, match="Unsupported language"):
            config_path("fr", tmp_path)

    def test_config_path(self, tmp_path):
        assert config_path("es", tmp_path) == tmp_path / "holidays_es.json"
