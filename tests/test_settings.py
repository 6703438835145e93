"""Tests for settings and logging configuration."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from pedal_inventory.config import get_logger, setup_logging
from pedal_inventory.config.settings import Settings, clear_settings_cache, get_settings
from pedal_inventory.exceptions import PedalInventoryError, StorageWriteError


@pytest.fixture(autouse=True)
def _clear_cache():
    clear_settings_cache()
    yield
    clear_settings_cache()


class TestSettings:
    def test_defaults(self, monkeypatch):
        for var in ("DATA_DIR", "CATALOG_PATH", "LOG_LEVEL", "ASYNC_PERSISTENCE"):
            monkeypatch.delenv(f"PEDAL_INVENTORY_{var}", raising=False)
        s = Settings(_env_file=None)
        assert "pedal-inventory" in str(s.data_dir)
        assert s.catalog_path is None
        assert s.log_level == "WARNING"
        assert s.async_persistence is True
        assert s.inventory_key == "pedal-inventory"
        assert s.templates_key == "pedal-templates"

    def test_env_override(self, monkeypatch, tmp_path):
        monkeypatch.setenv("PEDAL_INVENTORY_DATA_DIR", str(tmp_path))
        monkeypatch.setenv("PEDAL_INVENTORY_LOG_LEVEL", "debug")
        monkeypatch.setenv("PEDAL_INVENTORY_ASYNC_PERSISTENCE", "false")
        s = get_settings()
        assert s.data_dir == tmp_path
        assert s.log_level == "DEBUG"
        assert s.async_persistence is False

    def test_cached(self):
        assert get_settings() is get_settings()

    def test_invalid_log_level(self):
        with pytest.raises(ValidationError):
            Settings(log_level="LOUD")

    def test_missing_catalog_file(self, tmp_path):
        with pytest.raises(ValidationError):
            Settings(catalog_path=tmp_path / "nope.yaml")

    def test_existing_catalog_file(self, tmp_path):
        p = tmp_path / "cat.yaml"
        p.write_text("A: [x]\n", encoding="utf-8")
        assert Settings(catalog_path=p).catalog_path == Path(p)


class TestLogging:
    def test_get_logger_namespaced(self):
        assert get_logger("foo").name == "pedal_inventory.foo"
        assert get_logger("pedal_inventory.orders").name == "pedal_inventory.orders"

    def test_setup_logging_sets_level(self):
        setup_logging("INFO")
        assert logging.getLogger("pedal_inventory").level == logging.INFO
        setup_logging("WARNING")
        assert logging.getLogger("pedal_inventory").level == logging.WARNING


class TestExceptions:
    def test_message_only(self):
        assert str(PedalInventoryError("Failed")) == "Failed"

    def test_with_details(self):
        e = StorageWriteError("Could not write", "disk full")
        assert str(e) == "Could not write\n  Details: disk full"
        assert e.message == "Could not write"
