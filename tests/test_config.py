"""Tests for geo_bounds.config and geo_bounds.log."""

import logging
import sys

import pytest

from geo_bounds import LatLng, LatLngBounds, log
from geo_bounds.config import Settings


class TestSettings:
    def test_default_log_level(self, monkeypatch):
        monkeypatch.delenv("GEO_BOUNDS_LOG_LEVEL", raising=False)
        assert Settings(_env_file=None).log_level == "info"

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("GEO_BOUNDS_LOG_LEVEL", "debug")
        assert Settings(_env_file=None).log_level == "debug"

    def test_unprefixed_variable_ignored(self, monkeypatch):
        monkeypatch.delenv("GEO_BOUNDS_LOG_LEVEL", raising=False)
        monkeypatch.setenv("LOG_LEVEL", "error")
        assert Settings(_env_file=None).log_level == "info"


class TestSetupLogging:
    @pytest.fixture
    def basic_config_calls(self, monkeypatch):
        calls = []
        monkeypatch.setattr(logging, "basicConfig", lambda **kwargs: calls.append(kwargs))
        return calls

    def test_uses_explicit_level(self, basic_config_calls):
        log.setup_logging("warning")
        assert basic_config_calls[0]["level"] == logging.WARNING
        assert basic_config_calls[0]["stream"] is sys.stdout

    def test_falls_back_to_settings(self, basic_config_calls, monkeypatch):
        monkeypatch.setattr(log.settings, "log_level", "debug")
        log.setup_logging()
        assert basic_config_calls[0]["level"] == logging.DEBUG

    def test_unknown_level_defaults_to_info(self, basic_config_calls):
        log.setup_logging("chatty")
        assert basic_config_calls[0]["level"] == logging.INFO

    def test_format_includes_logger_name(self, basic_config_calls):
        log.setup_logging("info")
        assert "%(name)s" in basic_config_calls[0]["format"]


class TestBoundsLogging:
    def test_from_points_logs_at_debug(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="geo_bounds.bounds"):
            LatLngBounds.from_points([LatLng(0, 0), LatLng(1, 1)])
        assert "Built bounds from 2 points" in caplog.text

    def test_empty_rejection_logged(self, caplog):
        with caplog.at_level(logging.DEBUG, logger="geo_bounds.bounds"):
            with pytest.raises(ValueError):
                LatLngBounds.from_points([])
        assert "empty point list" in caplog.text
