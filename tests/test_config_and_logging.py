from __future__ import annotations

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

import pytest

from appliance_energy.core.config import Settings, settings
from appliance_energy.core.log import configure_logging


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in ("ENERGY_LOG_LEVEL", "ENERGY_LOG_FILE", "ENERGY_SORT_MONTH_EVENTS"):
        monkeypatch.delenv(key, raising=False)
    s = Settings(_env_file=None)
    assert s.log_level == "INFO"
    assert s.log_file is None
    assert s.sort_month_events is False


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENERGY_SORT_MONTH_EVENTS", "true")
    monkeypatch.setenv("ENERGY_LOG_LEVEL", "DEBUG")
    s = Settings(_env_file=None)
    assert s.sort_month_events is True
    assert s.log_level == "DEBUG"


def _own_handlers() -> list:
    return [h for h in logging.getLogger().handlers if getattr(h, "_appliance_energy_handler", False)]


def test_configure_logging_console_only(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "log_file", None)
    configure_logging("warning")
    handlers = _own_handlers()
    assert len(handlers) == 1
    assert logging.getLogger().level == logging.WARNING


def test_configure_logging_is_idempotent_with_file(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    log_file = tmp_path / "energy.log"
    monkeypatch.setattr(settings, "log_file", str(log_file))
    configure_logging()
    configure_logging()
    handlers = _own_handlers()
    assert len(handlers) == 2
    assert sum(isinstance(h, RotatingFileHandler) for h in handlers) == 1

    logging.getLogger("appliance_energy.test").warning("hello")
    for h in handlers:
        h.flush()
    assert "hello" in log_file.read_text()
