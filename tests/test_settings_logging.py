from __future__ import annotations

import logging

import structlog

from apptask.core import logging as logging_mod
from apptask.core.settings import get_settings


def test_settings_defaults(monkeypatch):
    monkeypatch.delenv("LOG_LEVEL", raising=False)
    monkeypatch.delenv("LOG_JSON", raising=False)

    settings = get_settings()
    assert settings.LOG_LEVEL == "INFO"
    assert settings.LOG_JSON is True


def test_settings_read_from_env(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_JSON", "false")

    settings = get_settings()
    assert settings.LOG_LEVEL == "DEBUG"
    assert settings.LOG_JSON is False


def test_configure_logging_uses_settings(monkeypatch):
    monkeypatch.setenv("LOG_LEVEL", "warning")
    monkeypatch.setenv("LOG_JSON", "true")
    basic = {}
    configured = {}
    monkeypatch.setattr(logging_mod.logging, "basicConfig", lambda **kw: basic.update(kw))
    monkeypatch.setattr(logging_mod.structlog, "configure_once", lambda **kw: configured.update(kw))

    logging_mod.configure_logging()

    assert basic["level"] == logging.WARNING
    assert isinstance(configured["processors"][-1], structlog.processors.JSONRenderer)
    assert configured["wrapper_class"] is structlog.stdlib.BoundLogger


def test_configure_logging_console_renderer(monkeypatch):
    configured = {}
    monkeypatch.setattr(logging_mod.logging, "basicConfig", lambda **kw: None)
    monkeypatch.setattr(logging_mod.structlog, "configure_once", lambda **kw: configured.update(kw))

    logging_mod.configure_logging("DEBUG", json=False)

    assert isinstance(configured["processors"][-1], structlog.dev.ConsoleRenderer)
