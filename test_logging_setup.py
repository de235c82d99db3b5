"""Logging configuration from the environment."""

import logging

import logging_setup
from logging_setup import LEVEL_ENV, level_from_env, setup_logging


def test_level_from_env(monkeypatch):
    monkeypatch.delenv(LEVEL_ENV, raising=False)
    assert level_from_env() == logging.WARNING
    monkeypatch.setenv(LEVEL_ENV, "debug")
    assert level_from_env() == logging.DEBUG
    monkeypatch.setenv(LEVEL_ENV, "nonsense")
    assert level_from_env(logging.INFO) == logging.INFO


def test_setup_logging_once(monkeypatch, tmp_path):
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    monkeypatch.setattr(logging_setup, "_configured", False)
    try:
        log_file = tmp_path / "ifc.log"
        setup_logging(level=logging.INFO, console=False, log_file=str(log_file))
        assert root.level == logging.INFO
        assert len(root.handlers) == 1
        assert logging.getLogger("PIL").level == logging.WARNING

        # second call is a no-op
        setup_logging(level=logging.DEBUG)
        assert root.level == logging.INFO

        logging.getLogger("ifc").info("hello")
        for h in root.handlers:
            h.flush()
        assert "hello" in log_file.read_text(encoding="utf-8")
    finally:
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved_handlers:
            root.addHandler(h)
        root.setLevel(saved_level)
