"""Tests for the logging setup."""

import logging
from datetime import datetime

import pytest

from backend.app import logger as logger_module
from backend.app.config import Settings
from backend.app.logger import configure_logging, get_logger, log_file_for


@pytest.fixture
def fresh_root(monkeypatch):
    name = "copycraft-test"
    monkeypatch.setattr(logger_module, "ROOT_LOGGER_NAME", name)
    yield name
    root = logging.getLogger(name)
    for handler in list(root.handlers):
        handler.close()
        root.removeHandler(handler)


def test_log_file_named_after_start_time(tmp_path):
    settings = Settings(log_dir=str(tmp_path))
    path = log_file_for(settings, started=datetime(2024, 5, 1, 9, 30, 15))
    assert path == tmp_path / "copycraft_20240501_093015.log"


def test_configure_writes_to_file_and_respects_console_level(tmp_path, fresh_root):
    log_file = tmp_path / "run" / "copycraft.log"
    root = configure_logging(Settings(log_dir=str(tmp_path), log_level="WARNING"), log_file=log_file)

    file_handler, console_handler = root.handlers
    assert isinstance(file_handler, logging.FileHandler)
    assert console_handler.level == logging.WARNING
    assert root.propagate is False

    logging.getLogger(fresh_root).getChild("session").debug("debug detail")
    file_handler.flush()
    assert "copycraft-test.session - DEBUG" in log_file.read_text(encoding="utf-8")


def test_configure_is_idempotent(tmp_path, fresh_root):
    settings = Settings(log_dir=str(tmp_path))
    first = configure_logging(settings, log_file=tmp_path / "a.log")
    second = configure_logging(settings, log_file=tmp_path / "b.log")
    assert first is second
    assert len(first.handlers) == 2
    assert not (tmp_path / "b.log").exists()


def test_unknown_level_falls_back_to_info(tmp_path, fresh_root):
    root = configure_logging(Settings(log_dir=str(tmp_path), log_level="CHATTY"), log_file=tmp_path / "x.log")
    assert root.handlers[1].level == logging.INFO


def test_noisy_libraries_quieted(tmp_path, fresh_root):
    configure_logging(Settings(log_dir=str(tmp_path)), log_file=tmp_path / "x.log")
    assert logging.getLogger("httpx").level == logging.WARNING


def test_get_logger_returns_child_of_project_logger():
    child = get_logger("backend.app.copy_generator")
    assert child.name == "copycraft.copy_generator"
    assert child.parent is logging.getLogger("copycraft")
