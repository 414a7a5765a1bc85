from todo.config import Settings, load_settings
from todo.logging_setup import setup_logging
from pathlib import Path
import logging


def test_defaults_without_env(monkeypatch):
    for name in ("TODO_LOG_LEVEL", "TODO_LOG_FILE", "TODO_DATE_FORMAT"):
        monkeypatch.delenv(name, raising=False)

    assert load_settings() == Settings()


def test_values_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("TODO_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODO_LOG_FILE", str(tmp_path / "todo.log"))
    monkeypatch.setenv("TODO_DATE_FORMAT", "%d.%m.%Y")

    s = load_settings()

    assert s.log_level == "DEBUG"
    assert s.log_file == tmp_path / "todo.log"
    assert s.date_format == "%d.%m.%Y"


def test_invalid_values_fall_back_to_defaults(monkeypatch):
    monkeypatch.setenv("TODO_LOG_LEVEL", "chatty")
    monkeypatch.setenv("TODO_LOG_FILE", "  ")
    monkeypatch.setenv("TODO_DATE_FORMAT", "")

    s = load_settings()

    assert s.log_level == "WARNING"
    assert s.log_file is None
    assert s.date_format == "%Y-%m-%d %H:%M"


def test_setup_logging_replaces_handlers(tmp_path):
    log_file = tmp_path / "nested" / "todo.log"

    setup_logging(level="INFO", log_file=log_file)
    setup_logging(level="INFO", log_file=log_file)

    root = logging.getLogger()
    assert len(root.handlers) == 2
    logging.getLogger("todo.test").debug("hello file")
    for h in root.handlers:
        h.flush()
    assert "hello file" in Path(log_file).read_text(encoding="utf-8")


def test_setup_logging_console_only():
    setup_logging()

    root = logging.getLogger()
    assert len(root.handlers) == 1
    assert root.handlers[0].level == logging.WARNING
