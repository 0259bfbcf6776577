import logging
from pathlib import Path

from todos.config import Settings, load_settings
from todos.logging_setup import setup_logging


def test_defaults(monkeypatch):
    for name in ("TODOS_LOG_LEVEL", "TODOS_LOG_FILE", "TODOS_SEED_WELCOME"):
        monkeypatch.delenv(name, raising=False)

    assert load_settings() == Settings()


def test_env_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("TODOS_LOG_LEVEL", "debug")
    monkeypatch.setenv("TODOS_LOG_FILE", str(tmp_path / "todos.log"))
    monkeypatch.setenv("TODOS_SEED_WELCOME", "no")

    settings = load_settings()

    assert settings.log_level == "DEBUG"
    assert settings.log_file == Path(tmp_path / "todos.log")
    assert settings.seed_welcome is False


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("TODOS_LOG_LEVEL", "chatty")
    assert load_settings().log_level == "WARNING"


def test_setup_logging_writes_file(tmp_path):
    log_file = tmp_path / "logs" / "todos.log"
    setup_logging(level="INFO", log_file=log_file)

    logging.getLogger("todos.test").debug("hello file")
    for h in logging.getLogger().handlers:
        h.flush()

    assert "hello file" in log_file.read_text(encoding="utf-8")
