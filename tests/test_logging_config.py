import logging
from pathlib import Path

from records_api.app.core.logging_config import build_logging_config, setup_logging


def test_console_only_by_default():
    config = build_logging_config("debug")

    assert config["root"] == {"level": "DEBUG", "handlers": ["console"]}
    assert config["disable_existing_loggers"] is False


def test_unknown_level_falls_back_to_info():
    assert build_logging_config("chatty")["root"]["level"] == "INFO"


def test_file_handler_added(tmp_path):
    config = build_logging_config("INFO", str(tmp_path / "records.log"))

    assert config["root"]["handlers"] == ["console", "file"]
    assert Path(config["handlers"]["file"]["filename"]) == (tmp_path / "records.log").resolve()


def test_existing_handlers_are_left_alone(monkeypatch):
    root = logging.getLogger()
    existing = [logging.NullHandler()]
    monkeypatch.setattr(root, "handlers", existing)

    assert setup_logging("DEBUG") is False
    assert root.handlers is existing
