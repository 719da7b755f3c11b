import logging
from pathlib import Path

from timetable_extractor.app.config import LayoutSettings, Settings
from timetable_extractor.app.utils.logger import setup_logger


def test_logs_dir_is_relative_to_working_directory(tmp_path, monkeypatch):
    monkeypatch.delenv("LOGS_DIR", raising=False)
    monkeypatch.chdir(tmp_path)

    settings = Settings()

    assert settings.LOGS_DIR == Path("logs")
    assert settings.LOGS_DIR.resolve() == (tmp_path / "logs").resolve()


def test_logs_dir_from_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("LOGS_DIR", str(tmp_path / "custom"))

    assert Settings().LOGS_DIR == tmp_path / "custom"


def test_settings_do_not_touch_the_filesystem(tmp_path, monkeypatch):
    monkeypatch.delenv("LOGS_DIR", raising=False)
    monkeypatch.chdir(tmp_path)

    Settings()

    assert not (tmp_path / "logs").exists()


def test_layout_settings_from_environment(monkeypatch):
    monkeypatch.setenv("LAYOUT_SPLIT_GAP", "20")
    monkeypatch.setenv("LAYOUT_ANCHOR_DAY", "lundi")

    settings = LayoutSettings()

    assert settings.split_gap == 20
    assert settings.anchor_day == "lundi"
    assert settings.row_tolerance == 5


def test_logger_follows_settings(tmp_path):
    settings = Settings(LOGS_DIR=tmp_path, LOG_LEVEL="debug")

    logger = setup_logger("config_test", settings=settings)
    logger.debug("written at debug level")
    for handler in logger.handlers:
        handler.flush()

    assert logger.level == logging.DEBUG
    log_file = tmp_path / "backend" / "config_test.log"
    assert "written at debug level" in log_file.read_text(encoding="utf-8")


def test_frontend_logs_get_their_own_directory(tmp_path):
    settings = Settings(LOGS_DIR=tmp_path, LOG_LEVEL="WARNING")

    logger = setup_logger("config_test_frontend", log_dir="frontend", settings=settings)

    assert logger.level == logging.WARNING
    assert (tmp_path / "frontend").is_dir()
    assert len(logger.handlers) == 2

    setup_logger("config_test_frontend", log_dir="frontend", settings=settings)
    assert len(logger.handlers) == 2
