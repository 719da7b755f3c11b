# timetable_extractor/app/utils/logger.py
import logging
from logging.handlers import RotatingFileHandler
import sys
from typing import Optional

from ..config import Settings, get_settings

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DIRS = {"backend", "frontend"}


def setup_logger(name: str, log_dir: str = "backend", settings: Optional[Settings] = None) -> logging.Logger:
    """
    Set up a logger writing to stdout and to a rotating file.

    The file lives in ``LOGS_DIR/<log_dir>/<name>.log`` and the level comes
    from ``LOG_LEVEL``. Browser logs go to ``frontend``, everything else to
    ``backend``.
    """
    settings = settings or get_settings()
    if log_dir not in LOG_DIRS:
        log_dir = "backend"
    target_dir = settings.LOGS_DIR / log_dir
    target_dir.mkdir(parents=True, exist_ok=True)

    logger = logging.getLogger(name)
    logger.setLevel(settings.LOG_LEVEL.upper())

    # Called once per processor instance, so avoid stacking handlers
    if logger.hasHandlers():
        for handler in list(logger.handlers):
            handler.close()
        logger.handlers.clear()

    formatter = logging.Formatter(LOG_FORMAT)

    file_handler = RotatingFileHandler(
        target_dir / f"{name}.log",
        maxBytes=10*1024*1024,  # 10MB
        backupCount=5,
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    logger.addHandler(file_handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    return logger
