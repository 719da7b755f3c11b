from functools import lru_cache
from pydantic import BaseModel
from pydantic_settings import BaseSettings
from pathlib import Path
from typing import Any, Dict, Optional

from .core import constants


class FrontendLogEntry(BaseModel):
    name: str
    level: int
    message: str
    details: Optional[Dict[str, Any]] = None
    environment: str


class Settings(BaseSettings):
    # Environment
    NODE_ENV: str = "development"

    # Relative to the working directory, never to the installed package
    LOGS_DIR: Path = Path("logs")
    LOG_LEVEL: str = "INFO"
    STATIC_DIR: Path = Path(__file__).parent / "static"

    # Maximum file size (10 MB)
    MAX_FILE_SIZE: int = 10 * 1024 * 1024
    PDF_MEDIA_TYPE: str = constants.PDF_MEDIA_TYPE

    @property
    def is_production(self) -> bool:
        return self.NODE_ENV.lower() == "production"

    class Config:
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Settings read once per process, on first use."""
    return Settings()


class LayoutSettings(BaseSettings):
    """
    Geometric thresholds used to infer the timetable grid.

    All values are in PDF page units (roughly points). Override any of them
    through the environment, e.g. ``LAYOUT_SPLIT_GAP=20``.
    """
    # A title sits above this y and is taller than title_height_threshold
    page_top_threshold: float = constants.PAGE_TOP_THRESHOLD
    title_height_threshold: float = constants.TITLE_HEIGHT_THRESHOLD

    # Token that locates the day header row (compared lower-cased)
    anchor_day: str = constants.ANCHOR_DAY
    # Max vertical distance between fragments of the same row
    row_tolerance: float = constants.ROW_TOLERANCE
    # Header fragments must be longer than this to count as a day
    day_min_length: int = constants.DAY_MIN_LENGTH
    # Period digits are left of this x
    period_margin: float = constants.PERIOD_MARGIN

    # Right edge of the last day column
    open_right_bound: float = constants.OPEN_RIGHT_BOUND
    # Horizontal gap that separates two sessions in one cell
    split_gap: float = constants.SPLIT_GAP
    group_token: str = constants.GROUP_TOKEN

    class Config:
        env_prefix = "LAYOUT_"
        env_file = ".env"
        extra = "ignore"
