"""
Runtime configuration for LessonDeck.

Settings come from the process environment, optionally seeded from a
project-root .env file. Every variable is prefixed with LESSONDECK_.
"""

import os
from pathlib import Path
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, Field


PROJECT_ROOT = Path(__file__).parent.parent
ENV_PREFIX = "LESSONDECK_"

DEFAULT_COURSES_DIR = Path("data/courses")
DEFAULT_PROGRESS_DIR = Path.home() / ".lessondeck"
DEFAULT_PROGRESS_DB = DEFAULT_PROGRESS_DIR / "progress.db"
DEFAULT_API_BASE_URL = "http://localhost:5000/api"
DEFAULT_AUTO_ADVANCE_DELAY = 1.5  # seconds the completion notice stays up
DEFAULT_HEADING_MARKER = "# "


class Settings(BaseModel):
    course_source: Literal["file", "http"] = "file"
    courses_dir: Path = DEFAULT_COURSES_DIR
    api_base_url: str = DEFAULT_API_BASE_URL
    api_token: Optional[str] = None
    progress_db: Path = DEFAULT_PROGRESS_DB
    auto_advance_delay: float = Field(default=DEFAULT_AUTO_ADVANCE_DELAY, ge=0)
    heading_marker: str = Field(default=DEFAULT_HEADING_MARKER, min_length=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"


def load_settings(env_file: Optional[Path] = None, environ: Optional[dict] = None) -> Settings:
    """
    Build Settings from LESSONDECK_* variables.

    Args:
        env_file: .env file to load first (default: PROJECT_ROOT/.env).
            Existing environment variables win over the file.
        environ: Mapping to read instead of os.environ (for tests)

    Returns:
        Validated Settings

    Raises:
        pydantic.ValidationError: If a variable has an invalid value
    """
    if environ is None:
        load_dotenv(env_file or PROJECT_ROOT / ".env")
        environ = os.environ

    values = {}
    for name in Settings.model_fields:
        raw = environ.get(ENV_PREFIX + name.upper())
        if raw is not None and raw != "":
            values[name] = raw
    if "log_level" in values:
        values["log_level"] = values["log_level"].upper()

    return Settings(**values)
