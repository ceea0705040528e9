"""
Runtime configuration for StudyBloom.

Values come from the environment (optionally via a .env file at the
project root) and fall back to per-user defaults under ~/.studybloom.
"""

import os
from pathlib import Path

from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).parent.parent
load_dotenv(PROJECT_ROOT / ".env")

PACKAGE_DIR = Path(__file__).parent
DATA_DIR = PACKAGE_DIR / "data"
COURSES_DIR = DATA_DIR / "courses"
SUGGESTIONS_NAME = "suggestions"

DEFAULT_HOME_DIR = Path(os.environ.get("STUDYBLOOM_HOME", Path.home() / ".studybloom"))
DEFAULT_STORAGE_DB = Path(os.environ.get("STUDYBLOOM_STORAGE_DB", DEFAULT_HOME_DIR / "storage.db"))

LOG_LEVEL = os.environ.get("STUDYBLOOM_LOG_LEVEL", "INFO").upper()
LOG_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
