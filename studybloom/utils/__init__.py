"""StudyBloom utilities."""

from .yaml_loader import load_yaml_file, load_data, get_available_files
from .storage import (
    KeyValueStore,
    COMPLETED_SECTIONS_KEY,
    USER_COURSES_KEY,
    USERS_KEY,
    CURRENT_USER_KEY,
)

__all__ = [
    "load_yaml_file",
    "load_data",
    "get_available_files",
    "KeyValueStore",
    "COMPLETED_SECTIONS_KEY",
    "USER_COURSES_KEY",
    "USERS_KEY",
    "CURRENT_USER_KEY",
]
