"""
CourseCatalog - Load preset courses and manage user-authored ones.

Provides access to:
- Preset courses bundled as YAML under studybloom/data/courses/
- User courses persisted under the "userCourses" storage key
"""

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from studybloom.config import COURSES_DIR
from studybloom.schemas import Course
from studybloom.utils.storage import KeyValueStore, USER_COURSES_KEY
from studybloom.utils.yaml_loader import get_available_files, load_data

logger = logging.getLogger(__name__)


def load_preset_courses(courses_dir: Optional[Path] = None) -> list[Course]:
    """
    Load and validate every preset course YAML file, ordered by file name.

    Raises:
        FileNotFoundError: If the courses directory does not exist
        ValueError: If a file is not a valid course (pydantic ValidationError)
    """
    dir_path = Path(courses_dir) if courses_dir else COURSES_DIR
    if not dir_path.exists():
        raise FileNotFoundError(f"Courses directory not found: {dir_path}")

    courses = []
    for name in get_available_files(dir_path):
        courses.append(Course.model_validate(load_data(name, dir_path)))
    return courses


class CourseCatalog:
    """
    Combined view of preset and user-authored courses.

    Presets are read once at construction; user courses are read from the
    store on every call so edits made elsewhere show up immediately.
    """

    def __init__(self, store: KeyValueStore, courses_dir: Optional[Path] = None):
        """
        Initialize catalog.

        Args:
            store: KeyValueStore holding user courses
            courses_dir: Directory of preset course YAML files
        """
        self.store = store
        self.presets = load_preset_courses(courses_dir)
        logger.info(f"Loaded {len(self.presets)} preset course(s)")

    # -------------------------------------------------------------------------
    # Lookup
    # -------------------------------------------------------------------------

    def get_user_courses(self) -> list[Course]:
        """Get user courses in creation order, skipping corrupt entries."""
        raw = self.store.get_json(USER_COURSES_KEY, [])
        if not isinstance(raw, list):
            logger.warning("Ignoring malformed user course list")
            return []

        courses = []
        for idx, entry in enumerate(raw):
            try:
                courses.append(Course.model_validate(entry))
            except ValidationError as e:
                logger.warning(f"Skipping corrupt user course at index {idx}: {e.error_count()} error(s)")
        return courses

    def get_courses(self) -> list[Course]:
        """Get all courses: presets first, then user courses."""
        return self.presets + self.get_user_courses()

    def get_course(self, course_id: str) -> Optional[Course]:
        """Get a single course by ID."""
        for course in self.get_courses():
            if course.id == course_id:
                return course
        return None

    # -------------------------------------------------------------------------
    # User Courses
    # -------------------------------------------------------------------------

    def _save_user_courses(self, courses: list[Course]):
        self.store.set_json(
            USER_COURSES_KEY,
            [course.model_dump(mode="json", exclude={"is_user_course"}) for course in courses],
        )

    def add_user_course(self, course: Course) -> Course:
        """
        Append a user course.

        Raises:
            ValueError: If a course with the same ID already exists
        """
        if self.get_course(course.id) is not None:
            raise ValueError(f"Course already exists: {course.id}")

        courses = self.get_user_courses()
        courses.append(course)
        self._save_user_courses(courses)
        logger.info(f"Saved user course {course.id} ({len(course.sections)} sections)")
        return course

    def remove_user_course(self, course_id: str) -> bool:
        """Remove a user course. Returns False if no user course has that ID."""
        courses = self.get_user_courses()
        remaining = [c for c in courses if c.id != course_id]
        if len(remaining) == len(courses):
            return False
        self._save_user_courses(remaining)
        return True
