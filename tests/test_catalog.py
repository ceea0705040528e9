"""
Course catalog tests for StudyBloom.

Tests preset loading (including the bundled SCM guide) and user course
persistence.
"""

from datetime import datetime

import pytest
from pydantic import ValidationError

from studybloom.classroom import CourseCatalog, load_preset_courses
from studybloom.schemas import Course, Section
from studybloom.utils import USER_COURSES_KEY


def user_course(course_id="user_course_1", title="My Course"):
    return Course(
        id=course_id,
        title=title,
        sections=[Section(id="s1", title="One"), Section(id="s2", title="Two")],
        completable_sections=["s1", "s2"],
        author="Ada Lovelace",
        created_at=datetime(2024, 5, 1, 12, 0),
        tags=["python"],
    )


class TestPresetCourses:
    """Test bundled preset courses."""

    def test_scm_preset(self):
        courses = load_preset_courses()
        scm = next(c for c in courses if c.id == "scm")
        assert scm.title == "SCM Study Guide"
        assert scm.emoji == "🌸"
        assert scm.section_ids == [
            "home", "ai_dictionary", "fundamentals", "planning_scheduling",
            "finance_logistics", "security_sustainability", "revision_toolkit",
        ]
        assert scm.completable_sections == [
            "fundamentals", "planning_scheduling",
            "finance_logistics", "security_sustainability",
        ]
        assert scm.is_user_course is False

    def test_every_section_has_content(self):
        for course in load_preset_courses():
            for section in course.sections:
                assert section.content, f"{course.id}/{section.id} has no content"

    def test_custom_directory(self, tmp_path):
        (tmp_path / "b.yaml").write_text("id: b\ntitle: B\n", encoding="utf-8")
        (tmp_path / "a.yaml").write_text("id: a\ntitle: A\n", encoding="utf-8")
        assert [c.id for c in load_preset_courses(tmp_path)] == ["a", "b"]

    def test_non_yaml_files_ignored(self, tmp_path):
        (tmp_path / "a.yaml").write_text("id: a\ntitle: A\n", encoding="utf-8")
        (tmp_path / "notes.txt").write_text("id: notes\n", encoding="utf-8")
        assert [c.id for c in load_preset_courses(tmp_path)] == ["a"]

    def test_missing_directory(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_preset_courses(tmp_path / "missing")

    def test_invalid_preset(self, tmp_path):
        (tmp_path / "bad.yaml").write_text(
            "id: bad\ntitle: Bad\ncompletable_sections: [ghost]\n", encoding="utf-8"
        )
        with pytest.raises(ValidationError):
            load_preset_courses(tmp_path)


class TestCourseCatalog:
    """Test the combined catalog."""

    def test_presets_first(self, store):
        catalog = CourseCatalog(store)
        catalog.add_user_course(user_course())
        ids = [c.id for c in catalog.get_courses()]
        assert ids[0] == "scm"
        assert ids[-1] == "user_course_1"

    def test_add_and_reload(self, store):
        CourseCatalog(store).add_user_course(user_course())
        course = CourseCatalog(store).get_course("user_course_1")
        assert course is not None
        assert course.author == "Ada Lovelace"
        assert course.is_user_course is True
        assert course.created_at == datetime(2024, 5, 1, 12, 0)

    def test_duplicate_id_rejected(self, store):
        catalog = CourseCatalog(store)
        catalog.add_user_course(user_course())
        with pytest.raises(ValueError):
            catalog.add_user_course(user_course(title="Again"))
        with pytest.raises(ValueError):
            catalog.add_user_course(user_course(course_id="scm"))

    def test_get_missing_course(self, store):
        assert CourseCatalog(store).get_course("nope") is None

    def test_remove_user_course(self, store):
        catalog = CourseCatalog(store)
        catalog.add_user_course(user_course())
        assert catalog.remove_user_course("user_course_1") is True
        assert catalog.remove_user_course("user_course_1") is False
        assert catalog.remove_user_course("scm") is False
        assert catalog.get_user_courses() == []

    def test_corrupt_entries_skipped(self, store):
        good = user_course().model_dump(mode="json", exclude={"is_user_course"})
        store.set_json(USER_COURSES_KEY, [{"id": "broken"}, good])
        assert [c.id for c in CourseCatalog(store).get_user_courses()] == ["user_course_1"]

    def test_malformed_list_ignored(self, store):
        store.set_json(USER_COURSES_KEY, {"not": "a list"})
        assert CourseCatalog(store).get_user_courses() == []
