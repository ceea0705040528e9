"""Shared fixtures for StudyBloom tests."""

import pytest

from studybloom.schemas import Course, Section, SectionType
from studybloom.utils import KeyValueStore


@pytest.fixture
def store(tmp_path):
    return KeyValueStore(tmp_path / "storage.db")


@pytest.fixture
def course():
    """Four sections, two of them completable."""
    return Course(
        id="demo",
        title="Demo Course",
        sections=[
            Section(id="intro", title="Intro", type=SectionType.RESOURCE),
            Section(id="a", title="Lesson A", content="# A"),
            Section(id="b", title="Lesson B", content="# B"),
            Section(id="quiz", title="Quiz", type=SectionType.QUIZ),
        ],
        completable_sections=["a", "b"],
    )
