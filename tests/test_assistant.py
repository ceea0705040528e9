"""
Mock assistant tests for StudyBloom.
"""

import pytest

from studybloom.builder import generate_suggestions, load_suggestion_entries
from studybloom.schemas import CourseDraft, SuggestionType


class TestGenerateSuggestions:
    """Test step and condition filtering of bundled suggestions."""

    def test_details_step_empty_draft(self):
        ids = [s.id for s in generate_suggestions(CourseDraft(), 1)]
        assert ids == ["title_suggestion", "description_suggestion"]

    def test_details_step_good_draft(self):
        draft = CourseDraft(
            title="A sufficiently long title",
            description="x" * 60,
            category="Business",
            level="Beginner",
        )
        ids = [s.id for s in generate_suggestions(draft, 1)]
        assert ids == ["tags_suggestion"]

    def test_tags_need_level(self):
        draft = CourseDraft(title="A sufficiently long title", description="x" * 60)
        assert generate_suggestions(draft, 1) == []

    def test_structure_step(self):
        suggestions = generate_suggestions(CourseDraft(), 2)
        assert [s.type for s in suggestions] == [SuggestionType.STRUCTURE, SuggestionType.IMPROVEMENT]
        assert len(suggestions[0].data["sections"]) == 8

    def test_content_step(self):
        suggestions = generate_suggestions(CourseDraft(), 3)
        assert suggestions[0].type == SuggestionType.CONTENT
        assert "outline" in suggestions[0].data

    def test_unknown_step(self):
        assert generate_suggestions(CourseDraft(), 4) == []

    def test_custom_file(self, tmp_path):
        path = tmp_path / "s.yaml"
        path.write_text(
            "suggestions:\n"
            "  - step: 1\n"
            "    id: only\n"
            "    type: title\n"
            "    title: T\n"
            "    description: D\n"
            "    action: A\n"
            "    confidence: 50\n",
            encoding="utf-8",
        )
        assert [s.id for s in generate_suggestions(CourseDraft(), 1, path=path)] == ["only"]

    def test_unknown_condition(self, tmp_path):
        path = tmp_path / "s.yaml"
        path.write_text("suggestions:\n  - step: 1\n    when: sometimes\n", encoding="utf-8")
        with pytest.raises(ValueError):
            load_suggestion_entries(path)

    def test_bundled_entries_loaded_by_name(self):
        entries = load_suggestion_entries()
        assert entries
        assert {entry["step"] for entry in entries} == {1, 2, 3}
