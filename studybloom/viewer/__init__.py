"""
StudyBloom Viewer - Rendering components for course display.

This module provides:
- Markdown rendering for lesson content
- Course cards, progress bars and section pages
- Assistant suggestion cards
"""

from .markdown import (
    render_markdown,
    render_inline,
    tokenize,
    classify_line,
    sanitize_url,
    get_markdown_css,
    Block,
    BlockKind,
    CalloutStyle,
    CALLOUT_STYLES,
)

from .course import (
    get_course_css,
    render_progress_bar,
    render_section_chips,
    render_course_card,
    render_completion_badge,
    render_section_content,
    render_congratulations,
)

from .assistant import (
    get_assistant_css,
    render_suggestion_card,
)

__all__ = [
    # Markdown
    "render_markdown",
    "render_inline",
    "tokenize",
    "classify_line",
    "sanitize_url",
    "get_markdown_css",
    "Block",
    "BlockKind",
    "CalloutStyle",
    "CALLOUT_STYLES",
    # Course
    "get_course_css",
    "render_progress_bar",
    "render_section_chips",
    "render_course_card",
    "render_completion_badge",
    "render_section_content",
    "render_congratulations",
    # Assistant
    "get_assistant_css",
    "render_suggestion_card",
]
