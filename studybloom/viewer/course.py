"""
Course renderer - Generate HTML for dashboard cards and section pages.

Features:
- Course cards with completable-section chips and a progress bar
- Section pages with rendered markdown content
- Completion badges and the all-done banner
"""

import html

from studybloom.classroom.progress import display_percent, percent_complete
from studybloom.schemas import Course, Section

from .markdown import render_markdown


MAX_CARD_CHIPS = 3


def get_course_css() -> str:
    """Get CSS styles for course cards and section pages."""
    return """
    <style>
    .course-card {
        background: white;
        border: 1px solid #f8bbd0;
        border-radius: 12px;
        padding: 1.2em 1.5em;
        margin: 0.5em 0 1em;
        box-shadow: 0 2px 6px rgba(0,0,0,0.06);
    }
    .course-card-header {
        display: flex;
        align-items: center;
        gap: 0.6em;
    }
    .course-emoji {
        font-size: 2em;
    }
    .course-title {
        font-size: 1.2em;
        font-weight: 700;
        color: #ad1457;
    }
    .course-author {
        font-size: 0.85em;
        color: #888;
    }
    .course-description {
        color: #555;
        margin: 0.6em 0;
    }
    .section-chips {
        display: flex;
        flex-wrap: wrap;
        gap: 0.4em;
        margin: 0.6em 0;
    }
    .section-chip {
        background: #fce4ec;
        color: #ad1457;
        border-radius: 999px;
        padding: 0.15em 0.7em;
        font-size: 0.8em;
    }
    .section-chip-done {
        background: #e8f5e9;
        color: #2e7d32;
    }
    .progress-row {
        display: flex;
        justify-content: space-between;
        font-size: 0.85em;
        color: #666;
        margin-top: 0.6em;
    }
    .progress-value {
        font-weight: 700;
        color: #ec407a;
    }
    .progress-track {
        background: #f5f5f5;
        border-radius: 999px;
        height: 8px;
        overflow: hidden;
        margin-top: 0.3em;
    }
    .progress-fill {
        background: linear-gradient(90deg, #f48fb1 0%, #ec407a 100%);
        height: 100%;
        border-radius: 999px;
    }
    .section-page {
        background: white;
        border: 1px solid #eee;
        border-radius: 8px;
        padding: 1.5em;
    }
    .completion-badge {
        display: inline-block;
        border-radius: 6px;
        padding: 0.2em 0.6em;
        font-size: 0.85em;
        font-weight: 600;
    }
    .completion-badge-done {
        background: #e8f5e9;
        color: #2e7d32;
    }
    .completion-badge-todo {
        background: #fce4ec;
        color: #ad1457;
    }
    .congrats-banner {
        background: linear-gradient(135deg, #fce4ec 0%, #e3f2fd 100%);
        border-radius: 12px;
        padding: 1.5em;
        text-align: center;
        margin: 1em 0;
    }
    </style>
    """


def render_progress_bar(percent: float) -> str:
    """Render a labelled progress bar. `percent` is the unrounded value."""
    shown = display_percent(percent)
    width = max(0.0, min(100.0, percent))
    return (
        f'<div class="progress-row"><span>Progress</span>'
        f'<span class="progress-value">{shown}%</span></div>'
        f'<div class="progress-track"><div class="progress-fill" style="width:{width:.1f}%"></div></div>'
    )


def render_section_chips(course: Course, completed: set[str]) -> str:
    """Render up to MAX_CARD_CHIPS completable section titles plus a "+N more" chip."""
    completable = [s for s in course.sections if course.is_completable(s.id)]
    if not completable:
        return ""

    chips = []
    for section in completable[:MAX_CARD_CHIPS]:
        done_class = " section-chip-done" if section.id in completed else ""
        chips.append(f'<span class="section-chip{done_class}">{html.escape(section.title)}</span>')
    if len(completable) > MAX_CARD_CHIPS:
        chips.append(f'<span class="section-chip">+{len(completable) - MAX_CARD_CHIPS} more</span>')

    return f'<div class="section-chips">{"".join(chips)}</div>'


def render_course_card(course: Course, completed: set[str]) -> str:
    """Render a dashboard card for a course."""
    parts = ['<div class="course-card">']
    parts.append(
        f'<div class="course-card-header">'
        f'<span class="course-emoji">{html.escape(course.emoji)}</span>'
        f'<span class="course-title">{html.escape(course.title)}</span>'
        f'</div>'
    )
    if course.author:
        parts.append(f'<div class="course-author">by {html.escape(course.author)}</div>')
    if course.description:
        parts.append(f'<div class="course-description">{html.escape(course.description)}</div>')

    parts.append(render_section_chips(course, completed))
    parts.append(render_progress_bar(percent_complete(course, completed)))
    parts.append('</div>')
    return ''.join(parts)


def render_completion_badge(is_completed: bool) -> str:
    if is_completed:
        return '<span class="completion-badge completion-badge-done">✓ Completed</span>'
    return '<span class="completion-badge completion-badge-todo">Not completed</span>'


def render_section_content(section: Section) -> str:
    """Render a section page: title plus its markdown content."""
    parts = [f'<h1>{html.escape(section.icon)} {html.escape(section.title)}</h1>']
    if section.description:
        parts.append(f'<p style="color:#666;font-style:italic;">{html.escape(section.description)}</p>')
    if section.content:
        parts.append(f'<div class="section-page">{render_markdown(section.content)}</div>')
    else:
        parts.append('<div class="section-page"><em>No content yet.</em></div>')
    return ''.join(parts)


def render_congratulations(course: Course) -> str:
    """Banner shown once every completable section is done."""
    return (
        f'<div class="congrats-banner">'
        f'<h2>Congratulations! 🎓</h2>'
        f'<p>You\'ve completed all the study sections of {html.escape(course.title)}.</p>'
        f'</div>'
    )
