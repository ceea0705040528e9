"""
Markdown renderer tests for StudyBloom.

Covers block classification, inline formatting precedence, escaping and
the exact HTML emitted for each construct.
"""

import pytest

from studybloom.viewer.markdown import (
    Block,
    BlockKind,
    classify_line,
    get_markdown_css,
    render_inline,
    render_markdown,
    sanitize_url,
    tokenize,
)


class TestClassifyLine:
    """Test line-level dispatch."""

    @pytest.mark.parametrize("line,kind", [
        ("# Title", BlockKind.HEADER_1),
        ("## Title", BlockKind.HEADER_2),
        ("### Title", BlockKind.HEADER_3),
        ("* item", BlockKind.BULLET_ITEM),
        ("12. item", BlockKind.NUMBERED_ITEM),
        ("> quote", BlockKind.BLOCKQUOTE),
        ("![TIP] x", BlockKind.CALLOUT_TIP),
        ("![WARNING] x", BlockKind.CALLOUT_WARNING),
        ("![NOTE] x", BlockKind.CALLOUT_NOTE),
        ("![IMPORTANT] x", BlockKind.CALLOUT_IMPORTANT),
        ("plain text", BlockKind.TEXT),
        ("#no space", BlockKind.TEXT),
        ("*not a bullet*", BlockKind.TEXT),
    ])
    def test_kinds(self, line, kind):
        assert classify_line(line).kind == kind

    def test_header_body_excludes_marker(self):
        assert classify_line("### Deep").body == "Deep"

    def test_numbered_item_keeps_number(self):
        block = classify_line("7. Seventh")
        assert block.marker == "7"
        assert block.body == "Seventh"

    def test_callout_tag_case_insensitive(self):
        assert classify_line("![tip] lower").kind == BlockKind.CALLOUT_TIP
        assert classify_line("![Warning] mixed").kind == BlockKind.CALLOUT_WARNING

    def test_callout_without_space(self):
        block = classify_line("![NOTE]Tight")
        assert block.kind == BlockKind.CALLOUT_NOTE
        assert block.body == "Tight"


class TestTokenize:
    """Test splitting text into blocks."""

    def test_line_breaks_between_lines(self):
        kinds = [b.kind for b in tokenize("a\nb")]
        assert kinds == [BlockKind.TEXT, BlockKind.LINE_BREAK, BlockKind.TEXT]

    def test_blank_line_gives_two_breaks(self):
        kinds = [b.kind for b in tokenize("a\n\nb")]
        assert kinds == [
            BlockKind.TEXT, BlockKind.LINE_BREAK, BlockKind.LINE_BREAK, BlockKind.TEXT,
        ]

    def test_fence_cut_out_first(self):
        blocks = tokenize("```python\n# not a header\n```")
        assert blocks == [Block(kind=BlockKind.CODE_BLOCK, body="# not a header", marker="python")]

    def test_fence_without_language(self):
        blocks = tokenize("```\nplain\n```")
        assert blocks == [Block(kind=BlockKind.CODE_BLOCK, body="plain", marker=None)]

    def test_crlf_normalized(self):
        kinds = [b.kind for b in tokenize("a\r\nb")]
        assert kinds == [BlockKind.TEXT, BlockKind.LINE_BREAK, BlockKind.TEXT]


class TestHeaders:
    """Test header level selection."""

    def test_h1(self):
        assert render_markdown("# Title") == '<h1 class="md-h1">Title</h1>'

    def test_h2(self):
        assert render_markdown("## Title") == '<h2 class="md-h2">Title</h2>'

    def test_h3(self):
        assert render_markdown("### Title") == '<h3 class="md-h3">Title</h3>'

    def test_header_with_inline(self):
        assert render_markdown("# **Big**") == '<h1 class="md-h1"><strong class="md-bold">Big</strong></h1>'


class TestInline:
    """Test inline formatting and precedence."""

    def test_bold(self):
        assert render_markdown("**x**") == '<strong class="md-bold">x</strong>'

    def test_italic(self):
        assert render_markdown("*x*") == '<em class="md-italic">x</em>'

    def test_bold_wins_over_italic(self):
        assert "md-italic" not in render_markdown("**x**")

    def test_bold_and_italic_together(self):
        assert render_markdown("**a** *b*") == (
            '<strong class="md-bold">a</strong> <em class="md-italic">b</em>'
        )

    def test_italic_inside_bold(self):
        assert render_markdown("**a *b* c**") == (
            '<strong class="md-bold">a <em class="md-italic">b</em> c</strong>'
        )

    def test_underline(self):
        assert render_markdown("_under_") == '<u class="md-underline">under</u>'

    def test_underscores_inside_words_untouched(self):
        assert render_markdown("snake_case_name") == "snake_case_name"

    def test_inline_code(self):
        assert render_markdown("use `x`") == 'use <code class="md-code">x</code>'

    def test_code_span_not_formatted(self):
        assert render_markdown("`**x**`") == '<code class="md-code">**x**</code>'

    def test_bold_inside_italic(self):
        assert render_markdown("*a **b** c*") == (
            '<em class="md-italic">a <strong class="md-bold">b</strong> c</em>'
        )

    def test_lone_asterisk_before_bold(self):
        assert render_markdown("2 * 3 = **six**") == '2 * 3 = <strong class="md-bold">six</strong>'

    def test_crossed_emphasis_left_literal(self):
        assert render_markdown("**a *b** c*") == '<strong class="md-bold">a *b</strong> c*'

    def test_code_inside_bold(self):
        assert render_markdown("**a `b` c**") == (
            '<strong class="md-bold">a <code class="md-code">b</code> c</strong>'
        )

    def test_strikethrough(self):
        assert render_markdown("~~old~~") == '<del class="md-strike">old</del>'

    def test_strikethrough_around_bold(self):
        assert render_markdown("~~**gone**~~") == (
            '<del class="md-strike"><strong class="md-bold">gone</strong></del>'
        )

    def test_placeholder_bytes_in_input_dropped(self):
        assert render_markdown("a\x000\x00b") == "a0b"

    def test_render_inline_expects_escaped_text(self):
        assert render_inline("a &lt; b") == "a &lt; b"


class TestLinks:
    """Test link rendering and URL safety."""

    def test_link(self):
        assert render_markdown("[text](http://example.com)") == (
            '<a href="http://example.com" class="md-link" target="_blank" '
            'rel="noopener noreferrer">text</a>'
        )

    def test_url_underscores_not_formatted(self):
        html = render_markdown("[doc](http://example.com/my_file_name)")
        assert 'href="http://example.com/my_file_name"' in html
        assert "<u" not in html

    def test_url_ampersand_escaped(self):
        html = render_markdown("[q](http://example.com/?a=1&b=2)")
        assert 'href="http://example.com/?a=1&amp;b=2"' in html

    def test_formatted_label(self):
        html = render_markdown("[**bold**](http://example.com)")
        assert '<strong class="md-bold">bold</strong></a>' in html

    @pytest.mark.parametrize("url", [
        "javascript:alert(1)",
        "JavaScript:alert(1)",
        "vbscript:msgbox",
        "data:text/html,hi",
    ])
    def test_unsafe_schemes_neutralized(self, url):
        html = render_markdown(f"[click]({url})")
        assert 'href="#"' in html

    def test_sanitize_url_passes_safe(self):
        assert sanitize_url("https://example.com") == "https://example.com"
        assert sanitize_url("/relative/path") == "/relative/path"

    def test_sanitize_url_ignores_control_chars(self):
        assert sanitize_url("java\tscript:alert(1)") == "#"


class TestCallouts:
    """Test callout blocks."""

    @pytest.mark.parametrize("tag,css_class,label,icon", [
        ("TIP", "md-callout-tip", "Tip", "💡"),
        ("WARNING", "md-callout-warning", "Warning", "⚠️"),
        ("NOTE", "md-callout-note", "Note", "📝"),
        ("IMPORTANT", "md-callout-important", "Important", "❗"),
    ])
    def test_each_kind(self, tag, css_class, label, icon):
        html = render_markdown(f"![{tag}] Hello")
        assert html == (
            f'<div class="md-callout {css_class}">'
            f'<span class="md-callout-icon">{icon}</span>'
            f'<div><strong class="md-callout-label">{label}:</strong> '
            f'<span class="md-callout-body">Hello</span></div>'
            f'</div>'
        )

    def test_kinds_do_not_cross_match(self):
        classes = ["md-callout-tip", "md-callout-warning", "md-callout-note", "md-callout-important"]
        for tag, own in zip(["TIP", "WARNING", "NOTE", "IMPORTANT"], classes):
            html = render_markdown(f"![{tag}] Hello")
            assert [c for c in classes if c in html] == [own]

    def test_body_formatted_and_escaped(self):
        html = render_markdown("![NOTE] **Key** <b>")
        assert '<strong class="md-bold">Key</strong>' in html
        assert "&lt;b&gt;" in html


class TestBlocks:
    """Test list items, quotes, code blocks and breaks."""

    def test_bullet_item(self):
        assert render_markdown("* item") == '<li class="md-item">• item</li>'

    def test_numbered_item(self):
        assert render_markdown("2. Second") == (
            '<li class="md-item md-numbered"><span class="md-number">2.</span> Second</li>'
        )

    def test_list_items_not_wrapped(self):
        html = render_markdown("* a\n* b")
        assert "<ul" not in html
        assert html.count("<li") == 2

    def test_blockquote_then_text(self):
        assert render_markdown("> A quote\n\nNormal text") == (
            '<blockquote class="md-quote">A quote</blockquote><br><br>Normal text'
        )

    def test_newlines_become_breaks(self):
        assert render_markdown("a\nb") == "a<br>b"

    def test_fenced_block(self):
        assert render_markdown("```python\nx = **1**\n```") == (
            '<pre class="md-pre"><code class="language-python">x = **1**</code></pre>'
        )

    def test_fenced_block_keeps_inner_newlines(self):
        html = render_markdown("```\na\nb\n```")
        assert html == '<pre class="md-pre"><code>a\nb</code></pre>'

    def test_text_around_fence(self):
        html = render_markdown("before\n```\ncode\n```\nafter")
        assert html.startswith("before<br>")
        assert html.endswith("<br>after")


class TestSafety:
    """Test escaping and robustness."""

    def test_empty(self):
        assert render_markdown("") == ""

    def test_html_escaped(self):
        html = render_markdown("<script>alert(1)</script>")
        assert "<script>" not in html
        assert "&lt;script&gt;" in html

    def test_fence_body_escaped(self):
        assert "&lt;div&gt;" in render_markdown("```\n<div>\n```")

    @pytest.mark.parametrize("text", [
        "*", "**", "_", "`", "[", "](", "```", "```unterminated", "> ", "![TIP]",
        "\n\n\n", "1.", "*_`[x](y)`_*", "**unclosed *mixed", "[a](b) [c](",
        "# ", "#", "\r\n\r\n", "🌸 **emoji** 🌸",
    ])
    def test_never_raises(self, text):
        assert isinstance(render_markdown(text), str)

    def test_deterministic(self):
        text = "# T\n* **a** _b_ `c` [d](http://e)"
        assert render_markdown(text) == render_markdown(text)


class TestMarkdownCss:
    """Test the stylesheet."""

    def test_css_covers_emitted_classes(self):
        css = get_markdown_css()
        assert css.strip().startswith("<style>")
        for cls in ["md-h1", "md-code", "md-pre", "md-item", "md-quote", "md-link", "md-strike",
                    "md-callout-tip", "md-callout-warning", "md-callout-note", "md-callout-important"]:
            assert f".{cls}" in css
