"""
Markdown renderer - Convert lesson markdown into HTML fragments.

Supports a restricted dialect used by the course editor:
- Headers (#, ##, ###)
- Bold, italic, underline, strikethrough, inline code, links
- Fenced code blocks
- Bullet and numbered list items (emitted one <li> per line, unwrapped)
- Blockquotes
- Tip / Warning / Note / Important callouts
- Newlines as <br>

Precedence (earlier wins when constructs collide):
    line level:   ### > ## > # > "* " > "1. " > "> " > ![TIP] > ![WARNING]
                  > ![NOTE] > ![IMPORTANT] > plain text
    emphasis:     **bold** > *italic* > _underline_ > ~~strike~~

Inline rules run as ordered passes over the whole line. Each pass swaps
the tags it emits for placeholders, so a later pass never matches inside
markup and `**` pairs are consumed before italic looks for `*`. A match
whose body would close a tag it did not open is left as literal text.

Two passes run ahead of emphasis:
- `code` spans are taken out first and never formatted
- link destinations are taken out next; link labels are still formatted

Underline only matches at word boundaries, so snake_case_names stay as
written. Opaque code spans and the word-boundary underline are both
deliberately stricter than naive in-order substitution.

Fenced blocks span lines, so they are cut out before any line is
classified and their bodies are never formatted.

All literal text is HTML-escaped before markup is built around it.
"""

import html
import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional


class BlockKind(str, Enum):
    HEADER_3 = "header_3"
    HEADER_2 = "header_2"
    HEADER_1 = "header_1"
    BULLET_ITEM = "bullet_item"
    NUMBERED_ITEM = "numbered_item"
    BLOCKQUOTE = "blockquote"
    CALLOUT_TIP = "callout_tip"
    CALLOUT_WARNING = "callout_warning"
    CALLOUT_NOTE = "callout_note"
    CALLOUT_IMPORTANT = "callout_important"
    TEXT = "text"
    CODE_BLOCK = "code_block"
    LINE_BREAK = "line_break"


@dataclass
class Block:
    """One unit of tokenized markdown."""
    kind: BlockKind
    body: str = ""                  # raw (unescaped) text after the marker
    marker: Optional[str] = None    # list number or fence language


@dataclass(frozen=True)
class CalloutStyle:
    label: str
    icon: str
    css_class: str


CALLOUT_STYLES: dict[BlockKind, CalloutStyle] = {
    BlockKind.CALLOUT_TIP: CalloutStyle("Tip", "💡", "md-callout-tip"),
    BlockKind.CALLOUT_WARNING: CalloutStyle("Warning", "⚠️", "md-callout-warning"),
    BlockKind.CALLOUT_NOTE: CalloutStyle("Note", "📝", "md-callout-note"),
    BlockKind.CALLOUT_IMPORTANT: CalloutStyle("Important", "❗", "md-callout-important"),
}

# Ordered: the first pattern that matches a line decides its kind.
LINE_RULES: list[tuple[BlockKind, re.Pattern]] = [
    (BlockKind.HEADER_3, re.compile(r"^### (?P<body>.*)$")),
    (BlockKind.HEADER_2, re.compile(r"^## (?P<body>.*)$")),
    (BlockKind.HEADER_1, re.compile(r"^# (?P<body>.*)$")),
    (BlockKind.BULLET_ITEM, re.compile(r"^\* (?P<body>.*)$")),
    (BlockKind.NUMBERED_ITEM, re.compile(r"^(?P<marker>\d+)\. (?P<body>.*)$")),
    (BlockKind.BLOCKQUOTE, re.compile(r"^> (?P<body>.*)$")),
    (BlockKind.CALLOUT_TIP, re.compile(r"^!\[TIP\]\s*(?P<body>.*)$", re.IGNORECASE)),
    (BlockKind.CALLOUT_WARNING, re.compile(r"^!\[WARNING\]\s*(?P<body>.*)$", re.IGNORECASE)),
    (BlockKind.CALLOUT_NOTE, re.compile(r"^!\[NOTE\]\s*(?P<body>.*)$", re.IGNORECASE)),
    (BlockKind.CALLOUT_IMPORTANT, re.compile(r"^!\[IMPORTANT\]\s*(?P<body>.*)$", re.IGNORECASE)),
]

# A language tag only counts when it sits alone on the opening fence line.
FENCE_RE = re.compile(r"```(?:(?P<lang>[\w+-]+)\n)?(?P<body>.*?)```", re.DOTALL)

# Ordered: each rule is one pass over the line, in this order.
INLINE_RULES: list[tuple[str, re.Pattern]] = [
    ("code", re.compile(r"`(?P<body>[^`]+)`")),
    ("link", re.compile(r"\[(?P<label>[^\]]+)\]\((?P<url>[^)\s\x00]+)\)")),
    ("bold", re.compile(r"\*\*(?P<body>.+?)\*\*")),
    ("italic", re.compile(r"\*(?P<body>.+?)\*")),
    ("underline", re.compile(r"(?<!\w)_(?P<body>.+?)_(?!\w)")),
    ("strike", re.compile(r"~~(?P<body>.+?)~~")),
]

PLACEHOLDER_RE = re.compile(r"\x00(\d+)\x00")

UNSAFE_URL_SCHEMES = ("javascript:", "vbscript:", "data:")


# -----------------------------------------------------------------------------
# Tokenizer
# -----------------------------------------------------------------------------

def classify_line(line: str) -> Block:
    """Classify a single raw line into a Block."""
    for kind, pattern in LINE_RULES:
        match = pattern.match(line)
        if match:
            marker = match.groupdict().get("marker")
            return Block(kind=kind, body=match.group("body"), marker=marker)
    return Block(kind=BlockKind.TEXT, body=line)


def _tokenize_lines(segment: str) -> list[Block]:
    blocks = []
    for idx, line in enumerate(segment.split("\n")):
        if idx:
            blocks.append(Block(kind=BlockKind.LINE_BREAK))
        if line:
            blocks.append(classify_line(line))
    return blocks


def _strip_fence_newlines(body: str) -> str:
    return body.removeprefix("\n").removesuffix("\n")


def tokenize(text: str) -> list[Block]:
    """
    Split markdown into blocks.

    Fenced code blocks are cut out first; the text around them is split
    into lines, each classified by LINE_RULES, with a LINE_BREAK block for
    every newline outside a fence.
    """
    text = text.replace("\r\n", "\n")
    blocks = []
    pos = 0
    for match in FENCE_RE.finditer(text):
        blocks.extend(_tokenize_lines(text[pos:match.start()]))
        blocks.append(Block(
            kind=BlockKind.CODE_BLOCK,
            body=_strip_fence_newlines(match.group("body")),
            marker=match.group("lang"),
        ))
        pos = match.end()
    blocks.extend(_tokenize_lines(text[pos:]))
    return blocks


# -----------------------------------------------------------------------------
# Inline rendering
# -----------------------------------------------------------------------------

def sanitize_url(url: str) -> str:
    """Neutralize script-capable URLs. Input and output are HTML-escaped."""
    plain = re.sub(r"[\x00-\x20]", "", html.unescape(url)).lower()
    if plain.startswith(UNSAFE_URL_SCHEMES):
        return "#"
    return url


class MarkupStash:
    """
    Finished markup held out of the text while later passes run.

    Each entry records whether it opens (+1), closes (-1) or is a whole
    element (0), so a candidate body can be checked for tags it would
    cut across.
    """

    def __init__(self):
        self.parts: list[tuple[str, int]] = []

    def put(self, markup: str, depth: int = 0) -> str:
        self.parts.append((markup, depth))
        return f"\x00{len(self.parts) - 1}\x00"

    def is_balanced(self, text: str) -> bool:
        depth = 0
        for match in PLACEHOLDER_RE.finditer(text):
            depth += self.parts[int(match.group(1))][1]
            if depth < 0:
                return False
        return depth == 0

    def wrap(self, match: re.Match, open_tag: str, close_tag: str, group: str = "body") -> str:
        """Surround a match's body with stashed tags, or keep it literal."""
        body = match.group(group)
        if not self.is_balanced(body):
            return match.group(0)
        return self.put(open_tag, 1) + body + self.put(close_tag, -1)

    def restore(self, text: str) -> str:
        return PLACEHOLDER_RE.sub(lambda m: self.parts[int(m.group(1))][0], text)


def _build_code(match: re.Match, stash: MarkupStash) -> str:
    return stash.put(f'<code class="md-code">{match.group("body")}</code>')


def _build_link(match: re.Match, stash: MarkupStash) -> str:
    url = sanitize_url(match.group("url"))
    open_tag = f'<a href="{url}" class="md-link" target="_blank" rel="noopener noreferrer">'
    return stash.wrap(match, open_tag, "</a>", group="label")


def _build_bold(match: re.Match, stash: MarkupStash) -> str:
    return stash.wrap(match, '<strong class="md-bold">', "</strong>")


def _build_italic(match: re.Match, stash: MarkupStash) -> str:
    return stash.wrap(match, '<em class="md-italic">', "</em>")


def _build_underline(match: re.Match, stash: MarkupStash) -> str:
    return stash.wrap(match, '<u class="md-underline">', "</u>")


def _build_strike(match: re.Match, stash: MarkupStash) -> str:
    return stash.wrap(match, '<del class="md-strike">', "</del>")


INLINE_BUILDERS: dict[str, Callable[[re.Match, MarkupStash], str]] = {
    "code": _build_code,
    "link": _build_link,
    "bold": _build_bold,
    "italic": _build_italic,
    "underline": _build_underline,
    "strike": _build_strike,
}


def render_inline(escaped: str) -> str:
    """
    Apply inline rules to already-escaped text.

    Every rule in INLINE_RULES runs once over the whole text, in order.
    Bodies stay in the text, so later passes format inside earlier ones.
    """
    stash = MarkupStash()
    text = escaped.replace("\x00", "")
    for name, pattern in INLINE_RULES:
        build = INLINE_BUILDERS[name]
        text = pattern.sub(lambda match: build(match, stash), text)
    return stash.restore(text)


def _inline(raw: str) -> str:
    return render_inline(html.escape(raw))


# -----------------------------------------------------------------------------
# Block rendering
# -----------------------------------------------------------------------------

def _build_header(level: int) -> Callable[[Block], str]:
    def build(block: Block) -> str:
        return f'<h{level} class="md-h{level}">{_inline(block.body)}</h{level}>'
    return build


def _build_bullet_item(block: Block) -> str:
    return f'<li class="md-item">• {_inline(block.body)}</li>'


def _build_numbered_item(block: Block) -> str:
    return (
        f'<li class="md-item md-numbered">'
        f'<span class="md-number">{block.marker}.</span> {_inline(block.body)}</li>'
    )


def _build_blockquote(block: Block) -> str:
    return f'<blockquote class="md-quote">{_inline(block.body)}</blockquote>'


def _build_callout(block: Block) -> str:
    style = CALLOUT_STYLES[block.kind]
    return (
        f'<div class="md-callout {style.css_class}">'
        f'<span class="md-callout-icon">{style.icon}</span>'
        f'<div><strong class="md-callout-label">{style.label}:</strong> '
        f'<span class="md-callout-body">{_inline(block.body)}</span></div>'
        f'</div>'
    )


def _build_code_block(block: Block) -> str:
    lang_class = f' class="language-{html.escape(block.marker)}"' if block.marker else ""
    return f'<pre class="md-pre"><code{lang_class}>{html.escape(block.body)}</code></pre>'


def _build_text(block: Block) -> str:
    return _inline(block.body)


def _build_line_break(block: Block) -> str:
    return "<br>"


BLOCK_BUILDERS: dict[BlockKind, Callable[[Block], str]] = {
    BlockKind.HEADER_3: _build_header(3),
    BlockKind.HEADER_2: _build_header(2),
    BlockKind.HEADER_1: _build_header(1),
    BlockKind.BULLET_ITEM: _build_bullet_item,
    BlockKind.NUMBERED_ITEM: _build_numbered_item,
    BlockKind.BLOCKQUOTE: _build_blockquote,
    BlockKind.CALLOUT_TIP: _build_callout,
    BlockKind.CALLOUT_WARNING: _build_callout,
    BlockKind.CALLOUT_NOTE: _build_callout,
    BlockKind.CALLOUT_IMPORTANT: _build_callout,
    BlockKind.TEXT: _build_text,
    BlockKind.CODE_BLOCK: _build_code_block,
    BlockKind.LINE_BREAK: _build_line_break,
}


def render_markdown(text: str) -> str:
    """
    Render lesson markdown as an HTML fragment.

    Args:
        text: Raw markdown (never previously rendered HTML)

    Returns:
        HTML string; empty string for empty input
    """
    if not text:
        return ""
    return "".join(BLOCK_BUILDERS[block.kind](block) for block in tokenize(text))


def get_markdown_css() -> str:
    """Get CSS styles for rendered markdown."""
    return """
    <style>
    .md-h1 {
        font-size: 1.6em;
        font-weight: 700;
        margin: 1.2em 0 0.6em;
    }
    .md-h2 {
        font-size: 1.3em;
        font-weight: 700;
        margin: 1em 0 0.5em;
    }
    .md-h3 {
        font-size: 1.1em;
        font-weight: 600;
        margin: 0.8em 0 0.4em;
    }
    .md-code {
        background: #f5f5f5;
        color: #d81b60;
        padding: 0.1em 0.3em;
        border-radius: 4px;
        font-family: monospace;
        font-size: 0.9em;
    }
    .md-pre {
        background: #f5f5f5;
        padding: 1em;
        border-radius: 8px;
        overflow-x: auto;
        margin: 1em 0;
    }
    .md-item {
        margin-left: 1em;
        margin-bottom: 0.25em;
        list-style: none;
    }
    .md-number {
        font-weight: 500;
        color: #666;
    }
    .md-quote {
        border-left: 4px solid #ec407a;
        background: #fce4ec;
        padding: 0.5em 1em;
        margin: 1em 0;
        font-style: italic;
        color: #555;
    }
    .md-link {
        color: #d81b60;
        text-decoration: underline;
    }
    .md-strike {
        color: #888;
        text-decoration: line-through;
    }
    .md-callout {
        display: flex;
        align-items: flex-start;
        gap: 0.5em;
        border-radius: 8px;
        padding: 1em;
        margin: 1em 0;
    }
    .md-callout-tip {
        background: #e3f2fd;
        border: 1px solid #90caf9;
    }
    .md-callout-warning {
        background: #fffde7;
        border: 1px solid #fff176;
    }
    .md-callout-note {
        background: #e8f5e9;
        border: 1px solid #a5d6a7;
    }
    .md-callout-important {
        background: #ffebee;
        border: 1px solid #ef9a9a;
    }
    </style>
    """
