"""
Renderer module for docx2html.
Turns the in-memory document model into a standalone HTML page.
"""

from __future__ import annotations

import re

from .config import Config
from .model import Cell, Document, Paragraph, Row, Run, Table

# {{{...}}} marks text that must never reach the output
IGNORED_TEXT_PATTERN = re.compile(r"\{\{\{[^}]*\}\}\}")

HEADING_STYLES = ("Heading1", "Heading2", "Heading3", "Heading4", "Heading5", "Heading6")

MAX_STYLE_HEADING_LEVEL = 6


def escape_html(text: str | None) -> str:
    """Escape HTML special characters. Ampersand goes first."""
    if text is None:
        return ""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&#39;")
    )


def strip_ignored_text(text: str) -> str:
    """Remove every {{{...}}} directive from text."""
    return IGNORED_TEXT_PATTERN.sub("", text)


def is_blank(text: str | None) -> bool:
    return text is None or not text.strip()


def is_heading_style(style: str | None) -> bool:
    """Check whether a paragraph style id marks a heading."""
    if not style:
        return False
    return style.lower().startswith("heading") or style in HEADING_STYLES


def heading_level(style: str | None) -> int:
    """
    Derive the heading level from a style id.

    Digits 1-9 are tried in numeric order against the lower-cased style, so
    "heading21" yields 1, not 2. Levels above 6 are clamped; no digit means 1.
    """
    if style is None:
        return 1

    style = style.lower()
    if "heading" in style:
        for digit in range(1, 10):
            if str(digit) in style:
                return min(digit, MAX_STYLE_HEADING_LEVEL)

    return 1


def paragraph_tag(paragraph: Paragraph) -> str:
    """Pick the block tag for a non-empty paragraph."""
    if is_heading_style(paragraph.style):
        return f"h{heading_level(paragraph.style)}"

    outline_level = paragraph.outline_level
    if outline_level is not None and 0 <= outline_level <= 8:
        # Not clamped: outline level 8 renders as <h9>
        return f"h{outline_level + 1}"

    return "p"


def format_run(run: Run, strip_ignored: bool = True) -> str:
    """Render one run as escaped text wrapped in strong/em/u tags."""
    text = run.text
    if not text:
        return ""

    if strip_ignored:
        text = strip_ignored_text(text)
        if not text:
            return ""

    parts = []
    if run.bold:
        parts.append("<strong>")
    if run.italic:
        parts.append("<em>")
    if run.underline:
        parts.append("<u>")

    parts.append(escape_html(text))

    # Close in reverse order
    if run.underline:
        parts.append("</u>")
    if run.italic:
        parts.append("</em>")
    if run.bold:
        parts.append("</strong>")

    return "".join(parts)


def format_runs(paragraph: Paragraph, strip_ignored: bool = True) -> str:
    """Render all runs of a paragraph, in order."""
    return "".join(format_run(run, strip_ignored) for run in paragraph.runs if isinstance(run, Run))


def render_paragraph(paragraph: Paragraph, strip_ignored: bool = True) -> str:
    """Render a body paragraph as a heading or <p> line. Blank paragraphs render nothing."""
    if is_blank(paragraph.text):
        return ""

    tag = paragraph_tag(paragraph)
    return f"    <{tag}>{format_runs(paragraph, strip_ignored)}</{tag}>\n"


def render_cell_content(paragraphs: tuple[Paragraph, ...], strip_ignored: bool = True) -> str:
    """
    Render the paragraphs of a table cell.

    A non-empty paragraph that is not the last one in the cell is followed by
    <br>. Empty paragraphs emit nothing, not even a separator.
    """
    parts = []
    last_index = len(paragraphs) - 1
    for i, paragraph in enumerate(paragraphs):
        if not isinstance(paragraph, Paragraph) or is_blank(paragraph.text):
            continue
        parts.append(format_runs(paragraph, strip_ignored))
        if i < last_index:
            parts.append("<br>")
    return "".join(parts)


def render_table(table: Table, strip_ignored: bool = True) -> str:
    """Render a table; the first row always becomes header cells."""
    lines = ["    <table>\n"]

    for i, row in enumerate(table.rows):
        if not isinstance(row, Row):
            continue
        cell_tag = "th" if i == 0 else "td"
        lines.append("        <tr>\n")
        for cell in row.cells:
            if not isinstance(cell, Cell):
                continue
            content = render_cell_content(cell.paragraphs, strip_ignored)
            lines.append(f"            <{cell_tag}>{content}</{cell_tag}>\n")
        lines.append("        </tr>\n")

    lines.append("    </table>\n\n")
    return "".join(lines)


def render_body(document: Document | None, strip_ignored: bool = True) -> str:
    """Render every block of the document in order."""
    if document is None:
        return ""

    parts = []
    for block in document.blocks:
        if isinstance(block, Paragraph):
            parts.append(render_paragraph(block, strip_ignored))
        elif isinstance(block, Table):
            parts.append(render_table(block, strip_ignored))
    return "".join(parts)


def render_head(config: Config) -> str:
    """Render the fixed page header up to and including <body>."""
    rules = "".join(f"        {selector} {{ {declarations} }}\n" for selector, declarations in config.styles.items())
    return (
        "<!DOCTYPE html>\n"
        f'<html lang="{escape_html(config.lang)}">\n'
        "<head>\n"
        '    <meta charset="UTF-8">\n'
        '    <meta name="viewport" content="width=device-width, initial-scale=1.0">\n'
        f"    <title>{escape_html(config.title)}</title>\n"
        "    <style>\n"
        f"{rules}"
        "    </style>\n"
        "</head>\n"
        "<body>\n\n"
    )


def render(document: Document | None, config: Config | None = None) -> str:
    """
    Convert a document model to a complete HTML page.

    Args:
        document: Document model (None renders an empty body)
        config: Configuration object (uses defaults if None)

    Returns:
        The HTML page as a string
    """
    if config is None:
        config = Config()

    body = render_body(document, config.strip_ignored_text)
    return f"{render_head(config)}{body}\n</body>\n</html>"
