"""
Template renderer.

Walks a parsed ResumeDocument and lays it out with a PageLayoutEngine, using
one StyleConfig for every size, color and spacing decision. Templates differ
only in data: the drawing functions below read the style's toggles
(contact_mode, title_date_layout, highlight_links, full_width_section_rule)
instead of branching on template ids.

Documents without sections are handed to the line-by-line fallback layout.
"""

import re
from typing import List, Optional, Tuple

from quill.contexts.rendering.fallback_renderer import render_fallback
from quill.contexts.rendering.layout_engine import RenderedDocument
from quill.contexts.rendering.logger import _log_debug, log_render_result
from quill.contexts.rendering.render_context import RenderContext
from quill.contexts.templating.contact import ContactItem, extract_contact_items, is_link_text
from quill.contexts.templating.patterns import (
    ResumeLinePatterns,
    has_year,
    is_bullet_line,
    strip_bullet,
)
from quill.contexts.templating.resume_data_structure import (
    HeaderBlock,
    Item,
    ItemKind,
    RawLine,
    ResumeDocument,
    Section,
)
from quill.contexts.templating.style_config import ContactMode, StyleConfig, TitleDateLayout

# Source indentation (in columns) per nesting level of indented bullets
NESTING_COLUMNS = 2
MAX_NESTING_LEVEL = 3

# Dates inside a title line: "Jan 2020 - Present", "2019 – 2021", "2020"
_DATE_IN_TITLE = (
    r"(?:(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec)[a-z]*\.?\s+)?"
    + ResumeLinePatterns.YEAR_RANGE
)


# =============================================================================
# HEADER
# =============================================================================


def header_contact_items(style: StyleConfig, header: HeaderBlock) -> List[ContactItem]:
    """Contact items for the header, using the template's contact mode."""
    if style.toggles.contact_mode is ContactMode.REGEX:
        return extract_contact_items(header.detail_lines)
    return [
        ContactItem(text=fragment, is_link=is_link_text(fragment))
        for fragment in header.contact_fragments
    ]


def pack_contact_rows(ctx: RenderContext, items: List[ContactItem]) -> List[List[ContactItem]]:
    """
    Group contact items into rows that fit the content width.

    Items are never split; an item wider than the page gets a row of its own.
    """
    separator_width = ctx.text_width(ctx.style.contact_separator, "contact")
    rows: List[List[ContactItem]] = []
    row: List[ContactItem] = []
    row_width = 0.0

    for item in items:
        item_width = ctx.text_width(item.text, "contact")
        extended = row_width + separator_width + item_width if row else item_width
        if row and extended > ctx.style.content_width:
            rows.append(row)
            row, row_width = [item], item_width
        else:
            row.append(item)
            row_width = extended

    if row:
        rows.append(row)
    return rows


def _draw_contact_row(ctx: RenderContext, row: List[ContactItem]) -> None:
    style = ctx.style
    separator = style.contact_separator
    widths = [ctx.text_width(item.text, "contact") for item in row]
    separator_width = ctx.text_width(separator, "contact")
    total = sum(widths) + separator_width * (len(row) - 1)

    x = style.content_left + (style.content_width - total) / 2
    for index, (item, width) in enumerate(zip(row, widths)):
        highlight = style.toggles.highlight_links and item.is_link
        ctx.draw(item.text, x, "contact", color=style.color_for("link") if highlight else None)
        x += width
        if index < len(row) - 1:
            ctx.draw(separator, x, "contact")
            x += separator_width


def render_header(ctx: RenderContext, header: HeaderBlock) -> None:
    """Name, tagline, contact rows, then a horizontal rule across the content width."""
    if header.is_empty:
        return

    style = ctx.style
    spacing = style.spacing
    engine = ctx.engine

    ctx.draw_wrapped(
        header.name,
        "name",
        style.content_left,
        style.content_width,
        style.size_for("name"),
        centered=True,
    )
    engine.advance(spacing.after_name)

    if header.tagline:
        ctx.draw_wrapped(
            header.tagline,
            "tagline",
            style.content_left,
            style.content_width,
            spacing.line_height,
            centered=True,
        )
        engine.advance(spacing.paragraph_gap)

    rows = pack_contact_rows(ctx, header_contact_items(style, header))
    for row in rows:
        engine.ensure_space(spacing.line_height)
        _draw_contact_row(ctx, row)
        engine.advance(spacing.line_height)
    if rows:
        engine.advance(spacing.paragraph_gap)

    engine.advance(max(spacing.after_contact - spacing.paragraph_gap, 0))
    engine.ensure_space(style.header_rule_thickness)
    engine.draw_line(
        (style.content_left, engine.cursor_y),
        (style.content_right, engine.cursor_y),
        style.header_rule_thickness,
        style.color_for("header_rule"),
    )
    engine.advance(spacing.between_sections)


# =============================================================================
# SECTIONS
# =============================================================================


def render_section_header(ctx: RenderContext, title: str) -> None:
    """Bold title flush left with an underline (title width + padding, or full width)."""
    style = ctx.style
    spacing = style.spacing
    engine = ctx.engine

    engine.ensure_space(spacing.section_keep)
    ctx.draw(title, style.content_left, "section_header")
    engine.advance(style.size_for("section_header") + spacing.section_underline_offset)

    if style.toggles.full_width_section_rule:
        end_x = style.content_right
    else:
        end_x = min(
            style.content_left + ctx.text_width(title, "section_header") + spacing.underline_padding,
            style.content_right,
        )
    engine.draw_line(
        (style.content_left, engine.cursor_y),
        (end_x, engine.cursor_y),
        style.section_rule_thickness,
        style.color_for("section_rule"),
    )
    engine.advance(spacing.after_section_header)


def nesting_level(line: RawLine) -> int:
    """Nesting depth of a bullet from its source indentation (0 = top level)."""
    return min(line.indent // NESTING_COLUMNS, MAX_NESTING_LEVEL)


def render_bullet(ctx: RenderContext, line: RawLine, glyph_offset: float, text_offset: float) -> None:
    """
    Draw a bullet glyph and its wrapped text.

    Offsets are relative to the left content edge; indented source bullets are
    shifted right by one nested_indent per nesting level.
    """
    style = ctx.style
    spacing = style.spacing
    nested = nesting_level(line) * spacing.nested_indent

    ctx.engine.ensure_space(spacing.bullet_line_height)
    ctx.draw(style.bullet_glyph, style.content_left + glyph_offset + nested, "bullet")
    ctx.draw_wrapped(
        strip_bullet(line.stripped),
        "body",
        style.content_left + text_offset + nested,
        style.content_width - text_offset - nested,
        spacing.bullet_line_height,
    )


def split_title_date(text: str) -> Tuple[str, Optional[str]]:
    """
    Split an entry line into a left title and a right date/link part.

    '|' separates the parts when present (everything after the first '|' is the
    right part). Otherwise a trailing date range is split off the title.

    Example:
        >>> split_title_date("Engineer | 2020 - Present")
        ('Engineer', '2020 - Present')
        >>> split_title_date("Senior Engineer Jan 2019 - 2021")
        ('Senior Engineer', 'Jan 2019 - 2021')
    """
    if "|" in text:
        parts = [part.strip() for part in text.split("|")]
        right = " | ".join(part for part in parts[1:] if part)
        return parts[0], right or None

    match = re.search(_DATE_IN_TITLE, text, re.IGNORECASE)
    if match is None:
        return text.strip(), None
    left = text[: match.start()].strip(" ,-–")
    return left, text[match.start():].strip()


def _draw_title_date(ctx: RenderContext, text: str, left_role: str) -> None:
    """Left title and right-aligned date on one line, then advance one line."""
    left, right = split_title_date(text)
    ctx.engine.ensure_space(ctx.style.spacing.line_height)
    if left:
        ctx.draw(left, ctx.style.content_left, left_role)
    if right:
        ctx.draw_right_aligned(right, "entry_date")
    ctx.engine.advance(ctx.style.spacing.line_height)


def _draw_entry_line(ctx: RenderContext, line: RawLine) -> None:
    """Dispatch a remaining subsection line: bullets get a glyph, everything else wraps muted."""
    style = ctx.style
    spacing = style.spacing
    if is_bullet_line(line.text):
        render_bullet(ctx, line, spacing.bullet_indent, spacing.bullet_text_indent)
    else:
        ctx.draw_wrapped(
            line.stripped, "detail", style.content_left, style.content_width, spacing.line_height
        )


def _render_probed_subsection(ctx: RenderContext, lines: List[RawLine]) -> None:
    style = ctx.style
    first = lines[0].stripped
    rest = lines[1:]

    if "|" in first:
        _draw_title_date(ctx, first, "entry_title")
    else:
        ctx.draw_wrapped(
            first, "entry_title", style.content_left, style.content_width, style.spacing.line_height
        )
        second = rest[0].stripped if rest else ""
        if second and not is_bullet_line(second) and ("|" in second or has_year(second)):
            _draw_title_date(ctx, second, "job_title")
            rest = rest[1:]
            if rest and not is_bullet_line(rest[0].text):
                ctx.draw_wrapped(
                    rest[0].stripped,
                    "location",
                    style.content_left,
                    style.content_width,
                    style.spacing.line_height,
                )
                rest = rest[1:]

    for line in rest:
        _draw_entry_line(ctx, line)


def _render_inline_subsection(ctx: RenderContext, lines: List[RawLine]) -> None:
    style = ctx.style
    for index, line in enumerate(lines):
        text = line.stripped
        if is_bullet_line(text):
            _draw_entry_line(ctx, line)
        elif "|" in text:
            _draw_title_date(ctx, text, "entry_title" if index == 0 else "job_title")
        elif index == 0:
            ctx.draw_wrapped(
                text, "entry_title", style.content_left, style.content_width, style.spacing.line_height
            )
        else:
            _draw_entry_line(ctx, line)


def render_subsection(ctx: RenderContext, item: Item) -> None:
    """Job/project entry: title (and date) line(s), then bullets and detail lines."""
    lines = [line for line in item.lines if not line.is_blank]
    if not lines:
        return

    ctx.engine.ensure_space(ctx.style.spacing.subsection_keep)
    if ctx.style.toggles.title_date_layout is TitleDateLayout.INLINE:
        _render_inline_subsection(ctx, lines)
    else:
        _render_probed_subsection(ctx, lines)
    ctx.engine.advance(ctx.style.spacing.between_subsections)


def render_bullet_group(ctx: RenderContext, item: Item) -> None:
    spacing = ctx.style.spacing
    for line in item.lines:
        if not line.is_blank:
            render_bullet(ctx, line, 0, spacing.group_text_indent)
    ctx.engine.advance(spacing.paragraph_gap)


def render_text_item(ctx: RenderContext, item: Item) -> None:
    style = ctx.style
    for text in item.text_lines:
        if is_bullet_line(text):
            text = strip_bullet(text)
        ctx.draw_wrapped(
            text, "body", style.content_left, style.content_width, style.spacing.line_height
        )
    ctx.engine.advance(style.spacing.paragraph_gap)


ITEM_RENDERERS = {
    ItemKind.SUBSECTION: render_subsection,
    ItemKind.BULLET_GROUP: render_bullet_group,
    ItemKind.TEXT: render_text_item,
}


def render_section(ctx: RenderContext, section: Section) -> None:
    render_section_header(ctx, section.title)
    for item in section.items:
        ITEM_RENDERERS[item.kind](ctx, item)


# =============================================================================
# RENDERER
# =============================================================================


class TemplateRenderer:
    """
    Lay out parsed resumes with one template's style.

    The renderer itself holds only read-only configuration; every render()
    call builds a fresh RenderContext, so one renderer can serve many documents.

    Example:
        style = TemplateRegistry().get_style("classic")
        rendered = TemplateRenderer(style).render(parse_resume(text))
        pdf_bytes = write_pdf(rendered)
    """

    def __init__(self, style: StyleConfig, metrics=None):
        """
        Args:
            style: Template style
            metrics: Font metrics with measure_for(font); defaults to FontMetrics()
        """
        self.style = style
        self.metrics = metrics

    def render(self, document: ResumeDocument) -> RenderedDocument:
        """
        Lay out a document.

        Args:
            document: Parsed resume

        Returns:
            RenderedDocument with at least one page. An empty document yields a
            single blank page.

        Raises:
            MeasurementError: If text cannot be measured with the template fonts
        """
        ctx = RenderContext.create(self.style, self.metrics)

        if document.requires_fallback:
            if not document.is_empty:
                render_fallback(ctx, document.source_lines)
            else:
                _log_debug("Empty document: emitting a blank page")
        else:
            render_header(ctx, document.header)
            for section in document.sections:
                render_section(ctx, section)

        rendered = ctx.engine.finish()
        log_render_result(self.style.template_id, rendered, fallback=document.requires_fallback)
        return rendered
