"""
Line-by-line fallback layout.

Used when the parser finds no section headers. Works directly on the source
lines and never builds Section/Item structure:

- first non-blank line: the name, bold, centered and wrapped
- short all-caps lines: ad-hoc section headers with an underline
- bullet lines: glyph plus wrapped, indented text
- anything else: wrapped body text
- blank lines: half a line of vertical space
"""

from typing import List

from quill.contexts.rendering.logger import _log_debug
from quill.contexts.rendering.render_context import RenderContext
from quill.contexts.templating.patterns import is_bullet_line, is_fallback_header, strip_bullet
from quill.contexts.templating.resume_data_structure import RawLine


def render_fallback(ctx: RenderContext, lines: List[RawLine]) -> None:
    """
    Lay out raw lines with the fallback heuristics.

    Args:
        ctx: Render context for this call
        lines: Source lines (blank lines included)
    """
    style = ctx.style
    spacing = style.spacing
    engine = ctx.engine
    reserve = spacing.fallback_reserve
    name_drawn = False
    header_count = 0

    for line in lines:
        text = line.stripped
        if not text:
            engine.advance(spacing.line_height / 2)
            continue

        engine.ensure_space(reserve)

        if not name_drawn:
            ctx.draw_wrapped(
                text,
                "name",
                style.content_left,
                style.content_width,
                style.size_for("name"),
                centered=True,
            )
            engine.advance(spacing.after_name)
            name_drawn = True

        elif is_fallback_header(text):
            size = style.size_for("section_header")
            ctx.draw(text, style.content_left, "section_header")
            engine.advance(size + spacing.after_section_header)
            underline_y = engine.cursor_y + spacing.after_section_header - spacing.section_underline_offset
            underline_end = min(
                style.content_left + ctx.text_width(text, "section_header") + spacing.underline_padding,
                style.content_right,
            )
            engine.draw_line(
                (style.content_left, underline_y),
                (underline_end, underline_y),
                style.section_rule_thickness,
                style.color_for("section_rule"),
            )
            header_count += 1

        elif is_bullet_line(text):
            ctx.draw(style.bullet_glyph, style.content_left + spacing.bullet_indent, "bullet")
            text_x = style.content_left + spacing.bullet_text_indent
            max_width = style.content_width - spacing.bullet_text_indent
            for wrapped in ctx.wrap(strip_bullet(text), "body", max_width):
                engine.ensure_space(reserve)
                ctx.draw(wrapped, text_x, "body")
                engine.advance(spacing.bullet_line_height)

        else:
            for wrapped in ctx.wrap(text, "body", style.content_width):
                engine.ensure_space(reserve)
                ctx.draw(wrapped, style.content_left, "body")
                engine.advance(spacing.line_height)

    _log_debug(f"Fallback layout: {len(lines)} source lines, {header_count} ad-hoc headers")
