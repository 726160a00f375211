"""
Per-render state shared by the drawing functions.

A RenderContext bundles the layout engine (and its cursor), the template style
and the font metrics for exactly one render call. It is created by
TemplateRenderer.render() and passed explicitly to every drawing function;
nothing about a render in progress lives at module scope.
"""

from dataclasses import dataclass
from typing import List, Optional

from quill.contexts.rendering.fonts import FontMetrics
from quill.contexts.rendering.layout_engine import PageLayoutEngine, TextRun
from quill.contexts.rendering.text_wrapper import MeasureFn, measure_checked, wrap_text
from quill.contexts.templating.style_config import RGB, StyleConfig


@dataclass
class RenderContext:
    """
    Attributes:
        style: Template style (read-only)
        engine: Layout engine owning the cursor for this render
        metrics: Object with measure_for(font) -> measure(text, size)
    """

    style: StyleConfig
    engine: PageLayoutEngine
    metrics: FontMetrics

    @classmethod
    def create(cls, style: StyleConfig, metrics=None) -> "RenderContext":
        return cls(
            style=style,
            engine=PageLayoutEngine.from_style(style),
            metrics=metrics if metrics is not None else FontMetrics(),
        )

    def measure_for(self, role: str) -> MeasureFn:
        return self.metrics.measure_for(self.style.font_for(role))

    def text_width(self, text: str, role: str) -> float:
        return measure_checked(self.measure_for(role), text, self.style.size_for(role))

    def wrap(self, text: str, role: str, max_width: float) -> List[str]:
        return wrap_text(text, max_width, self.measure_for(role), self.style.size_for(role))

    def draw(self, text: str, x: float, role: str, color: Optional[RGB] = None) -> TextRun:
        """Draw text in a role's font, size and color at the cursor."""
        return self.engine.draw_text(
            text,
            x,
            self.style.size_for(role),
            self.style.font_for(role),
            color if color is not None else self.style.color_for(role),
        )

    def draw_centered(self, text: str, role: str) -> TextRun:
        x = self.style.content_left + (self.style.content_width - self.text_width(text, role)) / 2
        return self.draw(text, x, role)

    def draw_right_aligned(self, text: str, role: str) -> TextRun:
        return self.draw(text, self.style.content_right - self.text_width(text, role), role)

    def draw_wrapped(
        self,
        text: str,
        role: str,
        x: float,
        max_width: float,
        line_height: float,
        centered: bool = False,
    ) -> int:
        """
        Wrap text and draw it line by line, reserving space before each line.

        Args:
            text: Text to wrap
            role: Text role (font, size, color)
            x: Left edge of the text column
            max_width: Width of the text column
            line_height: Cursor advance after each line
            centered: Center each line in the content width instead of using x

        Returns:
            Number of lines drawn
        """
        lines = self.wrap(text, role, max_width)
        for line in lines:
            self.engine.ensure_space(line_height)
            if centered:
                self.draw_centered(line, role)
            else:
                self.draw(line, x, role)
            self.engine.advance(line_height)
        return len(lines)
