"""
Rendering Context

Responsibilities:
- Wraps text to template font metrics
- Paginates content and emits absolute-positioned draw commands
- Lays out parsed resumes per template (structured and fallback strategies)
- Serializes layouts to PDF

Owns: Layout state (per render call), draw commands, PDF output
Never: Decides what a line means (that is the templating context's job)
"""

from quill.contexts.rendering.exceptions import MeasurementError, RenderError
from quill.contexts.rendering.fonts import FontMetrics
from quill.contexts.rendering.layout_engine import (
    DrawCommand,
    LayoutCursor,
    Line,
    Page,
    PageLayoutEngine,
    Rect,
    RenderedDocument,
    TextRun,
)
from quill.contexts.rendering.pdf_writer import write_pdf
from quill.contexts.rendering.pipeline import regenerate_pdf, render_resume, render_resume_pdf
from quill.contexts.rendering.render_context import RenderContext
from quill.contexts.rendering.renderer import TemplateRenderer
from quill.contexts.rendering.text_wrapper import wrap_text

__all__ = [
    # Pipeline
    "render_resume",
    "render_resume_pdf",
    "regenerate_pdf",
    # Components
    "wrap_text",
    "FontMetrics",
    "PageLayoutEngine",
    "RenderContext",
    "TemplateRenderer",
    "write_pdf",
    # Layout output
    "DrawCommand",
    "TextRun",
    "Line",
    "Rect",
    "Page",
    "LayoutCursor",
    "RenderedDocument",
    # Errors
    "RenderError",
    "MeasurementError",
]
