"""
End-to-end rendering: resume text -> layout -> PDF bytes.

render_resume() is the core entry point (text to draw commands);
render_resume_pdf() adds serialization; regenerate_pdf() is the service-level
call that falls back to the original upload when rendering fails.
"""

from pathlib import Path
from typing import Optional, Union

from quill.contexts.intake.normalizer import clean_resume_text
from quill.contexts.rendering.exceptions import RenderError
from quill.contexts.rendering.layout_engine import RenderedDocument
from quill.contexts.rendering.logger import _log_error, _log_success
from quill.contexts.rendering.pdf_writer import write_pdf
from quill.contexts.rendering.renderer import TemplateRenderer
from quill.contexts.templating.exceptions import EmptyInputError
from quill.contexts.templating.parser import parse_resume
from quill.contexts.templating.template_registry import TemplateRegistry


def prepare_text(text: Optional[str], source: Optional[str] = None) -> str:
    """
    Clean resume text and reject empty input.

    Raises:
        EmptyInputError: If nothing but whitespace remains after cleaning
    """
    cleaned = clean_resume_text(text or "")
    if not cleaned:
        raise EmptyInputError(source=source)
    return cleaned


def render_resume(
    text: str,
    template_id: Optional[str] = None,
    registry: Optional[TemplateRegistry] = None,
    metrics=None,
    source: Optional[str] = None,
) -> RenderedDocument:
    """
    Parse and lay out resume text with a template.

    Args:
        text: Resume text (markdown-ish)
        template_id: Template id (default: QUILL_DEFAULT_TEMPLATE)
        registry: Template registry (default: a new TemplateRegistry())
        metrics: Font metrics override (default: reportlab FontMetrics)
        source: Where the text came from, for error messages

    Returns:
        RenderedDocument with at least one page

    Raises:
        EmptyInputError: If the text is empty or whitespace-only
        UnknownTemplateError: If template_id is not in the catalog
        MeasurementError: If text cannot be measured with the template fonts
    """
    cleaned = prepare_text(text, source=source)
    registry = registry if registry is not None else TemplateRegistry()
    style = registry.get_style(template_id)
    document = parse_resume(cleaned)
    return TemplateRenderer(style, metrics=metrics).render(document)


def render_resume_pdf(
    text: str,
    template_id: Optional[str] = None,
    registry: Optional[TemplateRegistry] = None,
    output_path: Optional[Union[str, Path]] = None,
) -> bytes:
    """
    Render resume text straight to PDF bytes.

    Args:
        text: Resume text
        template_id: Template id (default: QUILL_DEFAULT_TEMPLATE)
        registry: Template registry
        output_path: Also write the PDF here, if given

    Returns:
        PDF bytes
    """
    rendered = render_resume(text, template_id=template_id, registry=registry)
    document_title = rendered.text_runs[0].text if rendered.text_runs else None
    return write_pdf(rendered, output_path=output_path, title=document_title)


def regenerate_pdf(
    original_pdf: bytes,
    text: str,
    template_id: Optional[str] = None,
    registry: Optional[TemplateRegistry] = None,
) -> bytes:
    """
    Build a new PDF from optimized text, keeping the original if layout fails.

    Args:
        original_pdf: The uploaded PDF
        text: Optimized resume text
        template_id: Template id
        registry: Template registry

    Returns:
        New PDF bytes, or original_pdf when rendering raised a RenderError

    Raises:
        EmptyInputError: If the text is empty (never silently replaced)
    """
    try:
        pdf_bytes = render_resume_pdf(text, template_id=template_id, registry=registry)
    except RenderError as e:
        _log_error(f"Rendering failed, returning original PDF: {e}")
        return original_pdf

    _log_success(f"Regenerated PDF ({len(pdf_bytes)} bytes)")
    return pdf_bytes
