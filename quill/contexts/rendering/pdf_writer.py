"""
PDF serialization of rendered layouts (reportlab canvas).

Draw commands already carry absolute PDF coordinates, so serialization is a
direct replay onto a reportlab canvas, page by page.
"""

from io import BytesIO
from pathlib import Path
from typing import Optional, Union

from reportlab.pdfgen import canvas

from quill.contexts.rendering.layout_engine import Line, Rect, RenderedDocument, TextRun


def _replay(pdf: canvas.Canvas, command) -> None:
    if isinstance(command, TextRun):
        pdf.setFillColorRGB(*command.color)
        pdf.setFont(command.font, command.size)
        pdf.drawString(command.x, command.y, command.text)
    elif isinstance(command, Line):
        pdf.setStrokeColorRGB(*command.color)
        pdf.setLineWidth(command.thickness)
        pdf.line(command.start[0], command.start[1], command.end[0], command.end[1])
    elif isinstance(command, Rect):
        pdf.setFillColorRGB(*command.color)
        pdf.rect(command.x, command.y, command.width, command.height, stroke=0, fill=1)
    else:
        raise TypeError(f"Unknown draw command: {type(command).__name__}")


def write_pdf(
    rendered: RenderedDocument,
    output_path: Optional[Union[str, Path]] = None,
    title: Optional[str] = None,
) -> bytes:
    """
    Serialize a rendered layout to PDF.

    Args:
        rendered: Output of TemplateRenderer.render()
        output_path: Also write the PDF to this path, if given
        title: Document title metadata

    Returns:
        PDF bytes
    """
    buffer = BytesIO()
    first = rendered.pages[0]
    pdf = canvas.Canvas(buffer, pagesize=(first.width, first.height))
    if title:
        pdf.setTitle(title)

    for page in rendered.pages:
        pdf.setPageSize((page.width, page.height))
        for command in rendered.commands_for_page(page.index):
            _replay(pdf, command)
        pdf.showPage()

    pdf.save()
    data = buffer.getvalue()

    if output_path is not None:
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_bytes(data)
    return data
