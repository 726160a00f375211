"""
Font metrics backed by reportlab's standard Type 1 font tables.

The 14 standard PDF fonts (Helvetica, Times-Roman, Courier and their bold /
italic variants) need no embedding and have built-in width tables.
"""

from dataclasses import dataclass

from reportlab.pdfbase import pdfmetrics

from quill.contexts.rendering.exceptions import MeasurementError
from quill.contexts.rendering.text_wrapper import MeasureFn, measure_checked


@dataclass(frozen=True)
class FontMetrics:
    """
    Text width measurement for PDF fonts.

    Example:
        metrics = FontMetrics()
        metrics.width("Jane Doe", "Helvetica-Bold", 22)
        measure = metrics.measure_for("Helvetica")  # measure(text, size)
    """

    encoding: str = "utf8"

    def width(self, text: str, font: str, size: float) -> float:
        """
        Width of text in points.

        Raises:
            MeasurementError: If the font is unknown or the width is unusable
        """
        try:
            return measure_checked(
                lambda s, sz: pdfmetrics.stringWidth(s, font, sz, self.encoding), text, size
            )
        except MeasurementError as e:
            raise MeasurementError(
                text, font=font, size=size, original_error=e.original_error or e
            ) from e

    def measure_for(self, font: str) -> MeasureFn:
        """Bind a font, returning a measure(text, size) function for wrap_text."""

        def measure(text: str, size: float) -> float:
            return self.width(text, font, size)

        return measure
