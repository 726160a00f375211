"""Custom exceptions for the rendering context."""

from typing import Optional


class RenderError(Exception):
    """Base class for failures while laying out a resume."""


class MeasurementError(RenderError):
    """
    Exception raised when a font metric cannot measure a piece of text.

    Raised when the measure function throws or returns a non-finite width.
    Fatal for the render call: text cannot be placed without a width.

    Attributes:
        text: The text that could not be measured
        font: Font name passed to the measure function
        size: Font size passed to the measure function
        original_error: The underlying exception, if the metric raised
    """

    def __init__(
        self,
        text: str,
        font: Optional[str] = None,
        size: Optional[float] = None,
        original_error: Optional[Exception] = None,
        detail: Optional[str] = None,
    ):
        self.text = text
        self.font = font
        self.size = size
        self.original_error = original_error

        parts = [f"Cannot measure text: {text!r}"]
        if font is not None or size is not None:
            parts.append(f"Font: {font} @ {size}pt")
        if detail:
            parts.append(detail)
        if original_error is not None:
            parts.append(f"Original error: {type(original_error).__name__}: {original_error}")

        super().__init__("\n".join(parts))
