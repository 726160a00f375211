"""
Greedy word wrapping.

Pure functions, independent of any page or canvas. Widths come from a caller
supplied measure function so the same code serves real font metrics and the
fixed-advance metrics used in tests.
"""

import math
from typing import Callable, List

from quill.contexts.rendering.exceptions import MeasurementError

# measure(text, font_size) -> width in points
MeasureFn = Callable[[str, float], float]


def measure_checked(measure: MeasureFn, text: str, font_size: float) -> float:
    """
    Measure text, turning metric failures into MeasurementError.

    Raises:
        MeasurementError: If measure raises or returns a non-finite width
    """
    try:
        width = measure(text, font_size)
    except MeasurementError:
        raise
    except Exception as e:
        raise MeasurementError(text, size=font_size, original_error=e) from e

    try:
        finite = math.isfinite(width)
    except TypeError as e:
        raise MeasurementError(text, size=font_size, original_error=e) from e
    if not finite:
        raise MeasurementError(text, size=font_size, detail=f"Non-finite width: {width}")
    return width


def wrap_text(text: str, max_width: float, measure: MeasureFn, font_size: float) -> List[str]:
    """
    Greedily wrap text into lines no wider than max_width.

    Words are split on single spaces and never broken: a word wider than
    max_width on its own occupies an overflowing line by itself.

    Args:
        text: Text to wrap
        max_width: Maximum line width in points
        measure: Width function, measure(substring, font_size)
        font_size: Font size passed through to measure

    Returns:
        Wrapped lines. Empty (or all-space) input returns [].

    Raises:
        MeasurementError: If measure fails or returns a non-finite width

    Example:
        >>> wrap_text("aa bb cc", 5, lambda s, size: len(s), 10)
        ['aa bb', 'cc']
    """
    words = [word for word in text.split(" ") if word]
    lines: List[str] = []
    current = ""

    for word in words:
        candidate = f"{current} {word}" if current else word
        # A lone word is measured too; it may overflow but is never split
        width = measure_checked(measure, candidate, font_size)
        if current and width > max_width:
            lines.append(current)
            current = word
        else:
            current = candidate

    if current:
        lines.append(current)
    return lines
