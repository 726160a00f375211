"""Custom exceptions and signals for the templating context."""

from dataclasses import dataclass
from typing import List, Optional


class EmptyInputError(ValueError):
    """
    Exception raised when resume text is empty or whitespace-only.

    Not retried and no partial render is attempted.

    Attributes:
        message: Error description
        source: Where the text came from (e.g., a file path or "optimizer")
    """

    def __init__(self, message: str = "Resume text is empty", source: Optional[str] = None):
        self.message = message
        self.source = source

        parts = [message]
        if source:
            parts.append(f"Source: {source}")

        super().__init__("\n".join(parts))


class UnknownTemplateError(ValueError):
    """
    Exception raised when a template id is not in the catalog.

    Attributes:
        template_id: The requested id
        available: Ids present in the catalog
    """

    def __init__(self, template_id: str, available: List[str]):
        self.template_id = template_id
        self.available = available
        super().__init__(f"Template '{template_id}' not found. Available templates: {available}")


@dataclass(frozen=True)
class DegenerateParseFallback:
    """
    Signal (not an exception) that the structured parse is unusable.

    Produced when the primary pass finds no section headers; the renderer then
    switches to the line-by-line fallback strategy.

    Attributes:
        reason: Why the fallback was triggered
        line_count: Number of non-blank source lines handed to the fallback
    """

    reason: str
    line_count: int = 0
