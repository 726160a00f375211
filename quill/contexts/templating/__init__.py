"""
Templating Context

Responsibilities:
- Classifies resume lines into semantic roles
- Parses loosely formatted resume text into a structured document tree
- Owns the template catalog (style configuration per template)

Owns: Line roles, ResumeDocument structure, StyleConfig, template catalog
Never: Positions anything on a page
"""

from quill.contexts.templating.classifier import LineRole, classify
from quill.contexts.templating.exceptions import (
    DegenerateParseFallback,
    EmptyInputError,
    UnknownTemplateError,
)
from quill.contexts.templating.parser import parse_resume
from quill.contexts.templating.resume_data_structure import (
    HeaderBlock,
    Item,
    ItemKind,
    RawLine,
    ResumeDocument,
    Section,
)
from quill.contexts.templating.style_config import StyleConfig
from quill.contexts.templating.template_registry import TemplateInfo, TemplateRegistry

__all__ = [
    # Classification and parsing
    "LineRole",
    "classify",
    "parse_resume",
    # Data structure classes
    "RawLine",
    "HeaderBlock",
    "Item",
    "ItemKind",
    "Section",
    "ResumeDocument",
    # Template catalog
    "StyleConfig",
    "TemplateInfo",
    "TemplateRegistry",
    # Errors and signals
    "EmptyInputError",
    "UnknownTemplateError",
    "DegenerateParseFallback",
]
