"""
Resume Document Structure

Defines the structured representation produced by the resume parser and
consumed by the rendering context.

Templating owns:
- Splitting raw text into RawLine instances
- Building ResumeDocument trees (header block, sections, items)

Rendering walks ResumeDocument instances and never re-parses text, except for
the fallback strategy which works directly on the source lines.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional

from quill.contexts.templating.contact import literal_contact_fragments
from quill.contexts.templating.exceptions import DegenerateParseFallback
from quill.contexts.templating.patterns import SectionHeaderPatterns


@dataclass(frozen=True)
class RawLine:
    """
    A single line of source text.

    Attributes:
        text: Line content without the line break
        indent: Number of leading whitespace characters
        number: Line number in the source text (1-indexed)
    """

    text: str
    indent: int = 0
    number: int = 0

    @classmethod
    def from_text(cls, text: str, number: int = 0) -> "RawLine":
        return cls(text=text, indent=len(text) - len(text.lstrip()), number=number)

    @property
    def stripped(self) -> str:
        return self.text.strip()

    @property
    def is_blank(self) -> bool:
        return not self.stripped


def split_lines(text: str) -> List[RawLine]:
    """Split text on line breaks into RawLines (handles \\r\\n and \\r)."""
    return [RawLine.from_text(line, number) for number, line in enumerate(text.splitlines(), start=1)]


class ItemKind(str, Enum):
    """Kinds of content grouped under a section."""

    SUBSECTION = "subsection"
    BULLET_GROUP = "bullet_group"
    TEXT = "text"


@dataclass
class Item:
    """
    A group of lines inside a section.

    Attributes:
        kind: SUBSECTION (job/project entry), BULLET_GROUP or TEXT
        lines: Source lines in encounter order
    """

    kind: ItemKind
    lines: List[RawLine] = field(default_factory=list)

    @property
    def accepts_bullets(self) -> bool:
        """Subsections and bullet groups collect trailing bullet lines."""
        return self.kind in (ItemKind.SUBSECTION, ItemKind.BULLET_GROUP)

    @property
    def text_lines(self) -> List[str]:
        """Trimmed, non-blank line texts."""
        return [line.stripped for line in self.lines if not line.is_blank]


@dataclass
class Section:
    """
    A titled resume section.

    Attributes:
        title: Header text with markdown markers stripped (e.g., "EXPERIENCE")
        items: Items in encounter order
    """

    title: str
    items: List[Item] = field(default_factory=list)

    @property
    def last_item(self) -> Optional[Item]:
        return self.items[-1] if self.items else None


def clean_name(line: str) -> str:
    """Strip markdown header markers and surrounding emphasis asterisks from a name line."""
    name = re.sub(SectionHeaderPatterns.TITLE_MARKERS, "", line.strip())
    return name.strip().strip("*").strip()


@dataclass
class HeaderBlock:
    """
    Header block: name line followed by tagline and contact lines.

    Attributes:
        lines: Trimmed, non-blank header lines in source order (first is the name)
    """

    lines: List[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def name(self) -> str:
        return clean_name(self.lines[0]) if self.lines else ""

    @property
    def tagline(self) -> Optional[str]:
        """Second header line, when it carries no '@' or '|'."""
        if len(self.lines) < 2:
            return None
        second = self.lines[1]
        if "@" in second or "|" in second:
            return None
        return second

    @property
    def detail_lines(self) -> List[str]:
        """Header lines after the name and tagline."""
        start = 2 if self.tagline is not None else 1
        return self.lines[start:]

    @property
    def contact_fragments(self) -> List[str]:
        """Contact fragments from lines containing '@', '|', linkedin or github."""
        return literal_contact_fragments(self.detail_lines)


@dataclass
class ResumeDocument:
    """
    Parsed resume: header block plus ordered sections.

    A document with no sections cannot be rendered from the tree. It keeps its
    source lines so the fallback renderer can lay them out line by line.

    Attributes:
        header: Header block (empty when no lines precede the first section)
        sections: Sections in source order
        source_lines: All source lines, kept for the fallback strategy
    """

    header: HeaderBlock = field(default_factory=HeaderBlock)
    sections: List[Section] = field(default_factory=list)
    source_lines: List[RawLine] = field(default_factory=list, repr=False)

    @property
    def requires_fallback(self) -> bool:
        return not self.sections

    @property
    def is_empty(self) -> bool:
        return all(line.is_blank for line in self.source_lines)

    def fallback_signal(self) -> Optional[DegenerateParseFallback]:
        """Signal describing why the structured tree is unusable, or None."""
        if not self.requires_fallback:
            return None
        non_blank = sum(1 for line in self.source_lines if not line.is_blank)
        return DegenerateParseFallback(
            reason="no section headers detected", line_count=non_blank
        )

    @property
    def section_titles(self) -> List[str]:
        return [section.title for section in self.sections]

    def to_dict(self) -> Dict[str, Any]:
        """Plain-dict view of the tree (for inspection and YAML dumps)."""
        return {
            "header": {
                "name": self.header.name,
                "tagline": self.header.tagline,
                "contact": self.header.contact_fragments,
            },
            "sections": [
                {
                    "title": section.title,
                    "items": [
                        {"kind": item.kind.value, "lines": item.text_lines}
                        for item in section.items
                    ],
                }
                for section in self.sections
            ],
            "requires_fallback": self.requires_fallback,
        }
