"""
Resume text parser.

Builds a ResumeDocument from loosely formatted (markdown-ish) resume text:

1. Split the text into RawLines and classify each one against its predecessor.
2. Collect header lines (name, tagline, contact) until the first section header.
3. Route every later line into the current section's items:
   - company / job-title lines always open a new subsection
   - bullets extend the last item when it accepts bullets, else open a bullet group
   - date-range / location lines extend the open item, or are dropped
   - other text extends a running text item, or opens one

When no section header is found at all, the tree is discarded and the document
is returned in its fallback shape (no header, no sections, source lines only).

Parsing never raises: any string, including "", yields a ResumeDocument.
"""

import re
from typing import List, Optional

from quill.contexts.templating.classifier import LineRole, classify
from quill.contexts.templating.logger import _log_debug, log_fallback_triggered, log_parse_summary
from quill.contexts.templating.patterns import SectionHeaderPatterns, strip_title_markers
from quill.contexts.templating.resume_data_structure import (
    HeaderBlock,
    Item,
    ItemKind,
    RawLine,
    ResumeDocument,
    Section,
    split_lines,
)


def _is_explicit_section_header(text: str) -> bool:
    """Headers that can never be the name line: '##'-style markers or known section names."""
    text = text.strip()
    return text.startswith("##") or (
        re.match(SectionHeaderPatterns.KEYWORD_PREFIX, text, re.IGNORECASE) is not None
    )


def _route_line(section: Section, line: RawLine, role: LineRole) -> None:
    """Place a classified line into the section's item list."""
    last = section.last_item

    if role in (LineRole.COMPANY_NAME, LineRole.JOB_TITLE_WITH_DATE):
        section.items.append(Item(kind=ItemKind.SUBSECTION, lines=[line]))

    elif role is LineRole.BULLET:
        if last is not None and last.accepts_bullets:
            last.lines.append(line)
        else:
            section.items.append(Item(kind=ItemKind.BULLET_GROUP, lines=[line]))

    elif role in (LineRole.DATE_RANGE, LineRole.LOCATION):
        if last is not None:
            last.lines.append(line)
        else:
            _log_debug(f"Dropped {role.value} line {line.number} with no open item: {line.stripped!r}")

    elif role is LineRole.NORMAL:
        if last is not None and last.kind is ItemKind.TEXT:
            last.lines.append(line)
        else:
            section.items.append(Item(kind=ItemKind.TEXT, lines=[line]))


def parse_resume(text: Optional[str]) -> ResumeDocument:
    """
    Parse resume text into a ResumeDocument.

    The first non-blank line is the name, unless it is an explicit section
    header ("## ..." or a known section name), in which case the header block
    stays empty.

    Args:
        text: Resume text (markdown-ish, as produced by the optimizer)

    Returns:
        ResumeDocument. Check document.requires_fallback before tree rendering.

    Example:
        >>> doc = parse_resume("JANE DOE\\njane@x.com\\n\\nEXPERIENCE\\nAcme Corp | Engineer\\n")
        >>> doc.header.name, doc.section_titles
        ('JANE DOE', ['EXPERIENCE'])
    """
    lines = split_lines(text or "")

    header_lines: List[str] = []
    sections: List[Section] = []
    in_header = True
    prev_text: Optional[str] = None

    for line in lines:
        role = classify(line.text, prev_text)
        prev_text = line.text

        if role is LineRole.EMPTY:
            continue

        if in_header:
            takes_name_slot = not header_lines and not _is_explicit_section_header(line.text)
            if role is not LineRole.SECTION_HEADER or takes_name_slot:
                header_lines.append(line.stripped)
                continue
            in_header = False

        if role is LineRole.SECTION_HEADER:
            sections.append(Section(title=strip_title_markers(line.text)))
            continue

        _route_line(sections[-1], line, role)

    if not sections:
        document = ResumeDocument(source_lines=lines)
        if not document.is_empty:
            log_fallback_triggered(
                document.fallback_signal(), [line.stripped for line in lines if not line.is_blank]
            )
        return document

    document = ResumeDocument(
        header=HeaderBlock(lines=header_lines), sections=sections, source_lines=lines
    )
    log_parse_summary(document)
    return document
