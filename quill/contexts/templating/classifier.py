"""
Line classification for loosely formatted resume text.

Assigns each line a semantic role (section header, bullet, job title, ...) from
its trimmed text and the line before it. Rules live in one ordered table,
CLASSIFICATION_RULES, and are checked strictly in order: the first predicate
that matches decides the role.
"""

import re
from enum import Enum
from typing import Callable, NamedTuple, Optional, Tuple

from quill.contexts.templating.patterns import (
    COMPANY_NAME_MAX_LENGTH,
    JOB_TITLE_MAX_LENGTH,
    ResumeLinePatterns,
    SectionHeaderPatterns,
    is_uppercase_header,
)


class LineRole(str, Enum):
    """Semantic role of a single resume line."""

    EMPTY = "empty"
    SECTION_HEADER = "section_header"
    BULLET = "bullet"
    JOB_TITLE_WITH_DATE = "job_title_with_date"
    COMPANY_NAME = "company_name"
    DATE_RANGE = "date_range"
    LOCATION = "location"
    NORMAL = "normal"


# Roles that open a new job/project entry
ENTRY_ROLES = (LineRole.COMPANY_NAME, LineRole.JOB_TITLE_WITH_DATE)


class ClassificationRule(NamedTuple):
    """One entry of the ordered rule table: predicate(trimmed, prev_line) -> bool."""

    role: LineRole
    description: str
    predicate: Callable[[str, Optional[str]], bool]


def _is_empty(text: str, prev_line: Optional[str]) -> bool:
    return not text


def _is_section_header(text: str, prev_line: Optional[str]) -> bool:
    return (
        re.match(SectionHeaderPatterns.MARKDOWN_MARKER, text) is not None
        or re.match(SectionHeaderPatterns.KEYWORD_PREFIX, text, re.IGNORECASE) is not None
        or is_uppercase_header(text)
    )


def _is_bullet(text: str, prev_line: Optional[str]) -> bool:
    return re.match(ResumeLinePatterns.BULLET, text) is not None


def _has_year_range(text: str) -> bool:
    return (
        re.search(ResumeLinePatterns.YEAR_RANGE, text, re.IGNORECASE) is not None
        and len(text) <= JOB_TITLE_MAX_LENGTH
    )


def _is_bare_date_line(text: str) -> bool:
    """True for a line holding nothing but a date range ("2020 - Present", "Jan 2020 - 2021")."""
    return (
        re.match(ResumeLinePatterns.BARE_YEAR_RANGE, text, re.IGNORECASE) is not None
        or re.fullmatch(ResumeLinePatterns.DATE_RANGE, text, re.IGNORECASE) is not None
    )


def _follows_entry_title(prev_line: Optional[str]) -> bool:
    """True when the previous line itself opens a job/project entry."""
    if prev_line is None:
        return False
    return classify(prev_line) in ENTRY_ROLES


def _dates_previous_entry(text: str, prev_line: Optional[str]) -> bool:
    """A bare date line right under an entry title carries that entry's dates."""
    return _is_bare_date_line(text) and _follows_entry_title(prev_line)


def _is_job_title_with_date(text: str, prev_line: Optional[str]) -> bool:
    if "|" in text:
        return True
    return _has_year_range(text) and not _dates_previous_entry(text, prev_line)


def _is_company_name(text: str, prev_line: Optional[str]) -> bool:
    return (
        re.match(ResumeLinePatterns.COMPANY_NAME, text) is not None
        and len(text) <= COMPANY_NAME_MAX_LENGTH
    )


def _is_date_range(text: str, prev_line: Optional[str]) -> bool:
    if re.match(ResumeLinePatterns.DATE_RANGE, text, re.IGNORECASE):
        return True
    return _has_year_range(text) and _dates_previous_entry(text, prev_line)


def _is_location(text: str, prev_line: Optional[str]) -> bool:
    return re.match(ResumeLinePatterns.LOCATION, text) is not None


CLASSIFICATION_RULES: Tuple[ClassificationRule, ...] = (
    ClassificationRule(LineRole.EMPTY, "blank after trimming", _is_empty),
    ClassificationRule(
        LineRole.SECTION_HEADER,
        "markdown '#', known section keyword, or short all-caps line without year/'|'/'@'",
        _is_section_header,
    ),
    ClassificationRule(LineRole.BULLET, "bullet glyph followed by whitespace", _is_bullet),
    ClassificationRule(
        LineRole.JOB_TITLE_WITH_DATE,
        "contains '|', or a year range on a line under 100 characters",
        _is_job_title_with_date,
    ),
    ClassificationRule(
        LineRole.COMPANY_NAME, "capitalized words, '&' and '.', under 60 characters", _is_company_name
    ),
    ClassificationRule(
        LineRole.DATE_RANGE,
        "month + year range, or a bare year range directly under an entry title",
        _is_date_range,
    ),
    ClassificationRule(LineRole.LOCATION, "Remote, 'City, Region' or 'City / Region'", _is_location),
)


def classify(line: str, prev_line: Optional[str] = None) -> LineRole:
    """
    Classify a resume line.

    Args:
        line: Raw line (leading/trailing whitespace is ignored)
        prev_line: Raw line immediately before this one, if any

    Returns:
        The role of the first matching rule, or LineRole.NORMAL

    Example:
        >>> classify("## Experience")
        <LineRole.SECTION_HEADER: 'section_header'>
        >>> classify("2020 - Present", prev_line="Acme Corp | Engineer")
        <LineRole.DATE_RANGE: 'date_range'>
    """
    text = line.strip()
    for rule in CLASSIFICATION_RULES:
        if rule.predicate(text, prev_line):
            return rule.role
    return LineRole.NORMAL
