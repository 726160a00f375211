"""
Regex patterns and constants for resume line classification.

Pattern classes follow the frozen-dataclass convention:
- Dataclasses with frozen=True for immutability
- Class-level constants for patterns
- Helper functions that use these patterns
"""

import re
from dataclasses import dataclass

# =============================================================================
# SECTION HEADER PATTERNS
# =============================================================================

# Section names recognized by case-insensitive prefix match. Longer names that
# share a prefix with a shorter one (e.g. "WORK EXPERIENCE") are listed anyway
# so the list documents what LLM rewrites actually produce.
SECTION_KEYWORDS = (
    "EDUCATION",
    "EXPERIENCE",
    "SKILLS",
    "PROJECTS",
    "CERTIFICATIONS",
    "SUMMARY",
    "OBJECTIVE",
    "PROFESSIONAL SUMMARY",
    "WORK EXPERIENCE",
    "TECHNICAL SKILLS",
    "ACHIEVEMENTS",
)

# Uppercase-header length bounds used by the line classifier: 3..59 characters
HEADER_MIN_LENGTH = 3
HEADER_MAX_LENGTH = 59

# The fallback renderer keeps its own, tighter bound for ad-hoc headers.
# The two are tuned independently; do not unify them.
FALLBACK_HEADER_MIN_LENGTH = 3
FALLBACK_HEADER_MAX_LENGTH = 49

# Job-title lines with a year range are only titles when reasonably short
JOB_TITLE_MAX_LENGTH = 99
COMPANY_NAME_MAX_LENGTH = 59


@dataclass(frozen=True)
class SectionHeaderPatterns:
    """Patterns for detecting section header lines."""

    # "# Title" / "## Title" markdown headers
    MARKDOWN_MARKER: str = r"^#+"

    # Leading markers stripped from a header to get the section title
    TITLE_MARKERS: str = r"^#+\s*"

    KEYWORD_PREFIX: str = r"^(?:" + "|".join(re.escape(k) for k in SECTION_KEYWORDS) + r")"


@dataclass(frozen=True)
class ResumeLinePatterns:
    """Patterns for classifying lines inside resume sections."""

    # Bullet glyph followed by whitespace: "• text", "- text", "* text"
    BULLET: str = r"^[•\-\*]\s"

    # Leading bullet glyph plus any whitespace, for stripping
    BULLET_PREFIX: str = r"^[•\-\*]\s*"

    # Line starts with a bullet glyph (used to exclude bullets from header checks)
    BULLET_START: str = r"^[•\-\*]"

    # Any 4-digit year
    YEAR: str = r"\d{4}"

    # "2019 - 2021", "2020–Present"
    YEAR_RANGE: str = r"\d{4}\s*[-–]\s*(?:\d{4}|Present)"

    # "Acme Corp", "Johnson & Johnson", "Globex Inc."
    COMPANY_NAME: str = r"^[A-Z][a-zA-Z\s&.]+$"

    # "Jan 2020 - Present", "September 2018 – 2021"
    DATE_RANGE: str = (
        r"^(?:Jan|Feb|Mar|Apr|May|Jun|Jul|Aug|Sep|Oct|Nov|Dec|January|February|March|"
        r"April|May|June|July|August|September|October|November|December)\.?\s+\d{4}"
        r"\s*[-–]\s*(?:Present|\d{4})"
    )

    # "2020 - Present" on its own line, directly under an entry title
    BARE_YEAR_RANGE: str = r"^\d{4}\s*[-–]\s*(?:\d{4}|Present)$"

    # "Remote", "Austin, Texas", "Berlin / Munich"
    LOCATION: str = r"^(?:Remote|[A-Z][a-z]+,\s*[A-Z][a-z]+|[A-Z][a-z]+\s*/\s*[A-Z][a-z]+)$"


@dataclass(frozen=True)
class ContactPatterns:
    """Patterns for auto-extracting contact details from header lines."""

    EMAIL: str = r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}"
    PHONE: str = r"(?:\+?\d{1,2}[-.\s]?)?\(?\d{3}\)?[-.\s]?\d{3}[-.\s]?\d{4}"
    LINKEDIN: str = r"linkedin\.com/in/[a-zA-Z0-9-]+"
    GITHUB: str = r"github\.com/[a-zA-Z0-9-]+"
    WEBSITE: str = r"(?:https?://)?(?:www\.)?[a-zA-Z0-9-]+\.[a-zA-Z]{2,}(?:/[^\s]*)?"

    # Substrings that mark a header line as contact info in literal mode
    LITERAL_MARKERS: tuple = ("@", "|", "linkedin", "github")

    # Substrings that make an extracted item render as a link
    LINK_MARKERS: tuple = ("@", ".com", "linkedin", "github")


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================


def strip_bullet(text: str) -> str:
    """Remove a leading bullet glyph and following whitespace."""
    return re.sub(ResumeLinePatterns.BULLET_PREFIX, "", text.strip())


def is_bullet_line(text: str) -> bool:
    """True if the trimmed text starts with a bullet glyph followed by whitespace."""
    return re.match(ResumeLinePatterns.BULLET, text.strip()) is not None


def strip_title_markers(text: str) -> str:
    """Strip markdown header markers ("## ") from a header line."""
    return re.sub(SectionHeaderPatterns.TITLE_MARKERS, "", text.strip()).strip()


def has_year(text: str) -> bool:
    """True if text contains a 4-digit number."""
    return re.search(ResumeLinePatterns.YEAR, text) is not None


def is_uppercase_header(text: str) -> bool:
    """
    Check the all-caps header heuristic used by the line classifier.

    Fully uppercase, 3..59 characters, not a bullet, no 4-digit year, and no
    '|' or '@'. Lines carrying a year are left alone so dated job titles written
    in capitals are not mistaken for section headers.
    """
    return (
        text == text.upper()
        and HEADER_MIN_LENGTH <= len(text) <= HEADER_MAX_LENGTH
        and re.match(ResumeLinePatterns.BULLET_START, text) is None
        and not has_year(text)
        and "|" not in text
        and "@" not in text
    )


def is_fallback_header(text: str) -> bool:
    """All-caps header check used by the fallback renderer (shorter bound, needs a letter)."""
    return text.isupper() and FALLBACK_HEADER_MIN_LENGTH <= len(text) <= FALLBACK_HEADER_MAX_LENGTH
