"""
One-page budget for optimized resume text.

Rewrites produced by the optimizer tend to grow. Before rendering, text that
exceeds the line or word budget is cut back section by section: critical
sections first, then summary/objective, then everything else, and finally long
lines are shortened at a clause boundary.
"""

from dataclasses import dataclass
from typing import List

from quill.contexts.intake.logger import _log_debug, _log_info

MAX_LINES = 45
MAX_WORDS = 800

# Leading lines assumed to be the name and contact block
HEADER_LINE_COUNT = 5

# Critical sections keep their header plus this many lines
CRITICAL_SECTION_LINES = 7

CRITICAL_KEYWORDS = ("experience", "education", "skills")
IMPORTANT_KEYWORDS = ("summary", "objective")

# Space needed before an important / optional section is included at all
IMPORTANT_MIN_LINES = 3
OPTIONAL_MIN_LINES = 2

# Line shortening: lines with more words than LONG_LINE_WORDS are cut at the
# first clause end in words CLAUSE_SEARCH_START..LONG_LINE_WORDS-1, else after
# TRUNCATED_WORDS words.
LONG_LINE_WORDS = 12
CLAUSE_SEARCH_START = 9
TRUNCATED_WORDS = 10


@dataclass
class BudgetSection:
    lines: List[str]

    @property
    def title(self) -> str:
        return self.lines[0].lower()

    @property
    def priority(self) -> str:
        if any(keyword in self.title for keyword in CRITICAL_KEYWORDS):
            return "critical"
        if any(keyword in self.title for keyword in IMPORTANT_KEYWORDS):
            return "important"
        return "optional"


def word_count(text: str) -> int:
    return len(text.split())


def is_budget_header(line: str) -> bool:
    """All-caps lines longer than 3 characters, or lines ending with ':'."""
    return (line.upper() == line and len(line.strip()) > 3) or line.strip().endswith(":")


def split_budget_sections(lines: List[str]) -> List[BudgetSection]:
    """Split lines at budget headers. Lines before the first header are not kept."""
    starts = [index for index, line in enumerate(lines) if is_budget_header(line)]
    sections = []
    for position, start in enumerate(starts):
        end = starts[position + 1] if position + 1 < len(starts) else len(lines)
        sections.append(BudgetSection(lines=lines[start:end]))
    return sections


def shorten_line(line: str) -> str:
    """
    Shorten a long line to about ten words.

    Headers (all caps) and contact lines ('@' or 'phone') are left alone. The
    cut lands after the first word ending in ',' or ';' among words 10-12,
    otherwise after word 10 with '...' appended (bullet lines get no '...').
    """
    if line.upper() == line or "@" in line or "phone" in line:
        return line

    words = line.split()
    if len(words) <= LONG_LINE_WORDS:
        return line

    for index in range(CLAUSE_SEARCH_START, min(len(words), LONG_LINE_WORDS)):
        if words[index].endswith((",", ";")):
            return " ".join(words[: index + 1])

    suffix = "" if "•" in line else "..."
    return " ".join(words[:TRUNCATED_WORDS]) + suffix


def enforce_one_page_limit(text: str) -> str:
    """
    Trim resume text to fit the one-page budget.

    Args:
        text: Resume text

    Returns:
        Text unchanged if within MAX_LINES and MAX_WORDS, otherwise a trimmed
        version that keeps the header block and prioritized sections
    """
    lines = text.split("\n")
    if len(lines) <= MAX_LINES and word_count(text) <= MAX_WORDS:
        return text

    _log_info(f"Resume over one-page budget: {len(lines)} lines, {word_count(text)} words")

    header = lines[:HEADER_LINE_COUNT]
    remaining = lines[HEADER_LINE_COUNT:]
    sections = split_budget_sections(remaining)

    if not sections:
        return "\n".join(header + remaining[: MAX_LINES - len(header)])

    kept = list(header)
    for section in sections:
        if section.priority == "critical":
            kept.extend(section.lines[: CRITICAL_SECTION_LINES + 1])

    budget = MAX_LINES - len(kept)
    for priority, min_lines in (("important", IMPORTANT_MIN_LINES), ("optional", OPTIONAL_MIN_LINES)):
        for section in sections:
            if section.priority != priority or budget < min_lines:
                continue
            take = min(len(section.lines), budget)
            kept.extend(section.lines[:take])
            budget -= take

    kept = kept[:MAX_LINES]
    trimmed = "\n".join(kept)
    if word_count(trimmed) <= MAX_WORDS:
        _log_debug(f"Trimmed to {len(kept)} lines, {word_count(trimmed)} words")
        return trimmed

    shortened = "\n".join(shorten_line(line) for line in kept)
    _log_debug(f"Trimmed and shortened to {len(kept)} lines, {word_count(shortened)} words")
    return shortened
