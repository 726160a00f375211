"""
Contact detail extraction for resume header blocks.

Two strategies, selected per template:
- literal: keep header lines that look like contact info and split them on '|'
- regex: pull phone, email, LinkedIn, GitHub and website out of the header text
"""

import re
from dataclasses import dataclass
from typing import List

from quill.contexts.templating.patterns import ContactPatterns


@dataclass(frozen=True)
class ContactItem:
    """A single contact detail and whether it should render as a link."""

    text: str
    is_link: bool = False


def is_contact_line(line: str) -> bool:
    """True if a header line carries contact markers ('@', '|', linkedin, github)."""
    return any(marker in line for marker in ContactPatterns.LITERAL_MARKERS)


def literal_contact_fragments(lines: List[str]) -> List[str]:
    """
    Split contact-looking header lines into ordered fragments.

    Args:
        lines: Header lines after the name (and tagline)

    Returns:
        Non-empty, trimmed fragments in source order

    Example:
        >>> literal_contact_fragments(["jane@x.com | 555-0100", "github.com/jane"])
        ['jane@x.com', '555-0100', 'github.com/jane']
    """
    contact_lines = [line.strip() for line in lines if line.strip() and is_contact_line(line)]
    joined = " | ".join(contact_lines)
    return [fragment.strip() for fragment in joined.split("|") if fragment.strip()]


def is_link_text(text: str) -> bool:
    return any(marker in text for marker in ContactPatterns.LINK_MARKERS)


def extract_contact_items(lines: List[str]) -> List[ContactItem]:
    """
    Extract contact details from header lines using regex patterns.

    Items come out in a fixed order: phone, email, LinkedIn, GitHub, website.
    The website is skipped when it is the LinkedIn/GitHub URL or the domain
    part of the email address.

    Args:
        lines: Header lines after the name

    Returns:
        Extracted contact items (first match per kind)
    """
    text = " ".join(line.strip() for line in lines if line.strip())
    if not text:
        return []

    email = re.search(ContactPatterns.EMAIL, text)
    phone = re.search(ContactPatterns.PHONE, text)
    linkedin = re.search(ContactPatterns.LINKEDIN, text)
    github = re.search(ContactPatterns.GITHUB, text)

    # Search for a website outside the email so "x.com" in "jane@x.com" is not reused
    website_text = text.replace(email.group(0), " ") if email else text
    website = re.search(ContactPatterns.WEBSITE, website_text)

    found = []
    if phone:
        found.append(phone.group(0).strip())
    if email:
        found.append(email.group(0))
    if linkedin:
        found.append(linkedin.group(0))
    if github:
        found.append(github.group(0))
    if website and "linkedin" not in website.group(0) and "github" not in website.group(0):
        found.append(website.group(0))

    return [ContactItem(text=item, is_link=is_link_text(item)) for item in found]
