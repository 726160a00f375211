"""
PDF processing utilities for text extraction and output verification.

Helper functions:
    page_count: Quick page count without full extraction.
    extract_pdf_pages: Per-page text and font statistics via pdfplumber.
    is_bold_font: Font weight detection from a PDF font name.
"""

import io
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Union

import pdfplumber
from PyPDF2 import PdfReader

PdfSource = Union[Path, bytes]


def _open_source(source: PdfSource):
    """pdfplumber/PyPDF2 accept paths or file-like objects; wrap raw bytes."""
    if isinstance(source, (bytes, bytearray)):
        return io.BytesIO(source)
    return str(source)


def page_count(source: PdfSource) -> Optional[int]:
    """Get page count from PDF path or bytes, or None if unreadable."""
    try:
        reader = PdfReader(_open_source(source))
        return len(reader.pages)
    except Exception:
        return None


def is_bold_font(fontname: str) -> bool:
    """Check if PDF font name denotes a bold face."""
    # PDF fonts have subset prefixes like "ABCDEE+Helvetica-Bold"
    if "+" in fontname:
        fontname = fontname.split("+", 1)[1]
    return "bold" in fontname.lower()


@dataclass
class PdfPageText:
    """
    Extracted text and font statistics for one PDF page.

    Attributes:
        page_number: Page number (1-indexed)
        text: Page text with line breaks preserved
        font_sizes: Distinct rounded font sizes seen on the page
        bold_fonts: Distinct bold font names seen on the page
    """

    page_number: int
    text: str
    font_sizes: List[float] = field(default_factory=list)
    bold_fonts: List[str] = field(default_factory=list)


def extract_pdf_pages(source: PdfSource) -> List[PdfPageText]:
    """
    Extract text and font statistics from every page of a PDF.

    Args:
        source: PDF file path or raw PDF bytes

    Returns:
        One PdfPageText per page, in page order
    """
    pages = []
    with pdfplumber.open(_open_source(source)) as pdf:
        for page_number, page in enumerate(pdf.pages, start=1):
            text = page.extract_text() or ""
            sizes = sorted({round(char["size"], 1) for char in page.chars})
            bold = sorted({char["fontname"] for char in page.chars if is_bold_font(char["fontname"])})
            pages.append(
                PdfPageText(page_number=page_number, text=text, font_sizes=sizes, bold_fonts=bold)
            )
    return pages
