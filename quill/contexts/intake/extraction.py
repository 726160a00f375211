"""
Resume text extraction from uploaded PDFs.

pdfplumber provides per-page text plus character-level font data; the font
data is summarized into structure hints (sizes, bold fonts) that callers may
use to sanity-check the parsed layout.
"""

from dataclasses import dataclass, field
from typing import Any, Dict

from quill.contexts.intake.logger import _log_debug, _log_warning
from quill.contexts.intake.normalizer import clean_resume_text, normalize_bullets
from quill.utils.pdf_processing import PdfSource, extract_pdf_pages


@dataclass
class ExtractedResume:
    """
    Text pulled from a resume PDF.

    Attributes:
        text: Markdown-ish resume text (pages joined by blank lines)
        structure_hints: Optional layout hints: page_count, font_sizes,
                         largest_font_size, bold_fonts
    """

    text: str
    structure_hints: Dict[str, Any] = field(default_factory=dict)


def extract_text(pdf: PdfSource) -> ExtractedResume:
    """
    Extract resume text and structure hints from a PDF.

    Args:
        pdf: Raw PDF bytes or a path

    Returns:
        ExtractedResume. Text is empty for image-only PDFs.
    """
    pages = extract_pdf_pages(pdf)
    page_texts = [normalize_bullets(page.text) for page in pages if page.text.strip()]
    text = clean_resume_text("\n\n".join(page_texts))

    font_sizes = sorted({size for page in pages for size in page.font_sizes})
    bold_fonts = sorted({font for page in pages for font in page.bold_fonts})
    hints = {
        "page_count": len(pages),
        "font_sizes": font_sizes,
        "largest_font_size": font_sizes[-1] if font_sizes else None,
        "bold_fonts": bold_fonts,
    }

    if not text:
        _log_warning(f"No extractable text in {len(pages)} page(s); PDF may be image-only")
    else:
        _log_debug(f"Extracted {len(text.splitlines())} lines from {len(pages)} page(s)")
    return ExtractedResume(text=text, structure_hints=hints)
