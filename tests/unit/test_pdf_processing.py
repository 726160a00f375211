"""Unit tests for PDF helper functions."""

import pytest

from quill.utils.pdf_processing import is_bold_font, page_count


@pytest.mark.unit
@pytest.mark.parametrize(
    "fontname, expected",
    [
        ("Helvetica-Bold", True),
        ("ABCDEE+Helvetica-Bold", True),
        ("Times-BoldItalic", True),
        ("Helvetica", False),
        ("ABCDEE+Helvetica-Oblique", False),
    ],
)
def test_is_bold_font(fontname, expected):
    assert is_bold_font(fontname) is expected


@pytest.mark.unit
def test_page_count_unreadable_input():
    assert page_count(b"not a pdf") is None


@pytest.mark.unit
def test_page_count_missing_file(tmp_path):
    assert page_count(tmp_path / "missing.pdf") is None
