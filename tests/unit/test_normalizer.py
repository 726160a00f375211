"""Unit tests for resume text cleanup."""

import pytest

from quill.contexts.intake.normalizer import clean_resume_text, normalize_bullets


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw, expected",
    [
        ("```markdown\nJANE DOE\n```", "JANE DOE"),
        ("```text\nJANE DOE\n```", "JANE DOE"),
        ("```\nJANE DOE\n```", "JANE DOE"),
        ("JANE&nbsp;DOE", "JANE DOE"),
        ("R&amp;D lead", "RD lead"),
        ("  plain text  \n", "plain text"),
    ],
)
def test_clean_resume_text(raw, expected):
    assert clean_resume_text(raw) == expected


@pytest.mark.unit
def test_clean_resume_text_keeps_ampersands_outside_entities():
    assert clean_resume_text("Johnson & Johnson") == "Johnson & Johnson"


@pytest.mark.unit
def test_normalize_bullets_rewrites_extracted_glyphs():
    text = "EXPERIENCE\n∙ built things\n  ● led team\n◦shipped\n- kept dash"
    assert normalize_bullets(text) == (
        "EXPERIENCE\n• built things\n• led team\n• shipped\n- kept dash"
    )


@pytest.mark.unit
def test_normalize_bullets_ignores_mid_line_glyphs():
    assert normalize_bullets("Python • Go • Rust") == "Python • Go • Rust"
