"""
Intake Context

Responsibilities:
- Extracts resume text from uploaded PDFs
- Cleans LLM output before parsing
- Talks to LLM collaborators (optimize, score)
- Keeps rewritten text within a one-page budget

Owns: Raw and optimized resume text, score reports
Never: Parses resume structure for layout or draws anything
"""

from quill.contexts.intake.extraction import ExtractedResume, extract_text
from quill.contexts.intake.normalizer import clean_resume_text, normalize_bullets
from quill.contexts.intake.optimizer import ResumeOptimizer, ScoreReport
from quill.contexts.intake.page_budget import enforce_one_page_limit

__all__ = [
    "ExtractedResume",
    "extract_text",
    "clean_resume_text",
    "normalize_bullets",
    "enforce_one_page_limit",
    "ResumeOptimizer",
    "ScoreReport",
]
