"""
LLM collaborators for resume optimization and ATS scoring.

ResumeOptimizer wraps an LLMProvider:
- optimize(): rewrite resume text for a job description, keeping the layout
  conventions the parser relies on (header block, caps/## section headers,
  '|' title/date lines, '-' bullets), then apply the one-page budget
- score(): ATS score report as structured data

Malformed score responses degrade to a zeroed ScoreReport instead of raising.
"""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List

from quill.contexts.intake.logger import _log_info, _log_warning
from quill.contexts.intake.normalizer import clean_resume_text
from quill.contexts.intake.page_budget import enforce_one_page_limit
from quill.contexts.templating.parser import parse_resume
from quill.contexts.templating.patterns import is_bullet_line
from quill.utils.llm import LLMProvider, get_provider, parse_json_object

# =============================================================================
# PROMPT TEMPLATES
# =============================================================================

_OPTIMIZE_SYSTEM_PROMPT = """\
You are an expert ATS resume writer. You reframe existing resume content to match a
job description without inventing experience. The result must fit on one page.
Return ONLY the resume text, with no commentary and no code fences."""

_OPTIMIZE_USER_PROMPT = """\
Optimize this resume for the job description below.

Format rules (the output is parsed by a program):
- Keep the header block (name on the first line, then contact details) exactly as given
- Section headers in ALL CAPS on their own line (e.g. EXPERIENCE, EDUCATION, SKILLS)
- Job and project entries as "Title | Dates" on one line
- Bullet points start with "- "
- Maintain the same number of sections ({section_count})
- Keep roughly the same number of bullet points ({bullet_count})

RESUME:
{resume}

JOB DESCRIPTION:
{job_description}"""

_SCORE_SYSTEM_PROMPT = """\
You are an ATS analysis assistant. Score resumes against job descriptions realistically
(avoid inflated scores). Return ONLY a JSON object."""

_SCORE_USER_PROMPT = """\
Analyze the resume against the job description:
1. Keyword matching (50% of score): exact and related terms, technical skills
2. Formatting (30% of score): section headers, organization, bullet usage, ATS-friendly structure
3. Content quality (20% of score): quantified achievements, action verbs, relevance

Return JSON with these keys:
{{
  "overallScore": <0-100>,
  "keywordScore": <0-100>,
  "formattingScore": <0-100>,
  "contentScore": <0-100>,
  "keywordMatches": [<matched keywords>],
  "missingKeywords": [<important keywords missing from the resume>],
  "improvementAreas": [{{"area": "...", "description": "...", "importance": <1-5>}}],
  "formattingIssues": [<formatting problems affecting ATS parsing>],
  "contentSuggestions": [<content improvement suggestions>]
}}

RESUME:
{resume}

JOB DESCRIPTION:
{job_description}"""


# =============================================================================
# SCORE REPORT
# =============================================================================


@dataclass
class ScoreReport:
    """
    ATS score for a resume against a job description.

    Scores are 0-100. Lists are empty when the model omitted them.
    """

    overall_score: float = 0.0
    keyword_score: float = 0.0
    formatting_score: float = 0.0
    content_score: float = 0.0
    keyword_matches: List[str] = field(default_factory=list)
    missing_keywords: List[str] = field(default_factory=list)
    improvement_areas: List[Dict[str, Any]] = field(default_factory=list)
    formatting_issues: List[str] = field(default_factory=list)
    content_suggestions: List[str] = field(default_factory=list)

    # Response keys (camelCase, as requested in the prompt) -> attribute names
    RESPONSE_KEYS = {
        "overallScore": "overall_score",
        "keywordScore": "keyword_score",
        "formattingScore": "formatting_score",
        "contentScore": "content_score",
        "keywordMatches": "keyword_matches",
        "missingKeywords": "missing_keywords",
        "improvementAreas": "improvement_areas",
        "formattingIssues": "formatting_issues",
        "contentSuggestions": "content_suggestions",
    }

    @classmethod
    def from_response(cls, data: Dict[str, Any]) -> "ScoreReport":
        """
        Build a report from parsed model JSON.

        Non-numeric scores become 0 (clamped to 0-100); non-list fields become [].
        """
        defaults = {f.name: f for f in fields(cls)}
        values = {}
        for key, attr in cls.RESPONSE_KEYS.items():
            value = data.get(key)
            if attr.endswith("_score"):
                if isinstance(value, (int, float)) and not isinstance(value, bool):
                    values[attr] = float(min(max(value, 0), 100))
                else:
                    values[attr] = 0.0
            elif isinstance(value, list):
                values[attr] = value
            else:
                values[attr] = defaults[attr].default_factory()
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {key: getattr(self, attr) for key, attr in self.RESPONSE_KEYS.items()}


def formatting_summary(text: str) -> Dict[str, int]:
    """Section and bullet counts of a resume, used to ask the model to keep the shape."""
    document = parse_resume(text)
    bullets = sum(1 for line in document.source_lines if is_bullet_line(line.text))
    return {"section_count": len(document.sections), "bullet_count": bullets}


# =============================================================================
# OPTIMIZER
# =============================================================================


class ResumeOptimizer:
    """
    Resume rewriting and scoring through an LLM provider.

    Example:
        optimizer = ResumeOptimizer()  # provider from LLM_PROVIDER
        new_text = optimizer.optimize(resume_text, job_description)
        report = optimizer.score(new_text, job_description)
    """

    def __init__(self, provider: LLMProvider = None, one_page: bool = True):
        """
        Args:
            provider: LLM provider (default: get_provider())
            one_page: Apply the one-page budget to optimized text
        """
        self.provider = provider if provider is not None else get_provider()
        self.one_page = one_page

    def optimize(self, text: str, job_description: str) -> str:
        """
        Rewrite resume text for a job description.

        Args:
            text: Current resume text
            job_description: Target job description

        Returns:
            Optimized resume text, cleaned (and trimmed to one page if enabled)
        """
        summary = formatting_summary(text)
        user_prompt = _OPTIMIZE_USER_PROMPT.format(
            resume=clean_resume_text(text),
            job_description=job_description.strip(),
            **summary,
        )
        response = self.provider.generate(_OPTIMIZE_SYSTEM_PROMPT, user_prompt)
        optimized = clean_resume_text(response.content)
        _log_info(
            f"Optimized resume: {len(text.splitlines())} -> {len(optimized.splitlines())} lines"
        )
        if self.one_page:
            optimized = enforce_one_page_limit(optimized)
        return optimized

    def score(self, text: str, job_description: str) -> ScoreReport:
        """
        Score resume text against a job description.

        Returns:
            ScoreReport; all zeros when the response is not a JSON object
        """
        user_prompt = _SCORE_USER_PROMPT.format(
            resume=clean_resume_text(text), job_description=job_description.strip()
        )
        response = self.provider.generate(_SCORE_SYSTEM_PROMPT, user_prompt)
        data = parse_json_object(response.content)
        if not data:
            _log_warning("Score response was not a JSON object; returning empty report")
        report = ScoreReport.from_response(data)
        _log_info(f"ATS score: {report.overall_score:.0f}")
        return report
