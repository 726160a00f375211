"""Unit tests for the optimizer and score report, using a scripted provider."""

import json

import pytest

from quill.contexts.intake.optimizer import ResumeOptimizer, ScoreReport, formatting_summary
from quill.utils.llm import LLMProvider, LLMResponse

RESUME = """JANE DOE
jane@x.com | 555-0100

EXPERIENCE
Acme Corp | Engineer | 2019 - 2021
- Built things
- Shipped things

SKILLS
- Python
"""


class ScriptedProvider(LLMProvider):
    """Provider that returns canned responses and records prompts."""

    _provider_prefix = "scripted"
    _retryable_exceptions = (RuntimeError,)
    _retry_message = "retry"

    def __init__(self, *responses):
        self.responses = list(responses)
        self.prompts = []
        self.update_model("test")

    def _call_api(self, system_prompt, user_prompt):
        self.prompts.append((system_prompt, user_prompt))
        return LLMResponse(
            content=self.responses.pop(0), model=self.model, input_tokens=0, output_tokens=0
        )


@pytest.mark.unit
def test_formatting_summary():
    assert formatting_summary(RESUME) == {"section_count": 2, "bullet_count": 3}


@pytest.mark.unit
def test_optimize_cleans_response():
    provider = ScriptedProvider("```markdown\nJANE DOE\n\nEXPERIENCE\n- Built&nbsp;things\n```")
    optimizer = ResumeOptimizer(provider=provider)

    result = optimizer.optimize(RESUME, "  Senior Python role  ")

    assert result == "JANE DOE\n\nEXPERIENCE\n- Built things"
    _, user_prompt = provider.prompts[0]
    assert "Senior Python role" in user_prompt
    assert "(2)" in user_prompt and "(3)" in user_prompt


@pytest.mark.unit
def test_optimize_applies_one_page_budget():
    long_text = "\n".join(f"line number {index}" for index in range(80))
    provider = ScriptedProvider(long_text, long_text)

    assert len(ResumeOptimizer(provider=provider).optimize(RESUME, "jd").split("\n")) == 45
    assert ResumeOptimizer(provider=provider, one_page=False).optimize(RESUME, "jd") == long_text


@pytest.mark.unit
def test_score_parses_report():
    payload = {
        "overallScore": 78,
        "keywordScore": 140,
        "formattingScore": "high",
        "contentScore": 61.5,
        "keywordMatches": ["python"],
        "missingKeywords": "kubernetes",
        "improvementAreas": [{"area": "Skills", "description": "Add k8s", "importance": 4}],
    }
    provider = ScriptedProvider("```json\n" + json.dumps(payload) + "\n```")

    report = ResumeOptimizer(provider=provider).score(RESUME, "jd")

    assert report.overall_score == 78.0
    assert report.keyword_score == 100.0
    assert report.formatting_score == 0.0
    assert report.content_score == 61.5
    assert report.keyword_matches == ["python"]
    assert report.missing_keywords == []
    assert report.improvement_areas[0]["area"] == "Skills"
    assert report.formatting_issues == []


@pytest.mark.unit
def test_score_malformed_response_gives_empty_report():
    report = ResumeOptimizer(provider=ScriptedProvider("I cannot score this.")).score(RESUME, "jd")
    assert report == ScoreReport()
    assert report.to_dict()["overallScore"] == 0.0


@pytest.mark.unit
def test_score_report_to_dict_uses_response_keys():
    report = ScoreReport(overall_score=50.0, keyword_matches=["go"])
    data = report.to_dict()
    assert set(data) == set(ScoreReport.RESPONSE_KEYS)
    assert data["keywordMatches"] == ["go"]
