"""Unit tests for LLM response parsing and provider selection."""

import pytest

from quill.utils.llm import (
    MAX_RETRIES,
    LLMProvider,
    LLMResponse,
    get_provider,
    parse_json_object,
    strip_code_fences,
)


@pytest.mark.unit
@pytest.mark.parametrize(
    "raw, expected",
    [
        ('```json\n{"a": 1}\n```', '{"a": 1}'),
        ("```\nhello\n```", "hello"),
        ("  no fence  ", "no fence"),
        ("```", ""),
    ],
)
def test_strip_code_fences(raw, expected):
    assert strip_code_fences(raw) == expected


@pytest.mark.unit
def test_parse_json_object_direct():
    assert parse_json_object('{"overallScore": 72}') == {"overallScore": 72}


@pytest.mark.unit
def test_parse_json_object_embedded_in_prose():
    text = 'Here is the analysis:\n{"overallScore": 64, "keywordMatches": ["python"]}\nThanks!'
    assert parse_json_object(text) == {"overallScore": 64, "keywordMatches": ["python"]}


@pytest.mark.unit
def test_parse_json_object_fenced():
    assert parse_json_object('```json\n{"a": [1, 2]}\n```') == {"a": [1, 2]}


@pytest.mark.unit
@pytest.mark.parametrize("text", ["not json", "[1, 2, 3]", "{broken", ""])
def test_parse_json_object_fallback(text):
    assert parse_json_object(text) == {}
    assert parse_json_object(text, fallback={"ok": False}) == {"ok": False}


@pytest.mark.unit
def test_unknown_provider_rejected():
    with pytest.raises(ValueError, match="Unknown provider"):
        get_provider("cohere")


class FlakyProvider(LLMProvider):
    _provider_prefix = "flaky"
    _retryable_exceptions = (ConnectionError,)

    def __init__(self, failures, error=ConnectionError):
        self.failures = failures
        self.error = error
        self.calls = 0
        self.update_model("test")

    def _call_api(self, system_prompt, user_prompt):
        self.calls += 1
        if self.calls <= self.failures:
            raise self.error("unavailable")
        return LLMResponse(content="ok", model=self.model, input_tokens=3, output_tokens=4)


@pytest.mark.unit
def test_generate_retries_transient_errors(monkeypatch):
    monkeypatch.setattr("quill.utils.llm.time.sleep", lambda seconds: None)
    provider = FlakyProvider(failures=2)

    response = provider.generate("system", "user")

    assert response.content == "ok"
    assert response.total_tokens == 7
    assert provider.calls == 3
    assert provider.name == "flaky/test"


@pytest.mark.unit
def test_generate_gives_up_after_max_retries(monkeypatch):
    monkeypatch.setattr("quill.utils.llm.time.sleep", lambda seconds: None)
    provider = FlakyProvider(failures=MAX_RETRIES)

    with pytest.raises(ConnectionError):
        provider.generate("system", "user")
    assert provider.calls == MAX_RETRIES


@pytest.mark.unit
def test_non_retryable_errors_propagate(monkeypatch):
    monkeypatch.setattr("quill.utils.llm.time.sleep", lambda seconds: None)
    provider = FlakyProvider(failures=1, error=KeyError)

    with pytest.raises(KeyError):
        provider.generate("system", "user")
    assert provider.calls == 1
