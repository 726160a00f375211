"""
LLM provider abstraction and response parsing utilities.

The optimizer talks to a model through LLMProvider, so the rest of the code
does not care which SDK is installed. Transient API failures (rate limits,
connection drops, 5xx) are retried with exponential backoff; everything else
propagates to the caller.

Environment:
    LLM_PROVIDER: "openai" (default) or "anthropic"
    LLM_MODEL: Model override for the selected provider
    OPENAI_API_KEY / ANTHROPIC_API_KEY: Credentials for the selected provider
"""

import json
import os
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass
from functools import partial
from typing import Any, Callable, Dict, Optional, Tuple, TypeVar

from dotenv import load_dotenv
from loguru import logger

load_dotenv()

# Retry configuration
MAX_RETRIES = 5
BASE_DELAY = 1.0

# A rewritten one-page resume fits comfortably; score JSON is much shorter
DEFAULT_MAX_TOKENS = 4096

# Low temperature keeps rewrites close to the source resume
DEFAULT_TEMPERATURE = 0.3

DEFAULT_MODELS = {
    "anthropic": "claude-sonnet-4-20250514",
    "openai": "gpt-4o",
}

T = TypeVar("T")


def _retry_with_backoff(
    operation: Callable[[], T],
    retryable: Tuple[type, ...],
    error_message: str,
) -> T:
    """
    Run operation, retrying with exponential backoff on the given exceptions.

    Args:
        operation: Zero-argument callable performing one API request
        retryable: Exception types that trigger a retry
        error_message: Prefix for the retry warning (e.g., "Rate limit hit")
    """
    for attempt in range(MAX_RETRIES):
        try:
            return operation()
        except retryable as e:
            if attempt == MAX_RETRIES - 1:
                raise
            delay = BASE_DELAY * (2**attempt)
            logger.warning(
                f"{error_message} ({type(e).__name__}), retrying in {delay:.1f}s... "
                f"(attempt {attempt + 1}/{MAX_RETRIES})"
            )
            time.sleep(delay)


# --- LLM Provider Classes ---


@dataclass
class LLMResponse:
    """Text returned by a provider plus token usage."""

    content: str
    model: str
    input_tokens: int
    output_tokens: int

    @property
    def total_tokens(self) -> int:
        return self.input_tokens + self.output_tokens


class LLMProvider(ABC):
    """
    Abstract base for LLM providers.

    Subclasses set _provider_prefix, _retryable_exceptions and _retry_message,
    implement _call_api(), and call update_model() from __init__.
    """

    _provider_prefix: str
    _retryable_exceptions: Tuple[type, ...] = ()
    _retry_message: str = "Transient API error"

    name: str
    model: str
    max_tokens: int = DEFAULT_MAX_TOKENS
    temperature: float = DEFAULT_TEMPERATURE

    def update_model(self, model: str):
        """Update the model and refresh the provider name."""
        self.model = model
        self.name = f"{self._provider_prefix}/{model}"

    @abstractmethod
    def _call_api(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        """Make a single API call (no retries)."""

    def generate(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        """Generate a response, retrying transient API errors."""
        response = _retry_with_backoff(
            partial(self._call_api, system_prompt, user_prompt),
            self._retryable_exceptions,
            self._retry_message,
        )
        logger.debug(
            f"{self.name}: {response.input_tokens} input + "
            f"{response.output_tokens} output tokens"
        )
        return response


def _require_api_key(variable: str) -> str:
    api_key = os.getenv(variable)
    if not api_key:
        raise ValueError(f"{variable} environment variable not set")
    return api_key


class AnthropicProvider(LLMProvider):
    """Anthropic Claude provider."""

    _provider_prefix = "anthropic"
    _retry_message = "Anthropic API unavailable"

    def __init__(
        self,
        model: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        # Lazy import - SDKs are optional extras, only load the one in use
        try:
            import anthropic
        except ImportError:
            raise ImportError("anthropic package required. Install with: pip install anthropic")

        self.client = anthropic.Anthropic(api_key=_require_api_key("ANTHROPIC_API_KEY"))
        self._retryable_exceptions = (
            anthropic.RateLimitError,
            anthropic.APIConnectionError,
            anthropic.InternalServerError,
        )
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.update_model(model or DEFAULT_MODELS[self._provider_prefix])

    def _call_api(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        response = self.client.messages.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            system=system_prompt,
            messages=[{"role": "user", "content": user_prompt}],
        )
        return LLMResponse(
            content=response.content[0].text,
            model=self.model,
            input_tokens=response.usage.input_tokens,
            output_tokens=response.usage.output_tokens,
        )


class OpenAIProvider(LLMProvider):
    """OpenAI chat completions provider."""

    _provider_prefix = "openai"
    _retry_message = "OpenAI API unavailable"

    def __init__(
        self,
        model: Optional[str] = None,
        max_tokens: int = DEFAULT_MAX_TOKENS,
        temperature: float = DEFAULT_TEMPERATURE,
    ):
        try:
            import openai
        except ImportError:
            raise ImportError("openai package required. Install with: pip install openai")

        self.client = openai.OpenAI(api_key=_require_api_key("OPENAI_API_KEY"))
        self._retryable_exceptions = (
            openai.RateLimitError,
            openai.APIConnectionError,
            openai.InternalServerError,
        )
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.update_model(model or DEFAULT_MODELS[self._provider_prefix])

    def _call_api(self, system_prompt: str, user_prompt: str) -> LLMResponse:
        response = self.client.chat.completions.create(
            model=self.model,
            max_tokens=self.max_tokens,
            temperature=self.temperature,
            messages=[
                {"role": "system", "content": system_prompt},
                {"role": "user", "content": user_prompt},
            ],
        )
        return LLMResponse(
            content=response.choices[0].message.content or "",
            model=self.model,
            input_tokens=response.usage.prompt_tokens,
            output_tokens=response.usage.completion_tokens,
        )


PROVIDERS = {
    "anthropic": AnthropicProvider,
    "openai": OpenAIProvider,
}


def get_provider(provider_name: str = None, model: str = None) -> LLMProvider:
    """
    Get an LLM provider instance.

    Args:
        provider_name: "anthropic" or "openai" (default: LLM_PROVIDER, then "openai")
        model: Model name (default: LLM_MODEL, then the provider's default)

    Returns:
        LLMProvider instance

    Raises:
        ValueError: Unknown provider or missing API key
        ImportError: Provider SDK not installed
    """
    provider_name = (provider_name or os.getenv("LLM_PROVIDER", "openai")).lower()
    if provider_name not in PROVIDERS:
        raise ValueError(
            f"Unknown provider: {provider_name}. Use one of: {', '.join(sorted(PROVIDERS))}"
        )
    return PROVIDERS[provider_name](model=model or os.getenv("LLM_MODEL"))


# --- Response Parsing Utilities ---


def strip_code_fences(text: str) -> str:
    """Remove a surrounding ```lang ... ``` fence from an LLM response, if present."""
    text = text.strip()
    if text.startswith("```"):
        first_newline = text.find("\n")
        text = text[first_newline + 1 :] if first_newline != -1 else ""
        if text.rstrip().endswith("```"):
            text = text.rstrip()[:-3]
    return text.strip()


def parse_json_object(text: str, fallback: Dict[str, Any] = None) -> Dict[str, Any]:
    """
    Parse a JSON object from an LLM response.

    Tries the whole (unfenced) response first, then the outermost {...} span,
    since models sometimes wrap the object in prose.

    Args:
        text: LLM response text
        fallback: Dict to return if parsing fails (default: empty dict)

    Returns:
        Parsed dict, or the fallback
    """
    text = strip_code_fences(text)

    candidates = [text]
    start, end = text.find("{"), text.rfind("}")
    if start != -1 and end > start:
        candidates.append(text[start : end + 1])

    for candidate in candidates:
        try:
            result = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(result, dict):
            return result

    return fallback if fallback is not None else {}
