"""Shared fixtures: deterministic font metrics and template styles."""

import pytest

from quill.contexts.templating.template_registry import TemplateRegistry

# Fixed advance per character, as a fraction of the font size
CHAR_ADVANCE = 0.5


class FixedWidthMetrics:
    """Font metrics where every character is CHAR_ADVANCE * size wide, in every font."""

    def width(self, text: str, font: str, size: float) -> float:
        return len(text) * size * CHAR_ADVANCE

    def measure_for(self, font: str):
        return lambda text, size: self.width(text, font, size)


@pytest.fixture
def fixed_metrics():
    return FixedWidthMetrics()


@pytest.fixture
def registry():
    return TemplateRegistry()


@pytest.fixture
def standard_style(registry):
    return registry.get_style("standard")


@pytest.fixture
def classic_style(registry):
    return registry.get_style("classic")
