"""Unit tests for greedy text wrapping."""

import math

import pytest

from quill.contexts.rendering.exceptions import MeasurementError
from quill.contexts.rendering.text_wrapper import wrap_text


def char_count(text, size):
    return len(text)


@pytest.mark.unit
def test_empty_input_yields_no_lines():
    assert wrap_text("", 10, char_count, 10) == []
    assert wrap_text("   ", 10, char_count, 10) == []


@pytest.mark.unit
def test_greedy_fill():
    assert wrap_text("aa bb cc", 5, char_count, 10) == ["aa bb", "cc"]


@pytest.mark.unit
def test_fits_on_one_line():
    assert wrap_text("hello world", 100, char_count, 10) == ["hello world"]


@pytest.mark.unit
def test_long_word_is_not_split():
    assert wrap_text("a verylongword b", 5, char_count, 10) == ["a", "verylongword", "b"]


@pytest.mark.unit
def test_multiple_spaces_collapse():
    assert wrap_text("a   b", 10, char_count, 10) == ["a b"]


@pytest.mark.unit
def test_font_size_is_passed_to_measure():
    def scaled(text, size):
        return len(text) * size

    assert wrap_text("ab cd", 40, scaled, 10) == ["ab", "cd"]
    assert wrap_text("ab cd", 40, scaled, 5) == ["ab cd"]


@pytest.mark.unit
@pytest.mark.parametrize(
    "text",
    [
        "The quick brown fox jumps over the lazy dog",
        "Led  the migration of 40 batch jobs   to a streaming pipeline",
        "supercalifragilisticexpialidocious is a word",
        "one",
    ],
)
@pytest.mark.parametrize("max_width", [4, 10, 25])
def test_rejoin_and_width(text, max_width):
    lines = wrap_text(text, max_width, char_count, 10)

    assert " ".join(lines) == " ".join(text.split())
    for line in lines:
        assert len(line) <= max_width or " " not in line


@pytest.mark.unit
def test_measure_exception_becomes_measurement_error():
    def broken(text, size):
        raise RuntimeError("no glyphs")

    with pytest.raises(MeasurementError) as exc_info:
        wrap_text("two words", 100, broken, 10)

    assert exc_info.value.text == "two"
    assert isinstance(exc_info.value.original_error, RuntimeError)
    assert "two" in str(exc_info.value)


@pytest.mark.unit
@pytest.mark.parametrize("bad_width", [math.nan, math.inf])
def test_non_finite_width_is_measurement_error(bad_width):
    with pytest.raises(MeasurementError) as exc_info:
        wrap_text("two words", 100, lambda text, size: bad_width, 10)
    assert exc_info.value.size == 10


@pytest.mark.unit
def test_single_word_measurement_failure_is_raised():
    def broken(text, size):
        raise KeyError("missing glyph")

    with pytest.raises(MeasurementError) as exc_info:
        wrap_text("lonely", 100, broken, 10)
    assert exc_info.value.text == "lonely"


@pytest.mark.unit
def test_every_candidate_is_measured():
    measured = []

    def recording(text, size):
        measured.append(text)
        return len(text)

    assert wrap_text("aa bb cc", 5, recording, 10) == ["aa bb", "cc"]
    assert measured == ["aa", "aa bb", "aa bb cc"]
