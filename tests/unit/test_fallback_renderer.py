"""Unit tests for the line-by-line fallback layout."""

import pytest

from quill.contexts.rendering.layout_engine import Line
from quill.contexts.rendering.renderer import TemplateRenderer
from quill.contexts.templating.parser import parse_resume

FALLBACK_RESUME = "Jane Doe\nAWARDS 2020\n- Best paper\nplain words here\n"


def _render(style, metrics, text):
    document = parse_resume(text)
    assert document.requires_fallback
    return TemplateRenderer(style, metrics=metrics).render(document)


@pytest.mark.unit
def test_paragraphs_without_headers_still_render(standard_style, fixed_metrics):
    text = "I am a developer.\nI like code.\n\nAnother paragraph here.\n"
    rendered = _render(standard_style, fixed_metrics, text)

    assert rendered.commands
    texts = [run.text for run in rendered.text_runs]
    assert texts == ["I am a developer.", "I like code.", "Another paragraph here."]
    # first line is treated as the name
    assert rendered.text_runs[0].font == "Helvetica-Bold"
    assert rendered.text_runs[1].x == 50


@pytest.mark.unit
def test_caps_line_is_ad_hoc_header(standard_style, fixed_metrics):
    rendered = _render(standard_style, fixed_metrics, FALLBACK_RESUME)
    runs = {run.text: run for run in rendered.text_runs}

    header = runs["AWARDS 2020"]
    assert header.font == "Helvetica-Bold"
    assert header.size == 13
    assert header.x == 50

    underlines = [command for command in rendered.commands if isinstance(command, Line)]
    assert len(underlines) == 1
    assert underlines[0].start[0] == 50
    assert underlines[0].end[0] == 50 + 11 * 6.5 + 10


@pytest.mark.unit
def test_fallback_bullets(standard_style, fixed_metrics):
    rendered = _render(standard_style, fixed_metrics, FALLBACK_RESUME)
    runs = {run.text: run for run in rendered.text_runs}

    assert runs["•"].x == 60
    assert runs["Best paper"].x == 75
    assert runs["•"].y == runs["Best paper"].y
    assert runs["plain words here"].x == 50


@pytest.mark.unit
def test_fallback_lines_flow_down_the_page(standard_style, fixed_metrics):
    rendered = _render(standard_style, fixed_metrics, FALLBACK_RESUME)
    ys = [run.y for run in rendered.text_runs if run.text != "•"]
    assert ys == sorted(ys, reverse=True)
    assert ys[0] == 742


@pytest.mark.unit
def test_long_fallback_text_paginates(standard_style, fixed_metrics):
    text = "\n".join(["Jane Doe"] + [f"plain line number {index}" for index in range(80)])
    rendered = _render(standard_style, fixed_metrics, text)

    assert rendered.page_count >= 2
    assert all(run.y >= standard_style.margins.bottom for run in rendered.text_runs)


@pytest.mark.unit
def test_long_first_line_wraps_inside_margins(standard_style, fixed_metrics):
    paragraph = " ".join(["paragraph"] * 40)
    rendered = _render(standard_style, fixed_metrics, f"{paragraph}\n\nsecond para\n")

    name_runs = [run for run in rendered.text_runs if run.size == standard_style.size_for("name")]
    assert len(name_runs) > 1
    assert " ".join(run.text for run in name_runs) == paragraph
    assert all(run.x >= standard_style.margins.left for run in rendered.text_runs)
    assert all(
        run.x + len(run.text) * run.size * 0.5 <= standard_style.content_right + 1e-6
        for run in rendered.text_runs
    )
