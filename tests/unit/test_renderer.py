"""
Unit tests for the template renderer.

Layouts use FixedWidthMetrics (every character is half the font size wide), so
positions can be computed by hand. The standard template has 50pt margins on
a 612x792 page: content runs from x=50 to x=562 and starts at y=742.
"""

import pytest

from quill.contexts.rendering.layout_engine import Line, TextRun
from quill.contexts.rendering.render_context import RenderContext
from quill.contexts.rendering.renderer import (
    TemplateRenderer,
    nesting_level,
    render_subsection,
    split_title_date,
)
from quill.contexts.templating.parser import parse_resume
from quill.contexts.templating.resume_data_structure import Item, ItemKind, RawLine

SIMPLE_RESUME = (
    "JANE DOE\njane@x.com\n\nEXPERIENCE\nAcme Corp | Engineer\n2020 - Present\n- Built thing\n"
)


def _render(style, metrics, text):
    return TemplateRenderer(style, metrics=metrics).render(parse_resume(text))


def _run(rendered, text):
    runs = [run for run in rendered.text_runs if run.text == text]
    assert runs, f"no text run {text!r}"
    return runs[0]


@pytest.mark.unit
def test_header_name_and_contact(standard_style, fixed_metrics):
    rendered = _render(standard_style, fixed_metrics, SIMPLE_RESUME)

    name = _run(rendered, "JANE DOE")
    assert name.font == "Helvetica-Bold"
    assert name.size == 22
    assert name.y == 742
    assert name.x == pytest.approx(50 + (512 - 88) / 2)

    contact = _run(rendered, "jane@x.com")
    assert contact.y == 742 - 28
    assert contact.x == pytest.approx(50 + (512 - 50) / 2)
    assert contact.color == (0.15, 0.15, 0.15)


@pytest.mark.unit
def test_header_rule_and_section_header(standard_style, fixed_metrics):
    rendered = _render(standard_style, fixed_metrics, SIMPLE_RESUME)
    lines = [command for command in rendered.commands if isinstance(command, Line)]

    header_rule, underline = lines[0], lines[1]
    assert header_rule.start == (50, 683)
    assert header_rule.end == (562, 683)

    section = _run(rendered, "EXPERIENCE")
    assert (section.x, section.y) == (50, 669)
    assert section.font == "Helvetica-Bold"
    # underline spans the title width plus padding
    assert underline.start == (50, 654)
    assert underline.end == (50 + 65 + 10, 654)


@pytest.mark.unit
def test_subsection_layout(standard_style, fixed_metrics):
    rendered = _render(standard_style, fixed_metrics, SIMPLE_RESUME)

    title = _run(rendered, "Acme Corp")
    date = _run(rendered, "Engineer")
    assert title.y == date.y == 644
    assert date.x == pytest.approx(562 - 36)
    assert date.font == "Helvetica"

    dates = _run(rendered, "2020 - Present")
    assert dates.y == 631

    glyph = _run(rendered, "•")
    bullet = _run(rendered, "Built thing")
    assert glyph.x == 60
    assert bullet.x == 75
    assert glyph.y == bullet.y == 618


@pytest.mark.unit
def test_tagline_is_italic_and_centered(standard_style, fixed_metrics):
    rendered = _render(
        standard_style,
        fixed_metrics,
        "JANE DOE\nSenior Engineer\njane@x.com\n\nEXPERIENCE\n- Built thing\n",
    )
    tagline = _run(rendered, "Senior Engineer")
    assert tagline.font == "Helvetica-Oblique"
    assert tagline.size == 9
    assert tagline.x == pytest.approx(50 + (512 - 15 * 4.5) / 2)


@pytest.mark.unit
def test_bullet_group_offsets(standard_style, fixed_metrics):
    rendered = _render(standard_style, fixed_metrics, "JANE DOE\n\nSKILLS\n- Python\n- Go\n")
    assert _run(rendered, "Python").x == 65
    glyphs = [run for run in rendered.text_runs if run.text == "•"]
    assert [glyph.x for glyph in glyphs] == [50, 50]


@pytest.mark.unit
def test_nested_bullets_are_indented(standard_style, fixed_metrics):
    text = "JANE DOE\n\nEXPERIENCE\nAcme Corp | Engineer\n- Top level\n  - Nested once\n"
    rendered = _render(standard_style, fixed_metrics, text)
    assert _run(rendered, "Top level").x == 75
    assert _run(rendered, "Nested once").x == 75 + 12


@pytest.mark.unit
def test_long_bullet_wraps_within_column(standard_style, fixed_metrics):
    long_bullet = " ".join(["word"] * 30)
    text = f"JANE DOE\n\nEXPERIENCE\nAcme Corp | Engineer\n- {long_bullet}\n"
    rendered = _render(standard_style, fixed_metrics, text)

    wrapped = [run for run in rendered.text_runs if run.text.startswith("word")]
    assert len(wrapped) >= 2
    for run in wrapped:
        assert run.x == 75
        assert fixed_metrics.width(run.text, run.font, run.size) <= 512 - 25
    assert " ".join(run.text for run in wrapped) == long_bullet


@pytest.mark.unit
def test_regex_contacts_highlight_links(classic_style, fixed_metrics):
    text = "JANE DOE\njane@x.com | linkedin.com/in/jane\n\nEXPERIENCE\n- Built thing\n"
    rendered = _render(classic_style, fixed_metrics, text)

    email = _run(rendered, "jane@x.com")
    linkedin = _run(rendered, "linkedin.com/in/jane")
    separator = _run(rendered, " | ")
    assert email.color == linkedin.color == (0, 0, 0.8)
    assert separator.color == (0.1, 0.1, 0.1)
    assert email.y == linkedin.y == separator.y


@pytest.mark.unit
def test_full_width_section_rule(classic_style, fixed_metrics):
    rendered = _render(classic_style, fixed_metrics, "JANE DOE\n\nSKILLS\n- Python\n")
    underline = [command for command in rendered.commands if isinstance(command, Line)][-1]
    assert underline.end[0] == 562
    assert underline.thickness == 0.8


@pytest.mark.unit
def test_empty_document_is_one_blank_page(standard_style, fixed_metrics):
    rendered = _render(standard_style, fixed_metrics, "")
    assert rendered.page_count == 1
    assert rendered.commands == []


@pytest.mark.unit
def test_renderer_is_reusable(standard_style, fixed_metrics):
    renderer = TemplateRenderer(standard_style, metrics=fixed_metrics)
    first = renderer.render(parse_resume(SIMPLE_RESUME))
    second = renderer.render(parse_resume(SIMPLE_RESUME))
    assert first.commands == second.commands
    assert all(isinstance(command, (TextRun, Line)) for command in first.commands)


@pytest.mark.unit
@pytest.mark.parametrize(
    "text, expected",
    [
        ("Engineer | 2020 - Present", ("Engineer", "2020 - Present")),
        ("Acme | Engineer | 2019 - 2021", ("Acme", "Engineer | 2019 - 2021")),
        ("Senior Engineer Jan 2019 - 2021", ("Senior Engineer", "Jan 2019 - 2021")),
        ("Engineer, 2016 - 2020", ("Engineer", "2016 - 2020")),
        ("Title |", ("Title", None)),
        ("Plain title", ("Plain title", None)),
    ],
)
def test_split_title_date(text, expected):
    assert split_title_date(text) == expected


@pytest.mark.unit
@pytest.mark.parametrize("indent, level", [(0, 0), (1, 0), (2, 1), (4, 2), (12, 3)])
def test_nesting_level(indent, level):
    assert nesting_level(RawLine.from_text(" " * indent + "- item")) == level


ENTRY_LINES = ["Acme Corp", "Engineer | 2019 - 2021", "Austin, Texas", "- Built it"]


def _render_entry(style, metrics, lines):
    ctx = RenderContext.create(style, metrics)
    item = Item(ItemKind.SUBSECTION, [RawLine.from_text(line) for line in lines])
    render_subsection(ctx, item)
    return ctx.engine.finish()


@pytest.mark.unit
def test_probed_entry_title_then_job_title_and_location(standard_style, fixed_metrics):
    rendered = _render_entry(standard_style, fixed_metrics, ENTRY_LINES)

    title = _run(rendered, "Acme Corp")
    assert (title.x, title.y) == (50, 742)
    assert (title.font, title.size) == ("Helvetica-Bold", 11)

    job = _run(rendered, "Engineer")
    assert (job.x, job.y) == (50, 742 - 13)
    assert (job.font, job.size) == ("Helvetica-Oblique", 10.5)

    date = _run(rendered, "2019 - 2021")
    assert date.y == job.y
    assert date.x == pytest.approx(562 - 11 * 4.5)
    assert (date.font, date.size) == ("Helvetica", 9)

    location = _run(rendered, "Austin, Texas")
    assert (location.x, location.y) == (50, 742 - 26)
    assert location.color == standard_style.color_for("location")
    assert location.size == 9

    assert _run(rendered, "Built it").x == 75


@pytest.mark.unit
def test_inline_entry_draws_location_as_detail(classic_style, fixed_metrics):
    rendered = _render_entry(classic_style, fixed_metrics, ENTRY_LINES)

    title = _run(rendered, "Acme Corp")
    assert (title.x, title.y) == (50, 752)
    assert title.font == classic_style.font_for("entry_title")

    job = _run(rendered, "Engineer")
    date = _run(rendered, "2019 - 2021")
    assert job.y == date.y == 752 - 14
    assert job.font == classic_style.font_for("job_title")
    assert date.x == pytest.approx(562 - 11 * 4.5)

    location = _run(rendered, "Austin, Texas")
    assert location.y == 752 - 28
    assert location.color == classic_style.color_for("detail")


@pytest.mark.unit
def test_inline_pipe_on_first_line_is_entry_title(classic_style, fixed_metrics):
    rendered = _render_entry(classic_style, fixed_metrics, ["Acme Corp | 2019 - 2021", "- Built it"])

    title = _run(rendered, "Acme Corp")
    assert title.font == classic_style.font_for("entry_title")
    assert _run(rendered, "2019 - 2021").y == title.y


@pytest.mark.unit
def test_parsed_entry_with_month_dates_and_location(standard_style, fixed_metrics):
    text = "JANE DOE\n\nEXPERIENCE\nAcme Corp\nJan 2019 - Present\nAustin, Texas\n- Built it\n"
    rendered = _render(standard_style, fixed_metrics, text)

    title = _run(rendered, "Acme Corp")
    date = _run(rendered, "Jan 2019 - Present")
    location = _run(rendered, "Austin, Texas")
    assert date.y == title.y - 13
    assert date.x == pytest.approx(562 - 18 * 4.5)
    assert location.y == date.y - 13
    assert location.color == standard_style.color_for("location")


@pytest.mark.unit
def test_long_name_wraps_within_margins(standard_style, fixed_metrics):
    name = " ".join(["Jane"] * 30)
    rendered = _render(standard_style, fixed_metrics, f"{name}\njane@x.com\n\nSKILLS\n- Python\n")

    name_runs = [run for run in rendered.text_runs if run.size == 22]
    assert len(name_runs) > 1
    assert " ".join(run.text for run in name_runs) == name
    assert all(run.x >= 50 for run in rendered.text_runs)
