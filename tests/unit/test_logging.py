"""Unit tests for session logger setup and the per-context prefixes."""

import pytest
from loguru import logger

from quill.contexts.intake.logger import setup_intake_logger
from quill.contexts.rendering.layout_engine import Page, RenderedDocument
from quill.contexts.rendering.logger import _log_info, log_render_result, setup_rendering_logger


@pytest.fixture
def remove_sinks():
    yield
    logger.remove()


@pytest.mark.unit
def test_rendering_logger_writes_provenance(tmp_path, remove_sinks):
    log_file = setup_rendering_logger(tmp_path / "session", template_id="classic")
    _log_info("hello")
    logger.remove()

    assert log_file == tmp_path / "session" / "render.log"
    content = log_file.read_text()
    assert "Template: classic" in content
    assert "QUILL: " in content
    assert "[render] hello" in content


@pytest.mark.unit
def test_render_result_is_logged_at_debug(tmp_path, remove_sinks):
    log_file = setup_rendering_logger(tmp_path)
    rendered = RenderedDocument(pages=[Page(0, 612, 792), Page(1, 612, 792)], commands=[])
    log_render_result("standard", rendered, fallback=True)
    logger.remove()

    content = log_file.read_text()
    assert "standard: 2 page(s), 0 draw commands (fallback layout)" in content
    assert "output spans 2 pages" in content


@pytest.mark.unit
def test_intake_logger_records_provider(tmp_path, remove_sinks):
    log_file = setup_intake_logger(tmp_path, provider="anthropic")
    logger.remove()

    assert log_file.name == "intake.log"
    assert "LLM provider: anthropic" in log_file.read_text()
