#!/usr/bin/env python3
"""
Resume Rendering CLI

Lays out resume text as a PDF with one of the catalog templates, and exposes
the parser and optimizer for inspection.

Commands:
    render    - Render a resume text file to PDF
    templates - List available templates
    inspect   - Show per-line roles and the parsed document tree
    optimize  - Optimize a resume PDF for a job description (needs an LLM API key)

Examples:\n

    render_resume.py render resume.md                          # Default template

    render_resume.py render resume.md -t classic -o out.pdf    # Choose template and output

    render_resume.py templates                                 # List templates

    render_resume.py inspect resume.md                         # Debug classification

    render_resume.py optimize resume.pdf job.txt --score       # Optimize, regenerate and score
"""

import os
from datetime import datetime
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from omegaconf import OmegaConf
from typing_extensions import Annotated

from quill.contexts.intake import ResumeOptimizer, enforce_one_page_limit, extract_text
from quill.contexts.intake.logger import setup_intake_logger
from quill.contexts.rendering import RenderError, regenerate_pdf, render_resume_pdf
from quill.contexts.rendering.logger import setup_rendering_logger
from quill.contexts.templating import (
    EmptyInputError,
    TemplateRegistry,
    UnknownTemplateError,
    classify,
    parse_resume,
)
from quill.contexts.templating.logger import setup_templating_logger
from quill.utils.pdf_processing import page_count

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))


def _session_log_dir(prefix: str) -> Path:
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    return LOGS_PATH / f"{prefix}_{timestamp}"


def _read_text(path: Path) -> str:
    if not path.exists():
        typer.secho(f"Error: File not found: {path}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return path.read_text(encoding="utf-8")


app = typer.Typer(
    help="Render resume text to PDF with configurable templates",
    add_completion=False,
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("render")
def render_command(
    input_path: Annotated[
        Path,
        typer.Argument(help="Resume text file (markdown-ish)"),
    ],
    template: Annotated[
        Optional[str],
        typer.Option("--template", "-t", help="Template id (see 'templates')"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output PDF path (default: input path with .pdf)"),
    ] = None,
    one_page: Annotated[
        bool,
        typer.Option("--one-page", help="Trim the text to the one-page budget before rendering"),
    ] = False,
):
    """
    Render a resume text file to PDF.

    Examples:\n

        $ render_resume.py render resume.md

        $ render_resume.py render resume.md --template minimalist --one-page
    """
    text = _read_text(input_path)
    if one_page:
        text = enforce_one_page_limit(text)
    output = output or input_path.with_suffix(".pdf")

    log_dir = _session_log_dir("render")
    setup_rendering_logger(log_dir, template_id=template)

    typer.secho(f"\nRendering: {input_path}", fg=typer.colors.BLUE, bold=True)
    try:
        pdf_bytes = render_resume_pdf(text, template_id=template, output_path=output)
    except (EmptyInputError, UnknownTemplateError, RenderError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.secho("✓ Rendered", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Pages: {page_count(pdf_bytes)}")
    typer.echo(f"  PDF: {output}")
    typer.echo(f"  Log: {log_dir / 'render.log'}")
    typer.echo("")


@app.command("templates")
def templates_command():
    """List available templates."""
    registry = TemplateRegistry()
    typer.secho(f"\nTemplates ({registry.config_path}):", fg=typer.colors.BLUE, bold=True)
    for info in registry.list_templates():
        typer.echo(f"  {info.id:<14} {info.name:<14} {info.description}")
    typer.echo("")


@app.command("inspect")
def inspect_command(
    input_path: Annotated[
        Path,
        typer.Argument(help="Resume text file (markdown-ish)"),
    ],
    roles: Annotated[
        bool,
        typer.Option("--roles/--no-roles", help="Show the role assigned to every line"),
    ] = True,
):
    """
    Show how a resume is classified and grouped.

    Prints the line roles, then the parsed tree as YAML. Documents without
    section headers are reported as using the fallback layout.
    """
    text = _read_text(input_path)
    log_dir = _session_log_dir("inspect")
    setup_templating_logger(log_dir)

    if roles:
        typer.secho("\nLine roles:", fg=typer.colors.BLUE, bold=True)
        prev_line = None
        for number, line in enumerate(text.splitlines(), start=1):
            role = classify(line, prev_line)
            prev_line = line
            typer.echo(f"  {number:>4}  {role.value:<20} {line.strip()}")

    document = parse_resume(text)
    typer.secho("\nDocument:", fg=typer.colors.BLUE, bold=True)
    typer.echo(OmegaConf.to_yaml(OmegaConf.create(document.to_dict())))
    if document.requires_fallback:
        typer.secho(
            f"No sections detected: {document.fallback_signal().reason} (fallback layout)",
            fg=typer.colors.YELLOW,
        )


@app.command("optimize")
def optimize_command(
    resume_pdf: Annotated[
        Path,
        typer.Argument(help="Original resume PDF"),
    ],
    job_description: Annotated[
        Path,
        typer.Argument(help="Job description text file"),
    ],
    template: Annotated[
        Optional[str],
        typer.Option("--template", "-t", help="Template id (see 'templates')"),
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("--output", "-o", help="Output PDF path (default: <resume>_optimized.pdf)"),
    ] = None,
    provider: Annotated[
        Optional[str],
        typer.Option("--provider", "-p", help="LLM provider: openai or anthropic (default: LLM_PROVIDER)"),
    ] = None,
    score: Annotated[
        bool,
        typer.Option("--score", help="Also score the optimized resume against the job description"),
    ] = False,
):
    """
    Optimize a resume PDF for a job description and regenerate it.

    If the optimized text cannot be laid out, the original PDF is written unchanged.
    """
    from quill.utils.llm import get_provider

    if not resume_pdf.exists():
        typer.secho(f"Error: File not found: {resume_pdf}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    job_text = _read_text(job_description)
    output = output or resume_pdf.with_name(f"{resume_pdf.stem}_optimized.pdf")

    log_dir = _session_log_dir("optimize")
    setup_intake_logger(log_dir, provider=provider or os.getenv("LLM_PROVIDER", "openai"))

    original = resume_pdf.read_bytes()
    extracted = extract_text(original)
    typer.secho(f"\nOptimizing: {resume_pdf}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"  Extracted lines: {len(extracted.text.splitlines())}")

    try:
        optimizer = ResumeOptimizer(provider=get_provider(provider_name=provider))
        optimized_text = optimizer.optimize(extracted.text, job_text)
        pdf_bytes = regenerate_pdf(original, optimized_text, template_id=template)
    except (ValueError, ImportError) as e:
        typer.secho(f"Error: {e}\n", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    output.write_bytes(pdf_bytes)
    typer.secho("✓ Optimized", fg=typer.colors.GREEN, bold=True)
    typer.echo(f"  Pages: {page_count(pdf_bytes)}")
    typer.echo(f"  PDF: {output}")

    if score:
        report = optimizer.score(optimized_text, job_text)
        typer.secho("\nATS score:", fg=typer.colors.BLUE, bold=True)
        typer.echo(f"  Overall: {report.overall_score:.0f}")
        typer.echo(
            f"  Keywords: {report.keyword_score:.0f}  Formatting: {report.formatting_score:.0f}"
            f"  Content: {report.content_score:.0f}"
        )
        if report.missing_keywords:
            typer.echo(f"  Missing keywords: {', '.join(map(str, report.missing_keywords))}")
    typer.echo(f"  Log: {log_dir / 'intake.log'}")
    typer.echo("")


if __name__ == "__main__":
    app()
