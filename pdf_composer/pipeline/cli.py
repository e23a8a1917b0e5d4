#!/usr/bin/env python3
"""
PDF Composer CLI
------------------------

Command-line interface for rendering Markdown documents to PDF.

Commands:
    - build: Render one PDF per source document (md → pdf)
    - list-options: Show accepted paper sizes, fonts, versions and orientations

Usage:
    # Render two documents with defaults
    pdf-composer build notes/intro.md notes/usage.md

    # Every .md under a directory, US Letter landscape, custom info entries
    pdf-composer build notes/ --paper-size Letter --orientation landscape \\
        -e Author=author -e Subject=description

    # Settings from a YAML file, overridden by flags
    pdf-composer build notes/ --config composer.yaml --margins "15 20"
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional, Tuple

import click

from pdf_composer.core.cli import setup_logger
from pdf_composer.core.exceptions import ComposerError
from pdf_composer.core.logging_manager import ComposerLogger, handle_cli_error
from pdf_composer.core.paths import LOG_DIR
from pdf_composer.models.config import ConfigBuilder, load_config
from pdf_composer.models.enums import (
    PaperOrientation,
    PaperSize,
    PdfVersion,
    StandardFont,
)
from pdf_composer.pipeline import md2pdf


def _parse_entry(value: str) -> Tuple[str, str]:
    name, sep, key = value.partition("=")
    if not sep or not name.strip() or not key.strip():
        raise click.BadParameter(f"expected NAME=KEY, got '{value}'")
    return name.strip(), key.strip()


@click.group()
@click.option(
    "--log-dir",
    type=click.Path(),
    default=str(LOG_DIR),
    help="Directory for log files",
)
@click.option("-v", "--verbose", is_flag=True, help="Show tracebacks on errors")
@click.pass_context
def cli(ctx: click.Context, log_dir: str, verbose: bool) -> None:
    """PDF Composer: Markdown with YAML front matter → PDF"""
    ctx.ensure_object(dict)
    ctx.obj["log_dir"] = Path(log_dir)
    ctx.obj["verbose"] = verbose
    ctx.obj["logger"] = setup_logger(Path(log_dir), "pdf_composer")


@cli.command("build")
@click.argument("sources", nargs=-1, required=True, type=click.Path(exists=True))
@click.option(
    "-o", "--output", type=click.Path(), default=None, help="Output directory for PDFs"
)
@click.option(
    "--config",
    "config_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file with render settings",
)
@click.option(
    "--pdf-version",
    type=click.Choice(PdfVersion.choices()),
    default=None,
    help="PDF version [default: 1.7]",
)
@click.option(
    "--paper-size",
    type=click.Choice(PaperSize.choices(), case_sensitive=False),
    default=None,
    help="Paper size [default: A4]",
)
@click.option(
    "--orientation",
    type=click.Choice(PaperOrientation.choices(), case_sensitive=False),
    default=None,
    help="Page orientation [default: portrait]",
)
@click.option(
    "--margins",
    default=None,
    help='Margins in mm, CSS shorthand (e.g. "10" or "10 20 10 20") [default: 10]',
)
@click.option(
    "--font",
    type=click.Choice(StandardFont.choices(), case_sensitive=False),
    default=None,
    help="Body font [default: helvetica]",
)
@click.option(
    "-e",
    "--entry",
    "entries",
    multiple=True,
    metavar="NAME=KEY",
    help="Fill PDF info entry NAME from front-matter KEY (repeatable)",
)
@click.option("--workers", type=click.IntRange(min=1), default=None, help="Concurrent documents")
@click.option(
    "--timeout",
    type=click.FloatRange(min=0, min_open=True),
    default=None,
    help="Seconds allowed per render",
)
@click.pass_context
def build(
    ctx: click.Context,
    sources: Tuple[str, ...],
    output: Optional[str],
    config_file: Optional[str],
    pdf_version: Optional[str],
    paper_size: Optional[str],
    orientation: Optional[str],
    margins: Optional[str],
    font: Optional[str],
    entries: Tuple[str, ...],
    workers: Optional[int],
    timeout: Optional[float],
) -> None:
    """
    Render one PDF per Markdown source document.

    SOURCES are Markdown files or directories containing them.
    """
    logger: ComposerLogger = ctx.obj["logger"]
    parsed_entries = [_parse_entry(entry) for entry in entries]

    try:
        if config_file:
            builder = ConfigBuilder.from_config(load_config(config_file, logger))
        else:
            builder = ConfigBuilder()
        builder.set_logger(logger)

        if output is not None:
            builder.set_output_directory(output)
        if pdf_version is not None:
            builder.set_pdf_version(pdf_version)
        if paper_size is not None:
            builder.set_paper_size(paper_size)
        if orientation is not None:
            builder.set_orientation(orientation)
        if margins is not None:
            builder.set_margins(margins)
        if font is not None:
            builder.set_font(font)
        for name, key in parsed_entries:
            builder.set_doc_info_entry(name, key)
        if workers is not None:
            builder.set_workers(workers)
        if timeout is not None:
            builder.set_render_timeout(timeout)
        config = builder.build()

        click.echo(f"📄 Rendering {len(sources)} source(s)...")
        result = md2pdf.build_pdfs(sources, config, logger=logger)

    except (ComposerError, OSError, ValueError) as e:
        handle_cli_error(ctx, e, "build", additional_context={"sources": list(sources)})
        return

    for job in result:
        click.echo(f"  {job.describe()}", err=not job.ok)

    click.echo(
        f"\n{'✅' if result.ok else '⚠️'} {len(result.succeeded)} created, "
        f"{len(result.failed)} failed in {result.duration:.2f}s"
    )
    click.echo(f"  Output directory: {config.resolved_output_directory()}")

    if not result.ok:
        ctx.exit(1)


@cli.command("list-options")
def list_options() -> None:
    """Show the accepted values of every enumerated option."""
    click.echo(f"PDF versions:  {', '.join(PdfVersion.choices())}")
    click.echo(f"Orientations:  {', '.join(PaperOrientation.choices())}")
    click.echo(f"Fonts:         {', '.join(StandardFont.choices())}")
    click.echo("Paper sizes:")
    for size in PaperSize:
        width, height = size.millimeters
        click.echo(f"  {size.value:<12} {width:g} x {height:g} mm")


if __name__ == "__main__":
    cli(obj={})
