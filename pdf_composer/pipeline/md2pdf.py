#!/usr/bin/env python3
"""
md2pdf.py
-------------------
Generate PDFs from Markdown documents with YAML front matter.

Programmatic API:
    from pdf_composer.pipeline.md2pdf import build_pdfs

    result = build_pdfs(
        [Path("notes/intro.md")],
        ConfigBuilder().set_doc_info_entry("Author", "author").build(),
        logger=logger,
    )
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import List, Optional, Sequence, Union

# --- Local imports ---
from pdf_composer.builders.pdfbuilder import PdfBuilder
from pdf_composer.core.logging_manager import ComposerLogger
from pdf_composer.models.config import RenderConfig
from pdf_composer.models.document import BatchResult
from pdf_composer.renderers.base import PdfRenderer
from pdf_composer.utils.fs import find_markdown_files, normalize_source_paths


# --- Programmatic API ---


def collect_sources(paths: Sequence[Union[str, Path]]) -> List[Path]:
    """
    Expand directories into the Markdown files they contain.

    Files are kept as given; directories contribute every ``*.md`` below
    them, sorted. Duplicates are dropped, first occurrence wins.
    """
    sources: List[Path] = []
    seen = set()
    for path in normalize_source_paths(paths):
        candidates = find_markdown_files(path) if path.is_dir() else [path]
        for candidate in candidates:
            if candidate not in seen:
                seen.add(candidate)
                sources.append(candidate)
    return sources


def build_pdfs(
    sources: Sequence[Union[str, Path]],
    config: Optional[RenderConfig] = None,
    renderer: Optional[PdfRenderer] = None,
    logger: Optional[ComposerLogger] = None,
) -> BatchResult:
    """
    Render every source document to its own PDF.

    This is the programmatic API used by the ``pdf-composer build`` command.

    Args:
        sources: Markdown files or directories of Markdown files
        config: Render configuration (defaults when omitted)
        renderer: Rendering engine (headless Chromium when omitted)
        logger: Optional logger instance

    Returns:
        BatchResult with one JobResult per document

    Raises:
        PdfBuildError: If no source files were found
        RendererStartError: If the rendering engine cannot start
    """
    builder = PdfBuilder(
        sources=collect_sources(sources),
        config=config or RenderConfig(),
        renderer=renderer,
        logger=logger,
    )
    return builder.build()
