#!/usr/bin/env python3
"""
fs.py
-------------------
Filesystem utilities for source discovery and PDF output.

Functions:
    find_markdown_files: Discover markdown files by glob pattern
    normalize_source_paths: Convert backslash separators to the host separator
    output_path_for: Output PDF path for a source document
    write_pdf: Create the output directory and write a PDF

Usage:
    from pdf_composer.utils.fs import write_pdf

    pdf_path = write_pdf(Path("pdf_composer_pdfs"), Path("notes/intro.md"), data)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import os
from pathlib import Path
from typing import Iterable, List, Union

# --- Local imports ---
from pdf_composer.core.exceptions import OutputWriteError


def find_markdown_files(directory: Path, pattern: str = "**/*.md") -> List[Path]:
    """Find all markdown files matching pattern, sorted."""
    if not directory.exists():
        return []
    return sorted(path for path in directory.glob(pattern) if path.is_file())


def normalize_source_paths(paths: Iterable[Union[str, Path]]) -> List[Path]:
    """
    Convert source paths to Paths using the host separator.

    Paths written with Windows backslashes are accepted on every platform.

    Examples:
        >>> normalize_source_paths(["docs\\\\intro.md"])  # on POSIX
        [PosixPath('docs/intro.md')]
    """
    normalized = []
    for path in paths:
        text = str(path)
        if os.sep != "\\":
            text = text.replace("\\", os.sep)
        normalized.append(Path(text))
    return normalized


def output_path_for(output_dir: Path, source_path: Path) -> Path:
    """Output path: ``<output_dir>/<source stem>.pdf``."""
    return Path(output_dir) / f"{Path(source_path).stem}.pdf"


def write_pdf(output_dir: Path, source_path: Path, data: bytes) -> Path:
    """
    Write PDF bytes for a source document into the output directory.

    The directory (and parents) is created if missing.

    Args:
        output_dir: Destination directory
        source_path: Source document; its stem names the PDF
        data: Final PDF bytes

    Returns:
        Path of the written PDF

    Raises:
        OutputWriteError: If the directory or file cannot be written
    """
    output_dir = Path(output_dir)
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise OutputWriteError(
            f"Cannot create output directory {output_dir}: {e}", output_dir
        ) from e

    pdf_path = output_path_for(output_dir, source_path)
    try:
        pdf_path.write_bytes(data)
    except OSError as e:
        raise OutputWriteError(f"Cannot write {pdf_path}: {e}", pdf_path) from e
    return pdf_path
