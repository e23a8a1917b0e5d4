#!/usr/bin/env python3
"""
exceptions.py
--------------------
Custom exception classes for PDF Composer.

This module defines the hierarchy of exceptions raised by the composition
pipeline. Per-document errors are caught by the batch builder and reported
in the batch result; only engine start-up failures abort a batch.

Exception Hierarchy:
    Exception (built-in)
    ├── ComposerError - Base for all pipeline errors
    │   ├── FrontMatterError - Malformed YAML front matter
    │   ├── RenderError - Rendering engine failure or timeout
    │   │   └── RendererStartError - Engine could not be started (batch-fatal)
    │   ├── MetadataWriteError - PDF bytes could not be read or rewritten
    │   ├── PdfBuildError - Batch-level misuse (e.g. no source files)
    │   └── ConfigError - Unreadable configuration file
    └── OSError (IOError)
        ├── SourceReadError - Source document could not be read
        └── OutputWriteError - Output directory or PDF could not be written

    UserWarning
    └── ConfigValidationFallback - Invalid margins reset to the default

Usage:
    from pdf_composer.core.exceptions import FrontMatterError, RenderError

    try:
        front_matter, body = parse_document(path, content)
    except FrontMatterError as e:
        logger.log_error(e, {"source": str(e.source_path)})
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from pathlib import Path
from typing import Optional, Union


class ComposerError(Exception):
    """
    Base exception for composition pipeline errors.

    Optionally carries the source document the error relates to, so that
    callers can report which input failed.

    Attributes:
        source_path: Source document path, if the error is document-specific
    """

    def __init__(
        self, message: str, source_path: Optional[Union[str, Path]] = None
    ) -> None:
        super().__init__(message)
        self.source_path = Path(source_path) if source_path is not None else None


class FrontMatterError(ComposerError):
    """
    Exception for malformed front-matter blocks.

    Raised when a document starts with a front-matter fence but the block
    cannot be used:
    - Opening fence without a closing fence
    - YAML syntax errors
    - YAML that does not describe a key/value mapping

    Examples:
        >>> raise FrontMatterError("Invalid YAML front matter in notes.md", "notes.md")
    """

    pass


class RenderError(ComposerError):
    """
    Exception for rendering engine failures on a single document.

    Raised when the engine cannot turn the assembled markup into PDF bytes:
    - Engine crashed or became unreachable mid-batch
    - Render exceeded the configured timeout
    - Markup the engine refused to load
    """

    pass


class RendererStartError(RenderError):
    """
    Exception for rendering engines that cannot be started.

    No document in the batch can be rendered without the engine, so this
    error aborts the whole batch instead of being reported per document.

    Examples:
        >>> raise RendererStartError("Chromium is not installed")
    """

    pass


class MetadataWriteError(ComposerError):
    """
    Exception for failures while injecting the document-information dictionary.

    Raised when the rendered bytes are not a readable PDF or when pypdf
    cannot serialize the updated document.
    """

    pass


class PdfBuildError(ComposerError):
    """
    Exception for batch-level build errors.

    Examples:
        >>> raise PdfBuildError("No source files set")
    """

    pass


class ConfigError(ComposerError):
    """Exception for configuration files that cannot be read or parsed."""

    pass


class SourceReadError(OSError):
    """
    Exception for source documents that cannot be read.

    Subclass of OSError (IOError) so filesystem handlers catch it too.

    Attributes:
        source_path: Path of the unreadable document
    """

    def __init__(self, message: str, source_path: Union[str, Path]) -> None:
        super().__init__(message)
        self.source_path = Path(source_path)


class OutputWriteError(OSError):
    """
    Exception for output files that cannot be written.

    Raised on permission or disk failures while creating the output
    directory or writing the final PDF.

    Attributes:
        output_path: Path that could not be written
    """

    def __init__(self, message: str, output_path: Union[str, Path]) -> None:
        super().__init__(message)
        self.output_path = Path(output_path)


class ConfigValidationFallback(UserWarning):
    """
    Warning issued when configuration input is invalid and a default is used.

    Not an error: margin strings that cannot be parsed reset all four
    margins to the default and processing continues.
    """

    pass
