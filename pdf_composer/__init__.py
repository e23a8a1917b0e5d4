"""
PDF Composer
============

Render Markdown documents with YAML front matter to PDF, one PDF per
document, with front-matter placeholders substituted into the body and
front-matter values written into the PDF info dictionary.

Main Components:
    - models: Render configuration, enumerations, per-document data
    - utils: Front matter, placeholders, Markdown, filesystem output
    - builders: HTML assembly, batch PDF builder, metadata writer
    - renderers: Rendering engines (headless Chromium via Playwright)
    - pipeline: Programmatic API and the ``pdf-composer`` CLI
    - core: Exceptions, logging, paths

Example Usage:
    >>> from pdf_composer import ConfigBuilder, build_pdfs
    >>> config = ConfigBuilder().set_doc_info_entry("Author", "author").build()
    >>> result = build_pdfs(["notes/intro.md"], config)
    >>> [job.output_path for job in result.succeeded]
"""

from pdf_composer.builders.pdfbuilder import BuildStats, PdfBuilder
from pdf_composer.core.exceptions import (
    ComposerError,
    ConfigError,
    ConfigValidationFallback,
    FrontMatterError,
    MetadataWriteError,
    OutputWriteError,
    PdfBuildError,
    RenderError,
    RendererStartError,
    SourceReadError,
)
from pdf_composer.models.config import (
    ConfigBuilder,
    DocInfoEntry,
    PageMargins,
    RenderConfig,
    load_config,
    parse_margins,
)
from pdf_composer.models.document import BatchResult, JobResult
from pdf_composer.models.enums import (
    PaperOrientation,
    PaperSize,
    PdfVersion,
    StandardFont,
)
from pdf_composer.pipeline.md2pdf import build_pdfs
from pdf_composer.renderers.base import PageGeometry, PdfRenderer

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "ConfigBuilder",
    "RenderConfig",
    "PageMargins",
    "DocInfoEntry",
    "load_config",
    "parse_margins",
    "PdfVersion",
    "PaperSize",
    "PaperOrientation",
    "StandardFont",
    # Building
    "build_pdfs",
    "PdfBuilder",
    "BuildStats",
    "BatchResult",
    "JobResult",
    # Rendering
    "PdfRenderer",
    "PageGeometry",
    # Errors
    "ComposerError",
    "FrontMatterError",
    "RenderError",
    "RendererStartError",
    "MetadataWriteError",
    "PdfBuildError",
    "ConfigError",
    "SourceReadError",
    "OutputWriteError",
    "ConfigValidationFallback",
]
