#!/usr/bin/env python3
"""
document.py
-------------------
Per-document data carried through a composition batch.

- SourceDocument: one source file, read once
- GenerationJob: a source path plus the shared RenderConfig
- RenderedDocument: assembled markup handed to the rendering engine
- JobResult / BatchResult: collected outcome of a batch
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

# --- Local imports ---
from pdf_composer.models.config import RenderConfig
from pdf_composer.renderers.base import PageGeometry


FrontMatter = Dict[str, Any]
"""Parsed front-matter mapping. Never mutated after parsing."""


def value_to_text(value: Any) -> str:
    """
    String form of a front-matter value.

    Examples:
        >>> value_to_text(None)
        ''
        >>> value_to_text(True)
        'true'
        >>> value_to_text(["poetry", "prose"])
        'poetry, prose'
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (date, datetime)):
        return value.isoformat()
    if isinstance(value, (list, tuple)):
        return ", ".join(value_to_text(item) for item in value)
    return str(value)


@dataclass(frozen=True)
class SourceDocument:
    """
    A source file split into front matter and body.

    Attributes:
        path: Source path (identity of the document)
        front_matter_text: Raw YAML between the fences ('' if absent)
        body_text: Markdown body
    """

    path: Path
    front_matter_text: str
    body_text: str

    @property
    def stem(self) -> str:
        """Base filename without extension."""
        return self.path.stem


@dataclass(frozen=True)
class GenerationJob:
    """One source document plus the shared read-only configuration."""

    source_path: Path
    config: RenderConfig


@dataclass(frozen=True)
class RenderedDocument:
    """Markup and page geometry for one render call."""

    markup: str
    geometry: PageGeometry
    title: str


@dataclass
class JobResult:
    """
    Outcome of one job.

    Exactly one of output_path and error is set.

    Attributes:
        source_path: Source document the job processed
        output_path: Written PDF (on success)
        error: Exception that stopped the job (on failure)
        written_entries: Info-dictionary names written into the PDF
    """

    source_path: Path
    output_path: Optional[Path] = None
    error: Optional[BaseException] = None
    written_entries: Tuple[str, ...] = ()

    @property
    def ok(self) -> bool:
        return self.error is None and self.output_path is not None

    def describe(self) -> str:
        """One-line description for console output."""
        if self.ok:
            return f"✓ {self.source_path} → {self.output_path}"
        return f"✗ {self.source_path}: {type(self.error).__name__}: {self.error}"


@dataclass
class BatchResult:
    """
    Ordered job results of a batch, in source order.

    Attributes:
        results: One JobResult per source document
        duration: Wall-clock seconds the batch took
    """

    results: List[JobResult] = field(default_factory=list)
    duration: float = 0.0

    @property
    def succeeded(self) -> List[JobResult]:
        return [result for result in self.results if result.ok]

    @property
    def failed(self) -> List[JobResult]:
        return [result for result in self.results if not result.ok]

    @property
    def ok(self) -> bool:
        return not self.failed

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self):
        return iter(self.results)
