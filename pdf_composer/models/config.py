#!/usr/bin/env python3
"""
config.py
-------------------
Render configuration for PDF Composer.

A batch is driven by one immutable RenderConfig. Callers build it with the
chained setters of ConfigBuilder, or load it from a YAML file with
load_config(), and pass the finished value into the pipeline.

Margins follow CSS shorthand:
    "10"            -> all sides 10mm
    "10 20"         -> top/bottom 10mm, right/left 20mm
    "10 20 30"      -> top 10mm, right/left 20mm, bottom 30mm
    "10 20 30 40"   -> top, right, bottom, left

Margin parsing is all-or-nothing: one bad token resets every side to the
default and issues a ConfigValidationFallback warning.

Usage:
    config = (
        ConfigBuilder()
        .set_paper_size(PaperSize.LETTER)
        .set_margins("15 20")
        .set_doc_info_entry("author", "author")
        .build()
    )
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import math
import warnings
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

# --- Third party imports ---
import yaml

# --- Local imports ---
from pdf_composer.core.exceptions import ConfigError, ConfigValidationFallback
from pdf_composer.core.logging_manager import ComposerLogger, safe_logger
from pdf_composer.core.paths import DEFAULT_MARGIN_MM, DEFAULT_OUTPUT_DIRECTORY
from pdf_composer.models.enums import (
    PaperOrientation,
    PaperSize,
    PdfVersion,
    StandardFont,
)


RESERVED_DOC_INFO_NAMES = {
    "title": "Title",
    "author": "Author",
    "subject": "Subject",
    "keywords": "Keywords",
}
"""Standard info-dictionary names, written with fixed capitalization."""


# ----- Margins -----
@dataclass(frozen=True)
class PageMargins:
    """Page margins in millimeters."""

    top: float = DEFAULT_MARGIN_MM
    right: float = DEFAULT_MARGIN_MM
    bottom: float = DEFAULT_MARGIN_MM
    left: float = DEFAULT_MARGIN_MM

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.top, self.right, self.bottom, self.left)

    def css(self) -> str:
        """CSS margin shorthand, e.g. '10mm 20mm 10mm 20mm'."""
        return " ".join(f"{_format_mm(value)}mm" for value in self.as_tuple())


def _format_mm(value: float) -> str:
    return f"{value:g}"


def parse_margins(text: str, logger: Optional[ComposerLogger] = None) -> PageMargins:
    """
    Parse a CSS-shorthand margin string into PageMargins.

    Tokens are whitespace-separated non-negative decimal numbers in
    millimeters. Between one and four tokens are accepted.

    Args:
        text: Margin string such as "10" or "5 10 15 20"
        logger: Optional logger for the fallback warning

    Returns:
        PageMargins with the expanded values, or the default margins if the
        string is invalid (never raises)

    Examples:
        >>> parse_margins("10 20 30")
        PageMargins(top=10.0, right=20.0, bottom=30.0, left=20.0)
        >>> parse_margins("10 -5")
        PageMargins(top=10.0, right=10.0, bottom=10.0, left=10.0)
    """
    tokens = str(text).split()
    values: List[float] = []
    for token in tokens:
        try:
            value = float(token)
        except ValueError:
            return _margin_fallback(text, f"non-numeric token '{token}'", logger)
        if not math.isfinite(value) or value < 0:
            return _margin_fallback(text, f"invalid value '{token}'", logger)
        values.append(value)

    if len(values) == 1:
        (top,) = values
        return PageMargins(top, top, top, top)
    if len(values) == 2:
        vertical, horizontal = values
        return PageMargins(vertical, horizontal, vertical, horizontal)
    if len(values) == 3:
        top, horizontal, bottom = values
        return PageMargins(top, horizontal, bottom, horizontal)
    if len(values) == 4:
        return PageMargins(*values)

    return _margin_fallback(text, f"expected 1-4 values, got {len(values)}", logger)


def _margin_fallback(
    text: str, reason: str, logger: Optional[ComposerLogger]
) -> PageMargins:
    message = (
        f"Invalid margins '{text}' ({reason}); "
        f"using {_format_mm(DEFAULT_MARGIN_MM)}mm on all sides"
    )
    warnings.warn(message, ConfigValidationFallback, stacklevel=3)
    safe_logger(logger).log_warning(message)
    return PageMargins()


# ----- Document-information entries -----
@dataclass(frozen=True)
class DocInfoEntry:
    """
    Declares that a PDF info-dictionary entry is filled from a front-matter key.

    The reserved names title, author, subject and keywords are normalized to
    Title, Author, Subject and Keywords whatever casing was supplied. Other
    names are kept exactly as given.

    Attributes:
        doc_info_entry: Name written into the PDF info dictionary
        front_matter_key: Front-matter key supplying the value
    """

    doc_info_entry: str
    front_matter_key: str

    def __post_init__(self) -> None:
        if not self.doc_info_entry:
            raise ValueError("doc_info_entry cannot be empty")
        if not self.front_matter_key:
            raise ValueError("front_matter_key cannot be empty")
        normalized = RESERVED_DOC_INFO_NAMES.get(
            self.doc_info_entry.lower(), self.doc_info_entry
        )
        object.__setattr__(self, "doc_info_entry", normalized)


# ----- Render configuration -----
@dataclass(frozen=True)
class RenderConfig:
    """
    Immutable settings shared by every job of a batch.

    Attributes:
        pdf_version: PDF header version
        paper_size: Paper size before orientation is applied
        orientation: Portrait or landscape
        margins: Page margins in millimeters
        font: Default body font
        output_directory: Where PDFs are written (relative paths are
            resolved when the batch starts)
        doc_info_entries: Info-dictionary declarations, in declaration order
        workers: Maximum concurrent jobs (None uses the CPU count)
        render_timeout: Seconds allowed per render (None waits indefinitely)
    """

    pdf_version: PdfVersion = PdfVersion.V1_7
    paper_size: PaperSize = PaperSize.A4
    orientation: PaperOrientation = PaperOrientation.PORTRAIT
    margins: PageMargins = field(default_factory=PageMargins)
    font: StandardFont = StandardFont.HELVETICA
    output_directory: Path = DEFAULT_OUTPUT_DIRECTORY
    doc_info_entries: Tuple[DocInfoEntry, ...] = ()
    workers: Optional[int] = None
    render_timeout: Optional[float] = None

    def resolved_output_directory(self) -> Path:
        """Output directory as an absolute path, relative to the current cwd."""
        directory = Path(self.output_directory).expanduser()
        if directory.is_absolute():
            return directory
        return Path.cwd() / directory

    def page_size_mm(self) -> Tuple[float, float]:
        """(width, height) in millimeters with orientation applied."""
        width, height = self.paper_size.millimeters
        if self.orientation is PaperOrientation.LANDSCAPE:
            return height, width
        return width, height


class ConfigBuilder:
    """
    Accumulates settings through chained setters and builds a RenderConfig.

    Enum setters accept either members or their CLI spelling ("A4",
    "landscape", "2.0", "times-roman"). Unknown spellings raise ValueError.
    """

    def __init__(self) -> None:
        self._pdf_version = PdfVersion.V1_7
        self._paper_size = PaperSize.A4
        self._orientation = PaperOrientation.PORTRAIT
        self._margins = PageMargins()
        self._font = StandardFont.HELVETICA
        self._output_directory: Path = DEFAULT_OUTPUT_DIRECTORY
        self._doc_info_entries: List[DocInfoEntry] = []
        self._workers: Optional[int] = None
        self._render_timeout: Optional[float] = None
        self._logger: Optional[ComposerLogger] = None

    @classmethod
    def from_config(cls, config: RenderConfig) -> "ConfigBuilder":
        """Start a builder from an existing configuration."""
        builder = cls()
        builder._pdf_version = config.pdf_version
        builder._paper_size = config.paper_size
        builder._orientation = config.orientation
        builder._margins = config.margins
        builder._font = config.font
        builder._output_directory = Path(config.output_directory)
        builder._doc_info_entries = list(config.doc_info_entries)
        builder._workers = config.workers
        builder._render_timeout = config.render_timeout
        return builder

    def set_logger(self, logger: Optional[ComposerLogger]) -> "ConfigBuilder":
        self._logger = logger
        return self

    def set_pdf_version(self, version: Union[PdfVersion, str]) -> "ConfigBuilder":
        self._pdf_version = PdfVersion.from_name(version)
        return self

    def set_paper_size(self, size: Union[PaperSize, str]) -> "ConfigBuilder":
        self._paper_size = PaperSize.from_name(size)
        return self

    def set_orientation(
        self, orientation: Union[PaperOrientation, str]
    ) -> "ConfigBuilder":
        self._orientation = PaperOrientation.from_name(orientation)
        return self

    def set_font(self, font: Union[StandardFont, str]) -> "ConfigBuilder":
        self._font = StandardFont.from_name(font)
        return self

    def set_margins(self, margins: Union[str, PageMargins]) -> "ConfigBuilder":
        """Set margins from a shorthand string; invalid input resets to default."""
        if isinstance(margins, PageMargins):
            self._margins = margins
        else:
            self._margins = parse_margins(margins, self._logger)
        return self

    def set_output_directory(self, directory: Union[str, Path]) -> "ConfigBuilder":
        """Set the output directory. Relative paths are resolved at build time."""
        self._output_directory = Path(directory)
        return self

    def set_doc_info_entry(
        self, doc_info_entry: str, front_matter_key: str
    ) -> "ConfigBuilder":
        """
        Declare an info-dictionary entry filled from a front-matter key.

        Redeclaring a name replaces the earlier declaration.
        """
        entry = DocInfoEntry(doc_info_entry, front_matter_key)
        self._doc_info_entries = [
            existing
            for existing in self._doc_info_entries
            if existing.doc_info_entry != entry.doc_info_entry
        ]
        self._doc_info_entries.append(entry)
        return self

    def set_workers(self, workers: Optional[int]) -> "ConfigBuilder":
        if workers is not None and int(workers) < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")
        self._workers = int(workers) if workers is not None else None
        return self

    def set_render_timeout(self, seconds: Optional[float]) -> "ConfigBuilder":
        if seconds is not None and float(seconds) <= 0:
            raise ValueError(f"render_timeout must be positive, got {seconds}")
        self._render_timeout = float(seconds) if seconds is not None else None
        return self

    def build(self) -> RenderConfig:
        """Snapshot the current settings as an immutable RenderConfig."""
        return RenderConfig(
            pdf_version=self._pdf_version,
            paper_size=self._paper_size,
            orientation=self._orientation,
            margins=self._margins,
            font=self._font,
            output_directory=self._output_directory,
            doc_info_entries=tuple(self._doc_info_entries),
            workers=self._workers,
            render_timeout=self._render_timeout,
        )


# ----- Configuration files -----
CONFIG_KEYS = (
    "pdf_version",
    "paper_size",
    "orientation",
    "margins",
    "font",
    "output_directory",
    "doc_info_entries",
    "workers",
    "render_timeout",
)


def load_config(
    path: Union[str, Path], logger: Optional[ComposerLogger] = None
) -> RenderConfig:
    """
    Load a RenderConfig from a YAML file.

    Expected format:
        paper_size: Letter
        orientation: landscape
        margins: "15 20"
        doc_info_entries:
          Author: author
          Subject: description

    Args:
        path: YAML configuration file
        logger: Optional logger for warnings about ignored keys

    Returns:
        RenderConfig with file values over the defaults

    Raises:
        ConfigError: If the file cannot be read, is not valid YAML, or holds
            an invalid value
    """
    path = Path(path)
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except OSError as e:
        raise ConfigError(f"Cannot read config file {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in config file {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config file {path} must contain a mapping")

    log = safe_logger(logger)
    for key in data:
        if key not in CONFIG_KEYS:
            log.log_warning(f"Ignoring unknown config key '{key}'", {"file": str(path)})

    builder = ConfigBuilder().set_logger(logger)
    try:
        _apply_config_data(builder, data)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value in config file {path}: {e}") from e

    log.log_debug(f"Loaded configuration from {path}")
    return builder.build()


def _apply_config_data(builder: ConfigBuilder, data: Dict[str, Any]) -> None:
    if data.get("pdf_version") is not None:
        builder.set_pdf_version(str(data["pdf_version"]))
    if data.get("paper_size") is not None:
        builder.set_paper_size(str(data["paper_size"]))
    if data.get("orientation") is not None:
        builder.set_orientation(str(data["orientation"]))
    if data.get("font") is not None:
        builder.set_font(str(data["font"]))
    if data.get("margins") is not None:
        builder.set_margins(str(data["margins"]))
    if data.get("output_directory") is not None:
        builder.set_output_directory(str(data["output_directory"]))
    if data.get("workers") is not None:
        builder.set_workers(int(data["workers"]))
    if data.get("render_timeout") is not None:
        builder.set_render_timeout(float(data["render_timeout"]))

    entries = data.get("doc_info_entries") or {}
    if not isinstance(entries, dict):
        raise TypeError("doc_info_entries must map dictionary names to front-matter keys")
    for name, key in entries.items():
        builder.set_doc_info_entry(str(name), str(key))
