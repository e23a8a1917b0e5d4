#!/usr/bin/env python3
"""
metadata_writer.py
-------------------
Inject the document-information dictionary into rendered PDFs.

Written fields, in order (later writes replace earlier ones):
1. Title - resolved document title (front matter, else filename stem)
2. Producer - always "PDF Composer"
3. Creator - front matter ``generator``, else "PDF Composer"
4. Every declared DocInfoEntry whose front-matter value is non-empty
   (a declared Producer entry is ignored)

Empty or whitespace-only values are never written. The PDF header is set
to the configured version.

Usage:
    writer = MetadataWriter(logger=logger)
    result = writer.write(pdf_bytes, front_matter, "Notes", config)
    result.written  # ('Title', 'Producer', 'Creator', 'Author')
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass
from io import BytesIO
from typing import Dict, Optional, Tuple

# --- Third party imports ---
from pypdf import PdfReader, PdfWriter
from pypdf.errors import PyPdfError

# --- Local imports ---
from pdf_composer.core.exceptions import MetadataWriteError
from pdf_composer.core.logging_manager import ComposerLogger, safe_logger
from pdf_composer.core.paths import PACKAGE_NAME
from pdf_composer.models.config import RenderConfig
from pdf_composer.models.document import FrontMatter, value_to_text


GENERATOR_KEY = "generator"
"""Front-matter key that overrides the Creator entry."""


@dataclass(frozen=True)
class MetadataResult:
    """Final PDF bytes and the info-dictionary names written into them."""

    pdf_bytes: bytes
    written: Tuple[str, ...]


def resolve_entry_value(front_matter: FrontMatter, key: str) -> Optional[str]:
    """
    Value of a front-matter key for the info dictionary.

    Returns:
        The string form of the value, or None if the key is absent or its
        value is empty or whitespace only
    """
    if key not in front_matter:
        return None
    text = value_to_text(front_matter[key])
    return text if text.strip() else None


def resolve_title(front_matter: FrontMatter, stem: str) -> str:
    """Front matter ``title``, or the source filename stem if missing or empty."""
    return resolve_entry_value(front_matter, "title") or stem


class MetadataWriter:
    """
    Rewrites rendered PDF bytes with a populated info dictionary.

    Attributes:
        logger: Optional logger for operation tracking
    """

    def __init__(self, logger: Optional[ComposerLogger] = None) -> None:
        self.logger = logger

    def build_info(
        self, front_matter: FrontMatter, title: str, config: RenderConfig
    ) -> Dict[str, str]:
        """
        Compute info-dictionary entries without touching any PDF.

        Returns:
            Ordered mapping of entry name (without leading slash) to value
        """
        info: Dict[str, str] = {}
        if title.strip():
            info["Title"] = title
        info["Producer"] = PACKAGE_NAME
        info["Creator"] = resolve_entry_value(front_matter, GENERATOR_KEY) or PACKAGE_NAME

        for entry in config.doc_info_entries:
            if entry.doc_info_entry == "Producer":
                safe_logger(self.logger).log_warning(
                    "Ignoring declared Producer entry; Producer is fixed"
                )
                continue
            value = resolve_entry_value(front_matter, entry.front_matter_key)
            if value is None:
                safe_logger(self.logger).log_debug(
                    f"Skipping {entry.doc_info_entry}: "
                    f"'{entry.front_matter_key}' is missing or empty"
                )
                continue
            info[entry.doc_info_entry] = value
        return info

    def write(
        self,
        pdf_bytes: bytes,
        front_matter: FrontMatter,
        title: str,
        config: RenderConfig,
    ) -> MetadataResult:
        """
        Return a copy of the PDF with the info dictionary populated.

        Args:
            pdf_bytes: PDF produced by the rendering engine
            front_matter: Parsed front matter of the source document
            title: Resolved title
            config: Batch configuration (version and DocInfoEntry declarations)

        Returns:
            MetadataResult with the rewritten bytes and written names

        Raises:
            MetadataWriteError: If the bytes are not a readable PDF or cannot
                be rewritten
        """
        info = self.build_info(front_matter, title, config)

        try:
            reader = PdfReader(BytesIO(pdf_bytes))
            writer = PdfWriter(clone_from=reader)
            writer.pdf_header = config.pdf_version.header
            writer.add_metadata({f"/{name}": value for name, value in info.items()})

            output = BytesIO()
            writer.write(output)
        except (PyPdfError, ValueError, KeyError, TypeError) as e:
            raise MetadataWriteError(f"Cannot write PDF metadata: {e}") from e

        return MetadataResult(pdf_bytes=output.getvalue(), written=tuple(info))
