#!/usr/bin/env python3
"""
base.py
-------------------
Interface for rendering engines.

A rendering engine turns assembled HTML plus page geometry into PDF bytes.
Engines are async context managers: the engine process is started once per
batch, shared by every render call, and released when the batch ends.

Usage:
    async with PlaywrightRenderer() as renderer:
        pdf_bytes = await renderer.render(markup, geometry)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional

# --- Local imports ---
from pdf_composer.models.config import PageMargins, RenderConfig


@dataclass(frozen=True)
class PageGeometry:
    """
    Physical page layout for one render.

    Attributes:
        width_mm: Page width in millimeters, orientation applied
        height_mm: Page height in millimeters, orientation applied
        margins: Page margins in millimeters
    """

    width_mm: float
    height_mm: float
    margins: PageMargins

    @classmethod
    def from_config(cls, config: RenderConfig) -> "PageGeometry":
        width, height = config.page_size_mm()
        return cls(width_mm=width, height_mm=height, margins=config.margins)

    @property
    def width(self) -> str:
        return f"{self.width_mm:g}mm"

    @property
    def height(self) -> str:
        return f"{self.height_mm:g}mm"

    def margin_dict(self) -> Dict[str, str]:
        """Margins keyed by side, as CSS lengths."""
        return {
            "top": f"{self.margins.top:g}mm",
            "right": f"{self.margins.right:g}mm",
            "bottom": f"{self.margins.bottom:g}mm",
            "left": f"{self.margins.left:g}mm",
        }


class PdfRenderer(ABC):
    """
    Interface for PDF rendering engines.

    Implementations convert a self-contained HTML document to PDF bytes.
    start() acquires the engine; close() releases it and must be safe to
    call more than once.
    """

    async def start(self) -> None:
        """Acquire engine resources. Raises RendererStartError on failure."""

    async def close(self) -> None:
        """Release engine resources."""

    @abstractmethod
    async def render(self, markup: str, geometry: PageGeometry) -> bytes:
        """
        Render HTML to PDF.

        Args:
            markup: Complete HTML document
            geometry: Page size and margins

        Returns:
            PDF content as bytes

        Raises:
            RenderError: If the engine fails or the document cannot be rendered
        """

    async def __aenter__(self) -> "PdfRenderer":
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc, tb) -> Optional[bool]:
        await self.close()
        return None
