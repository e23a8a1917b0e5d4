"""
conftest.py
-----------
Shared pytest fixtures for PDF Composer tests.

Provides fixtures for:
- A fake rendering engine that returns real (blank) PDF bytes
- Source document factories
- Mock loggers
"""
import asyncio
from io import BytesIO
from pathlib import Path
from typing import List, Optional
from unittest.mock import MagicMock

import pytest
from pypdf import PdfWriter

from pdf_composer.core.exceptions import RenderError, RendererStartError
from pdf_composer.renderers.base import PageGeometry, PdfRenderer


def blank_pdf_bytes() -> bytes:
    """A one-page A4 PDF."""
    writer = PdfWriter()
    writer.add_blank_page(width=595, height=842)
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


class FakeRenderer(PdfRenderer):
    """
    Rendering engine double.

    Records every markup it is asked to render and returns a blank PDF.

    Args:
        fail_on: Raise RenderError for markup containing this text
        fail_start: Raise RendererStartError from start()
        delay: Seconds to sleep inside render()
        output: Bytes to return instead of a blank PDF
    """

    def __init__(
        self,
        fail_on: Optional[str] = None,
        fail_start: bool = False,
        delay: float = 0.0,
        output: Optional[bytes] = None,
    ) -> None:
        self.fail_on = fail_on
        self.fail_start = fail_start
        self.delay = delay
        self.output = output
        self.markups: List[str] = []
        self.geometries: List[PageGeometry] = []
        self.start_calls = 0
        self.close_calls = 0
        self.active = 0
        self.max_active = 0

    async def start(self) -> None:
        self.start_calls += 1
        if self.fail_start:
            raise RendererStartError("Chromium is not installed")

    async def close(self) -> None:
        self.close_calls += 1

    async def render(self, markup: str, geometry: PageGeometry) -> bytes:
        self.active += 1
        self.max_active = max(self.max_active, self.active)
        try:
            if self.delay:
                await asyncio.sleep(self.delay)
            if self.fail_on and self.fail_on in markup:
                raise RenderError("Engine crashed")
            self.markups.append(markup)
            self.geometries.append(geometry)
            return self.output if self.output is not None else blank_pdf_bytes()
        finally:
            self.active -= 1


# ----- Renderer Fixtures -----

@pytest.fixture
def fake_renderer():
    """Fake engine returning blank PDFs."""
    return FakeRenderer()


@pytest.fixture
def renderer_factory():
    """The FakeRenderer class, for tests that configure failures."""
    return FakeRenderer


@pytest.fixture
def blank_pdf() -> bytes:
    """Bytes of a one-page blank PDF."""
    return blank_pdf_bytes()


# ----- Logger Fixtures -----

@pytest.fixture
def mock_logger():
    """Mock logger instance."""
    return MagicMock()


# ----- Source Document Fixtures -----

@pytest.fixture
def source_dir(tmp_path) -> Path:
    """Directory for source documents."""
    path = tmp_path / "sources"
    path.mkdir()
    return path


@pytest.fixture
def write_source(source_dir):
    """Factory writing a Markdown source file and returning its path."""

    def _write(name: str, content: str) -> Path:
        path = source_dir / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def richard_content() -> str:
    """Document with author/description front matter and placeholders."""
    return (
        "---\n"
        'author: "Richard"\n'
        'description: "A test"\n'
        "---\n"
        "By {{author}}. {{missing}}\n"
    )


@pytest.fixture
def malformed_content() -> str:
    """Document whose front matter is not valid YAML."""
    return "---\nauthor: [unclosed\n---\nBody\n"
