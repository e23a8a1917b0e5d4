#!/usr/bin/env python3
"""
pdfbuilder.py
-------------------
Build one PDF per Markdown source document, concurrently.

Each source document becomes a job:
1. Read the file and parse its front matter
2. Substitute {{key}} placeholders and convert Markdown to HTML
3. Assemble the HTML document (page size, margins, font, title)
4. Render it to PDF bytes with the shared rendering engine
5. Write the info dictionary and save ``<output_dir>/<stem>.pdf``

Jobs run as coroutines on one event loop, at most ``workers`` at a time.
The engine is started once per batch and released when the batch ends.
A failing job is recorded in the BatchResult and never stops its
siblings; only an engine that cannot start aborts the batch. Sources that
share a filename stem would write the same PDF: the first in source order
is built and the later ones fail with OutputWriteError.

Usage:
    builder = PdfBuilder(
        sources=[Path("notes/intro.md"), Path("notes/usage.md")],
        config=ConfigBuilder().set_paper_size("Letter").build(),
        logger=logger,
    )
    result = builder.build()
    for job in result.failed:
        print(job.describe())
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
import asyncio
import os
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

# --- Local imports ---
from pdf_composer.builders.base import BaseBuilder
from pdf_composer.builders.base import BuilderStats as BaseStats
from pdf_composer.builders.html_builder import DocumentAssembler
from pdf_composer.builders.metadata_writer import MetadataWriter, resolve_title
from pdf_composer.core.exceptions import (
    ComposerError,
    OutputWriteError,
    PdfBuildError,
    RenderError,
)
from pdf_composer.core.logging_manager import ComposerLogger
from pdf_composer.models.config import RenderConfig
from pdf_composer.models.document import (
    BatchResult,
    GenerationJob,
    JobResult,
    RenderedDocument,
)
from pdf_composer.renderers.base import PdfRenderer
from pdf_composer.renderers.playwright_renderer import PlaywrightRenderer
from pdf_composer.utils.fs import normalize_source_paths, output_path_for, write_pdf
from pdf_composer.utils.md import (
    markdown_to_html,
    parse_frontmatter,
    read_source_document,
    substitute_placeholders,
)


# ---- Classes ----
class BuildStats(BaseStats):
    """
    Track PDF build statistics.

    Only updated from coroutines on the event-loop thread.
    """

    def __init__(self) -> None:
        super().__init__()
        self.files_processed: int = 0
        self.pdfs_created: int = 0
        self.errors: int = 0

    def summary(self) -> str:
        return (
            f"{self.files_processed} documents, "
            f"{self.pdfs_created} PDFs created, "
            f"{self.errors} errors in {self.duration():.2f}s"
        )


class PdfBuilder(BaseBuilder):
    """
    Render a batch of Markdown documents to PDF.

    Attributes:
        sources: Source document paths, in submission order
        config: Shared read-only render configuration
        renderer: Rendering engine (PlaywrightRenderer if not given)
        assembler: HTML document assembler
        metadata_writer: Info-dictionary writer
        stats: Statistics of the last build
    """

    def __init__(
        self,
        sources: Sequence[Union[str, Path]],
        config: RenderConfig,
        renderer: Optional[PdfRenderer] = None,
        logger: Optional[ComposerLogger] = None,
        assembler: Optional[DocumentAssembler] = None,
        metadata_writer: Optional[MetadataWriter] = None,
    ) -> None:
        """
        Initialize PdfBuilder.

        Args:
            sources: Markdown files to render (backslash separators accepted)
            config: Render configuration
            renderer: Rendering engine; defaults to headless Chromium
            logger: Optional logger
            assembler: HTML assembler; defaults to the packaged template
            metadata_writer: Info-dictionary writer
        """
        super().__init__(logger)
        self.sources: List[Path] = normalize_source_paths(sources)
        self.config = config
        self.renderer = renderer
        self.assembler = assembler or DocumentAssembler()
        self.metadata_writer = metadata_writer or MetadataWriter(logger=logger)
        self.stats = BuildStats()

    def build(self) -> BatchResult:
        """
        Run the batch to completion on a new event loop.

        Returns:
            BatchResult with one JobResult per source, in source order

        Raises:
            PdfBuildError: If no source files are set
            RendererStartError: If the rendering engine cannot start
        """
        return asyncio.run(self.build_async())

    async def build_async(self) -> BatchResult:
        """Coroutine version of build() for callers with a running loop."""
        if not self.sources:
            raise PdfBuildError("No source files set")

        self.stats = BuildStats()
        output_dir = self.config.resolved_output_directory()
        workers = self.config.workers or os.cpu_count() or 1
        jobs = [GenerationJob(source, self.config) for source in self.sources]

        self._log_operation(
            "pdf_build_start",
            {
                "sources": len(jobs),
                "output_dir": str(output_dir),
                "workers": workers,
            },
        )

        renderer = self.renderer or self._default_renderer()
        semaphore = asyncio.Semaphore(workers)
        claims = self._output_claims(jobs, output_dir)

        async with renderer:
            outcomes = await asyncio.gather(
                *(
                    self._run_job(job, renderer, semaphore, output_dir, claimed_by)
                    for job, claimed_by in zip(jobs, claims)
                ),
                return_exceptions=True,
            )

        # All jobs have settled and the engine is released
        for outcome in outcomes:
            if isinstance(outcome, BaseException):
                raise outcome

        batch = BatchResult(results=list(outcomes), duration=self.stats.finish())
        self._log_operation("pdf_build_complete", {"stats": self.stats.summary()})
        return batch

    def _default_renderer(self) -> PdfRenderer:
        return PlaywrightRenderer(logger=self.logger)

    @staticmethod
    def _output_claims(
        jobs: Sequence[GenerationJob], output_dir: Path
    ) -> List[Optional[Path]]:
        """
        For each job, the earlier source that already writes the same PDF.

        Sources sharing a filename stem map to one output file. The first in
        source order owns it; later ones are reported as failures instead of
        racing to overwrite it.
        """
        owners: Dict[Path, Path] = {}
        claims: List[Optional[Path]] = []
        for job in jobs:
            target = output_path_for(output_dir, job.source_path)
            claims.append(owners.get(target))
            owners.setdefault(target, job.source_path)
        return claims

    async def _run_job(
        self,
        job: GenerationJob,
        renderer: PdfRenderer,
        semaphore: asyncio.Semaphore,
        output_dir: Path,
        claimed_by: Optional[Path] = None,
    ) -> JobResult:
        async with semaphore:
            self.stats.files_processed += 1
            try:
                if claimed_by is not None:
                    target = output_path_for(output_dir, job.source_path)
                    raise OutputWriteError(
                        f"{job.source_path} and {claimed_by} both write {target}",
                        target,
                    )
                result = await self._process(job, renderer, output_dir)
            except (ComposerError, OSError) as e:
                if isinstance(e, ComposerError) and e.source_path is None:
                    e.source_path = job.source_path
                self.stats.errors += 1
                self._log_error(e, {"source": str(job.source_path)})
                return JobResult(source_path=job.source_path, error=e)

        self.stats.pdfs_created += 1
        self._log_operation(
            "pdf_created",
            {"source": str(job.source_path), "file": str(result.output_path)},
        )
        return result

    async def _process(
        self, job: GenerationJob, renderer: PdfRenderer, output_dir: Path
    ) -> JobResult:
        config = job.config
        document = await asyncio.to_thread(read_source_document, job.source_path)
        front_matter = parse_frontmatter(document.front_matter_text, document.path)

        body = substitute_placeholders(document.body_text, front_matter)
        title = resolve_title(front_matter, document.stem)
        rendered = self.assembler.assemble(markdown_to_html(body), title, config)

        self._log_debug(f"Rendering {document.path}")
        pdf_bytes = await self._render(renderer, rendered, job)

        metadata = await asyncio.to_thread(
            self.metadata_writer.write, pdf_bytes, front_matter, title, config
        )
        output_path = await asyncio.to_thread(
            write_pdf, output_dir, document.path, metadata.pdf_bytes
        )
        return JobResult(
            source_path=job.source_path,
            output_path=output_path,
            written_entries=metadata.written,
        )

    async def _render(
        self, renderer: PdfRenderer, rendered: RenderedDocument, job: GenerationJob
    ) -> bytes:
        timeout = job.config.render_timeout
        render = renderer.render(rendered.markup, rendered.geometry)
        if timeout is None:
            return await render
        try:
            return await asyncio.wait_for(render, timeout)
        except asyncio.TimeoutError as e:
            raise RenderError(
                f"Rendering {job.source_path} timed out after {timeout:g}s",
                job.source_path,
            ) from e
