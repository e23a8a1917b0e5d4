#!/usr/bin/env python3
"""
playwright_renderer.py
-------------------
Headless Chromium rendering engine driven through Playwright.

One browser is launched per batch. Every render opens its own page (tab),
so concurrent renders do not share page state. Pages refuse http(s)
requests, so a document never loads remote resources. Requires the Chromium
build installed by ``playwright install chromium``.
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from typing import List, Optional

# --- Third party imports ---
from playwright.async_api import Browser, Playwright, Route, async_playwright
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeoutError

# --- Local imports ---
from pdf_composer.core.exceptions import RenderError, RendererStartError
from pdf_composer.core.logging_manager import ComposerLogger, safe_logger
from pdf_composer.renderers.base import PageGeometry, PdfRenderer


CHROMIUM_ARGS = [
    "--disable-dev-shm-usage",
    "--disable-gpu",
]

REMOTE_SCHEMES = ("http:", "https:")
"""Request schemes refused while rendering; documents must render offline."""


class PlaywrightRenderer(PdfRenderer):
    """
    Render HTML to PDF with headless Chromium.

    Attributes:
        headless: Launch the browser without a window
        launch_args: Extra Chromium command-line switches
        logger: Optional logger
    """

    def __init__(
        self,
        headless: bool = True,
        launch_args: Optional[List[str]] = None,
        logger: Optional[ComposerLogger] = None,
    ) -> None:
        self.headless = headless
        self.launch_args = list(CHROMIUM_ARGS if launch_args is None else launch_args)
        self.logger = logger
        self._playwright: Optional[Playwright] = None
        self._browser: Optional[Browser] = None

    async def start(self) -> None:
        if self._browser is not None:
            return
        try:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(
                headless=self.headless, args=self.launch_args
            )
        except (PlaywrightError, OSError) as e:
            await self.close()
            raise RendererStartError(
                f"Cannot start Chromium (run 'playwright install chromium'): {e}"
            ) from e
        safe_logger(self.logger).log_debug("Chromium started")

    async def close(self) -> None:
        browser, playwright = self._browser, self._playwright
        self._browser = None
        self._playwright = None
        try:
            if browser is not None and browser.is_connected():
                await browser.close()
        finally:
            if playwright is not None:
                await playwright.stop()
                safe_logger(self.logger).log_debug("Chromium stopped")

    async def render(self, markup: str, geometry: PageGeometry) -> bytes:
        if self._browser is None:
            raise RenderError("Renderer has not been started")

        try:
            page = await self._browser.new_page()
        except PlaywrightError as e:
            raise RenderError(f"Cannot open browser page: {e}") from e

        try:
            await page.route("**/*", self._block_remote)
            await page.set_content(markup, wait_until="load")
            return await page.pdf(
                width=geometry.width,
                height=geometry.height,
                margin=geometry.margin_dict(),
                print_background=True,
                prefer_css_page_size=True,
            )
        except PlaywrightTimeoutError as e:
            raise RenderError(f"Chromium timed out rendering the document: {e}") from e
        except PlaywrightError as e:
            raise RenderError(f"Chromium failed to render the document: {e}") from e
        finally:
            await self._close_page(page)

    async def _block_remote(self, route: Route) -> None:
        url = route.request.url
        if url.startswith(REMOTE_SCHEMES):
            safe_logger(self.logger).log_debug(f"Blocked remote resource {url}")
            await route.abort()
        else:
            await route.continue_()

    async def _close_page(self, page) -> None:
        try:
            await page.close()
        except PlaywrightError as e:
            safe_logger(self.logger).log_warning(f"Could not close browser page: {e}")
