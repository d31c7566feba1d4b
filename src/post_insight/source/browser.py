"""Headless-browser document source using Playwright.

Renders the post page in Chromium and snapshots only what the extractors
query: meta tags, structured-data scripts, the first timestamp element and
the page title.
"""

import logging
from typing import Optional

from ..errors import TransportError
from .base import LINKED_DATA_TYPE, DocumentSource, FetchResult, RenderedDocument

logger = logging.getLogger(__name__)


SNAPSHOT_SCRIPT = """
(ldType) => {
    const meta = {};
    for (const el of document.querySelectorAll('meta[property]')) {
        const prop = el.getAttribute('property');
        if (!(prop in meta)) meta[prop] = el.getAttribute('content');
    }
    const scripts = Array.from(
        document.querySelectorAll(`script[type="${ldType}"]`)
    ).map((el) => el.textContent);
    const time = document.querySelector('time');
    return {
        title: document.title || '',
        meta: meta,
        scripts: scripts,
        timestamp: time ? time.getAttribute('datetime') : null,
    };
}
"""


class BrowserDocumentSource(DocumentSource):
    """Fetches a rendered DOM snapshot with headless Chromium."""

    method = "browser"

    def __init__(self, *args, headless: bool = True, **kwargs):
        super().__init__(*args, **kwargs)
        self.headless = headless

    async def fetch(self, url: str) -> FetchResult:
        try:
            from playwright.async_api import async_playwright
            from playwright.async_api import Error as PlaywrightError
        except ImportError as e:
            raise TransportError("Playwright not installed. Run: pip install 'post-insight[browser]'") from e

        timeout_ms = self.timeout * 1000
        locale = self.accept_language.split(',', 1)[0]

        try:
            async with async_playwright() as p:
                browser = await p.chromium.launch(headless=self.headless)
                try:
                    context = await browser.new_context(
                        user_agent=self.user_agent,
                        locale=locale,
                    )
                    page = await context.new_page()
                    response = await page.goto(url, wait_until="domcontentloaded", timeout=timeout_ms)
                    status: Optional[int] = response.status if response else None
                    snapshot = await page.evaluate(SNAPSHOT_SCRIPT, LINKED_DATA_TYPE)
                finally:
                    await browser.close()
        except PlaywrightError as e:
            # Playwright's TimeoutError subclasses Error
            raise TransportError(f"Browser error: {e}") from e

        logger.debug("Rendered %s (HTTP %s)", url, status)
        document = RenderedDocument(
            page_title=snapshot.get("title") or "",
            meta_tags={k: v for k, v in (snapshot.get("meta") or {}).items() if v is not None},
            scripts=list(snapshot.get("scripts") or []),
            timestamp=snapshot.get("timestamp"),
        )
        return FetchResult(document=document, status=status, method=self.method)
