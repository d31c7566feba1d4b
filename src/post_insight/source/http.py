"""Plain HTTP document source using aiohttp."""

import asyncio
import logging

import aiohttp

from ..errors import TransportError
from .base import DocumentSource, FetchResult, HtmlDocument

logger = logging.getLogger(__name__)


class HttpDocumentSource(DocumentSource):
    """Fetches the raw post HTML with a single GET request."""

    method = "http"

    def _headers(self) -> dict[str, str]:
        return {
            'User-Agent': self.user_agent,
            'Accept': (
                'text/html,application/xhtml+xml,application/xml;q=0.9,'
                'image/avif,image/webp,image/apng,*/*;q=0.8,'
                'application/signed-exchange;v=b3;q=0.7'
            ),
            'Accept-Language': self.accept_language,
            'Cache-Control': 'max-age=0',
            'Sec-Fetch-Dest': 'document',
            'Sec-Fetch-Mode': 'navigate',
            'Sec-Fetch-Site': 'none',
            'Sec-Fetch-User': '?1',
            'Upgrade-Insecure-Requests': '1',
        }

    async def fetch(self, url: str) -> FetchResult:
        """Fetch the page; non-2xx responses are returned, not raised."""
        timeout = aiohttp.ClientTimeout(total=self.timeout)

        try:
            async with aiohttp.ClientSession(timeout=timeout) as session:
                async with session.get(url, headers=self._headers(), allow_redirects=True) as response:
                    status = response.status
                    html = await response.text(errors='replace')
        except asyncio.TimeoutError as e:
            raise TransportError(f"Timeout after {self.timeout}s") from e
        except aiohttp.ClientError as e:
            raise TransportError(f"Network error: {e}") from e

        logger.debug("Fetched %s (HTTP %s, %d bytes)", url, status, len(html))
        return FetchResult(document=HtmlDocument(html), status=status, method=self.method)
