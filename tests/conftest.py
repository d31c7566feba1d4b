"""Shared fixtures: synthetic post pages and a fake document source."""

import html
import json
from typing import Optional

import pytest

from post_insight.source import DocumentSource, FetchResult, HtmlDocument


def build_html(
    title: str = "",
    meta: Optional[dict] = None,
    ld_blocks: tuple = (),
    raw_ld: tuple = (),
    time_datetime: Optional[str] = None,
) -> str:
    """Build a minimal post page."""
    parts = ["<html><head>"]
    if title:
        parts.append(f"<title>{html.escape(title, quote=False)}</title>")
    for prop, content in (meta or {}).items():
        parts.append(f'<meta property="{prop}" content="{html.escape(content)}" />')
    for text in raw_ld:
        parts.append(f'<script type="application/ld+json">{text}</script>')
    for block in ld_blocks:
        parts.append(f'<script type="application/ld+json">{json.dumps(block)}</script>')
    parts.append("</head><body><article>")
    if time_datetime:
        parts.append(f'<time class="x1p4m5qa" datetime="{time_datetime}">Aug 16, 2024</time>')
    parts.append("</article></body></html>")
    return "".join(parts)


class FakeSource(DocumentSource):
    """Document source returning a canned page."""

    method = "fake"

    def __init__(self, html: str = "", status: Optional[int] = 200, exc: Optional[Exception] = None):
        super().__init__()
        self.html = html
        self.status = status
        self.exc = exc
        self.calls = []

    async def fetch(self, url: str) -> FetchResult:
        self.calls.append(url)
        if self.exc is not None:
            raise self.exc
        return FetchResult(document=HtmlDocument(self.html), status=self.status, method=self.method)


@pytest.fixture
def make_document():
    def _make(**kwargs) -> HtmlDocument:
        return HtmlDocument(build_html(**kwargs))
    return _make


@pytest.fixture
def make_source():
    def _make(**kwargs) -> FakeSource:
        page_kwargs = {k: kwargs.pop(k) for k in list(kwargs) if k not in ("status", "exc")}
        return FakeSource(html=build_html(**page_kwargs), **kwargs)
    return _make


@pytest.fixture
def post_ld_block():
    """Structured-data block as served on a public post page."""
    return {
        "@context": "https://schema.org",
        "@type": "SocialMediaPosting",
        "uploadDate": "2024-08-16T05:00:00.000Z",
        "caption": "Summer in Seoul",
        "author": {"@type": "Person", "name": "Jane Doe", "alternateName": "@jane.doe"},
        "interactionStatistic": [
            {
                "@type": "InteractionCounter",
                "interactionType": "http://schema.org/LikeAction",
                "userInteractionCount": 1234,
            },
            {
                "@type": "InteractionCounter",
                "interactionType": "http://schema.org/CommentAction",
                "userInteractionCount": 56,
            },
        ],
    }
