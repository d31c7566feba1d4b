"""Base document source interface and the document query surface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional

from bs4 import BeautifulSoup


LINKED_DATA_TYPE = "application/ld+json"


class Document(ABC):
    """Read-only view of a fetched page, limited to what extractors query."""

    @property
    @abstractmethod
    def title(self) -> str:
        """Page title, empty string if missing."""
        pass

    @abstractmethod
    def meta(self, property_name: str) -> Optional[str]:
        """Content of the first meta tag with the given property."""
        pass

    @abstractmethod
    def linked_data_blocks(self) -> list[str]:
        """Raw text of every structured-data script block, in page order."""
        pass

    @abstractmethod
    def visible_timestamp(self) -> Optional[str]:
        """Machine-readable datetime of the first timestamp element."""
        pass


class HtmlDocument(Document):
    """Document parsed from raw HTML."""

    def __init__(self, html: str):
        self.soup = BeautifulSoup(html or "", "html.parser")

    @property
    def title(self) -> str:
        tag = self.soup.find("title")
        return tag.get_text() if tag else ""

    def meta(self, property_name: str) -> Optional[str]:
        tag = self.soup.find("meta", attrs={"property": property_name})
        if tag is None:
            return None
        return tag.get("content")

    def linked_data_blocks(self) -> list[str]:
        blocks = []
        for script in self.soup.find_all("script", type=LINKED_DATA_TYPE):
            text = script.string
            if text:
                blocks.append(text)
        return blocks

    def visible_timestamp(self) -> Optional[str]:
        tag = self.soup.find("time")
        if tag is None:
            return None
        return tag.get("datetime") or None


@dataclass
class RenderedDocument(Document):
    """Document pre-extracted from a browser-rendered DOM."""

    page_title: str = ""
    meta_tags: dict[str, str] = field(default_factory=dict)
    scripts: list[str] = field(default_factory=list)
    timestamp: Optional[str] = None

    @property
    def title(self) -> str:
        return self.page_title or ""

    def meta(self, property_name: str) -> Optional[str]:
        return self.meta_tags.get(property_name)

    def linked_data_blocks(self) -> list[str]:
        return [s for s in self.scripts if s]

    def visible_timestamp(self) -> Optional[str]:
        return self.timestamp or None


@dataclass
class FetchResult:
    """Result of fetching a post page."""

    document: Document
    status: Optional[int] = None
    method: str = "unknown"  # http, browser


class DocumentSource(ABC):
    """Abstract base class for page transports."""

    method: str = "unknown"

    DEFAULT_USER_AGENT = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) "
        "AppleWebKit/537.36 (KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    DEFAULT_ACCEPT_LANGUAGE = "ko-KR,ko;q=0.9,en-US;q=0.8,en;q=0.7"

    def __init__(
        self,
        timeout: float = 15,
        user_agent: Optional[str] = None,
        accept_language: Optional[str] = None,
    ):
        self.timeout = timeout
        self.user_agent = user_agent or self.DEFAULT_USER_AGENT
        self.accept_language = accept_language or self.DEFAULT_ACCEPT_LANGUAGE

    @abstractmethod
    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch a post page exactly once.

        Args:
            url: Canonical post URL

        Returns:
            FetchResult with the document and HTTP status

        Raises:
            TransportError: on connection failure or timeout
        """
        pass
