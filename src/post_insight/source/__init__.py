"""Document sources: transports that fetch a post page once."""

from ..errors import TransportError
from .base import Document, DocumentSource, FetchResult, HtmlDocument, RenderedDocument
from .http import HttpDocumentSource
from .browser import BrowserDocumentSource
from .factory import get_document_source, list_transports, register_source

__all__ = [
    "Document",
    "DocumentSource",
    "FetchResult",
    "HtmlDocument",
    "RenderedDocument",
    "TransportError",
    "HttpDocumentSource",
    "BrowserDocumentSource",
    "get_document_source",
    "list_transports",
    "register_source",
]
