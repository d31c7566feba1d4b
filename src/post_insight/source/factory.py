"""Document source factory for selecting a transport."""

from .base import DocumentSource
from .browser import BrowserDocumentSource
from .http import HttpDocumentSource


# Registry of available transports
_SOURCES: dict[str, type[DocumentSource]] = {
    HttpDocumentSource.method: HttpDocumentSource,
    BrowserDocumentSource.method: BrowserDocumentSource,
}


def get_document_source(transport: str = "http", **kwargs) -> DocumentSource:
    """
    Get a document source by transport name.
    
    Args:
        transport: "http" or "browser"
        **kwargs: Additional arguments passed to the source constructor
        
    Returns:
        DocumentSource instance
        
    Raises:
        ValueError: if the transport is unknown
    """
    try:
        source_class = _SOURCES[transport]
    except KeyError:
        raise ValueError(
            f"Unknown transport {transport!r}; expected one of {list_transports()}"
        ) from None
    return source_class(**kwargs)


def register_source(source_class: type[DocumentSource]) -> None:
    """Register a new transport class under its method name."""
    _SOURCES[source_class.method] = source_class


def list_transports() -> list[str]:
    """List all registered transport names."""
    return sorted(_SOURCES)
