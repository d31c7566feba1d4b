"""Post Insight - upload time and engagement stats for Instagram posts."""

from .errors import ErrorKind, TransportError, classify_exception, classify_status
from .models import ExtractionResult
from .pipeline import PostAnalyzer, analyze_post, analyze_post_sync
from .validator import PostIdentity, PostType, validate_post_url

__version__ = "0.1.0"

__all__ = [
    "ErrorKind",
    "TransportError",
    "classify_exception",
    "classify_status",
    "ExtractionResult",
    "PostAnalyzer",
    "analyze_post",
    "analyze_post_sync",
    "PostIdentity",
    "PostType",
    "validate_post_url",
]
