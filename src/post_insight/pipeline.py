"""Analysis pipeline: validate, fetch once, extract, merge, normalize."""

import asyncio
import logging
from typing import List, Optional

from .errors import ErrorKind, FailureClassifier
from .extractor import Extractor, extract_candidates, find_post_block, get_all_extractors, is_access_barrier
from .merge import merge_candidates
from .models import ExtractionResult
from .normalizer import normalize
from .source import Document, DocumentSource, HttpDocumentSource, get_document_source
from .validator import PostIdentity, URLValidator

logger = logging.getLogger(__name__)


class PostAnalyzer:
    """Extracts an engagement record for a single post URL."""

    def __init__(
        self,
        source: Optional[DocumentSource] = None,
        extractors: Optional[List[Extractor]] = None,
    ):
        self.source = source or HttpDocumentSource()
        self.extractors = extractors if extractors is not None else get_all_extractors()
        self.validator = URLValidator()
        self.classifier = FailureClassifier()

    async def analyze(self, url: str) -> ExtractionResult:
        """
        Analyze a post URL.

        Never raises: every failure is classified into an error record.

        Args:
            url: Candidate post URL

        Returns:
            ExtractionResult, either complete data or a single error kind
        """
        identity = self.validator.validate(url)
        if identity is None:
            logger.info("Rejected URL: %r", url)
            return ExtractionResult.failure(ErrorKind.INVALID_URL)

        try:
            fetched = await self.source.fetch(identity.canonical_url)

            kind = self.classifier.classify_status(fetched.status)
            if kind is not None:
                logger.warning("HTTP %s for %s", fetched.status, identity.canonical_url)
                return ExtractionResult.failure(kind)
            if fetched.status in self.classifier.LENIENT_STATUSES:
                logger.warning(
                    "Access denied/login required (HTTP %s) for %s, parsing body anyway",
                    fetched.status,
                    identity.canonical_url,
                )

            return self.analyze_document(identity, fetched.document)

        except Exception as e:
            logger.error("Scraping error for %s: %s", identity.canonical_url, e, exc_info=True)
            return ExtractionResult.failure(self.classifier.classify_exception(e))

    def analyze_document(self, identity: PostIdentity, document: Document) -> ExtractionResult:
        """Pure extraction over an already fetched document."""
        has_linked_data = find_post_block(document) is not None
        if is_access_barrier(document.title, has_linked_data):
            logger.info("Access barrier page for %s: %r", identity.canonical_url, document.title)
            return ExtractionResult.failure(ErrorKind.PRIVATE_OR_UNAVAILABLE)

        candidates = extract_candidates(document, self.extractors)
        merged = merge_candidates(candidates)
        return normalize(identity, merged)


# Convenience functions
async def analyze_post(url: str, source: Optional[DocumentSource] = None, **source_kwargs) -> ExtractionResult:
    """
    Analyze a single post URL.

    Args:
        url: Candidate post URL
        source: Ready-made document source; when omitted one is built
            from source_kwargs (transport, timeout, user_agent, ...)
    """
    if source is None:
        source = get_document_source(**source_kwargs)
    return await PostAnalyzer(source=source).analyze(url)


def analyze_post_sync(url: str, source: Optional[DocumentSource] = None, **source_kwargs) -> ExtractionResult:
    """Blocking variant for callers without an event loop."""
    return asyncio.run(analyze_post(url, source=source, **source_kwargs))
