"""Candidate extraction module - scan a fetched document for field values."""

from typing import List, Optional

from ..source.base import Document
from .base import CandidateSet, Extractor, FieldCandidate, FieldName, ScanResult, SourceRank
from .heuristics import DescriptionHeuristicExtractor, TitleHeuristicExtractor, is_access_barrier
from .linked_data import LinkedDataExtractor, find_post_block
from .page import MetaTagExtractor, VisibleTimestampExtractor, read_meta_tags


def get_all_extractors() -> List[Extractor]:
    return [
        VisibleTimestampExtractor(),
        LinkedDataExtractor(),
        MetaTagExtractor(),
        TitleHeuristicExtractor(),
        DescriptionHeuristicExtractor(),
    ]


def extract_candidates(
    document: Document,
    extractors: Optional[List[Extractor]] = None,
) -> CandidateSet:
    """Run every extractor over the same document and collect candidates.

    Extractors are independent, so the order of the list does not matter.
    """
    candidate_set = CandidateSet()
    for extractor in extractors if extractors is not None else get_all_extractors():
        candidate_set.add_scan(extractor.extract(document))
    return candidate_set


__all__ = [
    "CandidateSet",
    "Extractor",
    "FieldCandidate",
    "FieldName",
    "ScanResult",
    "SourceRank",
    "LinkedDataExtractor",
    "MetaTagExtractor",
    "VisibleTimestampExtractor",
    "TitleHeuristicExtractor",
    "DescriptionHeuristicExtractor",
    "find_post_block",
    "is_access_barrier",
    "read_meta_tags",
    "get_all_extractors",
    "extract_candidates",
]
