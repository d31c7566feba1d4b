"""Free-text heuristics over the page title and meta description."""

import re
from typing import Optional

from ..source.base import Document
from .base import Extractor, FieldName, ScanResult, SourceRank
from .page import read_meta_tags


# "Name (@username) on Instagram: ..." / "Name (@username) • Instagram photos"
AUTHOR_PATTERN = re.compile(r'\(@([^)]+)\)')

# "1,234 Likes, 56 Comments - username on ..."
LIKES_PATTERN = re.compile(r'([\d,.]+[km]?) likes?', re.IGNORECASE)
COMMENTS_PATTERN = re.compile(r'([\d,.]+[km]?) comments?', re.IGNORECASE)

# Titles served instead of the post when it is gated or gone
BARRIER_TITLE_MARKERS = ("Login", "Page Not Found", "로그인")


def author_from_title(title: Optional[str]) -> Optional[str]:
    if not title:
        return None
    match = AUTHOR_PATTERN.search(title)
    return match.group(1) if match else None


def stats_segment(description: Optional[str]) -> Optional[str]:
    """Portion of the description before the first hyphen."""
    if not description:
        return None
    return description.split('-', 1)[0].strip()


def counts_from_description(description: Optional[str]) -> dict[FieldName, str]:
    segment = stats_segment(description)
    if not segment:
        return {}

    counts = {}
    for field_name, pattern in (
        (FieldName.LIKES, LIKES_PATTERN),
        (FieldName.COMMENTS, COMMENTS_PATTERN),
    ):
        match = pattern.search(segment)
        if match:
            counts[field_name] = match.group(1)
    return counts


def is_access_barrier(title: Optional[str], has_linked_data: bool) -> bool:
    """True for a login wall or not-found page with no structured data."""
    if has_linked_data or not title:
        return False
    return any(marker in title for marker in BARRIER_TITLE_MARKERS)


class TitleHeuristicExtractor(Extractor):
    """Author handle from a parenthesized @handle in the page title."""

    rank = SourceRank.TITLE_HEURISTIC

    def extract(self, document: Document) -> ScanResult:
        scan = self._scan()
        author = author_from_title(document.title)
        scan.found = author is not None
        scan.add(FieldName.AUTHOR, author)
        return scan


class DescriptionHeuristicExtractor(Extractor):
    """Like and comment counts from the og:description prefix."""

    rank = SourceRank.DESCRIPTION_HEURISTIC

    def extract(self, document: Document) -> ScanResult:
        scan = self._scan()
        description = read_meta_tags(document).description
        scan.found = description is not None
        for field_name, count in counts_from_description(description).items():
            scan.add(field_name, count)
        return scan
