"""Extract post data from Schema.org JSON-LD blocks."""

import json
import logging
from typing import Any, Iterator, Optional

from ..source.base import Document
from .base import Extractor, FieldName, ScanResult, SourceRank

logger = logging.getLogger(__name__)


# Block types describing an account rather than a post
PROFILE_TYPES = {"InstagramPublicProfile", "ProfilePage"}

# Keys whose presence marks a block as describing a post
POST_KEYS = ("uploadDate", "datePublished", "interactionStatistic")

SCHEMA_PREFIXES = ("http://schema.org/", "https://schema.org/")

INTERACTION_FIELDS = {
    "LikeAction": FieldName.LIKES,
    "CommentAction": FieldName.COMMENTS,
    "WatchAction": FieldName.VIEWS,
}


def iter_json_ld(document: Document) -> Iterator[dict]:
    """Yield every JSON-LD object in page order, flattening top-level arrays."""
    for text in document.linked_data_blocks():
        try:
            data = json.loads(text)
        except (json.JSONDecodeError, TypeError) as e:
            logger.debug("Skipping unparseable JSON-LD block: %s", e)
            continue

        items = data if isinstance(data, list) else [data]
        for item in items:
            if isinstance(item, dict):
                yield item


def _types(block: dict) -> set[str]:
    block_type = block.get("@type")
    if isinstance(block_type, list):
        return {t for t in block_type if isinstance(t, str)}
    if isinstance(block_type, str):
        return {block_type}
    return set()


def is_profile(block: dict) -> bool:
    return bool(_types(block) & PROFILE_TYPES)


def find_post_block(document: Document) -> Optional[dict]:
    """Return the first non-profile block carrying a date or statistics."""
    for block in iter_json_ld(document):
        if is_profile(block):
            continue
        if any(block.get(key) for key in POST_KEYS):
            return block
    return None


def _first_text(block: dict, *keys: str) -> Optional[str]:
    for key in keys:
        value = block.get(key)
        if isinstance(value, str) and value.strip():
            return value
    return None


def _author_name(author: Any) -> Optional[str]:
    if isinstance(author, list):
        author = next((a for a in author if isinstance(a, dict)), None)
    if isinstance(author, dict):
        return _first_text(author, "name", "alternateName")
    if isinstance(author, str) and author.strip():
        return author
    return None


def _interaction_name(interaction_type: Any) -> Optional[str]:
    """Reduce an interactionType to its bare action keyword."""
    if isinstance(interaction_type, dict):
        interaction_type = interaction_type.get("@type")
    if not isinstance(interaction_type, str):
        return None
    for prefix in SCHEMA_PREFIXES:
        if interaction_type.startswith(prefix):
            return interaction_type[len(prefix):]
    return interaction_type


def _count_text(count: Any) -> Optional[str]:
    if count is None or isinstance(count, bool):
        return None
    if isinstance(count, (int, float, str)):
        return str(count)
    return None


def interaction_counts(block: dict) -> dict[FieldName, str]:
    """Map like/comment/watch statistics of a block to field values."""
    stats = block.get("interactionStatistic")
    if isinstance(stats, dict):
        stats = [stats]
    if not isinstance(stats, list):
        return {}

    counts: dict[FieldName, str] = {}
    for stat in stats:
        if not isinstance(stat, dict):
            continue
        field_name = INTERACTION_FIELDS.get(_interaction_name(stat.get("interactionType")))
        if field_name is None or field_name in counts:
            continue
        count = _count_text(stat.get("userInteractionCount"))
        if count is not None:
            counts[field_name] = count
    return counts


class LinkedDataExtractor(Extractor):
    """Scans structured-data blocks; the first qualifying block wins."""

    rank = SourceRank.LINKED_DATA

    def extract(self, document: Document) -> ScanResult:
        scan = self._scan()
        block = find_post_block(document)
        if block is None:
            return scan

        scan.found = True
        scan.add(FieldName.UPLOAD_TIME, _first_text(block, "uploadDate", "datePublished"))
        scan.add(FieldName.CAPTION, _first_text(block, "caption", "headline", "articleBody"))
        scan.add(FieldName.AUTHOR, _author_name(block.get("author")))
        for field_name, count in interaction_counts(block).items():
            scan.add(field_name, count)
        return scan
