"""Fallback merge policy: one authoritative candidate per field."""

from dataclasses import dataclass, field
from typing import Optional

from .extractor.base import CandidateSet, FieldCandidate, FieldName, SourceRank


# Strict waterfall per field; sources not listed are never used for that field
FIELD_PRIORITY: dict[FieldName, tuple[SourceRank, ...]] = {
    FieldName.UPLOAD_TIME: (SourceRank.VISIBLE_TIMESTAMP, SourceRank.LINKED_DATA),
    FieldName.CAPTION: (SourceRank.LINKED_DATA, SourceRank.META_TAGS),
    FieldName.AUTHOR: (SourceRank.LINKED_DATA, SourceRank.TITLE_HEURISTIC),
    FieldName.IMAGE_URL: (SourceRank.META_TAGS,),
    FieldName.LIKES: (SourceRank.LINKED_DATA, SourceRank.DESCRIPTION_HEURISTIC),
    FieldName.COMMENTS: (SourceRank.LINKED_DATA, SourceRank.DESCRIPTION_HEURISTIC),
    FieldName.VIEWS: (SourceRank.LINKED_DATA,),
}


@dataclass
class MergedFields:
    """Winning candidate per field plus which sources were located."""

    winners: dict[FieldName, FieldCandidate] = field(default_factory=dict)
    located: frozenset[SourceRank] = frozenset()

    def value(self, field_name: FieldName) -> Optional[str]:
        winner = self.winners.get(field_name)
        return winner.value if winner else None

    def source(self, field_name: FieldName) -> Optional[SourceRank]:
        winner = self.winners.get(field_name)
        return winner.rank if winner else None

    def source_located(self, field_name: FieldName) -> bool:
        """True if any source allowed for the field was found in the page."""
        return any(rank in self.located for rank in FIELD_PRIORITY[field_name])


def resolve_field(
    candidates: list[FieldCandidate],
    priority: tuple[SourceRank, ...],
) -> Optional[FieldCandidate]:
    """First non-empty candidate in priority order, or None."""
    for rank in priority:
        for candidate in candidates:
            if candidate.rank == rank and candidate.value:
                return candidate
    return None


def merge_candidates(candidate_set: CandidateSet) -> MergedFields:
    """Resolve every field independently by its priority list."""
    winners = {}
    for field_name, priority in FIELD_PRIORITY.items():
        winner = resolve_field(candidate_set.for_field(field_name), priority)
        if winner is not None:
            winners[field_name] = winner
    return MergedFields(winners=winners, located=frozenset(candidate_set.located))
