"""Tests for the fallback merge policy."""

from post_insight.extractor.base import CandidateSet, FieldCandidate, FieldName, ScanResult, SourceRank
from post_insight.merge import FIELD_PRIORITY, merge_candidates, resolve_field


def candidate_set(*candidates: FieldCandidate) -> CandidateSet:
    cs = CandidateSet()
    for candidate in candidates:
        cs.add_scan(ScanResult(rank=candidate.rank, found=True, candidates=[candidate]))
    return cs


class TestResolveField:
    """Tests for resolve_field."""

    def test_first_in_priority_wins(self):
        low = FieldCandidate(FieldName.LIKES, "5", SourceRank.DESCRIPTION_HEURISTIC)
        high = FieldCandidate(FieldName.LIKES, "100", SourceRank.LINKED_DATA)
        assert resolve_field([low, high], FIELD_PRIORITY[FieldName.LIKES]) == high

    def test_unlisted_source_is_ignored(self):
        meta = FieldCandidate(FieldName.AUTHOR, "someone", SourceRank.META_TAGS)
        assert resolve_field([meta], FIELD_PRIORITY[FieldName.AUTHOR]) is None

    def test_empty(self):
        assert resolve_field([], FIELD_PRIORITY[FieldName.CAPTION]) is None


class TestMergeCandidates:
    """Tests for merge_candidates."""

    def test_visible_timestamp_beats_linked_data(self):
        merged = merge_candidates(candidate_set(
            FieldCandidate(FieldName.UPLOAD_TIME, "2024-01-01T00:00:00Z", SourceRank.LINKED_DATA),
            FieldCandidate(FieldName.UPLOAD_TIME, "2024-02-02T00:00:00Z", SourceRank.VISIBLE_TIMESTAMP),
        ))
        assert merged.value(FieldName.UPLOAD_TIME) == "2024-02-02T00:00:00Z"
        assert merged.source(FieldName.UPLOAD_TIME) == SourceRank.VISIBLE_TIMESTAMP

    def test_linked_data_likes_beat_description(self):
        merged = merge_candidates(candidate_set(
            FieldCandidate(FieldName.LIKES, "5", SourceRank.DESCRIPTION_HEURISTIC),
            FieldCandidate(FieldName.LIKES, "100", SourceRank.LINKED_DATA),
        ))
        assert merged.value(FieldName.LIKES) == "100"

    def test_fields_resolve_independently(self):
        merged = merge_candidates(candidate_set(
            FieldCandidate(FieldName.LIKES, "100", SourceRank.LINKED_DATA),
            FieldCandidate(FieldName.LIKES, "5", SourceRank.DESCRIPTION_HEURISTIC),
            FieldCandidate(FieldName.COMMENTS, "2", SourceRank.DESCRIPTION_HEURISTIC),
        ))
        assert merged.value(FieldName.LIKES) == "100"
        assert merged.value(FieldName.COMMENTS) == "2"
        assert merged.source(FieldName.COMMENTS) == SourceRank.DESCRIPTION_HEURISTIC

    def test_caption_and_author_fallbacks(self):
        merged = merge_candidates(candidate_set(
            FieldCandidate(FieldName.CAPTION, "og title", SourceRank.META_TAGS),
            FieldCandidate(FieldName.AUTHOR, "jane.doe", SourceRank.TITLE_HEURISTIC),
        ))
        assert merged.value(FieldName.CAPTION) == "og title"
        assert merged.value(FieldName.AUTHOR) == "jane.doe"

    def test_views_never_from_description(self):
        merged = merge_candidates(candidate_set(
            FieldCandidate(FieldName.VIEWS, "999", SourceRank.DESCRIPTION_HEURISTIC),
        ))
        assert merged.value(FieldName.VIEWS) is None

    def test_found_but_empty_vs_not_found(self):
        cs = CandidateSet()
        cs.add_scan(ScanResult(rank=SourceRank.LINKED_DATA, found=True))
        merged = merge_candidates(cs)

        assert merged.value(FieldName.LIKES) is None
        assert merged.source_located(FieldName.LIKES) is True
        assert merged.source_located(FieldName.IMAGE_URL) is False
        assert merge_candidates(CandidateSet()).source_located(FieldName.LIKES) is False
