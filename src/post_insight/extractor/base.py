"""Candidate types shared by all extractors."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import Optional

from ..source.base import Document


class FieldName(str, Enum):
    """Fields of the final record that extractors can propose values for."""

    UPLOAD_TIME = "upload_time"
    CAPTION = "caption"
    AUTHOR = "author"
    IMAGE_URL = "image_url"
    LIKES = "likes"
    COMMENTS = "comments"
    VIEWS = "views"


class SourceRank(IntEnum):
    """Extractor priority; lower wins."""

    VISIBLE_TIMESTAMP = 0
    LINKED_DATA = 1
    META_TAGS = 2
    TITLE_HEURISTIC = 3
    DESCRIPTION_HEURISTIC = 4


@dataclass(frozen=True)
class FieldCandidate:
    """One proposed value for one field from one extractor."""

    field: FieldName
    value: str
    rank: SourceRank


@dataclass
class ScanResult:
    """Output of a single extractor run.

    ``found`` is True when the extractor located its source in the document,
    even if that source yielded no candidates.
    """

    rank: SourceRank
    found: bool = False
    candidates: list[FieldCandidate] = field(default_factory=list)

    def add(self, field_name: FieldName, value: Optional[str]) -> None:
        """Add a candidate, ignoring empty values."""
        if value is None:
            return
        value = str(value)
        if not value.strip():
            return
        self.candidates.append(FieldCandidate(field_name, value, self.rank))


@dataclass
class CandidateSet:
    """All candidates produced for one document."""

    candidates: list[FieldCandidate] = field(default_factory=list)
    located: set[SourceRank] = field(default_factory=set)

    def add_scan(self, scan: ScanResult) -> None:
        if scan.found:
            self.located.add(scan.rank)
        self.candidates.extend(scan.candidates)

    def for_field(self, field_name: FieldName) -> list[FieldCandidate]:
        return [c for c in self.candidates if c.field == field_name]


class Extractor(ABC):
    """A pure scanner over a document."""

    rank: SourceRank

    @abstractmethod
    def extract(self, document: Document) -> ScanResult:
        """Scan the document; must not raise on malformed input."""
        pass

    def _scan(self) -> ScanResult:
        return ScanResult(rank=self.rank)
