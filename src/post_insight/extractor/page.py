"""Extract data from page meta tags and the visible timestamp element."""

from dataclasses import dataclass
from typing import Optional

from ..source.base import Document
from .base import Extractor, FieldName, ScanResult, SourceRank


@dataclass(frozen=True)
class MetaTags:
    """OpenGraph properties read from the page."""

    title: Optional[str] = None
    description: Optional[str] = None
    image: Optional[str] = None

    @property
    def found(self) -> bool:
        return any((self.title, self.description, self.image))


def read_meta_tags(document: Document) -> MetaTags:
    return MetaTags(
        title=document.meta("og:title") or None,
        description=document.meta("og:description") or None,
        image=document.meta("og:image") or None,
    )


class MetaTagExtractor(Extractor):
    """og:title as a caption fallback and og:image as the cover image."""

    rank = SourceRank.META_TAGS

    def extract(self, document: Document) -> ScanResult:
        scan = self._scan()
        tags = read_meta_tags(document)
        scan.found = tags.found
        scan.add(FieldName.CAPTION, tags.title)
        scan.add(FieldName.IMAGE_URL, tags.image)
        return scan


class VisibleTimestampExtractor(Extractor):
    """datetime attribute of the first <time> element."""

    rank = SourceRank.VISIBLE_TIMESTAMP

    def extract(self, document: Document) -> ScanResult:
        scan = self._scan()
        timestamp = document.visible_timestamp()
        scan.found = timestamp is not None
        scan.add(FieldName.UPLOAD_TIME, timestamp)
        return scan
