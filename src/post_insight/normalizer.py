"""Turns merged candidates into the final display record."""

import logging

from .extractor.base import FieldName
from .merge import MergedFields
from .models import ExtractionResult
from .utils.formatting import format_upload_time
from .validator import PostIdentity

logger = logging.getLogger(__name__)


ZERO_COUNT = "0"
VIEWS_UNAVAILABLE = "비공개"


def normalize(identity: PostIdentity, merged: MergedFields) -> ExtractionResult:
    """
    Build the success record for a post.

    Args:
        identity: Validated post identity
        merged: Winning candidate per field

    Returns:
        ExtractionResult with defaults applied
    """
    for field_name in (FieldName.LIKES, FieldName.COMMENTS):
        if merged.value(field_name) is None:
            logger.debug(
                "%s: no count (%s), defaulting to %s",
                field_name.value,
                "source located" if merged.source_located(field_name) else "no source",
                ZERO_COUNT,
            )

    views = None
    if identity.is_reel:
        views = merged.value(FieldName.VIEWS) or VIEWS_UNAVAILABLE

    return ExtractionResult(
        post_type=identity.post_type,
        upload_time=format_upload_time(merged.value(FieldName.UPLOAD_TIME)),
        likes=merged.value(FieldName.LIKES) or ZERO_COUNT,
        comments=merged.value(FieldName.COMMENTS) or ZERO_COUNT,
        views=views,
        caption=merged.value(FieldName.CAPTION),
        image_url=merged.value(FieldName.IMAGE_URL),
        author=merged.value(FieldName.AUTHOR),
    )
