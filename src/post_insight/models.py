"""Data models for analyzed posts."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from .errors import ErrorKind
from .validator import PostType


class ExtractionResult(BaseModel):
    """Display-ready engagement record for one post, or a classified failure."""

    post_type: Optional[PostType] = Field(None, description="Post or Reel; None on failure")
    upload_time: str = Field("", description="'YYYY-MM-DD HH:mm (KST)' or the unknown sentinel")

    # Metrics as display strings ("1,234", "1.2k", "0")
    likes: Optional[str] = Field(None)
    comments: Optional[str] = Field(None)
    views: Optional[str] = Field(None, description="Reels only")

    # Content
    caption: Optional[str] = Field(None)
    image_url: Optional[str] = Field(None, description="Cover image URL")
    author: Optional[str] = Field(None, description="Username or display name")

    # Error info
    error: Optional[str] = Field(None, description="Localized message")
    error_kind: Optional[ErrorKind] = Field(None)

    model_config = ConfigDict(frozen=True)

    @property
    def success(self) -> bool:
        return self.error_kind is None

    @property
    def is_reel(self) -> bool:
        return self.post_type == PostType.REEL

    @classmethod
    def failure(cls, kind: ErrorKind) -> "ExtractionResult":
        """Complete error record: every data field empty."""
        return cls(error=kind.message, error_kind=kind)

    def to_json(self, indent: Optional[int] = None) -> str:
        """JSON output; success records carry no error fields at all."""
        exclude = {"error", "error_kind"} if self.success else None
        return self.model_dump_json(indent=indent, exclude=exclude)
