"""Validator module for checking and canonicalizing post URLs."""

from .url_validator import (
    PostType,
    PostIdentity,
    URLValidator,
    clean_url,
    validate_post_url,
)

__all__ = [
    "PostType",
    "PostIdentity",
    "URLValidator",
    "clean_url",
    "validate_post_url",
]
