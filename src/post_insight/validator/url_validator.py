"""URL validator for Instagram post and reel links."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class PostType(str, Enum):
    """Kind of post, decided by the URL path."""
    
    POST = "Post"
    REEL = "Reel"


@dataclass(frozen=True)
class PostIdentity:
    """Identity of a post, derived once from a validated URL."""
    
    canonical_url: str
    post_type: PostType
    shortcode: str
    
    @property
    def is_reel(self) -> bool:
        return self.post_type == PostType.REEL


def clean_url(url: Optional[str]) -> str:
    """Strip whitespace, the query string and any fragment from a URL."""
    if not url:
        return ""
    url = url.strip()
    return url.split('?', 1)[0].split('#', 1)[0]


class URLValidator:
    """Validates Instagram post URLs without touching the network."""
    
    # Anchored at the start only; trailing path segments are tolerated.
    # Shortcodes are ASCII letters, digits, '_' and '-'.
    URL_PATTERN = re.compile(r'^https://(www\.)?instagram\.com/(p|reel)/([\w-]+)/?', re.ASCII)
    
    REEL_SEGMENT = '/reel/'
    
    def validate(self, url: Optional[str]) -> Optional[PostIdentity]:
        """
        Validate a candidate post URL.
        
        Args:
            url: Raw user input
            
        Returns:
            PostIdentity for an accepted URL, None if rejected
        """
        cleaned = clean_url(url)
        if not cleaned:
            return None
        
        match = self.URL_PATTERN.match(cleaned)
        if not match:
            return None
        
        post_type = PostType.REEL if self.REEL_SEGMENT in cleaned else PostType.POST
        return PostIdentity(
            canonical_url=cleaned,
            post_type=post_type,
            shortcode=match.group(3),
        )
    
    def is_valid(self, url: Optional[str]) -> bool:
        return self.validate(url) is not None


# Convenience function
def validate_post_url(url: Optional[str]) -> Optional[PostIdentity]:
    """Validate a single URL."""
    return URLValidator().validate(url)
