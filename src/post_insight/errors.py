"""Failure classification for the analysis pipeline."""

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    """Closed set of user-facing failure categories."""

    INVALID_URL = "invalid_url"
    NOT_FOUND = "not_found"
    RATE_LIMITED = "rate_limited"
    PRIVATE_OR_UNAVAILABLE = "private_or_unavailable"
    TRANSPORT_OR_UNKNOWN = "transport_or_unknown"

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self]


ERROR_MESSAGES = {
    ErrorKind.INVALID_URL: (
        "유효하지 않은 인스타그램 URL입니다. "
        "https://www.instagram.com/p/... 또는 https://www.instagram.com/reel/... "
        "형식을 사용해주세요."
    ),
    ErrorKind.NOT_FOUND: "게시물을 찾을 수 없습니다.",
    ErrorKind.RATE_LIMITED: "인스타그램 요청 제한에 걸렸습니다. 나중에 다시 시도해주세요.",
    ErrorKind.PRIVATE_OR_UNAVAILABLE: "비공개 게시물이거나, 삭제된 게시물, 또는 로그인이 필요합니다.",
    ErrorKind.TRANSPORT_OR_UNKNOWN: "데이터를 가져오는데 실패했습니다.",
}


class TransportError(Exception):
    """Raised by a document source when the page could not be fetched."""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.status = status


class FailureClassifier:
    """Maps HTTP statuses and exceptions to an ErrorKind."""

    STATUS_MAPPING = {
        404: ErrorKind.NOT_FOUND,
        429: ErrorKind.RATE_LIMITED,
    }

    # Access-denied statuses whose body is still parsed
    LENIENT_STATUSES = frozenset({401, 403})

    def classify_status(self, status: Optional[int]) -> Optional[ErrorKind]:
        """
        Classify an HTTP status returned by a document source.

        Args:
            status: HTTP status code, or None when the transport has none

        Returns:
            ErrorKind that ends the run, or None if the body should be parsed
        """
        if status is None or 200 <= status < 300:
            return None
        if status in self.STATUS_MAPPING:
            return self.STATUS_MAPPING[status]
        if status in self.LENIENT_STATUSES:
            return None
        return ErrorKind.TRANSPORT_OR_UNKNOWN

    def classify_exception(self, exc: BaseException) -> ErrorKind:
        """Classify an exception raised while fetching or parsing."""
        if isinstance(exc, TransportError) and exc.status is not None:
            return self.classify_status(exc.status) or ErrorKind.TRANSPORT_OR_UNKNOWN
        return ErrorKind.TRANSPORT_OR_UNKNOWN


# Convenience functions
def classify_status(status: Optional[int]) -> Optional[ErrorKind]:
    return FailureClassifier().classify_status(status)


def classify_exception(exc: BaseException) -> ErrorKind:
    return FailureClassifier().classify_exception(exc)
