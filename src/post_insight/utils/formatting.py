from datetime import datetime
from typing import Optional

from dateutil import parser as date_parser
from dateutil import tz

TARGET_TIMEZONE = "Asia/Seoul"
TIMEZONE_LABEL = "KST"

UNKNOWN_TIME = "알 수 없음"


def parse_instant(raw: Optional[str]) -> Optional[datetime]:
    """Parses a timestamp string as an absolute instant; naive values are UTC."""
    if not raw or not raw.strip():
        return None
    try:
        parsed = date_parser.parse(raw.strip())
    except (ValueError, OverflowError):
        return None
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=tz.UTC)
    return parsed


def format_upload_time(raw: Optional[str], zone: str = TARGET_TIMEZONE, label: str = TIMEZONE_LABEL) -> str:
    """Renders a raw timestamp as 'YYYY-MM-DD HH:mm (KST)', or the unknown sentinel."""
    instant = parse_instant(raw)
    target = tz.gettz(zone)
    if instant is None or target is None:
        return UNKNOWN_TIME
    try:
        local = instant.astimezone(target)
    except (ValueError, OverflowError):
        # Instants at the edge of the datetime range cannot be shifted
        return UNKNOWN_TIME
    return f"{local:%Y-%m-%d %H:%M} ({label})"
