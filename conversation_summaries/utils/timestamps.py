from datetime import datetime, timedelta, timezone
from typing import Any

from conversation_summaries.errors import InvalidArgument, ParseError


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def parse_timestamp(value: Any) -> int:
    """
    Convert an ISO-8601 string to milliseconds since the epoch.

    - "2016-08-25T10:15:00.670Z" -> 1472120100670
    - values without an offset are read as UTC
    """
    if not isinstance(value, str):
        raise InvalidArgument("argument should be a string")
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError as exc:
        raise ParseError("invalid string provided") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return (parsed - EPOCH) // timedelta(milliseconds=1)
