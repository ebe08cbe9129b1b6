"""
Field Builder - Normalizes individual webhook field values

Supports:
- Empty-value filtering (empty input means absent)
- Timestamp normalization to ISO-8601 UTC with millisecond precision
- Description truncation to the embed description limit
- Nested path lookup inside bulk embed objects
"""

import logging
from datetime import datetime, timezone
from email.utils import parsedate_to_datetime
from typing import Any, Optional, Sequence

from webhook_action.context.run_context import RunContext
from webhook_action.errors import InvalidTimestampError
from webhook_action.schema.embed import DESCRIPTION, DESCRIPTION_LIMIT, ELLIPSIS, TIMESTAMP

logger = logging.getLogger(__name__)

_MISSING = object()


def parse_timestamp(value: str) -> str:
    """
    Rewrite a date string as canonical ISO-8601 UTC

    Accepts ISO-8601 dates and date-times (with "Z", an offset, or naive,
    which is taken as UTC) and RFC 2822 dates.

    Examples:
        "2024-01-01"                -> "2024-01-01T00:00:00.000Z"
        "2024-01-01T12:30:00+02:00" -> "2024-01-01T10:30:00.000Z"

    Raises:
        InvalidTimestampError: If the value is not a recognizable date
    """
    text = value.strip()
    iso_text = text[:-1] + "+00:00" if text[-1:] in ("Z", "z") else text

    try:
        parsed = datetime.fromisoformat(iso_text)
    except ValueError:
        try:
            parsed = parsedate_to_datetime(text)
        except (TypeError, ValueError, IndexError):
            parsed = None
        if parsed is None:
            raise InvalidTimestampError(value) from None

    try:
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        parsed = parsed.astimezone(timezone.utc)
    except (OverflowError, ValueError):
        raise InvalidTimestampError(value) from None

    return f"{parsed:%Y-%m-%dT%H:%M:%S}.{parsed.microsecond // 1000:03d}Z"


def truncate_description(value: str, limit: int = DESCRIPTION_LIMIT) -> str:
    """Cut values longer than limit to exactly limit characters ending in "..."."""
    if len(value) <= limit:
        return value
    return value[: limit - len(ELLIPSIS)] + ELLIPSIS


def normalize_value(
    parameter: str,
    value: Optional[str],
    context: Optional[RunContext] = None,
) -> Optional[str]:
    """
    Normalize a raw field value according to its field name

    Args:
        parameter: Field name (e.g. "timestamp", "description", "title")
        value: Raw input value
        context: Run context receiving the debug trace, module logger when None

    Returns:
        Normalized value, or None when the field is absent
    """
    if value is None or value == "":
        return None

    if context is not None:
        context.log_debug(f"Parsing {parameter}")
    else:
        logger.debug(f"Parsing {parameter}")

    if parameter == TIMESTAMP:
        value = parse_timestamp(value)

    if parameter == DESCRIPTION:
        value = truncate_description(value)

    return value if value else None


def get_path(source: Any, path: Sequence[str], default: Any = None) -> Any:
    """
    Look up a nested path inside JSON-like data

    get_path({"author": {"name": "A"}}, ["author", "name"]) -> "A"

    Returns default when an intermediate segment is missing or not an object.
    """
    current = source
    for segment in path:
        if not isinstance(current, dict):
            return default
        current = current.get(segment, _MISSING)
        if current is _MISSING:
            return default
    return current


def scalar_to_str(value: Any) -> Optional[str]:
    """Convert a JSON scalar to its trimmed string form; objects, arrays and null are absent."""
    if value is None or isinstance(value, (dict, list)):
        return None
    if isinstance(value, str):
        return value.strip()
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
