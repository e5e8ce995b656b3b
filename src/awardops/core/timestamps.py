"""Timestamp ordering helpers.

Store timestamps are ISO-8601 strings. For ordering, a missing or
unparsable value counts as the epoch so it sorts as the oldest entry.
"""

from __future__ import annotations

from datetime import datetime, timezone

EPOCH = 0.0


def timestamp_key(value: str | None) -> float:
    """Return seconds since the epoch for an ISO-8601 string.

    Naive timestamps are read as UTC. Missing or unparsable input gives 0.0.
    """
    if not value:
        return EPOCH

    text = value.strip()
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"

    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return EPOCH

    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed.timestamp()
