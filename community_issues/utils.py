"""Small helpers shared by the store and the client."""

import uuid
from datetime import datetime, timezone
from typing import Any


def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


def new_issue_id() -> str:
    return str(uuid.uuid4())


def truncate(value: Any, max_length: int) -> str:
    """Convert a JSON value to text and cut it to max_length characters."""
    if isinstance(value, bool):
        text = "true" if value else "false"
    elif isinstance(value, float) and value.is_integer() and abs(value) < 1e21:
        # 1.0 and 1e3 read back as "1" and "1000"
        text = str(int(value))
    else:
        text = str(value)
    return text[:max_length]
