from datetime import datetime, timezone


def utcnow() -> datetime:
    """Naive UTC timestamp, the form every DateTime column in the schema stores."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def isoformat(value):
    """Serialize a stored timestamp for JSON payloads (None passes through)."""
    if value is None:
        return None
    return value.isoformat() + "Z"
