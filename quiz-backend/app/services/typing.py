from datetime import datetime, timezone

def to_iso(value) -> str:
    # naive timestamps (SQLite CURRENT_TIMESTAMP) are UTC
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        return value.isoformat()
    return str(value)
