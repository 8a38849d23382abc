import hashlib
from datetime import UTC, datetime


def utcnow() -> datetime:
    """Naive UTC timestamp, matching what SQLite DateTime columns hand back."""
    return datetime.now(UTC).replace(tzinfo=None)


def hash_token(token: str) -> str:
    return hashlib.sha256(token.encode()).hexdigest()
