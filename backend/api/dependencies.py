"""Shared dependencies for API routes."""

from datetime import datetime, timezone


def get_now() -> datetime:
    """Reference time for recency scoring; overridden in tests."""
    return datetime.now(timezone.utc)
