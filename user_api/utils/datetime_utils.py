"""
Centralized DateTime Utilities
==============================

Provides consistent datetime handling across the entire application.
All timestamps are timezone-aware and expressed in UTC.

Functions:
- now(): Returns timezone-aware datetime object
- ensure_aware(): Attach UTC to naive datetimes read back from storage
"""
from datetime import datetime, timezone
from typing import Optional


def now() -> datetime:
    """
    Get current datetime in UTC.
    
    Returns:
        timezone-aware datetime object
    """
    return datetime.now(timezone.utc)


def ensure_aware(dt: Optional[datetime]) -> Optional[datetime]:
    """
    Make a datetime timezone-aware.
    
    Some backends (SQLite) drop tzinfo on the way back. Naive values are
    assumed to be UTC since that is what the application writes.
    
    Args:
        dt: datetime object (timezone-aware or naive)
    
    Returns:
        timezone-aware datetime object, or None if dt is None
    """
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt
