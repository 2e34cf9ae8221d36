"""Shared created/updated timestamp columns."""

from datetime import datetime

from sqlalchemy import Column, DateTime


class TimestampMixin:
    """
    Creation and modification timestamps for content records.

    On insert both columns are set to now; every later UPDATE refreshes
    ``updated_at``.
    """

    created_at = Column(DateTime, default=datetime.utcnow, nullable=False, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow, nullable=False)
