"""Core module exports."""

from .security import member_email_from_token, ALGORITHM

__all__ = [
    "member_email_from_token",
    "ALGORITHM",
]
