"""
Models package initializer.

Version: 1.0
"""

from credential_service.models.user import UserIdentity, UserRecord, normalize_email

__all__ = ["UserIdentity", "UserRecord", "normalize_email"]
