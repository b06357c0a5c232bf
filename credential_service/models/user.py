"""
User identity models.

Version: 1.0
"""

from datetime import datetime, timezone
from typing import Any, Dict

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field

def normalize_email(email: str) -> str:
    """Lowercase an email address; used as the uniqueness key."""
    return email.lower()

class UserIdentity(BaseModel):
    """Safe view of an identity record, returned outside the store."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    email: str

class UserRecord(UserIdentity):
    """Stored identity record. Carries the password hash; never leaves the store."""

    password_hash: str
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "UserRecord":
        """Build a record from a raw MongoDB document."""
        data = dict(document)
        object_id = data.pop("_id")
        data["id"] = str(object_id) if isinstance(object_id, ObjectId) else object_id
        return cls(**data)

    def to_identity(self) -> UserIdentity:
        return UserIdentity(id=self.id, name=self.name, email=self.email)
