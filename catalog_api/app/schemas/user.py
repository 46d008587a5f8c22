"""
Pydantic models for user data.

Users carry a free‑form ``status`` string (``ACTIVE`` by default) and
creation / modification timestamps that the service maintains.  The
e‑mail address is unique among stored users; the uniqueness check
lives in ``UserService`` because it needs the whole repository.
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import BaseModel, Field

from .base import Entity

ACTIVE = "ACTIVE"


class User(Entity):
    entity_name: ClassVar[str] = "User"

    name: str = Field(..., examples=["Jane Smith"])
    email: str = Field(..., examples=["jane.smith@example.com"])
    age: int = Field(..., examples=[30])
    status: str = Field(ACTIVE, examples=[ACTIVE])
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def ensure_valid(self) -> None:
        self._require_text("name")
        self._require_text("email")
        self._require_text("status")
        if self.age is None or self.age < 0:
            raise self._invalid("Age must not be negative")


class UserCreate(BaseModel):
    """Schema for registering a user."""

    name: str
    email: str
    age: int
    status: str = ACTIVE

    def to_entity(self) -> User:
        return User(**self.model_dump())


class UserUpdate(BaseModel):
    """Schema for updating a user.  Only provided fields are changed."""

    name: str | None = None
    email: str | None = None
    age: int | None = None
    status: str | None = None


class StatusUpdate(BaseModel):
    status: str = Field(..., examples=["INACTIVE"])


class UserStatistics(BaseModel):
    """Aggregate figures over all stored users."""

    total_users: int = 0
    active_users: int = 0
    average_age: float = 0.0
    min_age: int = 0
    max_age: int = 0
    users_created_today: int = 0
