"""
User database model.

Defines the User table for authentication and profile data.
"""

import datetime
from typing import Optional

from sqlalchemy import JSON, Column, DateTime
from sqlmodel import Field, SQLModel

from liftlog.core.timeutils import utc_now


class User(SQLModel, table=True):
    """
    User model for authentication.

    Stores credentials, the physical profile and preferences.  The nested
    ``profile`` / ``preferences`` API objects are flattened into columns
    by :class:`~liftlog.services.user_service.UserService`.
    """
    __tablename__ = "users"

    id: Optional[int] = Field(default=None, primary_key=True)
    username: str = Field(unique=True, index=True, max_length=30, nullable=False)
    email: str = Field(unique=True, index=True, max_length=255, nullable=False)
    hashed_password: str = Field(nullable=False)

    # Profile
    age: Optional[int] = Field(default=None)
    body_weight: Optional[float] = Field(default=None)
    height: Optional[float] = Field(default=None)
    fitness_level: str = Field(default="beginner", max_length=20)
    goals: list = Field(default_factory=list, sa_column=Column(JSON, nullable=False))

    # Preferences
    units: str = Field(default="metric", max_length=10)
    recovery_reminders: bool = Field(default=True)
    workout_reminders: bool = Field(default=True)

    is_active: bool = Field(default=True)

    # Timestamps
    created_at: datetime.datetime = Field(default_factory=utc_now,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))
    updated_at: datetime.datetime = Field(default_factory=utc_now,
                                          sa_column=Column(DateTime(timezone=True), nullable=False))
