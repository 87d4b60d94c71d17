"""
User API schemas.

Pydantic models for user-related request/response validation.
"""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, EmailStr, Field

from liftlog.core.timeutils import UTCDateTime


class FitnessLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class Units(str, Enum):
    METRIC = "metric"
    IMPERIAL = "imperial"


# Nested profile data
class UserProfile(BaseModel):
    """Physical profile and training goals."""
    age: Optional[int] = Field(None, ge=13, le=120)
    weight: Optional[float] = Field(None, ge=20, le=300, description="Body weight (kg)")
    height: Optional[float] = Field(None, ge=100, le=250, description="Height (cm)")
    fitness_level: FitnessLevel = FitnessLevel.BEGINNER
    goals: list[str] = Field(default_factory=list)


class UserPreferences(BaseModel):
    """Display and notification preferences."""
    units: Units = Units.METRIC
    recovery_reminders: bool = True
    workout_reminders: bool = True


# Shared properties
class UserBase(BaseModel):
    """Base user schema with common fields."""
    username: str = Field(..., min_length=3, max_length=30)
    email: EmailStr


# Request schemas
class UserCreate(UserBase):
    """Schema for user registration."""
    password: str = Field(..., min_length=8, description="Password (min 8 characters)")
    profile: Optional[UserProfile] = None


class UserLogin(BaseModel):
    """Schema for user login."""
    email: EmailStr
    password: str


class UserUpdate(BaseModel):
    """Schema for updating user profile."""
    username: Optional[str] = Field(None, min_length=3, max_length=30)
    profile: Optional[UserProfile] = None
    preferences: Optional[UserPreferences] = None


# Response schemas
class UserResponse(UserBase):
    """Schema for user data in API responses (no sensitive data)."""
    id: int
    profile: UserProfile
    preferences: UserPreferences
    is_active: bool
    created_at: UTCDateTime
    updated_at: UTCDateTime


# Token schemas
class Token(BaseModel):
    """Schema for JWT token response."""
    access_token: str
    token_type: str = "bearer"
