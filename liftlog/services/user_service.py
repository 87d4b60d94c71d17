"""
User service.

Business logic for user management and authentication.
"""

import datetime
import logging
from typing import Optional

from fastapi import HTTPException, status
from sqlmodel import Session

from liftlog.core.config import settings
from liftlog.core.security import create_access_token, get_password_hash, verify_password
from liftlog.core.timeutils import utc_now
from liftlog.db.repositories.user import UserRepository
from liftlog.models.user import User
from liftlog.schemas.user import (
    Token,
    UserCreate,
    UserLogin,
    UserPreferences,
    UserProfile,
    UserResponse,
    UserUpdate,
)

logger = logging.getLogger(__name__)


class UserService:
    """Service for user-related business logic."""

    def __init__(self, session: Session):
        """
        Initialize service with database session.

        Args:
            session: SQLModel database session
        """
        self.repository = UserRepository(session)

    def register(self, user_data: UserCreate) -> UserResponse:
        """
        Register a new user.

        Args:
            user_data: User registration data

        Returns:
            Created user

        Raises:
            HTTPException: If email or username already exists
        """
        if self.repository.exists_by_email(user_data.email):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                                detail="User with this email already exists")
        if self.repository.exists_by_username(user_data.username):
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST,
                                detail="User with this username already exists")

        user = User(username=user_data.username, email=user_data.email,
                    hashed_password=get_password_hash(user_data.password), )
        if user_data.profile:
            self._apply_profile(user, user_data.profile)

        user = self.repository.create(user)
        logger.info("Registered user %s", user.id)
        return self.to_response(user)

    def authenticate(self, login_data: UserLogin) -> Token:
        """
        Authenticate user and return access token.

        Args:
            login_data: User login credentials

        Returns:
            JWT access token

        Raises:
            HTTPException: If credentials are invalid
        """
        user = self.repository.get_by_email(login_data.email)

        if not user or not verify_password(login_data.password, user.hashed_password):
            logger.warning("Failed login attempt for %s", login_data.email)
            raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials",
                                headers={ "WWW-Authenticate": "Bearer" }, )

        if not user.is_active:
            raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account is inactive")

        access_token_expires = datetime.timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
        access_token = create_access_token(data={ "sub": user.email }, expires_delta=access_token_expires)
        return Token(access_token=access_token, token_type="bearer")

    def get_user_by_email(self, email: str) -> Optional[User]:
        return self.repository.get_by_email(email)

    def update_profile(self, user: User, data: UserUpdate) -> UserResponse:
        """Update username, profile and/or preferences of ``user``."""
        if data.username is not None and data.username != user.username:
            if self.repository.exists_by_username(data.username):
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Username already taken")
            user.username = data.username

        if data.profile is not None:
            self._apply_profile(user, data.profile)

        if data.preferences is not None:
            user.units = data.preferences.units.value
            user.recovery_reminders = data.preferences.recovery_reminders
            user.workout_reminders = data.preferences.workout_reminders

        user.updated_at = utc_now()
        user = self.repository.update(user)
        logger.info("Updated profile of user %s", user.id)
        return self.to_response(user)

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _apply_profile(user: User, profile: UserProfile) -> None:
        user.age = profile.age
        user.body_weight = profile.weight
        user.height = profile.height
        user.fitness_level = profile.fitness_level.value
        user.goals = list(profile.goals)

    @staticmethod
    def to_response(user: User) -> UserResponse:
        """Convert the flat database model to the nested response schema."""
        return UserResponse(
            id=user.id,
            username=user.username,
            email=user.email,
            profile=UserProfile(
                age=user.age,
                weight=user.body_weight,
                height=user.height,
                fitness_level=user.fitness_level,
                goals=user.goals or [],
            ),
            preferences=UserPreferences(
                units=user.units,
                recovery_reminders=user.recovery_reminders,
                workout_reminders=user.workout_reminders,
            ),
            is_active=user.is_active,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )
