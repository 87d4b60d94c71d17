"""
User profile endpoints.
"""

from fastapi import APIRouter, Depends
from sqlmodel import Session

from liftlog.api.dependencies import get_current_user
from liftlog.db.session import get_db
from liftlog.models.user import User
from liftlog.schemas.user import UserResponse, UserUpdate
from liftlog.services.user_service import UserService

router = APIRouter()


@router.get("/profile", summary="Get your profile.", response_model=UserResponse, )
def get_profile(user: User = Depends(get_current_user)):
    return UserService.to_response(user)


@router.put("/profile", summary="Update username, profile and preferences.", response_model=UserResponse, )
def update_profile(data: UserUpdate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = UserService(db)
    return service.update_profile(user, data)
