"""
API v1 router.

Aggregates all v1 endpoints.
"""

from fastapi import APIRouter

from liftlog.api.v1.endpoints import auth, recovery, users, workouts

api_router = APIRouter()

# Include endpoint routers
api_router.include_router(
    auth.router, prefix="/auth", tags=["Authentication"]
)
api_router.include_router(
    users.router, prefix="/users", tags=["Users"]
)
api_router.include_router(
    workouts.router, prefix="/workouts", tags=["Workouts"]
)
api_router.include_router(
    recovery.router, prefix="/recovery", tags=["Recovery"]
)
