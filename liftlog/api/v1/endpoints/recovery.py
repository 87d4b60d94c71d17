"""
Recovery endpoints.

Recovery records, feedback, and on-the-fly recommendations.
"""

import datetime
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from sqlmodel import Session

from liftlog.api.dependencies import get_current_user
from liftlog.core.config import settings
from liftlog.db.session import get_db
from liftlog.models.user import User
from liftlog.schemas.recommendation import RecommendationResponse
from liftlog.schemas.recovery import (FeedbackResponse, RecoveryCreate, RecoveryFeedback, RecoveryListResponse,
                                      RecoveryResponse, RecoveryUpdate, )
from liftlog.services.recovery_service import RecoveryService

router = APIRouter()


@router.get("", summary="List recovery records (paginated, newest first).", response_model=RecoveryListResponse, )
def list_recoveries(page: int = Query(1, ge=1, description="Page number (1-based)"),
                    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=100, description="Page size"),
                    start_date: Optional[datetime.datetime] = Query(None, description="Range start (inclusive)"),
                    end_date: Optional[datetime.datetime] = Query(None, description="Range end (inclusive)"),
                    db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = RecoveryService(db)
    return service.get_page(user.id, page, limit, start_date, end_date)


@router.post("", summary="Submit recovery factors for a workout.", response_model=RecoveryResponse,
             status_code=status.HTTP_201_CREATED, )
def create_recovery(data: RecoveryCreate, db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = RecoveryService(db)
    return service.create(user.id, data)


@router.get("/recommendations", summary="Get recovery recommendations from recent history.",
            response_model=RecommendationResponse, )
def get_recommendations(db: Session = Depends(get_db), user: User = Depends(get_current_user), ):
    service = RecoveryService(db)
    return service.recommendations(user.id)


@router.put("/{recovery_id}", summary="Update a recovery record (scores are recomputed).",
            response_model=RecoveryResponse, )
def update_recovery(recovery_id: int, data: RecoveryUpdate, db: Session = Depends(get_db),
                    user: User = Depends(get_current_user), ):
    service = RecoveryService(db)
    return service.update(user.id, recovery_id, data)


@router.post("/{recovery_id}/feedback", summary="Submit feedback on recommendations.",
             response_model=FeedbackResponse, )
def submit_feedback(recovery_id: int, feedback: RecoveryFeedback, db: Session = Depends(get_db),
                    user: User = Depends(get_current_user), ):
    service = RecoveryService(db)
    return service.submit_feedback(user.id, recovery_id, feedback)
