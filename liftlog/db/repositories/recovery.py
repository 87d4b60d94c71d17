"""
Recovery record repository.

Handles database operations for :class:`RecoveryRecord`.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from liftlog.models.recovery import RecoveryRecord


class RecoveryRepository:
    """Repository for RecoveryRecord database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: RecoveryRecord) -> RecoveryRecord:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_user_and_id(self, user_id: int, entry_id: int) -> Optional[RecoveryRecord]:
        statement = select(RecoveryRecord).where(RecoveryRecord.id == entry_id, RecoveryRecord.user_id == user_id, )
        return self.session.exec(statement).first()

    def _filtered(self, statement, user_id: int, start: Optional[datetime.datetime],
                  end: Optional[datetime.datetime], ):
        statement = statement.where(RecoveryRecord.user_id == user_id)
        if start is not None:
            statement = statement.where(RecoveryRecord.date >= start)
        if end is not None:
            statement = statement.where(RecoveryRecord.date <= end)
        return statement

    def get_page_by_user(self, user_id: int, skip: int, limit: int, start: Optional[datetime.datetime] = None,
                         end: Optional[datetime.datetime] = None, ) -> list[RecoveryRecord]:
        """Records for a user, newest first, optionally restricted to a date range (inclusive)."""
        statement = self._filtered(select(RecoveryRecord), user_id, start, end)
        statement = statement.order_by(RecoveryRecord.date.desc(), RecoveryRecord.id.desc()).offset(skip).limit(limit)
        return list(self.session.exec(statement).all())

    def count_by_user(self, user_id: int, start: Optional[datetime.datetime] = None,
                      end: Optional[datetime.datetime] = None, ) -> int:
        statement = self._filtered(select(func.count()).select_from(RecoveryRecord), user_id, start, end)
        return self.session.exec(statement).first() or 0

    def get_latest_by_user(self, user_id: int, limit: int = 5) -> list[RecoveryRecord]:
        """Most recent records, newest first."""
        statement = (select(RecoveryRecord).where(RecoveryRecord.user_id == user_id).order_by(
            RecoveryRecord.date.desc(), RecoveryRecord.id.desc()).limit(limit))
        return list(self.session.exec(statement).all())

    def update(self, entry: RecoveryRecord) -> RecoveryRecord:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete_by_workout(self, workout_id: int) -> int:
        """Delete every record tied to a workout.  Returns the number deleted.

        Flushed but not committed; the caller commits.
        """
        statement = select(RecoveryRecord).where(RecoveryRecord.workout_id == workout_id)
        entries = list(self.session.exec(statement).all())
        for entry in entries:
            self.session.delete(entry)
        self.session.flush()
        return len(entries)
