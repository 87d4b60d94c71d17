"""
Workout repository.

Handles database operations for :class:`Workout`, including the
aggregation query behind the statistics overview.
"""

import datetime
from typing import Optional

from sqlalchemy import func
from sqlmodel import Session, select

from liftlog.models.workout import Workout

# Columns a workout list may be sorted by.
SORTABLE_COLUMNS = {
    "date": Workout.date,
    "name": Workout.name,
    "created_at": Workout.created_at,
}


class WorkoutRepository:
    """Repository for Workout database operations."""

    def __init__(self, session: Session):
        self.session = session

    def create(self, entry: Workout) -> Workout:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def get_by_user_and_id(self, user_id: int, entry_id: int) -> Optional[Workout]:
        statement = select(Workout).where(Workout.id == entry_id, Workout.user_id == user_id)
        return self.session.exec(statement).first()

    def get_page_by_user(self, user_id: int, skip: int, limit: int, sort_by: str = "date",
                         descending: bool = True, ) -> list[Workout]:
        column = SORTABLE_COLUMNS.get(sort_by, Workout.date)
        order = column.desc() if descending else column.asc()
        statement = (select(Workout).where(Workout.user_id == user_id).order_by(order, Workout.id).offset(skip).limit(
            limit))
        return list(self.session.exec(statement).all())

    def get_latest_by_user(self, user_id: int, limit: int = 5) -> list[Workout]:
        """Most recent workouts, newest first."""
        statement = (select(Workout).where(Workout.user_id == user_id).order_by(Workout.date.desc(),
                                                                                Workout.id.desc()).limit(limit))
        return list(self.session.exec(statement).all())

    def get_by_user_since(self, user_id: int, start: datetime.datetime) -> list[Workout]:
        """Workouts on or after ``start``, oldest first."""
        statement = (select(Workout).where(Workout.user_id == user_id, Workout.date >= start).order_by(Workout.date,
                                                                                                        Workout.id))
        return list(self.session.exec(statement).all())

    def count_by_user(self, user_id: int) -> int:
        statement = select(func.count()).select_from(Workout).where(Workout.user_id == user_id)
        return self.session.exec(statement).first() or 0

    # ------------------------------------------------------------------
    # Aggregation queries for statistics
    # ------------------------------------------------------------------

    def aggregate_since(self, user_id: int, start: datetime.datetime) -> dict[str, float]:
        """Aggregate stored workout metrics over workouts on or after ``start``.

        Returns zeros when the user has no workout in the period.
        """
        statement = select(func.count(Workout.id), func.coalesce(func.sum(Workout.metric_total_volume), 0.0),
                           func.coalesce(func.sum(Workout.metric_total_sets), 0),
                           func.coalesce(func.sum(Workout.metric_total_reps), 0),
                           func.coalesce(func.avg(Workout.duration), 0.0),
                           func.coalesce(func.avg(Workout.metric_average_rpe), 0.0),
                           func.coalesce(func.max(Workout.metric_max_weight), 0.0), ).where(
            Workout.user_id == user_id, Workout.date >= start, )
        row = self.session.exec(statement).first()
        if row is None:
            return { "total_workouts": 0, "total_volume": 0.0, "total_sets": 0, "total_reps": 0,
                     "avg_duration": 0.0, "avg_rpe": 0.0, "max_weight": 0.0, }
        return { "total_workouts": int(row[0]), "total_volume": float(row[1]), "total_sets": int(row[2]),
                 "total_reps": int(row[3]), "avg_duration": float(row[4]), "avg_rpe": float(row[5]),
                 "max_weight": float(row[6]), }

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------

    def update(self, entry: Workout) -> Workout:
        self.session.add(entry)
        self.session.commit()
        self.session.refresh(entry)
        return entry

    def delete(self, entry: Workout) -> None:
        self.session.delete(entry)
        self.session.commit()
