from __future__ import annotations
import uuid
from typing import Optional
from sqlalchemy import select, func
from sqlalchemy.orm import selectinload
from liftlog.models import Exercise, Workout, WorkoutSession, WorkoutSet
from liftlog.repositories.base import BaseRepository

class SessionRepository(BaseRepository[WorkoutSession]):
    model = WorkoutSession

    def get(self, session_id: uuid.UUID) -> Optional[WorkoutSession]:
        stmt = select(WorkoutSession).where(WorkoutSession.id == session_id).options(
            selectinload(WorkoutSession.workout),
            selectinload(WorkoutSession.sets).selectinload(WorkoutSet.exercise),
        )
        return self.db.execute(stmt).scalar_one_or_none()

    def list_completed(self) -> list[WorkoutSession]:
        """All completed sessions, oldest first; equal dates ordered by id."""
        stmt = select(WorkoutSession).where(WorkoutSession.is_completed.is_(True))\
                                     .options(selectinload(WorkoutSession.workout),
                                              selectinload(WorkoutSession.sets).selectinload(WorkoutSet.exercise))\
                                     .order_by(WorkoutSession.date.asc(), WorkoutSession.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def list_recent(self, *, limit: int = 50, offset: int = 0) -> list[WorkoutSession]:
        stmt = select(WorkoutSession).where(WorkoutSession.is_completed.is_(True))\
                                     .options(selectinload(WorkoutSession.workout),
                                              selectinload(WorkoutSession.sets).selectinload(WorkoutSet.exercise))\
                                     .order_by(WorkoutSession.date.desc(), WorkoutSession.id.desc())\
                                     .limit(limit).offset(offset)
        return list(self.db.execute(stmt).scalars().all())

    def count(self) -> int:
        return self.db.execute(select(func.count()).select_from(WorkoutSession)).scalar_one()

    def clear_all(self) -> int:
        """Delete every workout (sessions and sets cascade) and every exercise row.

        Custom exercises are catalog entries and survive. Returns the number of
        sessions removed.
        """
        removed = self.count()
        for workout in self.db.execute(select(Workout)).scalars().all():
            self.db.delete(workout)
        self.db.flush()
        for exercise in self.db.execute(select(Exercise)).scalars().all():
            self.db.delete(exercise)
        self.db.commit()
        return removed
