from __future__ import annotations
from typing import Optional
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from liftlog.catalog import CUSTOM_GROUP
from liftlog.models import Exercise, Workout, WorkoutSession, WorkoutSet, WorkoutType
from liftlog.repositories.base import BaseRepository
from liftlog.repositories.custom_exercise_repo import CustomExerciseRepository
from liftlog.scratch import WorkoutSnapshot

class WorkoutRepository(BaseRepository[Workout]):
    model = Workout

    def get_for_type(self, workout_type: WorkoutType) -> Optional[Workout]:
        stmt = select(Workout).where(Workout.workout_type == workout_type)
        return self.db.execute(stmt).scalars().first()

    def commit_snapshot(self, snapshot: WorkoutSnapshot) -> WorkoutSession:
        """Write a finished workout in one transaction.

        Every row is built and wired before the single commit, so readers see
        either the whole workout or nothing. A snapshot already written is
        returned as is. If another writer created the type's workout first,
        the insert is redone against that row.
        """
        existing = self.db.get(WorkoutSession, snapshot.session_id)
        if existing is not None:
            return existing

        try:
            session = self._insert(snapshot)
        except IntegrityError:
            self.db.rollback()
            if self.get_for_type(snapshot.workout_type) is None:
                raise
            try:
                session = self._insert(snapshot)
            except Exception:
                self.db.rollback()
                raise
        except Exception:
            self.db.rollback()
            raise
        self.db.refresh(session)
        return session

    def _insert(self, snapshot: WorkoutSnapshot) -> WorkoutSession:
        workout = self.get_for_type(snapshot.workout_type)
        if workout is None:
            workout = Workout(workout_type=snapshot.workout_type)
            self.db.add(workout)

        session = WorkoutSession(
            id=snapshot.session_id,
            date=snapshot.start_time,
            duration_seconds=snapshot.elapsed_seconds,
            is_completed=True,
        )
        workout.sessions.append(session)

        customs = CustomExerciseRepository(self.db)
        for ex in snapshot.exercises:
            is_custom = customs.get_by_name(snapshot.workout_type, ex.name) is not None
            exercise = Exercise(
                name=ex.name,
                muscle_group=ex.muscle_group or (CUSTOM_GROUP if is_custom else ""),
                is_custom=is_custom,
            )
            self.db.add(exercise)
            for s in ex.sets:
                session.sets.append(WorkoutSet(
                    exercise=exercise,
                    set_number=s.set_number,
                    weight=s.weight,
                    reps=s.reps,
                    is_completed=True,
                    completed_at=s.completed_at,
                ))

        self.db.commit()
        return session
