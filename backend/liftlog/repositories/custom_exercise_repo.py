from __future__ import annotations
from typing import Optional
from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from liftlog.models import CustomExercise, WorkoutType
from liftlog.repositories.base import BaseRepository

class CustomExerciseRepository(BaseRepository[CustomExercise]):
    model = CustomExercise

    def list_names(self, workout_type: WorkoutType) -> list[str]:
        stmt = select(CustomExercise.name).where(CustomExercise.workout_type == workout_type)\
                                           .order_by(CustomExercise.name.asc())
        return list(self.db.execute(stmt).scalars().all())

    def get_by_name(self, workout_type: WorkoutType, name: str) -> Optional[CustomExercise]:
        stmt = select(CustomExercise).where(
            CustomExercise.workout_type == workout_type,
            func.lower(CustomExercise.name) == name.lower(),
        )
        return self.db.execute(stmt).scalars().first()

    def create(self, workout_type: WorkoutType, *, name: str) -> CustomExercise:
        if self.get_by_name(workout_type, name):
            raise ValueError("custom_exercise_exists")
        try:
            return self.add_and_refresh(CustomExercise(name=name, workout_type=workout_type))
        except IntegrityError:
            self.db.rollback()
            raise ValueError("custom_exercise_exists")
