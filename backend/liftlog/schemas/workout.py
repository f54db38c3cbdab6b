from __future__ import annotations
import uuid
from typing import Annotated
from datetime import datetime
from pydantic import BaseModel, Field, field_validator
from liftlog.models import WorkoutType
from liftlog.session_manager import Resolution, WorkoutSessionManager

ExerciseName = Annotated[str, Field(max_length=120)]
NonNegFloat = Annotated[float, Field(ge=0, le=2000)]
NonNegInt = Annotated[int, Field(ge=0, le=1000)]

class WorkoutStart(BaseModel):
    workout_type: WorkoutType
    # required only when a different workout is already in progress
    resolution: Resolution | None = None

class ExerciseCreate(BaseModel):
    name: ExerciseName

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("exercise name cannot be blank")
        return v2

class SetUpdate(BaseModel):
    weight: NonNegFloat
    reps: NonNegInt

class ActiveSetRead(BaseModel):
    id: uuid.UUID
    set_number: int
    weight: float
    reps: int
    is_completed: bool
    completed_at: datetime | None = None

    model_config = {"from_attributes": True}

class ActiveExerciseRead(BaseModel):
    id: uuid.UUID
    name: str
    sets: list[ActiveSetRead]

    model_config = {"from_attributes": True}

class ActiveWorkoutRead(BaseModel):
    is_active: bool
    workout_type: WorkoutType | None = None
    start_time: datetime | None = None
    elapsed_seconds: int = 0
    formatted_time: str = "00:00"
    timer_running: bool = False
    exercises: list[ActiveExerciseRead] = []

    @classmethod
    def from_manager(cls, manager: WorkoutSessionManager) -> "ActiveWorkoutRead":
        scratch = manager.scratch
        if scratch is None:
            return cls(is_active=False)
        return cls(
            is_active=True,
            workout_type=scratch.workout_type,
            start_time=scratch.start_time,
            elapsed_seconds=scratch.elapsed_seconds,
            formatted_time=manager.formatted_time,
            timer_running=manager.timer_running,
            exercises=[ActiveExerciseRead.model_validate(ex) for ex in scratch.exercises],
        )

class FinishRead(BaseModel):
    session_id: uuid.UUID
    workout_type: WorkoutType
    start_time: datetime
    duration_seconds: int
    exercise_count: int
    completed_sets: int
