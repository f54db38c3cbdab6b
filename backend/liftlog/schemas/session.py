import uuid
from datetime import datetime
from pydantic import BaseModel, computed_field
from liftlog.history import format_duration, format_weight
from liftlog.models import WorkoutType

class SetRead(BaseModel):
    id: uuid.UUID
    exercise_name: str
    muscle_group: str
    set_number: int
    weight: float
    reps: int
    completed_at: datetime | None = None

    @computed_field
    @property
    def formatted_weight(self) -> str:
        return format_weight(self.weight)

    @classmethod
    def from_row(cls, row) -> "SetRead":
        return cls(
            id=row.id,
            exercise_name=row.exercise.name if row.exercise else "",
            muscle_group=row.exercise.muscle_group if row.exercise else "",
            set_number=row.set_number,
            weight=row.weight,
            reps=row.reps,
            completed_at=row.completed_at,
        )

class SessionRead(BaseModel):
    id: uuid.UUID
    workout_type: WorkoutType | None = None
    date: datetime
    duration_seconds: int
    exercise_count: int
    notes: str | None = None

    model_config = {"from_attributes": True}

    @computed_field
    @property
    def formatted_duration(self) -> str:
        return format_duration(self.duration_seconds)

class SessionDetailRead(SessionRead):
    sets: list[SetRead] = []

    @classmethod
    def from_row(cls, row) -> "SessionDetailRead":
        base = SessionRead.model_validate(row).model_dump(exclude={"formatted_duration"})
        return cls(**base, sets=[SetRead.from_row(s) for s in row.sets])
