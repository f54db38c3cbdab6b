"""In-progress workout state and the frozen snapshot handed to storage."""
from __future__ import annotations
import uuid
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Optional

from liftlog.models import WorkoutType

@dataclass(slots=True)
class ActiveSet:
    set_number: int
    weight: float = 0.0
    reps: int = 0
    is_completed: bool = False
    completed_at: Optional[datetime] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4)

@dataclass(slots=True)
class ActiveExercise:
    name: str
    sets: list[ActiveSet] = field(default_factory=list)
    id: uuid.UUID = field(default_factory=uuid.uuid4)

    @classmethod
    def seeded(cls, name: str, set_count: int = 3) -> "ActiveExercise":
        return cls(name=name, sets=[ActiveSet(set_number=n) for n in range(1, set_count + 1)])

    def append_set(self) -> ActiveSet:
        new_set = ActiveSet(set_number=len(self.sets) + 1)
        self.sets.append(new_set)
        return new_set

@dataclass(slots=True)
class SessionScratch:
    workout_type: WorkoutType
    start_time: datetime
    elapsed_seconds: int = 0
    exercises: list[ActiveExercise] = field(default_factory=list)

    def snapshot(self, muscle_group_for: Callable[[WorkoutType, str], str]) -> "WorkoutSnapshot":
        """Freeze the scratch, keeping only completed sets."""
        return WorkoutSnapshot(
            session_id=uuid.uuid4(),
            workout_type=self.workout_type,
            start_time=self.start_time,
            elapsed_seconds=self.elapsed_seconds,
            exercises=tuple(
                ExerciseSnapshot(
                    name=ex.name,
                    muscle_group=muscle_group_for(self.workout_type, ex.name),
                    sets=tuple(
                        SetSnapshot(s.set_number, s.weight, s.reps, s.completed_at)
                        for s in ex.sets if s.is_completed
                    ),
                )
                for ex in self.exercises
            ),
        )

@dataclass(frozen=True, slots=True)
class SetSnapshot:
    set_number: int
    weight: float
    reps: int
    completed_at: Optional[datetime] = None

@dataclass(frozen=True, slots=True)
class ExerciseSnapshot:
    name: str
    muscle_group: str
    sets: tuple[SetSnapshot, ...] = ()

@dataclass(frozen=True, slots=True)
class WorkoutSnapshot:
    session_id: uuid.UUID
    workout_type: WorkoutType
    start_time: datetime
    elapsed_seconds: int
    exercises: tuple[ExerciseSnapshot, ...] = ()

    @property
    def completed_set_count(self) -> int:
        return sum(len(ex.sets) for ex in self.exercises)
