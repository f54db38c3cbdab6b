from typing import Annotated
from pydantic import BaseModel, Field, field_validator
from liftlog.models import WorkoutType

ExerciseName = Annotated[str, Field(max_length=120)]

class CustomExerciseCreate(BaseModel):
    workout_type: WorkoutType
    name: ExerciseName

    @field_validator("name")
    @classmethod
    def name_non_blank(cls, v: str) -> str:
        v2 = v.strip()
        if not v2:
            raise ValueError("exercise name cannot be blank")
        return v2  # trimmed so duplicates are caught

class CustomExerciseRead(BaseModel):
    workout_type: WorkoutType
    name: str

class LibraryRead(BaseModel):
    workout_type: WorkoutType
    groups: dict[str, list[str]]
