from datetime import date
from pydantic import BaseModel
from liftlog.models import WorkoutType
from liftlog.schemas.session import SessionRead

class StreakRead(BaseModel):
    current_streak: int

class LastWorkoutRead(BaseModel):
    workout_type: WorkoutType
    display_name: str
    muscles: str
    label: str
    session: SessionRead | None = None

class CalendarDayRead(BaseModel):
    day: date
    in_month: bool
    is_today: bool
    workout_type: WorkoutType | None = None

    model_config = {"from_attributes": True}

class CalendarRead(BaseModel):
    year: int
    month: int
    days: list[CalendarDayRead]

class TotalsRead(BaseModel):
    total_workouts: int
    workouts_this_month: int
    total_seconds: int
    total_time: str

    model_config = {"from_attributes": True}
