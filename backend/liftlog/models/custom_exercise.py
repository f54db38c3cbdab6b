import uuid
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import DateTime, Enum as SAEnum, String, UniqueConstraint, Uuid, func
from liftlog.db import Base
from liftlog.models.workout_type import WorkoutType

class CustomExercise(Base):
    __tablename__ = "custom_exercises"
    __table_args__ = (UniqueConstraint("workout_type", "name", name="uq_custom_exercise_type_name"),)

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    workout_type: Mapped[WorkoutType] = mapped_column(SAEnum(WorkoutType, name="workout_type"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.now, server_default=func.now())
