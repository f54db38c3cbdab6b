import uuid
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import DateTime, Enum as SAEnum, UniqueConstraint, Uuid, func
from liftlog.db import Base
from liftlog.models.workout_type import WorkoutType

class Workout(Base):
    """One lineage per workout type; owns every session logged for it."""
    __tablename__ = "workouts"
    __table_args__ = (
        UniqueConstraint("workout_type", name="uq_workout_type"),
    )
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    workout_type: Mapped[WorkoutType] = mapped_column(
        SAEnum(WorkoutType, name="workout_type"), nullable=False, index=True
    )
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.now, server_default=func.now())

    sessions = relationship(
        "WorkoutSession",
        back_populates="workout",
        cascade="all, delete-orphan",
        order_by="WorkoutSession.date",
    )
