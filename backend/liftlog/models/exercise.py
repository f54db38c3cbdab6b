import uuid
from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Boolean, DateTime, String, Uuid, func
from liftlog.db import Base

class Exercise(Base):
    __tablename__ = "exercises"
    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    muscle_group: Mapped[str] = mapped_column(String(60), nullable=False, server_default="")
    is_custom: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime, nullable=False, default=datetime.now, server_default=func.now())

    # sets belong to their session; an exercise only references them
    sets = relationship("WorkoutSet", back_populates="exercise", cascade="all")
