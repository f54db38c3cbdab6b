import uuid
from datetime import date, datetime
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session
from liftlog import history
from liftlog.db import get_db
from liftlog.models import WorkoutType
from liftlog.repositories.session_repo import SessionRepository
from liftlog.schemas.history import CalendarDayRead, CalendarRead, LastWorkoutRead, StreakRead, TotalsRead
from liftlog.schemas.session import SessionDetailRead, SessionRead
from liftlog.settings import get_settings

router = APIRouter(prefix="/history", tags=["history"])

@router.get("/sessions", response_model=list[SessionRead])
def list_sessions(
    db: Session = Depends(get_db),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    return SessionRepository(db).list_recent(limit=limit, offset=offset)

@router.get("/sessions/{session_id}", response_model=SessionDetailRead)
def get_session(session_id: uuid.UUID, db: Session = Depends(get_db)):
    sess = SessionRepository(db).get(session_id)
    if not sess:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Session not found")
    return SessionDetailRead.from_row(sess)

@router.get("/day", response_model=list[SessionRead])
def sessions_on_day(on: date = Query(...), db: Session = Depends(get_db)):
    return history.sessions_on(SessionRepository(db).list_completed(), on)

@router.get("/streak", response_model=StreakRead)
def streak(db: Session = Depends(get_db)):
    return StreakRead(current_streak=history.current_streak(SessionRepository(db).list_completed()))

@router.get("/last/{workout_type}", response_model=LastWorkoutRead)
def last_workout(workout_type: WorkoutType, db: Session = Depends(get_db)):
    sessions = SessionRepository(db).list_completed()
    last = history.last_session_for(sessions, workout_type)
    return LastWorkoutRead(
        workout_type=workout_type,
        display_name=workout_type.display_name,
        muscles=workout_type.muscles,
        label=history.last_workout_text(sessions, workout_type),
        session=SessionRead.model_validate(last) if last else None,
    )

@router.get("/calendar", response_model=CalendarRead)
def calendar_month(
    year: int | None = Query(None, ge=1, le=9999),
    month: int | None = Query(None, ge=1, le=12),
    db: Session = Depends(get_db),
):
    now = datetime.now()
    year = year or now.year
    month = month or now.month
    days = history.month_grid(
        SessionRepository(db).list_completed(),
        year,
        month,
        first_weekday=get_settings().CALENDAR_FIRST_WEEKDAY,
        today=now,
    )
    return CalendarRead(year=year, month=month, days=[CalendarDayRead.model_validate(d) for d in days])

@router.get("/totals", response_model=TotalsRead)
def totals(db: Session = Depends(get_db)):
    return TotalsRead.model_validate(history.totals(SessionRepository(db).list_completed()))

@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def clear_history(db: Session = Depends(get_db)):
    SessionRepository(db).clear_all()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
