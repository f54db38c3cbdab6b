"""
Read-side analytics over logged sessions.

Every function takes any iterable of sessions exposing ``date``,
``is_completed``, ``duration_seconds`` and ``workout_type`` (the ORM
``WorkoutSession`` does) and ignores sessions that are not completed.
Day arithmetic uses calendar dates, never elapsed seconds.
"""
from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, timedelta
from typing import Iterable, Optional, Protocol

from liftlog.models import WorkoutType


class SessionLike(Protocol):
    date: datetime
    is_completed: bool
    duration_seconds: int

    @property
    def workout_type(self) -> Optional[WorkoutType]: ...


@dataclass(frozen=True, slots=True)
class CalendarDay:
    day: date
    in_month: bool
    is_today: bool
    workout_type: Optional[WorkoutType] = None


@dataclass(frozen=True, slots=True)
class Totals:
    total_workouts: int
    workouts_this_month: int
    total_seconds: int

    @property
    def total_time(self) -> str:
        return format_duration(self.total_seconds)


def _completed(sessions: Iterable[SessionLike]) -> list[SessionLike]:
    return [s for s in sessions if s.is_completed]


def _as_day(value: date | datetime) -> date:
    return value.date() if isinstance(value, datetime) else value


def last_session_for(sessions: Iterable[SessionLike], workout_type: WorkoutType) -> Optional[SessionLike]:
    """Latest completed session of ``workout_type``; equal dates go to the later item."""
    workout_type = WorkoutType(workout_type)
    best = None
    for s in _completed(sessions):
        if s.workout_type != workout_type:
            continue
        if best is None or s.date >= best.date:
            best = s
    return best


def recency_label(session: SessionLike, now: datetime | None = None) -> str:
    today = _as_day(now or datetime.now())
    # future-dated sessions read as today
    days = max(0, (today - _as_day(session.date)).days)
    if days == 0:
        return "Today"
    if days == 1:
        return "Yesterday"
    return f"{days} days ago"


def last_workout_text(sessions: Iterable[SessionLike], workout_type: WorkoutType,
                      now: datetime | None = None) -> str:
    last = last_session_for(sessions, workout_type)
    if last is None:
        return "Never"
    return recency_label(last, now)


def current_streak(sessions: Iterable[SessionLike], today: date | datetime | None = None) -> int:
    """Consecutive workout days ending today, or yesterday while today is still empty."""
    today = _as_day(today or datetime.now())
    days = {_as_day(s.date) for s in _completed(sessions)}

    check = today if today in days else today - timedelta(days=1)
    streak = 0
    while check in days:
        streak += 1
        check -= timedelta(days=1)
    return streak


def sessions_on(sessions: Iterable[SessionLike], day: date | datetime) -> list[SessionLike]:
    day = _as_day(day)
    return [s for s in _completed(sessions) if _as_day(s.date) == day]


def month_grid(
    sessions: Iterable[SessionLike],
    year: int,
    month: int,
    *,
    first_weekday: int = calendar.SUNDAY,
    today: date | datetime | None = None,
) -> list[CalendarDay]:
    """Every day of the weeks overlapping ``year``/``month``.

    A day with several sessions shows the type of the first completed one in
    input order.
    """
    today = _as_day(today or datetime.now())
    by_day: dict[date, WorkoutType] = {}
    for s in _completed(sessions):
        by_day.setdefault(_as_day(s.date), s.workout_type)

    weeks = calendar.Calendar(firstweekday=first_weekday).itermonthdates(year, month)
    return [
        CalendarDay(day=d, in_month=d.month == month, is_today=d == today, workout_type=by_day.get(d))
        for d in weeks
    ]


def totals(sessions: Iterable[SessionLike], now: datetime | None = None) -> Totals:
    now = now or datetime.now()
    done = _completed(sessions)
    this_month = [s for s in done if s.date.year == now.year and s.date.month == now.month]
    return Totals(
        total_workouts=len(done),
        workouts_this_month=len(this_month),
        total_seconds=int(sum(s.duration_seconds for s in done)),
    )


# FORMATTING
def format_duration(seconds: float) -> str:
    minutes = int(seconds) // 60
    if minutes < 60:
        return f"{minutes} min"
    return f"{minutes // 60}h {minutes % 60}m"


def format_elapsed(seconds: float) -> str:
    seconds = int(seconds)
    return f"{seconds // 60:02d}:{seconds % 60:02d}"


def format_weight(weight: float) -> str:
    if float(weight).is_integer():
        return f"{int(weight)} lbs"
    return f"{weight:.1f} lbs"
