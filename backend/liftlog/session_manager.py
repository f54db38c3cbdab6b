"""
Session Manager
Owns the single in-progress workout, its timer, and the hand-off to storage.
"""
from __future__ import annotations

import asyncio
import logging
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from sqlalchemy.orm import sessionmaker

from liftlog.catalog import ExerciseCatalog
from liftlog.history import format_elapsed
from liftlog.models import WorkoutType
from liftlog.repositories.workout_repo import WorkoutRepository
from liftlog.scratch import ActiveExercise, SessionScratch, WorkoutSnapshot
from liftlog.settings import Settings, get_settings
from liftlog.timer import IntervalTimer

logger = logging.getLogger(__name__)

CommitErrorHook = Callable[[WorkoutSnapshot, BaseException], None]


class Resolution(str, Enum):
    """How to settle a start request while another workout is in progress."""
    resume = "resume"
    discard = "discard"


class WorkoutConflict(Exception):
    def __init__(self, active_type: WorkoutType, requested_type: WorkoutType):
        super().__init__(f"a {active_type.value} workout is already in progress")
        self.active_type = active_type
        self.requested_type = requested_type


class WorkoutSessionManager:
    """Single source of truth for the workout being logged.

    Created once per app and shared by reference. Every method runs on the
    event loop that owns the timer; nothing here blocks on storage. ``finish``
    clears the scratch immediately and writes the snapshot from a detached
    task, so the workout is gone from the editor even if that write fails.
    """

    def __init__(
        self,
        session_factory: sessionmaker,
        catalog: ExerciseCatalog,
        *,
        clock: Callable[[], datetime] = datetime.now,
        tick_interval: float = 1.0,
        default_exercise_count: int = 3,
        seed_set_count: int = 3,
        commit_retries: int = 1,
        on_commit_error: Optional[CommitErrorHook] = None,
    ):
        self.session_factory = session_factory
        self.catalog = catalog
        self.clock = clock
        self.default_exercise_count = default_exercise_count
        self.seed_set_count = seed_set_count
        self.commit_retries = commit_retries
        self.on_commit_error = on_commit_error

        self._scratch: Optional[SessionScratch] = None
        self._timer = IntervalTimer(self.tick, tick_interval)
        self._pending: set[asyncio.Task] = set()
        # one write at a time; workout lineage is get-or-create
        self._write_lock = asyncio.Lock()

    @classmethod
    def from_settings(
        cls,
        session_factory: sessionmaker,
        catalog: ExerciseCatalog,
        settings: Settings | None = None,
        **kwargs,
    ) -> "WorkoutSessionManager":
        s = settings or get_settings()
        return cls(
            session_factory,
            catalog,
            tick_interval=s.TIMER_INTERVAL_SECONDS,
            default_exercise_count=s.DEFAULT_EXERCISE_COUNT,
            seed_set_count=s.SEED_SET_COUNT,
            commit_retries=s.COMMIT_RETRIES,
            **kwargs,
        )

    # READS
    @property
    def scratch(self) -> Optional[SessionScratch]:
        return self._scratch

    @property
    def is_active(self) -> bool:
        return self._scratch is not None

    @property
    def active_type(self) -> Optional[WorkoutType]:
        return self._scratch.workout_type if self._scratch else None

    @property
    def elapsed_seconds(self) -> int:
        return self._scratch.elapsed_seconds if self._scratch else 0

    @property
    def exercises(self) -> list[ActiveExercise]:
        return self._scratch.exercises if self._scratch else []

    @property
    def timer_running(self) -> bool:
        return self._timer.running

    @property
    def formatted_time(self) -> str:
        return format_elapsed(self.elapsed_seconds)

    @property
    def pending_commits(self) -> int:
        return len(self._pending)

    # LIFECYCLE
    def start(self, workout_type: WorkoutType, resolution: Resolution | None = None) -> SessionScratch:
        """Begin a workout of ``workout_type``.

        With a workout already running: the same type resumes it, a different
        type raises :class:`WorkoutConflict` unless ``resolution`` says to
        resume the existing one or discard it first.
        """
        workout_type = WorkoutType(workout_type)
        resolution = Resolution(resolution) if resolution is not None else None

        if self._scratch is not None:
            if resolution is Resolution.discard:
                logger.info("Discarding %s workout to start %s",
                            self._scratch.workout_type.value, workout_type.value)
                self.cancel()
            elif resolution is Resolution.resume or self._scratch.workout_type == workout_type:
                self.resume()
                return self._scratch
            else:
                raise WorkoutConflict(self._scratch.workout_type, workout_type)

        names = self.catalog.default_exercises(workout_type)[: self.default_exercise_count]
        self._scratch = SessionScratch(
            workout_type=workout_type,
            start_time=self.clock(),
            exercises=[ActiveExercise.seeded(n, self.seed_set_count) for n in names],
        )
        self._timer.start()
        logger.info("Started %s workout with %d exercises", workout_type.value, len(names))
        return self._scratch

    def resume(self) -> None:
        if self._scratch is None:
            return
        self._timer.start()

    def pause_timer(self) -> None:
        self._timer.stop()

    def tick(self) -> None:
        if self._scratch is not None:
            self._scratch.elapsed_seconds += 1

    # EDITS
    def add_exercise(self, name: str) -> None:
        if self._scratch is None:
            return
        self._scratch.exercises.append(ActiveExercise.seeded(name, self.seed_set_count))

    def add_set(self, exercise_index: int) -> None:
        if not 0 <= exercise_index < len(self.exercises):
            return
        self.exercises[exercise_index].append_set()

    def update_set(self, exercise_index: int, set_index: int, weight: float, reps: int) -> None:
        if weight < 0 or reps < 0:
            logger.debug("Ignoring negative set values weight=%s reps=%s", weight, reps)
            return
        if not 0 <= exercise_index < len(self.exercises):
            return
        sets = self.exercises[exercise_index].sets
        if not 0 <= set_index < len(sets):
            return
        target = sets[set_index]
        target.weight = float(weight)
        target.reps = int(reps)
        target.is_completed = True
        target.completed_at = self.clock()

    # COMMIT / DISCARD
    def finish(self) -> Optional[WorkoutSnapshot]:
        """Freeze and clear the workout, then persist it in the background."""
        if self._scratch is None:
            return None
        loop = asyncio.get_running_loop()

        self._timer.stop()
        snapshot = self._scratch.snapshot(self.catalog.library_group_for)
        self._scratch = None

        task = loop.create_task(self._commit(snapshot))
        self._pending.add(task)
        task.add_done_callback(self._pending.discard)
        logger.info("Finished %s workout: %ss, %d completed sets",
                    snapshot.workout_type.value, snapshot.elapsed_seconds, snapshot.completed_set_count)
        return snapshot

    def cancel(self) -> None:
        self._timer.stop()
        if self._scratch is not None:
            logger.info("Cancelled %s workout", self._scratch.workout_type.value)
        self._scratch = None

    async def drain(self) -> None:
        """Wait for every dispatched commit; waiting never cancels them."""
        pending = {t for t in self._pending if not t.done()}
        while pending:
            await asyncio.wait(pending)
            pending = {t for t in self._pending if not t.done()}

    async def shutdown(self) -> None:
        self._timer.stop()
        await self.drain()

    async def _commit(self, snapshot: WorkoutSnapshot) -> None:
        attempts = 1 + max(0, self.commit_retries)
        for attempt in range(1, attempts + 1):
            try:
                async with self._write_lock:
                    await asyncio.to_thread(self._write, snapshot)
            except Exception as exc:
                if attempt < attempts:
                    logger.warning("Saving session %s failed (attempt %d/%d): %s",
                                   snapshot.session_id, attempt, attempts, exc)
                    continue
                logger.exception("Dropping session %s after %d failed attempts",
                                 snapshot.session_id, attempts)
                if self.on_commit_error is not None:
                    try:
                        self.on_commit_error(snapshot, exc)
                    except Exception:
                        logger.exception("Commit error hook failed for session %s", snapshot.session_id)
                return
            logger.info("Saved session %s", snapshot.session_id)
            return

    def _write(self, snapshot: WorkoutSnapshot) -> None:
        with self.session_factory() as db:
            WorkoutRepository(db).commit_snapshot(snapshot)
