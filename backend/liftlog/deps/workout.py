# liftlog/deps/workout.py
from fastapi import HTTPException, Request, status

from liftlog.catalog import ExerciseCatalog
from liftlog.session_manager import WorkoutSessionManager

def get_workout_manager(request: Request) -> WorkoutSessionManager:
    """The app-wide manager created by the lifespan handler."""
    return request.app.state.workout_manager

def get_catalog(request: Request) -> ExerciseCatalog:
    return request.app.state.catalog

def require_active(request: Request) -> WorkoutSessionManager:
    """Guard for editing routes: 409 when nothing is in progress."""
    manager = get_workout_manager(request)
    if not manager.is_active:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="No active workout")
    return manager
