from fastapi import APIRouter, Depends, HTTPException, Response, status
from liftlog.deps.workout import get_workout_manager, require_active
from liftlog.schemas.workout import (
    ActiveWorkoutRead,
    ExerciseCreate,
    FinishRead,
    SetUpdate,
    WorkoutStart,
)
from liftlog.session_manager import WorkoutConflict, WorkoutSessionManager

router = APIRouter(prefix="/workout", tags=["workout"])

# Handlers are async so they run on the loop that owns the timer and commits.

@router.get("", response_model=ActiveWorkoutRead)
async def get_active_workout(manager: WorkoutSessionManager = Depends(get_workout_manager)):
    return ActiveWorkoutRead.from_manager(manager)

@router.post("/start", response_model=ActiveWorkoutRead, status_code=status.HTTP_201_CREATED)
async def start_workout(payload: WorkoutStart, manager: WorkoutSessionManager = Depends(get_workout_manager)):
    try:
        manager.start(payload.workout_type, resolution=payload.resolution)
    except WorkoutConflict as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail={
                "message": str(e),
                "active_type": e.active_type.value,
                "requested_type": e.requested_type.value,
                "resolutions": ["resume", "discard"],
            },
        )
    return ActiveWorkoutRead.from_manager(manager)

@router.post("/resume", response_model=ActiveWorkoutRead)
async def resume_workout(manager: WorkoutSessionManager = Depends(require_active)):
    manager.resume()
    return ActiveWorkoutRead.from_manager(manager)

@router.post("/pause", response_model=ActiveWorkoutRead)
async def pause_timer(manager: WorkoutSessionManager = Depends(require_active)):
    manager.pause_timer()
    return ActiveWorkoutRead.from_manager(manager)

@router.post("/exercises", response_model=ActiveWorkoutRead, status_code=status.HTTP_201_CREATED)
async def add_exercise(payload: ExerciseCreate, manager: WorkoutSessionManager = Depends(require_active)):
    manager.add_exercise(payload.name)
    return ActiveWorkoutRead.from_manager(manager)

# Out-of-range indices leave the workout untouched and still answer 200.

@router.post("/exercises/{exercise_index}/sets", response_model=ActiveWorkoutRead)
async def add_set(exercise_index: int, manager: WorkoutSessionManager = Depends(require_active)):
    manager.add_set(exercise_index)
    return ActiveWorkoutRead.from_manager(manager)

@router.put("/exercises/{exercise_index}/sets/{set_index}", response_model=ActiveWorkoutRead)
async def update_set(
    exercise_index: int,
    set_index: int,
    payload: SetUpdate,
    manager: WorkoutSessionManager = Depends(require_active),
):
    manager.update_set(exercise_index, set_index, weight=payload.weight, reps=payload.reps)
    return ActiveWorkoutRead.from_manager(manager)

@router.post("/finish", response_model=FinishRead, status_code=status.HTTP_202_ACCEPTED)
async def finish_workout(manager: WorkoutSessionManager = Depends(require_active)):
    snapshot = manager.finish()
    return FinishRead(
        session_id=snapshot.session_id,
        workout_type=snapshot.workout_type,
        start_time=snapshot.start_time,
        duration_seconds=snapshot.elapsed_seconds,
        exercise_count=len(snapshot.exercises),
        completed_sets=snapshot.completed_set_count,
    )

@router.post("/cancel", status_code=status.HTTP_204_NO_CONTENT)
async def cancel_workout(manager: WorkoutSessionManager = Depends(get_workout_manager)):
    manager.cancel()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
