from fastapi import APIRouter, Depends, HTTPException, Query, status
from liftlog.catalog import ExerciseCatalog
from liftlog.deps.workout import get_catalog
from liftlog.models import WorkoutType
from liftlog.schemas.custom_exercise import CustomExerciseCreate, CustomExerciseRead, LibraryRead

router = APIRouter(prefix="/exercises", tags=["exercises"])

@router.get("/{workout_type}", response_model=LibraryRead)
def exercise_library(
    workout_type: WorkoutType,
    search: str | None = Query(None, max_length=120),
    catalog: ExerciseCatalog = Depends(get_catalog),
):
    return LibraryRead(workout_type=workout_type, groups=catalog.library(workout_type, search=search))

@router.get("/{workout_type}/defaults", response_model=list[str])
def default_exercises(workout_type: WorkoutType, catalog: ExerciseCatalog = Depends(get_catalog)):
    return catalog.default_exercises(workout_type)

@router.post("/custom", response_model=CustomExerciseRead, status_code=status.HTTP_201_CREATED)
def create_custom_exercise(payload: CustomExerciseCreate, catalog: ExerciseCatalog = Depends(get_catalog)):
    try:
        name = catalog.add_custom_exercise(payload.workout_type, payload.name)
    except ValueError as e:
        if str(e) == "custom_exercise_exists":
            raise HTTPException(status_code=400, detail="exercise already exists")
        raise
    return CustomExerciseRead(workout_type=payload.workout_type, name=name)
