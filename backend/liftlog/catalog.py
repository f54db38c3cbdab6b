"""Exercise names offered per workout type.

Defaults and the muscle-group library are fixed; custom exercises live in the
store and are read through :class:`CustomExerciseRepository`.
"""
from __future__ import annotations

from sqlalchemy.orm import sessionmaker

from liftlog.models import WorkoutType
from liftlog.repositories.custom_exercise_repo import CustomExerciseRepository

CUSTOM_GROUP = "Custom"

DEFAULT_EXERCISES: dict[WorkoutType, tuple[str, ...]] = {
    WorkoutType.push: ("Bench Press", "Incline Dumbbell Press", "Cable Flyes",
                       "Tricep Pushdown", "Overhead Tricep Extension"),
    WorkoutType.pull: ("Deadlift", "Barbell Row", "Lat Pulldown", "Face Pulls",
                       "Barbell Curl", "Hammer Curl"),
    WorkoutType.shoulders: ("Overhead Press", "Lateral Raises", "Front Raises",
                            "Rear Delt Flyes", "Shrugs"),
    WorkoutType.legs: ("Squat", "Romanian Deadlift", "Leg Press", "Leg Curl",
                       "Leg Extension", "Calf Raises"),
}

MUSCLE_GROUPS: dict[str, tuple[str, ...]] = {
    "Chest": ("Bench Press", "Incline Bench Press", "Decline Bench Press", "Dumbbell Press",
              "Incline Dumbbell Press", "Dumbbell Flyes", "Cable Crossover", "Chest Dips",
              "Push-Ups"),
    "Triceps": ("Tricep Pushdown", "Skull Crushers", "Overhead Tricep Extension", "Dips",
                "Close-Grip Bench Press", "Tricep Kickbacks"),
    "Back": ("Deadlift", "Barbell Row", "Dumbbell Row", "Lat Pulldown", "Pull-Ups",
             "Chin-Ups", "Seated Cable Row", "T-Bar Row", "Face Pulls"),
    "Biceps": ("Barbell Curl", "Dumbbell Curl", "Hammer Curl", "Preacher Curl",
               "Concentration Curl", "Cable Curl"),
    "Shoulders": ("Overhead Press", "Dumbbell Shoulder Press", "Arnold Press",
                  "Lateral Raises", "Front Raises", "Rear Delt Flyes", "Upright Rows", "Shrugs"),
    "Legs": ("Squat", "Front Squat", "Leg Press", "Romanian Deadlift", "Leg Curl",
             "Leg Extension", "Lunges", "Bulgarian Split Squat", "Calf Raises", "Hip Thrust"),
}

GROUPS_BY_TYPE: dict[WorkoutType, tuple[str, ...]] = {
    WorkoutType.push: ("Chest", "Triceps"),
    WorkoutType.pull: ("Back", "Biceps"),
    WorkoutType.shoulders: ("Shoulders",),
    WorkoutType.legs: ("Legs",),
}


class ExerciseCatalog:
    def __init__(self, session_factory: sessionmaker | None = None):
        self.session_factory = session_factory

    def default_exercises(self, workout_type: WorkoutType) -> list[str]:
        return list(DEFAULT_EXERCISES[WorkoutType(workout_type)])

    def library_group_for(self, workout_type: WorkoutType, name: str) -> str:
        """Library group holding ``name`` for this type, or "". Never touches the store."""
        for group in GROUPS_BY_TYPE[WorkoutType(workout_type)]:
            if name in MUSCLE_GROUPS[group]:
                return group
        return ""

    def custom_exercises(self, workout_type: WorkoutType) -> list[str]:
        if self.session_factory is None:
            return []
        with self.session_factory() as db:
            return CustomExerciseRepository(db).list_names(WorkoutType(workout_type))

    def add_custom_exercise(self, workout_type: WorkoutType, name: str) -> str:
        name = name.strip()
        if not name:
            raise ValueError("exercise name cannot be blank")
        if self.session_factory is None:
            raise RuntimeError("catalog has no store for custom exercises")
        with self.session_factory() as db:
            return CustomExerciseRepository(db).create(WorkoutType(workout_type), name=name).name

    def library(self, workout_type: WorkoutType, search: str | None = None) -> dict[str, list[str]]:
        """Exercise names grouped by muscle group, custom ones last.

        ``search`` keeps names containing it (case-insensitive) and drops
        groups left empty.
        """
        groups = {g: list(MUSCLE_GROUPS[g]) for g in sorted(GROUPS_BY_TYPE[WorkoutType(workout_type)])}
        custom = self.custom_exercises(workout_type)
        if custom:
            groups[CUSTOM_GROUP] = custom

        if not search or not search.strip():
            return groups
        needle = search.strip().lower()
        filtered = {}
        for group, names in groups.items():
            matching = [n for n in names if needle in n.lower()]
            if matching:
                filtered[group] = matching
        return filtered
