from liftlog.models.workout_type import WorkoutType
from liftlog.models.workout import Workout
from liftlog.models.session import WorkoutSession
from liftlog.models.exercise_set import WorkoutSet
from liftlog.models.exercise import Exercise
from liftlog.models.custom_exercise import CustomExercise

__all__ = ["WorkoutType", "Workout", "WorkoutSession", "WorkoutSet", "Exercise", "CustomExercise"]
