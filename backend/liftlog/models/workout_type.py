from enum import Enum

class WorkoutType(str, Enum):
    push = "Push"
    pull = "Pull"
    shoulders = "Shoulders"
    legs = "Legs"

    @property
    def display_name(self) -> str:
        return {
            WorkoutType.push: "Push Day",
            WorkoutType.pull: "Pull Day",
            WorkoutType.shoulders: "Shoulders",
            WorkoutType.legs: "Legs",
        }[self]

    @property
    def muscles(self) -> str:
        return {
            WorkoutType.push: "Chest · Triceps · Front Delts",
            WorkoutType.pull: "Back · Biceps · Rear Delts",
            WorkoutType.shoulders: "Lateral · Front · Rear",
            WorkoutType.legs: "Quads · Hamstrings · Calves",
        }[self]
