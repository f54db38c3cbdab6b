import pytest

from liftlog.catalog import ExerciseCatalog
from liftlog.models import WorkoutType


@pytest.mark.parametrize("kind", list(WorkoutType))
def test_defaults_are_short_ordered_lists(catalog, kind):
    names = catalog.default_exercises(kind)
    assert 1 <= len(names) <= 6
    assert len(set(names)) == len(names)


def test_push_defaults_order(catalog):
    assert catalog.default_exercises(WorkoutType.push)[:3] == ["Bench Press", "Incline Dumbbell Press", "Cable Flyes"]


def test_library_groups_by_muscle(catalog):
    lib = catalog.library(WorkoutType.pull)
    assert list(lib) == ["Back", "Biceps"]
    assert "Deadlift" in lib["Back"]


def test_library_search_is_case_insensitive_and_drops_empty_groups(catalog):
    lib = catalog.library(WorkoutType.push, search="  PRESS ")
    assert list(lib) == ["Chest", "Triceps"]
    assert "Bench Press" in lib["Chest"]
    assert lib["Triceps"] == ["Close-Grip Bench Press"]

    assert catalog.library(WorkoutType.push, search="curl") == {}


def test_custom_exercises_sorted_and_last(catalog):
    catalog.add_custom_exercise(WorkoutType.legs, "Sissy Squat")
    catalog.add_custom_exercise(WorkoutType.legs, "  Belt Squat ")
    catalog.add_custom_exercise(WorkoutType.push, "Landmine Press")

    assert catalog.custom_exercises(WorkoutType.legs) == ["Belt Squat", "Sissy Squat"]
    lib = catalog.library(WorkoutType.legs)
    assert list(lib)[-1] == "Custom"
    assert lib["Custom"] == ["Belt Squat", "Sissy Squat"]
    assert catalog.library(WorkoutType.legs, search="sissy") == {"Custom": ["Sissy Squat"]}


def test_custom_exercise_duplicates_and_blanks_rejected(catalog):
    catalog.add_custom_exercise(WorkoutType.legs, "Sissy Squat")
    with pytest.raises(ValueError, match="custom_exercise_exists"):
        catalog.add_custom_exercise(WorkoutType.legs, "sissy squat")
    with pytest.raises(ValueError):
        catalog.add_custom_exercise(WorkoutType.legs, "   ")
    # same name is fine under another type
    catalog.add_custom_exercise(WorkoutType.push, "Sissy Squat")


def test_library_group_lookup(catalog):
    catalog.add_custom_exercise(WorkoutType.shoulders, "Cuban Press")
    assert catalog.library_group_for(WorkoutType.push, "Skull Crushers") == "Triceps"
    assert catalog.library_group_for(WorkoutType.shoulders, "Squat") == ""
    assert catalog.library_group_for(WorkoutType.shoulders, "Cuban Press") == ""


def test_catalog_without_store_has_no_customs():
    catalog = ExerciseCatalog()
    assert catalog.custom_exercises(WorkoutType.push) == []
    assert "Custom" not in catalog.library(WorkoutType.push)
    with pytest.raises(RuntimeError):
        catalog.add_custom_exercise(WorkoutType.push, "Anything")
