"""Root conftest for all tests.

This file makes shared fixtures available across all test modules.
"""

from collections.abc import Callable, Sequence

import pytest
from loguru import logger

from routine_engine.planning.schema.exercise import ExercisePrescription, MuscleGroups

ExerciseFactory = Callable[..., ExercisePrescription]


@pytest.fixture
def make_exercise() -> ExerciseFactory:
    """Factory for normalized exercise prescriptions.

    Usage:
        def test_something(make_exercise):
            bench = make_exercise("bench", "Chest", sets=4, secondary=["Triceps"])
    """

    def _make(
        exercise_id: str | int,
        primary: str | None = None,
        *,
        sets: int = 3,
        secondary: Sequence[str] = (),
        tertiary: Sequence[str] = (),
        reps: str = "8-12",
        rest_seconds: int = 90,
    ) -> ExercisePrescription:
        return ExercisePrescription(
            exercise_id=exercise_id,
            sets=sets,
            reps=reps,
            rest_seconds=rest_seconds,
            muscle_groups=MuscleGroups(
                primary=[primary] if primary else [],
                secondary=list(secondary),
                tertiary=list(tertiary),
            ),
        )

    return _make


@pytest.fixture
def push_pull_legs_pool(make_exercise: ExerciseFactory) -> list[ExercisePrescription]:
    """Nine 3-set exercises: three Chest, three Back, three Legs, grouped by muscle."""
    return [
        make_exercise(f"{muscle.lower()}-{i}", muscle)
        for muscle in ("Chest", "Back", "Legs")
        for i in range(1, 4)
    ]


@pytest.fixture
def mixed_pool(make_exercise: ExerciseFactory) -> list[ExercisePrescription]:
    """Thirteen exercises with uneven sets and secondary/tertiary tags."""
    return [
        make_exercise("bench", "Chest", sets=4, secondary=["Triceps", "Front Deltoids"]),
        make_exercise("row", "Latissimus Dorsi", sets=4, secondary=["Biceps"], tertiary=["Rear Deltoids"]),
        make_exercise("squat", "Quadriceps", sets=5, secondary=["Glutes"], tertiary=["Lower Back"]),
        make_exercise("incline", "Chest", sets=3, secondary=["Front Deltoids"]),
        make_exercise("rdl", "Hamstrings", sets=3, secondary=["Glutes", "Lower Back"]),
        make_exercise("ohp", "Front Deltoids", sets=3, secondary=["Triceps"]),
        make_exercise("pulldown", "Latissimus Dorsi", sets=3, secondary=["Biceps"]),
        make_exercise("curl", "Biceps", sets=2),
        make_exercise("pushdown", "Triceps", sets=2),
        make_exercise("lunge", "Quadriceps", sets=3, secondary=["Glutes"]),
        make_exercise("raise", "Side Deltoids", sets=3),
        make_exercise("calf", "Calves", sets=4),
        make_exercise("plank", None, sets=1, tertiary=["Core"]),
    ]


@pytest.fixture
def log_records():
    """Capture loguru records emitted during a test."""
    records: list[dict] = []
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG")
    yield records
    logger.remove(handler_id)
