"""Routine Partitioner - Math Core.

This module distributes a normalized exercise pool across N day routines
deterministically. Identical (pool, frequency) input yields identical output:
no randomness, no module state.

Guarantees:
- Every pool entry lands on exactly one day
- Exercise-count spread across days is at most one
- Exercises sharing a primary muscle are spread over distinct days first

Placement order:
1. Group exercises by primary muscle (pool order within a group)
2. Heaviest group (total sets) first; ties by first appearance in the pool
3. Each exercise goes to the day with the lowest
   (exercises already placed there for the group muscle,
    group muscle volume on the day, exercise count, day index)
"""

from dataclasses import dataclass, field

from loguru import logger

from routine_engine.planning.analytics.aggregator import exercise_muscle_volume
from routine_engine.planning.compiler.naming import day_name, suggest_routine_name
from routine_engine.planning.compiler.rebalance import rebalance_day_counts
from routine_engine.planning.compiler.volume_status import classify_volume_status
from routine_engine.planning.errors import ConfigurationError
from routine_engine.planning.invariants import MAX_FREQUENCY, MIN_FREQUENCY
from routine_engine.planning.schema.exercise import ExercisePrescription
from routine_engine.planning.schema.routine import DayRoutine, VolumeStatus


@dataclass
class _DayBucket:
    index: int
    members: list[int] = field(default_factory=list)
    primary_counts: dict[str, int] = field(default_factory=dict)
    muscle_volume: dict[str, float] = field(default_factory=dict)

    @property
    def exercise_count(self) -> int:
        return len(self.members)

    def place(self, pool_index: int, exercise: ExercisePrescription) -> None:
        self.members.append(pool_index)
        self.primary_counts[exercise.primary_muscle] = self.primary_counts.get(exercise.primary_muscle, 0) + 1
        # Default role weights: placement must not depend on caller tunables
        for muscle, volume in exercise_muscle_volume(exercise).items():
            self.muscle_volume[muscle] = self.muscle_volume.get(muscle, 0.0) + volume


def validate_frequency(frequency: int) -> int:
    """Validate training frequency.

    Args:
        frequency: Training days per week

    Returns:
        The frequency, unchanged

    Raises:
        ConfigurationError: If frequency is not an integer in [2, 7]
    """
    if isinstance(frequency, bool) or not isinstance(frequency, int):
        raise ConfigurationError(
            "INVALID_FREQUENCY",
            [f"frequency must be an integer, got {type(frequency).__name__}"],
        )
    if not MIN_FREQUENCY <= frequency <= MAX_FREQUENCY:
        raise ConfigurationError(
            "INVALID_FREQUENCY",
            [f"frequency must be between {MIN_FREQUENCY} and {MAX_FREQUENCY}, got {frequency}"],
        )
    return frequency


def group_by_primary_muscle(pool: list[ExercisePrescription]) -> list[tuple[str, list[int]]]:
    """Group pool indices by primary muscle in processing order.

    Args:
        pool: Normalized exercise pool

    Returns:
        (muscle, pool indices) pairs, heaviest group first
    """
    groups: dict[str, list[int]] = {}
    for index, exercise in enumerate(pool):
        groups.setdefault(exercise.primary_muscle, []).append(index)

    def group_sets(item: tuple[str, list[int]]) -> int:
        return sum(pool[i].sets for i in item[1])

    # dict order is first appearance and sorted() is stable
    return sorted(groups.items(), key=lambda item: -group_sets(item))


def _place_exercises(pool: list[ExercisePrescription], frequency: int) -> list[list[int]]:
    buckets = [_DayBucket(index=i) for i in range(frequency)]

    for muscle, indices in group_by_primary_muscle(pool):
        for pool_index in indices:
            target = min(
                buckets,
                key=lambda b: (
                    b.primary_counts.get(muscle, 0),
                    b.muscle_volume.get(muscle, 0.0),
                    b.exercise_count,
                    b.index,
                ),
            )
            target.place(pool_index, pool[pool_index])

    return [bucket.members for bucket in buckets]


def _build_day_routine(
    pool: list[ExercisePrescription],
    members: list[int],
    day_index: int,
    status: VolumeStatus,
) -> DayRoutine:
    exercises = [pool[i] for i in sorted(members)]
    muscles = list(dict.fromkeys(m for ex in exercises for m in ex.muscle_groups.all_muscles()))

    return DayRoutine(
        name=day_name(day_index),
        day_index=day_index,
        exercises=exercises,
        total_sets=sum(ex.sets for ex in exercises),
        muscle_groups=muscles,
        volume_status=status,
        focus=suggest_routine_name(exercises),
    )


def generate_routines(pool: list[ExercisePrescription], frequency: int) -> list[DayRoutine]:
    """Partition a normalized pool into `frequency` day routines.

    An empty pool yields `frequency` empty routines. When the pool is smaller
    than the frequency, the surplus days stay empty (rest days).

    Args:
        pool: Normalized exercise pool (order is the final tie-breaker)
        frequency: Training days per week (2-7)

    Returns:
        List of DayRoutine, "Day 1" first; exercises inside a day keep pool order

    Raises:
        ConfigurationError: If frequency is outside [2, 7]
    """
    validate_frequency(frequency)

    assignments = _place_exercises(pool, frequency)
    assignments = rebalance_day_counts(assignments, pool)

    day_sets = [sum(pool[i].sets for i in members) for members in assignments]
    statuses = classify_volume_status(day_sets)

    routines = [
        _build_day_routine(pool, members, day_index, statuses[day_index])
        for day_index, members in enumerate(assignments)
    ]

    logger.debug(
        "Routines generated",
        frequency=frequency,
        pool_size=len(pool),
        exercises_per_day=[len(r.exercises) for r in routines],
        sets_per_day=day_sets,
    )

    return routines
