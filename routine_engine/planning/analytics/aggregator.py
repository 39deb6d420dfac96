"""Muscle volume aggregation - weighted sets only.

Volume for a muscle is derived, never stored:
    volume = sets x role weight (primary 1.0, secondary 0.5, tertiary 0.25)

Dictionaries returned here keep first-touch order, which downstream
sorting relies on as its tie-breaker.
"""

from collections.abc import Iterable

from routine_engine.planning.library.analysis_profile import DEFAULT_ROLE_WEIGHTS, MuscleRoleWeights
from routine_engine.planning.schema.analysis import ProgramStats
from routine_engine.planning.schema.exercise import ExercisePrescription
from routine_engine.planning.schema.routine import DayRoutine


def exercise_muscle_volume(
    exercise: ExercisePrescription,
    weights: MuscleRoleWeights = DEFAULT_ROLE_WEIGHTS,
) -> dict[str, float]:
    """Compute the weighted contribution of one exercise to each tagged muscle.

    A muscle tagged under more than one role receives the sum of its role
    contributions.

    Args:
        exercise: Normalized exercise prescription
        weights: Role multipliers

    Returns:
        Dictionary mapping muscle name to weighted volume
    """
    volumes: dict[str, float] = {}
    groups = exercise.muscle_groups
    for muscles, weight in (
        (groups.primary, weights.primary),
        (groups.secondary, weights.secondary),
        (groups.tertiary, weights.tertiary),
    ):
        for muscle in muscles:
            volumes[muscle] = volumes.get(muscle, 0.0) + exercise.sets * weight
    return volumes


def aggregate_exercises(
    exercises: Iterable[ExercisePrescription],
    weights: MuscleRoleWeights = DEFAULT_ROLE_WEIGHTS,
) -> dict[str, float]:
    """Sum weighted muscle volume across exercises."""
    totals: dict[str, float] = {}
    for exercise in exercises:
        for muscle, volume in exercise_muscle_volume(exercise, weights).items():
            totals[muscle] = totals.get(muscle, 0.0) + volume
    return totals


def aggregate_day(routine: DayRoutine, weights: MuscleRoleWeights = DEFAULT_ROLE_WEIGHTS) -> dict[str, float]:
    return aggregate_exercises(routine.exercises, weights)


def aggregate_program(
    routines: list[DayRoutine],
    weights: MuscleRoleWeights = DEFAULT_ROLE_WEIGHTS,
) -> dict[str, float]:
    """Sum weighted muscle volume across every day of the program.

    Args:
        routines: Generated day routines
        weights: Role multipliers

    Returns:
        Dictionary mapping muscle name to program volume, first touch first
    """
    return aggregate_exercises((ex for routine in routines for ex in routine.exercises), weights)


def total_weighted_volume(
    exercises: Iterable[ExercisePrescription],
    weights: MuscleRoleWeights = DEFAULT_ROLE_WEIGHTS,
) -> float:
    return sum(aggregate_exercises(exercises, weights).values())


def compute_program_stats(routines: list[DayRoutine], volumes: dict[str, float]) -> ProgramStats:
    """Compute program-level counters for the analytics summary.

    Args:
        routines: Generated day routines (every pool entry appears exactly once)
        volumes: Program muscle volumes from aggregate_program

    Returns:
        ProgramStats
    """
    total_exercises = sum(len(r.exercises) for r in routines)
    total_sets = sum(r.total_sets for r in routines)
    day_count = len(routines)

    return ProgramStats(
        total_exercises=total_exercises,
        unique_muscles_targeted=sum(1 for v in volumes.values() if v > 0),
        total_sets=total_sets,
        total_volume=round(sum(volumes.values()), 4),
        training_days=sum(1 for r in routines if r.exercises),
        average_exercises_per_day=round(total_exercises / day_count, 2) if day_count else 0.0,
        average_sets_per_day=round(total_sets / day_count, 2) if day_count else 0.0,
    )
