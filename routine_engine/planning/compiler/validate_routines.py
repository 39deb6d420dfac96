"""Deterministic Validation - Partition Invariants.

This module re-checks a generated partition before it leaves the engine.
A failure here is a defect in the partitioner, never a caller error, and
raises PlanningInvariantError after logging it.
"""

from collections import Counter

from routine_engine.planning.errors import PlanningInvariantError
from routine_engine.planning.invariants import MAX_DAY_EXERCISE_SPREAD
from routine_engine.planning.logging import log_planning_invariant_failure
from routine_engine.planning.schema.exercise import ExercisePrescription
from routine_engine.planning.schema.routine import DayRoutine


def validate_routines(
    pool: list[ExercisePrescription],
    routines: list[DayRoutine],
    frequency: int,
) -> None:
    """Validate a partition against every routine invariant.

    Args:
        pool: Normalized exercise pool the routines were generated from
        routines: Generated day routines
        frequency: Requested training days per week

    Raises:
        PlanningInvariantError: If any invariant is violated
    """
    errors: list[str] = []

    # ---- Day count ----
    if len(routines) != frequency:
        errors.append("DAY_COUNT_MISMATCH")

    # ---- Exactly-once placement ----
    expected = Counter(ex.model_dump_json() for ex in pool)
    placed = Counter(ex.model_dump_json() for r in routines for ex in r.exercises)
    if expected - placed:
        errors.append("EXERCISE_MISSING")
    if placed - expected:
        errors.append("EXERCISE_DUPLICATED")

    # ---- Set totals ----
    if any(r.total_sets != sum(ex.sets for ex in r.exercises) for r in routines):
        errors.append("DAY_SET_TOTAL_MISMATCH")
    if sum(r.total_sets for r in routines) != sum(ex.sets for ex in pool):
        errors.append("SET_TOTAL_MISMATCH")

    # ---- Exercise-count spread ----
    counts = [len(r.exercises) for r in routines]
    if counts and max(counts) - min(counts) > MAX_DAY_EXERCISE_SPREAD:
        errors.append("DAY_COUNT_SPREAD")

    if errors:
        err = PlanningInvariantError("INVALID_PARTITION", errors)
        log_planning_invariant_failure(
            err,
            {
                "frequency": frequency,
                "pool_size": len(pool),
                "placed": sum(counts),
            },
        )
        raise err
