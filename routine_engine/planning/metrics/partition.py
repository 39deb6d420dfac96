"""Partition Metrics.

Observability for routine generation.
Logs partition outcomes for monitoring and analysis.
"""

from loguru import logger

from routine_engine.planning.schema.routine import DayRoutine, VolumeStatus


def log_partition_metrics(routines: list[DayRoutine], frequency: int) -> None:
    """Log partition metrics.

    Logs:
    - Exercises and sets per day
    - Exercise-count and set spread
    - Rest (empty) days
    - Days flagged low or high volume

    Args:
        routines: Generated day routines
        frequency: Requested training days per week
    """
    if not routines:
        logger.debug(
            "Partition metrics: No routines generated",
            frequency=frequency,
        )
        return

    exercise_counts = [len(r.exercises) for r in routines]
    set_counts = [r.total_sets for r in routines]

    logger.info(
        "Partition metrics",
        frequency=frequency,
        total_exercises=sum(exercise_counts),
        total_sets=sum(set_counts),
        exercises_per_day=exercise_counts,
        sets_per_day=set_counts,
        exercise_spread=max(exercise_counts) - min(exercise_counts),
        set_spread=max(set_counts) - min(set_counts),
        rest_days=sum(1 for r in routines if r.is_rest_day),
        low_volume_days=[r.name for r in routines if r.volume_status == VolumeStatus.LOW],
        high_volume_days=[r.name for r in routines if r.volume_status == VolumeStatus.HIGH],
    )
