"""Day Count Rebalancer - Exercise-Count Guarantee.

Muscle-first placement can, for pathological group sizes, leave one day more
than one exercise ahead of the lightest day. This pass moves exercises from
the busiest day to the lightest day until the spread is within bounds.

Move selection (lowest tuple wins):
    (duplicates of its primary muscle on the destination,
     -duplicates of its primary muscle on the source,
     -pool index)
"""

from loguru import logger

from routine_engine.planning.invariants import MAX_DAY_EXERCISE_SPREAD
from routine_engine.planning.schema.exercise import ExercisePrescription


def _pick_exercise_to_move(
    source: list[int],
    destination: list[int],
    pool: list[ExercisePrescription],
) -> int:
    """Pick the pool index to move from source to destination.

    Args:
        source: Pool indices placed on the busiest day
        destination: Pool indices placed on the lightest day
        pool: Normalized exercise pool

    Returns:
        Pool index of the exercise to move
    """
    destination_muscles = [pool[i].primary_muscle for i in destination]
    source_muscles = [pool[i].primary_muscle for i in source]

    def move_cost(index: int) -> tuple[int, int, int]:
        muscle = pool[index].primary_muscle
        return (destination_muscles.count(muscle), -source_muscles.count(muscle), -index)

    return min(source, key=move_cost)


def rebalance_day_counts(assignments: list[list[int]], pool: list[ExercisePrescription]) -> list[list[int]]:
    """Rebalance per-day exercise counts so that max - min <= 1.

    Does not modify the input lists.

    Args:
        assignments: Pool indices per day, in placement order
        pool: Normalized exercise pool

    Returns:
        New per-day assignments satisfying the exercise-count spread
    """
    days = [list(day) for day in assignments]
    moves: list[tuple[int, int, int]] = []

    while days:
        counts = [len(day) for day in days]
        busiest = counts.index(max(counts))
        lightest = counts.index(min(counts))
        if counts[busiest] - counts[lightest] <= MAX_DAY_EXERCISE_SPREAD:
            break

        index = _pick_exercise_to_move(days[busiest], days[lightest], pool)
        days[busiest].remove(index)
        days[lightest].append(index)
        moves.append((index, busiest, lightest))

    if moves:
        logger.info(
            "Day exercise counts rebalanced",
            moves=len(moves),
            moved_pool_indices=[m[0] for m in moves],
            final_counts=[len(day) for day in days],
        )

    return days
