"""Tests for the day exercise-count rebalancer."""

from routine_engine.planning.compiler.partitioner import generate_routines
from routine_engine.planning.compiler.rebalance import rebalance_day_counts


def test_rebalance_moves_from_busiest_to_lightest(make_exercise):
    """Test that duplicated muscles leave the busiest day first, latest entry first."""
    pool = [
        make_exercise("bench", "Chest"),
        make_exercise("fly", "Chest"),
        make_exercise("row", "Back"),
        make_exercise("squat", "Legs"),
    ]

    result = rebalance_day_counts([[0, 1, 2, 3], [], []], pool)

    assert result == [[0, 2], [1], [3]]


def test_rebalance_prefers_muscles_absent_from_destination(make_exercise):
    pool = [
        make_exercise("bench", "Chest"),
        make_exercise("row", "Back"),
        make_exercise("squat", "Legs"),
        make_exercise("incline", "Chest"),
    ]

    result = rebalance_day_counts([[0, 1, 2], [3]], pool)

    # Chest is already on the destination, so the Legs entry moves
    assert result == [[0, 1], [3, 2]]

    result = rebalance_day_counts([[0, 1, 2, 3], []], pool)

    assert result == [[0, 1], [3, 2]]


def test_rebalance_leaves_balanced_days_untouched(make_exercise, log_records):
    pool = [make_exercise(i, "Chest") for i in range(4)]
    assignments = [[0, 1], [2], [3]]

    result = rebalance_day_counts(assignments, pool)

    assert result == [[0, 1], [2], [3]]
    assert not [r for r in log_records if r["message"] == "Day exercise counts rebalanced"]


def test_rebalance_does_not_mutate_input(make_exercise):
    pool = [make_exercise(i, "Chest") for i in range(3)]
    assignments = [[0, 1, 2], []]

    rebalance_day_counts(assignments, pool)

    assert assignments == [[0, 1, 2], []]


def test_rebalance_logs_moves(make_exercise, log_records):
    pool = [make_exercise(i, "Chest") for i in range(3)]

    rebalance_day_counts([[0, 1, 2], []], pool)

    moves = [r for r in log_records if r["message"] == "Day exercise counts rebalanced"]
    assert len(moves) == 1
    assert moves[0]["extra"]["moves"] == 1
    assert moves[0]["extra"]["moved_pool_indices"] == [2]
    assert moves[0]["extra"]["final_counts"] == [2, 1]


def test_generate_routines_rebalances_heavy_secondary_overlap(make_exercise):
    """Test that volume-driven placement stacking three exercises on one day is evened out.

    Glutes and Calves volume from the row secondaries pushes both small groups
    onto Day 1; the rebalancer moves the later one to Day 2.
    """
    pool = [
        make_exercise("bench", "Chest", sets=10),
        make_exercise("row", "Back", sets=9, secondary=["Glutes", "Calves"]),
        make_exercise("hip-thrust", "Glutes", sets=2),
        make_exercise("calf", "Calves", sets=1),
    ]

    routines = generate_routines(pool, 2)

    assert [[ex.exercise_id for ex in r.exercises] for r in routines] == [
        ["bench", "hip-thrust"],
        ["row", "calf"],
    ]
