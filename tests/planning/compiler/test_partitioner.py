"""Mandatory Tests - Deterministic Routine Partitioner.

These tests ensure the partitioner produces deterministic, invariant-safe routines.
MANDATORY - CI must fail if these tests fail.

Tests enforce:
1. Every pool entry appears in exactly one day
2. Total sets are preserved
3. Exercise-count spread across days is at most one
4. Exercises sharing a primary muscle land on distinct days first
5. Identical input produces identical output
"""

import pytest

from routine_engine.planning.compiler.partitioner import (
    generate_routines,
    group_by_primary_muscle,
    validate_frequency,
)
from routine_engine.planning.errors import ConfigurationError
from routine_engine.planning.schema.routine import VolumeStatus


@pytest.mark.parametrize("frequency", [2, 3, 4, 5, 6, 7])
def test_every_exercise_placed_exactly_once(mixed_pool, frequency):
    """Test that the union of all days equals the pool, without duplicates or loss."""
    routines = generate_routines(mixed_pool, frequency)

    placed = [ex.exercise_id for r in routines for ex in r.exercises]
    assert len(routines) == frequency
    assert sorted(placed) == sorted(ex.exercise_id for ex in mixed_pool)
    assert len(placed) == len(set(placed))


@pytest.mark.parametrize("frequency", [2, 3, 4, 5, 6, 7])
def test_total_sets_preserved(mixed_pool, frequency):
    routines = generate_routines(mixed_pool, frequency)

    assert sum(r.total_sets for r in routines) == sum(ex.sets for ex in mixed_pool)
    for routine in routines:
        assert routine.total_sets == sum(ex.sets for ex in routine.exercises)


@pytest.mark.parametrize("frequency", [2, 3, 4, 5, 6, 7])
def test_exercise_count_spread_at_most_one(mixed_pool, frequency):
    routines = generate_routines(mixed_pool, frequency)

    counts = [len(r.exercises) for r in routines]
    assert max(counts) - min(counts) <= 1, f"counts={counts}"


@pytest.mark.parametrize("frequency", [2, 3, 4, 5, 6, 7])
def test_partitioning_is_deterministic(mixed_pool, frequency):
    """Test that re-running on identical input yields identical output."""
    first = generate_routines(mixed_pool, frequency)
    second = generate_routines(list(mixed_pool), frequency)

    assert [r.model_dump_json() for r in first] == [r.model_dump_json() for r in second]


def test_push_pull_legs_scenario(push_pull_legs_pool):
    """Test 3 Chest / 3 Back / 3 Legs at frequency 3 gives one of each per day."""
    routines = generate_routines(push_pull_legs_pool, 3)

    assert [r.name for r in routines] == ["Day 1", "Day 2", "Day 3"]
    for routine in routines:
        assert len(routine.exercises) == 3
        assert routine.total_sets == 9
        assert sorted(ex.primary_muscle for ex in routine.exercises) == ["Back", "Chest", "Legs"]
        assert routine.volume_status == VolumeStatus.BALANCED

    assert [ex.exercise_id for ex in routines[0].exercises] == ["chest-1", "back-1", "legs-1"]
    assert [ex.exercise_id for ex in routines[2].exercises] == ["chest-3", "back-3", "legs-3"]


def test_push_pull_legs_scenario_interleaved(make_exercise):
    """Test that interleaved pool order gives the same one-of-each split."""
    pool = [
        make_exercise(f"{muscle.lower()}-{i}", muscle)
        for i in range(1, 4)
        for muscle in ("Chest", "Back", "Legs")
    ]

    routines = generate_routines(pool, 3)

    for routine in routines:
        assert sorted(ex.primary_muscle for ex in routine.exercises) == ["Back", "Chest", "Legs"]


def test_shared_primary_muscle_spread_across_days(make_exercise):
    """Test 8 of 10 Chest exercises at frequency 4 touch at least 4 distinct days."""
    pool = [make_exercise("fly", "Back")]
    pool += [make_exercise(f"chest-{i}", "Chest") for i in range(8)]
    pool += [make_exercise("squat", "Legs")]

    routines = generate_routines(pool, 4)

    chest_days = [r for r in routines if any(ex.primary_muscle == "Chest" for ex in r.exercises)]
    counts = [len(r.exercises) for r in routines]
    assert len(chest_days) >= min(8, 4)
    assert max(counts) - min(counts) <= 1
    assert all(sum(ex.primary_muscle == "Chest" for ex in r.exercises) == 2 for r in routines)


@pytest.mark.parametrize(
    ("frequency", "leaders", "expected"),
    [
        (3, [("pushdown", "Triceps", 8)], [["pushdown", "chest-3"], ["chest-1"], ["chest-2"]]),
        (
            4,
            [("pushdown", "Triceps", 8), ("ohp", "Front Deltoids", 6)],
            [["pushdown"], ["ohp", "chest-3"], ["chest-1"], ["chest-2"]],
        ),
    ],
)
def test_secondary_tags_do_not_stack_primary_muscle(make_exercise, frequency, leaders, expected):
    """Test that a day carrying Chest only as a secondary tag still takes a Chest exercise.

    Heavy Chest-secondary exercises are placed first. Each Chest exercise must
    still land on its own day while a day without a Chest primary remains.
    """
    pool = [make_exercise(eid, muscle, sets=sets, secondary=["Chest"]) for eid, muscle, sets in leaders]
    pool += [make_exercise(f"chest-{i}", "Chest", sets=1) for i in range(1, 4)]

    routines = generate_routines(pool, frequency)

    assert [[ex.exercise_id for ex in r.exercises] for r in routines] == expected
    chest_days = [r for r in routines if any(ex.primary_muscle == "Chest" for ex in r.exercises)]
    assert len(chest_days) == 3


def test_empty_pool_returns_empty_days():
    routines = generate_routines([], 4)

    assert [r.name for r in routines] == ["Day 1", "Day 2", "Day 3", "Day 4"]
    for routine in routines:
        assert routine.exercises == []
        assert routine.total_sets == 0
        assert routine.muscle_groups == []
        assert routine.volume_status == VolumeStatus.BALANCED
        assert routine.focus == "Rest"
        assert routine.is_rest_day


def test_pool_smaller_than_frequency_leaves_rest_days(make_exercise):
    pool = [make_exercise("bench", "Chest", sets=4), make_exercise("row", "Back", sets=4)]

    routines = generate_routines(pool, 5)

    assert [len(r.exercises) for r in routines] == [1, 1, 0, 0, 0]
    assert sum(r.is_rest_day for r in routines) == 3


def test_heaviest_group_placed_first(make_exercise):
    """Test that group order is by total sets, then first appearance."""
    pool = [
        make_exercise("curl", "Biceps", sets=2),
        make_exercise("squat", "Quadriceps", sets=5),
        make_exercise("bench", "Chest", sets=3),
        make_exercise("fly", "Chest", sets=2),
        make_exercise("calf", "Calves", sets=2),
    ]

    groups = group_by_primary_muscle(pool)

    assert [muscle for muscle, _ in groups] == ["Quadriceps", "Chest", "Biceps", "Calves"]
    assert dict(groups)["Chest"] == [2, 3]


def test_unassigned_exercises_are_grouped_together(make_exercise):
    pool = [make_exercise("a", None), make_exercise("b", "Chest"), make_exercise("c", None)]

    groups = dict(group_by_primary_muscle(pool))

    assert groups["Unassigned"] == [0, 2]


def test_day_muscle_groups_cover_all_roles(make_exercise):
    pool = [
        make_exercise("bench", "Chest", secondary=["Triceps"], tertiary=["Core"]),
        make_exercise("dip", "Triceps", secondary=["Chest"]),
    ]

    routines = generate_routines(pool, 2)

    assert routines[0].muscle_groups == ["Chest", "Triceps", "Core"]
    assert routines[1].muscle_groups == ["Triceps", "Chest"]


def test_exercises_within_a_day_keep_pool_order(mixed_pool):
    pool_position = {ex.exercise_id: i for i, ex in enumerate(mixed_pool)}

    for routine in generate_routines(mixed_pool, 3):
        positions = [pool_position[ex.exercise_id] for ex in routine.exercises]
        assert positions == sorted(positions)


def test_generate_routines_does_not_mutate_pool(mixed_pool):
    snapshot = [ex.model_dump() for ex in mixed_pool]

    generate_routines(mixed_pool, 4)

    assert [ex.model_dump() for ex in mixed_pool] == snapshot


@pytest.mark.parametrize("frequency", [0, 1, 8, 10, -3])
def test_frequency_out_of_range_raises(frequency):
    with pytest.raises(ConfigurationError, match="INVALID_FREQUENCY"):
        generate_routines([], frequency)


@pytest.mark.parametrize("frequency", ["3", 3.0, True, None])
def test_non_integer_frequency_raises(frequency):
    with pytest.raises(ConfigurationError) as exc_info:
        validate_frequency(frequency)

    assert exc_info.value.code == "INVALID_FREQUENCY"
