"""Program analysis - aggregator and balance analyzer composed.

Produces the ProgramAnalysis consumed by heatmap and recommendation
renderers. Pure function of the routines and tunables.
"""

from routine_engine.planning.analytics.aggregator import aggregate_day, aggregate_program, compute_program_stats
from routine_engine.planning.analytics.balance import analyze_balance, sort_muscles
from routine_engine.planning.library.analysis_profile import (
    DEFAULT_BALANCE_THRESHOLDS,
    DEFAULT_ROLE_WEIGHTS,
    BalanceThresholds,
    MuscleRoleWeights,
)
from routine_engine.planning.schema.analysis import MuscleVolume, ProgramAnalysis
from routine_engine.planning.schema.routine import DayRoutine


def analyze_program(
    routines: list[DayRoutine],
    *,
    weights: MuscleRoleWeights = DEFAULT_ROLE_WEIGHTS,
    thresholds: BalanceThresholds = DEFAULT_BALANCE_THRESHOLDS,
    volumes: dict[str, float] | None = None,
) -> ProgramAnalysis:
    """Compute per-muscle volume, program stats and balance for a program.

    Args:
        routines: Generated day routines
        weights: Muscle role multipliers
        thresholds: Balance classification and recommendation bounds
        volumes: Program muscle volumes already aggregated with `weights`;
            computed here when omitted

    Returns:
        ProgramAnalysis
    """
    if volumes is None:
        volumes = aggregate_program(routines, weights)
    sorted_muscles = sort_muscles(volumes)

    return ProgramAnalysis(
        per_muscle={
            entry.muscle: MuscleVolume(volume=entry.volume, percentage_of_total=entry.percentage)
            for entry in sorted_muscles
        },
        sorted_muscles=sorted_muscles,
        per_day=[aggregate_day(routine, weights) for routine in routines],
        program_stats=compute_program_stats(routines, volumes),
        balance_analysis=analyze_balance(volumes, thresholds),
    )
