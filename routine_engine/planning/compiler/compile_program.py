"""Program Compilation Entry Point.

This module orchestrates the complete pipeline:
raw pool → Normalizer → Partitioner → Validation → Muscle Aggregator → Balance Analyzer → Heatmap Builder

FREQUENCY RULE:
- Frequency is validated BEFORE the pool is touched

PURITY RULE:
- Output depends only on (raw pool, frequency, tunables)
- Tunables come from the Settings passed in, or the documented defaults;
  the environment is never read implicitly
"""

from collections.abc import Iterable
from typing import Any

from routine_engine.config.settings import Settings
from routine_engine.planning.analytics.aggregator import aggregate_program
from routine_engine.planning.analytics.heatmap import build_heatmap, build_region_heatmap
from routine_engine.planning.analytics.program_analysis import analyze_program
from routine_engine.planning.compiler.partitioner import generate_routines, validate_frequency
from routine_engine.planning.compiler.validate_routines import validate_routines
from routine_engine.planning.library.analysis_profile import DEFAULT_BALANCE_THRESHOLDS, DEFAULT_ROLE_WEIGHTS
from routine_engine.planning.metrics.partition import log_partition_metrics
from routine_engine.planning.normalize.normalizer import normalize_pool
from routine_engine.planning.schema.program import CompiledProgram


def compile_program(
    raw_pool: Iterable[Any] | None,
    frequency: int,
    *,
    strict: bool | None = None,
    settings: Settings | None = None,
) -> CompiledProgram:
    """Compile a raw exercise pool into day routines and program analytics.

    Pipeline:
    1. Validate frequency
    2. Normalize the raw pool (skip-and-report or strict)
    3. Partition into day routines
    4. Re-check partition invariants
    5. Analyze muscle volume and balance
    6. Build muscle and body-region heatmaps

    Args:
        raw_pool: Raw pool entries from the authoring collaborator
        frequency: Training days per week (2-7)
        strict: Abort on the first malformed entry (default: settings.strict_validation, else False)
        settings: Optional tunables; documented defaults apply when omitted

    Returns:
        CompiledProgram

    Raises:
        ConfigurationError: If frequency is outside [2, 7]
        ValidationError: In strict mode, for the first malformed pool entry
        PlanningInvariantError: If the generated partition violates an invariant
    """
    validate_frequency(frequency)

    if settings is not None:
        weights = settings.role_weights()
        thresholds = settings.balance_thresholds()
        if strict is None:
            strict = settings.strict_validation
    else:
        weights = DEFAULT_ROLE_WEIGHTS
        thresholds = DEFAULT_BALANCE_THRESHOLDS

    normalized = normalize_pool(raw_pool, strict=bool(strict))
    pool = normalized.exercises

    routines = generate_routines(pool, frequency)
    validate_routines(pool, routines, frequency)
    log_partition_metrics(routines, frequency)

    volumes = aggregate_program(routines, weights)
    analysis = analyze_program(routines, weights=weights, thresholds=thresholds, volumes=volumes)

    return CompiledProgram(
        frequency=frequency,
        routines=routines,
        analysis=analysis,
        heatmap=build_heatmap(volumes),
        region_heatmap=build_region_heatmap(volumes),
        discarded=normalized.discarded,
        discard_reasons=[str(err) for err in normalized.errors],
    )
