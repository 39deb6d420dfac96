"""Routine engine - exercise pool partitioning and muscle analytics.

This package provides:
- Pool normalization into one canonical prescription shape
- Deterministic partitioning of a pool into N balanced day routines
- Weighted per-muscle volume aggregation
- Balance classification with recommendations
- Muscle and body-region heatmaps

The engine is pure: no I/O, no module state.
"""

from routine_engine.planning.analytics.heatmap import build_heatmap, build_region_heatmap
from routine_engine.planning.analytics.program_analysis import analyze_program
from routine_engine.planning.compiler.compile_program import compile_program
from routine_engine.planning.compiler.partitioner import generate_routines
from routine_engine.planning.errors import ConfigurationError, PlanningInvariantError, ValidationError
from routine_engine.planning.library.analysis_profile import BalanceThresholds, MuscleRoleWeights
from routine_engine.planning.normalize.normalizer import NormalizationResult, normalize_pool
from routine_engine.planning.schema.analysis import HeatmapEntry, ProgramAnalysis
from routine_engine.planning.schema.exercise import ExercisePrescription, MuscleGroups
from routine_engine.planning.schema.program import CompiledProgram
from routine_engine.planning.schema.routine import DayRoutine, VolumeStatus

__all__ = [
    "BalanceThresholds",
    "CompiledProgram",
    "ConfigurationError",
    "DayRoutine",
    "ExercisePrescription",
    "HeatmapEntry",
    "MuscleGroups",
    "MuscleRoleWeights",
    "NormalizationResult",
    "PlanningInvariantError",
    "ProgramAnalysis",
    "ValidationError",
    "VolumeStatus",
    "analyze_program",
    "build_heatmap",
    "build_region_heatmap",
    "compile_program",
    "generate_routines",
    "normalize_pool",
]
