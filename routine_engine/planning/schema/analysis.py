"""ProgramAnalysis - Output Contract for Heatmap and Recommendation Rendering.

UI collaborators consume this as camelCase JSON:
    analysis.model_dump(by_alias=True, mode="json")

Python code reads and writes the snake_case field names.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BalanceRating(StrEnum):
    BALANCED = "balanced"
    MODERATELY_IMBALANCED = "moderately_imbalanced"
    IMBALANCED = "imbalanced"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class MuscleVolume(CamelModel):
    volume: float = Field(..., ge=0)
    percentage_of_total: float = Field(..., ge=0, le=100)


class SortedMuscle(CamelModel):
    muscle: str
    volume: float = Field(..., ge=0)
    percentage: float = Field(..., ge=0, le=100)


class ProgramStats(CamelModel):
    total_exercises: int = Field(..., ge=0)
    unique_muscles_targeted: int = Field(..., ge=0)
    total_sets: int = Field(0, ge=0)
    total_volume: float = Field(0.0, ge=0)
    training_days: int = Field(0, ge=0)
    average_exercises_per_day: float = Field(0.0, ge=0)
    average_sets_per_day: float = Field(0.0, ge=0)


class BalanceAnalysis(CamelModel):
    overall: BalanceRating
    spread: float = Field(0.0, ge=0, description="Top percentage minus smallest non-zero percentage")
    recommendations: list[str] = Field(default_factory=list)


class ProgramAnalysis(CamelModel):
    per_muscle: dict[str, MuscleVolume] = Field(default_factory=dict)
    sorted_muscles: list[SortedMuscle] = Field(default_factory=list)
    per_day: list[dict[str, float]] = Field(default_factory=list)
    program_stats: ProgramStats
    balance_analysis: BalanceAnalysis


class HeatmapEntry(CamelModel):
    muscle: str
    intensity: float = Field(..., ge=0, le=1)
    raw_volume: float = Field(..., ge=0)


class RegionHeatmapEntry(CamelModel):
    region: str
    intensity: float = Field(..., ge=0, le=1)
    raw_volume: float = Field(..., ge=0)
    muscles: list[str] = Field(default_factory=list)
