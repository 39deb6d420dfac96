from pydantic import BaseModel, Field

from routine_engine.planning.schema.analysis import HeatmapEntry, ProgramAnalysis, RegionHeatmapEntry
from routine_engine.planning.schema.routine import DayRoutine


class CompiledProgram(BaseModel):
    frequency: int = Field(..., description="Training days per week")

    routines: list[DayRoutine]
    analysis: ProgramAnalysis
    heatmap: list[HeatmapEntry] = Field(default_factory=list)
    region_heatmap: list[RegionHeatmapEntry] = Field(default_factory=list)

    discarded: int = Field(0, ge=0, description="Raw pool entries skipped during normalization")
    discard_reasons: list[str] = Field(default_factory=list)
