from enum import StrEnum

from pydantic import BaseModel, Field

from routine_engine.planning.schema.exercise import ExercisePrescription


class VolumeStatus(StrEnum):
    LOW = "low"
    BALANCED = "balanced"
    HIGH = "high"


class DayRoutine(BaseModel):
    name: str = Field(..., description="Ordinal day name, e.g. Day 1")
    day_index: int = Field(..., ge=0)

    exercises: list[ExercisePrescription] = Field(default_factory=list)
    total_sets: int = Field(0, ge=0)
    muscle_groups: list[str] = Field(default_factory=list, description="Every muscle touched that day, first touch first")
    volume_status: VolumeStatus = VolumeStatus.BALANCED

    focus: str = Field(..., description="Suggested label derived from the day's primary muscles")

    @property
    def is_rest_day(self) -> bool:
        return not self.exercises
