from pydantic import BaseModel, Field

from routine_engine.planning.invariants import UNASSIGNED_MUSCLE


class MuscleGroups(BaseModel):
    primary: list[str] = Field(default_factory=list)
    secondary: list[str] = Field(default_factory=list)
    tertiary: list[str] = Field(default_factory=list)

    def all_muscles(self) -> list[str]:
        """Return every tagged muscle once, primary first, in tag order."""
        seen: dict[str, None] = {}
        for muscle in (*self.primary, *self.secondary, *self.tertiary):
            seen.setdefault(muscle, None)
        return list(seen)


class ExercisePrescription(BaseModel):
    exercise_id: str | int = Field(..., description="Opaque catalog identifier")
    sets: int = Field(..., ge=1)
    reps: str = Field("", description="Rep range, e.g. 8-12")
    rest_seconds: int = Field(0, ge=0)
    notes: str | None = None

    muscle_groups: MuscleGroups = Field(default_factory=MuscleGroups)

    @property
    def primary_muscle(self) -> str:
        """Muscle used to group this exercise during partitioning."""
        if self.muscle_groups.primary:
            return self.muscle_groups.primary[0]
        return UNASSIGNED_MUSCLE
