"""Routine engine settings.

Values are read from ROUTINE_ENGINE_* environment variables or a .env file
when a Settings object is constructed. Nothing here is instantiated at import
time; the hosting process builds Settings and passes it to compile_program.
"""

from loguru import logger
from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from routine_engine.planning.invariants import (
    BALANCED_MAX_SPREAD,
    COVERAGE_FLOOR_PCT,
    DOMINANCE_CEILING_PCT,
    MAX_RECOMMENDATIONS,
    MODERATE_MAX_SPREAD,
    PRIMARY_WEIGHT,
    SECONDARY_WEIGHT,
    TERTIARY_WEIGHT,
)
from routine_engine.planning.library.analysis_profile import BalanceThresholds, MuscleRoleWeights


class Settings(BaseSettings):
    log_level: str = Field(default="INFO")
    log_file: str | None = Field(default=None, description="Rotating log file; console only when unset")
    log_rotation: str = Field(default="10 MB")
    log_retention: str = Field(default="7 days")

    primary_weight: float = Field(default=PRIMARY_WEIGHT, ge=0)
    secondary_weight: float = Field(default=SECONDARY_WEIGHT, ge=0)
    tertiary_weight: float = Field(default=TERTIARY_WEIGHT, ge=0)

    balanced_max_spread: float = Field(default=BALANCED_MAX_SPREAD, ge=0)
    moderate_max_spread: float = Field(default=MODERATE_MAX_SPREAD, ge=0)
    coverage_floor_pct: float = Field(default=COVERAGE_FLOOR_PCT, ge=0, le=100)
    dominance_ceiling_pct: float = Field(default=DOMINANCE_CEILING_PCT, ge=0, le=100)
    max_recommendations: int = Field(default=MAX_RECOMMENDATIONS, ge=0)

    strict_validation: bool = Field(
        default=False,
        description="Abort on the first malformed pool entry instead of skipping it",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="ROUTINE_ENGINE_",
        extra="ignore",
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Validate that log level is one of the standard logging levels."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        upper_value = value.upper()
        if upper_value not in valid_levels:
            logger.warning(f"Invalid LOG_LEVEL '{value}'. Valid levels are: {', '.join(sorted(valid_levels))}. Defaulting to INFO.")
            return "INFO"
        return upper_value

    @model_validator(mode="after")
    def validate_threshold_order(self) -> "Settings":
        """Reject thresholds the balance analyzer cannot classify with."""
        if self.moderate_max_spread < self.balanced_max_spread:
            raise ValueError("moderate_max_spread must be >= balanced_max_spread")
        if self.coverage_floor_pct > self.dominance_ceiling_pct:
            raise ValueError("coverage_floor_pct must be <= dominance_ceiling_pct")
        return self

    def role_weights(self) -> MuscleRoleWeights:
        return MuscleRoleWeights(
            primary=self.primary_weight,
            secondary=self.secondary_weight,
            tertiary=self.tertiary_weight,
        )

    def balance_thresholds(self) -> BalanceThresholds:
        return BalanceThresholds(
            balanced_max_spread=self.balanced_max_spread,
            moderate_max_spread=self.moderate_max_spread,
            coverage_floor_pct=self.coverage_floor_pct,
            dominance_ceiling_pct=self.dominance_ceiling_pct,
            max_recommendations=self.max_recommendations,
        )
