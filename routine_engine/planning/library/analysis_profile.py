"""Analysis Profile - Tunables, Not Magic Numbers.

Muscle role weights and balance thresholds are inferred defaults.
They live here as frozen objects so that callers can override them
without touching the aggregation or balance algorithms.
"""

from dataclasses import dataclass

from routine_engine.planning.errors import ConfigurationError
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


@dataclass(frozen=True)
class MuscleRoleWeights:
    """Multipliers applied to prescribed sets per muscle role.

    Attributes:
        primary: Weight for primary muscles
        secondary: Weight for secondary muscles
        tertiary: Weight for tertiary muscles
    """

    primary: float = PRIMARY_WEIGHT
    secondary: float = SECONDARY_WEIGHT
    tertiary: float = TERTIARY_WEIGHT

    def __post_init__(self) -> None:
        negative = [
            f"{role} weight must be >= 0, got {value}"
            for role, value in (("primary", self.primary), ("secondary", self.secondary), ("tertiary", self.tertiary))
            if value < 0
        ]
        if negative:
            raise ConfigurationError("INVALID_TUNABLES", negative)


@dataclass(frozen=True)
class BalanceThresholds:
    """Balance classification and recommendation bounds.

    Attributes:
        balanced_max_spread: Largest spread (percentage points) still classified as balanced
        moderate_max_spread: Largest spread still classified as moderately imbalanced
        coverage_floor_pct: Muscles below this share of total volume get an "increase" recommendation
        dominance_ceiling_pct: Muscles above this share get a "reduce" recommendation
        max_recommendations: Cap on emitted recommendations
    """

    balanced_max_spread: float = BALANCED_MAX_SPREAD
    moderate_max_spread: float = MODERATE_MAX_SPREAD
    coverage_floor_pct: float = COVERAGE_FLOOR_PCT
    dominance_ceiling_pct: float = DOMINANCE_CEILING_PCT
    max_recommendations: int = MAX_RECOMMENDATIONS

    def __post_init__(self) -> None:
        errors: list[str] = []
        if self.balanced_max_spread < 0:
            errors.append(f"balanced_max_spread must be >= 0, got {self.balanced_max_spread}")
        if self.moderate_max_spread < self.balanced_max_spread:
            errors.append(
                f"moderate_max_spread ({self.moderate_max_spread}) must be >= balanced_max_spread ({self.balanced_max_spread})"
            )
        if not 0 <= self.coverage_floor_pct <= self.dominance_ceiling_pct <= 100:
            errors.append(
                "expected 0 <= coverage_floor_pct <= dominance_ceiling_pct <= 100, "
                f"got {self.coverage_floor_pct} and {self.dominance_ceiling_pct}"
            )
        if self.max_recommendations < 0:
            errors.append(f"max_recommendations must be >= 0, got {self.max_recommendations}")
        if errors:
            raise ConfigurationError("INVALID_TUNABLES", errors)


DEFAULT_ROLE_WEIGHTS = MuscleRoleWeights()
DEFAULT_BALANCE_THRESHOLDS = BalanceThresholds()
