"""Balance Analyzer.

Classifies the muscular balance of a program from its weighted muscle
volumes and emits human-readable recommendations.

Classification (spread = top percentage - smallest non-zero percentage):
- balanced: spread <= balanced_max_spread (15 points by default)
- moderately_imbalanced: spread <= moderate_max_spread (30 points by default)
- imbalanced: otherwise

Recommendations:
- Below the coverage floor (5%): "Increase volume for <muscle> ..."
- Above the dominance ceiling (40%): "Reduce relative volume on <muscle> ..."
Ordered by deviation from the violated bound, largest first, and capped.
"""

from loguru import logger

from routine_engine.planning.library.analysis_profile import DEFAULT_BALANCE_THRESHOLDS, BalanceThresholds
from routine_engine.planning.schema.analysis import BalanceAnalysis, BalanceRating, SortedMuscle


def sort_muscles(volumes: dict[str, float]) -> list[SortedMuscle]:
    """Order muscles by descending volume with their share of total volume.

    Zero-volume muscles are dropped. Ties keep first-touch order.

    Args:
        volumes: Muscle name to weighted volume, first touch first

    Returns:
        List of SortedMuscle, most-trained first
    """
    trained = [(muscle, volume) for muscle, volume in volumes.items() if volume > 0]
    total = sum(volume for _, volume in trained)
    if total <= 0:
        return []

    ordered = sorted(trained, key=lambda item: -item[1])
    return [
        SortedMuscle(muscle=muscle, volume=volume, percentage=volume / total * 100)
        for muscle, volume in ordered
    ]


def classify_balance(
    sorted_muscles: list[SortedMuscle],
    thresholds: BalanceThresholds = DEFAULT_BALANCE_THRESHOLDS,
) -> tuple[BalanceRating, float]:
    """Classify overall balance.

    Args:
        sorted_muscles: Output of sort_muscles
        thresholds: Classification bounds

    Returns:
        (rating, spread in percentage points)
    """
    if not sorted_muscles:
        return BalanceRating.BALANCED, 0.0

    spread = sorted_muscles[0].percentage - sorted_muscles[-1].percentage

    if spread <= thresholds.balanced_max_spread:
        return BalanceRating.BALANCED, spread
    if spread <= thresholds.moderate_max_spread:
        return BalanceRating.MODERATELY_IMBALANCED, spread
    return BalanceRating.IMBALANCED, spread


def build_recommendations(
    sorted_muscles: list[SortedMuscle],
    thresholds: BalanceThresholds = DEFAULT_BALANCE_THRESHOLDS,
) -> list[str]:
    candidates: list[tuple[float, int, str]] = []

    for position, entry in enumerate(sorted_muscles):
        if entry.percentage < thresholds.coverage_floor_pct:
            candidates.append(
                (
                    thresholds.coverage_floor_pct - entry.percentage,
                    position,
                    f"Increase volume for {entry.muscle} ({entry.percentage:.1f}% of total volume)",
                )
            )
        elif entry.percentage > thresholds.dominance_ceiling_pct:
            candidates.append(
                (
                    entry.percentage - thresholds.dominance_ceiling_pct,
                    position,
                    f"Reduce relative volume on {entry.muscle} ({entry.percentage:.1f}% of total volume)",
                )
            )

    candidates.sort(key=lambda c: (-c[0], c[1]))

    if len(candidates) > thresholds.max_recommendations:
        logger.debug(
            "Recommendations capped",
            candidates=len(candidates),
            cap=thresholds.max_recommendations,
        )

    return [text for _, _, text in candidates[: thresholds.max_recommendations]]


def analyze_balance(
    volumes: dict[str, float],
    thresholds: BalanceThresholds = DEFAULT_BALANCE_THRESHOLDS,
) -> BalanceAnalysis:
    """Classify balance and build recommendations from program volumes.

    Args:
        volumes: Muscle name to weighted program volume
        thresholds: Classification and recommendation bounds

    Returns:
        BalanceAnalysis
    """
    sorted_muscles = sort_muscles(volumes)
    overall, spread = classify_balance(sorted_muscles, thresholds)

    return BalanceAnalysis(
        overall=overall,
        spread=round(spread, 4),
        recommendations=build_recommendations(sorted_muscles, thresholds),
    )
