"""Heatmap Builder.

Intensity is relative to the single most-trained muscle (not to total
volume), so the top muscle always renders at 1.0. Muscles with no volume
are omitted; consumers render them at zero intensity.
"""

from loguru import logger

from routine_engine.planning.analytics.body_regions import regions_for_muscle
from routine_engine.planning.schema.analysis import HeatmapEntry, RegionHeatmapEntry


def build_heatmap(volumes: dict[str, float]) -> list[HeatmapEntry]:
    """Normalize muscle volumes into [0, 1] intensities.

    Args:
        volumes: Muscle name to weighted program volume

    Returns:
        HeatmapEntry list, most intense first (ties keep first-touch order)
    """
    trained = [(muscle, volume) for muscle, volume in volumes.items() if volume > 0]
    if not trained:
        return []

    peak = max(volume for _, volume in trained)
    ordered = sorted(trained, key=lambda item: -item[1])

    return [
        HeatmapEntry(muscle=muscle, intensity=volume / peak, raw_volume=volume)
        for muscle, volume in ordered
    ]


def build_region_heatmap(volumes: dict[str, float]) -> list[RegionHeatmapEntry]:
    """Roll muscle volumes up into anatomical body-diagram regions.

    A muscle spanning several regions (e.g. "Back") contributes its full
    volume to each of them. Unmapped muscles are skipped.

    Args:
        volumes: Muscle name to weighted program volume

    Returns:
        RegionHeatmapEntry list, most intense first
    """
    region_volume: dict[str, float] = {}
    region_muscles: dict[str, list[str]] = {}
    unmapped: list[str] = []

    for muscle, volume in volumes.items():
        if volume <= 0:
            continue
        regions = regions_for_muscle(muscle)
        if not regions:
            unmapped.append(muscle)
            continue
        for region in regions:
            region_volume[region] = region_volume.get(region, 0.0) + volume
            region_muscles.setdefault(region, []).append(muscle)

    if unmapped:
        logger.debug("Muscles without a body region skipped", muscles=unmapped)

    if not region_volume:
        return []

    peak = max(region_volume.values())
    ordered = sorted(region_volume.items(), key=lambda item: -item[1])

    return [
        RegionHeatmapEntry(
            region=region,
            intensity=volume / peak,
            raw_volume=volume,
            muscles=region_muscles[region],
        )
        for region, volume in ordered
    ]
