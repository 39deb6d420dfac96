"""Volume status classification for generated days.

Each day's total sets is compared with the mean across all days of the
program. Days strictly outside mean +/- one population standard deviation are
"low" or "high"; everything else is "balanced".
"""

import math

from routine_engine.planning.invariants import VOLUME_STATUS_BAND_SD
from routine_engine.planning.schema.routine import VolumeStatus


def classify_volume_status(day_sets: list[int]) -> list[VolumeStatus]:
    """Classify every day's set count against the program mean.

    Args:
        day_sets: Total sets per day, one entry per day (empty days included)

    Returns:
        VolumeStatus per day, in the same order
    """
    if not day_sets:
        return []

    mean = sum(day_sets) / len(day_sets)
    variance = sum((sets - mean) ** 2 for sets in day_sets) / len(day_sets)
    band = math.sqrt(variance) * VOLUME_STATUS_BAND_SD

    if band == 0:
        return [VolumeStatus.BALANCED for _ in day_sets]

    statuses: list[VolumeStatus] = []
    for sets in day_sets:
        if sets < mean - band:
            statuses.append(VolumeStatus.LOW)
        elif sets > mean + band:
            statuses.append(VolumeStatus.HIGH)
        else:
            statuses.append(VolumeStatus.BALANCED)
    return statuses
