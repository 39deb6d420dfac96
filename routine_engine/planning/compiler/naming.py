"""Routine focus labels.

Day routines are always named by ordinal ("Day 1" .. "Day N"). The focus
label is a display hint derived from the primary muscles placed on the day.
"""

from routine_engine.planning.invariants import DAY_NAME_TEMPLATE, REST_DAY_FOCUS
from routine_engine.planning.schema.exercise import ExercisePrescription

_CHEST_KEYWORDS = ("chest", "pec")
_BACK_KEYWORDS = ("dorsi", "trapezius", "back", "lats", "rhomboid")
_LEG_KEYWORDS = ("quadricep", "quads", "hamstring", "legs", "glute", "calves")
_SHOULDER_KEYWORDS = ("deltoid", "delts", "shoulder")


def day_name(day_index: int) -> str:
    return DAY_NAME_TEMPLATE.format(number=day_index + 1)


def _touches(muscles: list[str], keywords: tuple[str, ...]) -> bool:
    return any(keyword in muscle.lower() for muscle in muscles for keyword in keywords)


def suggest_routine_name(exercises: list[ExercisePrescription]) -> str:
    """Suggest a focus label from the primary muscles of a day's exercises.

    Args:
        exercises: Exercises placed on the day

    Returns:
        Focus label, e.g. "Chest & Push" or "Full Body"; "Rest" for an empty day
    """
    if not exercises:
        return REST_DAY_FOCUS

    muscles = list(dict.fromkeys(m for ex in exercises for m in ex.muscle_groups.primary))

    is_chest = _touches(muscles, _CHEST_KEYWORDS)
    is_back = _touches(muscles, _BACK_KEYWORDS)
    is_legs = _touches(muscles, _LEG_KEYWORDS)
    is_shoulders = _touches(muscles, _SHOULDER_KEYWORDS)

    if is_chest and not is_back and not is_legs:
        return "Chest & Push"
    if is_back and not is_chest and not is_legs:
        return "Back & Pull"
    if is_legs:
        return "Legs & Lower Body"
    if is_shoulders:
        return "Shoulders & Arms"
    return "Full Body"
