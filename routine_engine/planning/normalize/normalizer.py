"""Pool Normalizer - Canonical Shape Boundary.

Raw exercise pools arrive from the program-authoring collaborator in more
than one shape: a `muscle_groups` object with role lists, or the flat legacy
fields (`primary_muscle`, `secondary_muscles`, ...). This module resolves
every shape into ExercisePrescription once, so the partitioner and the
aggregator never branch on input shape.

Batch policy:
- Lenient (default): invalid entries are skipped, counted and logged
- Strict: the first invalid entry raises ValidationError
"""

import math
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any

from loguru import logger

from routine_engine.planning.errors import ValidationError
from routine_engine.planning.invariants import DEFAULT_REPS, DEFAULT_REST_SECONDS, DEFAULT_SETS
from routine_engine.planning.logging import log_discarded_entry
from routine_engine.planning.schema.exercise import ExercisePrescription, MuscleGroups

_ROLES = ("primary", "secondary", "tertiary")


@dataclass(frozen=True)
class NormalizationResult:
    """Outcome of normalizing a raw pool.

    Attributes:
        exercises: Normalized prescriptions, in raw pool order
        discarded: Number of raw entries skipped
        errors: One ValidationError per skipped entry
    """

    exercises: list[ExercisePrescription]
    discarded: int = 0
    errors: list[ValidationError] = field(default_factory=list)


def _coerce_int(value: Any) -> int | None:
    """Coerce a raw numeric field to int, or None if it is not numeric."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        try:
            return int(text)
        except ValueError:
            pass
        try:
            return _coerce_int(float(text))
        except ValueError:
            return None
    return None


def _muscle_list(value: Any) -> list[str]:
    """Lift a bare string or a list of names into a clean, deduplicated list."""
    if value is None:
        return []
    if isinstance(value, str):
        candidates: Iterable[Any] = [value]
    elif isinstance(value, Iterable) and not isinstance(value, Mapping):
        candidates = value
    else:
        return []

    muscles: list[str] = []
    for candidate in candidates:
        if not isinstance(candidate, str):
            continue
        name = candidate.strip()
        if name and name not in muscles:
            muscles.append(name)
    return muscles


def _normalize_muscle_groups(raw: Mapping[str, Any]) -> MuscleGroups:
    grouped = raw.get("muscle_groups")
    if not isinstance(grouped, Mapping):
        grouped = {}

    roles: dict[str, list[str]] = {}
    for role in _ROLES:
        muscles = _muscle_list(grouped.get(role))
        # Legacy flat fields only fill a role the grouped object left empty
        if not muscles:
            muscles = _muscle_list(raw.get(f"{role}_muscle")) or _muscle_list(raw.get(f"{role}_muscles"))
        roles[role] = muscles

    return MuscleGroups(**roles)


def normalize_entry(raw: Any, *, index: int = 0) -> ExercisePrescription:
    """Normalize one raw pool entry.

    Args:
        raw: Raw entry mapping from the authoring collaborator
        index: Position of the entry in the raw pool (for error reporting)

    Returns:
        Canonical ExercisePrescription

    Raises:
        ValidationError: If the entry is not a mapping, has no exercise_id,
            has an exercise_id that is not a string or integer, or prescribes
            fewer than one set
    """
    if not isinstance(raw, Mapping):
        raise ValidationError("INVALID_ENTRY", [f"expected a mapping, got {type(raw).__name__}"], index=index)

    exercise_id = raw.get("exercise_id")
    if exercise_id is None or (isinstance(exercise_id, str) and not exercise_id.strip()):
        raise ValidationError("MISSING_EXERCISE_ID", ["exercise_id is required"], index=index)
    if isinstance(exercise_id, bool) or not isinstance(exercise_id, (str, int)):
        raise ValidationError(
            "INVALID_EXERCISE_ID",
            [f"exercise_id must be a string or an integer, got {type(exercise_id).__name__}"],
            index=index,
        )

    sets = _coerce_int(raw.get("sets"))
    if sets is None:
        sets = DEFAULT_SETS
    elif sets < 1:
        raise ValidationError("NON_POSITIVE_SETS", [f"sets must be >= 1, got {raw.get('sets')!r}"], index=index)

    rest_seconds = _coerce_int(raw.get("rest_seconds"))
    if rest_seconds is None or rest_seconds < 0:
        rest_seconds = DEFAULT_REST_SECONDS

    reps = raw.get("reps")
    reps = DEFAULT_REPS if reps is None else str(reps)

    notes = raw.get("notes")
    if notes is not None:
        notes = str(notes).strip() or None

    return ExercisePrescription(
        exercise_id=exercise_id,
        sets=sets,
        reps=reps,
        rest_seconds=rest_seconds,
        notes=notes,
        muscle_groups=_normalize_muscle_groups(raw),
    )


def normalize_pool(raw_pool: Iterable[Any] | None, *, strict: bool = False) -> NormalizationResult:
    """Normalize a raw exercise pool, preserving order.

    Args:
        raw_pool: Raw pool entries (None is treated as empty)
        strict: Raise on the first invalid entry instead of skipping it

    Returns:
        NormalizationResult with the normalized exercises and the discard report

    Raises:
        ValidationError: In strict mode, for the first invalid entry
    """
    exercises: list[ExercisePrescription] = []
    errors: list[ValidationError] = []

    for index, raw in enumerate(raw_pool or []):
        try:
            exercises.append(normalize_entry(raw, index=index))
        except ValidationError as e:
            if strict:
                raise
            log_discarded_entry(e)
            errors.append(e)

    if errors:
        logger.info(
            "Pool normalized with discards",
            kept=len(exercises),
            discarded=len(errors),
        )

    return NormalizationResult(exercises=exercises, discarded=len(errors), errors=errors)
