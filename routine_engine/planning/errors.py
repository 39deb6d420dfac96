"""Canonical Routine Engine Error Types.

This module defines the standard error types raised by the engine.
No raw ValueErrors or RuntimeErrors should escape - all failures use these types.

Standard error codes:
- MISSING_EXERCISE_ID: Pool entry has no exercise_id
- INVALID_EXERCISE_ID: Pool entry exercise_id is neither a string nor an integer
- NON_POSITIVE_SETS: Pool entry prescribes fewer than one set
- INVALID_ENTRY: Pool entry is not a mapping
- INVALID_FREQUENCY: Frequency is not an integer in [2, 7]
- INVALID_TUNABLES: Weights or balance thresholds are inconsistent
- INVALID_PARTITION: Generated routines violate a partition invariant
  (details: DAY_COUNT_MISMATCH, EXERCISE_MISSING, EXERCISE_DUPLICATED,
  DAY_SET_TOTAL_MISMATCH, SET_TOTAL_MISMATCH, DAY_COUNT_SPREAD)
"""


class ValidationError(ValueError):
    """Raised when a raw pool entry cannot be normalized.

    Attributes:
        code: Error code (e.g., "MISSING_EXERCISE_ID", "INVALID_EXERCISE_ID")
        details: List of error detail strings
        index: Position of the offending entry in the raw pool
    """

    def __init__(self, code: str, details: list[str], index: int | None = None):
        self.code = code
        self.details = details
        self.index = index
        location = f" (pool index {index})" if index is not None else ""
        super().__init__(f"{code}{location}: {details}")


class ConfigurationError(ValueError):
    """Raised when the caller supplies an invalid frequency or tunable.

    Attributes:
        code: Error code (e.g., "INVALID_FREQUENCY")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")


class PlanningInvariantError(RuntimeError):
    """Raised when a generated partition violates a routine invariant.

    Attributes:
        code: Error code (e.g., "INVALID_PARTITION")
        details: List of error detail strings
    """

    def __init__(self, code: str, details: list[str]):
        self.code = code
        self.details = details
        super().__init__(f"{code}: {details}")
