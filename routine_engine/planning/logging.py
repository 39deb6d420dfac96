"""Routine Engine Observability.

This module provides logging for invariant failures and discarded pool entries.
Call log_planning_invariant_failure before re-raising PlanningInvariantError.
"""

from loguru import logger

from routine_engine.planning.errors import PlanningInvariantError, ValidationError


def log_planning_invariant_failure(err: PlanningInvariantError, context: dict[str, str | int | float | bool | None]) -> None:
    """Log a planning invariant failure with context.

    Args:
        err: The PlanningInvariantError that occurred
        context: Additional context dictionary for logging
    """
    logger.error(
        "PLANNING_INVARIANT_FAILED",
        code=err.code,
        details=err.details,
        **context,
    )


def log_discarded_entry(err: ValidationError) -> None:
    """Log a pool entry skipped by lenient normalization.

    Args:
        err: The ValidationError that caused the entry to be skipped
    """
    logger.warning(
        "Pool entry discarded",
        code=err.code,
        details=err.details,
        pool_index=err.index,
    )
