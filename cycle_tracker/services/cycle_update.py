"""
Service module for updating the cycle model when cycle starts are logged.

Users often flag several consecutive days as cycle-start days. Only the first
flag of such a run is a new cycle; later ones continue it and leave the model
alone.

Typical usage:
    recorded = [e.date for e in entries if e.is_cycle_start]
    model, started = apply_cycle_start(model, entry.date, recorded)
"""
from typing import Any, Iterable, Optional, Tuple
from datetime import date

from aws_lambda_powertools import Logger

from cycle_tracker.models.cycle import CycleModel
from cycle_tracker.services.constants import (
    CYCLE_START_DEDUP_WINDOW_DAYS,
    DEFAULT_CYCLE_LENGTH,
    MAX_CYCLE_LENGTH,
    MIN_CYCLE_LENGTH
)
from cycle_tracker.services.refiner import refine_cycle_length

logger = Logger()


def is_continuation_of_recent_start(
    start_date: date,
    recorded_starts: Iterable[date],
    window_days: int = CYCLE_START_DEDUP_WINDOW_DAYS
) -> bool:
    """
    Check if a cycle-start flag continues one recorded shortly before it.

    A recorded start counts when it is strictly earlier than ``start_date``
    and at most ``window_days`` days before it.

    Example:
        >>> is_continuation_of_recent_start(date(2024, 1, 4), [date(2024, 1, 1)])
        True
        >>> is_continuation_of_recent_start(date(2024, 1, 11), [date(2024, 1, 1)])
        False
    """
    return any(
        0 < (start_date - recorded).days <= window_days
        for recorded in recorded_starts
    )


def apply_cycle_start(
    cycle_model: CycleModel,
    start_date: date,
    recorded_starts: Iterable[date] = ()
) -> Tuple[CycleModel, bool]:
    """
    Apply a cycle-start flag logged on ``start_date``.

    Args:
        cycle_model: Current cycle model
        start_date: Date of the entry flagged as a cycle start
        recorded_starts: Cycle-start dates already logged, excluding this
            save; the model history is always taken into account as well

    Returns:
        Tuple containing:
        - Updated cycle model (the same instance when nothing changed)
        - Whether a new cycle start was recorded
    """
    known_starts = set(recorded_starts) | cycle_model.history

    if is_continuation_of_recent_start(start_date, known_starts):
        logger.info("Cycle-start flag continues a recent cycle start", extra={
            "start_date": start_date.isoformat(),
            "last_cycle_start": str(cycle_model.last_cycle_start)
        })
        return cycle_model, False

    history = cycle_model.history | {start_date}
    average_cycle_length = refine_cycle_length(history, cycle_model.average_cycle_length)

    updated = cycle_model.model_copy(update={
        "history": history,
        "last_cycle_start": max(history),
        "average_cycle_length": average_cycle_length
    })

    logger.info("Recorded new cycle start", extra={
        "start_date": start_date.isoformat(),
        "history_size": len(history),
        "previous_length": cycle_model.average_cycle_length,
        "average_cycle_length": average_cycle_length
    })
    return updated, True


def clamp_cycle_length(value: Any) -> int:
    """
    Coerce user input into a valid cycle length.

    Non-numeric input falls back to the default length; numbers are clamped
    into the plausible range.

    Example:
        >>> clamp_cycle_length("45")
        40
        >>> clamp_cycle_length("")
        28
    """
    try:
        length = int(value)
    except (TypeError, ValueError, OverflowError):
        return DEFAULT_CYCLE_LENGTH
    if length == 0:
        return DEFAULT_CYCLE_LENGTH
    return max(MIN_CYCLE_LENGTH, min(MAX_CYCLE_LENGTH, length))


def update_cycle_settings(
    cycle_model: CycleModel,
    last_cycle_start: Optional[date] = None,
    average_cycle_length: Optional[Any] = None
) -> CycleModel:
    """
    Apply manually entered cycle settings.

    Args:
        cycle_model: Current cycle model
        last_cycle_start: Manually entered most recent cycle start
        average_cycle_length: Manually entered length, clamped into range

    Returns:
        Updated cycle model
    """
    update = {}
    if average_cycle_length is not None:
        update["average_cycle_length"] = clamp_cycle_length(average_cycle_length)
    if last_cycle_start is not None:
        update["last_cycle_start"] = last_cycle_start
        update["history"] = cycle_model.history | {last_cycle_start}

    if not update:
        return cycle_model

    logger.info("Updated cycle settings", extra={
        key: str(value) for key, value in update.items() if key != "history"
    })
    return cycle_model.model_copy(update=update)
