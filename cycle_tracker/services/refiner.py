"""
Service module for refining the expected cycle length from history.

Typical usage:
    model = tracker.get_cycle_model(user_id)
    length = refine_cycle_length(model.history, model.average_cycle_length)
"""
from typing import Iterable, List
from datetime import date

from aws_lambda_powertools import Logger

from cycle_tracker.services.constants import MAX_CYCLE_LENGTH, MIN_CYCLE_LENGTH

logger = Logger()


def cycle_intervals(history: Iterable[date]) -> List[int]:
    """
    Days between consecutive cycle starts, oldest first.

    Example:
        >>> cycle_intervals([date(2024, 1, 29), date(2024, 1, 1)])
        [28]
    """
    starts = sorted(set(history))
    return [(current - previous).days for previous, current in zip(starts, starts[1:])]


def is_plausible_interval(days: int) -> bool:
    """Check if an interval could be a single real cycle."""
    return MIN_CYCLE_LENGTH <= days <= MAX_CYCLE_LENGTH


def round_half_up_mean(values: List[int]) -> int:
    """Arithmetic mean of integers, rounded half up."""
    return (2 * sum(values) + len(values)) // (2 * len(values))


def refine_cycle_length(history: Iterable[date], fallback: int) -> int:
    """
    Recompute the average cycle length from cycle-start history.

    Intervals outside the plausible range (missed logging, skipped cycles,
    data errors) are discarded instead of being averaged in.

    Args:
        history: Cycle-start dates, in any order
        fallback: Length to keep when history cannot support a new estimate

    Returns:
        Mean of the plausible intervals rounded half up, or ``fallback``
        when there are fewer than two starts or no plausible interval
    """
    starts = sorted(set(history))
    if len(starts) < 2:
        logger.info("Not enough cycle history to refine length", extra={
            "history_size": len(starts),
            "fallback": fallback
        })
        return fallback

    intervals = cycle_intervals(starts)
    plausible = [days for days in intervals if is_plausible_interval(days)]

    if len(plausible) < len(intervals):
        logger.debug("Discarded implausible cycle intervals", extra={
            "discarded": [days for days in intervals if not is_plausible_interval(days)]
        })

    if not plausible:
        logger.info("No plausible cycle intervals in history", extra={
            "history_size": len(starts),
            "intervals": intervals,
            "fallback": fallback
        })
        return fallback

    return round_half_up_mean(plausible)
