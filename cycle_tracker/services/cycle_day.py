"""
Service module for locating a date within the current cycle.

Typical usage:
    model = tracker.get_cycle_model(user_id)
    cycle_day = current_cycle_day(date.today(), model)
    if cycle_day is None:
        print("No cycle established yet")
"""
from typing import Optional, Union
from datetime import date, datetime

from cycle_tracker.models.cycle import CycleModel


def to_calendar_date(value: Union[date, datetime]) -> date:
    """Drop any time-of-day component so day counts use calendar days."""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_between(start: Union[date, datetime], end: Union[date, datetime]) -> int:
    """
    Whole calendar days from ``start`` to ``end`` (negative if ``end`` is earlier).

    Example:
        >>> days_between(date(2024, 1, 1), datetime(2024, 1, 2, 0, 30))
        1
    """
    return (to_calendar_date(end) - to_calendar_date(start)).days


def current_cycle_day(
    reference_date: Union[date, datetime],
    cycle_model: CycleModel
) -> Optional[int]:
    """
    Calculate the 1-based day of the cycle on ``reference_date``.

    The count wraps every ``average_cycle_length`` days, so a missed cycle-start
    log keeps producing a plausible position instead of an ever-growing number.

    Args:
        reference_date: Date (or datetime) to locate, usually today
        cycle_model: Current cycle model

    Returns:
        Cycle day in [1, average_cycle_length], or None if no cycle start
        has been recorded

    Example:
        >>> model = CycleModel(last_cycle_start=date(2024, 1, 1))
        >>> current_cycle_day(date(2024, 1, 15), model)
        15
    """
    if not cycle_model.is_established:
        return None

    days_since = days_between(cycle_model.last_cycle_start, reference_date)
    # Python's % already yields a non-negative remainder for a positive modulus
    return days_since % cycle_model.average_cycle_length + 1
