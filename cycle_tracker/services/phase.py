"""
Service module for classifying cycle days into hormonal phases.

Phase boundaries follow a single rule: ovulation is placed 14 days before the
end of the cycle, menstruation covers days 1-5, and everything in between is
follicular or luteal.

Typical usage:
    >>> phase = classify_phase(10, 28)
    >>> print(f"{phase.marker} {phase.label}: {phase.description}")
"""
from typing import Optional
from datetime import date, timedelta

from cycle_tracker.models.cycle import CycleModel, CycleStatus
from cycle_tracker.models.phase import HormonalPhaseType, Phase
from cycle_tracker.services.constants import (
    LUTEAL_PHASE_LENGTH,
    MENSTRUAL_PHASE_DAYS,
    PHASE_DETAILS
)
from cycle_tracker.services.cycle_day import current_cycle_day, to_calendar_date


def ovulation_day(cycle_length: int) -> int:
    """
    Expected ovulation day for a cycle of the given length.

    Lengths of 14 or less give a non-positive day; see classify_phase.
    """
    return cycle_length - LUTEAL_PHASE_LENGTH


def determine_phase_type(cycle_day: int, cycle_length: int) -> HormonalPhaseType:
    """
    Map a cycle day to its phase type. First matching rule wins.

    Args:
        cycle_day: Day in the cycle (1-based)
        cycle_length: Cycle length in days

    Returns:
        Hormonal phase type

    Example:
        >>> determine_phase_type(14, 28)
        <HormonalPhaseType.OVULATION: 'ovulation'>
    """
    ovulation = ovulation_day(cycle_length)

    if 1 <= cycle_day <= MENSTRUAL_PHASE_DAYS:
        return HormonalPhaseType.MENSTRUAL
    if MENSTRUAL_PHASE_DAYS < cycle_day < ovulation:
        return HormonalPhaseType.FOLLICULAR
    if cycle_day in (ovulation, ovulation + 1):
        return HormonalPhaseType.OVULATION
    return HormonalPhaseType.LUTEAL


def classify_phase(cycle_day: Optional[int], cycle_length: int) -> Optional[Phase]:
    """
    Classify a cycle day into a hormonal phase with its display metadata.

    Cycles of 20 days or less have no follicular days. From 19 days down the
    ovulation window starts to overlap menstruation, and menstruation wins;
    at 14 days or less ovulation day is non-positive and every day after
    menstruation is luteal. These boundaries are kept as they are.

    Args:
        cycle_day: Day in the cycle (1-based), or None
        cycle_length: Cycle length in days

    Returns:
        Phase, or None when no cycle day is known
    """
    if not cycle_day:
        return None
    return PHASE_DETAILS[determine_phase_type(cycle_day, cycle_length)]


def get_current_phase(reference_date: date, cycle_model: CycleModel) -> Optional[Phase]:
    """
    Get the phase on ``reference_date``, or None if no cycle is established.

    Example:
        >>> model = CycleModel(last_cycle_start=date(2024, 1, 1))
        >>> get_current_phase(date(2024, 1, 3), model).label
        'Menstrual'
    """
    cycle_day = current_cycle_day(reference_date, cycle_model)
    return classify_phase(cycle_day, cycle_model.average_cycle_length)


def get_cycle_status(reference_date: date, cycle_model: CycleModel) -> CycleStatus:
    """
    Build the display projection for ``reference_date``.

    Args:
        reference_date: Date to report on, usually today
        cycle_model: Current cycle model

    Returns:
        CycleStatus; cycle_day, phase and next_cycle_start are None when no
        cycle start has been recorded
    """
    reference_date = to_calendar_date(reference_date)
    cycle_length = cycle_model.average_cycle_length
    cycle_day = current_cycle_day(reference_date, cycle_model)

    next_cycle_start = None
    if cycle_day is not None:
        next_cycle_start = reference_date + timedelta(days=cycle_length - cycle_day + 1)

    return CycleStatus(
        cycle_day=cycle_day,
        phase=classify_phase(cycle_day, cycle_length),
        cycle_length=cycle_length,
        last_cycle_start=cycle_model.last_cycle_start,
        next_cycle_start=next_cycle_start
    )
