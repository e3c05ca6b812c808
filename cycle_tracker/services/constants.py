"""
Constants and shared data for cycle estimation services.
"""
from cycle_tracker.models.phase import HormonalPhaseType, Phase

DEFAULT_CYCLE_LENGTH = 28

# Plausible physiological range for a single cycle, in days
MIN_CYCLE_LENGTH = 14
MAX_CYCLE_LENGTH = 40

# Ovulation is placed this many days before the end of the cycle
LUTEAL_PHASE_LENGTH = 14

MENSTRUAL_PHASE_DAYS = 5

# Cycle-start flags within this many days after a recorded start belong to it
CYCLE_START_DEDUP_WINDOW_DAYS = 7

PHASE_DETAILS = {
    HormonalPhaseType.MENSTRUAL: Phase(
        name=HormonalPhaseType.MENSTRUAL,
        label="Menstrual",
        description="Hormone levels are low. You might feel tired or need extra rest.",
        marker="🩸"
    ),
    HormonalPhaseType.FOLLICULAR: Phase(
        name=HormonalPhaseType.FOLLICULAR,
        label="Follicular",
        description="Estrogen is rising. You may feel energized and social.",
        marker="🌱"
    ),
    HormonalPhaseType.OVULATION: Phase(
        name=HormonalPhaseType.OVULATION,
        label="Ovulation",
        description="Estrogen peaks. You might feel confident and outgoing.",
        marker="✨"
    ),
    HormonalPhaseType.LUTEAL: Phase(
        name=HormonalPhaseType.LUTEAL,
        label="Luteal",
        description="Progesterone rises then falls. You might crave comfort or alone time.",
        marker="🌙"
    )
}
