"""
Phase model definition for hormonal cycle phases.
"""
from enum import Enum
from pydantic import BaseModel, ConfigDict


class HormonalPhaseType(str, Enum):
    """
    Hormonal phases of the cycle.
    """
    MENSTRUAL = "menstrual"
    FOLLICULAR = "follicular"
    OVULATION = "ovulation"
    LUTEAL = "luteal"


class Phase(BaseModel):
    """
    Display metadata for a hormonal phase.
    """
    model_config = ConfigDict(frozen=True)

    name: HormonalPhaseType
    label: str
    description: str
    marker: str
