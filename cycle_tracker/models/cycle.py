"""
Cycle model definition: the persisted state behind cycle estimation.
"""
from datetime import date
from typing import List, Optional, Set
from pydantic import BaseModel, Field, field_serializer, field_validator, model_validator

from cycle_tracker.models.phase import Phase


class CycleModel(BaseModel):
    """
    Last known cycle start, best-estimate cycle length and the history of
    observed cycle-start dates.

    Instances are treated as values: update workflows return a new model
    instead of mutating the one they were given.
    """
    average_cycle_length: int = Field(28, ge=14, le=40)
    last_cycle_start: Optional[date] = None
    history: Set[date] = Field(default_factory=set)

    @field_validator("history", mode="before")
    @classmethod
    def _empty_history(cls, value):
        return set() if value is None else value

    @model_validator(mode="after")
    def _last_start_in_history(self) -> "CycleModel":
        # last_cycle_start is always one of the recorded starts
        if self.last_cycle_start is not None:
            self.history = self.history | {self.last_cycle_start}
        return self

    @field_serializer("history")
    def _serialize_history(self, history: Set[date]) -> List[str]:
        return [d.isoformat() for d in sorted(history)]

    @field_serializer("last_cycle_start")
    def _serialize_last_cycle_start(self, value: Optional[date]) -> Optional[str]:
        return value.isoformat() if value else None

    @property
    def is_established(self) -> bool:
        """Check if there is a cycle to report on."""
        return self.last_cycle_start is not None


class CycleStatus(BaseModel):
    """
    Read-only projection of a cycle model on a given date, for display.
    """
    cycle_day: Optional[int] = None
    phase: Optional[Phase] = None
    cycle_length: int
    last_cycle_start: Optional[date] = None
    next_cycle_start: Optional[date] = None
