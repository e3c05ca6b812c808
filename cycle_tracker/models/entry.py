"""
Daily log entry model.
"""
from datetime import date as Date
from typing import Any, Optional
from pydantic import BaseModel, ConfigDict, Field, model_validator

# Storage key attributes; entries must never carry their own
RESERVED_KEYS = ("PK", "SK")


class LogEntry(BaseModel):
    """
    One day of logged observations.

    Only ``date`` and ``is_cycle_start`` matter to cycle estimation; every other
    field is carried through untouched, including unknown symptom keys.
    """
    model_config = ConfigDict(extra="allow", populate_by_name=True)

    date: Date
    is_cycle_start: bool = Field(False, alias="isCycleStart")
    flow_heaviness: Optional[str] = Field(None, alias="flowHeaviness")
    notes: Optional[str] = None
    cycle_day: Optional[int] = Field(None, ge=1, alias="cycleDay")

    @model_validator(mode="before")
    @classmethod
    def _reject_reserved_keys(cls, data: Any) -> Any:
        if isinstance(data, dict):
            reserved = [key for key in RESERVED_KEYS if key in data]
            if reserved:
                raise ValueError(f"Reserved keys not allowed in a log entry: {', '.join(reserved)}")
        return data
