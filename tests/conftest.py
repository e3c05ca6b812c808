"""
Pytest configuration and shared fixtures.
"""
import pytest
from dataclasses import dataclass
from datetime import date, timedelta
from typing import List, Optional

from cycle_tracker.models.cycle import CycleModel
from cycle_tracker.models.entry import LogEntry
from cycle_tracker.services.store import InMemoryEntryStore
from cycle_tracker.services.tracker import CycleTracker

@pytest.fixture
def regular_history() -> List[date]:
    """Cycle starts exactly 28 days apart."""
    return [date(2024, 1, 1) + timedelta(days=i*28) for i in range(4)]

@pytest.fixture
def irregular_history() -> List[date]:
    """Cycle starts with varying but plausible intervals."""
    return [
        date(2024, 1, 1),
        date(2024, 1, 25),  # 24 days
        date(2024, 2, 25),  # 31 days
        date(2024, 3, 22)   # 26 days
    ]

@pytest.fixture
def established_model() -> CycleModel:
    """Cycle model with a single recorded start."""
    return CycleModel(
        average_cycle_length=28,
        last_cycle_start=date(2024, 1, 1),
        history={date(2024, 1, 1)}
    )

@pytest.fixture
def store() -> InMemoryEntryStore:
    """Empty in-memory entry store."""
    return InMemoryEntryStore()

@pytest.fixture
def tracker(store) -> CycleTracker:
    """Cycle tracker over the in-memory store."""
    return CycleTracker(store)

@pytest.fixture
def onset_entries() -> List[LogEntry]:
    """Five consecutive days flagged as cycle start, as users usually log them."""
    return [
        LogEntry(date=date(2024, 3, 1) + timedelta(days=offset), is_cycle_start=True, flow_heaviness="medium")
        for offset in range(5)
    ]

@dataclass
class FakeLambdaContext:
    """Minimal Lambda context for handler tests."""
    function_name: str = "cycle-tracker-test"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = "arn:aws:lambda:us-east-1:123456789012:function:cycle-tracker-test"
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"
    tenant_id: Optional[str] = None

@pytest.fixture
def lambda_context() -> FakeLambdaContext:
    """Lambda context stand-in."""
    return FakeLambdaContext()
