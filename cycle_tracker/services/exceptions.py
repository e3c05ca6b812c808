"""
Service-level exceptions.

Cycle computations themselves never raise for degenerate data; these cover
the collaborators around them.
"""

class CycleTrackerError(Exception):
    """Base exception for cycle tracker errors."""
    pass

class EntryStoreError(CycleTrackerError):
    """Raised when entries or the cycle model cannot be read or written."""
    pass

class DataImportError(CycleTrackerError):
    """Raised when an exported data payload cannot be imported."""
    pass
