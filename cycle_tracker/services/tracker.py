"""
Cycle tracker service: saves daily log entries and keeps the cycle model in
step with them.

Typical usage:
    tracker = CycleTracker(DynamoEntryStore())
    result = tracker.save_entry(user_id, LogEntry(date=date.today(), is_cycle_start=True))
    status = tracker.get_status(user_id)
"""
import threading
from typing import Any, Dict, List, Optional
from datetime import date

from aws_lambda_powertools import Logger
from pydantic import BaseModel

from cycle_tracker.models.cycle import CycleModel, CycleStatus
from cycle_tracker.models.entry import LogEntry
from cycle_tracker.services.cycle_day import current_cycle_day
from cycle_tracker.services.cycle_update import apply_cycle_start, update_cycle_settings
from cycle_tracker.services.export import export_user_data, import_user_data
from cycle_tracker.services.phase import get_cycle_status
from cycle_tracker.services.store import EntryStore

logger = Logger()


class SaveResult(BaseModel):
    """Outcome of saving a log entry."""
    entry: LogEntry
    cycle_model: CycleModel
    new_cycle_started: bool = False


class CycleTracker:
    """
    Service for logging entries against a store.

    Saving an entry reads the cycle model, derives a new one and writes both
    back. That read-modify-write runs under a lock so concurrent saves in one
    process cannot interleave.
    """

    def __init__(self, store: EntryStore):
        self.store = store
        self._lock = threading.Lock()

    def save_entry(self, user_id: str, entry: LogEntry) -> SaveResult:
        """
        Save a daily log entry and update the cycle model if it starts a cycle.

        Args:
            user_id: Owner of the entry
            entry: Entry to save; an existing entry for the same date is replaced

        Returns:
            SaveResult with the stored entry (stamped with its cycle day) and
            the resulting cycle model

        Raises:
            EntryStoreError: If the store cannot be read or written
        """
        with self._lock:
            cycle_model = self.store.get_cycle_model(user_id)
            prior_entries = self.store.get_entries(user_id)

            stamped = entry.model_copy(update={
                "cycle_day": current_cycle_day(entry.date, cycle_model) or 1
            })
            self.store.put_entry(user_id, stamped)

            new_cycle_started = False
            if stamped.is_cycle_start:
                recorded_starts = [
                    e.date for e in prior_entries
                    if e.is_cycle_start and e.date != stamped.date
                ]
                cycle_model, new_cycle_started = apply_cycle_start(
                    cycle_model, stamped.date, recorded_starts
                )
                if new_cycle_started:
                    self.store.put_cycle_model(user_id, cycle_model)

            logger.info("Saved log entry", extra={
                "user_id": user_id,
                "date": stamped.date.isoformat(),
                "cycle_day": stamped.cycle_day,
                "is_cycle_start": stamped.is_cycle_start,
                "new_cycle_started": new_cycle_started
            })

            return SaveResult(
                entry=stamped,
                cycle_model=cycle_model,
                new_cycle_started=new_cycle_started
            )

    def update_settings(
        self,
        user_id: str,
        last_cycle_start: Optional[date] = None,
        average_cycle_length: Optional[Any] = None
    ) -> CycleModel:
        """Persist manually entered cycle settings and return the new model."""
        with self._lock:
            cycle_model = update_cycle_settings(
                self.store.get_cycle_model(user_id),
                last_cycle_start=last_cycle_start,
                average_cycle_length=average_cycle_length
            )
            self.store.put_cycle_model(user_id, cycle_model)
            return cycle_model

    def get_entries(self, user_id: str) -> List[LogEntry]:
        """Return all entries of a user ordered by date."""
        return self.store.get_entries(user_id)

    def get_cycle_model(self, user_id: str) -> CycleModel:
        """Return the current cycle model of a user."""
        return self.store.get_cycle_model(user_id)

    def get_status(self, user_id: str, reference_date: Optional[date] = None) -> CycleStatus:
        """
        Get cycle day and phase for a user.

        Args:
            user_id: User to report on
            reference_date: Date to report on, defaults to today

        Returns:
            CycleStatus projection of the stored cycle model
        """
        if reference_date is None:
            reference_date = date.today()
        return get_cycle_status(reference_date, self.store.get_cycle_model(user_id))

    def export_data(self, user_id: str) -> Dict[str, Any]:
        """Export all entries and the cycle model of a user."""
        return export_user_data(
            self.store.get_entries(user_id),
            self.store.get_cycle_model(user_id)
        )

    def import_data(self, user_id: str, payload: Dict[str, Any]) -> CycleModel:
        """
        Import an export document, replacing the user's cycle model.

        Imported entries overwrite existing entries logged on the same dates.

        Raises:
            DataImportError: If the document is malformed
        """
        entries, cycle_model = import_user_data(payload)
        with self._lock:
            for entry in entries:
                self.store.put_entry(user_id, entry)
            self.store.put_cycle_model(user_id, cycle_model)
        return cycle_model
