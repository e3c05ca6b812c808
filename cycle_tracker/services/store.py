"""
Entry store service.

Holds the daily log entries (one per date) and the cycle model for each user.
Cycle estimation never talks to storage directly; the tracker service reads
from and writes to a store on its behalf.

Typical usage:
    store = DynamoEntryStore()
    entries = store.get_entries(user_id)
    model = store.get_cycle_model(user_id)
"""
from abc import ABC, abstractmethod
from decimal import Decimal
from typing import Any, Dict, List, Optional
from datetime import date

from aws_lambda_powertools import Logger
from boto3.dynamodb.conditions import Key

from cycle_tracker.models.cycle import CycleModel
from cycle_tracker.models.entry import LogEntry
from cycle_tracker.services.exceptions import EntryStoreError
from cycle_tracker.utils.dynamo import (
    CYCLE_MODEL_SK,
    create_entry_sk,
    create_pk,
    get_dynamo
)

logger = Logger()


class EntryStore(ABC):
    """Get/put access to a user's log entries and cycle model."""

    @abstractmethod
    def get_entries(self, user_id: str) -> List[LogEntry]:
        """Return all entries of a user ordered by date."""

    @abstractmethod
    def get_entry(self, user_id: str, entry_date: date) -> Optional[LogEntry]:
        """Return the entry for a date, if logged."""

    @abstractmethod
    def put_entry(self, user_id: str, entry: LogEntry) -> None:
        """Insert the entry, replacing any entry already logged for its date."""

    @abstractmethod
    def get_cycle_model(self, user_id: str) -> CycleModel:
        """Return the stored cycle model, or a default one for new users."""

    @abstractmethod
    def put_cycle_model(self, user_id: str, cycle_model: CycleModel) -> None:
        """Replace the stored cycle model."""


class InMemoryEntryStore(EntryStore):
    """Entry store kept in process memory."""

    def __init__(self):
        self._entries: Dict[str, Dict[date, LogEntry]] = {}
        self._cycle_models: Dict[str, CycleModel] = {}

    def get_entries(self, user_id: str) -> List[LogEntry]:
        entries = self._entries.get(user_id, {})
        return [entries[d] for d in sorted(entries)]

    def get_entry(self, user_id: str, entry_date: date) -> Optional[LogEntry]:
        return self._entries.get(user_id, {}).get(entry_date)

    def put_entry(self, user_id: str, entry: LogEntry) -> None:
        self._entries.setdefault(user_id, {})[entry.date] = entry

    def get_cycle_model(self, user_id: str) -> CycleModel:
        return self._cycle_models.get(user_id) or CycleModel()

    def put_cycle_model(self, user_id: str, cycle_model: CycleModel) -> None:
        self._cycle_models[user_id] = cycle_model


def _to_dynamo_value(value: Any) -> Any:
    """Convert floats to Decimal recursively; DynamoDB rejects float values."""
    if isinstance(value, float):
        return Decimal(str(value))
    if isinstance(value, dict):
        return {k: _to_dynamo_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_to_dynamo_value(v) for v in value]
    return value


def _from_dynamo_value(value: Any) -> Any:
    """Convert Decimal values returned by DynamoDB back to int or float."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, dict):
        return {k: _from_dynamo_value(v) for k, v in value.items()}
    if isinstance(value, list):
        return [_from_dynamo_value(v) for v in value]
    return value


class DynamoEntryStore(EntryStore):
    """Entry store backed by the tracker DynamoDB table."""

    def __init__(self):
        """Initialize entry store service."""
        self.dynamo = get_dynamo()

    def get_entries(self, user_id: str) -> List[LogEntry]:
        try:
            items = self.dynamo.query_items(
                partition_key="PK",
                partition_value=create_pk(user_id),
                sort_key_condition=Key("SK").begins_with("ENTRY#")
            )
        except Exception as e:
            logger.error("Error loading log entries", extra={
                "user_id": user_id,
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise EntryStoreError(f"Failed to load log entries: {str(e)}")

        entries = [self._entry_from_item(item) for item in items]
        return sorted(entries, key=lambda e: e.date)

    def get_entry(self, user_id: str, entry_date: date) -> Optional[LogEntry]:
        try:
            item = self.dynamo.get_item({
                "PK": create_pk(user_id),
                "SK": create_entry_sk(entry_date.isoformat())
            })
        except Exception as e:
            logger.error("Error loading log entry", extra={
                "user_id": user_id,
                "date": entry_date.isoformat(),
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise EntryStoreError(f"Failed to load log entry: {str(e)}")

        return self._entry_from_item(item) if item else None

    def put_entry(self, user_id: str, entry: LogEntry) -> None:
        try:
            self.dynamo.put_item(_to_dynamo_value({
                **entry.model_dump(mode="json"),
                "PK": create_pk(user_id),
                "SK": create_entry_sk(entry.date.isoformat())
            }))
        except Exception as e:
            logger.error("Error saving log entry", extra={
                "user_id": user_id,
                "date": entry.date.isoformat(),
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise EntryStoreError(f"Failed to save log entry: {str(e)}")

    def get_cycle_model(self, user_id: str) -> CycleModel:
        try:
            item = self.dynamo.get_item({
                "PK": create_pk(user_id),
                "SK": CYCLE_MODEL_SK
            })
        except Exception as e:
            logger.error("Error loading cycle model", extra={
                "user_id": user_id,
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise EntryStoreError(f"Failed to load cycle model: {str(e)}")

        if not item:
            logger.info("No cycle model stored, using defaults", extra={"user_id": user_id})
            return CycleModel()

        return CycleModel(
            average_cycle_length=int(item["average_cycle_length"]),
            last_cycle_start=item.get("last_cycle_start"),
            history=item.get("history", [])
        )

    def put_cycle_model(self, user_id: str, cycle_model: CycleModel) -> None:
        try:
            self.dynamo.put_item({
                "PK": create_pk(user_id),
                "SK": CYCLE_MODEL_SK,
                **cycle_model.model_dump(mode="json")
            })
        except Exception as e:
            logger.error("Error saving cycle model", extra={
                "user_id": user_id,
                "error": str(e),
                "error_type": e.__class__.__name__
            })
            raise EntryStoreError(f"Failed to save cycle model: {str(e)}")

    @staticmethod
    def _entry_from_item(item: Dict[str, Any]) -> LogEntry:
        fields = {k: v for k, v in item.items() if k not in ("PK", "SK")}
        return LogEntry(**_from_dynamo_value(fields))
