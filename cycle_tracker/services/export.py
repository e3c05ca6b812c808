"""
Export and import of a user's tracker data as a JSON-ready document.

Typical usage:
    payload = export_user_data(tracker.get_entries(user_id), tracker.get_cycle_model(user_id))
    json.dumps(payload)
    entries, model = import_user_data(json.loads(raw))
"""
from typing import Any, Dict, Iterable, List, Tuple
from datetime import datetime, timezone

from aws_lambda_powertools import Logger
from pydantic import ValidationError

from cycle_tracker.models.cycle import CycleModel
from cycle_tracker.models.entry import LogEntry
from cycle_tracker.services.exceptions import DataImportError

logger = Logger()

EXPORT_FORMAT_VERSION = 1


def export_user_data(entries: Iterable[LogEntry], cycle_model: CycleModel) -> Dict[str, Any]:
    """
    Build an export document with ISO-8601 dates.

    Returns:
        Dictionary containing:
        - version: Export format version
        - exported_at: UTC timestamp of the export
        - cycle: Serialized cycle model
        - entries: Serialized entries ordered by date
    """
    ordered = sorted(entries, key=lambda e: e.date)
    return {
        "version": EXPORT_FORMAT_VERSION,
        "exported_at": datetime.now(timezone.utc).isoformat(),
        "cycle": cycle_model.model_dump(mode="json"),
        "entries": [entry.model_dump(mode="json") for entry in ordered]
    }


def import_user_data(payload: Dict[str, Any]) -> Tuple[List[LogEntry], CycleModel]:
    """
    Validate an export document and rebuild entries and cycle model.

    Entries sharing a date keep the last occurrence.

    Raises:
        DataImportError: If the document is malformed or of an unknown version
    """
    if not isinstance(payload, dict):
        raise DataImportError("Import payload must be an object")

    version = payload.get("version", EXPORT_FORMAT_VERSION)
    if version != EXPORT_FORMAT_VERSION:
        raise DataImportError(f"Unsupported export version: {version}")

    try:
        cycle_model = CycleModel(**(payload.get("cycle") or {}))
        by_date = {}
        for raw_entry in payload.get("entries") or []:
            entry = LogEntry(**raw_entry)
            by_date[entry.date] = entry
    except (TypeError, ValidationError) as e:
        logger.warning("Rejected import payload", extra={"error": str(e)})
        raise DataImportError(f"Invalid import payload: {str(e)}")

    entries = [by_date[d] for d in sorted(by_date)]
    logger.info("Imported tracker data", extra={
        "entries": len(entries),
        "history_size": len(cycle_model.history)
    })
    return entries, cycle_model
