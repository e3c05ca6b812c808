"""
Lambda handler for saving daily log entries.
"""
from typing import Any, Dict

from aws_lambda_powertools.utilities.typing import LambdaContext
from pydantic import ValidationError

from cycle_tracker.handlers.responses import error_response, parse_body, response
from cycle_tracker.models.entry import LogEntry
from cycle_tracker.services.store import DynamoEntryStore
from cycle_tracker.services.tracker import CycleTracker
from cycle_tracker.utils.logging import logger


@logger.inject_lambda_context
def handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Save a log entry and update the cycle model.

    Args:
        event: API Gateway Lambda proxy event with body ``{user_id, entry}``
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response
    """
    try:
        body = parse_body(event)
        user_id = body.get("user_id")
        if not user_id or "entry" not in body:
            return error_response(400, "Missing user_id or entry")

        entry = LogEntry(**body["entry"])
        result = CycleTracker(DynamoEntryStore()).save_entry(str(user_id), entry)

        return response(200, {
            "entry": result.entry.model_dump(mode="json"),
            "cycle": result.cycle_model.model_dump(mode="json"),
            "new_cycle_started": result.new_cycle_started
        })

    except (ValueError, TypeError, ValidationError) as e:
        logger.warning("Rejected log entry", extra={"error": str(e)})
        return error_response(400, f"Invalid log entry: {str(e)}")
    except Exception:
        logger.exception("Failed to save log entry")
        return error_response(500, "Failed to save log entry")
