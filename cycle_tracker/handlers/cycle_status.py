"""
Lambda handler for current cycle day and phase.
"""
from datetime import date
from typing import Any, Dict

from aws_lambda_powertools.utilities.typing import LambdaContext

from cycle_tracker.handlers.responses import error_response, parse_body, response
from cycle_tracker.services.store import DynamoEntryStore
from cycle_tracker.services.tracker import CycleTracker
from cycle_tracker.utils.logging import logger


@logger.inject_lambda_context
def handler(event: Dict[str, Any], context: LambdaContext) -> Dict[str, Any]:
    """
    Report cycle day and hormonal phase for a date.

    Args:
        event: API Gateway Lambda proxy event with body ``{user_id, date?}``
        context: Lambda context

    Returns:
        API Gateway Lambda proxy response; ``cycle_day`` and ``phase`` are
        null when no cycle start has been recorded yet
    """
    try:
        body = parse_body(event)
        user_id = body.get("user_id")
        if not user_id:
            return error_response(400, "Missing user_id")

        reference_date = date.fromisoformat(body["date"]) if body.get("date") else None
        status = CycleTracker(DynamoEntryStore()).get_status(str(user_id), reference_date)

        return response(200, status.model_dump(mode="json"))

    except (ValueError, TypeError) as e:
        return error_response(400, f"Invalid request: {str(e)}")
    except Exception:
        logger.exception("Failed to get cycle status")
        return error_response(500, "Failed to get cycle status")
