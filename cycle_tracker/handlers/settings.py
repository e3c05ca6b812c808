"""
Lambda handler for manual cycle settings.
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
    Update last cycle start and/or average cycle length.

    The body is ``{user_id, last_cycle_start?, average_cycle_length?}``;
    out-of-range lengths are clamped rather than rejected.
    """
    try:
        body = parse_body(event)
        user_id = body.get("user_id")
        if not user_id:
            return error_response(400, "Missing user_id")

        last_cycle_start = body.get("last_cycle_start")
        cycle_model = CycleTracker(DynamoEntryStore()).update_settings(
            str(user_id),
            last_cycle_start=date.fromisoformat(last_cycle_start) if last_cycle_start else None,
            average_cycle_length=body.get("average_cycle_length")
        )

        return response(200, {"cycle": cycle_model.model_dump(mode="json")})

    except (ValueError, TypeError) as e:
        return error_response(400, f"Invalid settings: {str(e)}")
    except Exception:
        logger.exception("Failed to update cycle settings")
        return error_response(500, "Failed to update cycle settings")
