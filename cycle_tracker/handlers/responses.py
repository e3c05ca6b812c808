"""
API Gateway proxy response helpers shared by the handlers.
"""
import json
from typing import Any, Dict


def parse_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """Return the decoded JSON body of a proxy event."""
    body = event.get("body") or {}
    if isinstance(body, str):
        body = json.loads(body)
    if not isinstance(body, dict):
        raise ValueError("Request body must be a JSON object")
    return body


def response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    """Build an API Gateway proxy response."""
    return {
        "statusCode": status_code,
        "body": json.dumps(body)
    }


def error_response(status_code: int, message: str) -> Dict[str, Any]:
    """Build an error response."""
    return response(status_code, {"error": message})
