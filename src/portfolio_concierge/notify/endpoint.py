"""
Receiving side of the notify endpoint.

A framework-free handler for the POST /api/notify contract: wire it into
whatever web layer hosts the site. It only logs the lead; hook a real
email or SMS provider in behind it.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import BaseModel, ValidationError

logger = logging.getLogger(__name__)


class NotifyRequest(BaseModel):
    """Body of a notify POST."""

    message: str


def handle_notify(method: str, body: Any) -> tuple[int, dict[str, Any]]:
    """
    Handle one request to the notify endpoint.

    Args:
        method: HTTP method
        body: Parsed JSON body (dict) or raw JSON text

    Returns:
        (status_code, json_payload)
    """
    if method.upper() != "POST":
        return 405, {"message": "Method Not Allowed"}

    try:
        if isinstance(body, (str, bytes)):
            request = NotifyRequest.model_validate_json(body)
        else:
            request = NotifyRequest.model_validate(body)
    except ValidationError as e:
        logger.warning(f"Rejected notify request: {e.error_count()} validation error(s)")
        return 422, {"message": "Invalid notification body", "errors": e.errors(include_url=False)}

    logger.info(f"Received notification request: {request.message}")
    return 200, {"success": True}
