"""AWS Lambda binding for the relay, fed by an API Gateway proxy integration."""

from __future__ import annotations

import base64
import logging
from typing import Any

from app.config import require_settings, settings
from app.relay.handler import RelayHandler, build_relay_handler

logging.basicConfig(level=getattr(logging, settings.log_level.upper(), logging.INFO))
logger = logging.getLogger("slack_relay")

_relay_handler: RelayHandler | None = None


def get_relay_handler() -> RelayHandler:
    # Built on the first invocation and reused while the container stays warm.
    global _relay_handler
    if _relay_handler is None:
        require_settings(settings)
        _relay_handler = build_relay_handler(settings)
    return _relay_handler


def _request_body(event: dict[str, Any]) -> str:
    body = event.get("body") or ""
    if event.get("isBase64Encoded"):
        return base64.b64decode(body).decode("utf-8")
    return body


def lambda_handler(event: dict[str, Any], context: Any) -> dict[str, Any]:
    handler = get_relay_handler()
    try:
        body = _request_body(event)
    except ValueError:
        logger.exception("Error decoding request body")
        return {"statusCode": 500, "headers": {}, "body": "invalid event payload"}

    result = handler.handle(body)
    return {
        "statusCode": result.status_code,
        "headers": {"Content-Type": "text/plain; charset=utf-8"},
        "body": result.body,
    }
