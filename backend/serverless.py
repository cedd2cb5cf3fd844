"""
Serverless entry point for LearnSmart PDF Summarizer.

``handler(event, context)`` accepts an API-gateway style event and returns a
``{"statusCode", "headers", "body"}`` response with the same bodies as the
standalone server.
"""
import base64
import json
import logging
from typing import Any, Dict, Optional

from errors import MethodError, ValidationError
from models.summary import SummaryResult
from services.summarizer import SummarizationService

logger = logging.getLogger(__name__)

# Built on first invocation and reused while the host keeps the process warm
_service: Optional[SummarizationService] = None


def get_service() -> SummarizationService:
    global _service
    if _service is None:
        _service = SummarizationService()
    return _service


def _response(status_code: int, body: Dict[str, Any]) -> Dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json; charset=utf-8"},
        "body": json.dumps(body),
    }


def _event_method(event: Dict[str, Any]) -> Optional[str]:
    """HTTP method reported by the host, if any (REST and HTTP API formats)."""
    method = event.get("httpMethod")
    if method:
        return method
    request_context = event.get("requestContext") or {}
    return (request_context.get("http") or {}).get("method")


def _parse_body(event: Dict[str, Any]) -> Dict[str, Any]:
    """
    Decode the JSON request body.

    Raises:
        ValidationError: If the body is missing, not JSON, or not an object
    """
    body = event.get("body")
    if body is None:
        raise ValidationError()
    if isinstance(body, dict):
        return body

    try:
        if event.get("isBase64Encoded"):
            body = base64.b64decode(body)
        if isinstance(body, bytes):
            body = body.decode("utf-8")
        payload = json.loads(body)
    except (ValueError, TypeError) as e:
        raise ValidationError() from e

    if not isinstance(payload, dict):
        raise ValidationError()
    return payload


def handler(event: Dict[str, Any], context: Any = None) -> Dict[str, Any]:
    """Handle one summarize invocation."""
    method = _event_method(event)
    if method and method.upper() != "POST":
        logger.info(f"Rejected {method} request")
        return _response(MethodError.status_code, {"error": MethodError.public_message})

    try:
        payload = _parse_body(event)
    except ValidationError as e:
        logger.info("Rejected malformed summarize body")
        return _response(e.status_code, SummaryResult.failure(e).to_body())

    result = get_service().summarize(payload.get("text"))
    return _response(result.status_code, result.to_body())
