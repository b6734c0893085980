"""API Gateway proxy responses with CORS headers and DynamoDB-safe JSON."""

import json
from decimal import Decimal
from typing import Any

from core.config import Config
from core.errors import TripsError

ALLOWED_METHODS = "GET,POST,DELETE,OPTIONS"


def _json_default(value: Any) -> Any:
    # DynamoDB returns every number as Decimal
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def dumps(payload: Any) -> str:
    return json.dumps(payload, default=_json_default)


def cors_headers(config: Config) -> dict[str, str]:
    return {
        "Access-Control-Allow-Origin": config.cors_allow_origin,
        "Access-Control-Allow-Headers": "Content-Type",
        "Access-Control-Allow-Methods": ALLOWED_METHODS,
    }


def empty_response(headers: dict[str, str], status_code: int = 200) -> dict[str, Any]:
    return {"statusCode": status_code, "headers": dict(headers), "body": ""}


def json_response(status_code: int, payload: Any, headers: dict[str, str]) -> dict[str, Any]:
    return {
        "statusCode": status_code,
        "headers": {**headers, "Content-Type": "application/json"},
        "body": dumps(payload),
    }


def error_response(error: TripsError, headers: dict[str, str], distinct_status: bool = False) -> dict[str, Any]:
    """Render an error body. Every failure is a 500 unless ``distinct_status`` is set."""
    status_code = error.status_code if distinct_status else 500
    return json_response(status_code, {"error": error.message, "code": error.code.value}, headers)
