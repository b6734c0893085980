"""REST handler for /trips: GET lists, POST upserts, DELETE removes."""

import base64
import logging
from typing import Any

from core.config import get_config
from core.errors import InvalidInputError, TripsError, UnknownError
from core.http import cors_headers, empty_response, error_response, json_response
from core.services.trips import delete_trip, list_trips, list_trips_page, parse_limit, save_trip
from core.storage import get_trip_store

logger = logging.getLogger(__name__)

METHOD_NOT_ALLOWED = {"error": "Method not allowed"}
SUCCESS = {"success": True}


def _http_method(event: dict[str, Any]) -> str:
    http_context = (event.get("requestContext") or {}).get("http") or {}
    method = event.get("httpMethod") or http_context.get("method") or ""
    return method.upper()


def _request_body(event: dict[str, Any]) -> str | None:
    body = event.get("body")
    if body is not None and event.get("isBase64Encoded"):
        try:
            body = base64.b64decode(body).decode("utf-8")
        except ValueError as e:
            raise InvalidInputError("Request body is not valid base64") from e
    return body


def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    config = get_config()
    logging.getLogger().setLevel(config.log_level)

    headers = cors_headers(config)
    method = _http_method(event)

    if method == "OPTIONS":
        return empty_response(headers)
    if method not in ("GET", "POST", "DELETE"):
        return json_response(405, METHOD_NOT_ALLOWED, headers)

    try:
        store = get_trip_store()

        if method == "GET":
            params = event.get("queryStringParameters") or {}
            if "limit" not in params and "cursor" not in params:
                return json_response(200, list_trips(store), headers)
            limit = parse_limit(params.get("limit"), config.default_page_size, config.max_page_size)
            page = list_trips_page(store, limit, params.get("cursor"))
            return json_response(200, page.model_dump(), headers)

        if method == "POST":
            save_trip(store, _request_body(event))
            return json_response(201, SUCCESS, headers)

        delete_trip(store, _request_body(event))
        return json_response(200, SUCCESS, headers)
    except TripsError as e:
        logger.warning("%s /trips failed with %s: %s", method, e.code.value, e.message)
        return error_response(e, headers, distinct_status=config.distinct_error_status)
    except Exception as e:
        logger.exception("%s /trips failed", method)
        return error_response(UnknownError(str(e) or type(e).__name__), headers, distinct_status=config.distinct_error_status)
