"""Trip operations, one logical storage call per request."""

import base64
import json
import logging
from decimal import Decimal
from typing import Any

import pydantic

from core.errors import InvalidInputError
from core.models import TripKey, TripPage, TripRecord
from core.storage import TripStore

logger = logging.getLogger(__name__)


def _reject_constant(name: str) -> Any:
    raise InvalidInputError(f"Request body contains unsupported number {name}")


def parse_body(body: str | None) -> Any:
    """Parse a JSON request body. Floats become Decimal so DynamoDB accepts them."""
    try:
        return json.loads(body or "", parse_float=Decimal, parse_constant=_reject_constant)
    except json.JSONDecodeError as e:
        raise InvalidInputError(f"Request body is not valid JSON: {e}") from e


def _validation_message(error: pydantic.ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(part) for part in err['loc']) or 'body'}: {err['msg']}" for err in error.errors()
    )


def _parse_object(body: str | None, model: type[pydantic.BaseModel]) -> Any:
    data = parse_body(body)
    if not isinstance(data, dict):
        raise InvalidInputError("Request body must be a JSON object")
    try:
        return model.model_validate(data)
    except pydantic.ValidationError as e:
        raise InvalidInputError(_validation_message(e)) from e


def encode_cursor(last_key: dict[str, Any]) -> str:
    raw = json.dumps(last_key, separators=(",", ":"), sort_keys=True).encode()
    return base64.urlsafe_b64encode(raw).decode().rstrip("=")


def decode_cursor(cursor: str) -> dict[str, Any]:
    padded = cursor + "=" * (-len(cursor) % 4)
    try:
        key = json.loads(base64.urlsafe_b64decode(padded.encode()))
    except ValueError as e:
        raise InvalidInputError("cursor is not valid") from e

    if not isinstance(key, dict) or not isinstance(key.get("id"), str):
        raise InvalidInputError("cursor is not valid")
    return key


def parse_limit(raw: str | None, default: int, maximum: int) -> int:
    if raw is None or raw == "":
        return min(default, maximum)
    try:
        limit = int(raw)
    except ValueError as e:
        raise InvalidInputError(f"limit must be an integer between 1 and {maximum}") from e
    if not 1 <= limit <= maximum:
        raise InvalidInputError(f"limit must be an integer between 1 and {maximum}")
    return limit


def list_trips(store: TripStore) -> list[dict[str, Any]]:
    return store.scan()


def list_trips_page(store: TripStore, limit: int, cursor: str | None = None) -> TripPage:
    start_key = decode_cursor(cursor) if cursor else None
    items, last_key = store.scan_page(limit, start_key)
    return TripPage(items=items, next_cursor=encode_cursor(last_key) if last_key else None)


def save_trip(store: TripStore, body: str | None) -> str:
    """Upsert the record in ``body``. Returns its id."""
    record: TripRecord = _parse_object(body, TripRecord)
    store.put(record.to_item())
    logger.info("Stored trip %s", record.id)
    return record.id


def delete_trip(store: TripStore, body: str | None) -> str:
    """Delete by the ``id`` in ``body``. Missing records are not an error."""
    key: TripKey = _parse_object(body, TripKey)
    store.delete(key.id)
    logger.info("Deleted trip %s", key.id)
    return key.id
