"""DynamoDB-backed trip store."""

import logging
from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.errors import InvalidInputError, StorageUnavailableError, TripsError, UnknownError

from .interface import Item, Key, TripStore

logger = logging.getLogger(__name__)

_UNAVAILABLE_CODES = frozenset(
    {
        "ProvisionedThroughputExceededException",
        "ThrottlingException",
        "RequestLimitExceeded",
        "LimitExceededException",
        "ServiceUnavailable",
        "InternalServerError",
        "ResourceNotFoundException",
    }
)


def _translate_client_error(error: ClientError) -> TripsError:
    details = error.response.get("Error", {})
    code = details.get("Code", "")
    message = details.get("Message") or str(error)

    if code == "ValidationException":
        return InvalidInputError(message)
    if code in _UNAVAILABLE_CODES:
        return StorageUnavailableError(message)
    return UnknownError(message)


class DynamoTripStore(TripStore):
    def __init__(self, table: Any):
        self._table = table

    def _call(self, operation: str, **kwargs: Any) -> dict[str, Any]:
        try:
            return getattr(self._table, operation)(**kwargs)
        except ClientError as e:
            logger.warning("DynamoDB %s failed: %s", operation, e)
            raise _translate_client_error(e) from e
        except BotoCoreError as e:
            logger.warning("DynamoDB %s failed: %s", operation, e)
            raise StorageUnavailableError(f"DynamoDB request failed: {e}") from e

    def scan(self) -> list[Item]:
        """Read every item, following LastEvaluatedKey until exhausted."""
        items: list[Item] = []
        last_key = None

        while True:
            scan_kwargs: dict[str, Any] = {}
            if last_key:
                scan_kwargs["ExclusiveStartKey"] = last_key

            response = self._call("scan", **scan_kwargs)
            items.extend(response.get("Items", []))

            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break

        return items

    def scan_page(self, limit: int, start_key: Key | None = None) -> tuple[list[Item], Key | None]:
        scan_kwargs: dict[str, Any] = {"Limit": limit}
        if start_key:
            scan_kwargs["ExclusiveStartKey"] = start_key

        response = self._call("scan", **scan_kwargs)
        return response.get("Items", []), response.get("LastEvaluatedKey")

    def put(self, record: Item) -> None:
        self._call("put_item", Item=record)

    def delete(self, trip_id: str) -> None:
        self._call("delete_item", Key={"id": trip_id})
