from abc import ABC, abstractmethod
from functools import lru_cache
from typing import Any

Item = dict[str, Any]
Key = dict[str, Any]


class TripStore(ABC):
    """Keyed record storage consumed by the trips handler.

    ``put`` overwrites any record sharing the same ``id``; ``delete`` does not
    check that the record exists.
    """

    @abstractmethod
    def scan(self) -> list[Item]: ...

    @abstractmethod
    def scan_page(self, limit: int, start_key: Key | None = None) -> tuple[list[Item], Key | None]: ...

    @abstractmethod
    def put(self, record: Item) -> None: ...

    @abstractmethod
    def delete(self, trip_id: str) -> None: ...


@lru_cache(maxsize=1)
def get_trip_store() -> TripStore:
    from core.config import get_config

    config = get_config()

    if config.storage_backend == "memory":
        from core.storage.memory import InMemoryTripStore

        return InMemoryTripStore()

    from core.clients import get_dynamo_resource
    from core.storage.dynamo import DynamoTripStore

    return DynamoTripStore(get_dynamo_resource().Table(config.trips_table))
