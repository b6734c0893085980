"""Dict-backed trip store for tests and local runs without DynamoDB."""

import copy

from core.errors import InvalidInputError

from .interface import Item, Key, TripStore


class InMemoryTripStore(TripStore):
    """Strongly consistent: a scan always sees every completed put and delete.

    Pages are returned in ``id`` order.
    """

    def __init__(self, items: list[Item] | None = None):
        self._items: dict[str, Item] = {}
        for item in items or []:
            self.put(item)

    def scan(self) -> list[Item]:
        return [copy.deepcopy(item) for item in self._items.values()]

    def scan_page(self, limit: int, start_key: Key | None = None) -> tuple[list[Item], Key | None]:
        ids = sorted(self._items)
        if start_key:
            ids = [trip_id for trip_id in ids if trip_id > start_key["id"]]

        page_ids = ids[:limit]
        items = [copy.deepcopy(self._items[trip_id]) for trip_id in page_ids]
        last_key = {"id": page_ids[-1]} if len(ids) > limit else None
        return items, last_key

    def put(self, record: Item) -> None:
        trip_id = record.get("id")
        if not isinstance(trip_id, str) or not trip_id:
            raise InvalidInputError("One of the required keys was not given a value")
        self._items[trip_id] = copy.deepcopy(record)

    def delete(self, trip_id: str) -> None:
        self._items.pop(trip_id, None)
