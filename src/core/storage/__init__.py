"""Storage abstraction for trip records."""

from core.storage.dynamo import DynamoTripStore
from core.storage.interface import TripStore, get_trip_store
from core.storage.memory import InMemoryTripStore

__all__ = ["DynamoTripStore", "InMemoryTripStore", "TripStore", "get_trip_store"]
