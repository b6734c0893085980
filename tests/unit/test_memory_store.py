"""Unit tests for the in-memory trip store."""

import pytest

from core.errors import InvalidInputError
from core.storage import InMemoryTripStore


def test_scan_empty_store(memory_store):
    assert memory_store.scan() == []


def test_put_then_scan(memory_store):
    memory_store.put({"id": "t1", "km": 10})
    assert memory_store.scan() == [{"id": "t1", "km": 10}]


def test_put_overwrites_without_merging(memory_store):
    memory_store.put({"id": "t1", "km": 10, "note": "commute"})
    memory_store.put({"id": "t1", "km": 12})
    assert memory_store.scan() == [{"id": "t1", "km": 12}]


def test_delete_removes_record(memory_store):
    memory_store.put({"id": "t1"})
    memory_store.put({"id": "t2"})
    memory_store.delete("t1")
    assert memory_store.scan() == [{"id": "t2"}]


def test_delete_nonexistent_is_noop(memory_store):
    """delete is idempotent, missing records are not an error."""
    memory_store.delete("nonexistent")
    assert memory_store.scan() == []


def test_put_without_id_rejected(memory_store):
    with pytest.raises(InvalidInputError):
        memory_store.put({"km": 10})


def test_scan_returns_copies(memory_store):
    memory_store.put({"id": "t1", "tags": ["work"]})
    memory_store.scan()[0]["tags"].append("mutated")
    assert memory_store.scan() == [{"id": "t1", "tags": ["work"]}]


def test_seeded_store():
    store = InMemoryTripStore([{"id": "a"}, {"id": "b"}])
    assert len(store.scan()) == 2


def test_scan_page_walks_all_records_in_id_order():
    store = InMemoryTripStore([{"id": trip_id} for trip_id in ("c", "a", "e", "b", "d")])

    items, last_key = store.scan_page(2)
    assert [item["id"] for item in items] == ["a", "b"]
    assert last_key == {"id": "b"}

    items, last_key = store.scan_page(2, last_key)
    assert [item["id"] for item in items] == ["c", "d"]
    assert last_key == {"id": "d"}

    items, last_key = store.scan_page(2, last_key)
    assert [item["id"] for item in items] == ["e"]
    assert last_key is None


def test_scan_page_exact_fit_has_no_next_key():
    store = InMemoryTripStore([{"id": "a"}, {"id": "b"}])
    items, last_key = store.scan_page(2)
    assert len(items) == 2
    assert last_key is None
