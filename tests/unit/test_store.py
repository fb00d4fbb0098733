"""
Unit tests for the in-memory collection store.
"""

from sports_backend.app.services.store import CollectionStore, Stores


class TestCollectionStore:
    """Tests for CollectionStore."""

    def test_get_missing_returns_none(self):
        store = CollectionStore("users")
        assert store.get("nope") is None

    def test_set_then_get(self):
        store = CollectionStore("users")
        record = {"id": "u1", "name": "Bob"}

        assert store.set("u1", record) is record
        assert store.get("u1") == {"id": "u1", "name": "Bob"}
        assert "u1" in store
        assert len(store) == 1

    def test_set_overwrites(self):
        """Last write wins."""
        store = CollectionStore("events")
        store.set("e1", {"id": "e1", "title": "old"})
        store.set("e1", {"id": "e1", "title": "new"})

        assert store.get("e1") == {"id": "e1", "title": "new"}
        assert len(store) == 1

    def test_delete_reports_whether_removed(self):
        store = CollectionStore("events")
        store.set("e1", {"id": "e1"})

        assert store.delete("e1") is True
        assert store.delete("e1") is False
        assert store.get("e1") is None

    def test_values_returns_copy_of_records(self):
        store = CollectionStore("teams")
        store.set("a", {"id": "a"})
        store.set("b", {"id": "b"})

        values = store.values()
        values.clear()

        assert len(store) == 2
        assert sorted(r["id"] for r in store.values()) == ["a", "b"]

    def test_clear(self):
        store = CollectionStore("teams")
        store.set("a", {"id": "a"})
        store.clear()
        assert len(store) == 0


class TestStores:
    """Tests for the Stores bundle."""

    def test_collections_are_independent(self):
        stores = Stores()
        stores.users.set("x", {"id": "x"})

        assert "x" in stores.users
        assert "x" not in stores.events
        assert "x" not in stores.tournaments
        assert "x" not in stores.teams

    def test_each_instance_gets_its_own_collections(self):
        first, second = Stores(), Stores()
        first.events.set("e1", {"id": "e1"})

        assert len(second.events) == 0
        assert first.events.name == "events"
