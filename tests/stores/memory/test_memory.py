import threading

import pytest
from typing_extensions import override

from tests.stores.base import BaseHierarchicalStoreTests
from win_utility.errors import (
    InvalidRegistryPathError,
    RegistryAccessDeniedError,
    RegistryKeyNotEmptyError,
    RegistryKeyNotFoundError,
    RegistryOperationError,
)
from win_utility.registry.stores.memory import MemoryKeyHandle, MemoryRegistryStore


class TestMemoryRegistryStore(BaseHierarchicalStoreTests):
    @override
    @pytest.fixture
    def store(self) -> MemoryRegistryStore:
        return MemoryRegistryStore()

    @override
    @pytest.fixture
    def root(self, store: MemoryRegistryStore) -> MemoryKeyHandle:
        return store.hive("HKEY_CURRENT_USER")

    def test_names_are_case_insensitive(self, store: MemoryRegistryStore, root: MemoryKeyHandle):
        store.create_key(root, "Software\\MyApp")

        assert store.has_key(root, "SOFTWARE\\myapp") is True
        assert store.children(root, "software") == ["MyApp"]

        store.try_delete(root, "software\\MYAPP")
        assert store.has_key(root, "Software\\MyApp") is False

    def test_children_enumerated_in_name_order(self, store: MemoryRegistryStore, root: MemoryKeyHandle):
        for name in ("delta", "Alpha", "charlie", "Bravo"):
            store.create_key(root, f"parent\\{name}")

        assert store.children(root, "parent") == ["Alpha", "Bravo", "charlie", "delta"]

        handle = store.open_for_read(root, "parent")
        assert store.first_child(handle) == "Alpha"
        store.close(handle)

    def test_not_empty_error(self, store: MemoryRegistryStore, root: MemoryKeyHandle):
        store.create_key(root, "parent\\child")

        with pytest.raises(RegistryKeyNotEmptyError):
            store.try_delete(root, "parent")

    def test_delete_hive_refused(self, store: MemoryRegistryStore, root: MemoryKeyHandle):
        with pytest.raises(RegistryAccessDeniedError):
            store.try_delete(root, "")

    def test_unknown_hive(self, store: MemoryRegistryStore):
        with pytest.raises(RegistryKeyNotFoundError):
            store.hive("HKEY_NOT_A_HIVE")

    def test_hives_are_separate(self, store: MemoryRegistryStore):
        store.create_key(store.hive("HKEY_CURRENT_USER"), "Software")

        assert store.has_key(store.hive("HKEY_LOCAL_MACHINE"), "Software") is False

    def test_open_handle_count(self, store: MemoryRegistryStore, root: MemoryKeyHandle):
        store.create_key(root, "key")

        first = store.open_for_read(root, "key")
        second = store.open_for_read(root, "key")
        assert store.open_handle_count == 2

        store.close(first)
        store.close(first)
        assert store.open_handle_count == 1

        store.close(second)
        assert store.open_handle_count == 0

    def test_closed_handle_cannot_enumerate(self, store: MemoryRegistryStore, root: MemoryKeyHandle):
        store.create_key(root, "key")
        handle = store.open_for_read(root, "key")
        store.close(handle)

        with pytest.raises(RegistryOperationError):
            store.first_child(handle)

    def test_deleted_key_cannot_enumerate(self, store: MemoryRegistryStore, root: MemoryKeyHandle):
        store.create_key(root, "key")
        handle = store.open_for_read(root, "key")
        store.try_delete(root, "key")

        with pytest.raises(RegistryOperationError) as exc_info:
            store.first_child(handle)

        assert exc_info.value.error_code == 1018
        store.close(handle)

    def test_open_relative_to_open_key(self, store: MemoryRegistryStore, root: MemoryKeyHandle):
        store.create_key(root, "Software\\MyApp\\Settings")

        software = store.open_for_read(root, "Software")
        try:
            assert store.has_key(software, "MyApp\\Settings") is True
        finally:
            store.close(software)

    def test_create_key_name_too_long(self, store: MemoryRegistryStore, root: MemoryKeyHandle):
        with pytest.raises(RegistryOperationError):
            store.create_key(root, "x" * 256)

        unbounded = MemoryRegistryStore(max_name_length=None)
        unbounded.create_key(unbounded.hive("HKEY_USERS"), "x" * 256)
        assert unbounded.has_key(unbounded.hive("HKEY_USERS"), "x" * 256) is True

    def test_create_key_empty_path(self, store: MemoryRegistryStore, root: MemoryKeyHandle):
        with pytest.raises(InvalidRegistryPathError):
            store.create_key(root, "\\")

    def test_values_go_with_their_key(self, store: MemoryRegistryStore, root: MemoryKeyHandle):
        store.create_key(root, "key")
        store.set_value(root, "key", "Color", "blue")
        assert store.get_value(root, "key", "Color") == "blue"

        store.try_delete(root, "key")
        assert store.get_value(root, "key", "Color") is None

        store.create_key(root, "key")
        assert store.get_value(root, "key", "Color") is None

    def test_thread_safety(self, store: MemoryRegistryStore, root: MemoryKeyHandle):
        """Test that concurrent creates and deletes leave a consistent tree."""

        def worker(thread_id: int):
            for i in range(50):
                path = f"threads\\t{thread_id}\\k{i}"
                store.create_key(root, path)
                store.try_delete(root, path)

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(5)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert store.children(root, "threads") == ["t0", "t1", "t2", "t3", "t4"]
        for i in range(5):
            assert store.children(root, f"threads\\t{i}") == []
