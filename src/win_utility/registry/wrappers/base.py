from typing import Any

from win_utility.registry.protocol import HierarchicalStore


class BaseWrapper(HierarchicalStore):
    """A base wrapper for HierarchicalStore implementations that passes through to the underlying store."""

    store: HierarchicalStore

    def __init__(self, store: HierarchicalStore) -> None:
        self.store = store

    def try_delete(self, root: Any, path: str) -> None:
        return self.store.try_delete(root, path)

    def open_for_read(self, root: Any, path: str) -> Any:
        return self.store.open_for_read(root, path)

    def first_child(self, handle: Any) -> str | None:
        return self.store.first_child(handle)

    def close(self, handle: Any) -> None:
        return self.store.close(handle)
