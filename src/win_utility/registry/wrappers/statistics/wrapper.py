from dataclasses import dataclass, field
from typing import Any

from typing_extensions import override

from win_utility.errors import RegistryOperationError
from win_utility.registry.protocol import HierarchicalStore
from win_utility.registry.wrappers.base import BaseWrapper


@dataclass
class BaseStatistics:
    """Base statistics container with operation counting."""

    count: int = field(default=0)
    """The number of operations."""

    def increment(self, *, increment: int = 1) -> None:
        self.count += increment


@dataclass
class BaseHitMissStatistics(BaseStatistics):
    """Statistics container with hit/miss tracking."""

    hit: int = field(default=0)
    """The number of hits."""
    miss: int = field(default=0)
    """The number of misses."""

    def increment_hit(self, *, increment: int = 1) -> None:
        self.increment(increment=increment)
        self.hit += increment

    def increment_miss(self, *, increment: int = 1) -> None:
        self.increment(increment=increment)
        self.miss += increment


@dataclass
class HierarchicalStoreStatistics:
    """Statistics for every operation of a HierarchicalStore.

    A hit is a delete that removed a key, an open that returned a handle, or an enumeration
    that returned a child. Anything else is a miss. Closes are only counted.
    """

    try_delete: BaseHitMissStatistics = field(default_factory=BaseHitMissStatistics)
    open_for_read: BaseHitMissStatistics = field(default_factory=BaseHitMissStatistics)
    first_child: BaseHitMissStatistics = field(default_factory=BaseHitMissStatistics)
    close: BaseStatistics = field(default_factory=BaseStatistics)


class StatisticsWrapper(BaseWrapper):
    """Records per-operation statistics and an ordered log of every call made to the wrapped store.

    Log entries read ``operation(path) -> outcome``, where the outcome is ``ok``, the child
    name, ``None`` or the name of the raised error. Handles are logged by the path they were
    opened with.
    """

    def __init__(self, store: HierarchicalStore) -> None:
        super().__init__(store=store)
        self._statistics: HierarchicalStoreStatistics = HierarchicalStoreStatistics()
        self._calls: list[str] = []
        self._handle_paths: dict[int, str] = {}

    @property
    def statistics(self) -> HierarchicalStoreStatistics:
        return self._statistics

    @property
    def calls(self) -> list[str]:
        return self._calls

    def _handle_path(self, handle: Any) -> str:
        return self._handle_paths.get(id(handle), "?")

    @override
    def try_delete(self, root: Any, path: str) -> None:
        try:
            self.store.try_delete(root, path)
        except RegistryOperationError as e:
            self._statistics.try_delete.increment_miss()
            self._calls.append(f"try_delete({path}) -> {type(e).__name__}")
            raise

        self._statistics.try_delete.increment_hit()
        self._calls.append(f"try_delete({path}) -> ok")

    @override
    def open_for_read(self, root: Any, path: str) -> Any:
        try:
            handle = self.store.open_for_read(root, path)
        except RegistryOperationError as e:
            self._statistics.open_for_read.increment_miss()
            self._calls.append(f"open_for_read({path}) -> {type(e).__name__}")
            raise

        self._handle_paths[id(handle)] = path
        self._statistics.open_for_read.increment_hit()
        self._calls.append(f"open_for_read({path}) -> ok")

        return handle

    @override
    def first_child(self, handle: Any) -> str | None:
        path = self._handle_path(handle)

        try:
            child = self.store.first_child(handle)
        except RegistryOperationError as e:
            self._statistics.first_child.increment_miss()
            self._calls.append(f"first_child({path}) -> {type(e).__name__}")
            raise

        if child is None:
            self._statistics.first_child.increment_miss()
        else:
            self._statistics.first_child.increment_hit()
        self._calls.append(f"first_child({path}) -> {child}")

        return child

    @override
    def close(self, handle: Any) -> None:
        path = self._handle_paths.pop(id(handle), "?")

        self.store.close(handle)

        self._statistics.close.increment()
        self._calls.append(f"close({path})")
