from typing import Any

import pytest
from typing_extensions import override

from win_utility.constants import ERROR_ACCESS_DENIED
from win_utility.errors import RegistryAccessDeniedError, RegistryOperationError
from win_utility.registry.stores.memory import MemoryRegistryStore
from win_utility.registry.wrappers import BaseWrapper, StatisticsWrapper


class FailingStore(BaseWrapper):
    """Raises a chosen error whenever a chosen operation touches a chosen path."""

    def __init__(self, store: MemoryRegistryStore) -> None:
        super().__init__(store=store)
        self.failures: dict[tuple[str, str], RegistryOperationError] = {}

    def fail(self, operation: str, path: str, error: RegistryOperationError | None = None) -> None:
        self.failures[(operation, path.casefold())] = error or RegistryAccessDeniedError(
            operation=operation, path=path, error_code=ERROR_ACCESS_DENIED
        )

    def _check(self, operation: str, path: str) -> None:
        if error := self.failures.get((operation, path.casefold())):
            raise error

    @override
    def try_delete(self, root: Any, path: str) -> None:
        self._check("try_delete", path)
        return super().try_delete(root, path)

    @override
    def open_for_read(self, root: Any, path: str) -> Any:
        self._check("open_for_read", path)
        return super().open_for_read(root, path)

    @override
    def first_child(self, handle: Any) -> str | None:
        self._check("first_child", handle.path)
        return super().first_child(handle)


@pytest.fixture
def failing_store(memory_store: MemoryRegistryStore) -> FailingStore:
    return FailingStore(store=memory_store)


@pytest.fixture
def recorded_store(failing_store: FailingStore) -> StatisticsWrapper:
    return StatisticsWrapper(store=failing_store)
