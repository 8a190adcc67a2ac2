import logging
from collections.abc import Generator
from typing import Any

import pytest
from _pytest.logging import LogCaptureFixture
from inline_snapshot import snapshot
from typing_extensions import override

from tests.stores.base import BaseHierarchicalStoreTests
from win_utility.errors import RegistryKeyNotFoundError
from win_utility.registry import SubtreeDeleter
from win_utility.registry.stores.memory import MemoryKeyHandle, MemoryRegistryStore
from win_utility.registry.wrappers import LoggingWrapper


def get_messages_from_caplog(caplog: pytest.LogCaptureFixture) -> list[str]:
    return [record.message for record in caplog.records]


class TestLoggingWrapper(BaseHierarchicalStoreTests):
    @pytest.fixture
    def memory_store(self) -> MemoryRegistryStore:
        return MemoryRegistryStore()

    @override
    @pytest.fixture
    def store(self, memory_store: MemoryRegistryStore) -> LoggingWrapper:
        return LoggingWrapper(store=memory_store, log_level=logging.INFO)

    @pytest.fixture
    def structured_logs_store(self, memory_store: MemoryRegistryStore) -> LoggingWrapper:
        return LoggingWrapper(store=memory_store, log_level=logging.INFO, structured_logs=True)

    @override
    @pytest.fixture
    def root(self, memory_store: MemoryRegistryStore) -> MemoryKeyHandle:
        return memory_store.hive("HKEY_CURRENT_USER")

    @override
    def create_key(self, store: Any, root: Any, path: str) -> None:
        store.store.create_key(root, path)

    @override
    def has_key(self, store: Any, root: Any, path: str) -> bool:
        return store.store.has_key(root, path)

    @pytest.fixture
    def capture_logs(self, caplog: pytest.LogCaptureFixture) -> Generator[LogCaptureFixture, Any, None]:
        with caplog.at_level(logging.INFO):
            yield caplog

    def test_logging_try_delete(
        self, store: LoggingWrapper, structured_logs_store: LoggingWrapper, root: MemoryKeyHandle, capture_logs: LogCaptureFixture
    ):
        self.create_key(store, root, "A")

        store.try_delete(root, "A")
        assert get_messages_from_caplog(capture_logs) == snapshot(
            [
                "Start TRY_DELETE path='A'",
                "Finish TRY_DELETE path='A' ({'deleted': True})",
            ]
        )

        capture_logs.clear()

        with pytest.raises(RegistryKeyNotFoundError):
            structured_logs_store.try_delete(root, "A")
        assert get_messages_from_caplog(capture_logs) == snapshot(
            [
                '{"status": "start", "action": "TRY_DELETE", "path": "A"}',
                '{"status": "error", "action": "TRY_DELETE", "path": "A", "extra": {"error": "RegistryKeyNotFoundError"}}',
            ]
        )
        assert capture_logs.records[-1].levelno == logging.WARNING

    def test_logging_walk(self, store: LoggingWrapper, root: MemoryKeyHandle, capture_logs: LogCaptureFixture):
        self.create_key(store, root, "A\\B")

        assert SubtreeDeleter(store).delete_path(root, "A") is True

        assert get_messages_from_caplog(capture_logs) == snapshot(
            [
                "Start TRY_DELETE path='A'",
                "Error TRY_DELETE path='A' ({'error': 'RegistryKeyNotEmptyError'})",
                "Start OPEN_FOR_READ path='A'",
                "Finish OPEN_FOR_READ path='A'",
                "Start FIRST_CHILD path='A'",
                "Finish FIRST_CHILD path='A' ({'child': 'B'})",
                "Start TRY_DELETE path='A\\B'",
                "Finish TRY_DELETE path='A\\B' ({'deleted': True})",
                "Start FIRST_CHILD path='A'",
                "Finish FIRST_CHILD path='A' ({'child': None})",
                "Finish CLOSE path='A'",
                "Start TRY_DELETE path='A'",
                "Finish TRY_DELETE path='A' ({'deleted': True})",
            ]
        )

    def test_custom_logger(self, memory_store: MemoryRegistryStore, root: MemoryKeyHandle, caplog: pytest.LogCaptureFixture):
        store = LoggingWrapper(store=memory_store, logger=logging.getLogger("registry.audit"))

        with caplog.at_level(logging.DEBUG, logger="registry.audit"):
            store.open_for_read(root, "")

        assert {record.name for record in caplog.records} == {"registry.audit"}
        assert get_messages_from_caplog(caplog) == snapshot(["Start OPEN_FOR_READ path=''", "Finish OPEN_FOR_READ path=''"])
