"""
Test configuration and fixtures.
"""

import platform

import pytest

from win_utility.diagnostics import fatal
from win_utility.diagnostics.fatal import SourceLocation
from win_utility.registry.stores.memory import MemoryKeyHandle, MemoryRegistryStore


def detect_on_windows() -> bool:
    return platform.system() == "Windows"


class RecordingReporter:
    """A FatalReporter that records each report and exits like the real one."""

    def __init__(self) -> None:
        self.reports: list[dict[str, object]] = []

    def report_fatal(self, *, source: SourceLocation, operation: str, error_code: int, detail: str | None = None):
        self.reports.append({"source": source, "operation": operation, "error_code": error_code, "detail": detail})
        raise SystemExit(1)


@pytest.fixture(autouse=True)
def shown_message_boxes(monkeypatch: pytest.MonkeyPatch) -> list[str]:
    """Never pop a real message box during tests; record what would have been shown."""
    shown: list[str] = []

    def record(*, text: str, title: str) -> None:
        shown.append(f"{title} {text}")

    monkeypatch.setattr(fatal, "_show_message_box", record)
    return shown


@pytest.fixture
def memory_store() -> MemoryRegistryStore:
    """Create a fresh in-memory registry store for testing."""
    return MemoryRegistryStore()


@pytest.fixture
def hkcu(memory_store: MemoryRegistryStore) -> MemoryKeyHandle:
    return memory_store.hive("HKEY_CURRENT_USER")


@pytest.fixture
def reporter() -> RecordingReporter:
    return RecordingReporter()
