"""win-utility - Small platform helpers for Windows desktop applications."""

from typing import Any

from win_utility.diagnostics import AbortReporter, FatalReporter, critical_error_abort, fatal_on_contract_violation, format_error, trace
from win_utility.platform import file_size, force_window_focus, get_hwnd_for_pid, shell_command
from win_utility.registry import HierarchicalStore, PathBuffer, SubtreeDeleter, delete_registry_path
from win_utility.registry.stores.memory import MemoryRegistryStore


def __getattr__(name: str) -> Any:
    """Lazy import for the Windows-only registry store."""
    if name == "WindowsRegistryStore":
        try:
            from win_utility.registry.stores.windows_registry import WindowsRegistryStore
        except ImportError as e:
            msg = f"WindowsRegistryStore requires winreg, which is only available on Windows: {e}"
            raise ImportError(msg) from e
        return WindowsRegistryStore

    msg = f"module '{__name__}' has no attribute '{name}'"
    raise AttributeError(msg)


__all__ = [
    "AbortReporter",
    "FatalReporter",
    "HierarchicalStore",
    "MemoryRegistryStore",
    "PathBuffer",
    "SubtreeDeleter",
    "WindowsRegistryStore",  # pyright: ignore[reportUnsupportedDunderAll]
    "critical_error_abort",
    "delete_registry_path",
    "fatal_on_contract_violation",
    "file_size",
    "force_window_focus",
    "format_error",
    "get_hwnd_for_pid",
    "shell_command",
    "trace",
]
