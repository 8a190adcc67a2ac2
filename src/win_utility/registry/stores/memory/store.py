"""
In-memory implementation of the HierarchicalStore protocol.
"""

import threading
from dataclasses import dataclass, field
from typing import Any

from win_utility.constants import (
    ERROR_INVALID_HANDLE,
    ERROR_INVALID_PARAMETER,
    ERROR_KEY_DELETED,
    MAX_KEY_NAME_LENGTH,
    REGISTRY_SEPARATOR,
)
from win_utility.errors import (
    InvalidRegistryPathError,
    RegistryAccessDeniedError,
    RegistryKeyNotEmptyError,
    RegistryKeyNotFoundError,
    RegistryOperationError,
)

DEFAULT_HIVES: tuple[str, ...] = (
    "HKEY_CLASSES_ROOT",
    "HKEY_CURRENT_USER",
    "HKEY_LOCAL_MACHINE",
    "HKEY_USERS",
    "HKEY_CURRENT_CONFIG",
)


@dataclass(eq=False)
class _MemoryNode:
    name: str
    children: dict[str, "_MemoryNode"] = field(default_factory=dict)
    values: dict[str, Any] = field(default_factory=dict)
    deleted: bool = False


@dataclass(eq=False)
class MemoryKeyHandle:
    """A handle to a key of a ``MemoryRegistryStore``. Hives are handles that are never closed."""

    node: _MemoryNode
    path: str
    closed: bool = False


class MemoryRegistryStore:
    """
    In-memory implementation of a registry-like hierarchical store.

    Mirrors the registry rules the subtree deleter depends on: key names are compared
    case-insensitively, subkeys are enumerated in case-insensitive name order, and a key
    that still has subkeys cannot be deleted. Thread-safe operations are ensured using a lock.
    """

    def __init__(
        self,
        *,
        hives: tuple[str, ...] = DEFAULT_HIVES,
        max_name_length: int | None = MAX_KEY_NAME_LENGTH,
        separator: str = REGISTRY_SEPARATOR,
    ) -> None:
        """Initialize the memory store.

        Args:
            hives: The names of the root keys to create.
            max_name_length: The longest key name ``create_key`` accepts, or None for no limit.
            separator: The path separator.
        """
        self._hives: dict[str, MemoryKeyHandle] = {
            hive.casefold(): MemoryKeyHandle(node=_MemoryNode(name=hive), path=hive) for hive in hives
        }
        self._max_name_length: int | None = max_name_length
        self._separator: str = separator
        self._open_handles: int = 0
        self._lock = threading.RLock()

    def hive(self, name: str) -> MemoryKeyHandle:
        """Return the root handle for a hive such as ``"HKEY_CURRENT_USER"``."""
        try:
            return self._hives[name.casefold()]
        except KeyError:
            raise RegistryKeyNotFoundError(operation="hive", path=name) from None

    @property
    def open_handle_count(self) -> int:
        """The number of handles opened with ``open_for_read`` and not yet closed."""
        return self._open_handles

    def _split(self, path: str) -> list[str]:
        return [part for part in path.split(self._separator) if part]

    def _resolve(self, root: MemoryKeyHandle, parts: list[str], *, operation: str, path: str) -> _MemoryNode:
        if root.closed or root.node.deleted:
            raise RegistryOperationError(operation=operation, path=path, error_code=ERROR_INVALID_HANDLE)

        node = root.node
        for part in parts:
            child = node.children.get(part.casefold())
            if child is None:
                raise RegistryKeyNotFoundError(operation=operation, path=path)
            node = child

        return node

    def try_delete(self, root: MemoryKeyHandle, path: str) -> None:
        with self._lock:
            parts = self._split(path)
            if not parts:
                raise RegistryAccessDeniedError(operation="try_delete", path=path)

            parent = self._resolve(root, parts[:-1], operation="try_delete", path=path)

            node = parent.children.get(parts[-1].casefold())
            if node is None:
                raise RegistryKeyNotFoundError(operation="try_delete", path=path)

            if node.children:
                raise RegistryKeyNotEmptyError(operation="try_delete", path=path)

            del parent.children[parts[-1].casefold()]
            node.deleted = True

    def open_for_read(self, root: MemoryKeyHandle, path: str) -> MemoryKeyHandle:
        with self._lock:
            node = self._resolve(root, self._split(path), operation="open_for_read", path=path)
            self._open_handles += 1

            return MemoryKeyHandle(node=node, path=path)

    def first_child(self, handle: MemoryKeyHandle) -> str | None:
        with self._lock:
            if handle.closed:
                raise RegistryOperationError(operation="first_child", path=handle.path, error_code=ERROR_INVALID_HANDLE)

            if handle.node.deleted:
                raise RegistryOperationError(operation="first_child", path=handle.path, error_code=ERROR_KEY_DELETED)

            if not handle.node.children:
                return None

            return handle.node.children[min(handle.node.children)].name

    def close(self, handle: MemoryKeyHandle) -> None:
        with self._lock:
            if handle.closed:
                return

            handle.closed = True
            self._open_handles -= 1

    def create_key(self, root: MemoryKeyHandle, path: str) -> None:
        """Create the key at ``path``, along with any missing parent keys."""
        with self._lock:
            parts = self._split(path)
            if not parts:
                raise InvalidRegistryPathError(path=path)

            node = self._resolve(root, [], operation="create_key", path=path)
            for part in parts:
                if self._max_name_length is not None and len(part) > self._max_name_length:
                    raise RegistryOperationError(
                        "The registry key name is too long.", operation="create_key", path=path, error_code=ERROR_INVALID_PARAMETER
                    )

                node = node.children.setdefault(part.casefold(), _MemoryNode(name=part))

    def has_key(self, root: MemoryKeyHandle, path: str) -> bool:
        with self._lock:
            try:
                self._resolve(root, self._split(path), operation="has_key", path=path)
            except RegistryKeyNotFoundError:
                return False

            return True

    def children(self, root: MemoryKeyHandle, path: str) -> list[str]:
        """List the names of the subkeys of ``path``, in enumeration order."""
        with self._lock:
            node = self._resolve(root, self._split(path), operation="children", path=path)

            return [node.children[name].name for name in sorted(node.children)]

    def set_value(self, root: MemoryKeyHandle, path: str, value_name: str, value: Any) -> None:
        with self._lock:
            node = self._resolve(root, self._split(path), operation="set_value", path=path)
            node.values[value_name] = value

    def get_value(self, root: MemoryKeyHandle, path: str, value_name: str) -> Any | None:
        with self._lock:
            try:
                node = self._resolve(root, self._split(path), operation="get_value", path=path)
            except RegistryKeyNotFoundError:
                return None

            return node.values.get(value_name)
