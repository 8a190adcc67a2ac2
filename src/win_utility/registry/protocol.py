from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class HierarchicalStore(Protocol):
    """Protocol for a hierarchical key store, such as the Windows registry.

    Roots and handles are opaque to callers. A root is borrowed for the duration of a call and
    is never closed by the subtree deleter; a handle returned by ``open_for_read`` must be
    released with ``close``.

    Enumeration contract: ``first_child`` always answers with the first child that currently
    exists. After that child is deleted, asking again yields the next one. A store that cannot
    re-derive its first child after a deletion must snapshot child names instead.
    """

    def try_delete(self, root: Any, path: str) -> None:
        """Delete the key at ``path`` below ``root`` if it has no subkeys.

        Raises:
            RegistryKeyNotFoundError: If the key does not exist.
            RegistryKeyNotEmptyError: If the key still has subkeys.
            RegistryOperationError: If the store refuses the delete for another reason.
        """
        ...

    def open_for_read(self, root: Any, path: str) -> Any:
        """Open the key at ``path`` below ``root`` for reading and return its handle.

        Raises:
            RegistryKeyNotFoundError: If the key does not exist.
            RegistryOperationError: If the key cannot be opened for another reason.
        """
        ...

    def first_child(self, handle: Any) -> str | None:
        """Return the name of the first remaining subkey of ``handle``, or None when there are none.

        Raises:
            RegistryOperationError: If the subkeys cannot be enumerated.
        """
        ...

    def close(self, handle: Any) -> None:
        """Release a handle returned by ``open_for_read``."""
        ...
