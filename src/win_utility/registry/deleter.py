"""Recursive deletion of a registry key and everything below it."""

import logging
from typing import Any

from win_utility.constants import MAX_CHILD_NAME_LENGTH, MAX_TREE_DEPTH, REGISTRY_SEPARATOR, SUBKEY_BUFFER_SIZE
from win_utility.diagnostics.fatal import FatalReporter, report_contract_violation
from win_utility.errors import (
    ContractViolationError,
    InvalidRegistryPathError,
    RegistryKeyNotFoundError,
    RegistryOperationError,
    TreeTooDeepError,
)
from win_utility.registry.path_buffer import PathBuffer
from win_utility.registry.protocol import HierarchicalStore
from win_utility.type_checking.bear_spray import bear_enforce

logger = logging.getLogger(__name__)


class SubtreeDeleter:
    """Deletes a registry key after deleting all of its subkeys, depth first.

    Each call to ``delete_path`` owns one ``PathBuffer`` that is shared by every level of the
    walk. A level extends the buffer with ``<separator><child>`` before descending and
    truncates it back before returning, so the buffer always holds the path of the key
    being considered.

    Outcomes:
        - A key that does not exist counts as deleted.
        - Store failures other than not-found make ``delete_path`` return False. The first
          failing child stops the walk at its level; its siblings are left for a retry.
        - Contract violations (path too long, tree too deep) raise ``ContractViolationError``.
    """

    def __init__(
        self,
        store: HierarchicalStore,
        *,
        capacity: int = SUBKEY_BUFFER_SIZE,
        max_child_name_length: int = MAX_CHILD_NAME_LENGTH,
        max_depth: int = MAX_TREE_DEPTH,
        separator: str = REGISTRY_SEPARATOR,
    ) -> None:
        """Initialize the deleter.

        Args:
            store: The store holding the keys.
            capacity: The path buffer capacity, in characters.
            max_child_name_length: The longest subkey name accepted from enumeration.
            max_depth: The deepest nesting level the walk will descend to.
            separator: The path separator used by the store.
        """
        self._store: HierarchicalStore = store
        self._capacity: int = capacity
        self._max_child_name_length: int = max_child_name_length
        self._max_depth: int = max_depth
        self._separator: str = separator

    def delete_path(self, root: Any, path: str) -> bool:
        """Delete the key at ``path`` below ``root`` and all of its subkeys.

        Returns:
            True if the key is gone (including when it never existed), False if the store
            refused an operation along the way.

        Raises:
            InvalidRegistryPathError: If ``path`` does not name a key below ``root``.
            PathTooLongError: If a path in the subtree would not fit in the path buffer.
            TreeTooDeepError: If the subtree is nested deeper than ``max_depth``.
        """
        if not path.strip(self._separator):
            raise InvalidRegistryPathError(path=path)

        buffer = PathBuffer(
            path,
            capacity=self._capacity,
            max_child_name_length=self._max_child_name_length,
            separator=self._separator,
        )

        return self._delete_recursive(root=root, buffer=buffer, depth=1)

    def _delete_recursive(self, *, root: Any, buffer: PathBuffer, depth: int) -> bool:
        if depth > self._max_depth:
            raise TreeTooDeepError(depth=depth, max_depth=self._max_depth, path=buffer.value)

        path: str = buffer.value

        # Leaf keys and empty containers go in one call.
        try:
            self._store.try_delete(root, path)
        except RegistryOperationError as e:
            logger.debug("Direct delete refused, walking subkeys", extra={"path": path, "error": str(e)})
        else:
            return True

        try:
            handle = self._store.open_for_read(root, path)
        except RegistryKeyNotFoundError:
            return True
        except RegistryOperationError:
            logger.warning("Failed to open registry key", extra={"path": path}, exc_info=True)
            return False

        entry_length = len(buffer)
        children_deleted = True
        try:
            prefix_length = buffer.ensure_trailing_separator()

            # Always ask for the first child: the previous one has just been deleted.
            while True:
                try:
                    child = self._store.first_child(handle)
                except RegistryOperationError:
                    logger.warning("Failed to enumerate registry subkeys", extra={"path": path}, exc_info=True)
                    children_deleted = False
                    break

                if child is None:
                    break

                buffer.truncate(prefix_length)
                buffer.append_child(child)

                if not self._delete_recursive(root=root, buffer=buffer, depth=depth + 1):
                    children_deleted = False
                    break
        finally:
            buffer.truncate(entry_length)
            self._store.close(handle)

        if not children_deleted:
            return False

        try:
            self._store.try_delete(root, path)
        except RegistryOperationError:
            logger.warning("Failed to delete registry key after removing its subkeys", extra={"path": path}, exc_info=True)
            return False

        return True


@bear_enforce
def delete_registry_path(
    root: Any,
    path: str,
    *,
    store: HierarchicalStore | None = None,
    reporter: FatalReporter | None = None,
) -> bool:
    """Delete a registry key and all of its subkeys and values.

    Args:
        root: An open key or predefined hive (for example ``winreg.HKEY_CURRENT_USER``).
        path: The path of the key to delete, relative to ``root``.
        store: The store to delete from. Defaults to the Windows registry.
        reporter: Receives contract violations. Defaults to an ``AbortReporter``, which
            terminates the process.

    Returns:
        True if the key is gone, False if the registry refused an operation.
    """
    if store is None:
        from win_utility.registry.stores.windows_registry import WindowsRegistryStore

        store = WindowsRegistryStore()

    deleter = SubtreeDeleter(store=store)

    try:
        return deleter.delete_path(root=root, path=path)
    except ContractViolationError as e:
        report_contract_violation(error=e, reporter=reporter)
