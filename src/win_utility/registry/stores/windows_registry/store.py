"""
Windows Registry implementation of the HierarchicalStore protocol.
"""

from win_utility.errors import registry_error_from_os_error

try:
    import winreg
except ImportError as e:
    msg = "WindowsRegistryStore is only available on Windows"
    raise ImportError(msg) from e

from win_utility.registry.stores.windows_registry.utils import HiveType, create_key, enum_first_sub_key, get_reg_sz_value, has_key, set_reg_sz_value


class WindowsRegistryStore:
    """A store backed by the Windows Registry through ``winreg``.

    Roots are predefined hives (``winreg.HKEY_*``) or open keys. Subkeys are enumerated with
    ``EnumKey(handle, 0)``, which the registry re-derives after each deletion.
    """

    _view: int

    def __init__(self, *, view: int = 0) -> None:
        """Initialize the Windows Registry store.

        Args:
            view: ``winreg.KEY_WOW64_64KEY`` or ``winreg.KEY_WOW64_32KEY`` to pin a registry
                view, or 0 for the caller's default view.
        """
        self._view = view

    @staticmethod
    def hive(name: str) -> HiveType:
        """Return the predefined hive named ``name``, such as ``"HKEY_CURRENT_USER"``."""
        if not name.startswith("HKEY_") or not hasattr(winreg, name):
            msg = f"Unknown registry hive: {name}"
            raise ValueError(msg)

        return getattr(winreg, name)

    def try_delete(self, root: HiveType | winreg.HKEYType, path: str) -> None:
        try:
            if self._view:
                winreg.DeleteKeyEx(root, path, self._view, 0)
            else:
                winreg.DeleteKey(root, path)
        except OSError as e:
            raise registry_error_from_os_error(e, operation="try_delete", path=path) from e

    def open_for_read(self, root: HiveType | winreg.HKEYType, path: str) -> winreg.HKEYType:
        try:
            return winreg.OpenKey(root, path, 0, winreg.KEY_READ | self._view)
        except OSError as e:
            raise registry_error_from_os_error(e, operation="open_for_read", path=path) from e

    def first_child(self, handle: winreg.HKEYType) -> str | None:
        return enum_first_sub_key(handle)

    def close(self, handle: winreg.HKEYType) -> None:
        handle.Close()

    def create_key(self, root: HiveType, path: str) -> None:
        create_key(root, path)

    def has_key(self, root: HiveType, path: str) -> bool:
        return has_key(root, path)

    def get_value(self, root: HiveType, path: str, value_name: str) -> str | None:
        return get_reg_sz_value(root, path, value_name)

    def set_value(self, root: HiveType, path: str, value_name: str, value: str) -> None:
        set_reg_sz_value(root, path, value_name, value)
