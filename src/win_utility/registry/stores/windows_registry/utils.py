import winreg

from win_utility.constants import ERROR_NO_MORE_ITEMS
from win_utility.errors import registry_error_from_os_error

HiveType = int


def get_reg_sz_value(hive: HiveType, sub_key: str, value_name: str) -> str | None:
    """Retrieve a string value from the Windows Registry.

    Args:
        hive: The registry hive (e.g., winreg.HKEY_CURRENT_USER).
        sub_key: The registry subkey path.
        value_name: The name of the registry value to retrieve.

    Returns:
        The string value, or None if the key or value doesn't exist.
    """
    try:
        with winreg.OpenKey(hive, sub_key) as reg_key:
            string, _ = winreg.QueryValueEx(reg_key, value_name)
            return string
    except FileNotFoundError:
        return None


def set_reg_sz_value(hive: HiveType, sub_key: str, value_name: str, value: str) -> None:
    """Set a string value in the Windows Registry, creating the key if needed.

    Args:
        hive: The registry hive (e.g., winreg.HKEY_CURRENT_USER).
        sub_key: The registry subkey path.
        value_name: The name of the registry value to set.
        value: The string value to write.
    """
    try:
        with winreg.CreateKeyEx(hive, sub_key, 0, winreg.KEY_WRITE) as reg_key:
            winreg.SetValueEx(reg_key, value_name, 0, winreg.REG_SZ, value)
    except OSError as e:
        raise registry_error_from_os_error(e, operation="set_value", path=sub_key) from e


def has_key(hive: HiveType, sub_key: str) -> bool:
    """Check if a registry key exists.

    Args:
        hive: The registry hive (e.g., winreg.HKEY_CURRENT_USER).
        sub_key: The registry subkey path to check.

    Returns:
        True if the key exists, False otherwise.
    """
    try:
        with winreg.OpenKey(hive, sub_key):
            return True
    except FileNotFoundError:
        return False


def create_key(hive: HiveType, sub_key: str) -> None:
    """Create a registry key, along with any missing parent keys.

    Args:
        hive: The registry hive (e.g., winreg.HKEY_CURRENT_USER).
        sub_key: The registry subkey path to create.
    """
    try:
        winreg.CreateKey(hive, sub_key).Close()
    except OSError as e:
        raise registry_error_from_os_error(e, operation="create_key", path=sub_key) from e


def enum_first_sub_key(reg_key: winreg.HKEYType) -> str | None:
    """Return the name of the first subkey of an open key, or None if it has none."""
    try:
        return winreg.EnumKey(reg_key, 0)
    except OSError as e:
        if getattr(e, "winerror", None) == ERROR_NO_MORE_ITEMS:
            return None
        raise registry_error_from_os_error(e, operation="first_child") from e
