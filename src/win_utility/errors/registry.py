from win_utility.constants import ERROR_ACCESS_DENIED, NOT_FOUND_ERROR_CODES
from win_utility.errors.base import BaseWinUtilityError


class RegistryOperationError(BaseWinUtilityError):
    """Raised when a registry store operation fails.

    These failures are recoverable: the subtree deleter turns them into a ``False`` result
    and leaves the decision to retry or give up to its caller.
    """

    default_message: str = "A registry operation failed."

    def __init__(
        self,
        message: str | None = None,
        *,
        operation: str | None = None,
        path: str | None = None,
        error_code: int | None = None,
    ):
        self.operation: str | None = operation
        self.path: str | None = path
        self.error_code: int | None = error_code

        super().__init__(
            message=message or self.default_message,
            extra_info={"operation": operation, "path": path, "error_code": error_code},
        )


class RegistryKeyNotFoundError(RegistryOperationError):
    """Raised when a registry key does not exist."""

    default_message = "The registry key does not exist."


class RegistryKeyNotEmptyError(RegistryOperationError):
    """Raised when deleting a registry key that still has subkeys."""

    default_message = "The registry key still has subkeys."


class RegistryAccessDeniedError(RegistryOperationError):
    """Raised when the registry refuses an operation for lack of access rights."""

    default_message = "Access to the registry key was denied."


def registry_error_from_os_error(error: OSError, *, operation: str, path: str | None = None) -> RegistryOperationError:
    """Translate an ``OSError`` raised by ``winreg`` into a registry error.

    Args:
        error: The error raised by the ``winreg`` call.
        operation: The name of the store operation that failed.
        path: The registry path involved, if any.

    Returns:
        The matching ``RegistryOperationError`` subclass, carrying the system error code.
    """
    error_code: int | None = getattr(error, "winerror", None) or error.errno

    error_type: type[RegistryOperationError] = RegistryOperationError
    if isinstance(error, FileNotFoundError) or error_code in NOT_FOUND_ERROR_CODES:
        error_type = RegistryKeyNotFoundError
    elif isinstance(error, PermissionError) or error_code == ERROR_ACCESS_DENIED:
        error_type = RegistryAccessDeniedError

    return error_type(error.strerror, operation=operation, path=path, error_code=error_code)
