from win_utility.constants import ERROR_FILENAME_EXCED_RANGE, ERROR_INVALID_PARAMETER, ERROR_STACK_OVERFLOW
from win_utility.errors.base import BaseWinUtilityError, ExtraInfoType


class ContractViolationError(BaseWinUtilityError):
    """Base exception for violated internal contracts.

    These are never returned as ordinary failures. They travel up to the top-level entry
    point, which hands them to a fatal reporter.
    """

    def __init__(self, message: str | None = None, *, operation: str, error_code: int, extra_info: ExtraInfoType | None = None):
        self.operation: str = operation
        self.error_code: int = error_code

        super().__init__(
            message=message,
            extra_info={"operation": operation, "error_code": error_code, **(extra_info or {})},
        )


class PathTooLongError(ContractViolationError):
    """Raised when a registry path would not fit in its bounded path buffer."""

    def __init__(self, length: int, capacity: int, operation: str = "append_path"):
        self.length: int = length
        self.capacity: int = capacity

        super().__init__(
            message="The registry path exceeds the path buffer capacity.",
            operation=operation,
            error_code=ERROR_FILENAME_EXCED_RANGE,
            extra_info={"length": length, "capacity": capacity},
        )


class TreeTooDeepError(ContractViolationError):
    """Raised when a registry subtree is nested deeper than the deleter allows."""

    def __init__(self, depth: int, max_depth: int, path: str | None = None):
        super().__init__(
            message="The registry subtree is nested too deeply.",
            operation="delete_path",
            error_code=ERROR_STACK_OVERFLOW,
            extra_info={"depth": depth, "max_depth": max_depth, "path": path},
        )


class InvalidRegistryPathError(ContractViolationError):
    """Raised when a registry path does not name any key below its root."""

    def __init__(self, path: str):
        super().__init__(
            message="The registry path is empty.",
            operation="delete_path",
            error_code=ERROR_INVALID_PARAMETER,
            extra_info={"path": path},
        )


class CriticalApiError(ContractViolationError):
    """Raised when a platform call that has no recovery path fails."""

    def __init__(self, api: str, error_code: int, extra_info: ExtraInfoType | None = None):
        super().__init__(
            message=f"{api}() failed.",
            operation=api,
            error_code=error_code,
            extra_info=extra_info,
        )
