"""Error classes for win-utility.

Exception Hierarchy:
    BaseWinUtilityError
    ├── UnsupportedPlatformError
    ├── RegistryOperationError (recoverable, reported as a ``False`` result)
    │   ├── RegistryKeyNotFoundError
    │   ├── RegistryKeyNotEmptyError
    │   └── RegistryAccessDeniedError
    └── ContractViolationError (fatal, routed to a fatal reporter)
        ├── PathTooLongError
        ├── TreeTooDeepError
        ├── InvalidRegistryPathError
        └── CriticalApiError
"""

from win_utility.errors.base import BaseWinUtilityError, ExtraInfoType, UnsupportedPlatformError
from win_utility.errors.contract import (
    ContractViolationError,
    CriticalApiError,
    InvalidRegistryPathError,
    PathTooLongError,
    TreeTooDeepError,
)
from win_utility.errors.registry import (
    RegistryAccessDeniedError,
    RegistryKeyNotEmptyError,
    RegistryKeyNotFoundError,
    RegistryOperationError,
    registry_error_from_os_error,
)

__all__ = [
    "BaseWinUtilityError",
    "ContractViolationError",
    "CriticalApiError",
    "ExtraInfoType",
    "InvalidRegistryPathError",
    "PathTooLongError",
    "RegistryAccessDeniedError",
    "RegistryKeyNotEmptyError",
    "RegistryKeyNotFoundError",
    "RegistryOperationError",
    "TreeTooDeepError",
    "UnsupportedPlatformError",
    "registry_error_from_os_error",
]
