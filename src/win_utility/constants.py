"""Constants shared by the registry, diagnostics and platform helpers."""

from typing import Final

PROJECT_NAME: Final[str] = "win-utility"

EXIT_FAILURE: Final[int] = 1

# Registry
REGISTRY_SEPARATOR: Final[str] = "\\"
SUBKEY_BUFFER_SIZE: Final[int] = 2048
MAX_CHILD_NAME_LENGTH: Final[int] = 260
MAX_KEY_NAME_LENGTH: Final[int] = 255
MAX_TREE_DEPTH: Final[int] = 512

# Diagnostics
TRACE_BUFFER_SIZE: Final[int] = 2048
ERROR_STRING_BUFFER_SIZE: Final[int] = 1024
UNKNOWN_ERROR_STRING: Final[str] = "Unknown"

# Child processes, in seconds
PROCESS_WAIT_TIMEOUT: Final[float] = 8.0

# System error codes
ERROR_FILE_NOT_FOUND: Final[int] = 2
ERROR_PATH_NOT_FOUND: Final[int] = 3
ERROR_ACCESS_DENIED: Final[int] = 5
ERROR_INVALID_HANDLE: Final[int] = 6
ERROR_INVALID_PARAMETER: Final[int] = 87
ERROR_DIR_NOT_EMPTY: Final[int] = 145
ERROR_FILENAME_EXCED_RANGE: Final[int] = 206
WAIT_TIMEOUT: Final[int] = 258
ERROR_NO_MORE_ITEMS: Final[int] = 259
ERROR_STACK_OVERFLOW: Final[int] = 1001
ERROR_KEY_DELETED: Final[int] = 1018

NOT_FOUND_ERROR_CODES: Final[tuple[int, ...]] = (ERROR_FILE_NOT_FOUND, ERROR_PATH_NOT_FOUND)
