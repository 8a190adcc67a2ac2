import ctypes
import os
import sys

from win_utility.constants import ERROR_STRING_BUFFER_SIZE, UNKNOWN_ERROR_STRING
from win_utility.type_checking.bear_spray import bear_enforce

# What the platforms answer for codes they have no text for.
_UNTRANSLATED_PREFIXES: tuple[str, ...] = ("Unknown error", "<no description>")


@bear_enforce
def format_error(code: int) -> str:
    """Return the human-readable system message for an error code.

    On Windows the message comes from ``FormatMessage`` (as returned by ``GetLastError``
    codes); elsewhere from ``strerror``. Only the first line is kept.

    Args:
        code: The system error code.

    Returns:
        The message, or ``"Unknown"`` when the platform cannot translate the code.
    """
    try:
        if sys.platform == "win32":
            message = ctypes.FormatError(code)
        else:
            message = os.strerror(code)
    except (OverflowError, ValueError):
        return UNKNOWN_ERROR_STRING

    message = message.split("\r", 1)[0].split("\n", 1)[0].strip()

    if not message or message.startswith(_UNTRANSLATED_PREFIXES):
        return UNKNOWN_ERROR_STRING

    return message[: ERROR_STRING_BUFFER_SIZE - 1]
