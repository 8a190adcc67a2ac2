import ctypes
import logging
import sys

from win_utility.constants import TRACE_BUFFER_SIZE

logger = logging.getLogger(__name__)


def trace(format_string: str, *args: object) -> None:
    """Emit a printf-style development trace message.

    The message is logged at DEBUG and, on Windows, also sent to the debugger through
    ``OutputDebugStringW``. Messages longer than the trace buffer are cut short.
    """
    message = format_string % args if args else format_string
    message = message[: TRACE_BUFFER_SIZE - 1]

    logger.debug(message)

    if sys.platform == "win32":
        ctypes.windll.kernel32.OutputDebugStringW(message)  # pyright: ignore[reportAttributeAccessIssue]
