import logging
import shlex
import subprocess
import sys
from collections.abc import Sequence

from win_utility.constants import PROCESS_WAIT_TIMEOUT, WAIT_TIMEOUT
from win_utility.errors import CriticalApiError
from win_utility.type_checking.bear_spray import bear_enforce

logger = logging.getLogger(__name__)


def _startupinfo(*, invisible: bool) -> "subprocess.STARTUPINFO | None":
    if not invisible or sys.platform != "win32":
        return None

    startupinfo = subprocess.STARTUPINFO()
    startupinfo.dwFlags |= subprocess.STARTF_USESHOWWINDOW
    startupinfo.wShowWindow = subprocess.SW_HIDE
    return startupinfo


@bear_enforce
def shell_command(command_line: str | Sequence[str], *, invisible: bool = False, timeout: float = PROCESS_WAIT_TIMEOUT) -> int:
    """Run a command line, wait for it to exit and return its exit code.

    Args:
        command_line: The command to run. A string is passed to ``CreateProcess`` as is on
            Windows and split with ``shlex`` elsewhere.
        invisible: Hide the child's window (Windows only).
        timeout: How long to wait for the child to exit, in seconds.

    Raises:
        CriticalApiError: If the process cannot be started, or does not exit within
            ``timeout`` (the child is killed first).
    """
    args: str | Sequence[str] = command_line
    if isinstance(command_line, str) and sys.platform != "win32":
        args = shlex.split(command_line)

    try:
        process = subprocess.Popen(args, startupinfo=_startupinfo(invisible=invisible))  # noqa: S603
    except OSError as e:
        raise CriticalApiError(
            api="CreateProcess", error_code=getattr(e, "winerror", None) or e.errno or 0, extra_info={"command": str(command_line)}
        ) from e

    with process:
        try:
            return process.wait(timeout=timeout)
        except subprocess.TimeoutExpired as e:
            logger.warning("Child process did not exit in time, killing it", extra={"pid": process.pid, "timeout": timeout})
            process.kill()
            raise CriticalApiError(
                api="WaitForSingleObject", error_code=WAIT_TIMEOUT, extra_info={"command": str(command_line), "timeout": timeout}
            ) from e
