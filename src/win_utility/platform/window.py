import ctypes
import sys
from typing import Any

from win_utility.errors import UnsupportedPlatformError

_user32: Any = None


def _get_user32() -> Any:
    global _user32  # noqa: PLW0603

    if _user32 is not None:
        return _user32

    if sys.platform != "win32":
        raise UnsupportedPlatformError(operation="user32", platform=sys.platform)

    user32 = ctypes.WinDLL("user32", use_last_error=True)  # pyright: ignore[reportAttributeAccessIssue]

    # HWNDs are pointer sized; the default int restype would truncate them on 64-bit.
    user32.FindWindowExW.restype = ctypes.c_void_p
    user32.FindWindowExW.argtypes = (ctypes.c_void_p, ctypes.c_void_p, ctypes.c_wchar_p, ctypes.c_wchar_p)
    user32.GetWindowThreadProcessId.restype = ctypes.c_ulong
    user32.GetWindowThreadProcessId.argtypes = (ctypes.c_void_p, ctypes.POINTER(ctypes.c_ulong))
    user32.SwitchToThisWindow.argtypes = (ctypes.c_void_p, ctypes.c_int)
    user32.BringWindowToTop.argtypes = (ctypes.c_void_p,)
    user32.SetForegroundWindow.argtypes = (ctypes.c_void_p,)

    _user32 = user32
    return _user32


def force_window_focus(hwnd: int) -> None:
    """Bring a window to the top and make it the foreground window."""
    user32 = _get_user32()

    user32.SwitchToThisWindow(hwnd, True)
    user32.BringWindowToTop(hwnd)
    user32.SetForegroundWindow(hwnd)


def get_hwnd_for_pid(pid: int) -> int | None:
    """Return the first top-level window owned by process ``pid``, or None if it has none.

    A process may own several top-level windows; only the first one found is returned.
    """
    user32 = _get_user32()

    hwnd = user32.FindWindowExW(None, None, None, None)
    while hwnd:
        window_pid = ctypes.c_ulong()
        user32.GetWindowThreadProcessId(hwnd, ctypes.pointer(window_pid))
        if window_pid.value == pid:
            return hwnd

        hwnd = user32.FindWindowExW(None, hwnd, None, None)

    return None
