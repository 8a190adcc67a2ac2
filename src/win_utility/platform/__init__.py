from win_utility.platform.files import file_size
from win_utility.platform.process import shell_command
from win_utility.platform.window import force_window_focus, get_hwnd_for_pid

__all__ = ["file_size", "force_window_focus", "get_hwnd_for_pid", "shell_command"]
