"""Fatal error reporting.

Contract violations are raised as ``ContractViolationError`` and travel up the stack like
any other exception, so every ``finally`` block and context manager on the way releases its
resources. Only a top-level entry point hands them to a ``FatalReporter``, which presents a
diagnostic and terminates by raising ``SystemExit``.
"""

import ctypes
import logging
import sys
import traceback
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import NoReturn, Protocol, runtime_checkable

from win_utility.constants import EXIT_FAILURE, PROJECT_NAME
from win_utility.diagnostics.error_string import format_error
from win_utility.errors import ContractViolationError

logger = logging.getLogger(__name__)

MB_OK = 0x00000000
MB_ICONSTOP = 0x00000010

UNKNOWN_FILE = "???"


@dataclass(frozen=True)
class SourceLocation:
    """Where in the source a fatal condition was raised."""

    file: str | None
    line: int

    @classmethod
    def from_exception(cls, error: BaseException) -> "SourceLocation":
        """Return the location of the innermost frame of ``error``'s traceback."""
        frames = traceback.extract_tb(error.__traceback__)
        if not frames:
            return cls(file=None, line=0)

        frame = frames[-1]
        return cls(file=frame.filename, line=frame.lineno or 0)


@runtime_checkable
class FatalReporter(Protocol):
    """Presents a fatal diagnostic and terminates. ``report_fatal`` never returns."""

    def report_fatal(self, *, source: SourceLocation, operation: str, error_code: int, detail: str | None = None) -> NoReturn: ...


def critical_error_abort(
    reason: str | None,
    *,
    file: str | None = None,
    line: int = 0,
    show_message_box: bool = False,
    exit_code: int = EXIT_FAILURE,
) -> NoReturn:
    """Report a critical error and terminate.

    Args:
        reason: What went wrong. None produces a generic "Unknown error!" message.
        file: The source file the error was raised in.
        line: The source line the error was raised on.
        show_message_box: Also present the message in a Windows message box.
        exit_code: The exit status to terminate with.

    Raises:
        SystemExit: Always.
    """
    if reason:
        message = f'CRITICAL ERROR: "{reason}", File: "{file or UNKNOWN_FILE}", line: #{line} **'
    else:
        message = "Unknown error!"

    logger.critical(message)

    if show_message_box:
        _show_message_box(text=message, title=f"{PROJECT_NAME}: CRITICAL ERROR!")

    raise SystemExit(exit_code)


def _show_message_box(*, text: str, title: str) -> None:
    if sys.platform != "win32":
        return

    ctypes.windll.user32.MessageBoxW(None, text, title, MB_ICONSTOP | MB_OK)  # pyright: ignore[reportAttributeAccessIssue]


class AbortReporter:
    """A ``FatalReporter`` that logs the failure, optionally shows a message box, and exits."""

    def __init__(self, *, show_message_box: bool | None = None, exit_code: int = EXIT_FAILURE) -> None:
        """Initialize the reporter.

        Args:
            show_message_box: Present the diagnostic in a message box. Defaults to True on Windows.
            exit_code: The exit status to terminate with.
        """
        self._show_message_box: bool = sys.platform == "win32" if show_message_box is None else show_message_box
        self._exit_code: int = exit_code

    def report_fatal(self, *, source: SourceLocation, operation: str, error_code: int, detail: str | None = None) -> NoReturn:
        reason = f'{operation} failed, error: {error_code} "{format_error(error_code)}"'
        if detail:
            reason = f"{reason} ({detail})"

        critical_error_abort(
            reason,
            file=source.file,
            line=source.line,
            show_message_box=self._show_message_box,
            exit_code=self._exit_code,
        )


def report_contract_violation(error: ContractViolationError, *, reporter: FatalReporter | None = None) -> NoReturn:
    """Hand a contract violation to ``reporter`` (an ``AbortReporter`` by default)."""
    reporter = reporter or AbortReporter()

    reporter.report_fatal(
        source=SourceLocation.from_exception(error),
        operation=error.operation,
        error_code=error.error_code,
        detail=str(error),
    )

    # Unreachable for a conforming reporter.
    raise error


@contextmanager
def fatal_on_contract_violation(reporter: FatalReporter | None = None) -> Iterator[None]:
    """Route any ``ContractViolationError`` raised in the block to a fatal reporter."""
    try:
        yield
    except ContractViolationError as e:
        report_contract_violation(error=e, reporter=reporter)
