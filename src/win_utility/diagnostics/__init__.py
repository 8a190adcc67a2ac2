from win_utility.diagnostics.error_string import format_error
from win_utility.diagnostics.fatal import (
    AbortReporter,
    FatalReporter,
    SourceLocation,
    critical_error_abort,
    fatal_on_contract_violation,
    report_contract_violation,
)
from win_utility.diagnostics.trace import trace

__all__ = [
    "AbortReporter",
    "FatalReporter",
    "SourceLocation",
    "critical_error_abort",
    "fatal_on_contract_violation",
    "format_error",
    "report_contract_violation",
    "trace",
]
