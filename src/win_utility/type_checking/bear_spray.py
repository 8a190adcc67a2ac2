from collections.abc import Callable
from typing import Any, TypeVar

from beartype import BeartypeConf, BeartypeStrategy, beartype

F = TypeVar("F", bound=Callable[..., Any])

enforce_bear_type_conf = BeartypeConf(strategy=BeartypeStrategy.O1, violation_type=TypeError)

enforce_bear_type = beartype(conf=enforce_bear_type_conf)


def bear_enforce(func: F) -> F:
    """Check the arguments and return value of ``func`` at call time, raising ``TypeError`` on a mismatch."""
    return enforce_bear_type(func)
