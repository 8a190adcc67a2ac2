import json
import logging
from typing import Any

from typing_extensions import override

from win_utility.errors import RegistryOperationError
from win_utility.registry.protocol import HierarchicalStore
from win_utility.registry.wrappers.base import BaseWrapper


class LoggingWrapper(BaseWrapper):
    """Logs the start and finish of every call made to the wrapped store.

    Messages read ``Start TRY_DELETE path='A'`` and ``Finish TRY_DELETE path='A' ({'deleted': True})``.
    With ``structured_logs`` each message is a JSON object instead.
    """

    def __init__(
        self,
        store: HierarchicalStore,
        *,
        log_level: int = logging.DEBUG,
        structured_logs: bool = False,
        logger: logging.Logger | None = None,
    ) -> None:
        """Initialize the logging wrapper.

        Args:
            store: The store to wrap.
            log_level: The level to log start and finish messages at. Errors are logged at WARNING.
            structured_logs: Log JSON objects instead of plain text.
            logger: The logger to use. Defaults to this module's logger.
        """
        super().__init__(store=store)
        self._log_level: int = log_level
        self._structured_logs: bool = structured_logs
        self._logger: logging.Logger = logger or logging.getLogger(__name__)

    def _format(self, *, status: str, action: str, path: str, extra: dict[str, Any] | None = None) -> str:
        if self._structured_logs:
            payload: dict[str, Any] = {"status": status, "action": action, "path": path}
            if extra:
                payload["extra"] = extra
            return json.dumps(payload)

        message = f"{status.capitalize()} {action} path='{path}'"
        if extra:
            message += f" ({extra})"
        return message

    def _log(self, *, status: str, action: str, path: str, extra: dict[str, Any] | None = None) -> None:
        level = logging.WARNING if status == "error" else self._log_level
        self._logger.log(level, self._format(status=status, action=action, path=path, extra=extra))

    @override
    def try_delete(self, root: Any, path: str) -> None:
        self._log(status="start", action="TRY_DELETE", path=path)

        try:
            self.store.try_delete(root, path)
        except RegistryOperationError as e:
            self._log(status="error", action="TRY_DELETE", path=path, extra={"error": type(e).__name__})
            raise

        self._log(status="finish", action="TRY_DELETE", path=path, extra={"deleted": True})

    @override
    def open_for_read(self, root: Any, path: str) -> Any:
        self._log(status="start", action="OPEN_FOR_READ", path=path)

        try:
            handle = self.store.open_for_read(root, path)
        except RegistryOperationError as e:
            self._log(status="error", action="OPEN_FOR_READ", path=path, extra={"error": type(e).__name__})
            raise

        self._log(status="finish", action="OPEN_FOR_READ", path=path)

        return handle

    @override
    def first_child(self, handle: Any) -> str | None:
        path = str(getattr(handle, "path", handle))
        self._log(status="start", action="FIRST_CHILD", path=path)

        try:
            child = self.store.first_child(handle)
        except RegistryOperationError as e:
            self._log(status="error", action="FIRST_CHILD", path=path, extra={"error": type(e).__name__})
            raise

        self._log(status="finish", action="FIRST_CHILD", path=path, extra={"child": child})

        return child

    @override
    def close(self, handle: Any) -> None:
        path = str(getattr(handle, "path", handle))

        self.store.close(handle)

        self._log(status="finish", action="CLOSE", path=path)
