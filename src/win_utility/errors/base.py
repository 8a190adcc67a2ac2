ExtraInfoType = dict[str, str | int | float | bool | None]


class BaseWinUtilityError(Exception):
    """Base exception for all win-utility errors."""

    def __init__(self, message: str | None = None, extra_info: ExtraInfoType | None = None):
        message_parts: list[str] = []

        if message:
            message_parts.append(message)

        if extra_info:
            extra_info_str = ";".join(f"{k}: {v}" for k, v in extra_info.items())
            if message:
                extra_info_str = "(" + extra_info_str + ")"

            message_parts.append(extra_info_str)

        super().__init__(": ".join(message_parts))


class UnsupportedPlatformError(BaseWinUtilityError):
    """Raised when a Windows-only helper is called on another platform."""

    def __init__(self, operation: str, platform: str):
        super().__init__(
            message="This operation is only available on Windows.",
            extra_info={"operation": operation, "platform": platform},
        )
