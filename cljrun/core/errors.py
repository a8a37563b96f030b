from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

ErrorCode = Literal[
    "both_modes",
    "no_mode",
    "script_undefined",
    "scripts_empty",
    "script_blank",
    "script_missing",
    "io_error",
    "invalid_settings",
    "launch_failed",
]


@dataclass
class ConfigurationError(Exception):
    code: ErrorCode
    message: str
    detail: str | None = None

    def __str__(self) -> str:
        if self.detail:
            return f"{self.message} ({self.detail})"
        return self.message


def format_error(error: BaseException) -> str:
    if isinstance(error, ConfigurationError):
        return f"[{error.code}] {error}"
    return f"{error}"


def wrap_error(
    error: BaseException,
    *,
    code: ErrorCode,
    message: str | None = None,
) -> ConfigurationError:
    """Return ``error`` unchanged if it is already a ConfigurationError."""
    if isinstance(error, ConfigurationError):
        return error
    text = str(error)
    if message is None:
        return ConfigurationError(code=code, message=text or type(error).__name__)
    return ConfigurationError(code=code, message=message, detail=text or None)
