"""Error hierarchy for the yaml_datastore package."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

__all__ = [
    "DatastoreError",
    "InvalidKeyPathError",
    "DatastoreIOError",
    "DataParseError",
    "KeyNotFoundError",
    "EmptyKeyVectorError",
    "ConfigNotFoundError",
    "ConfigError",
    "ErrorCodes",
]


class DatastoreError(Exception):
    """Base error for all datastore errors."""

    def __init__(
        self,
        code: str,
        message: str,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details: dict[str, Any] = details or {}
        self.cause = cause
        self.timestamp = datetime.now(timezone.utc).isoformat()

    def __str__(self) -> str:
        return f"[{self.code}] {self.message}"


class InvalidKeyPathError(DatastoreError):
    """Raised when a keypath string contains slashes or empty components."""

    def __init__(self, keypath: Any, **kwargs: Any) -> None:
        super().__init__(
            code="INVALID_KEYPATH",
            message=f"Invalid keypath: {keypath!r}",
            details={"keypath": keypath},
            **kwargs,
        )

    @property
    def keypath(self) -> Any:
        """The raw keypath that failed to parse."""
        return self.details["keypath"]


class DatastoreIOError(DatastoreError):
    """Raised when an explicitly named file cannot be read."""

    def __init__(self, path: str, reason: str, **kwargs: Any) -> None:
        super().__init__(
            code="IO_ERROR",
            message=f"Cannot read '{path}': {reason}",
            details={"path": path, "reason": reason},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The file path that could not be read."""
        return self.details["path"]


class DataParseError(DatastoreError):
    """Raised when file contents cannot be parsed or decoded into the requested type."""

    def __init__(self, path: str, reason: str, keys: list[str] | None = None, **kwargs: Any) -> None:
        location = f"{path} [{'.'.join(keys)}]" if keys else path
        super().__init__(
            code="DATA_PARSE_ERROR",
            message=f"Failed to parse data in {location}: {reason}",
            details={"path": path, "keys": keys or [], "reason": reason},
            **kwargs,
        )

    @property
    def path(self) -> str:
        """The file path whose data failed to parse."""
        return self.details["path"]


class KeyNotFoundError(DatastoreError):
    """Raised when a key or keypath does not resolve to any value."""

    def __init__(self, key: str, path: str | None = None, **kwargs: Any) -> None:
        if path is None:
            message = f"Key not found: {key}"
        else:
            message = f"Key not found: {key} in {path}"
        super().__init__(
            code="KEY_NOT_FOUND",
            message=message,
            details={"key": key, "path": path},
            **kwargs,
        )

    @property
    def key(self) -> str:
        """The key or keypath that was not found."""
        return self.details["key"]


class EmptyKeyVectorError(DatastoreError):
    """Raised when a key-chain lookup is given no keys."""

    def __init__(self, path: str, **kwargs: Any) -> None:
        super().__init__(
            code="EMPTY_KEY_VECTOR",
            message=f"Empty key list given for lookup in {path}",
            details={"path": path},
            **kwargs,
        )


class ConfigNotFoundError(DatastoreError):
    """Raised when a configuration file cannot be found."""

    def __init__(self, config_path: str, **kwargs: Any) -> None:
        super().__init__(
            code="CONFIG_NOT_FOUND",
            message=f"Configuration file not found: {config_path}",
            details={"config_path": config_path},
            **kwargs,
        )


class ConfigError(DatastoreError):
    """Raised when configuration is invalid."""

    def __init__(self, message: str, **kwargs: Any) -> None:
        super().__init__(code="CONFIG_INVALID", message=message, **kwargs)


class ErrorCodes:
    """All datastore error codes as constants.

    Example:
        if error.code == ErrorCodes.KEY_NOT_FOUND:
            use_default()
    """

    INVALID_KEYPATH = "INVALID_KEYPATH"
    IO_ERROR = "IO_ERROR"
    DATA_PARSE_ERROR = "DATA_PARSE_ERROR"
    KEY_NOT_FOUND = "KEY_NOT_FOUND"
    EMPTY_KEY_VECTOR = "EMPTY_KEY_VECTOR"
    CONFIG_NOT_FOUND = "CONFIG_NOT_FOUND"
    CONFIG_INVALID = "CONFIG_INVALID"

    def __setattr__(self, name: str, value: object) -> None:
        raise AttributeError("ErrorCodes is immutable")
