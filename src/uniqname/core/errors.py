"""uniqname error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Naming
- 9xxx: Internal
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_FILE_NOT_FOUND = 2004

    # Naming (3xxx)
    DUPLICATE_KEY = 3001
    SYMBOL_NOT_FOUND = 3002
    COUNTER_SATURATED = 3003
    INVALID_UNIVERSE = 3004

    # Internal (9xxx)
    INTERNAL_ERROR = 9001


@dataclass(frozen=True, slots=True)
class UniqnameError(Exception):
    """Base error with structured context for reports and logs."""

    code: ErrorCode
    message: str
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'DUPLICATE_KEY')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        """Serialize for JSON output."""
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(UniqnameError):
    """Configuration-related errors."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def file_not_found(cls, path: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_FILE_NOT_FOUND,
            message=f"Config file not found: {path}",
            details={"path": path},
        )


class NamingError(UniqnameError):
    """Errors raised or reported while building and querying the collision index."""

    @classmethod
    def duplicate_key(cls, key: Any, scope: str, symbol: str) -> "NamingError":
        return cls(
            code=ErrorCode.DUPLICATE_KEY,
            message=f"Translation key {key!r} for '{symbol}' in '{scope}' is already published",
            details={"key": repr(key), "scope": scope, "symbol": symbol},
        )

    @classmethod
    def not_found(cls, key: Any) -> "NamingError":
        return cls(
            code=ErrorCode.SYMBOL_NOT_FOUND,
            message=f"No symbol was registered for key {key!r}",
            details={"key": repr(key)},
        )

    @classmethod
    def counter_saturated(cls, symbol: str, slot: str, limit: int) -> "NamingError":
        return cls(
            code=ErrorCode.COUNTER_SATURATED,
            message=f"Collision counter '{slot}' for '{symbol}' saturated at {limit}",
            details={"symbol": symbol, "slot": slot, "limit": limit},
        )

    @classmethod
    def invalid_universe(cls, reason: str, **details: Any) -> "NamingError":
        return cls(
            code=ErrorCode.INVALID_UNIVERSE,
            message=f"Invalid type universe: {reason}",
            details=details,
        )


class InternalError(UniqnameError):
    """Internal/unexpected errors."""

    @classmethod
    def unexpected(cls, reason: str, **details: Any) -> "InternalError":
        return cls(
            code=ErrorCode.INTERNAL_ERROR,
            message=f"Internal error: {reason}",
            details=details,
        )
