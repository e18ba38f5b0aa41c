"""Core module exports."""

from uniqname.core.errors import (
    ConfigError,
    ErrorCode,
    InternalError,
    NamingError,
    UniqnameError,
)
from uniqname.core.logging import (
    clear_build_id,
    configure_logging,
    get_build_id,
    get_logger,
    set_build_id,
)
from uniqname.core.progress import progress, status

__all__ = [
    # Errors
    "ConfigError",
    "ErrorCode",
    "InternalError",
    "NamingError",
    "UniqnameError",
    # Logging
    "clear_build_id",
    "configure_logging",
    "get_build_id",
    "get_logger",
    "set_build_id",
    # Progress
    "progress",
    "status",
]
