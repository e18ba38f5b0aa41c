"""Config module exports."""

from uniqname.config.loader import load_config
from uniqname.config.models import (
    LoggingConfig,
    NamingConfig,
    ReservedWordConfig,
    UniqnameConfig,
)

__all__ = [
    "load_config",
    "LoggingConfig",
    "NamingConfig",
    "ReservedWordConfig",
    "UniqnameConfig",
]
