"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (UNIQNAME__SECTION__KEY)
3. Explicit or local YAML (./uniqname.yaml)
4. Global YAML (~/.config/uniqname/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    UNIQNAME__<SECTION>__<KEY>=<VALUE>

Examples:
    UNIQNAME__LOGGING__LEVEL=DEBUG
    UNIQNAME__NAMING__CHECK_RESERVED=false
    UNIQNAME__NAMING__SUPER_SUFFIX=owner
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from uniqname.config.constants import COUNT_BITS_DEFAULT, COUNT_BITS_MAX

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        UNIQNAME__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs one event per built type.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ReservedWordConfig(BaseModel):
    """A single reserved word seed."""

    name: str = Field(min_length=1)
    parameter: bool = Field(
        default=False,
        description="Reserve only for parameters (e.g. locals of generated function bodies).",
    )


class NamingConfig(BaseModel):
    """Collision index configuration.

    Env vars:
        UNIQNAME__NAMING__CHECK_RESERVED: Check the reserved-word namespace by default
        UNIQNAME__NAMING__INCLUDE_DEFAULT_RESERVED: Seed the built-in C++ word list
        UNIQNAME__NAMING__COUNTER_BITS: Bits per collision counter
        UNIQNAME__NAMING__SUPER_SUFFIX: Type name used for shadowed members
    """

    check_reserved: bool = Field(
        default=True,
        description="Search reserved words when registering symbols. "
        "Disable only for inputs whose names are already known to be valid.",
    )
    include_default_reserved: bool = Field(
        default=True,
        description="Seed the built-in C++ keyword and macro list before custom words.",
    )
    reserved_words: list[ReservedWordConfig] = Field(
        default_factory=list,
        description="Additional reserved words, seeded after the defaults.",
    )
    counter_bits: int = Field(
        default=COUNT_BITS_DEFAULT,
        description="Bits per collision counter. Counters saturate at 2**bits - 1.",
    )
    super_suffix: Literal["ancestor", "owner"] = Field(
        default="ancestor",
        description="Suffix shadowing members with the shadowed ancestor's name "
        "('ancestor') or with the declaring type's name ('owner').",
    )

    @field_validator("counter_bits")
    @classmethod
    def validate_counter_bits(cls, v: int) -> int:
        if not (1 <= v <= COUNT_BITS_MAX):
            raise ValueError(f"counter_bits must be 1-{COUNT_BITS_MAX}, got {v}")
        return v


class UniqnameConfig(BaseModel):
    """Root configuration for uniqname."""

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    naming: NamingConfig = Field(default_factory=NamingConfig)
