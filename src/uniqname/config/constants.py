"""Configuration constants.

This module contains truly constant values that should NOT be user-configurable.
These are collision counter widths and the fixed decorations generated names use.

For configurable values, see models.py (NamingConfig, LoggingConfig).
"""

# =============================================================================
# Collision Counters
# =============================================================================
# One bounded counter per SymbolKind; counters saturate at 2**bits - 1.

COUNT_BITS_DEFAULT = 5
"""Default bits per collision counter (saturates at 31)."""

COUNT_BITS_MAX = 8
"""Upper bound for the configurable counter width."""

# =============================================================================
# Name Decorations
# =============================================================================

FUNCTION_PREFIX = "Func_"
"""Prepended to functions that collide with a data member."""

PARAMETER_PREFIX = "Param_"
"""Prepended to parameters that collide with a member or function."""

SEPARATOR = "_"
"""Joins a name to its owner-type or counter suffix."""

# =============================================================================
# Default Reserved Words
# =============================================================================
# Generated sources are C++ headers, so C++ keywords and common platform
# macros are reserved for every symbol kind.

DEFAULT_RESERVED_WORDS: tuple[str, ...] = (
    "alignas",
    "alignof",
    "and",
    "and_eq",
    "asm",
    "auto",
    "bitand",
    "bitor",
    "bool",
    "break",
    "case",
    "catch",
    "char",
    "char8_t",
    "char16_t",
    "char32_t",
    "class",
    "compl",
    "concept",
    "const",
    "consteval",
    "constexpr",
    "constinit",
    "const_cast",
    "continue",
    "co_await",
    "co_return",
    "co_yield",
    "decltype",
    "default",
    "delete",
    "do",
    "double",
    "dynamic_cast",
    "else",
    "enum",
    "explicit",
    "export",
    "extern",
    "false",
    "float",
    "for",
    "friend",
    "goto",
    "if",
    "inline",
    "int",
    "long",
    "mutable",
    "namespace",
    "new",
    "noexcept",
    "not",
    "not_eq",
    "nullptr",
    "operator",
    "or",
    "or_eq",
    "private",
    "protected",
    "public",
    "register",
    "reinterpret_cast",
    "requires",
    "return",
    "short",
    "signed",
    "sizeof",
    "static",
    "static_assert",
    "static_cast",
    "struct",
    "switch",
    "template",
    "this",
    "thread_local",
    "throw",
    "true",
    "try",
    "typedef",
    "typeid",
    "typename",
    "union",
    "unsigned",
    "using",
    "virtual",
    "void",
    "volatile",
    "wchar_t",
    "while",
    "xor",
    "xor_eq",
    "TRUE",
    "FALSE",
    "IN",
    "OUT",
    "DELETE",
    "NULL",
    "min",
    "max",
)

DEFAULT_RESERVED_PARAMETER_WORDS: tuple[str, ...] = (
    "Func",
    "Parms",
    "Params",
    "Flgs",
)
"""Locals emitted inside generated function bodies; reserved for parameters only."""
