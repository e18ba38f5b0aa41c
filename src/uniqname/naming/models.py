"""Type universe description.

A universe is normally produced by a reflection walker. For the CLI and for
tests it can also be written as YAML or JSON::

    types:
      - name: Base
        members:
          - name: Value
      - name: Derived
        super: Base
        members:
          - {name: Value, offset: 8, size: 4}
        functions:
          - name: Value
            params:
              - name: NewValue

Omitted member offsets default to the member's declaration position so
same-named members of one scope still get distinct translation keys.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError

from uniqname.core.errors import NamingError


class MemberSpec(BaseModel):
    name: str = Field(min_length=1)
    number: int = Field(default=0, ge=0, description="Numeric disambiguator of the raw name.")
    offset: int | None = Field(default=None, ge=0)
    size: int = Field(default=0, ge=0)


class FunctionSpec(BaseModel):
    name: str = Field(min_length=1)
    number: int = Field(default=0, ge=0)
    params: list[MemberSpec] = Field(default_factory=list)


class TypeSpec(BaseModel):
    name: str = Field(min_length=1)
    super: str | None = None
    members: list[MemberSpec] = Field(default_factory=list)
    functions: list[FunctionSpec] = Field(default_factory=list)


class UniverseSpec(BaseModel):
    types: list[TypeSpec] = Field(default_factory=list)


# =============================================================================
# Concrete reflection objects
# =============================================================================


@dataclass(frozen=True, slots=True)
class MemberInfo:
    name: str
    number: int = 0
    offset: int = 0
    size: int = 0


@dataclass(frozen=True, slots=True, eq=False)
class FunctionInfo:
    scope_id: int
    name: str
    number: int = 0
    index: int = 0
    params: tuple[MemberInfo, ...] = ()


@dataclass(frozen=True, slots=True, eq=False)
class TypeInfo:
    scope_id: int
    name: str
    super: TypeInfo | None = None
    members: tuple[MemberInfo, ...] = ()
    functions: tuple[FunctionInfo, ...] = ()


def _members(specs: list[MemberSpec]) -> tuple[MemberInfo, ...]:
    return tuple(
        MemberInfo(
            name=spec.name,
            number=spec.number,
            offset=position if spec.offset is None else spec.offset,
            size=spec.size,
        )
        for position, spec in enumerate(specs)
    )


def build_universe(universe: UniverseSpec) -> list[TypeInfo]:
    """Turn a validated description into reflection objects.

    Types and functions share one integer identity space, assigned in
    declaration order. The result keeps declaration order.

    Raises:
        NamingError: INVALID_UNIVERSE on duplicate type names, unknown
            ancestors, or inheritance cycles.
    """
    specs: dict[str, TypeSpec] = {}
    for spec in universe.types:
        if spec.name in specs:
            raise NamingError.invalid_universe(f"duplicate type '{spec.name}'", type=spec.name)
        specs[spec.name] = spec

    for spec in universe.types:
        if spec.super is not None and spec.super not in specs:
            raise NamingError.invalid_universe(
                f"'{spec.name}' extends unknown type '{spec.super}'",
                type=spec.name,
                super=spec.super,
            )

    # Identities in declaration order: each type, then its functions
    type_ids: dict[str, int] = {}
    function_ids: dict[str, list[int]] = {}
    next_id = 0
    for spec in universe.types:
        type_ids[spec.name] = next_id
        next_id += 1
        function_ids[spec.name] = list(range(next_id, next_id + len(spec.functions)))
        next_id += len(spec.functions)

    built: dict[str, TypeInfo] = {}
    for spec in universe.types:
        # Walk up to the first built ancestor, then build back down.
        chain: list[TypeSpec] = []
        seen: set[str] = set()
        current: TypeSpec | None = spec
        while current is not None and current.name not in built:
            if current.name in seen:
                raise NamingError.invalid_universe(
                    f"inheritance cycle through '{current.name}'", type=current.name
                )
            seen.add(current.name)
            chain.append(current)
            current = specs[current.super] if current.super is not None else None

        for item in reversed(chain):
            built[item.name] = TypeInfo(
                scope_id=type_ids[item.name],
                name=item.name,
                super=built[item.super] if item.super is not None else None,
                members=_members(item.members),
                functions=tuple(
                    FunctionInfo(
                        scope_id=scope_id,
                        name=function.name,
                        number=function.number,
                        index=index,
                        params=_members(function.params),
                    )
                    for index, (scope_id, function) in enumerate(
                        zip(function_ids[item.name], item.functions, strict=True)
                    )
                ),
            )

    return [built[spec.name] for spec in universe.types]


def parse_universe(data: Any) -> list[TypeInfo]:
    """Validate raw (already decoded) data and build the universe."""
    try:
        universe = UniverseSpec.model_validate(data or {})
    except ValidationError as e:
        err = e.errors()[0]
        location = ".".join(str(loc) for loc in err["loc"])
        raise NamingError.invalid_universe(f"{location}: {err['msg']}", location=location) from e
    return build_universe(universe)


def load_universe(path: Path) -> list[TypeInfo]:
    """Load a YAML or JSON universe description from ``path``."""
    if not path.exists():
        raise NamingError.invalid_universe(f"file not found: {path}", path=str(path))
    try:
        with path.open() as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise NamingError.invalid_universe(f"cannot parse {path}: {e}", path=str(path)) from e
    return parse_universe(data)
