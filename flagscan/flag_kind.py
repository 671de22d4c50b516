# Flagscan CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagKind`, the value container kinds a declared flag can hold, and
`resolve_kind()`, which infers the kind from a declared type.

Kinds:
    - SCALAR: a single value, overwritten when the flag repeats.
    - BOOLEAN: consumes no value token; set to `True` on match.
    - REPEATED: an ordered list, appended on each match.
    - OPTIONAL: `None` until the first match, then holds one value.

Example:
    resolve_kind(list[int])   → (FlagKind.REPEATED, int)
    resolve_kind(str | None)  → (FlagKind.OPTIONAL, str)
    FlagKind("append")        → FlagKind.REPEATED (via alias)
"""
from __future__ import annotations

import types
from enum import Enum
from typing import Any, Union, get_args, get_origin


class FlagKind(Enum):
    """
    Defines how a flag stores the values it receives.

    Aliases:
        - "bool", "flag", "store_true" → "boolean"
        - "list", "append", "multi" → "repeated"
        - "maybe", "optional" → "optional"
        - "store", "single" → "scalar"
    """

    SCALAR = "scalar"
    BOOLEAN = "boolean"
    REPEATED = "repeated"
    OPTIONAL = "optional"

    @classmethod
    def choices(cls) -> list[FlagKind]:
        """Return a list of all flag kinds."""
        return list(cls)

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "bool": "boolean",
            "flag": "boolean",
            "store_true": "boolean",
            "list": "repeated",
            "append": "repeated",
            "multi": "repeated",
            "maybe": "optional",
            "store": "scalar",
            "single": "scalar",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> FlagKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    @property
    def takes_value(self) -> bool:
        """Whether a match consumes the following token as a value."""
        return self is not FlagKind.BOOLEAN

    def initial(self, default: Any) -> Any:
        """Return the starting value of a field of this kind."""
        if self is FlagKind.BOOLEAN:
            return bool(default) if default is not None else False
        if self is FlagKind.REPEATED:
            return list(default) if default is not None else []
        return default

    def store(self, current: Any, value: Any) -> Any:
        """Return the new field value after a successful match."""
        if self is FlagKind.REPEATED:
            current.append(value)
            return current
        return value

    def __str__(self) -> str:
        return self.value


def _is_union(declared_type: Any) -> bool:
    return isinstance(declared_type, types.UnionType) or get_origin(declared_type) is Union


def resolve_kind(
    declared_type: Any, kind: FlagKind | str | None = None
) -> tuple[FlagKind, Any]:
    """
    Work out the container kind and the per-token converter type of a flag.

    Args:
        declared_type (Any): The type given in the declaration, e.g. `int`,
            `list[str]`, `Path | None` or a converter callable.
        kind (FlagKind | str | None): An explicit kind overriding inference.

    Returns:
        tuple[FlagKind, Any]: The kind and the type each value token converts to.
    """
    origin = get_origin(declared_type)
    args = get_args(declared_type)

    inferred: FlagKind
    value_type: Any = declared_type
    if declared_type is bool:
        inferred = FlagKind.BOOLEAN
    elif origin is list:
        inferred = FlagKind.REPEATED
        value_type = args[0] if args else str
    elif _is_union(declared_type) and type(None) in args:
        inferred = FlagKind.OPTIONAL
        remaining = tuple(arg for arg in args if arg is not type(None))
        value_type = remaining[0] if len(remaining) == 1 else Union[remaining]
    elif declared_type is list:
        inferred = FlagKind.REPEATED
        value_type = str
    else:
        inferred = FlagKind.SCALAR

    if kind is None:
        return inferred, value_type

    kind = FlagKind(kind)
    if kind is inferred or kind is FlagKind.SCALAR:
        return kind, value_type
    if kind is FlagKind.BOOLEAN:
        return kind, bool
    if inferred is FlagKind.SCALAR:
        # Explicit container kind over a plain element type, e.g. (int, "repeated").
        return kind, declared_type
    return kind, value_type
