# Flagscan CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value conversion utilities used when a flag receives a value token.

This module turns the textual token that follows a flag into the typed value
the flag declares. It understands `Enum`, `bool`, `datetime`, `Literal`,
unions and the single-character `Char` type, and falls back to calling the
target type (or converter function) with the token.

Functions:
- coerce_bool: Convert a string to a boolean.
- coerce_enum: Convert a string to an Enum instance.
- coerce_char: Accept exactly one character.
- coerce_value: General-purpose coercion to a target type.
- convert_value: Non-raising wrapper returning `(value, ok)`.
"""
import types
from datetime import datetime
from enum import EnumMeta
from typing import Any, Literal, Union, get_args, get_origin

from dateutil import parser as date_parser

from flagscan.logger import logger


class Char(str):
    """Marker type for flags whose value is exactly one character."""


TRUE_STRINGS = frozenset({"true", "t", "1", "yes", "y", "on"})
FALSE_STRINGS = frozenset({"false", "f", "0", "no", "n", "off"})


def coerce_bool(value: str) -> bool:
    """
    Convert a string to a boolean.

    Accepts truthy and falsy spellings such as 'true', 'yes', '0', 'off'.

    Raises:
        ValueError: If the string is not a recognized boolean spelling.
    """
    if isinstance(value, bool):
        return value
    normalized = value.strip().lower()
    if normalized in TRUE_STRINGS:
        return True
    if normalized in FALSE_STRINGS:
        return False
    raise ValueError(f"Value '{value}' is not a valid boolean")


def coerce_enum(value: Any, enum_type: EnumMeta) -> Any:
    """
    Resolve `value` to a member of `enum_type`, by member name first and then
    by member value.

    Raises:
        ValueError: If no member matches.
    """
    if isinstance(value, enum_type):
        return value

    members = enum_type.__members__
    if isinstance(value, str) and value in members:
        return members[value]

    # Tokens are strings; convert to the members' value type before lookup.
    value_type = type(next(iter(enum_type)).value)
    try:
        return enum_type(value_type(value))
    except (ValueError, TypeError):
        pass
    accepted = ", ".join(
        f"{name} ({member.value!r})" for name, member in members.items()
    )
    raise ValueError(
        f"'{value}' is not a {enum_type.__name__}; expected one of {accepted}"
    )


def coerce_char(value: str) -> Char:
    """Return `value` as a `Char` if it is exactly one character long."""
    if len(value) != 1:
        raise ValueError(f"Value '{value}' is not a single character")
    return Char(value)


def coerce_value(value: str, target_type: Any) -> Any:
    """
    Attempt to convert a string to the given target type.

    Handles Union, Literal, Enum, bool, datetime and Char specially; any other
    target is called with the string and must consume all of it.

    Args:
        value (str): The input token.
        target_type (Any): The desired type or a converter callable.

    Returns:
        Any: The coerced value.

    Raises:
        ValueError: If conversion fails or the value is invalid.
    """
    origin = get_origin(target_type)
    args = get_args(target_type)

    if origin is Literal:
        for literal in args:
            if value == str(literal):
                return literal
        raise ValueError(
            f"Value '{value}' is not a valid literal for type {target_type}"
        )

    if isinstance(target_type, types.UnionType) or origin is Union:
        for arg in args:
            if arg is type(None):
                continue
            try:
                return coerce_value(value, arg)
            except (ValueError, TypeError):
                continue
        raise ValueError(f"Value '{value}' could not be coerced to any of {args}")

    if target_type is Char:
        return coerce_char(value)

    if isinstance(target_type, EnumMeta):
        return coerce_enum(value, target_type)

    if target_type is bool:
        return coerce_bool(value)

    if target_type is datetime:
        try:
            return date_parser.parse(value)
        except (ValueError, OverflowError) as error:
            raise ValueError(
                f"Value '{value}' could not be parsed as a datetime"
            ) from error

    if target_type is str:
        return value

    return target_type(value)


def convert_value(value: str, target_type: Any) -> tuple[Any, bool]:
    """
    Convert `value` without raising.

    Returns:
        tuple[Any, bool]: The converted value (or `None`) and whether it succeeded.
    """
    try:
        return coerce_value(value, target_type), True
    except (ValueError, TypeError) as error:
        logger.debug("Rejected %r as %s: %s", value, target_type, error)
        return None, False
