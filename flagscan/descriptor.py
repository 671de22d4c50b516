# Flagscan CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagDescriptor`, the static metadata of one declared flag, and the
name validity rule every flag name and alias must satisfy.

A descriptor knows its canonical name, its alias, the declared type, how it
stores values (`FlagKind`) and where in the `FlagValues` record its value
lives (`dest`). Its `parse()` method is the per-flag half of the scanning
algorithm: it decides whether a token names this flag and how many tokens
the match consumes.

Names are validated when the descriptor is constructed, so a bad declaration
fails as soon as the flag set is built, never during a parse.
"""
from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from typing import Any

from flagscan.converters import convert_value
from flagscan.exceptions import FlagDefinitionError, InvalidFlagNameError
from flagscan.flag_kind import FlagKind, resolve_kind
from flagscan.parser_types import TERMINATOR, FlagInfo, ParseOutcome
from flagscan.values import FlagValues


def is_valid_flag_name(name: Any) -> bool:
    """
    Return True if `name` can be used as a flag name or alias.

    A name must be a non-empty string starting with `-` and must not be the
    `--` terminator. `-`, `---` and `-a-b_c` are all valid.
    """
    if not isinstance(name, str) or not name.startswith("-"):
        return False
    return name != TERMINATOR


def validate_flag_name(name: Any) -> str:
    """Return `name` unchanged or raise `InvalidFlagNameError`."""
    if not is_valid_flag_name(name):
        raise InvalidFlagNameError(
            f"Flag name {name!r} must start with '-' and be different from '--'"
        )
    return name


def dest_from_name(name: str) -> str:
    """
    Derive a record field name from a flag name.

    `--dry-run` → `dry_run`, `-p` → `p`.

    Raises:
        FlagDefinitionError: If nothing identifier-like is left.
    """
    dest = name.lstrip("-").replace("-", "_")
    if not dest.isidentifier():
        raise FlagDefinitionError(
            f"Cannot derive a dest from flag {name!r}; pass dest= explicitly"
        )
    return dest


@dataclass(frozen=True, eq=False)
class FlagDescriptor:
    """
    Represents one declared flag.

    Attributes:
        name (str): Canonical flag name, e.g. `--port`.
        dest (str): Field name in the `FlagValues` record.
        type (Any): The declared type, e.g. `int`, `list[str]`, `Path | None`.
        alias (str | None): Secondary name; defaults to `name`.
        default (Any): Initial value of the field before parsing.
        kind (FlagKind | str | None): Container kind; inferred from `type` if omitted.
        value_type (Any): Type each value token is converted to; inferred.
    """

    name: str
    dest: str
    type: Any = str
    alias: str | None = None
    default: Any = None
    kind: FlagKind | str | None = None
    value_type: Any = None

    def __post_init__(self) -> None:
        validate_flag_name(self.name)
        if self.alias is None:
            object.__setattr__(self, "alias", self.name)
        validate_flag_name(self.alias)
        if not self.dest.isidentifier():
            raise FlagDefinitionError(
                f"dest {self.dest!r} for flag {self.name!r} must be a valid identifier"
            )
        try:
            kind, value_type = resolve_kind(self.type, self.kind)
        except ValueError as error:
            raise FlagDefinitionError(f"Flag {self.name!r}: {error}") from error
        object.__setattr__(self, "kind", kind)
        if self.value_type is None:
            object.__setattr__(self, "value_type", value_type)
        self._validate_default()

    def _validate_default(self) -> None:
        if self.default is None:
            return
        if self.kind is FlagKind.REPEATED and (
            isinstance(self.default, (str, bytes))
            or not hasattr(self.default, "__iter__")
        ):
            raise FlagDefinitionError(
                f"Default for repeated flag {self.name!r} must be a list, "
                f"got {type(self.default).__name__}"
            )
        if self.kind is FlagKind.BOOLEAN and not isinstance(self.default, bool):
            raise FlagDefinitionError(
                f"Default for boolean flag {self.name!r} must be a bool"
            )

    def matches(self, token: str) -> bool:
        """Return True if `token` is this flag's name or alias."""
        return token == self.name or token == self.alias

    def initial_value(self) -> Any:
        """Return a fresh copy of the value the field starts a parse with."""
        return self.kind.initial(deepcopy(self.default))

    def parse(
        self, name_token: str, value_token: str | None, values: FlagValues
    ) -> ParseOutcome:
        """
        Offer a token and its successor to this flag.

        Boolean flags never consume the following token. Other flags treat an
        absent or dash-prefixed successor as a missing value. A failed
        conversion leaves the field untouched.

        Args:
            name_token (str): The token under the scanner's cursor.
            value_token (str | None): The next token, if any.
            values (FlagValues): The record being populated.

        Returns:
            ParseOutcome: What happened; `NO_MATCH` when the token is not this flag.
        """
        if not self.matches(name_token):
            return ParseOutcome.NO_MATCH
        if not self.kind.takes_value:
            values[self.dest] = True
            return ParseOutcome.CONSUMED_ONE
        if value_token is None or value_token.startswith("-"):
            return ParseOutcome.MISSING_VALUE
        converted, ok = convert_value(value_token, self.value_type)
        if not ok:
            return ParseOutcome.INVALID_VALUE
        values[self.dest] = self.kind.store(values[self.dest], converted)
        return ParseOutcome.CONSUMED_TWO

    def info(self) -> FlagInfo:
        return FlagInfo(name=self.name, alias=self.alias, type=self.type)

    def __repr__(self) -> str:
        return (
            f"FlagDescriptor(name={self.name!r}, alias={self.alias!r}, "
            f"dest={self.dest!r}, kind={self.kind})"
        )
