# Flagscan CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `FlagSetBuilder` and `FlagSet`, the declaration and
matching table of the flagscan parser.

Flags are declared in order on a builder, which produces an immutable
`FlagSet`. The flag set is both the matching table used by the scanner and
the introspection surface callers use to enumerate declared flags.

Example Usage:
    builder = FlagSetBuilder()
    port = builder.add_flag("--port", int, alias="-p", default=8080)
    builder.add_flag("--verbose", bool, alias="-v")
    flag_set = builder.build()

    values, args, errors = flag_set.parse(["-p", "9000", "serve"])
    # values.port == 9000, values[port] == 9000, args == ["serve"]

Chained parsing:
    A first pass with `unknown_are_errors=False` leaves unrecognized flags in
    the positional list; `parse_chained()` then re-scans that list against a
    second flag set, replacing it in place and sharing one error list.
"""
from __future__ import annotations

from typing import Any, Iterator, NamedTuple, Sequence

from flagscan.descriptor import FlagDescriptor, dest_from_name
from flagscan.errors import FlagErrors
from flagscan.exceptions import FlagDefinitionError
from flagscan.flag_kind import FlagKind
from flagscan.logger import logger
from flagscan.parser_types import FlagInfo
from flagscan.scanner import scan_tokens
from flagscan.values import RESERVED_DESTS, FlagValues


class ParseResult(NamedTuple):
    """The `(values, args, errors)` triple returned by a parse."""

    values: FlagValues
    args: list[str]
    errors: FlagErrors


class FlagSet:
    """
    Immutable, ordered collection of `FlagDescriptor`s.

    Declaration order is both the matching precedence and the introspection
    order. Build one with `FlagSetBuilder`.
    """

    def __init__(self, descriptors: Sequence[FlagDescriptor] = ()) -> None:
        self._descriptors: tuple[FlagDescriptor, ...] = tuple(descriptors)

    def __iter__(self) -> Iterator[FlagDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    def __getitem__(self, index: int) -> FlagDescriptor:
        return self._descriptors[index]

    def get(self, token: str) -> FlagDescriptor | None:
        """Return the descriptor `token` would match during a scan, if any."""
        return next((d for d in self._descriptors if d.matches(token)), None)

    def get_by_dest(self, dest: str) -> FlagDescriptor | None:
        return next((d for d in self._descriptors if d.dest == dest), None)

    def new_values(self) -> FlagValues:
        """Return a record holding every flag's initial value."""
        return FlagValues(self._descriptors)

    def flag_infos(self) -> list[FlagInfo]:
        """
        Enumerate declared flags as `FlagInfo(name, alias, type)`.

        Reflects declarations only; parsing never changes the result.
        """
        return [descriptor.info() for descriptor in self._descriptors]

    def completion_words(self) -> list[str]:
        """Return every flag name and alias once, in declaration order."""
        words: list[str] = []
        for descriptor in self._descriptors:
            for word in (descriptor.name, descriptor.alias):
                if word not in words:
                    words.append(word)
        return words

    def to_definition_list(self) -> list[dict[str, Any]]:
        """
        Convert flag metadata into a list of dicts.

        Returns:
            List of definitions for config export, documentation checks or tooling.
        """
        return [
            {
                "name": descriptor.name,
                "alias": descriptor.alias,
                "dest": descriptor.dest,
                "type": descriptor.type,
                "kind": descriptor.kind,
                "default": descriptor.default,
            }
            for descriptor in self._descriptors
        ]

    def parse(
        self, tokens: Sequence[str], unknown_are_errors: bool = True
    ) -> ParseResult:
        """
        Parse `tokens` into fresh values, positionals and errors.

        Args:
            tokens (Sequence[str]): Arguments, without the program name.
            unknown_are_errors (bool): Record unrecognized `-` tokens as errors
                instead of treating them as positionals.

        Returns:
            ParseResult: `(values, args, errors)`.
        """
        values = self.new_values()
        args: list[str] = []
        errors = FlagErrors()
        scan_tokens(self._descriptors, tokens, values, args, errors, unknown_are_errors)
        return ParseResult(values, args, errors)

    def parse_chained(
        self,
        args: list[str],
        errors: FlagErrors | list,
        unknown_are_errors: bool = True,
    ) -> FlagValues:
        """
        Parse the positionals left by a previous pass.

        `args` is replaced in place with the positionals of this pass and new
        errors are appended to `errors`. Error positions index `args` as it
        was before this call.

        Returns:
            FlagValues: The record populated by this pass.
        """
        values = self.new_values()
        new_args: list[str] = []
        scan_tokens(self._descriptors, args, values, new_args, errors, unknown_are_errors)
        args[:] = new_args
        return values

    def __str__(self) -> str:
        counts = {kind: 0 for kind in FlagKind}
        for descriptor in self._descriptors:
            counts[descriptor.kind] += 1
        return (
            f"FlagSet(flags={len(self._descriptors)}, "
            f"boolean={counts[FlagKind.BOOLEAN]}, "
            f"repeated={counts[FlagKind.REPEATED]}, "
            f"optional={counts[FlagKind.OPTIONAL]})"
        )

    def __repr__(self) -> str:
        return str(self)


class FlagSetBuilder:
    """
    Collects flag declarations in order and builds a `FlagSet`.

    Each `add_flag()` call validates the declaration immediately and returns
    the descriptor, which doubles as an accessor into parsed `FlagValues`.
    """

    def __init__(self) -> None:
        self._descriptors: list[FlagDescriptor] = []
        self._dest_set: set[str] = set()
        self._flag_map: dict[str, FlagDescriptor] = {}

    def add_flag(
        self,
        name: str,
        type: Any = str,
        *,
        alias: str | None = None,
        default: Any = None,
        kind: FlagKind | str | None = None,
        dest: str | None = None,
    ) -> FlagDescriptor:
        """
        Declare a new flag.

        Args:
            name (str): Primary name, e.g. `--port` or `-v`.
            type (Any): Declared type: `bool`, `int`, `list[str]`, `Path | None`,
                a converter callable, ...
            alias (str | None): Secondary name; defaults to `name`.
            default (Any): Initial value of the field.
            kind (FlagKind | str | None): Container kind, inferred from `type`.
            dest (str | None): Field name in the parsed record; derived from
                `name` when omitted.

        Returns:
            FlagDescriptor: The registered descriptor.

        Raises:
            InvalidFlagNameError: If `name` or `alias` is not a valid flag name.
            FlagDefinitionError: If `dest` is invalid or already used.
        """
        if dest is None:
            dest = dest_from_name(name)
        if dest in self._dest_set:
            raise FlagDefinitionError(f"Destination '{dest}' is already defined.")
        descriptor = FlagDescriptor(
            name=name, dest=dest, type=type, alias=alias, default=default, kind=kind
        )
        self.add_descriptor(descriptor)
        return descriptor

    def add_descriptor(self, descriptor: FlagDescriptor) -> None:
        """Register an already constructed descriptor."""
        if descriptor.dest in RESERVED_DESTS or descriptor.dest.startswith("_"):
            raise FlagDefinitionError(
                f"Destination '{descriptor.dest}' is reserved; pass another dest."
            )
        if descriptor.dest in self._dest_set:
            raise FlagDefinitionError(
                f"Destination '{descriptor.dest}' is already defined."
            )
        for token in dict.fromkeys((descriptor.name, descriptor.alias)):
            existing = self._flag_map.get(token)
            if existing is not None:
                logger.warning(
                    "Flag '%s' of '%s' is shadowed by earlier flag '%s'",
                    token,
                    descriptor.dest,
                    existing.dest,
                )
            else:
                self._flag_map[token] = descriptor
        self._dest_set.add(descriptor.dest)
        self._descriptors.append(descriptor)

    def extend(self, flag_set: FlagSet) -> None:
        """Register every descriptor of an existing flag set, in its order."""
        for descriptor in flag_set:
            self.add_descriptor(descriptor)

    def build(self) -> FlagSet:
        return FlagSet(self._descriptors)
