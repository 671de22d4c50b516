# Flagscan CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Declarative flag records.

Subclass `Flags` and declare each flag as a class attribute; the attribute
name becomes the field the value is stored under:

    class ServerFlags(Flags):
        port = Flag("--port", int, default=8080)
        help = Flag("--help", bool, alias="-h")

    flags, args, errors = ServerFlags.parse(sys.argv[1:])
    if errors:
        errors.print(title="Invalid arguments:")

Flags are registered in the order they appear in the class body, after the
flags of any `Flags` base class. Invalid names fail when the class body is
evaluated, well before any argument is parsed.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Any, ClassVar, Sequence

from flagscan.descriptor import FlagDescriptor
from flagscan.errors import FlagErrors
from flagscan.exceptions import FlagDefinitionError
from flagscan.flag_kind import FlagKind
from flagscan.flag_set import FlagSet, FlagSetBuilder
from flagscan.parser_types import FlagInfo
from flagscan.values import FlagValues


class Flag:
    """
    A flag declaration used as a class attribute of a `Flags` subclass.

    On a `Flags` instance the attribute reads the parsed value; on the class
    it returns the declaration itself.
    """

    def __init__(
        self,
        name: str,
        type: Any = str,
        *,
        alias: str | None = None,
        default: Any = None,
        kind: FlagKind | str | None = None,
    ) -> None:
        # Validated here, while the class body runs; dest is bound in __set_name__.
        self.descriptor: FlagDescriptor = FlagDescriptor(
            name=name,
            dest="_",
            type=type,
            alias=alias,
            default=default,
            kind=kind,
        )
        self.dest: str | None = None

    @property
    def name(self) -> str:
        return self.descriptor.name

    @property
    def alias(self) -> str:
        return self.descriptor.alias

    def __set_name__(self, owner: type, name: str) -> None:
        self.dest = name
        self.descriptor = replace(self.descriptor, dest=name)

    def __get__(self, instance: Flags | None, owner: type | None = None) -> Any:
        if instance is None:
            return self
        return instance._values[self.dest]

    def __set__(self, instance: Flags, value: Any) -> None:
        instance._values[self.dest] = value

    def __repr__(self) -> str:
        return f"Flag({self.name!r}, {self.descriptor.type!r}, alias={self.alias!r})"


class Flags:
    """
    Base class for declarative flag records.

    Each subclass gets a `flag_set` class attribute built from its `Flag`
    declarations. Instances hold the values of one parse.
    """

    flag_set: ClassVar[FlagSet] = FlagSet()

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        members = {name for name in vars(Flags) if not name.startswith("_")}
        declared: dict[str, FlagDescriptor] = {}
        for klass in reversed(cls.__mro__):
            for attribute in vars(klass).values():
                if isinstance(attribute, Flag) and attribute.dest is not None:
                    if attribute.dest in members:
                        raise FlagDefinitionError(
                            f"Flag {attribute.name!r} of {cls.__name__} would hide "
                            f"Flags.{attribute.dest}; use another attribute name."
                        )
                    # A redefinition in a subclass keeps the base class position.
                    declared[attribute.dest] = attribute.descriptor
        builder = FlagSetBuilder()
        for descriptor in declared.values():
            builder.add_descriptor(descriptor)
        cls.flag_set = builder.build()

    def __init__(self, values: FlagValues | None = None) -> None:
        self._values: FlagValues = (
            values if values is not None else self.flag_set.new_values()
        )

    @classmethod
    def parse(
        cls, tokens: Sequence[str], unknown_are_errors: bool = True
    ) -> tuple[Flags, list[str], FlagErrors]:
        """
        Parse `tokens` into a new record of this class.

        Returns:
            tuple: `(record, args, errors)`.
        """
        values, args, errors = cls.flag_set.parse(tokens, unknown_are_errors)
        return cls(values), args, errors

    @classmethod
    def parse_chained(
        cls,
        args: list[str],
        errors: FlagErrors | list,
        unknown_are_errors: bool = True,
    ) -> Flags:
        """Parse the positionals of a previous pass; see `FlagSet.parse_chained`."""
        return cls(cls.flag_set.parse_chained(args, errors, unknown_are_errors))

    @classmethod
    def flag_infos(cls) -> list[FlagInfo]:
        return cls.flag_set.flag_infos()

    def as_dict(self) -> dict[str, Any]:
        return self._values.as_dict()

    def __repr__(self) -> str:
        fields = ", ".join(f"{dest}={value!r}" for dest, value in self.as_dict().items())
        return f"{type(self).__name__}({fields})"
