# Flagscan CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FlagValues`, the record that holds the current value of every flag
in a `FlagSet`.

A fresh record is created for each parse, seeded with each flag's initial
value, and mutated in place while the scanner matches tokens. Fields are
reachable by attribute (`values.port`), by dest (`values["port"]`) or by the
`FlagDescriptor` handle returned from `FlagSetBuilder.add_flag()`.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable, Iterator

if TYPE_CHECKING:
    from flagscan.descriptor import FlagDescriptor


class FlagValues:
    """Mutable mapping-like record of flag values keyed by dest."""

    def __init__(self, descriptors: Iterable[FlagDescriptor]) -> None:
        object.__setattr__(
            self,
            "_values",
            {descriptor.dest: descriptor.initial_value() for descriptor in descriptors},
        )

    @staticmethod
    def _key(key: str | FlagDescriptor) -> str:
        return key if isinstance(key, str) else key.dest

    def __getitem__(self, key: str | FlagDescriptor) -> Any:
        return self._values[self._key(key)]

    def __setitem__(self, key: str | FlagDescriptor, value: Any) -> None:
        dest = self._key(key)
        if dest not in self._values:
            raise KeyError(dest)
        self._values[dest] = value

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._values[name]
        except KeyError:
            raise AttributeError(
                f"{type(self).__name__!r} has no flag named {name!r}"
            ) from None

    def __setattr__(self, name: str, value: Any) -> None:
        if name not in self._values:
            raise AttributeError(f"{type(self).__name__!r} has no flag named {name!r}")
        self._values[name] = value

    def __contains__(self, key: object) -> bool:
        if isinstance(key, str):
            return key in self._values
        return getattr(key, "dest", None) in self._values

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, FlagValues):
            return self._values == other._values
        if isinstance(other, dict):
            return self._values == other
        return NotImplemented

    def get(self, key: str | FlagDescriptor, default: Any = None) -> Any:
        return self._values.get(self._key(key), default)

    def as_dict(self) -> dict[str, Any]:
        """Return a shallow copy of the values keyed by dest."""
        return dict(self._values)

    def __repr__(self) -> str:
        fields = ", ".join(f"{dest}={value!r}" for dest, value in self._values.items())
        return f"FlagValues({fields})"


# Attribute access to these names reaches the record's methods, not a flag.
RESERVED_DESTS = frozenset(
    name for name in vars(FlagValues) if not name.startswith("_")
)
