# Flagscan CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Parse error records and their human-readable rendering.

Parsing never raises on bad input. Every problem found while scanning is
recorded as a `FlagError` and appended, in scan order, to a `FlagErrors`
list that the caller inspects after the parse:

    Unknown flag `--two` at index 20
    Invalid value "nan" for flag `-e` at index 21
    Missing value for flag `-f` at index 23

Rendering is pure formatting; printing through Rich and choosing an exit code
are left to the caller.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from rich.console import Console
from rich.markup import escape

from flagscan.console import error_console


class ErrorKind(Enum):
    """Classification of a parse failure."""

    UNKNOWN = "unknown"
    MISSING_VALUE = "missing_value"
    INVALID_VALUE = "invalid_value"

    def __str__(self) -> str:
        return self.value


def quoted(text: str) -> str:
    """Wrap `text` in double quotes, escaping embedded quotes and backslashes."""
    escaped = text.replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


@dataclass(frozen=True)
class FlagError:
    """
    One parse failure.

    Attributes:
        position (int): Index of the offending flag token in the scanned list.
        flag (str): The offending token as it appeared.
        kind (ErrorKind): What went wrong.
        value (str | None): The rejected value text, for `INVALID_VALUE` only.
    """

    position: int
    flag: str
    kind: ErrorKind = ErrorKind.UNKNOWN
    value: str | None = None

    def render(self) -> str:
        """Return the one-line description of this error."""
        if self.kind is ErrorKind.UNKNOWN:
            text = f"Unknown flag `{self.flag}`"
        elif self.kind is ErrorKind.MISSING_VALUE:
            text = f"Missing value for flag `{self.flag}`"
        else:
            text = f"Invalid value {quoted(self.value or '')} for flag `{self.flag}`"
        return f"{text} at index {self.position}"

    def __str__(self) -> str:
        return self.render()


class FlagErrors(list[FlagError]):
    """
    Ordered list of parse errors.

    Errors are kept in the order the scanner found them; they are never sorted
    or deduplicated. The list is truthy exactly when it holds an error.
    """

    @property
    def has_errors(self) -> bool:
        return bool(self)

    def render(self) -> list[str]:
        """Return one rendered line per error, in scan order."""
        return [error.render() for error in self]

    def print(self, console: Console | None = None, title: str | None = None) -> None:
        """Print the errors through Rich, one per line."""
        console = console or error_console
        if title:
            console.print(f"[bold red]{escape(title)}[/]", highlight=False)
        for line in self.render():
            console.print(f"[red]✗[/] {escape(line)}", highlight=False)

    def __str__(self) -> str:
        return "\n".join(self.render())

    def __repr__(self) -> str:
        return f"FlagErrors({list.__repr__(self)})"
