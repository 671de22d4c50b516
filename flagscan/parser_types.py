# Flagscan CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Small value types shared by the descriptor, the scanner and introspection.

Contents:
- `ParseOutcome`: what a single descriptor did with the current token.
- `FlagInfo`: the static, introspectable view of one declared flag.
- `TERMINATOR`: the literal `--` token that ends flag scanning.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Any

TERMINATOR = "--"


class ParseOutcome(Enum):
    """Result of offering a token (and the one after it) to a descriptor."""

    NO_MATCH = "no_match"
    CONSUMED_ONE = "consumed_one"
    CONSUMED_TWO = "consumed_two"
    MISSING_VALUE = "missing_value"
    INVALID_VALUE = "invalid_value"

    @property
    def consumed(self) -> int:
        """Number of tokens the outcome accounts for."""
        if self is ParseOutcome.NO_MATCH:
            return 0
        if self in (ParseOutcome.CONSUMED_TWO, ParseOutcome.INVALID_VALUE):
            return 2
        return 1

    @property
    def matched(self) -> bool:
        return self is not ParseOutcome.NO_MATCH


@dataclass(frozen=True)
class FlagInfo:
    """Name, alias and declared type of a flag, in declaration order."""

    name: str
    alias: str
    type: Any
