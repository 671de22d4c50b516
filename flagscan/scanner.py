# Flagscan CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
The scanning engine that matches argument tokens against a `FlagSet`.

`scan_tokens()` walks the token list left to right. At each position it:

1. Stops at a literal `--`, copying every later token verbatim into the
   positional list.
2. Offers the token (and the one after it) to each descriptor in
   declaration order; the first descriptor that recognizes the token decides
   how many tokens are consumed and whether an error is recorded.
3. Treats an unrecognized token as an unknown flag (if it starts with `-`
   and unknown flags are errors) or as a positional argument.

The cursor always advances by at least one token, so the scan terminates in
O(flags x tokens). Errors and positionals are appended in scan order and the
engine keeps no state beyond the containers it is handed, which lets callers
run a second pass over the positionals of a first one with a shared error list.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from flagscan.errors import ErrorKind, FlagError, FlagErrors
from flagscan.logger import logger
from flagscan.parser_types import TERMINATOR, ParseOutcome
from flagscan.values import FlagValues

if TYPE_CHECKING:
    from flagscan.descriptor import FlagDescriptor


def match_token(
    descriptors: Sequence[FlagDescriptor],
    arg: str,
    val: str | None,
    values: FlagValues,
) -> tuple[FlagDescriptor | None, ParseOutcome]:
    """Return the first descriptor that recognizes `arg` and its outcome."""
    for descriptor in descriptors:
        outcome = descriptor.parse(arg, val, values)
        if outcome.matched:
            return descriptor, outcome
    return None, ParseOutcome.NO_MATCH


def scan_tokens(
    descriptors: Sequence[FlagDescriptor],
    tokens: Sequence[str],
    values: FlagValues,
    args: list[str],
    errors: FlagErrors,
    unknown_are_errors: bool = True,
) -> None:
    """
    Scan `tokens`, populating `values` and appending to `args` and `errors`.

    Args:
        descriptors (Sequence[FlagDescriptor]): Flags in declaration order.
        tokens (Sequence[str]): The argument list to scan. It is not modified.
        values (FlagValues): Record mutated in place as flags match.
        args (list[str]): Receives positional arguments in order.
        errors (FlagErrors): Receives parse errors in order.
        unknown_are_errors (bool): Whether unrecognized dash-prefixed tokens
            are errors (True) or positionals (False).
    """
    count = len(tokens)
    pos = 0
    while pos < count:
        arg = tokens[pos]
        if arg == TERMINATOR:
            args.extend(tokens[pos + 1 :])
            logger.debug("Terminator at index %d, %d trailing args", pos, count - pos - 1)
            return

        val = tokens[pos + 1] if pos + 1 < count else None
        descriptor, outcome = match_token(descriptors, arg, val, values)

        if outcome is ParseOutcome.MISSING_VALUE:
            errors.append(FlagError(pos, arg, ErrorKind.MISSING_VALUE))
        elif outcome is ParseOutcome.INVALID_VALUE:
            errors.append(FlagError(pos, arg, ErrorKind.INVALID_VALUE, val))
        elif outcome is ParseOutcome.NO_MATCH:
            if arg.startswith("-") and unknown_are_errors:
                errors.append(FlagError(pos, arg, ErrorKind.UNKNOWN))
            else:
                args.append(arg)

        if descriptor is not None:
            logger.debug("Index %d: %s -> %s (%s)", pos, arg, descriptor.dest, outcome)
        pos += max(1, outcome.consumed)
