"""
Flagscan CLI Flags

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .converters import Char
from .descriptor import FlagDescriptor, is_valid_flag_name
from .errors import ErrorKind, FlagError, FlagErrors
from .exceptions import FlagDefinitionError, FlagscanError, InvalidFlagNameError
from .flag_kind import FlagKind
from .flag_set import FlagSet, FlagSetBuilder, ParseResult
from .flags import Flag, Flags
from .logger import logger
from .parser_types import TERMINATOR, FlagInfo, ParseOutcome
from .values import FlagValues

__all__ = [
    "Char",
    "ErrorKind",
    "Flag",
    "FlagDefinitionError",
    "FlagDescriptor",
    "FlagError",
    "FlagErrors",
    "FlagInfo",
    "FlagKind",
    "FlagSet",
    "FlagSetBuilder",
    "FlagValues",
    "Flags",
    "FlagscanError",
    "InvalidFlagNameError",
    "ParseOutcome",
    "ParseResult",
    "TERMINATOR",
    "is_valid_flag_name",
    "logger",
]
