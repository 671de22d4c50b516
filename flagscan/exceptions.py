# Flagscan CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the exception classes raised while declaring flags.

Parsing itself never raises: unknown flags, missing values and invalid values
are collected as `FlagError` records (see `flagscan.errors`). The exceptions
below only signal programming mistakes in flag declarations, and they surface
when a `FlagSet` or `Flags` class is built, before any argument is scanned.

Exception Hierarchy:
- FlagscanError
    ├── InvalidFlagNameError
    └── FlagDefinitionError
"""


class FlagscanError(Exception):
    """Base exception for flagscan."""


class InvalidFlagNameError(FlagscanError):
    """Raised when a flag name or alias is empty, lacks a leading dash, or is `--`."""


class FlagDefinitionError(FlagscanError):
    """Raised when a flag declaration is inconsistent (bad dest, kind, or default)."""
