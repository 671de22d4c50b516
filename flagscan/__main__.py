"""
Flagscan CLI Flags

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.

`python -m flagscan` parses arguments against flags declared in a YAML or TOML
file and prints what the parser saw. Its own options are parsed first with
unknown flags passed through; the leftovers are then parsed against the
configured flag set, sharing one error list.
"""

import os
import sys
from pathlib import Path
from typing import Literal, Sequence

from rich.markup import escape
from rich.table import Table

from flagscan.config import loader
from flagscan.console import console, error_console
from flagscan.exceptions import FlagscanError
from flagscan.flag_set import FlagSet
from flagscan.flags import Flag, Flags
from flagscan.logger import logger
from flagscan.utils import setup_logging
from flagscan.values import FlagValues

USAGE = """\
usage: flagscan [-c CONFIG] [--allow-unknown] [-v] [--log-mode MODE] [--] ARGS...

Parses ARGS against the flags declared in CONFIG (YAML or TOML) and prints
the resulting values, positional arguments and errors.

  --config/-c     : flag declarations to parse against.
  --allow-unknown : treat unknown flags as positional arguments.
  --verbose/-v    : log the scan at debug level.
  --log-mode      : "cli" or "json" log output.
  --help/-h       : prints this help.

Put ARGS after `--` when they use any of the flags above.
"""


class MainFlags(Flags):
    config = Flag("--config", Path | None, alias="-c")
    allow_unknown = Flag("--allow-unknown", bool)
    verbose = Flag("--verbose", bool, alias="-v")
    log_mode = Flag("--log-mode", Literal["cli", "json"] | None)
    help = Flag("--help", bool, alias="-h")


def find_flagscan_config() -> Path | None:
    candidates = [
        Path(os.environ.get("FLAGSCAN_CONFIG", "flagscan.yaml")),
        Path.cwd() / "flagscan.yaml",
        Path.cwd() / "flagscan.yml",
        Path.cwd() / "flagscan.toml",
        Path.home() / ".config" / "flagscan" / "flagscan.yaml",
        Path.home() / ".config" / "flagscan" / "flagscan.toml",
    ]
    return next((p for p in candidates if p.is_file()), None)


def _type_name(declared_type: object) -> str:
    return getattr(declared_type, "__name__", None) or repr(declared_type)


def render_values(flag_set: FlagSet, values: FlagValues, args: list[str]) -> Table:
    table = Table(title="Parsed flags", title_justify="left")
    table.add_column("Flag", style="bold")
    table.add_column("Alias")
    table.add_column("Type", style="cyan")
    table.add_column("Value", style="green")
    for descriptor in flag_set:
        alias = descriptor.alias if descriptor.alias != descriptor.name else ""
        table.add_row(
            descriptor.name,
            alias,
            _type_name(descriptor.type),
            repr(values[descriptor]),
        )
    table.caption = f"args: {args!r}"
    return table


def main(argv: Sequence[str] | None = None) -> int:
    tokens = list(sys.argv[1:] if argv is None else argv)
    flags, args, errors = MainFlags.parse(tokens, unknown_are_errors=False)
    if flags.help:
        console.print(USAGE, markup=False, highlight=False)
        return 0

    setup_logging(mode=flags.log_mode, verbose=flags.verbose)

    config_path = flags.config or find_flagscan_config()
    if config_path is None:
        if errors:
            errors.print(title="Invalid arguments:")
        error_console.print(
            "[bold red]No flag configuration found.[/] "
            "Pass --config or create flagscan.yaml."
        )
        return 2

    try:
        config = loader(config_path)
        flag_set = config.to_flag_set()
    except (OSError, ValueError, FlagscanError) as error:
        logger.debug("Failed to load %s", config_path, exc_info=True)
        error_console.print(
            f"[bold red]Could not load {escape(str(config_path))}:[/] {escape(str(error))}"
        )
        return 2

    unknown_are_errors = config.unknown_are_errors and not flags.allow_unknown
    values = flag_set.parse_chained(args, errors, unknown_are_errors)
    console.print(render_values(flag_set, values, args))

    if errors:
        errors.print(title="Invalid arguments:")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
