# Flagscan CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Logging setup for the `flagscan` command.

The library itself only emits records on the `flagscan` logger; configuring
handlers is left to the application. `setup_logging()` is what the command
line entry point uses, and applications may reuse it.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

import pythonjsonlogger.json
from rich.logging import RichHandler

LOG_MODES = ("cli", "json")
CONTAINER_MARKERS = ("docker", "kubepods", "containerd", "podman")


def default_log_mode(cgroup_file: Path = Path("/proc/1/cgroup")) -> str:
    """Pick `json` under a container runtime and `cli` everywhere else."""
    try:
        content = cgroup_file.read_text(encoding="UTF-8")
    except OSError:
        return "cli"
    if any(marker in content for marker in CONTAINER_MARKERS):
        return "json"
    return "cli"


def _console_handler(mode: str) -> logging.Handler:
    if mode == "cli":
        return RichHandler(
            rich_tracebacks=True,
            show_path=False,
            markup=False,
            log_time_format="[%Y-%m-%d %H:%M:%S]",
        )
    handler = logging.StreamHandler()
    handler.setFormatter(
        pythonjsonlogger.json.JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s"
        )
    )
    return handler


def setup_logging(mode: str | None = None, verbose: bool = False) -> None:
    """
    Replace the root handlers with a single stderr handler.

    Args:
        mode (str | None): `cli` for Rich console output or `json` for one JSON
            object per record. Falls back to `FLAGSCAN_LOG_MODE`, then to
            `default_log_mode()`.
        verbose (bool): Show debug records, including the scanner trace,
            instead of warnings only.

    Raises:
        ValueError: If `mode` is not one of `LOG_MODES`.
    """
    mode = mode or os.getenv("FLAGSCAN_LOG_MODE") or default_log_mode()
    if mode not in LOG_MODES:
        raise ValueError(f"Invalid log mode: {mode}")

    handler = _console_handler(mode)
    handler.setLevel(logging.DEBUG if verbose else logging.WARNING)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(logging.DEBUG)
    root.addHandler(handler)
