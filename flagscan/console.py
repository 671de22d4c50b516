# Flagscan CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global console instance for flagscan output."""
from rich.console import Console

console = Console(color_system="truecolor")
error_console = Console(color_system="truecolor", stderr=True)
