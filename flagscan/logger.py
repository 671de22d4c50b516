# Flagscan CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""Global logger instance for flagscan."""
import logging

logger: logging.Logger = logging.getLogger("flagscan")
