# Flagscan CLI Flags — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Load flag declarations from YAML or TOML files.

A config file lists flags in declaration order:

    unknown_are_errors: true
    flags:
      - name: --port
        alias: -p
        type: int
        default: 8080
      - name: --tag
        type: str
        kind: repeated
      - name: --verbose
        type: bool
"""
from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, field_validator, model_validator

from flagscan.converters import Char, coerce_value
from flagscan.descriptor import dest_from_name, is_valid_flag_name
from flagscan.exceptions import FlagDefinitionError
from flagscan.flag_kind import FlagKind, resolve_kind
from flagscan.flag_set import FlagSet, FlagSetBuilder
from flagscan.logger import logger

TYPE_NAMES: dict[str, Any] = {
    "str": str,
    "string": str,
    "int": int,
    "float": float,
    "bool": bool,
    "char": Char,
    "path": Path,
    "datetime": datetime,
}


class RawFlag(BaseModel):
    """Raw flag model for flagscan configuration files."""

    name: str
    alias: str | None = None
    type: str = "str"
    kind: FlagKind | None = None
    default: Any = None
    dest: str | None = None

    @field_validator("name", "alias")
    @classmethod
    def validate_flag_name(cls, value: str | None) -> str | None:
        if value is not None and not is_valid_flag_name(value):
            raise ValueError(
                f"Flag name {value!r} must start with '-' and be different from '--'"
            )
        return value

    @field_validator("type")
    @classmethod
    def validate_type(cls, value: str) -> str:
        normalized = value.strip().lower()
        if normalized not in TYPE_NAMES:
            valid = ", ".join(TYPE_NAMES)
            raise ValueError(f"Unknown flag type '{value}'. Must be one of: {valid}")
        return normalized

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> Any:
        if value is None or isinstance(value, FlagKind):
            return value
        return FlagKind(value)

    @model_validator(mode="after")
    def coerce_default(self) -> RawFlag:
        """Convert string defaults the same way a value token would be."""
        if self.default is None:
            return self
        _, value_type = resolve_kind(TYPE_NAMES[self.type], self.kind)
        try:
            if isinstance(self.default, str):
                self.default = coerce_value(self.default, value_type)
            elif isinstance(self.default, list):
                self.default = [
                    coerce_value(item, value_type) if isinstance(item, str) else item
                    for item in self.default
                ]
        except (ValueError, TypeError) as error:
            raise ValueError(f"Invalid default for {self.name}: {error}") from error
        return self

    def add_to(self, builder: FlagSetBuilder) -> None:
        builder.add_flag(
            self.name,
            TYPE_NAMES[self.type],
            alias=self.alias,
            default=self.default,
            kind=self.kind,
            dest=self.dest,
        )


class FlagSetConfig(BaseModel):
    """Flag set configuration model."""

    unknown_are_errors: bool = True
    flags: list[RawFlag] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_unique_dests(self) -> FlagSetConfig:
        seen: set[str] = set()
        for flag in self.flags:
            try:
                dest = flag.dest or dest_from_name(flag.name)
            except FlagDefinitionError as error:
                raise ValueError(str(error)) from error
            if dest in seen:
                raise ValueError(f"Destination '{dest}' is defined more than once")
            seen.add(dest)
        return self

    def to_flag_set(self) -> FlagSet:
        builder = FlagSetBuilder()
        for flag in self.flags:
            flag.add_to(builder)
        return builder.build()


def loader(file_path: Path | str) -> FlagSetConfig:
    """
    Load a flag set configuration from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        FlagSetConfig: The validated configuration.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content is not a mapping.
        pydantic.ValidationError: If a flag declaration is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            try:
                raw_config = yaml.safe_load(config_file)
            except yaml.YAMLError as error:
                raise ValueError(f"Invalid YAML in {path}: {error}") from error
        elif suffix == ".toml":
            try:
                raw_config = toml.load(config_file)
            except toml.TomlDecodeError as error:
                raise ValueError(f"Invalid TOML in {path}: {error}") from error
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if raw_config is None:
        raw_config = {}
    if not isinstance(raw_config, dict):
        raise ValueError(
            "Configuration file must contain a mapping with a list of flags.\n"
            "Example:\n"
            "flags:\n"
            "  - name: '--port'\n"
            "    type: 'int'\n"
            "    default: 8080"
        )

    config = FlagSetConfig(**raw_config)
    logger.debug("Loaded %d flag(s) from %s", len(config.flags), path)
    return config
