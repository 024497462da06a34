# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Command tree loader for YAML and TOML files.

A tree file describes the root command as a mapping. Actions are dotted import
paths; subcommands may be declared inline or pulled in from another tree file
with a `config` key (resolved relative to the including file).

Example (YAML):
    name: app
    help_text: Inventory tool.
    options:
      - long_name: verbose
        short_alias: v
        help: Print more output.
    subcommands:
      - name: add
        subcommands:
          - name: item
            action: inventory.actions.add_item
            options:
              - long_name: count
                short_alias: c
                default: 1
      - config: reports.yaml

Only the shape of the tree is read from files. Whether each command has an
action or subcommands is checked by the parser when the command is reached.
"""
from __future__ import annotations

import importlib
from pathlib import Path
from typing import Any, Literal

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, model_validator

from cmdtree.command import Action, Command, Option, OptionValue
from cmdtree.exceptions import ConfigError, InvalidOptionDefinitionError
from cmdtree.logger import logger

MAX_INCLUDE_DEPTH = 5

_ZERO_VALUES: dict[str, OptionValue] = {
    "bool": False,
    "str": "",
    "int": 0,
    "float": 0.0,
}


def import_action(dotted_path: str) -> Action:
    """Dynamically imports a callable from a dotted path like 'my.module.func'."""
    module_path, _, attr = dotted_path.rpartition(".")
    if not module_path:
        raise ConfigError(f"Invalid action path: '{dotted_path}'")
    try:
        module = importlib.import_module(module_path)
    except ModuleNotFoundError as error:
        logger.error("Failed to import module '%s': %s", module_path, error)
        raise ConfigError(
            f"Could not import '{dotted_path}': {error}. Ensure the module is "
            "installed and discoverable via PYTHONPATH."
        ) from error
    try:
        action = getattr(module, attr)
    except AttributeError as error:
        logger.error(
            "Module '%s' does not have attribute '%s': %s", module_path, attr, error
        )
        raise ConfigError(
            f"Module '{module_path}' has no attribute '{attr}'"
        ) from error
    if not callable(action):
        raise ConfigError(f"Action '{dotted_path}' is not callable")
    return action


class RawOption(BaseModel):
    """Raw option model for tree files."""

    long_name: str
    short_alias: str | None = None
    help: str = ""
    type: Literal["bool", "str", "int", "float"] | None = None
    default: bool | str | int | float | None = None

    @model_validator(mode="after")
    def resolve_default(self) -> RawOption:
        if self.default is None:
            self.default = _ZERO_VALUES[self.type or "bool"]
        elif self.type == "float" and type(self.default) is int:
            self.default = float(self.default)
        elif self.type is not None and type(self.default).__name__ != self.type:
            raise ValueError(
                f"default {self.default!r} does not match type '{self.type}'"
            )
        return self

    def to_option(self) -> Option:
        assert self.default is not None
        return Option(
            long_name=self.long_name,
            short_alias=self.short_alias,
            help=self.help,
            default=self.default,
        )


class RawCommand(BaseModel):
    """Raw command model for tree files."""

    name: str | None = None
    help_text: str = ""
    action: str | None = None
    config: str | None = None
    options: list[RawOption] = Field(default_factory=list)
    subcommands: list[RawCommand] = Field(default_factory=list)

    @model_validator(mode="after")
    def validate_name(self) -> RawCommand:
        if self.config is None and not self.name:
            raise ValueError("command entries need a 'name' or a 'config' path")
        return self


RawCommand.model_rebuild()


def convert_command(raw: RawCommand, *, parent_path: Path, depth: int) -> Command:
    if raw.config:
        config_path = (parent_path.parent / raw.config).resolve()
        included = loader(config_path, _depth=depth + 1)
        if raw.name and raw.name != included.name:
            return Command(
                name=raw.name,
                action=included.action,
                subcommands=included.subcommands,
                options=included.options,
                help_text=raw.help_text or included.help_text,
            )
        return included

    assert raw.name is not None
    return Command(
        name=raw.name,
        action=import_action(raw.action) if raw.action else None,
        subcommands=(
            [
                convert_command(entry, parent_path=parent_path, depth=depth)
                for entry in raw.subcommands
            ]
            or None
        ),
        options=[raw_option.to_option() for raw_option in raw.options] or None,
        help_text=raw.help_text,
    )


def read_config(path: Path) -> dict[str, Any]:
    """Read a YAML or TOML file into a dictionary."""
    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        try:
            if suffix in (".yaml", ".yml"):
                raw_config = yaml.safe_load(config_file)
            elif suffix == ".toml":
                raw_config = toml.load(config_file)
            else:
                raise ConfigError(f"Unsupported config format: {suffix}")
        except (yaml.YAMLError, toml.TomlDecodeError) as error:
            raise ConfigError(f"Could not parse {path}: {error}") from error

    if not isinstance(raw_config, dict):
        raise ConfigError(
            "Command tree file must contain a mapping describing the root command.\n"
            "Example:\n"
            "name: 'app'\n"
            "subcommands:\n"
            "  - name: 'hello'\n"
            "    action: 'my_module.my_function'"
        )
    return raw_config


def loader(file_path: Path | str, _depth: int = 0) -> Command:
    """
    Load a command tree from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the tree file.

    Returns:
        Command: The root command.

    Raises:
        ConfigError: If the file is missing, malformed, nests too deeply or
            names an action that cannot be imported.
    """
    if _depth > MAX_INCLUDE_DEPTH:
        raise ConfigError(
            f"Maximum include depth exceeded ({MAX_INCLUDE_DEPTH} levels deep)"
        )

    if not isinstance(file_path, (str, Path)):
        raise TypeError("file_path must be a string or Path object.")
    path = Path(file_path)
    if not path.is_file():
        raise ConfigError(f"No such config file: {file_path}")

    raw_config = read_config(path)
    try:
        raw_root = RawCommand.model_validate(raw_config)
    except ValidationError as error:
        raise ConfigError(f"Invalid command tree in {path}:\n{error}") from error

    try:
        root = convert_command(raw_root, parent_path=path, depth=_depth)
    except InvalidOptionDefinitionError as error:
        raise ConfigError(f"Invalid command tree in {path}: {error}") from error
    logger.debug("Loaded command tree '%s' from %s.", root.name, path)
    return root
