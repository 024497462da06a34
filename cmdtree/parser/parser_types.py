# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result types produced by `CommandParser`.

Contents:
- `CommandToken`, `OptionToken`, `PositionalToken`: classification of a single
  raw token against the current command.
- `OptionValues`: read-only view of the option values captured by one parse,
  falling back to declared defaults.
- `ParseResult`: a resolved leaf action, its arguments and option values.
- `HelpRequest`: the help option was given; holds what the renderer needs.
"""
from __future__ import annotations

import inspect
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Iterator, Sequence

from cmdtree.command import Action, Command, Option, OptionValue
from cmdtree.logger import logger


@dataclass(frozen=True)
class CommandToken:
    command: Command


@dataclass(frozen=True)
class OptionToken:
    option: Option


@dataclass(frozen=True)
class PositionalToken:
    value: str


ArgParseResult = CommandToken | OptionToken | PositionalToken


class OptionValues(Mapping[Option, OptionValue]):
    """
    Option values for the commands visited by one parse.

    Iterates over every option declared on the visited commands, root first.
    Options that were not given report their declared default.

    Keys may be `Option` objects or long names. A long name resolves to the
    option declared closest to the leaf command.
    """

    def __init__(
        self,
        commands: Sequence[Command],
        captured: Mapping[Option, OptionValue] | None = None,
    ) -> None:
        self._commands: tuple[Command, ...] = tuple(commands)
        self._captured: dict[Option, OptionValue] = dict(captured or {})
        self._options: dict[Option, None] = {
            option: None for command in self._commands for option in command.options or ()
        }

    def _resolve(self, key: Option | str) -> Option:
        if isinstance(key, Option):
            if key in self._options:
                return key
            raise KeyError(key)
        for command in reversed(self._commands):
            for option in command.options or ():
                if option.long_name == key:
                    return option
        raise KeyError(key)

    def __getitem__(self, key: Option | str) -> OptionValue:
        option = self._resolve(key)
        return self._captured.get(option, option.default)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, (Option, str)):
            return False
        try:
            self._resolve(key)
        except KeyError:
            return False
        return True

    def __iter__(self) -> Iterator[Option]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)

    def is_set(self, key: Option | str) -> bool:
        """Return True if the option was given on the command line."""
        return self._resolve(key) in self._captured

    def as_dict(self) -> dict[str, OptionValue]:
        """Return values keyed by long name; leaf-most declarations win."""
        return {option.long_name: self[option] for option in self}

    def __repr__(self) -> str:
        return f"OptionValues({self.as_dict()!r})"


@dataclass
class ParseResult:
    """
    A successful parse.

    Attributes:
        action (Action): The resolved leaf command's action.
        args (list[str]): Positional arguments in encounter order.
        values (OptionValues): Option values for every visited command.
        command (Command): The resolved leaf command.
        command_path (list[Command]): Ancestors of `command`, root first.
    """

    action: Action
    args: list[str]
    values: OptionValues
    command: Command
    command_path: list[Command] = field(default_factory=list)

    def invoke(self) -> Any:
        """
        Call the action with the positional arguments.

        If the action declares a parameter named `options`, the captured
        `OptionValues` are passed to it as a keyword argument.
        """
        if _accepts_options(self.action):
            logger.debug("[%s] Invoking action with options.", self.command.name)
            return self.action(self.args, options=self.values)
        logger.debug("[%s] Invoking action.", self.command.name)
        return self.action(self.args)


@dataclass
class HelpRequest:
    """
    The help option was given.

    Attributes:
        command (Command): The command that was current when help was requested.
        command_path (list[Command]): Its ancestors, root first.
    """

    command: Command
    command_path: list[Command] = field(default_factory=list)


def _accepts_options(action: Action) -> bool:
    try:
        parameters = inspect.signature(action).parameters
    except (TypeError, ValueError):
        return False
    parameter = parameters.get("options")
    return parameter is not None and parameter.kind in (
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
        inspect.Parameter.KEYWORD_ONLY,
    )
