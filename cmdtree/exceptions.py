# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by cmdtree.

Parse errors are fail-fast: the first one raised ends the parse. Each carries
the object that caused it (`command`, `option` or `token`) so callers in
library mode can inspect the failure without parsing the message. In CLI mode
`cmdtree.runner.run` prints `ERROR: <message>` and exits with status 1.

Exception Hierarchy:
- CmdTreeError
    ├── InvalidOptionDefinitionError
    ├── ConfigError
    └── ParseError
        ├── InvalidCommandDefinitionError
        ├── UnknownSubcommandError
        ├── UnknownOptionError
        ├── IllegalShortOptionError
        ├── MissingOptionArgumentError
        ├── InvalidIntegerValueError
        ├── InvalidFloatValueError
        └── NoActionReachableError
"""
from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from cmdtree.command import Command, Option


class CmdTreeError(Exception):
    """Base exception for cmdtree."""


class InvalidOptionDefinitionError(CmdTreeError):
    """Raised when an Option is declared with an invalid name, alias or default."""


class ConfigError(CmdTreeError):
    """Raised when a command tree file cannot be loaded."""


class ParseError(CmdTreeError):
    """Base class for errors raised while parsing arguments."""


class InvalidCommandDefinitionError(ParseError):
    """Raised when a command violates the action-xor-subcommands rule or declares duplicates."""

    def __init__(self, command: Command, reason: str):
        super().__init__(f"command '{command.name}' {reason}")
        self.command = command
        self.reason = reason


class UnknownSubcommandError(ParseError):
    """Raised when a token does not name a subcommand of the current command."""

    def __init__(self, command: Command, token: str):
        super().__init__(f"no such subcommand '{token}'")
        self.command = command
        self.token = token


class UnknownOptionError(ParseError):
    """Raised when an option token is not declared on the current command."""

    def __init__(self, command: Command, token: str):
        super().__init__(f"unknown option {token}")
        self.command = command
        self.token = token


class IllegalShortOptionError(ParseError):
    """Raised for short option clusters such as `-abc`."""

    def __init__(self, command: Command, token: str):
        super().__init__(f"illegal short option {token}")
        self.command = command
        self.token = token


class MissingOptionArgumentError(ParseError):
    """Raised when a value option is the last token."""

    def __init__(self, option: Option):
        super().__init__(f"missing argument for {option.long_name}")
        self.option = option


class InvalidIntegerValueError(ParseError):
    """Raised when an int option's value is not a base-10 64-bit integer."""

    def __init__(self, option: Option, token: str):
        super().__init__(f"option({option.long_name}): cannot parse int value '{token}'")
        self.option = option
        self.token = token


class InvalidFloatValueError(ParseError):
    """Raised when a float option's value is not a floating point literal."""

    def __init__(self, option: Option, token: str):
        super().__init__(
            f"option({option.long_name}): cannot parse float value '{token}'"
        )
        self.option = option
        self.token = token


class NoActionReachableError(ParseError):
    """Raised when the arguments run out on a command that has no action."""

    def __init__(self, command: Command):
        super().__init__(f"command '{command.name}': no subcommand provided")
        self.command = command
