# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements `CommandParser`, the single-pass engine that walks a
command tree guided by a stream of raw argument tokens.

The parser starts at the root command and pulls tokens one at a time. Each
token is classified against the current command and either descends into a
subcommand, records an option value, or is captured as a positional
argument. Options with a value consume the token that follows them. There is
no lookahead beyond that and no backtracking.

Token rules, in order:
- `""`: ignored.
- `-`: positional.
- `--`: positional (it does not end option processing).
- `--name`: long option; unknown names fail.
- `-x`: short option; unknown aliases fail, clusters like `-xyz` fail.
- `word` on a command with subcommands: subcommand; unknown names fail.
- `word` otherwise: positional.

Every failure raises a `ParseError` subclass and ends the parse. Option values
are captured in a mapping owned by the parser; the command tree is never
modified.

Example Usage:
    parser = CommandParser(root, ["app", "add", "item", "--count", "3", "foo"])
    outcome = parser.parse()
    if isinstance(outcome, ParseResult):
        outcome.invoke()
"""
from __future__ import annotations

from typing import Iterable

from cmdtree.command import Command, Option, OptionValue
from cmdtree.exceptions import (
    IllegalShortOptionError,
    MissingOptionArgumentError,
    NoActionReachableError,
    UnknownOptionError,
    UnknownSubcommandError,
)
from cmdtree.logger import logger
from cmdtree.parser.lookup import (
    HELP_OPTION,
    find_option_by_alias,
    find_option_by_name,
    find_subcommand,
)
from cmdtree.parser.parser_types import (
    ArgParseResult,
    CommandToken,
    HelpRequest,
    OptionToken,
    OptionValues,
    ParseResult,
    PositionalToken,
)
from cmdtree.parser.utils import coerce_option_value
from cmdtree.parser.validation import validate_command
from cmdtree.signals import HelpSignal
from cmdtree.sources import ArgumentSource, as_source


class CommandParser:
    """
    Resolves an argument stream against a command tree.

    A parser instance holds the traversal state of exactly one parse. Create a
    new instance per parse; the command tree itself can be shared.

    Attributes:
        root (Command): The root of the command tree.
        source (ArgumentSource): Where tokens are pulled from.
        current_command (Command): The command tokens are classified against.
        command_path (list[Command]): Ancestors of the current command.
        captured_arguments (list[str]): Positional arguments, in encounter order.
    """

    def __init__(
        self,
        root: Command,
        args: ArgumentSource | Iterable[str] | None = None,
    ) -> None:
        self.root: Command = root
        self.source: ArgumentSource = as_source(args)
        self.current_command: Command = root
        self.command_path: list[Command] = []
        self.captured_arguments: list[str] = []
        self._values: dict[Option, OptionValue] = {}
        self._parsed: bool = False

    def parse(self) -> ParseResult | HelpRequest:
        """
        Consume the whole argument stream.

        The first token (the program name) is discarded without inspection.

        Returns:
            ParseResult: When parsing ends on a command with an action.
            HelpRequest: When the help option was encountered. Tokens after it
                are not read.

        Raises:
            ParseError: On the first invalid token or tree definition.
        """
        if self._parsed:
            raise RuntimeError("CommandParser instances can only parse once")
        self._parsed = True

        validate_command(self.current_command)
        self.source.next()
        try:
            while (token := self.source.next()) is not None:
                parsed_arg = self.parse_arg(token)
                if parsed_arg is not None:
                    self.process_arg(parsed_arg)
        except HelpSignal:
            logger.debug("[%s] Help requested.", self.current_command.name)
            return HelpRequest(
                command=self.current_command, command_path=list(self.command_path)
            )

        if self.current_command.action is None:
            raise NoActionReachableError(self.current_command)

        return ParseResult(
            action=self.current_command.action,
            args=self.captured_arguments,
            values=OptionValues(
                [*self.command_path, self.current_command], self._values
            ),
            command=self.current_command,
            command_path=list(self.command_path),
        )

    def parse_arg(self, token: str) -> ArgParseResult | None:
        """Classify a raw token against the current command."""
        if not token:
            return None
        if token.startswith("-"):
            if len(token) == 1:
                return PositionalToken(token)
            if token[1] == "-":
                return self._parse_long_name(token)
            return self._parse_short_alias(token)
        if self.current_command.has_subcommands:
            subcommand = find_subcommand(self.current_command, token)
            if subcommand is None:
                raise UnknownSubcommandError(self.current_command, token)
            return CommandToken(subcommand)
        return PositionalToken(token)

    def _parse_long_name(self, token: str) -> ArgParseResult:
        if len(token) == 2:
            return PositionalToken(token)
        option = find_option_by_name(self.current_command, token[2:])
        if option is None:
            raise UnknownOptionError(self.current_command, token)
        return OptionToken(option)

    def _parse_short_alias(self, token: str) -> ArgParseResult:
        if len(token) > 2:
            raise IllegalShortOptionError(self.current_command, token)
        option = find_option_by_alias(self.current_command, token[1])
        if option is None:
            raise UnknownOptionError(self.current_command, token)
        return OptionToken(option)

    def process_arg(self, parsed_arg: ArgParseResult) -> None:
        """Apply a classified token to the traversal state."""
        if isinstance(parsed_arg, CommandToken):
            validate_command(parsed_arg.command)
            logger.debug(
                "[%s] Entering subcommand '%s'.",
                self.current_command.name,
                parsed_arg.command.name,
            )
            self.command_path.append(self.current_command)
            self.current_command = parsed_arg.command
        elif isinstance(parsed_arg, OptionToken):
            self._process_option(parsed_arg.option)
        else:
            self.captured_arguments.append(parsed_arg.value)

    def _process_option(self, option: Option) -> None:
        if option is HELP_OPTION:
            raise HelpSignal()
        if option.is_flag:
            self._values[option] = True
        else:
            self._values[option] = self._parse_option_value(option)
        logger.debug(
            "[%s] --%s = %r",
            self.current_command.name,
            option.long_name,
            self._values[option],
        )

    def _parse_option_value(self, option: Option) -> OptionValue:
        token = self.source.next()
        if token is None:
            raise MissingOptionArgumentError(option)
        return coerce_option_value(option, token)

    def __str__(self) -> str:
        return (
            f"CommandParser(current='{self.current_command.name}', "
            f"depth={len(self.command_path)}, "
            f"args={len(self.captured_arguments)}, options={len(self._values)})"
        )

    def __repr__(self) -> str:
        return str(self)
