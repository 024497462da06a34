# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Structural validation of a single command node.

`validate_command` is called by the parser each time a node becomes current,
including the root. Nodes that are never reached are never validated.
"""
from __future__ import annotations

from collections import Counter
from typing import Iterable

from cmdtree.command import Command
from cmdtree.exceptions import InvalidCommandDefinitionError
from cmdtree.logger import logger
from cmdtree.parser.lookup import HELP_OPTION


def _duplicates(names: Iterable[str]) -> list[str]:
    return [name for name, count in Counter(names).items() if count > 1]


def validate_command(command: Command) -> None:
    """
    Check that `command` is either a leaf with an action or a node with subcommands.

    Also rejects duplicate subcommand names, option long names and short
    aliases declared on the same command. A declared `help` or `h` is allowed
    but unreachable; the implicit help option wins.

    Raises:
        InvalidCommandDefinitionError: If any check fails.
    """
    if not command.has_subcommands:
        if not command.has_action:
            raise InvalidCommandDefinitionError(
                command, "has neither subcommands nor an action assigned"
            )
    elif command.has_action:
        raise InvalidCommandDefinitionError(
            command,
            "has subcommands and an action assigned. "
            "Commands with subcommands are not allowed to have an action.",
        )

    duplicated = _duplicates(subcommand.name for subcommand in command.subcommands or ())
    if duplicated:
        raise InvalidCommandDefinitionError(
            command, f"declares duplicate subcommands: {', '.join(duplicated)}"
        )

    options = command.options or ()
    duplicated = _duplicates(option.long_name for option in options)
    if duplicated:
        raise InvalidCommandDefinitionError(
            command, f"declares duplicate options: {', '.join(duplicated)}"
        )
    duplicated = _duplicates(
        option.short_alias for option in options if option.short_alias is not None
    )
    if duplicated:
        raise InvalidCommandDefinitionError(
            command, f"declares duplicate short aliases: {', '.join(duplicated)}"
        )

    for option in options:
        if (
            option.long_name == HELP_OPTION.long_name
            or option.short_alias == HELP_OPTION.short_alias
        ):
            logger.warning(
                "[%s] %s is shadowed by the implicit help option.", command.name, option
            )
