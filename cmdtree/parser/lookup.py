# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Name and alias lookups over a command's visible options and subcommands.

Every command sees the implicit `HELP_OPTION` (`--help` / `-h`) in addition to
its declared options. The implicit option is checked first, so a command that
declares its own `help` or `h` never shadows it.

All functions here are pure: they never modify the command they inspect.
"""
from __future__ import annotations

from cmdtree.command import Command, Option

HELP_OPTION = Option(
    long_name="help",
    short_alias="h",
    help="Show this help output.",
    default=False,
)


def effective_options(command: Command) -> tuple[Option, ...]:
    """Return the options visible on `command`, implicit help first."""
    return (HELP_OPTION,) + tuple(
        option
        for option in command.options or ()
        if option.long_name != HELP_OPTION.long_name
    )


def find_subcommand(command: Command, name: str) -> Command | None:
    """Return the first subcommand of `command` named exactly `name`."""
    for subcommand in command.subcommands or ():
        if subcommand.name == name:
            return subcommand
    return None


def find_option_by_name(command: Command, long_name: str) -> Option | None:
    """Return the option reachable as `--long_name` on `command`."""
    if long_name == HELP_OPTION.long_name:
        return HELP_OPTION
    for option in command.options or ():
        if option.long_name == long_name:
            return option
    return None


def find_option_by_alias(command: Command, alias: str) -> Option | None:
    """Return the option reachable as `-alias` on `command`."""
    if alias == HELP_OPTION.short_alias:
        return HELP_OPTION
    for option in command.options or ():
        if option.short_alias is not None and option.short_alias == alias:
            return option
    return None
