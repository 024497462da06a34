# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Rich-based help output for cmdtree commands.

`HelpRenderer.render(command, command_path)` prints the usage line, the
command description, its subcommands and its visible options (including the
implicit help option). The runner calls it when a parse ends in a
`HelpRequest`; it never exits the process itself.

Any callable with the same `(command, command_path)` signature can be used in
its place, see `cmdtree.runner.run`.
"""
from __future__ import annotations

from typing import Sequence

from rich.console import Console
from rich.markup import escape

from cmdtree.command import Command, Option
from cmdtree.console import console
from cmdtree.parser.lookup import HELP_OPTION, effective_options


def get_metavar(option: Option) -> str:
    """Return the placeholder shown after a value option, e.g. `INT`."""
    if option.is_flag:
        return ""
    return {str: "TEXT", int: "INT", float: "FLOAT"}[option.value_type]


def get_option_flags(option: Option) -> str:
    """Return `-a, --name` for an option, omitting an alias taken by help."""
    if option.short_alias and (
        option is HELP_OPTION or option.short_alias != HELP_OPTION.short_alias
    ):
        return f"-{option.short_alias}, --{option.long_name}"
    return f"    --{option.long_name}"


def get_usage(command: Command, command_path: Sequence[Command]) -> str:
    """Return the plain usage line for `command` reached through `command_path`."""
    names = " ".join(ancestor.name for ancestor in [*command_path, command])
    if command.has_subcommands:
        return f"{names} [options] <command>"
    return f"{names} [options] [args...]"


class HelpRenderer:
    """
    Prints help for a command using Rich output.

    Attributes:
        console (Console): Destination console.
        width (int): Column width used to align flags and help text.
    """

    def __init__(self, console: Console = console, width: int = 30) -> None:
        self.console: Console = console
        self.width: int = width

    def __call__(self, command: Command, command_path: Sequence[Command]) -> None:
        self.render(command, command_path)

    def _print_row(self, label: str, help_text: str, style: str) -> None:
        line = f"  [{style}]{escape(f'{label:<{self.width}}')}[/{style}] "
        if help_text and len(label) > self.width:
            help_text = f"\n{'':<{self.width + 3}}{help_text}"
        self.console.print(f"{line}{escape(help_text)}")

    def render(self, command: Command, command_path: Sequence[Command]) -> None:
        """Print usage, description, subcommands and options for `command`."""
        usage = escape(get_usage(command, command_path))
        self.console.print(f"[usage]usage: {usage}[/usage]\n")

        if command.help_text:
            self.console.print(f"[description]{escape(command.help_text)}[/]\n")

        if command.has_subcommands:
            self.console.print("[section]commands:[/section]")
            for subcommand in command.subcommands or ():
                self._print_row(subcommand.name, subcommand.help_text, "command")
            self.console.print()

        self.console.print("[section]options:[/section]")
        for option in effective_options(command):
            label = f"{get_option_flags(option)} {get_metavar(option)}".rstrip()
            help_text = option.help
            if not option.is_flag:
                help_text = f"{help_text} (default: {option.default!r})".lstrip()
            self._print_row(label, help_text, "option")


def render_help(
    command: Command, command_path: Sequence[Command], console: Console = console
) -> None:
    """Render help for `command` with the default `HelpRenderer`."""
    HelpRenderer(console=console).render(command, command_path)
