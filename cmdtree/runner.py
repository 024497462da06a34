# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Entry points that connect the parser to a program.

- `parse()` is library mode: it returns a `ParseResult` or `HelpRequest` and
  raises `ParseError` subclasses for invalid input.
- `run()` is CLI mode and the only place that ends the process: help exits
  with status 0 after rendering, any cmdtree error prints `ERROR: <message>`
  to stderr and exits with status 1. Otherwise the resolved action is invoked
  and its result returned; exceptions raised by the action propagate unchanged.
"""
from __future__ import annotations

import sys
from typing import Any, Callable, Iterable, Sequence

from rich.console import Console

from cmdtree.command import Command
from cmdtree.console import error_console
from cmdtree.exceptions import CmdTreeError
from cmdtree.help import HelpRenderer
from cmdtree.logger import logger
from cmdtree.parser import CommandParser, HelpRequest, ParseResult
from cmdtree.sources import ArgumentSource


def parse(
    root: Command, args: ArgumentSource | Iterable[str] | None = None
) -> ParseResult | HelpRequest:
    """
    Parse `args` against the tree rooted at `root`.

    Args:
        root (Command): Root of the command tree.
        args (ArgumentSource | Iterable[str] | None): Tokens including the
            program name. Defaults to the process arguments.

    Returns:
        ParseResult | HelpRequest: The parse outcome.

    Raises:
        ParseError: If the arguments or the reached commands are invalid.
    """
    return CommandParser(root, args).parse()


def run(
    root: Command,
    argv: ArgumentSource | Iterable[str] | None = None,
    renderer: Callable[[Command, Sequence[Command]], None] | None = None,
    err_console: Console = error_console,
) -> Any:
    """
    Parse the arguments and invoke the resolved action.

    Args:
        root (Command): Root of the command tree.
        argv (ArgumentSource | Iterable[str] | None): Tokens including the
            program name. Defaults to `sys.argv`.
        renderer (Callable | None): Help renderer, called with the current
            command and its ancestors. Defaults to `HelpRenderer()`.
        err_console (Console): Where error messages are printed.

    Returns:
        Any: Whatever the action returns.

    Raises:
        SystemExit: 0 after help, 1 after a cmdtree error.
    """
    try:
        outcome = parse(root, argv)
    except CmdTreeError as error:
        logger.debug("Parse failed: %s", error)
        err_console.print(f"ERROR: {error}", markup=False, soft_wrap=True)
        sys.exit(1)

    if isinstance(outcome, HelpRequest):
        renderer = renderer or HelpRenderer()
        renderer(outcome.command, outcome.command_path)
        sys.exit(0)

    logger.info(
        "Running '%s' with %d argument(s).",
        " ".join(command.name for command in [*outcome.command_path, outcome.command]),
        len(outcome.args),
    )
    return outcome.invoke()
