"""
Cmdtree CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .command_parser import CommandParser
from .lookup import (
    HELP_OPTION,
    effective_options,
    find_option_by_alias,
    find_option_by_name,
    find_subcommand,
)
from .parser_types import HelpRequest, OptionValues, ParseResult
from .utils import coerce_option_value
from .validation import validate_command

__all__ = [
    "CommandParser",
    "HELP_OPTION",
    "HelpRequest",
    "OptionValues",
    "ParseResult",
    "coerce_option_value",
    "effective_options",
    "find_option_by_alias",
    "find_option_by_name",
    "find_subcommand",
    "validate_command",
]
