"""
Cmdtree CLI Framework

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .command import Command, Option
from .parser import CommandParser, HelpRequest, OptionValues, ParseResult
from .runner import parse, run

logger = logging.getLogger("cmdtree")


__all__ = [
    "Command",
    "CommandParser",
    "HelpRequest",
    "Option",
    "OptionValues",
    "ParseResult",
    "parse",
    "run",
]
