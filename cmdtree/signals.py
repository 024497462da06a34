# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines flow control signals used internally by the cmdtree parser.

Signals inherit from `FlowSignal`, a subclass of `BaseException`, so they
bypass `except Exception` blocks. They never escape `CommandParser.parse`,
which turns them into parse outcomes.
"""
from __future__ import annotations


class FlowSignal(BaseException):
    """Base class for all flow control signals in cmdtree.

    These are not errors. They stop token processing early.
    """


class HelpSignal(FlowSignal):
    """Raised when the implicit help option is encountered."""

    def __init__(self, message: str = "Help signal received."):
        super().__init__(message)
