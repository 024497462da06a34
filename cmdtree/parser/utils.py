# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Value coercion for typed options.

The declared type of an option comes from its default. Coercion is strict:
Python's `int()` and `float()` accept surrounding whitespace, digit
separators (`1_000`) and non-ASCII digits; command-line values do not.

Functions:
- coerce_int: Parse a base-10 signed 64-bit integer.
- coerce_float: Parse a decimal or scientific floating point literal.
- coerce_option_value: Coerce a token to an option's declared type.
"""
from __future__ import annotations

import re

from cmdtree.command import Option, OptionValue
from cmdtree.exceptions import InvalidFloatValueError, InvalidIntegerValueError

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_INT_PATTERN = re.compile(r"[+-]?[0-9]+")


def coerce_int(value: str) -> int:
    """
    Convert a string to a signed 64-bit integer.

    Raises:
        ValueError: If the string is not `[+-]digits` or is out of range.
    """
    if not _INT_PATTERN.fullmatch(value):
        raise ValueError(f"invalid integer literal: {value!r}")
    number = int(value, 10)
    if not INT64_MIN <= number <= INT64_MAX:
        raise ValueError(f"integer out of 64-bit range: {value!r}")
    return number


def coerce_float(value: str) -> float:
    """
    Convert a string to a float.

    Raises:
        ValueError: If the string is not a floating point literal.
    """
    if not value.isascii() or not value or value != value.strip() or "_" in value:
        raise ValueError(f"invalid float literal: {value!r}")
    return float(value)


def coerce_option_value(option: Option, value: str) -> OptionValue:
    """
    Convert a raw token to the value type declared by `option`.

    Args:
        option (Option): A non-flag option.
        value (str): The token that followed the option.

    Returns:
        OptionValue: The coerced value.

    Raises:
        InvalidIntegerValueError: For an `int` option and a malformed token.
        InvalidFloatValueError: For a `float` option and a malformed token.
    """
    value_type = option.value_type
    assert value_type is not bool, "flags do not take a value"
    if value_type is int:
        try:
            return coerce_int(value)
        except ValueError as error:
            raise InvalidIntegerValueError(option, value) from error
    if value_type is float:
        try:
            return coerce_float(value)
        except ValueError as error:
            raise InvalidFloatValueError(option, value) from error
    return value
