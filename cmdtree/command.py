# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `Command` and `Option`, the declarative building blocks of a cmdtree
command tree.

A `Command` is either a leaf with an `action` or an inner node with
`subcommands`, never both and never neither. The rule is checked lazily by the
parser when a node is reached, so a tree can be declared in any order.

An `Option` is a named, optionally aliased flag or value. The type of its
`default` fixes the type of value the option accepts:

- `bool`: presence alone sets the value to `True`; no value token is consumed.
- `str`, `int`, `float`: the following token is consumed and coerced.

Both classes are frozen and compared by identity. Parsing never writes to
them; captured values are returned in `ParseResult.values`, so a tree can be
reused across parses.

Example:
    greet = Command(
        name="greet",
        action=lambda args: print("hello", *args),
        options=[Option("loud", "l", "Shout the greeting.", default=False)],
    )
    root = Command(name="app", subcommands=[greet])
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Sequence

from cmdtree.exceptions import InvalidOptionDefinitionError

OptionValue = bool | str | int | float
"""Value types an option may hold."""

Action = Callable[..., Any]
"""Leaf command callable, invoked with the captured positional arguments."""

OPTION_VALUE_TYPES: tuple[type, ...] = (bool, str, int, float)


@dataclass(frozen=True, eq=False)
class Option:
    """
    A command option such as `--verbose` / `-v` or `--count 3`.

    Attributes:
        long_name (str): Name used after `--`.
        short_alias (str | None): Single character used after `-`.
        help (str): Help text shown by the help renderer.
        default (OptionValue): Value reported when the option is not given. Its
            type is the option's value type.
    """

    long_name: str
    short_alias: str | None = None
    help: str = ""
    default: OptionValue = False

    def __post_init__(self) -> None:
        if not isinstance(self.long_name, str) or not self.long_name:
            raise InvalidOptionDefinitionError("Option long_name must be a non-empty string")
        if self.long_name.startswith("-"):
            raise InvalidOptionDefinitionError(
                f"Option '{self.long_name}': long_name must not start with '-'"
            )
        if self.short_alias is not None and (
            not isinstance(self.short_alias, str)
            or len(self.short_alias) != 1
            or self.short_alias == "-"
        ):
            raise InvalidOptionDefinitionError(
                f"Option '{self.long_name}': short_alias must be a single character, "
                f"got {self.short_alias!r}"
            )
        if type(self.default) not in OPTION_VALUE_TYPES:
            raise InvalidOptionDefinitionError(
                f"Option '{self.long_name}': default must be one of bool, str, int "
                f"or float, got {type(self.default).__name__}"
            )

    @property
    def value_type(self) -> type:
        """The declared value type, taken from the default."""
        return type(self.default)

    @property
    def is_flag(self) -> bool:
        """True if the option takes no value token."""
        return self.value_type is bool

    def __str__(self) -> str:
        if self.short_alias:
            return f"Option(--{self.long_name}, -{self.short_alias})"
        return f"Option(--{self.long_name})"


@dataclass(frozen=True, eq=False)
class Command:
    """
    A node in the command tree.

    Attributes:
        name (str): Name used to select the command on the command line.
        action (Action | None): Callable run when parsing ends on this command.
        subcommands (Sequence[Command] | None): Child commands, in declaration order.
        options (Sequence[Option] | None): Options visible while this command is current.
        help_text (str): Description shown by the help renderer.
    """

    name: str
    action: Action | None = None
    subcommands: Sequence[Command] | None = None
    options: Sequence[Option] | None = None
    help_text: str = ""

    def __post_init__(self) -> None:
        if self.subcommands is not None:
            object.__setattr__(self, "subcommands", tuple(self.subcommands))
        if self.options is not None:
            object.__setattr__(self, "options", tuple(self.options))

    @property
    def has_subcommands(self) -> bool:
        return bool(self.subcommands)

    @property
    def has_action(self) -> bool:
        return self.action is not None

    def __str__(self) -> str:
        return (
            f"Command(name='{self.name}', action={self.has_action}, "
            f"subcommands={len(self.subcommands or ())}, "
            f"options={len(self.options or ())})"
        )

    def __repr__(self) -> str:
        return str(self)
