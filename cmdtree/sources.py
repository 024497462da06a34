# Cmdtree CLI Framework — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Argument sources feed raw tokens to the parser one at a time.

A source is anything with a `next()` method returning the next token, or
`None` once exhausted. The first token a source yields is the program name,
which the parser discards.

Sources:
- ListArgumentSource: walks an in-memory sequence (tests, embedding).
- SystemArgumentSource: walks the process arguments from `sys.argv`.
- IteratorArgumentSource: adapts any iterable of strings.
"""
from __future__ import annotations

import sys
from typing import Iterable, Iterator, Protocol, Sequence, runtime_checkable


@runtime_checkable
class ArgumentSource(Protocol):
    def next(self) -> str | None: ...


class ListArgumentSource:
    """Yields the items of a sequence in order."""

    def __init__(self, items: Sequence[str]) -> None:
        self.items: tuple[str, ...] = tuple(items)
        self.index: int = 0

    def next(self) -> str | None:
        if self.index < len(self.items):
            item = self.items[self.index]
            self.index += 1
            return item
        return None

    def __repr__(self) -> str:
        return f"ListArgumentSource(items={len(self.items)}, index={self.index})"


class SystemArgumentSource(ListArgumentSource):
    """Yields the process arguments, starting with the program name."""

    def __init__(self) -> None:
        super().__init__(sys.argv)


class IteratorArgumentSource:
    """Yields tokens from any iterable of strings."""

    def __init__(self, tokens: Iterable[str]) -> None:
        self._iterator: Iterator[str] = iter(tokens)

    def next(self) -> str | None:
        return next(self._iterator, None)


def as_source(args: ArgumentSource | Iterable[str] | None) -> ArgumentSource:
    """Return `args` as an ArgumentSource, defaulting to the process arguments."""
    if args is None:
        return SystemArgumentSource()
    if isinstance(args, ArgumentSource):
        return args
    if isinstance(args, str):
        raise TypeError("args must be a sequence of strings, not a single string")
    if isinstance(args, Sequence):
        return ListArgumentSource(args)
    return IteratorArgumentSource(args)
