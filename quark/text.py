"""Message formatting, a string builder, logging helpers and panics."""

from __future__ import annotations

import sys
from numbers import Integral, Real
from typing import Any


class PanicError(RuntimeError):
    """Raised where the engine gives up on an unrecoverable condition."""


def _is_number(value: Any) -> bool:
    return isinstance(value, Real)


def format_value(value: Any) -> str:
    """Render a value the way messages print it.

    Strings pass through, integers print plainly, floats with four decimals,
    and 2 to 4 component vectors as "(a, b, ...)". Integer vectors print
    plainly. Vectors with any float print each component with six decimals.
    """
    if isinstance(value, str):
        return value
    if isinstance(value, Integral):
        return "%d" % int(value)
    if isinstance(value, Real):
        return "%.4f" % float(value)
    if isinstance(value, (tuple, list)):
        if not 2 <= len(value) <= 4 or not all(_is_number(c) for c in value):
            raise TypeError(f"cannot format a vector of {len(value)} components: {value!r}")
        if all(isinstance(c, Integral) for c in value):
            parts = ["%d" % int(c) for c in value]
        else:
            parts = ["%f" % float(c) for c in value]
        return "(" + ", ".join(parts) + ")"
    raise TypeError(f"cannot format value of type {type(value).__name__}")


class StringBuilder:
    """Accumulates formatted pieces of text."""

    def __init__(self, *values: Any) -> None:
        self._parts: list[str] = [format_value(v) for v in values]

    def append(self, value: Any) -> StringBuilder:
        """Append the formatted value and return the builder."""
        self._parts.append(format_value(value))
        return self

    def __add__(self, value: Any) -> StringBuilder:
        result = StringBuilder()
        result._parts = [*self._parts, format_value(value)]
        return result

    def __iadd__(self, value: Any) -> StringBuilder:
        return self.append(value)

    @property
    def text(self) -> str:
        return "".join(self._parts)

    def __str__(self) -> str:
        return self.text

    def __len__(self) -> int:
        return sum(len(p) for p in self._parts)


def _build(args: tuple[Any, ...]) -> str:
    return StringBuilder(*args).text


def panic(*args: Any) -> None:
    """Raise PanicError carrying the concatenated message."""
    raise PanicError(_build(args))


def log_message(*args: Any) -> None:
    print(f"[MESSAGE] {_build(args)}", file=sys.stdout)


def log_warning(*args: Any) -> None:
    print(f"[WARN]   {_build(args)}", file=sys.stdout)


def log_error(*args: Any) -> None:
    print(f"[ERROR]  {_build(args)}", file=sys.stdout)


def emit(*args: Any) -> None:
    """Print the concatenated message with no trailing newline."""
    sys.stdout.write(_build(args))