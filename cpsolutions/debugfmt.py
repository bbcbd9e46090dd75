"""Readable rendering of nested containers for debug output."""

import sys
from collections import deque
from collections.abc import Mapping, Set


def _ordered(items):
    """Return items sorted when they are comparable, else in iteration order."""
    items = list(items)
    try:
        return sorted(items)
    except TypeError:
        return items


def format_value(value):
    """Render a value the way the debug stream prints it.

    Tuples become ``(a, b)``, lists and deques ``[a, b]``, mappings
    ``{k: v}`` and sets ``{a, b}``. Booleans print as ``1``/``0`` and
    strings are printed without quotes.
    """
    if isinstance(value, bool):
        return "1" if value else "0"
    if isinstance(value, str):
        return value
    if isinstance(value, float):
        return f"{value:g}"
    if isinstance(value, tuple):
        return "(" + ", ".join(format_value(item) for item in value) + ")"
    if isinstance(value, (list, deque)):
        return "[" + ", ".join(format_value(item) for item in value) + "]"
    if isinstance(value, Mapping):
        keys = _ordered(value.keys())
        body = ", ".join(f"{format_value(k)}: {format_value(value[k])}" for k in keys)
        return "{" + body + "}"
    if isinstance(value, Set):
        return "{" + ", ".join(format_value(item) for item in _ordered(value)) + "}"
    return str(value)


def debug(label, value, index, file=None):
    """Write a breakpoint line for ``value`` and return the written text."""
    line = f"BreakPoint({index}) -> {label} = {format_value(value)}\n"
    stream = sys.stderr if file is None else file
    stream.write(line)
    return line