"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from collections.abc import Iterator
from typing import Any

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = 0xFFFFFFFFFFFFFFFF


def _as_int(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"integer argument expected, got {type(value).__name__}")
    return value


def _to_signed32(value: int) -> int:
    value &= _UINT_MASK
    return value - (1 << 32) if value >= 1 << 31 else value


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise TypeError("%c requires a single character")
        return value
    return chr(_as_int(value) & 0xFF)


def _format_str(value: Any) -> str:
    return "(null)" if value is None else str(value)


def _format_pointer(value: Any) -> str:
    if value is None or value == 0:
        return "(nil)"
    return f"0x{_as_int(value) & _POINTER_MASK:x}"


def _convert(spec: str, args: Iterator[Any]) -> str:
    if spec == "%":
        return "%"
    if spec not in "cspdiuxX":
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return _format_str(value)
    if spec == "p":
        return _format_pointer(value)
    if spec in "di":
        return str(_to_signed32(_as_int(value)))
    unsigned = _as_int(value) & _UINT_MASK
    if spec == "u":
        return str(unsigned)
    return f"{unsigned:x}" if spec == "x" else f"{unsigned:X}"


def sprintf(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions filled from ``args``.

    Unknown conversions produce nothing; a trailing lone ``%`` is ignored.
    """
    values = iter(args)
    pieces: list[str] = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        pieces.append(_convert(spec, values))
    return "".join(pieces)


def printf(fmt: str, *args: Any) -> int:
    """Write the formatted text to standard output; return its length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)