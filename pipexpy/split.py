"""Quote-aware splitting of command strings into argument words."""

from __future__ import annotations

_QUOTES = ("'", '"')


def _unquote(word: str) -> str:
    """Drop one pair of matching quotes wrapping the whole word."""
    for quote in _QUOTES:
        if word.startswith(quote) and word.endswith(quote):
            # A lone quote character counts as both ends and collapses to "".
            return word[1:-1] if len(word) >= 2 else ""
    return word


def split_words(text: str, sep: str = " ") -> list[str]:
    """Split ``text`` on ``sep``, keeping quoted runs together.

    A separator inside single or double quotes does not end a word.  A word
    that starts and ends with the same quote character loses that outer
    pair; quotes elsewhere in a word are kept as they are.  Runs of
    separators never produce empty words.
    """
    if not isinstance(text, str):
        raise TypeError(f"text must be a str, not {type(text).__name__}")
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError("sep must be a single character")

    words: list[str] = []
    current: list[str] | None = None
    in_single = in_double = False

    for ch in text:
        if current is None:
            if ch == sep:
                continue
            current = []
            in_single = in_double = False
        if ch == "'" and not in_double:
            in_single = not in_single
        elif ch == '"' and not in_single:
            in_double = not in_double
        if ch == sep and not in_single and not in_double:
            words.append(_unquote("".join(current)))
            current = None
            continue
        current.append(ch)

    if current is not None:
        words.append(_unquote("".join(current)))
    return words