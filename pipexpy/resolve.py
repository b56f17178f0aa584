"""Turning command strings into argument lists and executable paths."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from pipexpy.split import split_words


@dataclass(frozen=True)
class Command:
    """One parsed command: its argument words and the resolved executable."""

    args: tuple[str, ...]
    path: str | None

    @property
    def name(self) -> str:
        """The command's first word, or an empty string when it has none."""
        return self.args[0] if self.args else ""

    @property
    def runnable(self) -> bool:
        """True when the command has words and an executable was found."""
        return bool(self.args) and self.path is not None


def find_command(name: str, env: Mapping[str, str]) -> str | None:
    """Return the first ``<dir>/<name>`` on ``PATH`` that is executable.

    The name is always joined to each ``PATH`` entry, even when it already
    contains a slash. Returns ``None`` when ``PATH`` is unset or nothing
    matches.
    """
    if not name:
        return None
    search = env.get("PATH")
    if search is None:
        return None
    for directory in split_words(search, ":"):
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def parse_commands(specs: Iterable[str], env: Mapping[str, str]) -> list[Command]:
    """Split each command string into words and resolve its executable."""
    commands = []
    for spec in specs:
        args = tuple(split_words(spec, " "))
        path = find_command(args[0], env) if args else None
        commands.append(Command(args=args, path=path))
    return commands