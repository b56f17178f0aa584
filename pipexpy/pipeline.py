"""Running one or two commands between an input file and an output file."""

from __future__ import annotations

import errno
import os
import subprocess
import sys
from collections.abc import Mapping, Sequence
from contextlib import ExitStack

from pipexpy.resolve import Command, parse_commands

_NOT_FOUND_STATUS = 127
_FAILURE_STATUS = 1


class PipexError(Exception):
    """A fatal pipeline error carrying the exit status to report."""

    def __init__(self, message: str, status: int = _FAILURE_STATUS) -> None:
        super().__init__(message)
        self.status = status


def _report(message: str) -> None:
    sys.stderr.write(f"pipex: {message}\n")
    sys.stderr.flush()


def _open_infile(path: str) -> int | None:
    try:
        return os.open(path, os.O_RDONLY)
    except OSError as exc:
        _report(f"{exc.strerror}: {path}")
        return None


def _open_outfile(path: str) -> int:
    try:
        return os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, 0o644)
    except OSError as exc:
        raise PipexError(f"{exc.strerror}: {path}") from exc


def _names_outfile(command: Command, outfile: str) -> bool:
    """True when the command's last word is the output file itself."""
    return bool(command.args) and command.args[-1] == outfile


def _spawn(
    command: Command,
    stdin: int,
    stdout: int | None,
    env: Mapping[str, str],
) -> subprocess.Popen | None:
    """Start the command, or report why it cannot run and return None."""
    if not command.runnable or not env:
        _report(f"{os.strerror(errno.ENOENT)}: {command.name}")
        return None
    try:
        return subprocess.Popen(
            list(command.args),
            executable=command.path,
            stdin=stdin,
            stdout=stdout,
            env=dict(env),
        )
    except OSError as exc:
        _report(f"Command not found: {exc.strerror}")
        return None


def _wait(process: subprocess.Popen | None) -> int:
    """Wait for a process; a command that never started counts as 127."""
    if process is None:
        return _NOT_FOUND_STATUS
    return process.wait()


def run_pipeline(
    infile: str,
    specs: Sequence[str],
    outfile: str,
    env: Mapping[str, str] | None = None,
) -> int:
    """Run ``specs`` as ``< infile cmd1 | cmd2 > outfile`` and return the status.

    With two commands the status is the last command's exit code (0 if it
    was killed by a signal). With a single command the status is always 1.
    An unreadable input file is reported and, with two commands, the first
    command is not run; an unwritable output file raises PipexError.
    """
    specs = list(specs)
    if len(specs) not in (1, 2):
        raise ValueError("exactly one or two commands are supported")
    environment = dict(os.environ if env is None else env)

    with ExitStack() as stack:
        in_fd = _open_infile(infile)
        if in_fd is not None:
            stack.callback(os.close, in_fd)
        out_fd = _open_outfile(outfile)
        stack.callback(os.close, out_fd)
        commands = parse_commands(specs, environment)

        if len(commands) == 1:
            if in_fd is None:
                in_fd = _open_infile(os.devnull)
                if in_fd is None:
                    raise PipexError(f"{os.strerror(errno.ENOENT)}: infile")
                stack.callback(os.close, in_fd)
            _wait(_spawn(commands[0], in_fd, out_fd, environment))
            return _FAILURE_STATUS

        try:
            read_end, write_end = os.pipe()
        except OSError as exc:
            raise PipexError("pipe failed") from exc

        first = None
        try:
            if in_fd is not None:
                first = _spawn(commands[0], in_fd, write_end, environment)
            last_stdout = None if _names_outfile(commands[1], outfile) else out_fd
            last = _spawn(commands[1], read_end, last_stdout, environment)
        finally:
            os.close(read_end)
            os.close(write_end)

        if first is not None:
            first.wait()
        status = _wait(last)
        return status if status >= 0 else 0


def main(argv: Sequence[str] | None = None) -> int:
    """Command-line entry: ``infile cmd1 [cmd2] outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) not in (3, 4):
        return _FAILURE_STATUS
    try:
        return run_pipeline(args[0], args[1:-1], args[-1], os.environ)
    except PipexError as exc:
        _report(str(exc))
        return exc.status


if __name__ == "__main__":
    raise SystemExit(main())