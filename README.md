# pipexpy

`pipexpy` runs one or two commands between an input file and an output
file. With two commands it behaves like this shell line:

```sh
< infile cmd1 | cmd2 > outfile
```

## Installation

```sh
pip install .
```

## Command line

```sh
pipexpy infile "cmd1 args" "cmd2 args" outfile
pipexpy infile "cmd args" outfile
```

The same entry point can also be started with
`python -m pipexpy.pipeline`.

- There must be one or two commands. Any other number of arguments makes
  the program exit with status 1 without running anything.
- Each command string is split on spaces. A space inside single or double
  quotes does not split, and a word that starts and ends with the same
  quote character loses that outer pair. For example, `"grep 'hello world'"`
  becomes `grep` and `hello world`.
- The command's first word is joined to each directory in the `PATH`
  environment variable, and the first executable match is run. The name is
  always joined this way, so a command given as an absolute path is not run
  directly.
- The output file is created or truncated with mode `0644`. If it cannot be
  opened, the program prints an error and exits with status 1.
- If the input file cannot be opened, an error is printed:
  - with two commands, the first command is not started and the second
    command still runs, reading an empty pipe;
  - with one command, the command reads from the null device instead.
- If the last word of the second command is the output file's name, that
  command's output is not redirected to the output file; it goes to the
  program's own standard output.
- A command that is empty, is not found on `PATH`, or is run with an empty
  environment is reported and not started.

### Exit status

- With two commands: the exit status of the second command, 127 if it
  could not be started, and 0 if it was killed by a signal.
- With one command: always 1, after the command has finished.

Error messages go to standard error and start with `pipex: `.

## Library

```python
import os

from pipexpy.pipeline import run_pipeline, PipexError
from pipexpy.resolve import Command, find_command, parse_commands
from pipexpy.split import split_words
from pipexpy.printf import sprintf, printf

status = run_pipeline("in.txt", ["grep foo", "wc -l"], "out.txt", os.environ)

split_words("echo 'a b' c", " ")          # ['echo', 'a b', 'c']
find_command("ls", {"PATH": "/usr/bin:/bin"})   # e.g. '/usr/bin/ls', or None
parse_commands(["ls -l"], os.environ)     # [Command(args=('ls', '-l'), path=...)]
sprintf("%s has %d items (0x%x)", "list", 3, 255)  # 'list has 3 items (0xff)'
```

- `run_pipeline(infile, specs, outfile, env=None)` returns the exit status
  described above. `env` defaults to `os.environ`. It raises `ValueError`
  unless there are one or two commands, and `PipexError` (with a `status`
  attribute) when the output file cannot be opened.
- `Command` holds a command's `args` and resolved `path`; `name` is its
  first word and `runnable` says whether it has words and a path.
- `split_words(text, sep=" ")` takes a single-character separator.
- `sprintf` formats `%c %s %p %d %i %u %x %X %%`. `%d` and `%i` wrap to
  signed 32-bit values, `%u %x %X` to unsigned 32-bit values, `%s` prints
  `(null)` for `None` and `%p` prints `(nil)` for `None` or 0. Unknown
  conversions produce nothing and a trailing lone `%` is dropped.
  `printf` writes the same text to standard output and returns its length.

## Limits

- Only one or two commands; longer pipelines are not supported.
- There is no here-document input and no append mode for the output file.
- Commands are not run through a shell, so there is no globbing, variable
  expansion or other shell syntax beyond the quoting described above.

## Tests

```sh
pip install ".[test]"
pytest
```