# pipework

`pipework` runs two commands joined by a pipe. The first command reads from an
input file and the second command writes to an output file. It works like this
shell line:

```sh
< infile first_command | second_command > outfile
```

## Installation

```sh
pip install .
```

## Usage

```sh
pipework infile "first_command args" "second_command args" outfile
```

You can also run it with `python -m pipework.cli` and the same four arguments.

The command takes exactly four arguments. If you give any other number, it
writes `Invaild number of Arguments` to standard error and exits with status 1.

Example:

```sh
pipework input.txt "grep error" "wc -l" count.txt
```

This counts the lines of `input.txt` that contain `error` and writes the count
to `count.txt`.

### How commands are run

- Each command is split on spaces, and empty words are dropped. There is no
  quoting and no escaping.
- The first word names the program. That program is searched for in the
  directories listed in `PATH`. Only the first match that exists and is
  executable is used. The variable is picked out by comparing only the first
  four characters of each variable name.
- The output file is created with mode `0644` if it does not exist. If it
  exists, it is emptied. If it cannot be opened, the second command writes to
  the standard output it inherited.
- The exit status is the exit status of the second command.

### Errors

- **Input file does not exist.** The message
  `zsh: no such file or directory: <file>` is written to standard error. The
  first command is not started. The second command still runs, on empty input.
- **Command not found.** The message `pipex: commond not found: <command>` is
  written to standard error. This also happens when a command cannot be
  started. If the second command is the one missing, the exit status is 0.

## Library use

`pipework.cli` provides these functions:

- `run_pipeline(infile, first_command, second_command, outfile, env=None)`
  runs a whole pipeline and returns the exit status.
- `run_command(command, env=None, stdin=None, stdout=None)` starts a single
  command and returns its `subprocess.Popen`.
- `parse_command(command)` splits a command line into its words.
- `main(argv=None)` is the command-line entry point.

`pipework.paths` finds programs:

- `lookup_env(name, env)`
- `find_executable(directories, name)`
- `resolve_command(command, env)`

Failures are raised as `pipework.errors.PipexError` and its subclasses:

- `ArgumentCountError`
- `InputFileNotFoundError`
- `CommandNotFoundError`

Each one carries a `message` and an `exit_status`.
`pipework.errors.report(error, stream=None)` prints the message and returns
the status.

```python
from pipework.paths import resolve_command
from pipework.strings import split

split("  ls   -l ", " ")                               # ['ls', '-l']
resolve_command("ls -l", {"PATH": "/usr/bin:/bin"})    # '/usr/bin/ls' or '/bin/ls'
```

The package also has small helper modules:

- `pipework.strings`: splitting, bounded copying, searching and mapping of
  strings.
- `pipework.chars`: ASCII character classes and case conversion.
- `pipework.numbers`: `atoi` and `itoa`.
- `pipework.memory`: byte-buffer operations such as `memset`, `memcpy`,
  `memmove` and `calloc`.
- `pipework.linkedlist`: a singly linked `LinkedList` of `Node`s.
- `pipework.output`: `put_char`, `put_str`, `put_endl` and `put_number` for
  text streams.

## What it does not do

- A pipeline always has exactly two commands.
- There is no here-document mode, and there is no appending to the output
  file.
- Commands are not interpreted by a shell. Quotes, variables and globs are
  passed through as plain words.

## Running the tests

```sh
pip install ".[test]"
pytest
```