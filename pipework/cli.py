"""Run `infile cmd1 cmd2 outfile` as the shell would run `< infile cmd1 | cmd2 > outfile`."""

from __future__ import annotations

import os
import subprocess
import sys
from typing import IO, List, Mapping, Optional, Sequence, Union

from pipework.errors import (
    ERR_PIPE,
    ArgumentCountError,
    CommandNotFoundError,
    InputFileNotFoundError,
    PipexError,
    report,
)
from pipework.paths import resolve_command
from pipework.strings import split

StreamArg = Union[None, int, IO]

_OUTFILE_FLAGS = os.O_WRONLY | os.O_CREAT | os.O_TRUNC
_OUTFILE_MODE = 0o644


def parse_command(command: str) -> List[str]:
    """Split a command line on spaces into its argument words."""
    return split(command, " ")


def run_command(
    command: str,
    env: Optional[Mapping[str, str]] = None,
    stdin: StreamArg = None,
    stdout: StreamArg = None,
) -> subprocess.Popen:
    """Start command with the given standard streams and return the process.

    The program is searched for on the PATH found in env. A program that
    cannot be found or started raises CommandNotFoundError.
    """
    environment = os.environ if env is None else env
    args = parse_command(command)
    name = args[0] if args else ""
    path = resolve_command(command, environment)
    if path is None:
        raise CommandNotFoundError(name)
    try:
        return subprocess.Popen(
            args,
            executable=path,
            env=dict(environment),
            stdin=stdin,
            stdout=stdout,
        )
    except OSError as exc:
        raise CommandNotFoundError(name) from exc


def _start_first(
    infile: str, command: str, env: Mapping[str, str], write_fd: int
) -> subprocess.Popen:
    try:
        in_fd = os.open(infile, os.O_RDONLY)
    except OSError as exc:
        raise InputFileNotFoundError(infile) from exc
    try:
        return run_command(command, env, in_fd, write_fd)
    finally:
        os.close(in_fd)


def _run_second(command: str, env: Mapping[str, str], read_fd: int, outfile: str) -> int:
    try:
        out_fd: Optional[int] = os.open(outfile, _OUTFILE_FLAGS, _OUTFILE_MODE)
    except OSError:
        # The command then writes to the inherited standard output.
        out_fd = None
    try:
        process = run_command(command, env, read_fd, out_fd)
    except CommandNotFoundError as error:
        return report(error)
    finally:
        if out_fd is not None:
            os.close(out_fd)
    return process.wait()


def run_pipeline(
    infile: str,
    first_command: str,
    second_command: str,
    outfile: str,
    env: Optional[Mapping[str, str]] = None,
) -> int:
    """Pipe first_command, reading infile, into second_command, writing outfile.

    A failure in the first stage is reported on standard error and the
    second stage then reads empty input. The result is the exit status of
    the second stage.
    """
    environment = os.environ if env is None else env
    try:
        read_fd, write_fd = os.pipe()
    except OSError as exc:
        raise PipexError(ERR_PIPE) from exc

    first: Optional[subprocess.Popen] = None
    try:
        try:
            first = _start_first(infile, first_command, environment, write_fd)
        except PipexError as error:
            report(error)
        finally:
            os.close(write_fd)
        return _run_second(second_command, environment, read_fd, outfile)
    finally:
        os.close(read_fd)
        if first is not None:
            first.wait()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point; returns the exit status."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        if len(args) != 4:
            raise ArgumentCountError()
        infile, first_command, second_command, outfile = args
        return run_pipeline(infile, first_command, second_command, outfile)
    except PipexError as error:
        return report(error)


if __name__ == "__main__":
    raise SystemExit(main())