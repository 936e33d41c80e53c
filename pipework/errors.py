"""Errors raised while running a pipeline, and how they are reported."""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from pipework.output import put_endl

ERR_ARGC = "Invaild number of Arguments"
ERR_PIPE = "Failed to open pipe"
ERR_FORK = "Failed to forking"
ERR_CMD = "Commond not found"
ERR_DUP = "Error: dup2 failed"
ERR_EXECVE = "Error: Command execution failed"
ERR_OPEN = "Error:"

_FILE_NOT_FOUND_PREFIX = "zsh: no such file or directory: "
_COMMAND_NOT_FOUND_PREFIX = "pipex: commond not found: "

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def file_not_found_message(filename: str) -> str:
    """The diagnostic printed when the input file cannot be opened."""
    return _FILE_NOT_FOUND_PREFIX + filename


def command_not_found_message(command: str) -> str:
    """The diagnostic printed when a command cannot be located or started."""
    return _COMMAND_NOT_FOUND_PREFIX + command


class PipexError(Exception):
    """A failure with the message to print and the status to exit with."""

    def __init__(self, message: str, exit_status: int = EXIT_FAILURE) -> None:
        super().__init__(message)
        self.message = message
        self.exit_status = exit_status

    def __str__(self) -> str:
        return self.message


class ArgumentCountError(PipexError):
    """The command line did not hold exactly four arguments."""

    def __init__(self) -> None:
        super().__init__(ERR_ARGC, EXIT_FAILURE)


class InputFileNotFoundError(PipexError):
    """The input file could not be opened for reading."""

    def __init__(self, filename: str) -> None:
        super().__init__(file_not_found_message(filename), EXIT_FAILURE)
        self.filename = filename


class CommandNotFoundError(PipexError):
    """A command was not found on the search path or could not be started."""

    def __init__(self, command: str) -> None:
        super().__init__(command_not_found_message(command), EXIT_SUCCESS)
        self.command = command


def report(error: PipexError, stream: Optional[TextIO] = None) -> int:
    """Write the error's message on its own line and return its exit status."""
    put_endl(error.message, sys.stderr if stream is None else stream)
    return error.exit_status