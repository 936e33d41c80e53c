"""Locating executables through the PATH environment variable."""

from __future__ import annotations

import os
from typing import Iterable, Mapping, Optional

from pipework.strings import split, strncmp

# Variable names are matched on this many leading characters only.
_NAME_MATCH_LENGTH = 4


def lookup_env(name: str, env: Mapping[str, str]) -> Optional[str]:
    """Value of the first variable whose name matches name on its first four
    characters, or None when no variable matches."""
    for key, value in env.items():
        if strncmp(key, name, _NAME_MATCH_LENGTH) == 0:
            return value
    return None


def find_executable(directories: Iterable[str], name: str) -> Optional[str]:
    """First directory/name that exists and is executable, or None."""
    for directory in directories:
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return None


def resolve_command(command: str, env: Mapping[str, str]) -> Optional[str]:
    """Full path of the program named by the first word of command, or None
    when the command is empty, PATH is unset, or nothing is found."""
    words = split(command, " ")
    if not words:
        return None
    search_path = lookup_env("PATH", env)
    if search_path is None:
        return None
    return find_executable(split(search_path, ":"), words[0])