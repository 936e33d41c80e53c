"""Writing characters, text and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO, Union

CharLike = Union[str, int]


def _stream(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: CharLike, stream: Optional[TextIO] = None) -> None:
    """Write a single character; an integer is taken as a byte-sized code."""
    if isinstance(char, str):
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        text = char
    elif isinstance(char, int) and not isinstance(char, bool):
        text = chr(char & 0xFF)
    else:
        raise TypeError(f"expected a character or an integer, got {type(char).__name__}")
    _stream(stream).write(text)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write text as it is; None writes nothing."""
    if text is None:
        return
    _stream(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write text followed by a newline; None writes only the newline."""
    out = _stream(stream)
    put_str(text, out)
    put_char("\n", out)


def put_number(number: int, stream: Optional[TextIO] = None) -> None:
    """Write an integer in decimal, with a leading '-' when negative."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    put_str(str(number), stream)