"""String helpers with bounded copying, searching and mapping.

Functions that search return an index, or None when nothing is found.
Functions that copy into a bounded destination return the resulting text
together with the length the untruncated result would have had.
"""

from __future__ import annotations

from itertools import zip_longest
from typing import Callable, List, MutableSequence, Optional, Tuple, Union

CharLike = Union[str, int]


def _char(c: CharLike) -> str:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer, got {type(c).__name__}")
    return chr(c & 0xFF)


def _non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, separator: CharLike) -> List[str]:
    """Split text on a single separator character, dropping empty pieces."""
    sep = _char(separator)
    return [piece for piece in text.split(sep) if piece]


def substr(text: str, start: int, length: int) -> str:
    """Up to length characters of text beginning at start.

    A start at or past the end of the text, or a zero length, gives "".
    """
    _non_negative("start", start)
    _non_negative("length", length)
    if start > len(text) or length == 0:
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    return text.strip(charset) if charset else text


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first needle lying wholly within the first length characters.

    An empty needle is found at index 0.
    """
    _non_negative("length", length)
    if not needle:
        return 0
    if length == 0:
        return None
    index = haystack.find(needle, 0, length)
    return index if index >= 0 else None


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most count characters; the result is the difference of the
    first unequal character codes, a missing character counting as zero."""
    _non_negative("count", count)
    for a, b in zip_longest(first[:count], second[:count], fillvalue="\0"):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the first occurrence of char; searching for NUL gives len(text)."""
    target = _char(char)
    index = text.find(target)
    if index >= 0:
        return index
    if target == "\0":
        return len(text)
    return None


def strrchr(text: str, char: CharLike) -> Optional[int]:
    """Index of the last occurrence of char; searching for NUL gives len(text)."""
    target = _char(char)
    if target == "\0":
        return len(text)
    index = text.rfind(target)
    return index if index >= 0 else None


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a destination of size slots, one kept for the terminator.

    Returns the copied text and the full length of src.
    """
    _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dest: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dest within a destination of size slots.

    Returns the resulting text and the length it tried to create. When size
    does not exceed len(dest), dest is returned unchanged with size + len(src).
    """
    _non_negative("size", size)
    if size <= len(dest):
        return dest, size + len(src)
    room = size - len(dest) - 1
    return dest + src[:room], len(dest) + len(src)


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    if not isinstance(first, str) or not isinstance(second, str):
        raise TypeError("both arguments must be strings")
    return first + second


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New string built from func(index, char) for every character of text."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Apply func(index, char) to each element of chars in place.

    A returned value replaces the element; None leaves it as it was.
    The same sequence is returned.
    """
    for index, ch in enumerate(list(chars)):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement
    return chars