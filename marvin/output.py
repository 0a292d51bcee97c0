"""Writing characters, strings and integers to a text stream."""

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write one character to the stream (standard output by default)."""
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string to the stream (standard output by default)."""
    _target(stream).write(text)


def put_endl(text: str, stream: Optional[TextIO] = None) -> None:
    """Write a string followed by a newline."""
    _target(stream).write(text + "\n")


def put_nbr(number: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal text of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    _target(stream).write(f"{number:d}")