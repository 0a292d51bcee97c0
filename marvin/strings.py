"""String searching, comparison, trimming and bounded copying helpers.

Positions are returned as indexes into the string, or None when nothing
is found. Characters are one-character strings.
"""

from itertools import zip_longest
from typing import Callable, MutableSequence, Optional, Tuple

_NUL = "\0"


def _check_char(char: str) -> None:
    if len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _check_size(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def split(text: str, sep: str) -> list:
    """Split text on a separator character, dropping empty fields."""
    _check_char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, char: str) -> Optional[int]:
    """Return the index of the first occurrence of char, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(char)
    index = text.find(char)
    if index >= 0:
        return index
    return len(text) if char == _NUL else None


def strrchr(text: str, char: str) -> Optional[int]:
    """Return the index of the last occurrence of char, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(char)
    if char == _NUL:
        return len(text)
    index = text.rfind(char)
    return index if index >= 0 else None


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Find needle lying wholly within the first length characters.

    An empty needle is found at index 0.
    """
    _check_size("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return index if index >= 0 else None


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most count characters.

    Returns the code-point difference of the first pair that differs, a
    missing character counting as NUL, or 0 when the prefixes match.
    """
    _check_size("count", count)
    pairs = zip_longest(first[:count], second[:count], fillvalue=_NUL)
    for left, right in pairs:
        if left != right:
            return ord(left) - ord(right)
    return 0


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in charset from both ends of text."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Return up to length characters of text beginning at start.

    A start at or past the end yields an empty string.
    """
    _check_size("start", start)
    _check_size("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy src into a buffer of size slots, one kept for the terminator.

    Returns the copied text and the full length of src; a caller can tell
    that truncation happened when the length is not less than size.
    """
    _check_size("size", size)
    copied = src[:size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append src to dst within a buffer of size slots.

    Returns the resulting text and the length the full concatenation would
    have. When dst already fills the buffer it is returned unchanged and
    the length reported is size plus the length of src.
    """
    _check_size("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, char) for every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(chars: MutableSequence, func: Callable[[int, str], str]) -> None:
    """Replace each character in place with func(index, char)."""
    for index, char in enumerate(chars):
        chars[index] = func(index, char)