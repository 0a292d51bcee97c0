"""Character classification, case mapping and integer/text conversion.

Characters are given as integer code points. Only the ASCII ranges are
recognised, whatever the locale.
"""

_WHITESPACE = frozenset(range(9, 14)) | {ord(" ")}


def is_alpha(code: int) -> bool:
    """Return True for an ASCII letter."""
    return ord("A") <= code <= ord("Z") or ord("a") <= code <= ord("z")


def is_digit(code: int) -> bool:
    """Return True for an ASCII decimal digit."""
    return ord("0") <= code <= ord("9")


def is_alnum(code: int) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(code) or is_digit(code)


def is_ascii(code: int) -> bool:
    """Return True for a code point in the 7-bit ASCII range."""
    return 0 <= code <= 127


def is_print(code: int) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= code <= 126


def to_lower(code: int) -> int:
    """Map an ASCII upper-case letter to lower case; leave anything else."""
    if ord("A") <= code <= ord("Z"):
        return code + 32
    return code


def to_upper(code: int) -> int:
    """Map an ASCII lower-case letter to upper case; leave anything else."""
    if ord("a") <= code <= ord("z"):
        return code - 32
    return code


def atoi(text: str) -> int:
    """Parse a leading decimal integer.

    Leading blanks (space and tab through carriage return) are skipped, one
    optional sign is accepted, then digits are read until the first
    non-digit. Text with no digits yields 0.
    """
    pos = 0
    length = len(text)
    while pos < length and ord(text[pos]) in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < length and is_digit(ord(text[pos])):
        pos += 1
    digits = text[start:pos]
    return sign * int(digits) if digits else 0


def itoa(number: int) -> str:
    """Return the decimal text of an integer."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return f"{number:d}"