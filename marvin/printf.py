"""A small printf: %c, %s, %d, %i, %u, %x, %X, %p and %%.

Integer conversions follow 32-bit C semantics: %d and %i take a signed int,
%u, %x and %X an unsigned int, and values outside those ranges wrap around.
"""

import sys
from typing import Any, Iterator, Optional, Union

_INT_BITS = 32
_INT_MASK = (1 << _INT_BITS) - 1
_POINTER_MASK = (1 << 64) - 1
_LOWER_DIGITS = "0123456789abcdef"
_UPPER_DIGITS = "0123456789ABCDEF"


class FormatError(ValueError):
    """Raised for a bad conversion specifier or a missing argument."""


def _check_int(number: Any) -> int:
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an int, got {type(number).__name__}")
    return number


def format_int(number: int) -> str:
    """Return the decimal text of a signed 32-bit integer."""
    value = _check_int(number) & _INT_MASK
    if value >= 1 << (_INT_BITS - 1):
        value -= 1 << _INT_BITS
    return str(value)


def format_unsigned(number: int) -> str:
    """Return the decimal text of an unsigned 32-bit integer."""
    return str(_check_int(number) & _INT_MASK)


def format_hex(number: int, specifier: str = "x") -> str:
    """Return the hexadecimal text of a non-negative integer.

    The specifier "X" selects upper-case digits; anything else lower case.
    """
    value = _check_int(number)
    if value < 0:
        raise ValueError(f"expected a non-negative number, got {value}")
    digits = _UPPER_DIGITS if specifier == "X" else _LOWER_DIGITS
    out = []
    while True:
        value, remainder = divmod(value, 16)
        out.append(digits[remainder])
        if not value:
            break
    return "".join(reversed(out))


def format_pointer(address: Optional[int]) -> str:
    """Return an address as "0x" and lower-case hex, or "(nil)" for zero."""
    if address is None:
        return "(nil)"
    value = _check_int(address)
    if value < 0:
        raise ValueError(f"expected a non-negative address, got {value}")
    value &= _POINTER_MASK
    if value == 0:
        return "(nil)"
    return "0x" + format_hex(value, "x")


def format_str(text: Optional[str]) -> str:
    """Return text unchanged, or "(null)" when it is None."""
    if text is None:
        return "(null)"
    if not isinstance(text, str):
        raise TypeError(f"expected a str, got {type(text).__name__}")
    return text


def _format_char(value: Union[int, str]) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(_check_int(value) & 0xFF)


_CONVERSIONS = {
    "c": _format_char,
    "s": format_str,
    "d": format_int,
    "i": format_int,
    "u": format_unsigned,
    "x": lambda value: format_hex(_check_int(value) & _INT_MASK, "x"),
    "X": lambda value: format_hex(_check_int(value) & _INT_MASK, "X"),
    "p": format_pointer,
}


def sprintf(fmt: str, *args: Any) -> str:
    """Return fmt with each conversion replaced by the next argument.

    Raises FormatError for an unknown specifier, a lone "%" at the end of
    fmt, or too few arguments. Surplus arguments are ignored.
    """
    pending: Iterator[Any] = iter(args)
    chars = iter(fmt)
    out = []
    for char in chars:
        if char != "%":
            out.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            raise FormatError("format ends with a lone '%'")
        if spec == "%":
            out.append("%")
            continue
        convert = _CONVERSIONS.get(spec)
        if convert is None:
            raise FormatError(f"unknown conversion specifier %{spec}")
        try:
            value = next(pending)
        except StopIteration:
            raise FormatError(f"missing argument for %{spec}") from None
        out.append(convert(value))
    return "".join(out)


def printf(fmt: str, *args: Any) -> int:
    """Format as sprintf does, write to standard output, return the length."""
    text = sprintf(fmt, *args)
    sys.stdout.write(text)
    return len(text)