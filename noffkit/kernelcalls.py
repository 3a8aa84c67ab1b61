"""Kernel side of the console and arithmetic system calls."""

from __future__ import annotations

from noffkit.console import ConsoleInput, ConsoleOutput

MAX_NUM_LENGTH = 11
"""Longest decimal integer accepted, including a minus sign."""

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_BLANKS = ("\n", "\r", "\t", " ")


def _to_int32(value: int) -> int:
    """Wrap ``value`` to a signed 32-bit integer, as a machine register would."""
    value &= 0xFFFFFFFF
    return value - (1 << 32) if value & 0x80000000 else value


def add(op1: int, op2: int) -> int:
    """Return the 32-bit sum of two operands."""
    return _to_int32(op1 + op2)


def absolute(op1: int) -> int:
    """Return the 32-bit absolute value of ``op1``."""
    return _to_int32(op1 if op1 > 0 else -op1)


def is_blank(ch: str) -> bool:
    """True for line feed, carriage return, tab and space."""
    return ch in _BLANKS


def read_until_blank(console: ConsoleInput) -> str:
    """Read a word from the console, stopping at a blank or the end of input.

    The terminating blank is consumed. A leading blank yields an empty word,
    and at most ``MAX_NUM_LENGTH + 1`` characters are collected.
    """
    ch = console.get_char()
    if not ch or is_blank(ch):
        return ""
    chars: list[str] = []
    while ch and not is_blank(ch):
        chars.append(ch)
        if len(chars) > MAX_NUM_LENGTH:
            break
        ch = console.get_char()
    return "".join(chars)


def compare_num_and_string(integer: int, text: str) -> bool:
    """True when ``text`` is exactly the decimal form of ``integer``."""
    if integer == 0:
        return text == "0"
    if integer < 0:
        if not text.startswith("-"):
            return False
        text = text[1:]
        integer = -integer
    return text == str(integer)


def read_num(console: ConsoleInput) -> int:
    """Read a 32-bit decimal integer; anything malformed or out of range gives 0."""
    text = read_until_blank(console)
    if not text:
        return 0
    if text == "-2147483648":
        return INT32_MIN

    negative = text[0] == "-"
    digits = text[1:] if negative else text
    if not all("0" <= c <= "9" for c in digits):
        return 0

    zeros = len(digits) - len(digits.lstrip("0"))
    value = int(digits) if digits else 0
    # Reject "00", "01" and "-0".
    if zeros > 1 or (zeros and (value or negative)):
        return 0

    num = _to_int32(-value if negative else value)
    if len(text) <= MAX_NUM_LENGTH - 2:
        return num
    return num if compare_num_and_string(num, text) else 0


def print_num(console: ConsoleOutput, num: int) -> None:
    """Write a 32-bit integer in decimal."""
    console.put_string(str(_to_int32(num)))


def read_char(console: ConsoleInput) -> str:
    """Read one character; "" at the end of input."""
    return console.get_char()


def print_char(console: ConsoleOutput, ch: str) -> None:
    """Write one character."""
    console.put_char(ch)


def read_string(console: ConsoleInput, length: int) -> str:
    """Read up to ``length`` characters, fewer only if the input ends."""
    return console.get_string(length)


def print_string(console: ConsoleOutput, text: str) -> int:
    """Write ``text`` and return the number of characters written."""
    return console.put_string(text)