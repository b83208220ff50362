"""Small helpers: digit counting, subscripts, truncation, UTF-8 and the RNG."""

from __future__ import annotations

import random

from .operations import InternalError
from .time_utils import time_in_millis

rng = random.Random()

_SUBSCRIPTS = "\u2080\u2081\u2082\u2083\u2084\u2085\u2086\u2087\u2088\u2089"

_DIGIT_LIMITS = (10, 100, 1_000, 10_000, 100_000, 1_000_000, 10_000_000, 100_000_000)


def get_digits(number: int) -> int:
    """Return the number of decimal digits of a number, capped at 9."""
    for digits, limit in enumerate(_DIGIT_LIMITS, start=1):
        if number < limit:
            return digits
    return 9


def var_ind_to_subscript(num: int) -> str:
    """Render an integer with Unicode subscript digits."""
    prefix = "-" if num < 0 else ""
    digits = str(abs(num))
    if not digits.isdigit():
        raise InternalError("Tried to convert non-digit character to subscript")
    return prefix + "".join(_SUBSCRIPTS[int(c)] for c in digits)


def truncate_string(value: str, max_len: int) -> str:
    """Cut a string to at most max_len characters, ending in '...' when cut."""
    if max_len < 3:
        raise ValueError("max_len must be at least 3")
    if len(value) <= max_len:
        return value
    return value[: max_len - 3] + "..."


def get_string_length_as_utf32(text: str | bytes) -> int:
    """Count the code points of UTF-8 text, stopping at the first NUL."""
    data = text.encode("utf-8", "surrogatepass") if isinstance(text, str) else bytes(text)
    data = data.split(b"\0", 1)[0]
    return sum(1 for byte in data if byte & 0xC0 != 0x80)


def utf32_codepoint_to_bytes(codepoint: int) -> bytes:
    """Encode one code point as 1 to 4 UTF-8 bytes."""
    if 0 <= codepoint < 0x80:
        return bytes([codepoint])
    if 0x80 <= codepoint < 0x800:
        return bytes([0xC0 | (codepoint >> 6), 0x80 | (codepoint & 0x3F)])
    if 0x800 <= codepoint < 0x10000:
        return bytes(
            [
                0xE0 | (codepoint >> 12),
                0x80 | ((codepoint >> 6) & 0x3F),
                0x80 | (codepoint & 0x3F),
            ]
        )
    if 0x10000 <= codepoint < 0x200000:
        return bytes(
            [
                0xF0 | (codepoint >> 18),
                0x80 | ((codepoint >> 12) & 0x3F),
                0x80 | ((codepoint >> 6) & 0x3F),
                0x80 | (codepoint & 0x3F),
            ]
        )
    raise InternalError("Unknown codepoint given to utf32_codepoint_to_bytes")


def initialize_rng() -> int:
    """Seed the shared generator from the clock and return the seed used."""
    seed = time_in_millis()
    rng.seed(seed)
    return seed