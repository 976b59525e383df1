"""String helpers, time-option parsing, random numbers and version data."""

from __future__ import annotations

import os
import string
import sys

__all__ = [
    "VERSION",
    "PROGRAM_NAME",
    "parse_time",
    "substring",
    "okay",
    "strmatch",
    "startswith",
    "endswith",
    "stristr",
    "strncasestr",
    "elapsed_time",
    "posix_rand_r",
    "urandom",
    "version_banner",
]

VERSION = "4.1.7-b6"
PROGRAM_NAME = "siege"
_NOTICE = (
    "This is free software; see the source for copying conditions.\n"
    "There is NO warranty; not even for MERCHANTABILITY or FITNESS\n"
    "FOR A PARTICULAR PURPOSE.\n"
)

_RAND_MAX = 2147483647
_FOLD = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)


def _lower(text: str) -> str:
    """Lower-case ASCII letters only, as the C locale does."""
    return text.translate(_FOLD)


def parse_time(text: str) -> tuple[int, int]:
    """Parse a -t/--time option such as ``10S``, ``5M`` or ``1H``.

    Returns ``(time, secs)``. With a modifier the count goes to ``secs``
    and ``time`` becomes 1; without one the number is taken as minutes.
    A value that does not start with a digit gives ``(0, 0)``.
    """
    digits = 0
    while digits < len(text) and text[digits] in string.digits:
        digits += 1
    if digits == 0:
        return 0, 0
    count = int(text[:digits])
    multipliers = {"s": 1, "m": 60, "h": 3600}
    for char in text[digits:]:
        factor = multipliers.get(_lower(char))
        if factor is not None:
            return 1, count * factor
    if count > 0:
        return count, count * 60
    return count, 0


def substring(text: str, start: int, length: int) -> str | None:
    """Return up to ``length`` characters from ``start``, or None if out of range."""
    if length < 1 or start < 0 or start > len(text):
        return None
    return text[start:start + length]


def okay(code: int) -> bool:
    """Return True for informational and success status codes (100-299)."""
    return 100 <= code <= 299


def strmatch(option: str, param: str) -> bool:
    """Return True if the strings are equal ignoring ASCII case."""
    return len(option) == len(param) and _lower(option) == _lower(param)


def startswith(prefix: str, text: str) -> bool:
    """Return True if text begins with prefix (case-sensitive)."""
    return text.startswith(prefix)


def endswith(suffix: str | None, text: str | None) -> bool:
    """Return True if text ends with suffix; False if either is None."""
    if text is None or suffix is None:
        return False
    return text.endswith(suffix)


def stristr(haystack: str, needle: str) -> str | None:
    """Return the tail of haystack from the first case-insensitive match of needle."""
    index = _lower(haystack).find(_lower(needle))
    return None if index < 0 else haystack[index:]


def strncasestr(text: str, needle: str, length: int) -> str | None:
    """Case-insensitive search for needle starting within the first ``length`` characters.

    Returns the tail of text from the match, or None.
    """
    window = len(text[:length])
    if window < 1 or not needle or len(needle) > window:
        return None
    folded_needle = _lower(needle)
    folded_text = _lower(text)
    for index in range(window - len(needle) + 1):
        if folded_text.startswith(folded_needle, index):
            return text[index:]
    return None


def _clock_ticks() -> int:
    try:
        ticks = os.sysconf("SC_CLK_TCK")
    except (AttributeError, ValueError, OSError):
        return 100
    return ticks if ticks > 0 else 100


def elapsed_time(ticks: int) -> float:
    """Convert clock ticks to seconds."""
    return ticks / _clock_ticks()


def posix_rand_r(seed: int) -> int:
    """Return the next value of the portable rand_r generator.

    The returned value is also the next seed.
    """
    return (seed * 1103515245 + 12345) % (_RAND_MAX + 1)


def urandom() -> int:
    """Return a random signed 32-bit integer from the system's entropy source."""
    return int.from_bytes(os.urandom(4), sys.byteorder, signed=True)


def version_banner() -> str:
    """Return the program name, version and warranty notice."""
    return f"{PROGRAM_NAME} {VERSION}\n{_NOTICE}"