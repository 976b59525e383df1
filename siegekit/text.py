"""Perl-flavoured string helpers: chomp, trim, word counting and splitting."""

from __future__ import annotations

__all__ = ["chomp", "rtrim", "ltrim", "trim", "empty", "word_count", "split"]

# Whitespace as the C locale defines it.
_SPACE = " \t\n\v\f\r"


def chomp(text: str) -> str:
    """Remove a single trailing newline."""
    return text[:-1] if text.endswith("\n") else text


def rtrim(text: str) -> str:
    """Strip whitespace from the right."""
    return text.rstrip(_SPACE)


def ltrim(text: str) -> str:
    """Strip whitespace from the left."""
    return text.lstrip(_SPACE)


def trim(text: str) -> str:
    """Strip whitespace from both ends."""
    return ltrim(rtrim(text))


def empty(text: str | None) -> bool:
    """Return True for None, the empty string or whitespace only."""
    if not text:
        return True
    return not text.lstrip(_SPACE)


def word_count(pattern: str, text: str) -> int:
    """Count runs of characters other than the separator."""
    count = 0
    in_word = False
    for char in text:
        if char != pattern:
            if not in_word:
                count += 1
            in_word = True
        else:
            in_word = False
    return count


def split(pattern: str, text: str) -> list[str]:
    """Split on a single separator character, dropping empty fields."""
    if len(pattern) != 1:
        raise ValueError("separator must be a single character")
    return [word for word in text.split(pattern) if word]