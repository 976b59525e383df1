"""URL scheme and method enums, path escaping and entity replacement."""

from __future__ import annotations

from enum import Enum, IntEnum

__all__ = ["Scheme", "Method", "has_method", "url_escape", "url_replace"]


class Method(IntEnum):
    """HTTP request method."""

    NOMETHOD = 0
    HEAD = 1
    GET = 2
    POST = 3
    PUT = 4
    DELETE = 5
    TRACE = 6
    OPTIONS = 7
    CONNECT = 8
    PATCH = 9


class Scheme(IntEnum):
    """URL scheme."""

    UNSUPPORTED = 0
    HTTP = 1
    HTTPS = 2
    FTP = 3
    PROXY = 4


# Search order of method markers inside a URL line.
_METHOD_MARKERS = (
    (" GET", Method.GET),
    (" HEAD", Method.HEAD),
    (" POST", Method.POST),
    (" PUT", Method.PUT),
    (" TRACE", Method.TRACE),
    (" DELETE", Method.DELETE),
    (" OPTIONS", Method.OPTIONS),
    (" CONNECT", Method.CONNECT),
    (" PATCH", Method.PATCH),
)

_RESERVED = frozenset(b";/?:@&=+#[]")
_UNSAFE = frozenset(
    set(range(0, 33))
    | set(b'"#%:<>@[\\]^`{|}~')
    | set(range(127, 256))
)
_HEX = b"0123456789ABCDEF"
_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")


class _Copy(Enum):
    DECODE = 1
    ENCODE = 2
    PASSTHROUGH = 3


def has_method(url: str) -> Method:
    """Return the first method marker (" POST" and so on) found in a URL line."""
    for marker, method in _METHOD_MARKERS:
        if marker in url:
            return method
    return Method.NOMETHOD


def _decide(data: bytes, pos: int) -> _Copy:
    byte = data[pos]
    if byte == ord("%"):
        pair = data[pos + 1:pos + 3]
        if len(pair) == 2 and all(ch in _HEX_DIGITS for ch in pair):
            value = int(pair, 16)
            if value in _UNSAFE or value in _RESERVED:
                return _Copy.PASSTHROUGH
            return _Copy.DECODE
        return _Copy.ENCODE
    if byte in _UNSAFE and byte not in _RESERVED:
        return _Copy.ENCODE
    return _Copy.PASSTHROUGH


def url_escape(url: str) -> str:
    """Percent-encode unsafe characters in the path part of a URL.

    Safe %xx sequences are decoded; reserved ones are kept. URL lines
    that carry a request method other than GET are returned unchanged,
    as are URLs without a path.
    """
    if has_method(url) not in (Method.NOMETHOD, Method.GET):
        return url

    marker = url.find("//")
    host_start = marker + 2 if marker >= 0 else 0
    slash = url.find("/", host_start)
    if slash < 0:
        return url

    head = url[:slash + 1]
    data = url[slash + 1:].encode("utf-8")
    out = bytearray()
    changed = False
    pos = 0
    while pos < len(data):
        action = _decide(data, pos)
        if action is _Copy.ENCODE:
            byte = data[pos]
            out += bytes((ord("%"), _HEX[byte >> 4], _HEX[byte & 0xF]))
            pos += 1
            changed = True
        elif action is _Copy.DECODE:
            out.append(int(data[pos + 1:pos + 3], 16))
            pos += 3
            changed = True
        else:
            out.append(data[pos])
            pos += 1
    if not changed:
        return url
    return head + out.decode("ascii")


def url_replace(text: str, needle: str, replacement: str) -> str:
    """Return text with every occurrence of needle replaced."""
    if not needle:
        raise ValueError("needle must not be empty")
    return text.replace(needle, replacement)