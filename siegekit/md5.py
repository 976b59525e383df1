"""MD5 message digest (RFC 1321) for byte buffers and binary streams."""

from __future__ import annotations

import struct
from typing import BinaryIO

__all__ = ["MD5", "md5_buffer", "md5_stream"]

_MASK = 0xFFFFFFFF
_BLOCK = 64
_STREAM_CHUNK = 4096

_INITIAL_STATE = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# T[i] = int(4294967296 * abs(sin(i))), i = 1..64
_T = (
    0xD76AA478, 0xE8C7B756, 0x242070DB, 0xC1BDCEEE,
    0xF57C0FAF, 0x4787C62A, 0xA8304613, 0xFD469501,
    0x698098D8, 0x8B44F7AF, 0xFFFF5BB1, 0x895CD7BE,
    0x6B901122, 0xFD987193, 0xA679438E, 0x49B40821,
    0xF61E2562, 0xC040B340, 0x265E5A51, 0xE9B6C7AA,
    0xD62F105D, 0x02441453, 0xD8A1E681, 0xE7D3FBC8,
    0x21E1CDE6, 0xC33707D6, 0xF4D50D87, 0x455A14ED,
    0xA9E3E905, 0xFCEFA3F8, 0x676F02D9, 0x8D2A4C8A,
    0xFFFA3942, 0x8771F681, 0x6D9D6122, 0xFDE5380C,
    0xA4BEEA44, 0x4BDECFA9, 0xF6BB4B60, 0xBEBFBC70,
    0x289B7EC6, 0xEAA127FA, 0xD4EF3085, 0x04881D05,
    0xD9D4D039, 0xE6DB99E5, 0x1FA27CF8, 0xC4AC5665,
    0xF4292244, 0x432AFF97, 0xAB9423A7, 0xFC93A039,
    0x655B59C3, 0x8F0CCC92, 0xFFEFF47D, 0x85845DD1,
    0x6FA87E4F, 0xFE2CE6E0, 0xA3014314, 0x4E0811A1,
    0xF7537E82, 0xBD3AF235, 0x2AD7D2BB, 0xEB86D391,
)

_SHIFTS = (
    (7, 12, 17, 22),
    (5, 9, 14, 20),
    (4, 11, 16, 23),
    (6, 10, 15, 21),
)

_INDICES = (
    tuple(range(16)),
    (1, 6, 11, 0, 5, 10, 15, 4, 9, 14, 3, 8, 13, 2, 7, 12),
    (5, 8, 11, 14, 1, 4, 7, 10, 13, 0, 3, 6, 9, 12, 15, 2),
    (0, 7, 14, 5, 12, 3, 10, 1, 8, 15, 6, 13, 4, 11, 2, 9),
)


def _ff(b: int, c: int, d: int) -> int:
    return d ^ (b & (c ^ d))


def _fg(b: int, c: int, d: int) -> int:
    return _ff(d, b, c)


def _fh(b: int, c: int, d: int) -> int:
    return b ^ c ^ d


def _fi(b: int, c: int, d: int) -> int:
    return (c ^ (b | (~d & _MASK))) & _MASK


_ROUND_FUNCTIONS = (_ff, _fg, _fh, _fi)

# One entry per step: (function, word index, shift, constant)
_SCHEDULE = tuple(
    (func, index, shifts[step % 4], _T[round_no * 16 + step])
    for round_no, (func, indices, shifts) in enumerate(
        zip(_ROUND_FUNCTIONS, _INDICES, _SHIFTS)
    )
    for step, index in enumerate(indices)
)


def _rotl(value: int, shift: int) -> int:
    return ((value << shift) | (value >> (32 - shift))) & _MASK


def _process_block(state: tuple[int, int, int, int], block: bytes) -> tuple[int, int, int, int]:
    """Fold one 64-byte block into the four-word state."""
    words = struct.unpack("<16I", block)
    a, b, c, d = state
    for func, index, shift, constant in _SCHEDULE:
        a = (a + func(b, c, d) + words[index] + constant) & _MASK
        a = (_rotl(a, shift) + b) & _MASK
        a, b, c, d = d, a, b, c
    return (
        (state[0] + a) & _MASK,
        (state[1] + b) & _MASK,
        (state[2] + c) & _MASK,
        (state[3] + d) & _MASK,
    )


def _as_bytes(data: object) -> bytes:
    if isinstance(data, str):
        raise TypeError("strings must be encoded before hashing")
    try:
        return bytes(memoryview(data))  # type: ignore[arg-type]
    except TypeError:
        raise TypeError(
            f"object supporting the buffer API required, not {type(data).__name__!r}"
        ) from None


class MD5:
    """Incremental MD5 computation over bytes-like input."""

    name = "md5"
    digest_size = 16
    block_size = _BLOCK

    def __init__(self, data: bytes = b"") -> None:
        self._state = _INITIAL_STATE
        self._length = 0
        self._pending = b""
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the digest."""
        chunk = _as_bytes(data)
        self._length += len(chunk)
        buffer = self._pending + chunk
        full = len(buffer) - len(buffer) % _BLOCK
        state = self._state
        for offset in range(0, full, _BLOCK):
            state = _process_block(state, buffer[offset:offset + _BLOCK])
        self._state = state
        self._pending = buffer[full:]

    def digest(self) -> bytes:
        """Return the 16-byte digest of everything fed so far."""
        pending = self._pending
        pad_len = (56 - len(pending) - 1) % _BLOCK
        bit_length = (self._length << 3) & 0xFFFFFFFFFFFFFFFF
        tail = pending + b"\x80" + b"\x00" * pad_len + struct.pack("<Q", bit_length)
        state = self._state
        for offset in range(0, len(tail), _BLOCK):
            state = _process_block(state, tail[offset:offset + _BLOCK])
        return struct.pack("<4I", *state)

    def hexdigest(self) -> str:
        """Return the digest as 32 lower-case hex characters."""
        return self.digest().hex()

    def copy(self) -> "MD5":
        """Return an independent copy of the current computation."""
        clone = MD5()
        clone._state = self._state
        clone._length = self._length
        clone._pending = self._pending
        return clone


def md5_buffer(data: bytes) -> bytes:
    """Return the MD5 digest of a bytes-like object."""
    return MD5(data).digest()


def md5_stream(stream: BinaryIO) -> bytes:
    """Return the MD5 digest of everything readable from a binary stream.

    Read errors propagate as the exceptions the stream raises.
    """
    context = MD5()
    for chunk in iter(lambda: stream.read(_STREAM_CHUNK), b""):
        context.update(chunk)
    return context.digest()