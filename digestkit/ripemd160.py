"""RIPEMD-160 message digest."""

from __future__ import annotations

import struct
from typing import Sequence

DIGEST_SIZE = 20
BLOCK_SIZE = 64

INITIAL_STATE: tuple[int, int, int, int, int] = (
    0x67452301,
    0xEFCDAB89,
    0x98BADCFE,
    0x10325476,
    0xC3D2E1F0,
)

_MASK = 0xFFFFFFFF

_LEFT_WORDS = (
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
    7, 4, 13, 1, 10, 6, 15, 3, 12, 0, 9, 5, 2, 14, 11, 8,
    3, 10, 14, 4, 9, 15, 8, 1, 2, 7, 0, 6, 13, 11, 5, 12,
    1, 9, 11, 10, 0, 8, 12, 4, 13, 3, 7, 15, 14, 5, 6, 2,
    4, 0, 5, 9, 7, 12, 2, 10, 14, 1, 3, 8, 11, 6, 15, 13,
)
_RIGHT_WORDS = (
    5, 14, 7, 0, 9, 2, 11, 4, 13, 6, 15, 8, 1, 10, 3, 12,
    6, 11, 3, 7, 0, 13, 5, 10, 14, 15, 8, 12, 4, 9, 1, 2,
    15, 5, 1, 3, 7, 14, 6, 9, 11, 8, 12, 2, 10, 0, 4, 13,
    8, 6, 4, 1, 3, 11, 15, 0, 5, 12, 2, 13, 9, 7, 10, 14,
    12, 15, 10, 4, 1, 5, 8, 7, 6, 2, 13, 14, 0, 3, 9, 11,
)
_LEFT_SHIFTS = (
    11, 14, 15, 12, 5, 8, 7, 9, 11, 13, 14, 15, 6, 7, 9, 8,
    7, 6, 8, 13, 11, 9, 7, 15, 7, 12, 15, 9, 11, 7, 13, 12,
    11, 13, 6, 7, 14, 9, 13, 15, 14, 8, 13, 6, 5, 12, 7, 5,
    11, 12, 14, 15, 14, 15, 9, 8, 9, 14, 5, 6, 8, 6, 5, 12,
    9, 15, 5, 11, 6, 8, 13, 12, 5, 12, 13, 14, 11, 8, 5, 6,
)
_RIGHT_SHIFTS = (
    8, 9, 9, 11, 13, 15, 15, 5, 7, 7, 8, 11, 14, 14, 12, 6,
    9, 13, 15, 7, 12, 8, 9, 11, 7, 7, 12, 7, 6, 15, 13, 11,
    9, 7, 15, 11, 8, 6, 6, 14, 12, 13, 5, 14, 13, 13, 7, 5,
    15, 5, 8, 11, 14, 14, 6, 14, 6, 9, 12, 9, 12, 5, 15, 8,
    8, 5, 12, 9, 12, 5, 14, 6, 8, 13, 6, 5, 15, 13, 11, 11,
)
_LEFT_CONSTANTS = (0x00000000, 0x5A827999, 0x6ED9EBA1, 0x8F1BBCDC, 0xA953FD4E)
_RIGHT_CONSTANTS = (0x50A28BE6, 0x5C4DD124, 0x6D703EF3, 0x7A6D76E9, 0x00000000)


def _rol(x: int, n: int) -> int:
    return ((x << n) | (x >> (32 - n))) & _MASK


def _f1(x: int, y: int, z: int) -> int:
    return x ^ y ^ z


def _f2(x: int, y: int, z: int) -> int:
    return (x & y) | (~x & z)


def _f3(x: int, y: int, z: int) -> int:
    return ((x | (~y & _MASK)) ^ z) & _MASK


def _f4(x: int, y: int, z: int) -> int:
    return (x & z) | (y & ~z)


def _f5(x: int, y: int, z: int) -> int:
    return (x ^ (y | (~z & _MASK))) & _MASK


_LEFT_FUNCS = (_f1, _f2, _f3, _f4, _f5)
_RIGHT_FUNCS = (_f5, _f4, _f3, _f2, _f1)


def _line(state, words, order, shifts, funcs, constants):
    a, b, c, d, e = state
    for step, (index, shift) in enumerate(zip(order, shifts)):
        group = step // 16
        f = funcs[group](b, c, d) & _MASK
        t = (_rol((a + f + words[index] + constants[group]) & _MASK, shift) + e) & _MASK
        a, b, c, d, e = e, t, b, _rol(c, 10), d
    return a, b, c, d, e


def transform(state: Sequence[int], block: bytes) -> tuple[int, int, int, int, int]:
    """Compress one 64-byte block into a 5-word state and return the new state."""
    if len(state) != 5:
        raise ValueError("state must hold exactly 5 words")
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")
    words = struct.unpack("<16I", bytes(block))
    s0, s1, s2, s3, s4 = (w & _MASK for w in state)
    a1, b1, c1, d1, e1 = _line(
        (s0, s1, s2, s3, s4), words, _LEFT_WORDS, _LEFT_SHIFTS, _LEFT_FUNCS, _LEFT_CONSTANTS
    )
    a2, b2, c2, d2, e2 = _line(
        (s0, s1, s2, s3, s4), words, _RIGHT_WORDS, _RIGHT_SHIFTS, _RIGHT_FUNCS, _RIGHT_CONSTANTS
    )
    return (
        (s1 + c1 + d2) & _MASK,
        (s2 + d1 + e2) & _MASK,
        (s3 + e1 + a2) & _MASK,
        (s4 + a1 + b2) & _MASK,
        (s0 + b1 + c2) & _MASK,
    )


def _state_bytes(state: Sequence[int]) -> bytes:
    return struct.pack("<5I", *state)


class Ripemd160:
    """Incremental RIPEMD-160 hasher."""

    digest_size = DIGEST_SIZE
    block_size = BLOCK_SIZE

    def __init__(self, data: bytes = b"") -> None:
        self._state = INITIAL_STATE
        self._buffer = b""
        self._length = 0
        if data:
            self.update(data)

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        data = bytes(data)
        self._length += len(data)
        pending = self._buffer + data
        full = len(pending) - len(pending) % BLOCK_SIZE
        state = self._state
        for offset in range(0, full, BLOCK_SIZE):
            state = transform(state, pending[offset:offset + BLOCK_SIZE])
        self._state = state
        self._buffer = pending[full:]

    def digest(self) -> bytes:
        """Return the 20-byte digest of everything fed so far."""
        length = self._length
        padding = b"\x80" + bytes((119 - length % 64) % 64)
        tail = self._buffer + padding + struct.pack("<Q", (length << 3) & 0xFFFFFFFFFFFFFFFF)
        state = self._state
        for offset in range(0, len(tail), BLOCK_SIZE):
            state = transform(state, tail[offset:offset + BLOCK_SIZE])
        return _state_bytes(state)

    def hexdigest(self) -> str:
        """Return the digest as lowercase hex."""
        return self.digest().hex()

    def copy(self) -> "Ripemd160":
        """Return an independent copy of this hasher."""
        clone = Ripemd160()
        clone._state = self._state
        clone._buffer = self._buffer
        clone._length = self._length
        return clone


def ripemd160(data: bytes) -> bytes:
    """Return the RIPEMD-160 digest of data."""
    return Ripemd160(data).digest()


def ripemd160_32(data: bytes) -> bytes:
    """Hash exactly 32 bytes with a single, pre-padded compression."""
    if len(data) != 32:
        raise ValueError(f"input must be 32 bytes, got {len(data)}")
    block = bytes(data) + b"\x80" + bytes(23) + struct.pack("<Q", 32 << 3)
    return _state_bytes(transform(INITIAL_STATE, block))


def ripemd160_hex(digest: bytes) -> str:
    """Format a 20-byte digest as lowercase hex."""
    if len(digest) < DIGEST_SIZE:
        raise ValueError(f"digest must be at least {DIGEST_SIZE} bytes")
    return bytes(digest[:DIGEST_SIZE]).hex()


def compare_hashes(first: bytes, second: bytes) -> bool:
    """Tell whether the first 20 bytes of two digests are equal."""
    if len(first) < DIGEST_SIZE or len(second) < DIGEST_SIZE:
        raise ValueError(f"digests must be at least {DIGEST_SIZE} bytes")
    return bytes(first[:DIGEST_SIZE]) == bytes(second[:DIGEST_SIZE])