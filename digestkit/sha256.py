"""SHA-256 message digest, with fixed-size helpers for 33, 65 and short inputs."""

from __future__ import annotations

import os
import struct
from typing import Sequence, Union

DIGEST_SIZE = 32
BLOCK_SIZE = 64

INITIAL_STATE: tuple[int, ...] = (
    0x6A09E667,
    0xBB67AE85,
    0x3C6EF372,
    0xA54FF53A,
    0x510E527F,
    0x9B05688C,
    0x1F83D9AB,
    0x5BE0CD19,
)

_K = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1, 0x923F82A4, 0xAB1C5ED5,
    0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3, 0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174,
    0xE49B69C1, 0xEFBE4786, 0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147, 0x06CA6351, 0x14292967,
    0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13, 0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85,
    0xA2BFE8A1, 0xA81A664B, 0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A, 0x5B9CCA4F, 0x682E6FF3,
    0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208, 0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)

_MASK = 0xFFFFFFFF
_MASK64 = 0xFFFFFFFFFFFFFFFF
_READ_CHUNK = 8192


def _ror(x: int, n: int) -> int:
    return ((x >> n) | (x << (32 - n))) & _MASK


def transform(state: Sequence[int], block: bytes) -> tuple[int, ...]:
    """Compress one 64-byte block into an 8-word state and return the new state."""
    if len(state) != 8:
        raise ValueError("state must hold exactly 8 words")
    if len(block) != BLOCK_SIZE:
        raise ValueError(f"block must be {BLOCK_SIZE} bytes, got {len(block)}")
    w = list(struct.unpack(">16I", bytes(block)))
    for i in range(16, 64):
        x, y = w[i - 15], w[i - 2]
        s0 = _ror(x, 7) ^ _ror(x, 18) ^ (x >> 3)
        s1 = _ror(y, 17) ^ _ror(y, 19) ^ (y >> 10)
        w.append((w[i - 16] + s0 + w[i - 7] + s1) & _MASK)

    start = tuple(v & _MASK for v in state)
    a, b, c, d, e, f, g, h = start
    for k, word in zip(_K, w):
        big_s1 = _ror(e, 6) ^ _ror(e, 11) ^ _ror(e, 25)
        ch = g ^ (e & (f ^ g))
        t1 = (h + big_s1 + ch + k + word) & _MASK
        big_s0 = _ror(a, 2) ^ _ror(a, 13) ^ _ror(a, 22)
        maj = (a & b) ^ (a & c) ^ (b & c)
        t2 = (big_s0 + maj) & _MASK
        a, b, c, d, e, f, g, h = (t1 + t2) & _MASK, a, b, c, (d + t1) & _MASK, e, f, g
    return tuple((s + v) & _MASK for s, v in zip(start, (a, b, c, d, e, f, g, h)))


def _state_bytes(state: Sequence[int]) -> bytes:
    return struct.pack(">8I", *state)


def _padding(length: int) -> bytes:
    return (
        b"\x80"
        + bytes((119 - length % 64) % 64)
        + struct.pack(">Q", (length << 3) & _MASK64)
    )


class Sha256:
    """Incremental SHA-256 hasher."""

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
        """Return the 32-byte digest of everything fed so far."""
        tail = self._buffer + _padding(self._length)
        state = self._state
        for offset in range(0, len(tail), BLOCK_SIZE):
            state = transform(state, tail[offset:offset + BLOCK_SIZE])
        return _state_bytes(state)

    def hexdigest(self) -> str:
        """Return the digest as lowercase hex."""
        return self.digest().hex()

    def copy(self) -> "Sha256":
        """Return an independent copy of this hasher."""
        clone = Sha256()
        clone._state = self._state
        clone._buffer = self._buffer
        clone._length = self._length
        return clone


def sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of data."""
    return Sha256(data).digest()


def sha256_33(data: bytes) -> bytes:
    """Hash exactly 33 bytes (a compressed public key) in a single block."""
    if len(data) != 33:
        raise ValueError(f"input must be 33 bytes, got {len(data)}")
    block = bytes(data) + _padding(33)
    return _state_bytes(transform(INITIAL_STATE, block))


def sha256_65(data: bytes) -> bytes:
    """Hash exactly 65 bytes (an uncompressed public key) in two blocks."""
    if len(data) != 65:
        raise ValueError(f"input must be 65 bytes, got {len(data)}")
    message = bytes(data) + _padding(65)
    state = transform(INITIAL_STATE, message[:BLOCK_SIZE])
    state = transform(state, message[BLOCK_SIZE:])
    return _state_bytes(state)


def sha256_checksum(data: bytes) -> bytes:
    """Return the first 4 bytes of SHA-256(SHA-256(data)) for data of at most 55 bytes."""
    if len(data) > 55:
        raise ValueError(f"input must be at most 55 bytes, got {len(data)}")
    first = _state_bytes(transform(INITIAL_STATE, bytes(data) + _padding(len(data))))
    second = transform(INITIAL_STATE, first + _padding(DIGEST_SIZE))
    return struct.pack(">I", second[0])


def sha256_hex(digest: bytes) -> str:
    """Format a 32-byte digest as lowercase hex."""
    if len(digest) < DIGEST_SIZE:
        raise ValueError(f"digest must be at least {DIGEST_SIZE} bytes")
    return bytes(digest[:DIGEST_SIZE]).hex()


def sha256_file(path: Union[str, "os.PathLike[str]"]) -> bytes:
    """Return the SHA-256 digest of a file's contents.

    Raises OSError if the file cannot be opened or read.
    """
    hasher = Sha256()
    with open(path, "rb") as handle:
        for chunk in iter(lambda: handle.read(_READ_CHUNK), b""):
            hasher.update(chunk)
    return hasher.digest()