"""SHA-256 over four pre-padded messages at once.

Every input is a message that has already been padded the SHA-256 way: the
0x80 marker, zero fill and the 64-bit big-endian bit length are in place. The
functions run the compression function over those blocks and return one
result per input, in the order of the inputs.
"""

from __future__ import annotations

import struct
from typing import Sequence

from digestkit.sha256 import BLOCK_SIZE, DIGEST_SIZE, INITIAL_STATE, transform

# Padding for a second pass over a 32-byte digest: the marker bit, zero fill
# and a bit length of 0x100.
_DIGEST_TAIL = b"\x80" + bytes(BLOCK_SIZE - DIGEST_SIZE - 1 - 8) + struct.pack(">Q", DIGEST_SIZE << 3)


def _blocks(buffers: Sequence[bytes], count: int) -> list[bytes]:
    size = count * BLOCK_SIZE
    prepared = []
    for position, buffer in enumerate(buffers):
        data = bytes(buffer)
        if len(data) != size:
            raise ValueError(f"input {position} must be {size} bytes, got {len(data)}")
        prepared.append(data)
    return prepared


def _run(block: bytes) -> tuple[int, ...]:
    state = INITIAL_STATE
    for offset in range(0, len(block), BLOCK_SIZE):
        state = transform(state, block[offset:offset + BLOCK_SIZE])
    return state


def _four(results: list[bytes]) -> tuple[bytes, bytes, bytes, bytes]:
    d0, d1, d2, d3 = results
    return d0, d1, d2, d3


def sha256_1block_x4(
    i0: bytes, i1: bytes, i2: bytes, i3: bytes
) -> tuple[bytes, bytes, bytes, bytes]:
    """Return the 32-byte digests of four single-block (64-byte) padded messages."""
    blocks = _blocks((i0, i1, i2, i3), 1)
    return _four([struct.pack(">8I", *_run(block)) for block in blocks])


def sha256_2block_x4(
    i0: bytes, i1: bytes, i2: bytes, i3: bytes
) -> tuple[bytes, bytes, bytes, bytes]:
    """Return the 32-byte digests of four two-block (128-byte) padded messages."""
    blocks = _blocks((i0, i1, i2, i3), 2)
    return _four([struct.pack(">8I", *_run(block)) for block in blocks])


def sha256_checksum_x4(
    i0: bytes, i1: bytes, i2: bytes, i3: bytes
) -> tuple[bytes, bytes, bytes, bytes]:
    """Return the first 4 bytes of SHA-256(SHA-256(m)) for four single-block padded messages."""
    blocks = _blocks((i0, i1, i2, i3), 1)
    results = []
    for block in blocks:
        first = struct.pack(">8I", *_run(block))
        second = transform(INITIAL_STATE, first + _DIGEST_TAIL)
        results.append(struct.pack(">I", second[0]))
    return _four(results)