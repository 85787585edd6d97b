"""RIPEMD-160 of four 32-byte messages at once."""

from __future__ import annotations

import struct

from digestkit.ripemd160 import INITIAL_STATE, ripemd160_32, ripemd160_hex, transform

_MESSAGE_SIZE = 32
_TAIL = b"\x80" + bytes(23) + struct.pack("<Q", _MESSAGE_SIZE << 3)

_SELF_TEST_MESSAGES = (
    b"This is a test message to test01",
    b"This is a test message to test02",
    b"This is a test message to test03",
    b"This is a test message to test04",
)


def _padded_block(buffer: bytes) -> bytes:
    data = bytes(buffer)
    if len(data) < _MESSAGE_SIZE:
        raise ValueError(f"input must hold at least {_MESSAGE_SIZE} bytes, got {len(data)}")
    return data[:_MESSAGE_SIZE] + _TAIL


def ripemd160_32x4(
    i0: bytes, i1: bytes, i2: bytes, i3: bytes
) -> tuple[bytes, bytes, bytes, bytes]:
    """Hash the first 32 bytes of each of four buffers.

    Each buffer must hold at least 32 bytes; anything past the first 32 is
    ignored, since that room is taken by the padding and length. The digests
    come back in the order of the inputs.
    """
    blocks = [_padded_block(buffer) for buffer in (i0, i1, i2, i3)]
    d0, d1, d2, d3 = (
        struct.pack("<5I", *transform(INITIAL_STATE, block)) for block in blocks
    )
    return d0, d1, d2, d3


def self_test() -> bool:
    """Check the four-way hash against the single one and report on stdout."""
    expected = [ripemd160_32(message) for message in _SELF_TEST_MESSAGES]
    got = ripemd160_32x4(*_SELF_TEST_MESSAGES)
    ok = all(ripemd160_hex(a) == ripemd160_hex(b) for a, b in zip(expected, got))
    if not ok:
        print("RIPEMD160() Results Wrong !")
        for digest in expected:
            print(f"RIP: {ripemd160_hex(digest)}")
        print()
        for digest in got:
            print(f"SSE: {ripemd160_hex(digest)}")
        print()
        return False
    print("RIPE() Results OK !")
    return True