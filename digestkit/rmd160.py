"""RIPEMD-160 with a context object in the classic init/update/final style."""

from __future__ import annotations

import struct

from digestkit.ripemd160 import INITIAL_STATE, transform

RMD160_BLOCKBYTES = 64
RMD160_BLOCKWORDS = 16
RMD160_HASHBYTES = 20
RMD160_HASHWORDS = 5

_MASK32 = 0xFFFFFFFF


class Rmd160Context:
    """Running RIPEMD-160 computation.

    Byte counts are kept as two 32-bit halves, low and high. Once
    :meth:`final` has produced the digest the context is wiped and
    can no longer be used.
    """

    def __init__(self) -> None:
        self._state: tuple[int, ...] | None = INITIAL_STATE
        self._pending = b""
        self.bytes_lo = 0
        self.bytes_hi = 0

    def _live_state(self) -> tuple[int, ...]:
        if self._state is None:
            raise RuntimeError("context has been finalised and wiped")
        return self._state

    def update(self, data: bytes) -> None:
        """Feed more bytes into the hash."""
        state = self._live_state()
        data = bytes(data)
        previous = self.bytes_lo
        self.bytes_lo = (previous + len(data)) & _MASK32
        if self.bytes_lo < previous:
            self.bytes_hi = (self.bytes_hi + 1) & _MASK32

        pending = self._pending + data
        full = len(pending) - len(pending) % RMD160_BLOCKBYTES
        for offset in range(0, full, RMD160_BLOCKBYTES):
            state = transform(state, pending[offset:offset + RMD160_BLOCKBYTES])
        self._state = state
        self._pending = pending[full:]

    def final(self) -> bytes:
        """Pad, compress the last block(s) and return the 20-byte digest.

        The context is wiped afterwards.
        """
        state = self._live_state()
        lo, hi = self.bytes_lo, self.bytes_hi
        block = bytearray(self._pending)
        block.append(0x80)
        if len(block) > 56:
            block.extend(bytes(RMD160_BLOCKBYTES - len(block)))
            state = transform(state, bytes(block))
            block = bytearray()
        block.extend(bytes(56 - len(block)))
        block.extend(
            struct.pack("<2I", (lo << 3) & _MASK32, ((lo >> 29) | (hi << 3)) & _MASK32)
        )
        state = transform(state, bytes(block))
        digest = struct.pack("<5I", *state)

        self._state = None
        self._pending = b""
        self.bytes_lo = 0
        self.bytes_hi = 0
        return digest


def rmd160_data(data: bytes) -> bytes:
    """Return the RIPEMD-160 digest of data in one call."""
    context = Rmd160Context()
    context.update(data)
    return context.final()