"""One-call hashing helpers over the package's SHA-256 and RIPEMD-160."""

from __future__ import annotations

import os
from typing import Union

from digestkit import rmd160 as _rmd160
from digestkit import sha256 as _sha256


def sha256(data: bytes) -> bytes:
    """Return the SHA-256 digest of data."""
    return _sha256.sha256(data)


def rmd160(data: bytes) -> bytes:
    """Return the RIPEMD-160 digest of data."""
    return _rmd160.rmd160_data(data)


def _same_length(buffers: tuple[bytes, ...]) -> list[bytes]:
    prepared = [bytes(buffer) for buffer in buffers]
    length = len(prepared[0])
    for position, buffer in enumerate(prepared):
        if len(buffer) != length:
            raise ValueError(
                f"all inputs must have the same length; input {position} has "
                f"{len(buffer)} bytes, expected {length}"
            )
    return prepared


def sha256_4(
    data0: bytes, data1: bytes, data2: bytes, data3: bytes
) -> tuple[bytes, bytes, bytes, bytes]:
    """Return the SHA-256 digests of four equally long inputs, in order."""
    d0, d1, d2, d3 = (sha256(data) for data in _same_length((data0, data1, data2, data3)))
    return d0, d1, d2, d3


def rmd160_4(
    data0: bytes, data1: bytes, data2: bytes, data3: bytes
) -> tuple[bytes, bytes, bytes, bytes]:
    """Return the RIPEMD-160 digests of four equally long inputs, in order."""
    d0, d1, d2, d3 = (rmd160(data) for data in _same_length((data0, data1, data2, data3)))
    return d0, d1, d2, d3


def sha256_file(path: Union[str, "os.PathLike[str]"]) -> bytes:
    """Return the SHA-256 digest of a file's contents.

    Raises OSError if the file cannot be opened or read.
    """
    return _sha256.sha256_file(path)