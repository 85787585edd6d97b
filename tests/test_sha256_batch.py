import hashlib
import struct

import pytest

from digestkit.sha256 import sha256, sha256_33, sha256_65, sha256_checksum
from digestkit.sha256_batch import (
    sha256_1block_x4,
    sha256_2block_x4,
    sha256_checksum_x4,
)


def _pad(message: bytes) -> bytes:
    length = len(message)
    zeros = (55 - length) % 64
    return message + b"\x80" + bytes(zeros) + struct.pack(">Q", length * 8)


MESSAGES = (
    b"This is a test message to test 01",
    b"This is a test message to test 02",
    b"This is a test message to test 03",
    b"This is a test message to test 04",
)


def test_one_block_matches_single_hash():
    padded = [_pad(m) for m in MESSAGES]
    got = sha256_1block_x4(*padded)
    assert list(got) == [sha256(m) for m in MESSAGES]


def test_one_block_matches_sha256_33():
    got = sha256_1block_x4(*(_pad(m) for m in MESSAGES))
    assert list(got) == [sha256_33(m) for m in MESSAGES]


def test_one_block_known_value():
    padded = _pad(b"abc")
    d0, d1, d2, d3 = sha256_1block_x4(padded, padded, padded, padded)
    expected = bytes.fromhex(
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )
    assert d0 == d1 == d2 == d3 == expected


def test_one_block_preserves_order():
    messages = [bytes([n]) * 10 for n in range(4)]
    got = sha256_1block_x4(*(_pad(m) for m in messages))
    assert list(got) == [hashlib.sha256(m).digest() for m in messages]


def test_two_blocks_match_sha256_65():
    keys = [bytes([0x04]) + bytes([n]) * 64 for n in range(1, 5)]
    padded = [_pad(k) for k in keys]
    assert all(len(p) == 128 for p in padded)
    got = sha256_2block_x4(*padded)
    assert list(got) == [sha256_65(k) for k in keys]


def test_two_blocks_match_hashlib():
    messages = [b"x" * n for n in (56, 64, 100, 119)]
    got = sha256_2block_x4(*(_pad(m) for m in messages))
    assert list(got) == [hashlib.sha256(m).digest() for m in messages]


def test_checksum_matches_single_checksum():
    payloads = [bytes([0x80]) + bytes([n]) * 32 + b"\x01" for n in range(4)]
    got = sha256_checksum_x4(*(_pad(p) for p in payloads))
    assert list(got) == [sha256_checksum(p) for p in payloads]


def test_checksum_is_prefix_of_double_hash():
    got = sha256_checksum_x4(*(_pad(m) for m in MESSAGES))
    for message, checksum in zip(MESSAGES, got):
        double = hashlib.sha256(hashlib.sha256(message).digest()).digest()
        assert checksum == double[:4]


@pytest.mark.parametrize("size", [0, 63, 65, 128])
def test_one_block_rejects_wrong_size(size):
    good = _pad(b"abc")
    with pytest.raises(ValueError):
        sha256_1block_x4(good, good, bytes(size), good)


@pytest.mark.parametrize("size", [64, 127, 129])
def test_two_blocks_rejects_wrong_size(size):
    good = _pad(b"y" * 65)
    with pytest.raises(ValueError):
        sha256_2block_x4(bytes(size), good, good, good)


def test_checksum_rejects_wrong_size():
    good = _pad(b"abc")
    with pytest.raises(ValueError):
        sha256_checksum_x4(good, good, good, bytes(128))