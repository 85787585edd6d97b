import hashlib
import struct

import pytest

from digestkit.sha256 import (
    INITIAL_STATE,
    Sha256,
    sha256,
    sha256_33,
    sha256_65,
    sha256_checksum,
    sha256_file,
    sha256_hex,
    transform,
)


@pytest.mark.parametrize(
    "data",
    [b"", b"abc", b"a" * 55, b"a" * 56, b"a" * 63, b"a" * 64, b"a" * 65, bytes(range(256)) * 3],
)
def test_sha256_matches_reference(data):
    assert sha256(data) == hashlib.sha256(data).digest()


def test_sha256_known_vector():
    assert sha256_hex(sha256(b"abc")) == (
        "ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"
    )


def test_incremental_equals_one_shot():
    data = bytes(range(200))
    hasher = Sha256()
    for start in range(0, len(data), 7):
        hasher.update(data[start:start + 7])
    assert hasher.digest() == sha256(data)


def test_digest_does_not_consume_state():
    hasher = Sha256(b"hello ")
    first = hasher.digest()
    assert hasher.digest() == first
    hasher.update(b"world")
    assert hasher.digest() == hashlib.sha256(b"hello world").digest()


def test_copy_is_independent():
    hasher = Sha256(b"prefix")
    clone = hasher.copy()
    clone.update(b"-more")
    assert hasher.digest() == hashlib.sha256(b"prefix").digest()
    assert clone.digest() == hashlib.sha256(b"prefix-more").digest()


def test_transform_single_padded_block():
    block = b"abc" + b"\x80" + bytes(52) + struct.pack(">Q", 24)
    state = transform(INITIAL_STATE, block)
    assert struct.pack(">8I", *state) == hashlib.sha256(b"abc").digest()


def test_transform_rejects_bad_sizes():
    with pytest.raises(ValueError):
        transform(INITIAL_STATE, bytes(63))
    with pytest.raises(ValueError):
        transform(INITIAL_STATE[:7], bytes(64))


def test_sha256_33_matches_generic():
    data = b"\x02" + bytes(range(32))
    assert sha256_33(data) == sha256(data)


def test_sha256_65_matches_generic():
    data = b"\x04" + bytes(range(64))
    assert sha256_65(data) == hashlib.sha256(data).digest()


def test_fixed_size_helpers_reject_wrong_length():
    with pytest.raises(ValueError):
        sha256_33(bytes(32))
    with pytest.raises(ValueError):
        sha256_65(bytes(64))


@pytest.mark.parametrize("length", [0, 1, 21, 25, 55])
def test_checksum_is_double_sha_prefix(length):
    data = bytes(range(length))
    expected = hashlib.sha256(hashlib.sha256(data).digest()).digest()[:4]
    assert sha256_checksum(data) == expected


def test_checksum_rejects_long_input():
    with pytest.raises(ValueError):
        sha256_checksum(bytes(56))


def test_hex_format():
    digest = bytes(range(32))
    text = sha256_hex(digest)
    assert len(text) == 64
    assert bytes.fromhex(text) == digest


def test_hex_rejects_short_digest():
    with pytest.raises(ValueError):
        sha256_hex(bytes(31))


def test_sha256_file(tmp_path):
    content = bytes(range(256)) * 100
    path = tmp_path / "data.bin"
    path.write_bytes(content)
    assert sha256_file(path) == hashlib.sha256(content).digest()


def test_sha256_file_missing(tmp_path):
    with pytest.raises(OSError):
        sha256_file(tmp_path / "missing.bin")