import hashlib

import pytest

from digestkit.hashing import rmd160, rmd160_4, sha256, sha256_4, sha256_file
from digestkit.ripemd160 import ripemd160


@pytest.mark.parametrize("size", [0, 1, 33, 55, 56, 64, 65, 200])
def test_sha256_matches_reference(size):
    data = bytes((i * 5 + 1) & 0xFF for i in range(size))
    assert sha256(data) == hashlib.sha256(data).digest()


def test_rmd160_known_vector():
    assert rmd160(b"abc").hex() == "8eb208f7e05d987a9b044a8e98c6b087f15a0bfc"


@pytest.mark.parametrize("size", [0, 1, 32, 55, 56, 63, 64, 65, 130])
def test_rmd160_agrees_with_ripemd160(size):
    data = bytes((i * 13) & 0xFF for i in range(size))
    assert rmd160(data) == ripemd160(data)
    assert len(rmd160(data)) == 20


def test_sha256_4_returns_digests_in_order():
    inputs = [bytes([n]) * 40 for n in range(4)]
    results = sha256_4(*inputs)
    assert list(results) == [hashlib.sha256(data).digest() for data in inputs]


def test_rmd160_4_returns_digests_in_order():
    inputs = [bytes([n + 10]) * 33 for n in range(4)]
    results = rmd160_4(*inputs)
    assert list(results) == [rmd160(data) for data in inputs]


def test_sha256_4_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        sha256_4(b"aa", b"bb", b"c", b"dd")


def test_rmd160_4_rejects_mismatched_lengths():
    with pytest.raises(ValueError):
        rmd160_4(b"aa", b"bb", b"cc", b"ddd")


def test_sha256_file_matches_contents(tmp_path):
    content = bytes(i & 0xFF for i in range(20000))
    target = tmp_path / "data.bin"
    target.write_bytes(content)
    assert sha256_file(target) == hashlib.sha256(content).digest()
    assert sha256_file(str(target)) == sha256(content)


def test_sha256_file_empty(tmp_path):
    target = tmp_path / "empty.bin"
    target.write_bytes(b"")
    assert sha256_file(target) == sha256(b"")


def test_sha256_file_missing_raises(tmp_path):
    with pytest.raises(OSError):
        sha256_file(tmp_path / "missing.bin")