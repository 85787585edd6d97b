# digestkit

Hash functions written in pure Python, with no dependencies.

| Module | What it offers |
| --- | --- |
| `digestkit.sha256` | `Sha256` streaming hasher, `sha256`, `sha256_33`, `sha256_65`, `sha256_checksum`, `sha256_hex`, `sha256_file`, `transform` |
| `digestkit.sha512` | `Sha512` streaming hasher, `sha512`, `hmac_sha512`, `pbkdf2_hmac_sha512`, `sha512_hex` |
| `digestkit.ripemd160` | `Ripemd160` streaming hasher, `ripemd160`, `ripemd160_32`, `ripemd160_hex`, `compare_hashes`, `transform` |
| `digestkit.rmd160` | `Rmd160Context` (init/update/final style RIPEMD-160) and `rmd160_data` |
| `digestkit.ripemd160_batch` | `ripemd160_32x4` and `self_test` |
| `digestkit.sha256_batch` | `sha256_1block_x4`, `sha256_2block_x4`, `sha256_checksum_x4` |
| `digestkit.hashing` | one-call `sha256`, `rmd160`, `sha256_4`, `rmd160_4`, `sha256_file` |

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Usage

```python
from digestkit.sha256 import Sha256, sha256, sha256_hex, sha256_checksum
from digestkit.ripemd160 import ripemd160, ripemd160_hex
from digestkit.sha512 import hmac_sha512, pbkdf2_hmac_sha512

print(sha256_hex(sha256(b"abc")))
# ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad

hasher = Sha256()
hasher.update(b"ab")
hasher.update(b"c")
assert hasher.digest() == sha256(b"abc")

# First 4 bytes of SHA-256(SHA-256(data)); data may be at most 55 bytes
checksum = sha256_checksum(b"\x00" * 21)

# RIPEMD-160 of the SHA-256 of a 33-byte public key
pubkey = bytes.fromhex("02" + "11" * 32)
print(ripemd160_hex(ripemd160(sha256(pubkey))))

key = b"secret"
mac = hmac_sha512(key, b"message")

password = b"password"
derived = pbkdf2_hmac_sha512(password, b"mnemonic", 2048, 64)
```

The streaming classes `Sha256`, `Sha512` and `Ripemd160` have `update`, `digest`,
`hexdigest` and `copy`; `digest` can be called any number of times and does not end
the computation. `Rmd160Context` has `update` and `final`; after `final` the context
is wiped and further use raises `RuntimeError`.

### Fixed-size helpers

- `sha256_33(data)` and `sha256_65(data)` take exactly 33 or 65 bytes and raise
  `ValueError` otherwise.
- `ripemd160_32(data)` takes exactly 32 bytes.
- `sha256_hex`, `sha512_hex` and `ripemd160_hex` format the first 32, 64 or 20 bytes of
  a digest as lowercase hex; `compare_hashes` compares the first 20 bytes of two digests.

### Notes on HMAC and PBKDF2

- `hmac_sha512` cuts a key longer than 128 bytes to its first 128 bytes instead of
  hashing it.
- `pbkdf2_hmac_sha512` replaces a password of 128 bytes or more by its SHA-512 digest,
  treats an iteration count of 0 like 1, and raises `ValueError` for a negative
  iteration count or length.

### Batches of four

```python
from digestkit.hashing import sha256_4, rmd160_4

d0, d1, d2, d3 = sha256_4(b"a", b"b", b"c", b"d")
r0, r1, r2, r3 = rmd160_4(d0, d1, d2, d3)
```

The four inputs must all have the same length, or `ValueError` is raised.

`ripemd160_32x4(i0, i1, i2, i3)` hashes the first 32 bytes of each of four buffers
(each must hold at least 32 bytes). `ripemd160_batch.self_test()` compares it with
`ripemd160_32` on four sample messages, prints the outcome and returns `True` or `False`.

The `sha256_batch` functions take messages that are already padded the SHA-256 way:
`sha256_1block_x4` and `sha256_checksum_x4` want exactly 64 bytes per input,
`sha256_2block_x4` exactly 128.

### Files

```python
from digestkit.sha256 import sha256_file

digest = sha256_file("data.bin")
```

`OSError` is raised if the file cannot be opened or read.

## What the package does not do

- It has no command-line tool; it is a library only.
- It offers no Keccak or SHA-3 digest.
- Everything runs in pure Python, one message at a time: the four-way functions are a
  convenience and are not faster than four single calls.