"""Pure-Python SHA-256, SHA-512 and RIPEMD-160 digests, HMAC-SHA-512, PBKDF2 and four-way helpers."""

__version__ = "0.1.0"

__all__ = [
    "hashing",
    "ripemd160",
    "ripemd160_batch",
    "rmd160",
    "sha256",
    "sha256_batch",
    "sha512",
]