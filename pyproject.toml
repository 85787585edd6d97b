[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "digestkit"
version = "0.1.0"
description = "Pure-Python SHA-256, SHA-512, RIPEMD-160, HMAC-SHA-512 and PBKDF2-HMAC-SHA-512 with fixed-size and four-way batch helpers"
requires-python = ">=3.10"
dependencies = []
keywords = ["sha256", "sha512", "ripemd160", "hmac", "pbkdf2", "hash", "digest"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["digestkit"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
