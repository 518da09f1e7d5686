[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "puresha"
version = "0.1.0"
description = "A self-contained SHA-256 implementation with a command to hash files"
requires-python = ">=3.10"
dependencies = []
keywords = ["sha256", "hash", "digest", "checksum", "cryptography"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Security :: Cryptography",
    "Topic :: Utilities",
]

[project.optional-dependencies]
test = ["pytest", "hypothesis"]

[project.scripts]
puresha = "puresha.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["puresha"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
