"""SHA-256 hashing with no outside dependencies, and a command to hash files."""

__version__ = "0.1.0"