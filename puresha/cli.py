"""Command line tool printing the SHA-256 digest of each named file."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from puresha.sha256 import get_hash

NOT_FOUND = "file not found!"


def file_digest(path: str) -> str:
    """Return the hex digest of the file at ``path``, or a not-found notice."""
    try:
        with open(path, "rb") as stream:
            return get_hash(stream)
    except OSError:
        return NOT_FOUND


def main(argv: Sequence[str] | None = None) -> int:
    """Print ``name: digest`` for every file given on the command line."""
    names = list(sys.argv[1:] if argv is None else argv)
    if not names:
        print("Atleast one file is required", file=sys.stderr)
        return 1
    for name in names:
        print(f"{name}: {file_digest(name)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())