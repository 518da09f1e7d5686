# puresha

A SHA-256 implementation with no dependencies beyond the standard library. It
comes with a small command that prints the SHA-256 digest of files.

## Installation

```
pip install .
```

## Command line

```
puresha FILE [FILE ...]
```

The same command can also be run as `python -m puresha.cli FILE [FILE ...]`.

It writes one line for each file, in the form `name: digest`:

```
$ puresha notes.txt missing.txt
notes.txt: 9f86d081884c7d659a2feaa0c55ad015a3bf4f1b2b0b822cd15d6c15b0f00a08
missing.txt: file not found!
```

A file that cannot be opened or read (missing, a directory, no permission)
gets `file not found!` in place of a digest, and the command goes on to the
next file; the exit status is still 0. If no file is given, the command prints
`Atleast one file is required` to standard error and exits with status 1.

## Library

```python
from puresha.sha256 import hash_bytes, get_hash

hash_bytes(b"abc")
# 'ba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad'

with open("notes.txt", "rb") as stream:
    digest = get_hash(stream)
```

`get_hash` reads a binary stream 64 bytes at a time, so large files never have
to fit in memory; a stream that returns text instead of bytes raises
`TypeError`. `hash_bytes` does the same for a bytes-like object. Both return
the digest as a 64-character lowercase hex string.

The steps of the algorithm are public as well, so each one can be used or
checked by itself:

- `iter_blocks(stream)` yields the padded 64-byte blocks of a stream, each as
  a tuple of sixteen 32-bit words.
- `message_schedule(block)` expands a sixteen-word block into its 64-word
  schedule.
- `compress(state, block)` applies one block to the eight-word hash state and
  returns the new state as a tuple.
- `to_hex(state)` formats a state as a lowercase hex digest.
- `rotate_right`, `schedule_sigma0`, `schedule_sigma1`, `hashing_sigma0`,
  `hashing_sigma1`, `choose`, `majority` and `group_bytes` are the 32-bit word
  functions the steps above are built from.

`group_bytes`, `message_schedule` and `compress` raise `ValueError` when given
input of the wrong length (4 bytes, 16 words and 8 state words respectively).
The module also exposes the constants `INITIAL_HASH` and `K`.

`puresha.cli.file_digest(path)` returns the text the command prints for one
file, and `puresha.cli.main(argv)` runs the command on a list of names.

## Running the tests

```
pip install ".[test]"
pytest
```