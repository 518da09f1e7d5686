"""SHA-256 message digest computed in pure Python."""

from __future__ import annotations

import io
from collections.abc import Iterable, Iterator, Sequence
from typing import BinaryIO

MASK = 0xFFFFFFFF
BLOCK_SIZE = 64
_LENGTH_OFFSET = BLOCK_SIZE - 8
_LENGTH_MASK = 0xFFFFFFFFFFFFFFFF

INITIAL_HASH: tuple[int, ...] = (
    0x6A09E667, 0xBB67AE85, 0x3C6EF372, 0xA54FF53A,
    0x510E527F, 0x9B05688C, 0x1F83D9AB, 0x5BE0CD19,
)

K: tuple[int, ...] = (
    0x428A2F98, 0x71374491, 0xB5C0FBCF, 0xE9B5DBA5, 0x3956C25B, 0x59F111F1,
    0x923F82A4, 0xAB1C5ED5, 0xD807AA98, 0x12835B01, 0x243185BE, 0x550C7DC3,
    0x72BE5D74, 0x80DEB1FE, 0x9BDC06A7, 0xC19BF174, 0xE49B69C1, 0xEFBE4786,
    0x0FC19DC6, 0x240CA1CC, 0x2DE92C6F, 0x4A7484AA, 0x5CB0A9DC, 0x76F988DA,
    0x983E5152, 0xA831C66D, 0xB00327C8, 0xBF597FC7, 0xC6E00BF3, 0xD5A79147,
    0x06CA6351, 0x14292967, 0x27B70A85, 0x2E1B2138, 0x4D2C6DFC, 0x53380D13,
    0x650A7354, 0x766A0ABB, 0x81C2C92E, 0x92722C85, 0xA2BFE8A1, 0xA81A664B,
    0xC24B8B70, 0xC76C51A3, 0xD192E819, 0xD6990624, 0xF40E3585, 0x106AA070,
    0x19A4C116, 0x1E376C08, 0x2748774C, 0x34B0BCB5, 0x391C0CB3, 0x4ED8AA4A,
    0x5B9CCA4F, 0x682E6FF3, 0x748F82EE, 0x78A5636F, 0x84C87814, 0x8CC70208,
    0x90BEFFFA, 0xA4506CEB, 0xBEF9A3F7, 0xC67178F2,
)


def rotate_right(value: int, count: int) -> int:
    """Rotate a 32-bit word right by ``count`` bits."""
    count %= 32
    return ((value >> count) | (value << (32 - count))) & MASK


def schedule_sigma0(value: int) -> int:
    """The small sigma-0 function used when expanding the message schedule."""
    return rotate_right(value, 7) ^ rotate_right(value, 18) ^ (value >> 3)


def schedule_sigma1(value: int) -> int:
    """The small sigma-1 function used when expanding the message schedule."""
    return rotate_right(value, 17) ^ rotate_right(value, 19) ^ (value >> 10)


def hashing_sigma0(value: int) -> int:
    """The big sigma-0 function used in the compression rounds."""
    return rotate_right(value, 2) ^ rotate_right(value, 13) ^ rotate_right(value, 22)


def hashing_sigma1(value: int) -> int:
    """The big sigma-1 function used in the compression rounds."""
    return rotate_right(value, 6) ^ rotate_right(value, 11) ^ rotate_right(value, 25)


def choose(x: int, y: int, z: int) -> int:
    """Pick bits from ``y`` where ``x`` is set and from ``z`` elsewhere."""
    return ((x & y) ^ (~x & z)) & MASK


def majority(x: int, y: int, z: int) -> int:
    """Bitwise majority vote of three words."""
    return (x & y) ^ (x & z) ^ (y & z)


def group_bytes(chunk: bytes) -> int:
    """Combine four bytes, most significant first, into one 32-bit word."""
    if len(chunk) != 4:
        raise ValueError(f"expected 4 bytes, got {len(chunk)}")
    return int.from_bytes(chunk, "big")


def _to_words(block: bytes) -> tuple[int, ...]:
    return tuple(group_bytes(block[pos:pos + 4]) for pos in range(0, BLOCK_SIZE, 4))


def _read_block(stream: BinaryIO) -> bytes:
    """Read up to one block, retrying short reads until the stream ends."""
    buffer = bytearray()
    while len(buffer) < BLOCK_SIZE:
        piece = stream.read(BLOCK_SIZE - len(buffer))
        if not piece:
            break
        if not isinstance(piece, (bytes, bytearray, memoryview)):
            raise TypeError("stream must be opened in binary mode")
        buffer.extend(piece)
    return bytes(buffer)


def iter_blocks(stream: BinaryIO) -> Iterator[tuple[int, ...]]:
    """Yield the padded message from ``stream`` as blocks of sixteen words."""
    total = 0
    marker_written = False
    while True:
        chunk = _read_block(stream)
        total += len(chunk)
        if len(chunk) == BLOCK_SIZE:
            yield _to_words(chunk)
            continue

        final = len(chunk) < _LENGTH_OFFSET
        padded = bytearray(chunk)
        if not marker_written:
            padded.append(0x80)
            marker_written = True

        if final:
            padded.extend(bytes(_LENGTH_OFFSET - len(padded)))
            padded.extend(((total * 8) & _LENGTH_MASK).to_bytes(8, "big"))
            yield _to_words(bytes(padded))
            return

        padded.extend(bytes(BLOCK_SIZE - len(padded)))
        yield _to_words(bytes(padded))


def message_schedule(block: Sequence[int]) -> list[int]:
    """Expand a sixteen-word block into the 64-word message schedule."""
    if len(block) != 16:
        raise ValueError(f"expected 16 words, got {len(block)}")
    schedule = list(block)
    for pos in range(16, 64):
        schedule.append(
            (
                schedule_sigma1(schedule[pos - 2])
                + schedule[pos - 7]
                + schedule_sigma0(schedule[pos - 15])
                + schedule[pos - 16]
            )
            & MASK
        )
    return schedule


def compress(state: Sequence[int], block: Sequence[int]) -> tuple[int, ...]:
    """Process one block and return the updated eight-word hash state."""
    if len(state) != 8:
        raise ValueError(f"expected 8 state words, got {len(state)}")
    schedule = message_schedule(block)
    a, b, c, d, e, f, g, h = state
    for k, w in zip(K, schedule):
        t1 = (h + hashing_sigma1(e) + choose(e, f, g) + k + w) & MASK
        t2 = (hashing_sigma0(a) + majority(a, b, c)) & MASK
        h, g, f, e = g, f, e, (d + t1) & MASK
        d, c, b, a = c, b, a, (t1 + t2) & MASK
    return tuple(
        (old + new) & MASK for old, new in zip(state, (a, b, c, d, e, f, g, h))
    )


def to_hex(state: Iterable[int]) -> str:
    """Render the hash state as a lowercase hexadecimal digest."""
    return "".join(f"{word:08x}" for word in state)


def get_hash(stream: BinaryIO) -> str:
    """Return the SHA-256 hex digest of everything readable from ``stream``."""
    state: tuple[int, ...] = INITIAL_HASH
    for block in iter_blocks(stream):
        state = compress(state, block)
    return to_hex(state)


def hash_bytes(data: bytes) -> str:
    """Return the SHA-256 hex digest of ``data``."""
    return get_hash(io.BytesIO(bytes(data)))