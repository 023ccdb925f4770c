from __future__ import annotations

from typing import List, Sequence, Tuple

from .core import MASK32, u32

MASK64 = (1 << 64) - 1


def utf8_bytes(text: str) -> bytes:
    """Byte sequence hashed for `text`: its UTF-8 encoding.

    Lone surrogates have no UTF-8 form and raise UnicodeEncodeError.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")
    return text.encode("utf-8")


def length_words(n: int) -> Tuple[int, int]:
    """Bit length of an n-byte message as (low, high) words, modulo 2^64."""
    bit_len = (n * 8) & MASK64
    return bit_len & MASK32, (bit_len >> 32) & MASK32


def to_words(data: bytes) -> List[int]:
    """Pad `data` into MD5 words: 0x80 pad bit, zeros, 64-bit bit length.

    The returned buffer length is always a multiple of 16 and its last two
    words carry the message length in bits, low word first.
    """
    n = len(data)
    words = [0] * ((n + 8) // 64 * 16 + 16)
    for i, byte in enumerate(data):
        words[i >> 2] |= byte << ((i % 4) * 8)
    words[n >> 2] |= 0x80 << ((n % 4) * 8)
    words[-2], words[-1] = length_words(n)
    return words


def message_words(text: str) -> List[int]:
    return to_words(utf8_bytes(text))


def bytes_to_words_le(block: bytes) -> List[int]:
    assert len(block) % 4 == 0
    return [int.from_bytes(block[i : i + 4], "little") for i in range(0, len(block), 4)]


def words_to_bytes_le(words: Sequence[int]) -> bytes:
    return b"".join(u32(w).to_bytes(4, "little") for w in words)


def padded_bytes(data: bytes) -> bytes:
    return words_to_bytes_le(to_words(data))
