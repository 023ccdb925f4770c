from __future__ import annotations

from typing import List, Sequence, Tuple

MASK32 = 0xFFFFFFFF

IHV = Tuple[int, int, int, int]


def u32(x: int) -> int:
    return x & MASK32


def add32(*xs: int) -> int:
    s = 0
    for v in xs:
        s = (s + (v & MASK32)) & MASK32
    return s


def rl(x: int, s: int) -> int:
    x &= MASK32
    return ((x << s) | (x >> (32 - s))) & MASK32


# MD5 initial value (A, B, C, D)
MD5_IV: IHV = (0x67452301, 0xEFCDAB89, 0x98BADCFE, 0x10325476)

# AC_t = floor(2^32 * abs(sin(t+1))), RFC 1321 T[1..64]
AC: List[int] = [
    0xd76aa478, 0xe8c7b756, 0x242070db, 0xc1bdceee,
    0xf57c0faf, 0x4787c62a, 0xa8304613, 0xfd469501,
    0x698098d8, 0x8b44f7af, 0xffff5bb1, 0x895cd7be,
    0x6b901122, 0xfd987193, 0xa679438e, 0x49b40821,
    0xf61e2562, 0xc040b340, 0x265e5a51, 0xe9b6c7aa,
    0xd62f105d, 0x02441453, 0xd8a1e681, 0xe7d3fbc8,
    0x21e1cde6, 0xc33707d6, 0xf4d50d87, 0x455a14ed,
    0xa9e3e905, 0xfcefa3f8, 0x676f02d9, 0x8d2a4c8a,
    0xfffa3942, 0x8771f681, 0x6d9d6122, 0xfde5380c,
    0xa4beea44, 0x4bdecfa9, 0xf6bb4b60, 0xbebfbc70,
    0x289b7ec6, 0xeaa127fa, 0xd4ef3085, 0x04881d05,
    0xd9d4d039, 0xe6db99e5, 0x1fa27cf8, 0xc4ac5665,
    0xf4292244, 0x432aff97, 0xab9423a7, 0xfc93a039,
    0x655b59c3, 0x8f0ccc92, 0xffeff47d, 0x85845dd1,
    0x6fa87e4f, 0xfe2ce6e0, 0xa3014314, 0x4e0811a1,
    0xf7537e82, 0xbd3af235, 0x2ad7d2bb, 0xeb86d391,
]

# RC_t rotation counts (per step)
RC: List[int] = [
    7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22, 7, 12, 17, 22,
    5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20, 5, 9, 14, 20,
    4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23, 4, 11, 16, 23,
    6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21, 6, 10, 15, 21,
]

# W_t schedule: message word consumed by step t
WT: List[int] = [
    0, 1, 2, 3, 4, 5, 6, 7, 8, 9, 10, 11, 12, 13, 14, 15,
    1, 6, 11, 0, 5, 10, 15, 4, 9, 14, 3, 8, 13, 2, 7, 12,
    5, 8, 11, 14, 1, 4, 7, 10, 13, 0, 3, 6, 9, 12, 15, 2,
    0, 7, 14, 5, 12, 3, 10, 1, 8, 15, 6, 13, 4, 11, 2, 9,
]


def _cmn(q: int, a: int, b: int, x: int, s: int, t: int) -> int:
    return add32(b, rl(add32(a, q, x, t), s))


def FF(a: int, b: int, c: int, d: int, x: int, s: int, t: int) -> int:
    return _cmn((b & c) | (~b & d), a, b, x, s, t)


def GG(a: int, b: int, c: int, d: int, x: int, s: int, t: int) -> int:
    return _cmn((b & d) | (c & ~d), a, b, x, s, t)


def HH(a: int, b: int, c: int, d: int, x: int, s: int, t: int) -> int:
    return _cmn(b ^ c ^ d, a, b, x, s, t)


def II(a: int, b: int, c: int, d: int, x: int, s: int, t: int) -> int:
    return _cmn(c ^ (b | (~d & MASK32)), a, b, x, s, t)


ROUNDS = (FF, GG, HH, II)


def compress_block(ihv: IHV, m: Sequence[int]) -> IHV:
    """
    One MD5 compression pass.
    Inputs:
      - ihv: chaining value (A, B, C, D)
      - m: 16 little-endian 32-bit words
    Returns the chaining value after the block (pre-block snapshot added back).
    """
    if len(m) != 16:
        raise ValueError("m must have 16 words")

    A, B, C, D = (u32(ihv[0]), u32(ihv[1]), u32(ihv[2]), u32(ihv[3]))
    a, b, c, d = A, B, C, D

    for t in range(64):
        step = ROUNDS[t >> 4]
        new_b = step(a, b, c, d, u32(m[WT[t]]), RC[t], AC[t])
        a, b, c, d = d, new_b, b, c

    return (add32(A, a), add32(B, b), add32(C, c), add32(D, d))


def compress(words: Sequence[int], iv: IHV = MD5_IV) -> IHV:
    if len(words) % 16 != 0:
        raise ValueError("word buffer length must be a multiple of 16")
    ihv = (u32(iv[0]), u32(iv[1]), u32(iv[2]), u32(iv[3]))
    for off in range(0, len(words), 16):
        ihv = compress_block(ihv, words[off : off + 16])
    return ihv
