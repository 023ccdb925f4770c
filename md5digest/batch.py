"""
Lane-parallel MD5 over many short messages using numpy uint32 arrays.

Messages that pad to the same number of blocks are stacked into one
(n, blocks * 16) word matrix and run through the 64-step table together,
one lane per message. Results are identical to md5.digest_lower.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

import numpy as np

from .core import AC, MD5_IV, RC, WT
from .padding import padded_bytes, utf8_bytes

_MD5_AC = np.array(AC, dtype=np.uint32)


def compress_lanes(m: np.ndarray) -> np.ndarray:
    """Run every row of the uint32 word matrix `m` through MD5.

    Returns an (n, 4) uint32 array of final (A, B, C, D) registers.
    """
    if m.ndim != 2 or m.shape[1] % 16 != 0:
        raise ValueError("word matrix must have shape (n, 16 * blocks)")
    n = m.shape[0]
    a = np.full(n, MD5_IV[0], dtype=np.uint32)
    b = np.full(n, MD5_IV[1], dtype=np.uint32)
    c = np.full(n, MD5_IV[2], dtype=np.uint32)
    d = np.full(n, MD5_IV[3], dtype=np.uint32)

    for off in range(0, m.shape[1], 16):
        A, B, C, D = a, b, c, d
        for t in range(64):
            if t < 16:
                f = (b & c) | (~b & d)
            elif t < 32:
                f = (b & d) | (c & ~d)
            elif t < 48:
                f = b ^ c ^ d
            else:
                f = c ^ (b | ~d)
            tmp = a + f + _MD5_AC[t] + m[:, off + WT[t]]
            s = RC[t]
            new_b = b + ((tmp << s) | (tmp >> (32 - s)))
            a, b, c, d = d, new_b, b, c
        a = a + A
        b = b + B
        c = c + C
        d = d + D

    return np.stack([a, b, c, d], axis=1)


def digest_many(texts: Iterable[str], upper: bool = False) -> List[str]:
    """Hex digests of `texts`, in the same order as the input."""
    msgs = [padded_bytes(utf8_bytes(t)) for t in texts]
    out = [""] * len(msgs)

    groups: Dict[int, List[int]] = {}
    for i, msg in enumerate(msgs):
        groups.setdefault(len(msg) // 64, []).append(i)

    for blocks, idx in groups.items():
        buf = b"".join(msgs[i] for i in idx)
        m = np.frombuffer(buf, dtype="<u4").reshape(len(idx), blocks * 16).astype(np.uint32)
        raw = compress_lanes(m).astype("<u4").tobytes()
        for k, i in enumerate(idx):
            h = raw[16 * k : 16 * k + 16].hex()
            out[i] = h.upper() if upper else h
    return out
