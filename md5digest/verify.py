from __future__ import annotations

import hashlib
from typing import Dict, List, Optional, Tuple

from .md5 import digest_lower

HEX_LOWER = "0123456789abcdef"
HEX_UPPER = "0123456789ABCDEF"

# RFC 1321 appendix A.5 plus the usual pangram
KNOWN_VECTORS: Dict[str, str] = {
    "": "d41d8cd98f00b204e9800998ecf8427e",
    "a": "0cc175b9c0f1b6a831c399e269772661",
    "abc": "900150983cd24fb0d6963f7d28e17f72",
    "message digest": "f96b697d7cb7938d525a2f31aaf161d0",
    "abcdefghijklmnopqrstuvwxyz": "c3fcd3d76192e4007dfb496cca67e13b",
    "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789": "d174ab98d277d9f5a5611c2c9f419d9f",
    "1234567890" * 8: "57edf4a22be3c955ac49da2e2107b67a",
    "The quick brown fox jumps over the lazy dog": "9e107d9d372bb6826bd81d3542a419d6",
}


def is_md5_hex(value: str, case: Optional[str] = None) -> bool:
    if case not in (None, "lower", "upper"):
        raise ValueError("case must be 'lower', 'upper' or None")
    if not isinstance(value, str) or len(value) != 32:
        return False
    if case == "lower":
        alphabet = HEX_LOWER
    elif case == "upper":
        alphabet = HEX_UPPER
    else:
        alphabet = HEX_LOWER + HEX_UPPER
    return all(ch in alphabet for ch in value)


def normalize_md5_hex(value: str) -> str:
    """Trim, validate and upper-case a pwd_md5 value.

    Besides the length-32 check the backend binds, every character must be
    a hex digit.
    """
    s = value.strip()
    if not is_md5_hex(s):
        raise ValueError("digest must be 32 hex characters")
    return s.upper()


def check_vectors(vectors: Optional[Dict[str, str]] = None) -> Tuple[bool, List[Tuple[str, str, str]]]:
    """Recompute `vectors` (text -> expected lowercase hex).

    Each text is also checked against hashlib on its UTF-8 bytes.
    Returns (ok, [(text, ours, expected), ...]) with one entry per mismatch.
    """
    if vectors is None:
        vectors = KNOWN_VECTORS
    mismatches: List[Tuple[str, str, str]] = []
    for text, expected in vectors.items():
        ours = digest_lower(text)
        ref = hashlib.md5(text.encode("utf-8")).hexdigest()
        if ours != expected or ours != ref:
            mismatches.append((text, ours, expected))
    return not mismatches, mismatches
