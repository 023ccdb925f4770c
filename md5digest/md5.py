from __future__ import annotations

from .core import IHV, MD5_IV, compress, u32
from .padding import message_words, to_words


def encode_hex(ihv: IHV) -> str:
    # digest is little-endian of ihv words in order (A, B, C, D)
    parts = []
    for w in ihv:
        for b in range(4):
            parts.append(f"{(w >> (8 * b)) & 0xFF:02x}")
    return "".join(parts)


def md5_bytes(data: bytes, iv: IHV = MD5_IV) -> bytes:
    ihv = compress(to_words(data), iv)
    return (
        u32(ihv[0]).to_bytes(4, "little")
        + u32(ihv[1]).to_bytes(4, "little")
        + u32(ihv[2]).to_bytes(4, "little")
        + u32(ihv[3]).to_bytes(4, "little")
    )


def md5_hex(data: bytes, iv: IHV = MD5_IV) -> str:
    return md5_bytes(data, iv).hex()


def digest_lower(text: str) -> str:
    """MD5 of the UTF-8 bytes of `text` as 32 lowercase hex characters."""
    return encode_hex(compress(message_words(text)))


def digest_upper(text: str) -> str:
    return digest_lower(text).upper()


def credential_digest(password: str) -> str:
    """Password digest in the form the login and bind requests carry it (pwd_md5)."""
    return digest_upper(password)
