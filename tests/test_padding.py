import hashlib
import unittest

from md5digest.padding import (
    bytes_to_words_le,
    length_words,
    message_words,
    padded_bytes,
    to_words,
    utf8_bytes,
    words_to_bytes_le,
)


def reference_padding(data: bytes) -> bytes:
    # RFC 1321 section 3.1/3.2 in byte form
    k = (56 - (len(data) + 1) % 64) % 64
    return data + b"\x80" + b"\x00" * k + ((len(data) * 8) % (1 << 64)).to_bytes(8, "little")


class TestPadding(unittest.TestCase):
    def test_empty(self) -> None:
        words = to_words(b"")
        self.assertEqual(len(words), 16)
        self.assertEqual(words[0], 0x80)
        self.assertEqual(words[1:], [0] * 15)

    def test_partial_word_pad_bit(self) -> None:
        words = to_words(b"abc")
        self.assertEqual(words[0], 0x80636261)
        self.assertEqual(words[14], 24)
        self.assertEqual(words[15], 0)

    def test_pad_bit_starts_new_word(self) -> None:
        words = to_words(b"abcd")
        self.assertEqual(words[0], 0x64636261)
        self.assertEqual(words[1], 0x80)

    def test_block_counts(self) -> None:
        for n, blocks in ((0, 1), (55, 1), (56, 2), (63, 2), (64, 2), (119, 2), (120, 3)):
            words = to_words(b"q" * n)
            self.assertEqual(len(words), 16 * blocks, n)
            self.assertEqual(words[-2], n * 8)
            self.assertEqual(words[-1], 0)

    def test_length_words_high_word(self) -> None:
        self.assertEqual(length_words(0), (0, 0))
        self.assertEqual(length_words(2**29 - 1), (0xFFFFFFF8, 0))
        self.assertEqual(length_words(2**29), (0, 1))
        self.assertEqual(length_words(2**29 + 1), (8, 1))
        self.assertEqual(length_words(2**61), (0, 0))
        self.assertEqual(length_words(2**61 + 3), (24, 0))

    def test_matches_reference_bytes(self) -> None:
        for n in range(0, 200, 7):
            data = bytes((i * 31) & 0xFF for i in range(n))
            self.assertEqual(padded_bytes(data), reference_padding(data))

    def test_word_byte_roundtrip(self) -> None:
        data = reference_padding(b"hello")
        self.assertEqual(words_to_bytes_le(bytes_to_words_le(data)), data)

    def test_utf8_bytes(self) -> None:
        self.assertEqual(utf8_bytes("密码"), b"\xe5\xaf\x86\xe7\xa0\x81")
        self.assertEqual(utf8_bytes("😀"), b"\xf0\x9f\x98\x80")
        self.assertEqual(len(message_words("密码")), 16)
        self.assertEqual(message_words("密码")[14], 48)

    def test_utf8_bytes_rejects_non_str(self) -> None:
        with self.assertRaises(TypeError):
            utf8_bytes(None)  # type: ignore[arg-type]

    def test_second_block_forced_by_trailer(self) -> None:
        from md5digest.core import compress
        from md5digest.md5 import encode_hex

        data = b"z" * 56
        self.assertEqual(encode_hex(compress(to_words(data))), hashlib.md5(data).hexdigest())


if __name__ == "__main__":
    unittest.main()
