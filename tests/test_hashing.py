"""Tests for key serialization and the leaf / internal hash functions."""

import hashlib
import unittest

from append_merkle.hashing import (
    HASH_SIZE,
    MAX_KEY,
    hash_internal,
    hash_key,
    hash_to_hex,
    key_to_bytes,
)

# SHA-256 of the 8-byte big-endian encodings, computed independently
LEAF_0 = "af5570f5a1810b7af78caf4bc70a660f0df51e42baf91d4de5b2328de0e83dfc"
LEAF_5 = "5dee4dd60ff8d0ba9900fe91e90e0dcf65f0570d42c431f727d0300dd70dc431"
LEAF_10 = "8d85f8467240628a94819b26bee26e3a9b2804334c63482deacec8d64ab4e1e7"
LEAF_MAX = "12a3ae445661ce5dee78d0650d33362dec29c4f82af05e7e57fb595bbbacf0ca"


class TestKeyToBytes(unittest.TestCase):

    def test_big_endian_encoding(self):
        test_cases = [
            (0, b"\x00" * 8),
            (1, b"\x00" * 7 + b"\x01"),
            (0x0102030405060708, b"\x01\x02\x03\x04\x05\x06\x07\x08"),
            (MAX_KEY, b"\xff" * 8),
        ]
        for key, expected in test_cases:
            with self.subTest(key=key):
                self.assertEqual(key_to_bytes(key), expected)

    def test_out_of_range_keys_rejected(self):
        for key in (-1, MAX_KEY + 1, 1 << 100):
            with self.subTest(key=key), self.assertRaises(ValueError):
                key_to_bytes(key)

    def test_non_int_keys_rejected(self):
        for key in (1.0, "1", b"\x01", None, True):
            with self.subTest(key=key), self.assertRaises(TypeError):
                key_to_bytes(key)


class TestHashKey(unittest.TestCase):

    def test_known_vectors(self):
        test_cases = [(0, LEAF_0), (5, LEAF_5), (10, LEAF_10), (MAX_KEY, LEAF_MAX)]
        for key, expected_hex in test_cases:
            with self.subTest(key=key):
                self.assertEqual(hash_key(key).hex(), expected_hex)

    def test_hash_is_32_bytes(self):
        self.assertEqual(len(hash_key(42)), HASH_SIZE)

    def test_matches_sha256_of_key_bytes(self):
        for key in (3, 255, 256, 2**32, 2**63):
            with self.subTest(key=key):
                self.assertEqual(hash_key(key), hashlib.sha256(key.to_bytes(8, 'big')).digest())

    def test_little_endian_would_differ(self):
        little = hashlib.sha256((5).to_bytes(8, 'little')).digest()
        self.assertNotEqual(hash_key(5), little)


class TestHashInternal(unittest.TestCase):

    def test_concatenation_order(self):
        left, right = hash_key(5), hash_key(10)
        self.assertEqual(hash_internal(left, right), hashlib.sha256(left + right).digest())
        self.assertNotEqual(hash_internal(left, right), hash_internal(right, left))

    def test_self_pairing(self):
        h = hash_key(30)
        self.assertEqual(hash_internal(h, h), hashlib.sha256(h + h).digest())

    def test_wrong_length_children_rejected(self):
        h = hash_key(1)
        with self.assertRaises(ValueError):
            hash_internal(h[:31], h)
        with self.assertRaises(ValueError):
            hash_internal(h, h + b"\x00")

    def test_hash_to_hex(self):
        self.assertEqual(hash_to_hex(hash_key(5)), LEAF_5)
        self.assertEqual(len(hash_to_hex(hash_key(5))), 64)


if __name__ == "__main__":
    unittest.main()
