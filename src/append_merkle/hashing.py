"""
Hashing primitives for the append-only Merkle tree.

Keys are unsigned 64-bit integers serialized as 8 big-endian bytes. A leaf
is ``SHA256(key_bytes)`` and an internal node is ``SHA256(left || right)``.
The byte order is part of the contract: changing it changes every digest.
"""
import hashlib

Hash = bytes
Key = int

HASH_SIZE = 32
KEY_SIZE = 8
MAX_KEY = (1 << (8 * KEY_SIZE)) - 1


def key_to_bytes(key: Key) -> bytes:
    """
    Serialize a key into its fixed 8-byte big-endian representation.

    Parameters:
        key (int): An unsigned 64-bit integer.

    Returns:
        bytes: The 8-byte encoding of ``key``.

    Raises:
        TypeError: If ``key`` is not an int (bools are rejected too).
        ValueError: If ``key`` is outside ``[0, 2**64 - 1]``.
    """
    if isinstance(key, bool) or not isinstance(key, int):
        raise TypeError(f"key must be an int, got {type(key).__name__}")
    if key < 0 or key > MAX_KEY:
        raise ValueError(f"key {key} is outside the unsigned 64-bit range")
    return key.to_bytes(KEY_SIZE, 'big')


def hash_key(key: Key) -> Hash:
    """Hash a key into a 32-byte leaf hash."""
    return hashlib.sha256(key_to_bytes(key)).digest()


def hash_internal(left: Hash, right: Hash) -> Hash:
    """Hash two child hashes into their parent: SHA256(left || right)."""
    if len(left) != HASH_SIZE or len(right) != HASH_SIZE:
        raise ValueError(
            f"child hashes must be {HASH_SIZE} bytes, got {len(left)} and {len(right)}"
        )
    h = hashlib.sha256()
    h.update(left)
    h.update(right)
    return h.digest()


def hash_to_hex(digest: Hash) -> str:
    return digest.hex()
