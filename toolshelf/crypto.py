"""Symmetric encryption of byte strings."""

from __future__ import annotations

from cryptography.hazmat.primitives import padding
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

_BLOCK_BYTES = 16
_ZERO_IV = bytes(_BLOCK_BYTES)


def encrypt(data: bytes, key: bytes) -> bytes:
    """Encrypt data with AES-128 in CBC mode, PKCS#7 padding and an all-zero IV.

    Raises ValueError when the key is not exactly 16 bytes long.
    """
    if len(key) != _BLOCK_BYTES:
        raise ValueError(f"key must be {_BLOCK_BYTES} bytes long, got {len(key)}")
    padder = padding.PKCS7(_BLOCK_BYTES * 8).padder()
    padded = padder.update(bytes(data)) + padder.finalize()
    encryptor = Cipher(algorithms.AES(bytes(key)), modes.CBC(_ZERO_IV)).encryptor()
    return encryptor.update(padded) + encryptor.finalize()