"""
HashStream - Keccak-256 Keystream Cipher Library

This library implements a deterministic, hash-derived stream cipher.
Data is split into 32-byte windows and each window is XORed with
keccak256(key || uint256_be(offset)), where offset is the window's byte
position. The transform is its own inverse and its output matches an
independent reference implementation byte for byte.

Key Features:
- Exact-length output for any input, including empty data
- Packed key/offset encoding compatible with the reference implementation
- Optional multi-threaded keystream derivation for large inputs
- Hex helpers and a parity harness for checking against the reference

Not provided: authentication, key derivation or randomized nonces.
"""

from .cipher_core import (
    HashStreamCipher,
    InvalidInputError,
    transform,
    encrypt_decrypt,
    encrypt_decrypt_hex,
)
from .keystream import keystream_block
from .segmenter import BLOCK_SIZE

__version__ = '0.1.0'
__author__ = 'HashStream Team'

__all__ = [
    'BLOCK_SIZE',
    'HashStreamCipher',
    'InvalidInputError',
    'transform',
    'encrypt_decrypt',
    'encrypt_decrypt_hex',
    'keystream_block',
]
