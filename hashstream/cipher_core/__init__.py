"""
Cipher Core Package

This package implements the stream cipher transform itself: it combines
each data window with its keystream block and reassembles the output at
the exact input length.
"""

from .stream_cipher import (
    CIPHER_DEFAULT_PARAMS,
    HashStreamCipher,
    InvalidInputError,
    transform,
    encrypt_decrypt,
    encrypt_decrypt_hex,
)

__all__ = [
    'CIPHER_DEFAULT_PARAMS',
    'HashStreamCipher',
    'InvalidInputError',
    'transform',
    'encrypt_decrypt',
    'encrypt_decrypt_hex',
]
