"""
Keystream Package

This package derives the per-window keystream blocks from the key and
the window offset using Keccak-256.
"""

from .keccak_keystream import (
    OFFSET_WIDTH,
    encode_offset,
    pack_key_offset,
    keccak256,
    keystream_block,
    generate_keystream,
)

__all__ = [
    'OFFSET_WIDTH',
    'encode_offset',
    'pack_key_offset',
    'keccak256',
    'keystream_block',
    'generate_keystream',
]
