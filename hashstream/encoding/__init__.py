"""
Encoding Package

Helpers for moving byte sequences in and out of 0x-prefixed hex strings
and UTF-8 text.
"""

from .hex_codec import to_hex, from_hex, text_to_bytes

__all__ = ['to_hex', 'from_hex', 'text_to_bytes']
