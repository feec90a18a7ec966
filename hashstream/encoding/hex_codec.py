"""
Hex and Text Codec

Converts between bytes and the 0x-prefixed hex strings used to exchange
inputs and results with the reference implementation.
"""

import binascii

HEX_PREFIX = '0x'


def to_hex(data: bytes) -> str:
    """Render bytes as a 0x-prefixed lowercase hex string, two digits per byte."""
    return HEX_PREFIX + bytes(data).hex()


def from_hex(text: str) -> bytes:
    """
    Parse a hex string, with or without a 0x prefix.
    
    Args:
        text: The hex string
        
    Returns:
        The decoded bytes
        
    Raises:
        ValueError: If the string has an odd number of digits or non-hex characters
    """
    text = text.strip()
    if text[:2].lower() == HEX_PREFIX:
        text = text[2:]
    
    if len(text) % 2:
        raise ValueError(f"Hex string must have an even number of digits, got {len(text)}")
    
    try:
        return binascii.unhexlify(text)
    except binascii.Error as e:
        raise ValueError(f"Invalid hex string: {e}") from e


def text_to_bytes(text: str) -> bytes:
    """Encode text as UTF-8."""
    return text.encode('utf-8')
