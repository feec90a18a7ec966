"""
Keccak-256 Keystream Generator

This module derives one 32-byte keystream block per window. Each block is
the Keccak-256 digest of the key packed together with the window's byte
offset, encoded as an unsigned 256-bit big-endian integer:

    block(key, offset) = keccak256(key || uint256_be(offset))

The packing has no length prefixes or delimiters. Keccak-256 here is the
original Keccak submission padding, which differs from standardized
SHA3-256.
"""

import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Iterable, List, Optional

from Cryptodome.Hash import keccak

logger = logging.getLogger(__name__)

# Width of the encoded offset field in bytes (uint256)
OFFSET_WIDTH = 32

_MAX_OFFSET = (1 << (OFFSET_WIDTH * 8)) - 1


def encode_offset(offset: int) -> bytes:
    """
    Encode a window offset as an unsigned 256-bit big-endian integer.
    
    Args:
        offset: Byte position of the window within the data
        
    Returns:
        32 bytes, zero-padded on the left
        
    Raises:
        ValueError: If the offset does not fit in an unsigned 256-bit integer
    """
    if offset < 0 or offset > _MAX_OFFSET:
        raise ValueError(f"Offset must be in [0, 2**256), got {offset}")
    return offset.to_bytes(OFFSET_WIDTH, byteorder='big')


def pack_key_offset(key: bytes, offset: int) -> bytes:
    """Packed concatenation of the raw key bytes and the encoded offset."""
    return bytes(key) + encode_offset(offset)


def keccak256(data: bytes) -> bytes:
    """
    Compute the Keccak-256 digest of the data.
    
    Args:
        data: The bytes to hash
        
    Returns:
        The 32-byte digest
    """
    return keccak.new(digest_bits=256, data=bytes(data)).digest()


def keystream_block(key: bytes, offset: int) -> bytes:
    """
    Derive the keystream block for the window starting at `offset`.
    
    Args:
        key: The cipher key (any length, including empty)
        offset: Byte offset of the window, not its index
        
    Returns:
        The 32-byte keystream block
    """
    return keccak256(pack_key_offset(key, offset))


def generate_keystream(key: bytes,
                       offsets: Iterable[int],
                       workers: Optional[int] = None) -> List[bytes]:
    """
    Derive the keystream blocks for a sequence of window offsets.
    
    Blocks depend only on (key, offset), so they can be computed in any
    order. With more than one worker they are computed on a thread pool;
    the result order always follows `offsets`.
    
    Args:
        key: The cipher key
        offsets: Window offsets, in output order
        workers: Number of worker threads (None or 1 for sequential)
        
    Returns:
        List of 32-byte keystream blocks, one per offset
    """
    offsets = list(offsets)
    key = bytes(key)
    
    if workers is None or workers <= 1 or len(offsets) < 2:
        return [keystream_block(key, offset) for offset in offsets]
    
    logger.debug("Deriving %d keystream blocks on %d threads", len(offsets), workers)
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(lambda offset: keystream_block(key, offset), offsets))


if __name__ == "__main__":
    # Known vector: keccak256(uint256(0))
    block = keystream_block(b'', 0)
    print(f"Keystream block (empty key, offset 0): {block.hex()}")
    assert block.hex() == '290decd9548b62a8d60345a988386fc84ba6bc95484008f6362f93160ef3e563'
    
    # Keccak-256 of the empty string differs from SHA3-256
    print(f"keccak256(b''): {keccak256(b'').hex()}")
    
    print("Keystream tests completed successfully!")
