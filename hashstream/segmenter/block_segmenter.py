"""
Block Segmenter

Splits data into 32-byte windows positioned at multiples of the block
width. The final window may be shorter than a full block.
"""

from typing import Iterator, List, Tuple

# Width of one window and of one keystream block, in bytes
BLOCK_SIZE = 32


def _check_args(length: int, block_size: int) -> None:
    if length < 0:
        raise ValueError(f"Length must be non-negative, got {length}")
    if block_size <= 0:
        raise ValueError(f"Block size must be positive, got {block_size}")


def window_offsets(length: int, block_size: int = BLOCK_SIZE) -> List[int]:
    """
    Compute the start offsets of every window covering `length` bytes.
    
    Args:
        length: Length of the data in bytes
        block_size: Window width in bytes (default: 32)
        
    Returns:
        Offsets 0, block_size, 2 * block_size, ... below `length`
    """
    _check_args(length, block_size)
    return list(range(0, length, block_size))


def window_count(length: int, block_size: int = BLOCK_SIZE) -> int:
    """Number of windows needed so that count * block_size >= length."""
    _check_args(length, block_size)
    return -(-length // block_size)


def iter_windows(data: bytes, block_size: int = BLOCK_SIZE) -> Iterator[Tuple[int, bytes]]:
    """
    Iterate over (offset, window) pairs of the data, in order.
    
    Args:
        data: The data to segment
        block_size: Window width in bytes (default: 32)
        
    Yields:
        Tuples of (offset, window bytes); only the last window can be short
    """
    for offset in window_offsets(len(data), block_size):
        yield offset, bytes(data[offset:offset + block_size])
