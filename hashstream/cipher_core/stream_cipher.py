"""
Hash-Derived Stream Cipher

This module provides the HashStreamCipher transform. Data is cut into
32-byte windows, every window is right-padded with zeros to a full block
and XORed with keccak256(key || uint256_be(offset)), and the concatenated
result is truncated back to the input length.

XOR with the same keystream is its own inverse, so the one transform both
masks and unmasks.
"""

import logging
from typing import Any, Dict, Optional, Union

import numpy as np

from ..encoding.hex_codec import to_hex
from ..keystream.keccak_keystream import generate_keystream
from ..segmenter.block_segmenter import BLOCK_SIZE, iter_windows, window_count

logger = logging.getLogger(__name__)

BytesLike = Union[bytes, bytearray, memoryview]

# Default parameters for HashStreamCipher
CIPHER_DEFAULT_PARAMS: Dict[str, Any] = {
    'block_size': BLOCK_SIZE,    # Window and keystream block width in bytes
    'workers': None,             # Keystream threads (None for sequential)
    'parallel_threshold': 64,    # Minimum windows before using threads
}


class InvalidInputError(TypeError):
    """Raised when data or key is not a byte sequence."""


def _ensure_bytes(value: Any, name: str) -> bytes:
    """
    Check that a value is a byte sequence and return it as bytes.
    
    Raises:
        InvalidInputError: If the value is not bytes, bytearray or memoryview
    """
    if not isinstance(value, (bytes, bytearray, memoryview)):
        raise InvalidInputError(
            f"{name} must be a byte sequence, got {type(value).__name__}"
        )
    return bytes(value)


class HashStreamCipher:
    """
    Keccak-256 keystream cipher over 32-byte windows.
    
    Instances hold only scheduling configuration; every call to
    `transform` is independent.
    """
    
    def __init__(self,
                 workers: Optional[int] = CIPHER_DEFAULT_PARAMS['workers'],
                 parallel_threshold: int = CIPHER_DEFAULT_PARAMS['parallel_threshold']):
        """
        Initialize the cipher.
        
        Args:
            workers: Threads used to derive keystream blocks (None or 1 for sequential)
            parallel_threshold: Minimum number of windows before threads are used
        """
        if workers is not None and workers < 1:
            raise ValueError(f"Workers must be at least 1, got {workers}")
        if parallel_threshold < 1:
            raise ValueError(f"Parallel threshold must be at least 1, got {parallel_threshold}")
        
        self.block_size = CIPHER_DEFAULT_PARAMS['block_size']
        self.workers = workers
        self.parallel_threshold = parallel_threshold
    
    def _workers_for(self, windows: int) -> Optional[int]:
        if self.workers is None or windows < self.parallel_threshold:
            return None
        return self.workers
    
    def transform(self, data: BytesLike, key: BytesLike) -> bytes:
        """
        Mask or unmask data under the key.
        
        Args:
            data: The data to transform (any length, including empty)
            key: The cipher key (any length, including empty)
            
        Returns:
            The transformed data, exactly as long as the input
            
        Raises:
            InvalidInputError: If data or key is not a byte sequence
        """
        data = _ensure_bytes(data, 'data')
        key = _ensure_bytes(key, 'key')
        
        if not data:
            return b''
        
        windows = window_count(len(data), self.block_size)
        workers = self._workers_for(windows)
        logger.debug("Transforming %d bytes in %d windows", len(data), windows)
        
        # Right-pad every window to a full block
        offsets = []
        padded = bytearray()
        for offset, window in iter_windows(data, self.block_size):
            offsets.append(offset)
            padded += window.ljust(self.block_size, b'\x00')
        
        keystream = b''.join(generate_keystream(key, offsets, workers=workers))
        
        combined = np.bitwise_xor(
            np.frombuffer(bytes(padded), dtype=np.uint8),
            np.frombuffer(keystream, dtype=np.uint8),
        )
        
        # Drop the padding of the final window
        return combined.tobytes()[:len(data)]
    
    def encrypt(self, plaintext: BytesLike, key: BytesLike) -> bytes:
        """Encrypt plaintext (same as `transform`)."""
        return self.transform(plaintext, key)
    
    def decrypt(self, ciphertext: BytesLike, key: BytesLike) -> bytes:
        """Decrypt ciphertext (same as `transform`)."""
        return self.transform(ciphertext, key)


def transform(data: BytesLike, key: BytesLike) -> bytes:
    """
    Convenience function to transform data with a default cipher.
    
    Args:
        data: The data to mask or unmask
        key: The cipher key
        
    Returns:
        The transformed data
    """
    return HashStreamCipher().transform(data, key)


encrypt_decrypt = transform


def encrypt_decrypt_hex(data: BytesLike, key: BytesLike) -> str:
    """
    Transform data and return the result as a 0x-prefixed hex string.
    
    The string always has exactly 2 * len(data) hex digits after the prefix.
    """
    return to_hex(transform(data, key))


if __name__ == "__main__":
    key = b"This is a test key"
    plaintext = b"Lorem ipsum dolor sit amet, consectetur adipiscing elit."
    
    ciphertext = transform(plaintext, key)
    print(f"Plaintext: {plaintext}")
    print(f"Ciphertext: {ciphertext.hex()}")
    
    decrypted = transform(ciphertext, key)
    print(f"Decrypted: {decrypted}")
    assert decrypted == plaintext
    assert len(ciphertext) == len(plaintext)
    
    print("Stream cipher tests completed successfully!")
