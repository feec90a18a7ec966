"""
Block Segmentation Package

This package splits an input byte sequence into the fixed-width windows
that the stream cipher masks one at a time.
"""

from .block_segmenter import BLOCK_SIZE, window_offsets, window_count, iter_windows

__all__ = ['BLOCK_SIZE', 'window_offsets', 'window_count', 'iter_windows']
