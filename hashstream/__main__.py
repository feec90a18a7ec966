"""
Command-line interface for the HashStream cipher.

Examples:
    python -m hashstream --key "secret" --data "hello world"
    python -m hashstream --key-hex 0x0102 --data-hex 0xdeadbeef
    python -m hashstream --key "secret" --input plain.bin --output masked.bin --raw
"""

import argparse
import logging
import os
import sys
from typing import List, Optional

from . import __version__
from .cipher_core.stream_cipher import HashStreamCipher, InvalidInputError
from .encoding.hex_codec import from_hex, text_to_bytes, to_hex

logger = logging.getLogger(__name__)

LOG_LEVEL_ENV = 'HASHSTREAM_LOG_LEVEL'
WORKERS_ENV = 'HASHSTREAM_WORKERS'


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='hashstream',
        description="Mask or unmask data with the Keccak-256 keystream cipher",
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    
    key_group = parser.add_mutually_exclusive_group(required=True)
    key_group.add_argument('--key', help="Key as UTF-8 text")
    key_group.add_argument('--key-hex', help="Key as hex (0x prefix optional)")
    
    data_group = parser.add_mutually_exclusive_group(required=True)
    data_group.add_argument('--data', help="Data as UTF-8 text")
    data_group.add_argument('--data-hex', help="Data as hex (0x prefix optional)")
    data_group.add_argument('--input', help="Read data from a file ('-' for stdin)")
    
    parser.add_argument('--output', help="Write the result to a file instead of stdout")
    parser.add_argument('--raw', action='store_true', help="Write raw bytes instead of hex")
    parser.add_argument('--workers', type=int,
                        default=os.environ.get(WORKERS_ENV) or None,
                        help="Threads for keystream derivation")
    parser.add_argument('-v', '--verbose', action='store_true', help="Enable debug logging")
    return parser


def _resolve_level(name: str) -> Optional[int]:
    """Map a level name such as 'debug' to its logging constant, or None if unknown."""
    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else None


def _configure_logging(verbose: bool) -> None:
    name = os.environ.get(LOG_LEVEL_ENV, 'INFO')
    level = _resolve_level(name)
    if verbose:
        level = logging.DEBUG
    logging.basicConfig(level=level or logging.INFO, format='%(levelname)s %(name)s: %(message)s')
    if level is None:
        logger.warning("Unknown %s %r, using INFO", LOG_LEVEL_ENV, name)


def _read_input(path: str) -> bytes:
    if path == '-':
        return sys.stdin.buffer.read()
    with open(path, 'rb') as f:
        return f.read()


def _write_output(result: bytes, path: Optional[str], raw: bool) -> None:
    payload = result if raw else (to_hex(result) + '\n').encode('ascii')
    if path:
        with open(path, 'wb') as f:
            f.write(payload)
    else:
        sys.stdout.buffer.write(payload)
        sys.stdout.flush()


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)
    
    try:
        key = text_to_bytes(args.key) if args.key is not None else from_hex(args.key_hex)
        if args.data is not None:
            data = text_to_bytes(args.data)
        elif args.data_hex is not None:
            data = from_hex(args.data_hex)
        else:
            data = _read_input(args.input)
        
        cipher = HashStreamCipher(workers=args.workers)
        result = cipher.transform(data, key)
        _write_output(result, args.output, args.raw)
    except (ValueError, InvalidInputError, OSError) as e:
        logger.error("%s", e)
        return 1
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
