"""
Reference Oracle Parity Checks

This module runs the same (data, key) pair through the local cipher and
through an external reference implementation, and compares the results
byte for byte.

An external oracle is any program that accepts the 0x-prefixed hex data
and key as its last two arguments and prints the 0x-prefixed hex result
on stdout.
"""

import logging
import os
import shlex
import subprocess
from dataclasses import dataclass
from typing import Callable, List, Optional, Protocol, Sequence, Union

from ..cipher_core.stream_cipher import transform as default_transform
from ..encoding.hex_codec import from_hex, to_hex

logger = logging.getLogger(__name__)

ORACLE_CMD_ENV = 'HASHSTREAM_ORACLE_CMD'
ORACLE_TIMEOUT_ENV = 'HASHSTREAM_ORACLE_TIMEOUT'
DEFAULT_ORACLE_TIMEOUT = 30.0

# Representative pair checked against the reference on every release
PARITY_SAMPLE_DATA = (
    b"Lorem ipsum dolor sit amet, consectetur adipiscing elit. "
    b"Fusce a est id augue convallis tristique. Suspendisse potenti."
)
PARITY_SAMPLE_KEY = b"This is a test key"


class OracleError(RuntimeError):
    """Raised when the reference oracle fails to produce a result."""


class ReferenceOracle(Protocol):
    """Anything that maps (data, key) to the reference output bytes."""
    
    def __call__(self, data: bytes, key: bytes) -> bytes:
        ...


class CommandOracle:
    """
    Reference oracle backed by an external command.
    """
    
    def __init__(self, command: Union[str, Sequence[str]], timeout: float = DEFAULT_ORACLE_TIMEOUT):
        """
        Initialize the oracle.
        
        Args:
            command: Program and leading arguments, as a list or a shell-style string
            timeout: Seconds to wait for each invocation
        """
        if isinstance(command, str):
            command = shlex.split(command)
        if not command:
            raise ValueError("Oracle command must not be empty")
        
        self.command: List[str] = list(command)
        self.timeout = timeout
    
    def __call__(self, data: bytes, key: bytes) -> bytes:
        """
        Ask the external program for the reference output.
        
        Raises:
            OracleError: If the program fails, times out or prints malformed output
        """
        args = self.command + [to_hex(data), to_hex(key)]
        logger.debug("Invoking reference oracle %s on %d bytes", self.command[0], len(data))
        
        try:
            result = subprocess.run(
                args, text=True, capture_output=True, timeout=self.timeout
            )
        except subprocess.TimeoutExpired as e:
            raise OracleError(f"Reference oracle timed out after {self.timeout}s") from e
        except OSError as e:
            raise OracleError(f"Could not run reference oracle: {e}") from e
        
        if result.returncode != 0:
            raise OracleError(
                f"Reference oracle exited with status {result.returncode}: {result.stderr.strip()}"
            )
        
        try:
            return from_hex(result.stdout.strip())
        except ValueError as e:
            raise OracleError(f"Reference oracle returned malformed output: {e}") from e
    
    def __repr__(self) -> str:
        return f"CommandOracle({self.command!r}, timeout={self.timeout})"


def oracle_from_env() -> Optional[CommandOracle]:
    """
    Build a CommandOracle from HASHSTREAM_ORACLE_CMD.
    
    Returns:
        The oracle, or None when the variable is not set
    """
    command = os.environ.get(ORACLE_CMD_ENV, '').strip()
    if not command:
        return None
    
    timeout = float(os.environ.get(ORACLE_TIMEOUT_ENV, DEFAULT_ORACLE_TIMEOUT))
    return CommandOracle(command, timeout=timeout)


@dataclass
class ParityResult:
    """Outcome of comparing the cipher against the reference oracle."""
    data: bytes
    key: bytes
    expected: bytes
    actual: bytes
    
    @property
    def matches(self) -> bool:
        return self.expected == self.actual
    
    @property
    def first_mismatch(self) -> Optional[int]:
        """Index of the first differing byte, or None when the outputs agree."""
        for i, (a, b) in enumerate(zip(self.expected, self.actual)):
            if a != b:
                return i
        if len(self.expected) != len(self.actual):
            return min(len(self.expected), len(self.actual))
        return None


class ParityError(AssertionError):
    """Raised when the cipher and the reference oracle disagree."""
    
    def __init__(self, result: ParityResult):
        self.result = result
        super().__init__(
            f"Output differs from reference at byte {result.first_mismatch}: "
            f"expected {to_hex(result.expected)}, got {to_hex(result.actual)}"
        )


def check_parity(data: bytes,
                 key: bytes,
                 oracle: ReferenceOracle,
                 transform: Callable[[bytes, bytes], bytes] = default_transform) -> ParityResult:
    """
    Run one (data, key) pair through both the cipher and the oracle.
    
    Args:
        data: The input data
        key: The cipher key
        oracle: The reference implementation
        transform: The local transform under test
        
    Returns:
        A ParityResult holding both outputs
    """
    data = bytes(data)
    key = bytes(key)
    expected = oracle(data, key)
    actual = transform(data, key)
    
    result = ParityResult(data=data, key=key, expected=expected, actual=actual)
    if not result.matches:
        logger.warning("Parity mismatch at byte %s for %d-byte input", result.first_mismatch, len(data))
    return result


def assert_parity(data: bytes,
                  key: bytes,
                  oracle: ReferenceOracle,
                  transform: Callable[[bytes, bytes], bytes] = default_transform) -> ParityResult:
    """
    Like `check_parity`, but raise on mismatch.
    
    Raises:
        ParityError: If the outputs differ
    """
    result = check_parity(data, key, oracle, transform)
    if not result.matches:
        raise ParityError(result)
    return result
