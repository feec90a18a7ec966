"""
Parity Verification Package

This package checks the cipher against an independent reference
implementation, treated as a black-box oracle.
"""

from .oracle import (
    PARITY_SAMPLE_DATA,
    PARITY_SAMPLE_KEY,
    ReferenceOracle,
    CommandOracle,
    OracleError,
    ParityError,
    ParityResult,
    oracle_from_env,
    check_parity,
    assert_parity,
)

__all__ = [
    'PARITY_SAMPLE_DATA',
    'PARITY_SAMPLE_KEY',
    'ReferenceOracle',
    'CommandOracle',
    'OracleError',
    'ParityError',
    'ParityResult',
    'oracle_from_env',
    'check_parity',
    'assert_parity',
]
