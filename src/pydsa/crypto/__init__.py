"""
DSA signing and verification

This module provides FIPS 186-4 DSA signature generation and validation over
message digests, plus the hash wrapper used by the message-level helpers.
"""

from .dsa import (
    MAX_SIGN_ATTEMPTS,
    digest_to_int,
    sign,
    sign_hex,
    verify,
    sign_message,
    verify_message,
)
from .hash import Hasher, HashResult, hash_message, SUPPORTED_ALGORITHMS

__all__ = [
    'MAX_SIGN_ATTEMPTS',
    'digest_to_int',
    'sign',
    'sign_hex',
    'verify',
    'sign_message',
    'verify_message',
    'Hasher',
    'HashResult',
    'hash_message',
    'SUPPORTED_ALGORITHMS',
]
