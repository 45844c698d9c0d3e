"""
Python DSA Library

FIPS 186-4 DSA signature generation and verification over pre-established
domain parameters and keys. Signatures are exchanged as DER encoded
SEQUENCE { INTEGER r, INTEGER s }, either as bytes or as hex strings.

Parameter and key generation, parameter validation and key serialization are
out of scope.

Usage:
    from pydsa import new_private_key, sign, verify

    key = new_private_key(p, q, g, None, x)
    sig = sign(digest, key)
    assert verify(digest, key.public_key(), sig)
"""

from .keys import (
    DomainParameters,
    DSAKey,
    new_private_key,
    new_public_key
)

from .crypto import (
    MAX_SIGN_ATTEMPTS,
    digest_to_int,
    sign,
    sign_hex,
    verify,
    sign_message,
    verify_message,
    Hasher,
    HashResult,
    hash_message
)

from .ser import (
    SerializationError,
    SignatureError,
    encode_signature,
    decode_signature
)

__version__ = "0.1.0"

__all__ = [
    # Keys
    "DomainParameters",
    "DSAKey",
    "new_private_key",
    "new_public_key",

    # Signing and verification
    "MAX_SIGN_ATTEMPTS",
    "digest_to_int",
    "sign",
    "sign_hex",
    "verify",
    "sign_message",
    "verify_message",

    # Hashing
    "Hasher",
    "HashResult",
    "hash_message",

    # Serialization
    "SerializationError",
    "SignatureError",
    "encode_signature",
    "decode_signature",
]
