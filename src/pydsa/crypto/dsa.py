"""
DSA signature generation and verification (FIPS 186-4, sections 4.5 - 4.7)

Both operations work on an already computed message digest. Signatures are
exchanged as DER encoded SEQUENCE { INTEGER r, INTEGER s }.
"""

import logging
import secrets
from typing import Callable, Optional, Tuple, Union

from ..keys import DSAKey
from ..ser import SignatureError, decode_signature, encode_signature, is_hex
from .hash import hash_message

logger = logging.getLogger(__name__)

# Upper bound on per-message secrets drawn before giving up. Hitting it means
# the random source is broken, r == 0 or s == 0 has probability ~2/q.
MAX_SIGN_ATTEMPTS = 64

Digest = Union[bytes, bytearray, str]
Signature = Union[bytes, bytearray, str]

# Returns k with 1 <= k <= q - 1 given q
RandomK = Callable[[int], int]


def _mod_inverse(a: int, m: int) -> Optional[int]:
    """
    Compute modular inverse of a mod m using extended Euclidean algorithm.
    Returns None if inverse doesn't exist.
    """
    if a < 0:
        return None

    old_r, r = a % m, m
    old_x, x = 1, 0
    while r != 0:
        quotient = old_r // r
        old_r, r = r, old_r - quotient * r
        old_x, x = x, old_x - quotient * x

    if old_r != 1:
        return None
    return old_x % m


def _random_k(q: int) -> int:
    """Draw the per-message secret uniformly from [1, q - 1]"""
    return secrets.randbelow(q - 1) + 1


def digest_to_int(digest: Digest, q: int) -> int:
    """
    Interpret the leftmost min(N, outlen) bits of a digest as an integer,
    where N is the bit length of q.

    Args:
        digest: Hash output as bytes or as a hexadecimal string
        q: Subgroup order

    Returns:
        The integer z used by signing and verification
    """
    if isinstance(digest, str):
        if not is_hex(digest):
            raise ValueError("Digest is not valid hex")
        value = int(digest, 16) if digest else 0
        outlen = 4 * len(digest)
    else:
        value = int.from_bytes(digest, byteorder='big')
        outlen = 8 * len(digest)

    n = q.bit_length()
    if outlen > n:
        value >>= outlen - n
    return value


def _sign_pair(z: int, key: DSAKey, random_k: RandomK) -> Tuple[int, int]:
    p, q, g = key.params.p, key.params.q, key.params.g
    x = key.x

    for attempt in range(1, MAX_SIGN_ATTEMPTS + 1):
        # 4.5: per-message secret 0 < k < q
        k = random_k(q)
        if not 0 < k < q:
            raise ValueError("Per-message secret k must satisfy 0 < k < q")

        # 4.6: r = (g^k mod p) mod q, s = k^-1 (z + xr) mod q
        r = pow(g, k, p) % q
        if r == 0:
            logger.debug("Degenerate r on attempt %d, drawing a new k", attempt)
            continue

        k_inv = _mod_inverse(k, q)
        if k_inv is None:
            raise ValueError("k has no inverse mod q, q is not prime")

        s = (k_inv * (z + x * r)) % q
        if s == 0:
            logger.debug("Degenerate s on attempt %d, drawing a new k", attempt)
            continue

        return r, s

    raise SignatureError(
        SignatureError.ErrorType.INTERNAL_RETRY_EXHAUSTED,
        f"no usable k after {MAX_SIGN_ATTEMPTS} attempts",
        attempts=MAX_SIGN_ATTEMPTS,
    )


def sign(digest: Digest, key: DSAKey, random_k: Optional[RandomK] = None) -> bytes:
    """
    Sign a message digest with a DSA private key.

    Args:
        digest: Hash of the message to sign, as bytes or hex string
        key: Private key, bundling the domain parameters
        random_k: Source of the per-message secret; defaults to the secrets
            module. Only override this for known-answer tests.

    Returns:
        DER encoded signature

    Raises:
        ValueError: If key is public-only or random_k yields an out of range k
        SignatureError: INTERNAL_RETRY_EXHAUSTED if no usable k was found
    """
    if not key.is_private:
        raise ValueError("Signing requires a private key")

    z = digest_to_int(digest, key.params.q)
    r, s = _sign_pair(z, key, random_k or _random_k)
    return encode_signature(r, s)


def sign_hex(digest: Digest, key: DSAKey, random_k: Optional[RandomK] = None) -> str:
    """Like sign(), but returns the DER signature as a hex string"""
    return sign(digest, key, random_k).hex()


def verify(digest: Digest, key: DSAKey, signature: Signature) -> bool:
    """
    Verify a DER encoded DSA signature over a message digest.

    Args:
        digest: Hash of the signed message, as bytes or hex string
        key: Public (or private) key, bundling the domain parameters
        signature: DER encoded signature as bytes or hex string

    Returns:
        True if the signature is valid, False if it does not match

    Raises:
        SignatureError: MALFORMED_SIGNATURE if the signature cannot be decoded,
            INVALID_SIGNATURE_RANGE if r or s is outside (0, q)
    """
    p, q, g = key.params.p, key.params.q, key.params.g

    r, s = decode_signature(signature)

    # 4.7: 0 < r < q and 0 < s < q
    if not 0 < r < q or not 0 < s < q:
        logger.debug("Rejecting signature with r or s outside (0, q)")
        raise SignatureError(
            SignatureError.ErrorType.INVALID_SIGNATURE_RANGE,
            "r and s must satisfy 0 < r, s < q",
            r=r, s=s, q=q,
        )

    z = digest_to_int(digest, q)

    w = _mod_inverse(s, q)
    if w is None:
        # Only reachable when q is not prime
        logger.debug("s has no inverse mod q")
        return False

    u1 = (z * w) % q
    u2 = (r * w) % q

    v = (pow(g, u1, p) * pow(key.y, u2, p)) % p % q

    if v != r:
        logger.debug("Signature does not match digest")
        return False
    return True


def sign_message(message: bytes, key: DSAKey, algorithm: str = 'sha256',
                 random_k: Optional[RandomK] = None) -> bytes:
    """Hash message with the given algorithm and sign the digest"""
    return sign(hash_message(message, algorithm).as_ref(), key, random_k)


def verify_message(message: bytes, key: DSAKey, signature: Signature,
                   algorithm: str = 'sha256') -> bool:
    """Hash message with the given algorithm and verify the signature"""
    return verify(hash_message(message, algorithm).as_ref(), key, signature)
