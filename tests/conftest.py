"""
Shared fixtures: a tiny hand-checkable parameter set and a realistic one
"""

import pytest

from pydsa import DSAKey, new_private_key

# Small parameters, every value can be checked by hand:
# 2 has order 11 mod 23, so g = 4 = 2^2 does too.
SMALL_P = 23
SMALL_Q = 11
SMALL_G = 4
SMALL_X = 3
SMALL_Y = 18  # 4^3 mod 23

# Mersenne prime 2^127 - 1, deliberately not a multiple of 8 bits
LARGE_Q = 2 ** 127 - 1
LARGE_X = 0x2b7e151628aed2a6abf7158809cf4f3c % LARGE_Q

_SMALL_PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37)


def is_probable_prime(n: int) -> bool:
    """Miller-Rabin with fixed bases, good enough to build test parameters"""
    if n < 2:
        return False
    for prime in _SMALL_PRIMES:
        if n % prime == 0:
            return n == prime

    d, r = n - 1, 0
    while d % 2 == 0:
        d //= 2
        r += 1

    for a in _SMALL_PRIMES:
        x = pow(a, d, n)
        if x == 1 or x == n - 1:
            continue
        for _ in range(r - 1):
            x = pow(x, 2, n)
            if x == n - 1:
                break
        else:
            return False
    return True


def generate_params(q: int, p_bits: int):
    """Find p = m*q + 1 prime with p_bits bits and a generator of order q"""
    m = (1 << (p_bits - 1)) // q
    m += m % 2  # keep m even so p is odd
    while True:
        p = m * q + 1
        if is_probable_prime(p):
            break
        m += 2

    h = 2
    while True:
        g = pow(h, (p - 1) // q, p)
        if g > 1:
            return p, q, g
        h += 1


@pytest.fixture
def small_key() -> DSAKey:
    return new_private_key(SMALL_P, SMALL_Q, SMALL_G, SMALL_Y, SMALL_X)


@pytest.fixture(scope="session")
def large_key() -> DSAKey:
    p, q, g = generate_params(LARGE_Q, 512)
    return new_private_key(p, q, g, None, LARGE_X)
