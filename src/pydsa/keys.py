"""
DSA domain parameters and key material

Keys are immutable once built. Use new_private_key() / new_public_key() to
construct them from raw integers.
"""

from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class DomainParameters:
    """DSA domain parameters (p, q, g) shared by all keys of a setup"""
    p: int  # Prime modulus
    q: int  # Prime divisor of p - 1, order of the subgroup
    g: int  # Generator of the order-q subgroup mod p

    def __post_init__(self):
        # Only cheap structural bounds, primality and g^q == 1 are not checked
        if self.p <= 2:
            raise ValueError("p must be greater than 2")
        if not 1 < self.q < self.p:
            raise ValueError("q must satisfy 1 < q < p")
        if not 1 < self.g < self.p:
            raise ValueError("g must satisfy 1 < g < p")

    @property
    def n(self) -> int:
        """Bit length of q"""
        return self.q.bit_length()


@dataclass(frozen=True)
class DSAKey:
    """
    A DSA public or private key

    A key is public-only when x is None. Private keys always carry the
    matching public value y as well.
    """
    params: DomainParameters
    y: int
    x: Optional[int] = field(default=None, repr=False)

    def __post_init__(self):
        if not 1 < self.y < self.params.p:
            raise ValueError("y must satisfy 1 < y < p")
        if self.x is not None and not 0 < self.x < self.params.q:
            raise ValueError("x must satisfy 0 < x < q")

    @property
    def is_private(self) -> bool:
        return self.x is not None

    def public_key(self) -> 'DSAKey':
        """Return the public-only view of this key"""
        if self.x is None:
            return self
        return DSAKey(self.params, self.y)


def new_private_key(p: int, q: int, g: int, y: Optional[int], x: int) -> DSAKey:
    """
    Build a DSA private key from its parameters.

    If y is None it is derived as g^x mod p.
    """
    params = DomainParameters(p, q, g)
    if y is None:
        if not 0 < x < q:
            raise ValueError("x must satisfy 0 < x < q")
        y = pow(g, x, p)
    return DSAKey(params, y, x)


def new_public_key(p: int, q: int, g: int, y: int) -> DSAKey:
    """Build a DSA public key from its parameters"""
    return DSAKey(DomainParameters(p, q, g), y)
