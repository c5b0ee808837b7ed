"""
Classic Diffie-Hellman over plain Python ints.

r1 = g^a mod p, r2 = g^b mod p
sk = g^(a*b) mod p = r2^a mod p = r1^b mod p

verify() is a passive consistency check between (a, r2) and (b, r1).
It does not authenticate the public values.
"""
import logging
from typing import Optional, Tuple

from dhexchange.common.protocol import DhParams, PublicPair
from dhexchange.common.utils import params_fingerprint
from dhexchange.crypto.rng import RandomSource, system_random

logger = logging.getLogger(__name__)


class InvalidParameter(ValueError):
    """Raised for degenerate group parameters, negative exponents or bounds."""


def modpow(base: int, exponent: int, modulus: int) -> int:
    """base^exponent mod modulus. A modulus of 0 or 1 gives 0."""
    if modulus <= 1:
        return 0
    return pow(base, exponent, modulus)


def _check_exponent(name: str, value: int):
    if not isinstance(value, int) or value < 0:
        raise InvalidParameter(f"{name} must be a non-negative integer, got {value!r}")


class DHExchange:
    """
    Holds the agreed (g, p) pair. Both parties build one from the same values.
    Private exponents are passed to every call and never stored.
    """

    def __init__(self, generator: int, modulus: int):
        if not isinstance(generator, int) or not isinstance(modulus, int):
            raise InvalidParameter("generator and modulus must be integers")
        if not 1 < generator < modulus:
            raise InvalidParameter(
                f"expected 1 < g < p, got g={generator}, p has {modulus.bit_length()} bits"
            )
        self._g = generator
        self._p = modulus
        logger.debug("DH group ready: g=%d, %d-bit modulus", generator, modulus.bit_length())

    @classmethod
    def from_params(cls, params: DhParams) -> "DHExchange":
        return cls(params.g, params.p)

    # -------------------- Parameters -------------------- #

    @property
    def generator(self) -> int:
        return self._g

    @property
    def modulus(self) -> int:
        return self._p

    @property
    def params(self) -> DhParams:
        return DhParams(g=self._g, p=self._p)

    def fingerprint(self) -> str:
        """SHA-256 hex of (g, p). Compare out of band to confirm both sides agree."""
        return params_fingerprint(self._g, self._p)

    def __eq__(self, other):
        if not isinstance(other, DHExchange):
            return NotImplemented
        return (self._g, self._p) == (other._g, other._p)

    def __hash__(self):
        return hash((self._g, self._p))

    def __repr__(self):
        return f"DHExchange(g={self._g}, p=<{self._p.bit_length()} bits>)"

    # -------------------- Public values -------------------- #

    def public_value(self, x: int) -> int:
        """One party's public value g^x mod p."""
        _check_exponent("x", x)
        return modpow(self._g, x, self._p)

    def compute_pair(self, a: int, b: int) -> Tuple[int, int]:
        """
        Return (r1, r2) = (g^a mod p, g^b mod p).
        Exponents larger than p are fine; they are never reduced beforehand.
        """
        _check_exponent("a", a)
        _check_exponent("b", b)
        return modpow(self._g, a, self._p), modpow(self._g, b, self._p)

    def public_pair(self, a: int, b: int) -> PublicPair:
        r1, r2 = self.compute_pair(a, b)
        return PublicPair(r1=r1, r2=r2)

    # -------------------- Shared secret -------------------- #

    @staticmethod
    def multiplication(a: int, b: int) -> int:
        """Exact product a*b, no modular reduction."""
        return a * b

    def secret_key(self, a: int, b: int) -> int:
        """
        sk = g^(a*b) mod p.
        One modpow with the full product as exponent, not (g^a)^b.
        """
        _check_exponent("a", a)
        _check_exponent("b", b)
        ab = self.multiplication(a, b)
        return modpow(self._g, ab, self._p)

    def derive_secret(self, own_exponent: int, peer_public: int) -> int:
        """What one party computes on its own: peer_public^own_exponent mod p."""
        _check_exponent("own_exponent", own_exponent)
        if not isinstance(peer_public, int) or peer_public < 0:
            raise InvalidParameter(f"peer public value must be a non-negative integer, got {peer_public!r}")
        return modpow(peer_public, own_exponent, self._p)

    # -------------------- Consistency check -------------------- #

    def verify(self, a: int, b: int, r1: int, r2: int, sk: int) -> bool:
        """
        True iff sk == r2^a mod p and sk == r1^b mod p.

        A substituted r1 or r2 makes the matching condition fail. Never raises;
        malformed input is just a mismatch.
        """
        for value in (a, b, r1, r2, sk):
            if not isinstance(value, int) or value < 0:
                logger.debug("verify: rejected malformed input")
                return False

        condition1 = sk == modpow(r2, a, self._p)
        condition2 = sk == modpow(r1, b, self._p)

        if not (condition1 and condition2):
            logger.debug("verify: mismatch (a/r2 ok=%s, b/r1 ok=%s)", condition1, condition2)
        return condition1 and condition2

    # -------------------- Randomness -------------------- #

    @staticmethod
    def generate_random_number_below(bound: int, rng: Optional[RandomSource] = None) -> int:
        """Uniform sample from [0, bound) drawn from rng (OS-backed source if None)."""
        if not isinstance(bound, int) or bound <= 0:
            raise InvalidParameter(f"bound must be a positive integer, got {bound!r}")
        if rng is None:
            rng = system_random()
        return rng.randrange(bound)

    def generate_private_exponent(self, rng: Optional[RandomSource] = None) -> int:
        """Uniform in [2, p-2]; for p = 3 that range is empty, so [0, p) is used."""
        if self._p < 4:
            return self.generate_random_number_below(self._p, rng)
        return 2 + self.generate_random_number_below(self._p - 3, rng)
