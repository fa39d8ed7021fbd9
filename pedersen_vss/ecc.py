# ecc.py

import logging
from itertools import count

from Crypto.Hash import SHAKE256
from Crypto.PublicKey import ECC
from Crypto.PublicKey.ECC import EccPoint
from Crypto.Util.number import inverse
from sympy import isprime
from sympy.ntheory.residue_ntheory import sqrt_mod

from .utils import strong_random

_logger = logging.getLogger(__name__)

DEFAULT_CURVE = "P-256"
H_LABEL = b"pedersen-vss/H"
_DOMAIN = b"pedersen-vss/hash-to-point/v1"


class Scalar:
    """Element of the prime field Z_r used for polynomial coefficients and exponents."""

    __slots__ = ("num", "prime")

    def __init__(self, num, prime):
        self.num = num % prime
        self.prime = prime

    def __eq__(self, other):
        if not isinstance(other, Scalar):
            return NotImplemented
        return self.num == other.num and self.prime == other.prime

    def __hash__(self):
        return hash((self.num, self.prime))

    def __add__(self, other):
        self._check_field(other)
        return Scalar(self.num + other.num, self.prime)

    def __sub__(self, other):
        self._check_field(other)
        return Scalar(self.num - other.num, self.prime)

    def __mul__(self, other):
        self._check_field(other)
        return Scalar(self.num * other.num, self.prime)

    def __truediv__(self, other):
        self._check_field(other)
        return self * other.inv()

    def __neg__(self):
        return Scalar(-self.num, self.prime)

    def __int__(self):
        return self.num

    def inv(self):
        if self.num == 0:
            raise ZeroDivisionError("No inverse for 0")
        return Scalar(inverse(self.num, self.prime), self.prime)

    def is_zero(self):
        return self.num == 0

    def _check_field(self, other):
        if not isinstance(other, Scalar) or self.prime != other.prime:
            raise TypeError("Cannot operate on two numbers in different Fields.")

    def __repr__(self):
        return f"Scalar({self.num})"


class CurveGroup:
    """Prime-order elliptic curve group and its scalar field.

    Point arithmetic is pycryptodome's ``EccPoint``. Only the NIST prime
    curves are accepted: they have cofactor 1, so every point on the curve
    is in the group of order ``order`` and ``a = -3``.
    """

    SUPPORTED_CURVES = ['P-192', 'P-224', 'P-256', 'P-384', 'P-521']

    def __init__(self, curve: str = DEFAULT_CURVE):
        if curve not in self.SUPPORTED_CURVES:
            raise ValueError("{} is not one of the specified curves. "
                             "Please choose one of the following curves: {}"
                             .format(curve, self.SUPPORTED_CURVES))
        params = ECC._curves[curve]
        self.curve = curve
        self.p = int(params.p)
        self.b = int(params.b)
        self.order = int(params.order)
        self._G = EccPoint(int(params.Gx), int(params.Gy), curve=curve)
        self._H = None
        if not isprime(self.order):
            raise ValueError(f"Group order of {curve} is not prime")

    # -- scalar field --

    def scalar(self, value: int) -> Scalar:
        return Scalar(value, self.order)

    def zero(self) -> Scalar:
        return Scalar(0, self.order)

    def one(self) -> Scalar:
        return Scalar(1, self.order)

    def random(self, rng=None) -> Scalar:
        rng = rng or strong_random
        return Scalar(rng.randrange(0, self.order), self.order)

    def random_nonzero(self, rng=None) -> Scalar:
        rng = rng or strong_random
        return Scalar(rng.randrange(1, self.order), self.order)

    # -- group --

    def base_point(self) -> EccPoint:
        return self._G.copy()

    def identity(self) -> EccPoint:
        return self._G.point_at_infinity()

    def mul(self, point: EccPoint, k: Scalar) -> EccPoint:
        if k.prime != self.order:
            raise TypeError("Scalar does not belong to this group's field")
        if k.is_zero():
            return self.identity()
        return point * k.num

    @staticmethod
    def combine(a: EccPoint, b: EccPoint) -> EccPoint:
        return a + b

    def hash_to_point(self, label: bytes) -> EccPoint:
        """Derive a point with no known discrete log relative to ``G``.

        Try-and-increment: hash ``label`` with a counter into an x
        coordinate until ``x^3 - 3x + b`` is a square, then take the even
        root.
        """
        size = (self.p.bit_length() + 7) // 8 + 16
        name = self.curve.encode("ascii")
        for ctr in count():
            h = SHAKE256.new(_DOMAIN + name + label + ctr.to_bytes(4, "big"))
            x = int.from_bytes(h.read(size), "big") % self.p
            rhs = (pow(x, 3, self.p) - 3 * x + self.b) % self.p
            y = sqrt_mod(rhs, self.p)
            if y is None:
                continue
            if int(y) % 2:
                y = self.p - y
            _logger.debug("hash_to_point(%r) on %s accepted after %d tries", label, self.curve, ctr + 1)
            return EccPoint(x, int(y) % self.p, curve=self.curve)

    def default_generators(self):
        """Return ``(G, H)``: the curve base point and a NUMS second generator."""
        if self._H is None:
            self._H = self.hash_to_point(H_LABEL)
        return self.base_point(), self._H.copy()

    def __repr__(self):
        return f"CurveGroup({self.curve!r})"
