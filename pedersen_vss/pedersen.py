"""
Pedersen verifiable secret sharing.

Pedersen, T. P. "Non-interactive and information-theoretic secure
verifiable secret sharing." CRYPTO 1991.

The dealer shares ``secret`` with a degree t-1 polynomial ``f`` (f(0) =
secret) and blinds it with a second random polynomial ``g``. The public
commitment vector is ``C_i = f_i*G + g_i*H``; a share ``(x, f(x), g(x))`` is
valid when ``f(x)*G + g(x)*H == sum_i x^i * C_i``.
"""

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from Crypto.PublicKey.ECC import EccPoint

from .ecc import CurveGroup, Scalar
from .shamir import check_distinct, eval_poly, interpolate_at_zero, random_poly
from .utils import (
    ConfigurationError,
    InsufficientShares,
    InvalidSecret,
    InvalidThreshold,
    add_ec,
)

_logger = logging.getLogger(__name__)

Commitment = tuple[EccPoint, ...]


@dataclass(frozen=True)
class Share:
    index: int
    """Participant index x, starting at 1."""
    value1: Scalar
    """f(x), the share of the secret."""
    value2: Scalar
    """g(x), the share of the blinding polynomial."""
    commitment: Commitment
    """Commitment vector, the same tuple for every share of one sharing."""

    def __post_init__(self):
        if self.index < 1:
            raise ValueError(f"Share index must be >= 1, got {self.index}")
        if not isinstance(self.commitment, tuple):
            object.__setattr__(self, "commitment", tuple(self.commitment))
        if not self.commitment:
            raise ValueError("Share commitment vector must not be empty")


class PedersenVSS:
    def __init__(self, group: CurveGroup, g: EccPoint, h: EccPoint, rng=None):
        if g.is_point_at_infinity() or h.is_point_at_infinity():
            raise ConfigurationError("Generators must not be the point at infinity.")
        if g == h:
            raise ConfigurationError()
        self.group = group
        self.g = g.copy()
        self.h = h.copy()
        self.rng = rng

    def commit(self, f_coeffs: Sequence[Scalar], g_coeffs: Sequence[Scalar]) -> Commitment:
        """Commitments C_i = f_i*G + g_i*H for each coefficient pair."""
        if len(f_coeffs) != len(g_coeffs):
            raise ValueError("f and g must have the same number of coefficients")
        return tuple(
            self.group.combine(self.group.mul(self.g, fi), self.group.mul(self.h, gi))
            for fi, gi in zip(f_coeffs, g_coeffs)
        )

    def share_secret(self, secret: Scalar, t: int, n: int) -> list[Share]:
        if t < 1 or n < 1 or t > n:
            raise InvalidThreshold(t, n)
        if secret.is_zero():
            raise InvalidSecret()

        f = random_poly(secret, t, self.group, self.rng)
        g = random_poly(self.group.random(self.rng), t, self.group, self.rng)

        commitment = self.commit(f, g)
        _logger.debug("Dealt %d-of-%d sharing on %s", t, n, self.group.curve)

        return [Share(i, eval_poly(f, i), eval_poly(g, i), commitment)
                for i in range(1, n + 1)]

    def verify_share(self, share: Share) -> bool:
        """Check f(x)*G + g(x)*H against the commitment polynomial evaluated at x."""
        group = self.group
        lhs = group.combine(group.mul(self.g, share.value1), group.mul(self.h, share.value2))

        terms = [group.mul(c, group.scalar(share.index ** i))
                 for i, c in enumerate(share.commitment)]
        rhs = add_ec(terms, group.identity())

        ok = lhs == rhs
        if not ok:
            _logger.debug("Share %d failed verification", share.index)
        return ok

    def verify_shares(self, shares: Sequence[Share]) -> list[int]:
        """Indices of the shares that fail verification."""
        return [s.index for s in shares if not self.verify_share(s)]

    def reconstruct(self, shares: Sequence[Share], t: int, n: Optional[int] = None) -> Scalar:
        """
        Recover f(0) by Lagrange interpolation over at least ``t`` shares.

        ``n`` is accepted for symmetry with :meth:`share_secret` and is not used.
        Shares are not verified here; run :meth:`verify_share` first.
        """
        if t < 1:
            raise InvalidThreshold(t, n)
        if len(shares) < t:
            raise InsufficientShares(len(shares), t)
        check_distinct([s.index for s in shares])

        _logger.debug("Reconstructing from %d shares (t=%d)", len(shares), t)
        return interpolate_at_zero([(s.index, s.value1) for s in shares])
