from functools import reduce

from Crypto.Random import random as strong_random
from Crypto.PublicKey.ECC import EccPoint

__all__ = [
    "strong_random", "add_ec",
    "VSSError", "ConfigurationError", "InvalidThreshold", "InvalidSecret",
    "InsufficientShares", "DuplicateIndex",
]


def add_ec(points: list[EccPoint], identity: EccPoint) -> EccPoint:
    """Group sum of ``points``; ``identity`` when the list is empty."""
    return reduce(lambda acc, p: acc + p, points, identity)


class VSSError(Exception):
    def __init__(self, message):
        self.message = message
        super().__init__(self.message)


class ConfigurationError(VSSError):
    def __init__(self, message="Generators g and h must be different."):
        super().__init__(f"Invalid configuration. {message}")


class InvalidThreshold(VSSError):
    def __init__(self, t, n):
        self.t = t
        self.n = n
        super().__init__(f"Invalid threshold t={t} for n={n} participants. "
                         "Require 1 <= t <= n.")


class InvalidSecret(VSSError):
    def __init__(self, message="Secret must be a non-zero element."):
        super().__init__(message)


class InsufficientShares(VSSError):
    def __init__(self, got, t):
        self.got = got
        self.t = t
        super().__init__(f"Not enough shares to reconstruct the secret. "
                         f"At least {t} shares are required, got {got}.")


class DuplicateIndex(VSSError):
    def __init__(self, index):
        self.index = index
        super().__init__(f"Participant index {index} appears more than once.")
