# pedersen_vss/__init__.py
from .ecc import Scalar, CurveGroup
from .pedersen import PedersenVSS, Share
from .utils import (
    VSSError, ConfigurationError, InvalidThreshold, InvalidSecret,
    InsufficientShares, DuplicateIndex,
)
