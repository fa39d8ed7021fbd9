"""Test configuration helpers."""
from __future__ import annotations

import random
import sys
from pathlib import Path

import pytest


def _ensure_repo_root_on_path() -> None:
    root = Path(__file__).resolve().parent.parent
    if str(root) not in sys.path:
        sys.path.insert(0, str(root))


_ensure_repo_root_on_path()

from pedersen_vss import CurveGroup, PedersenVSS  # noqa: E402


@pytest.fixture(scope="session")
def group():
    return CurveGroup("P-256")


@pytest.fixture
def vss(group):
    g, h = group.default_generators()
    return PedersenVSS(group, g, h, rng=random.Random(1234))
