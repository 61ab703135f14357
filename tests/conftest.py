"""
Shared pytest fixtures for kcenters tests.
"""

from __future__ import annotations

import os
import sys
from pathlib import Path

import numpy as np
import pytest
import torch

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if SRC.exists():
    sys.path.insert(0, str(SRC))


def _get_seed() -> int:
    try:
        return int(os.getenv("TEST_RANDOM_SEED", "1337"))
    except ValueError:
        return 1337


@pytest.fixture(scope="session", autouse=True)
def seed_all() -> int:
    """Seed torch's global RNG for the session."""
    seed = _get_seed()
    torch.manual_seed(seed)
    return seed


@pytest.fixture
def rng(seed_all: int) -> np.random.Generator:
    """NumPy generator for building random datasets."""
    return np.random.default_rng(seed_all)


@pytest.fixture
def two_blobs():
    """Two well separated pairs of labelled 2-D points."""
    from kcenters import Coordinates

    return [
        Coordinates([0, 0], label="a"),
        Coordinates([0, 1], label="b"),
        Coordinates([10, 10], label="c"),
        Coordinates([10, 11], label="d"),
    ]
