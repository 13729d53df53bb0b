"""Shared fixtures for TrueRoll tests."""

from __future__ import annotations

import pytest

from true_roll.core.table import TrueTable, generate_true_roll
from true_roll.services.entropy import XorshiftEntropySource


@pytest.fixture()
def table() -> TrueTable:
    """Deterministic 64-entry table."""
    true_table, _ = generate_true_roll(64, XorshiftEntropySource(seed=2025))
    return true_table
