"""Tests for table initialization."""

from __future__ import annotations

import numpy as np
import pytest

from true_roll.core.errors import InvalidInputError
from true_roll.core.mixer import UINT32_MASK
from true_roll.core.table import generate_true_roll, initialize_true_roll
from true_roll.services.entropy import XorshiftEntropySource


class TestInitializeTrueRoll:
    def test_zero_and_modulus_remap_to_one(self) -> None:
        table, seed = initialize_true_roll([5, 0, 4294967296])
        assert table == (5, 1, 1)
        assert seed == 1

    def test_values_reduced_modulo_2_32(self) -> None:
        table, _ = initialize_true_roll([4294967297, UINT32_MASK, -1])
        assert table == (1, UINT32_MASK, UINT32_MASK)

    def test_returns_immutable_tuple(self) -> None:
        table, _ = initialize_true_roll([1, 2, 3])
        assert isinstance(table, tuple)

    def test_seed_independent_of_input(self) -> None:
        _, a = initialize_true_roll([99])
        _, b = initialize_true_roll([7, 8, 9, 10])
        assert a == b == 1

    def test_accepts_numpy_integers(self) -> None:
        table, _ = initialize_true_roll([np.uint32(10), np.int64(0)])
        assert table == (10, 1)
        assert all(type(v) is int for v in table)

    def test_no_zero_entries(self) -> None:
        table, _ = initialize_true_roll([0] * 16 + [1 << 32] * 16)
        assert all(v != 0 for v in table)

    def test_does_not_mutate_input(self) -> None:
        values = [0, 5]
        initialize_true_roll(values)
        assert values == [0, 5]


class TestInitializeTrueRollErrors:
    def test_empty(self) -> None:
        with pytest.raises(InvalidInputError, match="must not be empty"):
            initialize_true_roll([])

    def test_not_a_sequence(self) -> None:
        with pytest.raises(InvalidInputError):
            initialize_true_roll(64)  # type: ignore[arg-type]

    def test_string_rejected(self) -> None:
        with pytest.raises(InvalidInputError):
            initialize_true_roll("123")

    @pytest.mark.parametrize("bad", ["7", 1.5, None, True])
    def test_non_integer_element(self, bad: object) -> None:
        with pytest.raises(InvalidInputError, match="index 1"):
            initialize_true_roll([1, bad, 3])

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            initialize_true_roll([])


class TestGenerateTrueRoll:
    def test_size_and_seed(self) -> None:
        table, seed = generate_true_roll(64, XorshiftEntropySource(seed=1))
        assert len(table) == 64
        assert seed == 1
        assert all(1 <= v <= UINT32_MASK for v in table)

    def test_deterministic_source_reproduces_table(self) -> None:
        a, _ = generate_true_roll(32, XorshiftEntropySource(seed=9))
        b, _ = generate_true_roll(32, XorshiftEntropySource(seed=9))
        assert a == b

    def test_default_secure_source(self) -> None:
        table, _ = generate_true_roll(8)
        assert len(table) == 8
        assert all(1 <= v <= UINT32_MASK for v in table)

    @pytest.mark.parametrize("size", [0, -3])
    def test_size_must_be_positive(self, size: int) -> None:
        with pytest.raises(InvalidInputError):
            generate_true_roll(size)

    def test_size_must_be_integer(self) -> None:
        with pytest.raises(InvalidInputError):
            generate_true_roll(6.0)  # type: ignore[arg-type]
