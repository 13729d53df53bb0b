"""Tests for persisted session models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from true_roll.core.mixer import UINT32_MASK
from true_roll.session.models import RollRecord, SessionState, TableCommitment


def _make_state(**overrides: object) -> SessionState:
    data: dict[str, object] = {
        "session_id": "game-1",
        "true_table": [5, 1, 1],
        "commitment": TableCommitment(table_size=3, digest="abc"),
    }
    data.update(overrides)
    return SessionState(**data)  # type: ignore[arg-type]


class TestSessionState:
    def test_defaults(self) -> None:
        state = _make_state()
        assert state.advancing_seed == 1
        assert state.rolls == []
        assert state.commitment.algorithm == "sha256"

    def test_empty_table_rejected(self) -> None:
        with pytest.raises(ValidationError, match="must not be empty"):
            _make_state(true_table=[], commitment=TableCommitment(table_size=1, digest="x"))

    @pytest.mark.parametrize("bad", [0, -1, UINT32_MASK + 1])
    def test_out_of_range_entry_rejected(self, bad: int) -> None:
        with pytest.raises(ValidationError):
            _make_state(true_table=[5, bad, 1])

    @pytest.mark.parametrize("seed", [0, UINT32_MASK + 1])
    def test_out_of_range_seed_rejected(self, seed: int) -> None:
        with pytest.raises(ValidationError):
            _make_state(advancing_seed=seed)

    def test_commitment_size_must_match(self) -> None:
        with pytest.raises(ValidationError, match="commitment covers"):
            _make_state(commitment=TableCommitment(table_size=4, digest="abc"))

    def test_json_round_trip(self) -> None:
        state = _make_state(
            advancing_seed=3236502906,
            rolls=[RollRecord(
                index=0, true_throw=42, die_size=6,
                seed_before=1, result=5, seed_after=3236502906,
            )],
        )
        restored = SessionState.model_validate_json(state.model_dump_json())
        assert restored == state


class TestRollRecord:
    def test_result_above_die_rejected(self) -> None:
        with pytest.raises(ValidationError, match="exceeds die_size"):
            RollRecord(
                index=0, true_throw=1, die_size=6,
                seed_before=1, result=7, seed_after=2,
            )

    def test_zero_seed_rejected(self) -> None:
        with pytest.raises(ValidationError):
            RollRecord(
                index=0, true_throw=1, die_size=6,
                seed_before=0, result=1, seed_after=2,
            )


class TestStrictTable:
    @pytest.mark.parametrize("bad", ["5", 5.0])
    def test_non_int_entry_rejected(self, bad: object) -> None:
        with pytest.raises(ValidationError):
            _make_state(true_table=[bad, 1, 1])

    def test_string_entry_rejected_from_json(self) -> None:
        text = _make_state().model_dump_json().replace("[5,1,1]", '["5",1,1]')
        with pytest.raises(ValidationError):
            SessionState.model_validate_json(text)
