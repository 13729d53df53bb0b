"""Pydantic v2 models for the persisted state of a TrueRoll game.

A game session needs exactly two things stored between rolls: the table
(write-once) and the advancing seed (replaced after every roll).  The roll
log and the commitment are kept alongside so the whole record can be
audited later.  All models are serializable to/from JSON.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, StrictInt, field_validator, model_validator

from true_roll.core.mixer import INITIAL_SEED, UINT32_MASK
from true_roll.services.hashing import HASH_ALGORITHM


class RollRecord(BaseModel):
    """One roll as it happened."""

    index: int = Field(ge=0)
    """0-based position of this roll in the session."""
    true_throw: int
    die_size: int = Field(ge=1)
    seed_before: int = Field(ge=1, le=UINT32_MASK)
    result: int = Field(ge=1)
    seed_after: int = Field(ge=1, le=UINT32_MASK)

    @model_validator(mode="after")
    def _result_within_die(self) -> RollRecord:
        if self.result > self.die_size:
            raise ValueError(
                f"result {self.result} exceeds die_size {self.die_size}"
            )
        return self


class TableCommitment(BaseModel):
    """What gets published to players before rolling starts."""

    table_size: int = Field(ge=1)
    digest: str
    algorithm: str = HASH_ALGORITHM


class SessionState(BaseModel):
    """Everything a caller persists for one game session."""

    session_id: str
    true_table: list[StrictInt]
    """Strict: strings and floats are rejected, as the engine rejects them."""
    advancing_seed: int = Field(default=INITIAL_SEED, ge=1, le=UINT32_MASK)
    commitment: TableCommitment
    rolls: list[RollRecord] = Field(default_factory=list)

    @field_validator("true_table")
    @classmethod
    def _validate_true_table(cls, v: list[int]) -> list[int]:
        if not v:
            raise ValueError("true_table must not be empty")
        for i, value in enumerate(v):
            if not 1 <= value <= UINT32_MASK:
                raise ValueError(
                    f"true_table[{i}] = {value} is outside [1, {UINT32_MASK}]"
                )
        return v

    @model_validator(mode="after")
    def _commitment_matches_table(self) -> SessionState:
        if self.commitment.table_size != len(self.true_table):
            raise ValueError(
                f"commitment covers {self.commitment.table_size} entries, "
                f"table has {len(self.true_table)}"
            )
        return self


class AuditMismatch(BaseModel):
    """A single disagreement between a recorded value and its replay."""

    roll_index: int | None
    """Index of the offending roll, ``None`` for table-level checks."""
    field: str
    """Which value disagreed (e.g. ``"result"``, ``"seed_after"``)."""
    expected: int | str
    """Recomputed value."""
    recorded: int | str
    """Value found in the session record."""


class AuditReport(BaseModel):
    """Outcome of replaying a session against its committed table."""

    session_id: str
    rolls_checked: int
    commitment_ok: bool
    mismatches: list[AuditMismatch] = Field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.commitment_ok and not self.mismatches
