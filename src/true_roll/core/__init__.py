"""Core TrueRoll engine: table setup, seed mixing, rolls, and commitments."""

from true_roll.core.commit import (
    digests_match,
    hash_true_table,
    serialize_true_table,
    verify_true_table,
)
from true_roll.core.errors import AuditMismatchError, InvalidInputError, TrueRollError
from true_roll.core.mixer import (
    INITIAL_SEED,
    THROW_MASK,
    UINT32_MASK,
    UINT32_MODULUS,
    to_uint32,
    xorshift32,
    xorshift32_strong,
)
from true_roll.core.roll import throw_true_die
from true_roll.core.table import TrueTable, generate_true_roll, initialize_true_roll

__all__ = [
    # errors
    "TrueRollError",
    "InvalidInputError",
    "AuditMismatchError",
    # mixer
    "INITIAL_SEED",
    "THROW_MASK",
    "UINT32_MASK",
    "UINT32_MODULUS",
    "to_uint32",
    "xorshift32",
    "xorshift32_strong",
    # table
    "TrueTable",
    "initialize_true_roll",
    "generate_true_roll",
    # roll
    "throw_true_die",
    # commit
    "digests_match",
    "serialize_true_table",
    "hash_true_table",
    "verify_true_table",
]
