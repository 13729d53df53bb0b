"""The roll engine: one die roll as a pure state transition.

A roll takes the player's throw, the die size, the committed table and the
current advancing seed, and returns the face together with the next seed.
Nothing else is read or written, so anyone holding the table and the
recorded throws can replay a whole game.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from true_roll.core.checks import require_integer, require_sequence
from true_roll.core.errors import InvalidInputError
from true_roll.core.mixer import (
    THROW_MASK,
    UINT32_MASK,
    nonzero,
    to_uint32,
    xorshift32_strong,
)


def throw_true_die(
    true_throw: int,
    die_size: int,
    true_table: Sequence[Any],
    advancing_seed: int,
) -> tuple[int, int]:
    """Roll a ``die_size``-sided die.

    Parameters
    ----------
    true_throw:
        Player-supplied entropy for this roll.  Reduced modulo ``2**32``.
    die_size:
        Number of faces, ``>= 1``.
    true_table:
        The committed table from :func:`~true_roll.core.table.initialize_true_roll`.
    advancing_seed:
        Current seed, in ``[1, 2**32 - 1]``.

    Returns
    -------
    tuple
        ``(result, new_seed)`` with ``1 <= result <= die_size``.  The caller
        must persist ``new_seed`` before the next roll.
    """
    table = require_sequence(true_table, "true_table")
    seed = require_integer(advancing_seed, "advancing_seed")
    if not 1 <= seed <= UINT32_MASK:
        raise InvalidInputError(
            f"advancing_seed must be in [1, {UINT32_MASK}], got {seed}"
        )
    faces = require_integer(die_size, "die_size")
    if faces < 1:
        raise InvalidInputError(f"die_size must be >= 1, got {faces}")
    throw = require_integer(true_throw, "true_throw")

    entry = require_integer(table[seed % len(table)], "true_table entry")

    # Decorrelate patterned player input from the combined seed
    mix = to_uint32(throw) ^ THROW_MASK

    combined = nonzero(to_uint32(entry + mix + seed))
    advanced = xorshift32_strong(combined)

    # floor(advanced / 2**32 * faces), computed without float rounding
    result = ((advanced * faces) >> 32) + 1

    return result, advanced
