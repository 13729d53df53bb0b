"""Building the committed random table (the *trueTable*).

The table is the only server-side randomness in a game.  It is generated
once, hashed for publication, and read-only afterwards.  The starting seed
is always ``1``: all secrecy lives in the table and in future player
input, so a predictable seed is harmless.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from true_roll.core.checks import is_integer, require_integer, require_sequence
from true_roll.core.errors import InvalidInputError
from true_roll.core.mixer import INITIAL_SEED, nonzero, to_uint32

if TYPE_CHECKING:
    from true_roll.services.entropy import EntropySource

TrueTable = tuple[int, ...]


def initialize_true_roll(rand_values: Sequence[Any]) -> tuple[TrueTable, int]:
    """Normalize externally supplied random values into a table.

    Each value is reduced modulo ``2**32`` and a resulting ``0`` is
    replaced with ``1``.

    Returns
    -------
    tuple
        ``(true_table, initial_seed)`` where ``initial_seed`` is always ``1``.

    Raises
    ------
    InvalidInputError
        If *rand_values* is empty, not a sequence, or holds a non-integer.
    """
    values = require_sequence(rand_values, "rand_values")

    table: list[int] = []
    for i, num in enumerate(values):
        if not is_integer(num):
            raise InvalidInputError(
                f"rand_values must contain only integers, got {num!r} at index {i}"
            )
        table.append(nonzero(to_uint32(int(num))))

    return tuple(table), INITIAL_SEED


def generate_true_roll(
    table_size: int,
    source: EntropySource | None = None,
) -> tuple[TrueTable, int]:
    """Draw *table_size* random values from *source* and build a table.

    Defaults to :class:`~true_roll.services.entropy.SecureEntropySource`.
    """
    size = require_integer(table_size, "table_size")
    if size < 1:
        raise InvalidInputError(f"table_size must be >= 1, got {size}")

    if source is None:
        from true_roll.services.entropy import SecureEntropySource

        source = SecureEntropySource()

    return initialize_true_roll(source.random_values(size))
