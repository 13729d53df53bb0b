"""Mass roll simulation for eyeballing the face distribution.

Builds a table, then rolls it ``roll_count`` times in sequence with
simulated player throws, carrying the advancing seed forward exactly as a
game server would.  Player throws come from a local ``random.Random``
instance, never the module-level generator.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING

import numpy as np

from true_roll.analysis.models import DistributionReport
from true_roll.core.checks import require_integer
from true_roll.core.commit import hash_true_table
from true_roll.core.errors import InvalidInputError
from true_roll.core.roll import throw_true_die
from true_roll.core.table import generate_true_roll

if TYPE_CHECKING:
    from true_roll.services.entropy import EntropySource

logger = logging.getLogger(__name__)

# Simulated player throws fall in [1, 2**31 - 1]
_MAX_SIMULATED_THROW = 2_147_483_647
_PROGRESS_EVERY = 1_000_000


def run_mass_test(
    roll_count: int,
    die_size: int,
    table_size: int,
    rng_seed: int | None = None,
    source: EntropySource | None = None,
) -> DistributionReport:
    """Roll a ``die_size``-sided die ``roll_count`` times and tally the faces.

    Parameters
    ----------
    roll_count:
        Number of sequential rolls.
    die_size:
        Faces on the die.
    table_size:
        Entries in the generated table.
    rng_seed:
        Seed for the simulated player throws.  ``None`` for a fresh seed.
    source:
        Entropy source for the table.  Defaults to the secure source.
    """
    if require_integer(roll_count, "roll_count") < 0:
        raise InvalidInputError(f"roll_count must be >= 0, got {roll_count}")
    if require_integer(die_size, "die_size") < 1:
        raise InvalidInputError(f"die_size must be >= 1, got {die_size}")

    true_table, advancing_seed = generate_true_roll(table_size, source)
    digest = hash_true_table(true_table)
    logger.debug("Mass test table digest %s", digest)

    player = random.Random(rng_seed)
    results = np.empty(roll_count, dtype=np.int64)
    for i in range(roll_count):
        true_throw = player.randint(1, _MAX_SIMULATED_THROW)
        roll, advancing_seed = throw_true_die(
            true_throw, die_size, true_table, advancing_seed,
        )
        results[i] = roll
        if (i + 1) % _PROGRESS_EVERY == 0:
            logger.debug("Mass test: %d/%d rolls", i + 1, roll_count)

    # Faces are 1-based; bincount slot 0 is always empty
    counts = np.bincount(results, minlength=die_size + 1)[1:]

    return DistributionReport(
        roll_count=roll_count,
        die_size=die_size,
        table_size=len(true_table),
        table_digest=digest,
        counts=[int(c) for c in counts],
    )
