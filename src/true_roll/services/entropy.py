"""Random value sources used to fill a new *trueTable*.

The engine never draws randomness itself.  A source produces the raw
32-bit values once, at table creation:

- **SecureEntropySource**: cryptographically secure values from ``secrets``.
  Use this in production.
- **XorshiftEntropySource**: deterministic values from an explicit seed.
  For local testing and reproducible simulations only.
"""

from __future__ import annotations

import secrets
from typing import Protocol, runtime_checkable

from true_roll.core.checks import require_integer
from true_roll.core.errors import InvalidInputError
from true_roll.core.mixer import nonzero, to_uint32, xorshift32


@runtime_checkable
class EntropySource(Protocol):
    """Anything that can produce *count* unsigned 32-bit values."""

    def random_values(self, count: int) -> list[int]: ...


def _check_count(count: int) -> int:
    n = require_integer(count, "count")
    if n < 0:
        raise InvalidInputError(f"count must be >= 0, got {n}")
    return n


class SecureEntropySource:
    """Secure 32-bit values from the operating system's CSPRNG."""

    def random_values(self, count: int) -> list[int]:
        return [secrets.randbits(32) for _ in range(_check_count(count))]

    def __repr__(self) -> str:
        return "SecureEntropySource()"


class XorshiftEntropySource:
    """Deterministic source driven by single-pass xorshift32.

    The state belongs to the instance, so two sources with the same seed
    always yield the same stream and never disturb each other.

    Parameters
    ----------
    seed:
        Starting state.  Reduced modulo ``2**32``; ``0`` becomes ``1``.
    """

    def __init__(self, seed: int) -> None:
        self._seed = seed
        self._state = nonzero(to_uint32(seed))

    @property
    def seed(self) -> int:
        """Return the seed this source was initialised with."""
        return self._seed

    def next_value(self) -> int:
        """Advance the state and return it."""
        self._state = xorshift32(self._state)
        return self._state

    def random_values(self, count: int) -> list[int]:
        return [self.next_value() for _ in range(_check_count(count))]

    def __repr__(self) -> str:
        return f"XorshiftEntropySource(seed={self._seed})"
