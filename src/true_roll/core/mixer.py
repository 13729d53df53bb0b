"""32-bit arithmetic helpers and the xorshift seed mixers.

All values handled here are unsigned 32-bit integers stored in Python
``int``.  Every shift is masked back to 32 bits so the results match a
fixed-width implementation bit for bit.
"""

from __future__ import annotations

UINT32_MODULUS = 1 << 32
UINT32_MASK = UINT32_MODULUS - 1

# Protocol constants.  Changing either breaks replay of existing games.
THROW_MASK = 0xA5A5A5A5
INITIAL_SEED = 1


def to_uint32(value: int) -> int:
    """Reduce *value* modulo ``2**32`` (negative values wrap around)."""
    return value % UINT32_MODULUS


def nonzero(value: int) -> int:
    """Return *value*, or ``1`` if it is zero.

    Zero is a fixed point of xorshift, so it must never become a state.
    """
    return value if value != 0 else 1


def xorshift32(seed: int) -> int:
    """Single-pass xorshift32 (13/17/5).

    Only used by the deterministic local entropy source, never by the
    roll engine.
    """
    x = seed & UINT32_MASK
    x ^= (x << 13) & UINT32_MASK
    x ^= x >> 17
    x ^= (x << 5) & UINT32_MASK
    return nonzero(x & UINT32_MASK)


def xorshift32_strong(seed: int) -> int:
    """Advance *seed* with two chained xorshift passes.

    The first pass is the classic 13/17/5 triple, the second a 7/11 pair
    for extra diffusion.  The result is never ``0``.
    """
    x = seed & UINT32_MASK

    x ^= (x << 13) & UINT32_MASK
    x ^= x >> 17
    x ^= (x << 5) & UINT32_MASK
    x &= UINT32_MASK

    x ^= (x << 7) & UINT32_MASK
    x ^= x >> 11
    x &= UINT32_MASK

    return nonzero(x)
