"""External collaborators: random value sources and the hash service."""

from true_roll.services.entropy import (
    EntropySource,
    SecureEntropySource,
    XorshiftEntropySource,
)
from true_roll.services.hashing import HASH_ALGORITHM, hasher_for, sha256_hex

__all__ = [
    "EntropySource",
    "HASH_ALGORITHM",
    "SecureEntropySource",
    "XorshiftEntropySource",
    "hasher_for",
    "sha256_hex",
]
