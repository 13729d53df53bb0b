"""Default hash service for table commitments."""

from __future__ import annotations

import hashlib
from collections.abc import Callable

from true_roll.core.errors import InvalidInputError

HASH_ALGORITHM = "sha256"


def sha256_hex(data: bytes) -> str:
    """Return the lowercase hex SHA-256 digest of *data*."""
    return hashlib.sha256(data).hexdigest()


def hasher_for(algorithm: str) -> Callable[[bytes], str]:
    """Return a hex-digest hash service for a ``hashlib`` algorithm name.

    Raises :class:`InvalidInputError` for names ``hashlib`` does not know
    and for variable-length digests (``shake_*``), which have no fixed hex form.
    """
    name = algorithm.lower()
    if name == HASH_ALGORITHM:
        return sha256_hex
    if name not in hashlib.algorithms_available or name.startswith("shake_"):
        raise InvalidInputError(
            f"no fixed-length hashlib algorithm named {algorithm!r}; "
            "pass the hasher used at commitment time explicitly"
        )

    def _hex_digest(data: bytes) -> str:
        return hashlib.new(name, data).hexdigest()

    return _hex_digest
