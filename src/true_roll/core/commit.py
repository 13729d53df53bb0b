"""Table commitment: a publishable digest of the *trueTable*.

The table is serialized as canonical decimal integers joined by commas
(``"5,1,1"``) and handed to the hash service.  Players receive the digest
before the first roll and can later check it against the revealed table.
"""

from __future__ import annotations

import hmac
from collections.abc import Callable, Sequence
from typing import Any

from true_roll.core.checks import is_integer, require_sequence
from true_roll.core.errors import InvalidInputError
from true_roll.services.hashing import sha256_hex

TABLE_DELIMITER = ","

Hasher = Callable[[bytes], str]


def serialize_true_table(true_table: Sequence[Any]) -> bytes:
    """Return the canonical byte encoding of *true_table*."""
    table = require_sequence(true_table, "true_table")
    parts: list[str] = []
    for i, value in enumerate(table):
        if not is_integer(value):
            raise InvalidInputError(
                f"true_table must contain only integers, got {value!r} at index {i}"
            )
        parts.append(str(int(value)))
    return TABLE_DELIMITER.join(parts).encode("ascii")


def hash_true_table(true_table: Sequence[Any], hasher: Hasher = sha256_hex) -> str:
    """Hash the serialized table with *hasher* and return its digest unchanged."""
    return hasher(serialize_true_table(true_table))


def verify_true_table(
    true_table: Sequence[Any],
    digest: str,
    hasher: Hasher = sha256_hex,
) -> bool:
    """True if *true_table* hashes to the published *digest*."""
    return digests_match(hash_true_table(true_table, hasher), digest)


def digests_match(computed: str, published: str) -> bool:
    """Constant-time comparison of two digest strings."""
    return hmac.compare_digest(computed.encode("utf-8"), published.encode("utf-8"))
