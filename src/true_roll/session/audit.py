"""Independent replay of a recorded session.

Given the revealed table and the recorded throws, every roll can be
recomputed from seed ``1``.  Any difference in results, seed chaining, or
the table digest means the record was altered.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence

from true_roll.core.commit import Hasher, digests_match, hash_true_table
from true_roll.core.errors import AuditMismatchError
from true_roll.core.mixer import INITIAL_SEED
from true_roll.core.roll import throw_true_die
from true_roll.services.hashing import hasher_for
from true_roll.session.models import AuditMismatch, AuditReport, RollRecord, SessionState

logger = logging.getLogger(__name__)


def replay_rolls(
    true_table: Sequence[int],
    throws: Iterable[tuple[int, int]],
    initial_seed: int = INITIAL_SEED,
) -> list[RollRecord]:
    """Recompute a chain of rolls from ``(true_throw, die_size)`` pairs."""
    records: list[RollRecord] = []
    seed = initial_seed
    for index, (true_throw, die_size) in enumerate(throws):
        result, new_seed = throw_true_die(true_throw, die_size, true_table, seed)
        records.append(RollRecord(
            index=index,
            true_throw=true_throw,
            die_size=die_size,
            seed_before=seed,
            result=result,
            seed_after=new_seed,
        ))
        seed = new_seed
    return records


def audit_session(state: SessionState, hasher: Hasher | None = None) -> AuditReport:
    """Check the commitment and replay every recorded roll.

    *hasher* defaults to the ``hashlib`` algorithm named in the stored
    commitment.  Sessions committed with a non-hashlib hasher must pass it
    explicitly.

    Replay continues past a mismatch using the recomputed seed, so the
    report lists every disagreement rather than just the first.
    """
    if hasher is None:
        hasher = hasher_for(state.commitment.algorithm)

    mismatches: list[AuditMismatch] = []

    digest = hash_true_table(state.true_table, hasher)
    commitment_ok = digests_match(digest, state.commitment.digest)
    if not commitment_ok:
        mismatches.append(AuditMismatch(
            roll_index=None,
            field="digest",
            expected=digest,
            recorded=state.commitment.digest,
        ))

    seed = INITIAL_SEED
    for position, record in enumerate(state.rolls):
        if record.index != position:
            mismatches.append(AuditMismatch(
                roll_index=position, field="index",
                expected=position, recorded=record.index,
            ))
        if record.seed_before != seed:
            mismatches.append(AuditMismatch(
                roll_index=position, field="seed_before",
                expected=seed, recorded=record.seed_before,
            ))

        result, seed = throw_true_die(
            record.true_throw, record.die_size, state.true_table, seed,
        )
        if record.result != result:
            mismatches.append(AuditMismatch(
                roll_index=position, field="result",
                expected=result, recorded=record.result,
            ))
        if record.seed_after != seed:
            mismatches.append(AuditMismatch(
                roll_index=position, field="seed_after",
                expected=seed, recorded=record.seed_after,
            ))

    if state.advancing_seed != seed:
        mismatches.append(AuditMismatch(
            roll_index=None, field="advancing_seed",
            expected=seed, recorded=state.advancing_seed,
        ))

    for m in mismatches:
        logger.warning(
            "Session %s audit mismatch at roll %s: %s expected %r, recorded %r",
            state.session_id, m.roll_index, m.field, m.expected, m.recorded,
        )

    return AuditReport(
        session_id=state.session_id,
        rolls_checked=len(state.rolls),
        commitment_ok=commitment_ok,
        mismatches=mismatches,
    )


def verify_session(state: SessionState, hasher: Hasher | None = None) -> AuditReport:
    """Like :func:`audit_session`, but raise on the first mismatch."""
    report = audit_session(state, hasher)
    if report.mismatches:
        first = report.mismatches[0]
        raise AuditMismatchError(
            f"{first.field} mismatch: expected {first.expected!r}, "
            f"recorded {first.recorded!r}",
            roll_index=first.roll_index,
        )
    return report
