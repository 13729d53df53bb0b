"""Caller-side session wrapper around the stateless engine.

The engine functions in :mod:`true_roll.core` never hold state.  A
:class:`TrueRollSession` is the thin layer a game server keeps per game: it
owns a :class:`SessionState`, performs the read-modify-write of the
advancing seed under a lock, and records every roll for later audit.
"""

from __future__ import annotations

import logging
import threading
import uuid
from typing import TYPE_CHECKING

from true_roll.core.commit import Hasher, hash_true_table
from true_roll.core.roll import throw_true_die
from true_roll.core.table import generate_true_roll
from true_roll.services.hashing import HASH_ALGORITHM, hasher_for
from true_roll.session.models import RollRecord, SessionState, TableCommitment

if TYPE_CHECKING:
    from true_roll.services.entropy import EntropySource

logger = logging.getLogger(__name__)


class TrueRollSession:
    """One game's table, seed, and roll history.

    Parameters
    ----------
    state:
        Persisted session state, e.g. loaded with :meth:`from_json`.
    """

    def __init__(self, state: SessionState) -> None:
        self._state = state
        self._lock = threading.Lock()

    # -- construction --------------------------------------------------------

    @classmethod
    def start(
        cls,
        table_size: int = 64,
        source: EntropySource | None = None,
        session_id: str | None = None,
        hasher: Hasher | None = None,
        algorithm: str = HASH_ALGORITHM,
    ) -> TrueRollSession:
        """Create a fresh session with a new table and seed ``1``.

        The commitment is hashed with *hasher* if given, otherwise with the
        ``hashlib`` algorithm named by *algorithm*.  A custom *hasher* should
        come with its own *algorithm* label.
        """
        if hasher is None:
            hasher = hasher_for(algorithm)
        true_table, seed = generate_true_roll(table_size, source)
        commitment = TableCommitment(
            table_size=len(true_table),
            digest=hash_true_table(true_table, hasher),
            algorithm=algorithm,
        )
        state = SessionState(
            session_id=session_id or uuid.uuid4().hex,
            true_table=list(true_table),
            advancing_seed=seed,
            commitment=commitment,
        )
        logger.info(
            "Started session %s with %d-entry table (digest %s)",
            state.session_id, len(true_table), commitment.digest,
        )
        return cls(state)

    @classmethod
    def from_json(cls, text: str) -> TrueRollSession:
        """Restore a session from :meth:`to_json` output."""
        return cls(SessionState.model_validate_json(text))

    # -- public properties ---------------------------------------------------

    @property
    def state(self) -> SessionState:
        """A deep copy of the session state.  Mutating it does not affect the session."""
        with self._lock:
            return self._state.model_copy(deep=True)

    @property
    def session_id(self) -> str:
        return self._state.session_id

    @property
    def commitment(self) -> TableCommitment:
        """The commitment to publish before the first roll."""
        return self._state.commitment.model_copy()

    @property
    def advancing_seed(self) -> int:
        return self._state.advancing_seed

    @property
    def rolls(self) -> list[RollRecord]:
        with self._lock:
            return [r.model_copy() for r in self._state.rolls]

    # -- rolling -------------------------------------------------------------

    def roll(self, true_throw: int, die_size: int) -> RollRecord:
        """Roll once and advance the stored seed.

        Raises :class:`~true_roll.core.errors.InvalidInputError` for bad
        arguments, in which case the session is left unchanged.
        """
        with self._lock:
            seed_before = self._state.advancing_seed
            result, seed_after = throw_true_die(
                true_throw, die_size, self._state.true_table, seed_before,
            )
            record = RollRecord(
                index=len(self._state.rolls),
                true_throw=int(true_throw),
                die_size=int(die_size),
                seed_before=seed_before,
                result=result,
                seed_after=seed_after,
            )
            self._state.rolls.append(record)
            self._state.advancing_seed = seed_after

        logger.debug(
            "Session %s roll #%d: d%d -> %d (seed %d -> %d)",
            self.session_id, record.index, die_size, result, seed_before, seed_after,
        )
        return record

    # -- persistence ---------------------------------------------------------

    def to_json(self, indent: int | None = None) -> str:
        """Serialize the full session state."""
        with self._lock:
            return self._state.model_dump_json(indent=indent)

    def __repr__(self) -> str:
        return (
            f"TrueRollSession(session_id={self.session_id!r}, "
            f"rolls={len(self._state.rolls)})"
        )
