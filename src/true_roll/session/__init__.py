"""Session state, persistence models, and audit replay."""

from true_roll.session.audit import audit_session, replay_rolls, verify_session
from true_roll.session.manager import TrueRollSession
from true_roll.session.models import (
    AuditMismatch,
    AuditReport,
    RollRecord,
    SessionState,
    TableCommitment,
)

__all__ = [
    "AuditMismatch",
    "AuditReport",
    "RollRecord",
    "SessionState",
    "TableCommitment",
    "TrueRollSession",
    "audit_session",
    "replay_rolls",
    "verify_session",
]
