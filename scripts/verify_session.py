"""Replay a saved session file and check it against its commitment.

Usage:
    uv run python scripts/verify_session.py session.json [--digest <published digest>]

Exits non-zero if any roll fails to replay or the digest does not match.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from true_roll.core.commit import verify_true_table
from true_roll.core.errors import InvalidInputError
from true_roll.services.hashing import hasher_for
from true_roll.session import SessionState, audit_session


def main() -> int:
    parser = argparse.ArgumentParser(description="Audit a TrueRoll session")
    parser.add_argument("path", type=str, help="Session JSON file")
    parser.add_argument(
        "--digest", type=str, default=None,
        help="Digest published before rolling (defaults to the one stored in the file)",
    )
    args = parser.parse_args()

    state = SessionState.model_validate_json(Path(args.path).read_text())

    try:
        hasher = hasher_for(state.commitment.algorithm)
    except InvalidInputError as exc:
        print(f"Cannot audit: {exc}")
        return 2

    ok = True
    if args.digest is not None and not verify_true_table(
        state.true_table, args.digest, hasher,
    ):
        print(f"Table does not match published digest {args.digest}")
        ok = False

    report = audit_session(state, hasher)
    print(f"Session {report.session_id}: {report.rolls_checked} rolls checked")
    for m in report.mismatches:
        where = "table" if m.roll_index is None else f"roll #{m.roll_index}"
        print(f"  {where}: {m.field} expected {m.expected!r}, recorded {m.recorded!r}")

    ok = ok and report.ok
    print("OK" if ok else "FAILED")
    return 0 if ok else 1


if __name__ == "__main__":
    sys.exit(main())
