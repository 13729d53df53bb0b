"""Roll a die many times on a fresh table and print the face distribution.

Usage:
    uv run python scripts/mass_test.py [--rolls 10000000] [--die 6] [--table-size 64] [--plot out.png]
"""

from __future__ import annotations

import argparse
import logging
import time
from pathlib import Path

from true_roll.analysis import generate_text_report, run_mass_test
from true_roll.analysis.models import DistributionReport
from true_roll.services.entropy import XorshiftEntropySource


def plot_distribution(report: DistributionReport, path: Path) -> None:
    import matplotlib
    matplotlib.use("Agg")
    import matplotlib.pyplot as plt

    faces = list(range(1, report.die_size + 1))
    fig, ax = plt.subplots(figsize=(8, 4))
    ax.bar(faces, report.percentages, color="#4c72b0")
    ax.axhline(100 / report.die_size, color="red", linestyle="--", label="uniform")
    ax.set_xlabel("Face")
    ax.set_ylabel("Share of rolls (%)")
    ax.set_title(f"d{report.die_size}, {report.roll_count:,} rolls")
    ax.set_xticks(faces)
    ax.legend()
    fig.tight_layout()
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path)
    plt.close(fig)


def main() -> None:
    parser = argparse.ArgumentParser(description="TrueRoll distribution mass test")
    parser.add_argument("--rolls", type=int, default=10_000_000, help="Number of rolls")
    parser.add_argument("--die", type=int, default=6, help="Faces on the die")
    parser.add_argument("--table-size", type=int, default=64, help="Entries in the table")
    parser.add_argument("--seed", type=int, default=None, help="Seed for simulated throws")
    parser.add_argument(
        "--table-seed", type=int, default=None,
        help="Build the table from a deterministic xorshift source instead of secure randomness",
    )
    parser.add_argument("--plot", type=str, default=None, help="Write a bar chart PNG here")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log progress")
    args = parser.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    source = None
    if args.table_seed is not None:
        source = XorshiftEntropySource(args.table_seed)

    print(f"Rolling {args.rolls:,} times on d{args.die}...")
    t0 = time.perf_counter()
    report = run_mass_test(
        args.rolls, args.die, args.table_size, rng_seed=args.seed, source=source,
    )
    elapsed = time.perf_counter() - t0
    print(f"Done in {elapsed:.1f}s")
    print()
    print(generate_text_report(report))

    if args.plot:
        plot_path = Path(args.plot)
        plot_distribution(report, plot_path)
        print(f"\nSaved plot to {plot_path}")


if __name__ == "__main__":
    main()
