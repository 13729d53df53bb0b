"""Text rendering for distribution reports."""

from __future__ import annotations

from true_roll.analysis.models import DistributionReport


def generate_text_report(report: DistributionReport) -> str:
    """Render a per-face table with an ``x`` bar at 2x scale."""
    lines: list[str] = []

    lines.append("=== TrueRoll Mass Test ===")
    lines.append(f"Table hash: {report.table_digest}")
    lines.append(
        f"Rolled {report.roll_count:,} times on d{report.die_size}"
        f" ({report.table_size}-entry table)"
    )

    lines.append("=== TrueRoll Distribution ===")
    for face, (count, percent) in enumerate(
        zip(report.counts, report.percentages), start=1,
    ):
        bar = "x" * int(percent * 2)
        lines.append(f"Face {face:2d}: {count:6d} rolls ({percent:5.2f}%) {bar}")

    lines.append(f"Max deviation from uniform: {report.max_deviation_pct:.3f} pts")
    lines.append("=== End of Test ===")
    return "\n".join(lines)
