"""Distribution analysis: mass roll simulation and reports."""

from true_roll.analysis.distribution import run_mass_test
from true_roll.analysis.models import DistributionReport
from true_roll.analysis.report import generate_text_report

__all__ = [
    "DistributionReport",
    "generate_text_report",
    "run_mass_test",
]
