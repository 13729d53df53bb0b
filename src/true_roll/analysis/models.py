"""Pydantic v2 model for roll distribution results."""

from __future__ import annotations

from pydantic import BaseModel, computed_field, model_validator


class DistributionReport(BaseModel):
    """Face counts from a batch of sequential rolls on one table."""

    roll_count: int
    die_size: int
    table_size: int
    table_digest: str
    """Commitment of the table the rolls were made on."""
    counts: list[int]
    """counts[i] is the number of times face ``i + 1`` came up."""

    @model_validator(mode="after")
    def _counts_cover_every_face(self) -> DistributionReport:
        if len(self.counts) != self.die_size:
            raise ValueError(
                f"expected {self.die_size} face counts, got {len(self.counts)}"
            )
        if sum(self.counts) != self.roll_count:
            raise ValueError("face counts do not add up to roll_count")
        return self

    @computed_field  # type: ignore[prop-decorator]
    @property
    def percentages(self) -> list[float]:
        """Share of rolls per face, in percent."""
        if self.roll_count == 0:
            return [0.0] * self.die_size
        return [c * 100 / self.roll_count for c in self.counts]

    @computed_field  # type: ignore[prop-decorator]
    @property
    def max_deviation_pct(self) -> float:
        """Largest absolute gap, in percentage points, from a uniform share."""
        if self.roll_count == 0:
            return 0.0
        expected = 100 / self.die_size
        return max(abs(p - expected) for p in self.percentages)
