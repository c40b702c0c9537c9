"""
Run outcome model.

Defines the aggregate outcome of a soak run: final counters plus the
per-trial results they were built from.
"""

from __future__ import annotations

from pydantic import BaseModel, Field, computed_field

from .counters import Counters
from .trial import TrialResult


class RunOutcome(BaseModel):
	"""
	Aggregate outcome of a soak run.

	Combines the final counters with the ordered list of trial results.
	"""

	trial_count: int
	counters: Counters = Field(default_factory=Counters)
	results: list[TrialResult] = Field(default_factory=list)

	@computed_field
	@property
	def any_failed(self) -> bool:
		"""True when at least one trial failed or timed out."""
		return (self.counters.failure_count + self.counters.timeout_count) > 0

	@computed_field
	@property
	def is_flaky(self) -> bool:
		"""True when the same command both passed and did not pass."""
		return self.counters.success_count > 0 and self.any_failed

	@computed_field
	@property
	def failure_rate(self) -> float:
		if self.counters.total == 0:
			return 0.0
		return (self.counters.failure_count +
		        self.counters.timeout_count) / self.counters.total

	@computed_field
	@property
	def failed_indices(self) -> list[int]:
		return [r.index for r in self.results if not r.succeeded]


__all__ = ["RunOutcome"]
