"""
Running counters model.

Immutable snapshot of trial tallies; the aggregator replaces it on
every recorded outcome.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .trial import TrialOutcome

_FIELD_FOR_OUTCOME = {
    TrialOutcome.SUCCESS: "success_count",
    TrialOutcome.FAILURE: "failure_count",
    TrialOutcome.TIMEOUT: "timeout_count",
}


class Counters(BaseModel):
	"""Tallies of trial outcomes."""

	model_config = ConfigDict(frozen=True)

	success_count: int = Field(0, ge=0)
	failure_count: int = Field(0, ge=0)
	timeout_count: int = Field(0, ge=0)

	@property
	def total(self) -> int:
		return self.success_count + self.failure_count + self.timeout_count

	def incremented(self, outcome: TrialOutcome) -> "Counters":
		"""Return a copy with the counter for `outcome` bumped by one."""
		name = _FIELD_FOR_OUTCOME[outcome]
		return self.model_copy(update={name: getattr(self, name) + 1})


__all__ = ["Counters"]
