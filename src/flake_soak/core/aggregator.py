"""Running tallies of trial outcomes."""

from __future__ import annotations

from flake_soak.models.counters import Counters
from flake_soak.models.trial import TrialOutcome


class ResultAggregator:
	"""
	Owns the Counters for one run.

	`record` must be called exactly once per completed trial, in trial
	order.
	"""

	def __init__(self) -> None:
		self._counters = Counters()

	def record(self, outcome: TrialOutcome) -> Counters:
		"""Count one outcome and return the updated counters."""
		self._counters = self._counters.incremented(TrialOutcome(outcome))
		return self._counters

	def snapshot(self) -> Counters:
		"""Return the current counters without changing them."""
		return self._counters


__all__ = ["ResultAggregator"]
