import pytest
from pydantic import ValidationError

from flake_soak.core.aggregator import ResultAggregator
from flake_soak.models.counters import Counters
from flake_soak.models.trial import TrialOutcome


def test_aggregator_starts_zeroed():
	agg = ResultAggregator()
	snap = agg.snapshot()
	assert snap == Counters()
	assert snap.total == 0


def test_record_increments_exactly_one_counter():
	agg = ResultAggregator()
	c = agg.record(TrialOutcome.SUCCESS)
	assert (c.success_count, c.failure_count, c.timeout_count) == (1, 0, 0)
	c = agg.record(TrialOutcome.FAILURE)
	assert (c.success_count, c.failure_count, c.timeout_count) == (1, 1, 0)
	c = agg.record(TrialOutcome.TIMEOUT)
	assert (c.success_count, c.failure_count, c.timeout_count) == (1, 1, 1)
	assert agg.snapshot() == c


def test_total_tracks_recorded_trials():
	agg = ResultAggregator()
	outcomes = [TrialOutcome.SUCCESS, TrialOutcome.FAILURE] * 5
	for i, outcome in enumerate(outcomes, start=1):
		assert agg.record(outcome).total == i


def test_snapshot_is_not_affected_by_later_records():
	agg = ResultAggregator()
	before = agg.snapshot()
	agg.record(TrialOutcome.FAILURE)
	assert before.failure_count == 0
	assert agg.snapshot().failure_count == 1


def test_record_accepts_outcome_value_string():
	agg = ResultAggregator()
	assert agg.record("success").success_count == 1


def test_counters_are_frozen():
	c = Counters()
	with pytest.raises(ValidationError):
		c.success_count = 5


def test_counters_reject_negative():
	with pytest.raises(ValidationError):
		Counters(failure_count=-1)
