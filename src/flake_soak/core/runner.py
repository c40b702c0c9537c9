"""
Run controller.

Drives the soak loop: for each trial it reports progress, executes the
target once and records the outcome, then prints the final summary.
Trials are strictly sequential; trial i is recorded before trial i+1
starts.
"""

from __future__ import annotations

from enum import Enum

from flake_soak.core.aggregator import ResultAggregator
from flake_soak.core.executor import Executor, execute, resolve_command
from flake_soak.models.config import RunConfig
from flake_soak.models.run_outcome import RunOutcome
from flake_soak.models.trial import TrialResult
from flake_soak.ui.reporter import ProgressReporter
from flake_soak.utils.logging import get_logger

logger = get_logger(__name__)


class RunState(str, Enum):
	"""
	Lifecycle states for a run.

	NOT_STARTED: Counters zeroed, nothing executed.
	RUNNING: A trial is in flight or about to start.
	COMPLETED: All configured trials executed and summarized.
	"""

	NOT_STARTED = "not_started"
	RUNNING = "running"
	COMPLETED = "completed"


class RunController:
	"""Owns one soak run from start to summary."""

	def __init__(
	    self,
	    config: RunConfig,
	    executor: Executor = execute,
	    reporter: ProgressReporter | None = None,
	):
		self.config = config
		self.executor = executor
		self.reporter = reporter or ProgressReporter()
		self.aggregator = ResultAggregator()
		self.state = RunState.NOT_STARTED
		self.current_index = 0
		self.results: list[TrialResult] = []

	async def run(self) -> RunOutcome:
		"""
		Execute every configured trial and report the summary.

		A failed or timed-out trial is counted and the loop continues;
		only a HarnessError stops the run.

		Returns:
			RunOutcome with the final counters and per-trial results.

		Raises:
			HarnessError: If the command is empty or no process can be spawned.
			RuntimeError: If this controller has already run.
		"""
		if self.state is not RunState.NOT_STARTED:
			raise RuntimeError(f"run already {self.state.value}")
		cfg = self.config
		command = resolve_command(cfg.command)
		logger.info("soak start trials=%d command=%s timeout=%s",
		            cfg.trial_count, command, cfg.timeout_seconds)

		self.state = RunState.RUNNING
		for i in range(1, cfg.trial_count + 1):
			self.current_index = i
			self.reporter.report_progress(i, self.aggregator.snapshot())
			result = await self.executor(command, index=i,
			                             timeout=cfg.timeout_seconds)
			counters = self.aggregator.record(result.outcome)
			self.results.append(result)
			if result.succeeded:
				logger.debug("trial %d succeeded in %.2fs", i,
				             result.duration_seconds)
			else:
				logger.warning(
				    "trial %d %s rc=%s signal=%s (%d/%d not passing so far)",
				    i,
				    result.outcome.value,
				    result.return_code,
				    result.signal_name,
				    counters.failure_count + counters.timeout_count,
				    counters.total,
				)

		self.state = RunState.COMPLETED
		counters = self.aggregator.snapshot()
		outcome = RunOutcome(
		    trial_count=cfg.trial_count,
		    counters=counters,
		    results=list(self.results),
		)
		self.reporter.report_summary(cfg.trial_count, counters,
		                             outcome.failed_indices)
		logger.info("soak done trials=%d success=%d failure=%d timeout=%d",
		            cfg.trial_count, counters.success_count,
		            counters.failure_count, counters.timeout_count)
		return outcome


async def run_soak(
    config: RunConfig,
    reporter: ProgressReporter | None = None,
) -> RunOutcome:
	"""Run a soak with the default executor."""
	return await RunController(config, reporter=reporter).run()


__all__ = ["RunController", "RunState", "run_soak"]
