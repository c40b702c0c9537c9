"""
Progress and summary reporting.

Prints one line before every trial and a summary once the run is done.
Lines go through a Rich console with markup and highlighting disabled so
the text is emitted exactly as formatted.
"""

from __future__ import annotations

from typing import Sequence

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from flake_soak.models.counters import Counters
from flake_soak.models.trial import TrialOutcome


def format_progress(trial_index: int, counters: Counters) -> str:
	"""Format the line printed before trial `trial_index` runs."""
	line = (f"Run {trial_index}, {counters.success_count} success and "
	        f"{counters.failure_count} failed")
	if counters.timeout_count:
		line += f", {counters.timeout_count} timed out"
	return line


def format_summary(total_trials: int, counters: Counters) -> str:
	"""Format the final tally line."""
	line = (f"{total_trials} runs, {counters.success_count} successes and "
	        f"{counters.failure_count} failures")
	if counters.timeout_count:
		line += f", {counters.timeout_count} timeouts"
	return line


class ProgressReporter:
	"""Presentation layer for a soak run; never mutates counters."""

	def __init__(self, console: Console | None = None,
	             show_table: bool = False):
		self.console = console or Console(
		    highlight=False,
		    markup=False,
		    emoji=False,
		    soft_wrap=True,
		)
		self.show_table = show_table

	def _line(self, text: str) -> None:
		self.console.print(text, markup=False, highlight=False, emoji=False,
		                   soft_wrap=True)

	def report_progress(self, trial_index: int, counters: Counters) -> None:
		"""Print the pre-trial line; `counters` reflect prior trials only."""
		self._line(format_progress(trial_index, counters))

	def report_summary(
	    self,
	    total_trials: int,
	    counters: Counters,
	    failed_indices: Sequence[int] | None = None,
	) -> None:
		"""
		Print the final summary.

		Parameters:
			total_trials: Number of trials executed.
			counters: Final counters.
			failed_indices: Indices of trials that did not pass, listed
				under the optional table.

		Raises:
			ValueError: If the counters do not add up to `total_trials`.
		"""
		if counters.total != total_trials:
			raise ValueError(f"counters cover {counters.total} trials, "
			                 f"expected {total_trials}")
		self._line("")
		self._line("DONE")
		self._line(format_summary(total_trials, counters))
		if self.show_table:
			self.console.print(self._render_table(counters))
			if failed_indices:
				self._line("Failed trials: " +
				           ", ".join(str(i) for i in failed_indices))

	def _render_table(self, counters: Counters) -> Table:
		"""Render outcome counts and rates."""
		table = Table(title="Soak Results", show_header=True, box=box.ROUNDED)
		table.add_column("Outcome")
		table.add_column("Count", justify="right")
		table.add_column("Rate", justify="right")

		total = counters.total
		rows = [
		    (TrialOutcome.SUCCESS, counters.success_count, "green"),
		    (TrialOutcome.FAILURE, counters.failure_count, "red"),
		    (TrialOutcome.TIMEOUT, counters.timeout_count, "yellow"),
		]
		for outcome, count, style in rows:
			rate = (count / total * 100) if total else 0.0
			table.add_row(
			    Text(outcome.value, style=style),
			    str(count),
			    f"{rate:.1f}%",
			)
		table.add_row("total", str(total), "", style="bold")
		return table


__all__ = ["ProgressReporter", "format_progress", "format_summary"]
