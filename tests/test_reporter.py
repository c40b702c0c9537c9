import io

import pytest
from rich.console import Console

from flake_soak.models.counters import Counters
from flake_soak.ui.reporter import (
    ProgressReporter,
    format_progress,
    format_summary,
)


def _make_reporter(show_table: bool = False):
	buf = io.StringIO()
	console = Console(file=buf, width=200, highlight=False, markup=False)
	return ProgressReporter(console=console, show_table=show_table), buf


def test_format_progress():
	c = Counters(success_count=4, failure_count=2)
	assert format_progress(7, c) == "Run 7, 4 success and 2 failed"


def test_format_progress_with_timeouts():
	c = Counters(success_count=1, failure_count=0, timeout_count=2)
	assert format_progress(4, c) == "Run 4, 1 success and 0 failed, 2 timed out"


def test_format_summary():
	c = Counters(success_count=9, failure_count=1)
	assert format_summary(10, c) == "10 runs, 9 successes and 1 failures"


def test_report_progress_prints_line():
	reporter, buf = _make_reporter()
	reporter.report_progress(1, Counters())
	assert buf.getvalue() == "Run 1, 0 success and 0 failed\n"


def test_report_summary_layout():
	reporter, buf = _make_reporter()
	reporter.report_summary(2, Counters(success_count=1, failure_count=1))
	assert buf.getvalue() == "\nDONE\n2 runs, 1 successes and 1 failures\n"


def test_report_summary_rejects_inconsistent_counters():
	reporter, buf = _make_reporter()
	with pytest.raises(ValueError):
		reporter.report_summary(3, Counters(success_count=1))
	assert buf.getvalue() == ""


def test_report_summary_does_not_mutate_counters():
	reporter, _ = _make_reporter()
	c = Counters(success_count=2)
	reporter.report_summary(2, c)
	assert c == Counters(success_count=2)


def test_report_summary_table_lists_failed_trials():
	reporter, buf = _make_reporter(show_table=True)
	reporter.report_summary(
	    3,
	    Counters(success_count=1, failure_count=1, timeout_count=1),
	    failed_indices=[2, 3],
	)
	out = buf.getvalue()
	assert "Soak Results" in out
	assert "33.3%" in out
	assert "Failed trials: 2, 3" in out


def test_render_table_structure():
	reporter, _ = _make_reporter(show_table=True)
	table = reporter._render_table(Counters(success_count=4))
	assert len(table.columns) == 3  # Outcome, Count, Rate
	assert table.row_count == 4  # three outcomes + total


def test_summary_without_table_has_no_extra_lines():
	reporter, buf = _make_reporter(show_table=False)
	reporter.report_summary(1, Counters(failure_count=1), [1])
	assert "Failed trials" not in buf.getvalue()
