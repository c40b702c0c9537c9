"""
Run outcome persistence.

Writes the aggregate outcome of a run to disk as JSON.
"""

from __future__ import annotations

from pathlib import Path

from flake_soak.models.run_outcome import RunOutcome


def save_results_json(path: Path | str, outcome: RunOutcome) -> None:
	"""
	Persist a run outcome as JSON, ensuring parent directories.

	Parameters:
		path: Destination file path.
		outcome: The outcome to serialize.
	"""
	Path(path).parent.mkdir(parents=True, exist_ok=True)
	Path(path).write_text(outcome.model_dump_json(indent=2), encoding="utf-8")


__all__ = ["save_results_json"]
