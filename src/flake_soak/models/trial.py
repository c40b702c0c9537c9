"""
Trial outcome models.

Defines the classification of a single trial and the record kept for it.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class TrialOutcome(str, Enum):
	"""
	Classification of one invocation of the target command.

	SUCCESS: Process exited normally with status 0.
	FAILURE: Non-zero exit, killed by a signal, or failed to launch.
	TIMEOUT: Process outlived the per-trial timeout and was killed.
	"""

	SUCCESS = "success"
	FAILURE = "failure"
	TIMEOUT = "timeout"


class TrialResult(BaseModel):
	"""Result of a single trial."""

	index: int = Field(ge=1, description="1-based trial index")
	outcome: TrialOutcome
	return_code: int | None = Field(
	    default=None,
	    description="Process return code; None if it never started",
	)
	signal_name: str | None = Field(
	    default=None,
	    description="Signal that terminated the process, if any",
	)
	duration_seconds: float = 0.0
	error: str | None = None

	@property
	def succeeded(self) -> bool:
		return self.outcome is TrialOutcome.SUCCESS


__all__ = ["TrialOutcome", "TrialResult"]
