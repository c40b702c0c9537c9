from __future__ import annotations

import shlex
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic_core.core_schema import ValidationInfo
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv

DEFAULT_COMMAND = ("cargo", "run")


def load_env(env_file: str | Path | None = None) -> None:
	"""Load environment variables from an `.env` file if present."""
	env_path = Path(env_file) if env_file else Path(".env")
	if env_path.exists():
		load_dotenv(env_path)


def split_command(v: Any) -> list[str]:
	"""Normalize a command to an argv list regardless of input format."""
	if v is None or v == "":
		return []
	if isinstance(v, (list, tuple)):
		return [str(p) for p in v]
	# fallback: shell-style string
	return shlex.split(str(v))


class RunConfig(BaseModel):
	"""Immutable settings for one soak run."""

	model_config = ConfigDict(frozen=True)

	trial_count: int = Field(ge=0, description="Number of trials to run")
	command: tuple[str, ...] = Field(min_length=1,
	                                 description="Program and arguments")
	timeout_seconds: float | None = Field(
	    default=None,
	    gt=0,
	    description="Per-trial timeout; None waits indefinitely",
	)


class Config(BaseSettings):
	"""Runtime configuration loaded from environment variables."""

	model_config = SettingsConfigDict(env_prefix="", case_sensitive=False)

	trial_count: int = Field(
	    100,
	    alias="SOAK_TRIALS",
	    description="Number of trials to run",
	)
	command: Any = Field(
	    default_factory=lambda: list(DEFAULT_COMMAND),
	    alias="SOAK_COMMAND",
	    description="Target command, shell-style string or list",
	)
	timeout_seconds: float | None = Field(
	    default=None,
	    alias="SOAK_TIMEOUT_SECONDS",
	    description="Per-trial timeout in seconds (unset: no timeout)",
	)
	fail_on_failure: bool = Field(
	    True,
	    alias="SOAK_FAIL_ON_FAILURE",
	    description="Exit non-zero when any trial failed or timed out",
	)
	show_table: bool = Field(
	    False,
	    alias="SOAK_SHOW_TABLE",
	    description="Print an outcome table after the summary",
	)
	results_file: str | None = Field(
	    default=None,
	    alias="SOAK_RESULTS_FILE",
	    description="Write the run outcome as JSON to this path",
	)
	log_level: str = Field("warning", alias="LOG_LEVEL",
	                       description="Harness log level")

	@field_validator("command", mode="before")
	@classmethod
	def normalize_command(cls, v: Any) -> list[str]:
		return split_command(v)

	@field_validator("timeout_seconds", "results_file", mode="before")
	@classmethod
	def empty_as_none(cls, v: Any) -> Any:
		if isinstance(v, str) and not v.strip():
			return None
		return v

	@field_validator("trial_count")
	@classmethod
	def validate_non_negative(cls, v: int, info: ValidationInfo) -> int:
		if v < 0:
			raise ValueError(f"{info.field_name} must be >= 0")
		return v

	@field_validator("timeout_seconds")
	@classmethod
	def validate_positive(cls, v: float | None,
	                      info: ValidationInfo) -> float | None:
		if v is not None and v <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v

	@property
	def results_path(self) -> Path | None:
		return Path(self.results_file) if self.results_file else None

	def apply_overrides(self, run_params: "RunParams") -> None:
		"""Apply CLI overrides from RunParams onto this config.

		Only non-None fields in run_params are applied, preserving
		environment-based defaults for anything the user didn't explicitly set.

		Parameters:
			run_params: Validated run parameters with optional overrides.
		"""
		_OVERRIDES: list[tuple[str, str]] = [
			("trials", "trial_count"),
			("command", "command"),
			("timeout", "timeout_seconds"),
			("fail_on_failure", "fail_on_failure"),
			("show_table", "show_table"),
			("results_file", "results_file"),
			("log_level", "log_level"),
		]
		for param_field, config_field in _OVERRIDES:
			value = getattr(run_params, param_field)
			if value is not None:
				setattr(self, config_field, value)

	def to_run_config(self) -> RunConfig:
		"""Freeze the run-relevant settings.

		Raises:
			pydantic.ValidationError: If the command is empty.
		"""
		return RunConfig(
		    trial_count=self.trial_count,
		    command=tuple(self.command),
		    timeout_seconds=self.timeout_seconds,
		)


__all__ = ["Config", "RunConfig", "load_env", "split_command"]
