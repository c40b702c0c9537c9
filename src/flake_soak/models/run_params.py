"""
Run parameters model.

Defines validated CLI overrides that are layered on top of the
environment-based Config.
"""

from __future__ import annotations

from typing import Optional
from pydantic import BaseModel, Field, field_validator
from pydantic_core.core_schema import ValidationInfo

LOG_LEVELS = ("critical", "error", "warning", "info", "debug")


class RunParams(BaseModel):
	"""Validated run parameters for CLI/runner.

	Every field is optional; None means "keep the configured value".
	"""

	trials: Optional[int] = Field(default=None,
	                              description="Override trial count")
	command: Optional[list[str]] = Field(default=None,
	                                     description="Override command")
	timeout: Optional[float] = Field(default=None,
	                                 description="Per-trial timeout")
	fail_on_failure: Optional[bool] = Field(
	    default=None, description="Exit non-zero on failures")
	show_table: Optional[bool] = Field(default=None,
	                                   description="Show outcome table")
	results_file: Optional[str] = Field(default=None,
	                                    description="JSON results path")
	log_level: Optional[str] = Field(default=None, description="Log level")

	@field_validator('trials')
	@classmethod
	def validate_non_negative(cls, v: Optional[int],
	                          info: ValidationInfo) -> Optional[int]:
		if v is None:
			return v
		if v < 0:
			raise ValueError(f"{info.field_name} must be >= 0")
		return v

	@field_validator('timeout')
	@classmethod
	def validate_positive(cls, v: Optional[float],
	                      info: ValidationInfo) -> Optional[float]:
		if v is None:
			return v
		if v <= 0:
			raise ValueError(f"{info.field_name} must be > 0")
		return v

	@field_validator('command')
	@classmethod
	def empty_command_as_unset(
	        cls, v: Optional[list[str]]) -> Optional[list[str]]:
		# typer hands over an empty list when no trailing args are given
		if not v:
			return None
		return v

	@field_validator('log_level')
	@classmethod
	def validate_log_level(cls, v: Optional[str]) -> Optional[str]:
		if v is None:
			return v
		if v.lower() not in LOG_LEVELS:
			raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
		return v.lower()


__all__ = ["RunParams", "LOG_LEVELS"]
