"""
flake-soak models.

This subpackage contains Pydantic models for configuration, run
parameters, trial results and aggregate run outcomes.

Key models:
    - Config: Application configuration loaded from environment
    - RunConfig: Frozen per-run settings handed to the controller
    - RunParams: CLI overrides for a run
    - TrialOutcome / TrialResult: Classification of one trial
    - Counters: Running tallies of outcomes
    - RunOutcome: Final counters plus per-trial results
"""

from .trial import TrialOutcome, TrialResult
from .counters import Counters
from .config import Config, RunConfig, load_env, split_command
from .run_params import RunParams
from .run_outcome import RunOutcome

__all__ = [
    "TrialOutcome",
    "TrialResult",
    "Counters",
    "Config",
    "RunConfig",
    "load_env",
    "split_command",
    "RunParams",
    "RunOutcome",
]
