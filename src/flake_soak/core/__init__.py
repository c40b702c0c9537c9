"""Core soak-test logic.

Key modules:
    - executor: Launch and classify a single trial
    - aggregator: Running outcome counters
    - runner: Sequential run controller via RunController / run_soak()
"""

from flake_soak.core.executor import (
    HarnessError,
    classify,
    execute,
    resolve_command,
)
from flake_soak.core.aggregator import ResultAggregator
from flake_soak.core.runner import RunController, RunState, run_soak

__all__ = [
    # executor
    "HarnessError",
    "classify",
    "execute",
    "resolve_command",
    # aggregator
    "ResultAggregator",
    # runner
    "RunController",
    "RunState",
    "run_soak",
]
