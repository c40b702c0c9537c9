"""User interface components.

Key modules:
    - reporter: Progress lines, final summary and Rich outcome table
    - reporting: Run outcome persistence
"""

from flake_soak.ui.reporter import (
    ProgressReporter,
    format_progress,
    format_summary,
)
from flake_soak.ui.reporting import save_results_json

__all__ = [
    "ProgressReporter",
    "format_progress",
    "format_summary",
    "save_results_json",
]
