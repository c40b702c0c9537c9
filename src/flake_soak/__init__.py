"""
flake-soak - Reliability soak testing for flaky commands.

Runs an external command a fixed number of times, classifies each run as
success or failure by its exit status and reports aggregate statistics.

Main entry points:
    - flake_soak.main: CLI entrypoint
    - flake_soak.core.runner: RunController and run_soak()
    - flake_soak.models.config: Config, RunConfig and load_env()
"""
