from __future__ import annotations

import asyncio
import sys
from typing import List, Optional

import typer
from typer.main import get_command

from flake_soak.core.executor import HarnessError
from flake_soak.core.runner import run_soak
from flake_soak.models.config import Config, load_env
from flake_soak.models.run_params import RunParams
from flake_soak.ui.reporter import ProgressReporter
from flake_soak.ui.reporting import save_results_json
from flake_soak.utils.logging import configure_logging, get_logger

logger = get_logger(__name__)

EXIT_OK = 0
EXIT_TRIALS_FAILED = 1
EXIT_HARNESS_ERROR = 2

cli = typer.Typer(add_completion=False, no_args_is_help=False)


@cli.callback()
def root() -> None:
	"""
	Repeatedly run a command to surface intermittent failures.
	"""
	return None


def run_impl(
    command: list[str] | None = None,
    trials: int | None = None,
    timeout: float | None = None,
    fail_on_failure: bool | None = None,
    show_table: bool | None = None,
    results_file: str | None = None,
    log_level: str | None = None,
    env_file: str | None = None,
) -> int:
	"""
	Run the configured number of trials and report pass/fail statistics.

	Loads configuration from the environment, applies CLI overrides,
	drives the run and maps the outcome to a process exit status.

	Parameters:
		command: Override for the target command.
		trials: Override for the number of trials.
		timeout: Override for the per-trial timeout in seconds.
		fail_on_failure: Whether failed trials make the exit status non-zero.
		show_table: Whether to print the outcome table after the summary.
		results_file: Path to write the outcome as JSON.
		log_level: Override for the log level.
		env_file: Path of a .env file to load.

	Returns:
		0 on success (or failures with fail_on_failure off), 1 when any
		trial failed or timed out, 2 on configuration or harness errors.
	"""
	load_env(env_file)
	try:
		params = RunParams(
		    trials=trials,
		    command=command,
		    timeout=timeout,
		    fail_on_failure=fail_on_failure,
		    show_table=show_table,
		    results_file=results_file,
		    log_level=log_level,
		)
		config = Config()
		config.apply_overrides(params)
		run_config = config.to_run_config()
	except ValueError as exc:
		typer.echo(f"error: invalid configuration: {exc}", err=True)
		return EXIT_HARNESS_ERROR

	configure_logging(config.log_level)
	reporter = ProgressReporter(show_table=config.show_table)
	try:
		outcome = asyncio.run(run_soak(run_config, reporter=reporter))
	except HarnessError as exc:
		logger.error("harness error: %s", exc)
		typer.echo(f"error: {exc}", err=True)
		return EXIT_HARNESS_ERROR

	if config.results_path:
		save_results_json(config.results_path, outcome)
		logger.info("results written to %s", config.results_path)
	if config.fail_on_failure and outcome.any_failed:
		return EXIT_TRIALS_FAILED
	return EXIT_OK


@cli.command(context_settings={"allow_interspersed_args": False})
def run(
    command: Optional[List[str]] = typer.Argument(
        None,
        metavar="[COMMAND]...",
        help="Target command and arguments (default: SOAK_COMMAND)",
    ),
    trials: int = typer.Option(None, "--trials", "-n",
                               help="Override trial count"),
    timeout: float = typer.Option(None, "--timeout",
                                  help="Per-trial timeout seconds"),
    fail_on_failure: bool = typer.Option(
        None,
        "--fail-on-failure/--no-fail-on-failure",
        help="Exit 1 when any trial failed or timed out",
    ),
    show_table: bool = typer.Option(
        None,
        "--show-table/--no-show-table",
        help="Print an outcome table after the summary",
    ),
    results_file: str = typer.Option(None, "--results-file",
                                     help="Write the outcome as JSON"),
    log_level: str = typer.Option(None, "--log-level",
                                  help="Harness log level"),
    env_file: str = typer.Option(None, "--env-file",
                                 help="Path to a .env file"),
) -> None:
	"""
	Run COMMAND repeatedly and count successes and failures.

	Put the command after `--` when it has options of its own.
	"""
	code = run_impl(command, trials, timeout, fail_on_failure, show_table,
	                results_file, log_level, env_file)
	if code != EXIT_OK:
		raise typer.Exit(code=code)


def entrypoint(argv=None, *, standalone_mode: bool = True):
	"""
	Typer entrypoint that defaults to `run` when appropriate.

	Allows calling 'flake-soak -n 50 -- cargo test' without explicitly
	specifying the 'run' subcommand, and running with no arguments at all.

	Parameters:
		argv: Command-line arguments. Defaults to sys.argv[1:].
		standalone_mode: If True, Click handles exit codes.

	Returns:
		Result of the Click application main invocation.
	"""
	args = sys.argv[1:] if argv is None else list(argv)

	_click_app = get_command(cli)
	commands = getattr(_click_app, "commands", {}).keys()
	if not args or (args[0] not in commands and args[0] != "--help"):
		args = ["run"] + args
	return _click_app.main(
	    args=args,
	    prog_name="flake-soak",
	    standalone_mode=standalone_mode,
	)


if __name__ == "__main__":
	entrypoint()
