"""
Trial executor.

Launches one invocation of the target command, waits for it to terminate
and classifies the result. The child inherits the harness's stdout and
stderr so its diagnostics interleave with the progress lines.
"""

from __future__ import annotations

import asyncio
import errno
import os
import shutil
import signal
import sys
import time
from typing import Awaitable, Callable, Sequence

from flake_soak.models.trial import TrialOutcome, TrialResult
from flake_soak.utils.logging import get_logger

logger = get_logger(__name__)

# errnos that mean "this target cannot be launched", as opposed to
# "this machine cannot spawn anything"
_LAUNCH_ERRNOS = frozenset({
    errno.ENOENT,
    errno.EACCES,
    errno.EPERM,
    errno.ENOTDIR,
    errno.ENOEXEC,
})

# each trial gets its own session so a timeout can kill the whole tree
_USE_SESSIONS = sys.platform != "win32"

Executor = Callable[..., Awaitable[TrialResult]]


class HarnessError(RuntimeError):
	"""The harness itself cannot do its job; distinct from a failed trial."""


def resolve_command(command: Sequence[str]) -> list[str]:
	"""
	Check a command before the run starts.

	A program that cannot be found is only logged: each trial will then
	fail to launch and be counted as a failure.

	Parameters:
		command: Program followed by its arguments.

	Returns:
		The command as a list, unchanged.

	Raises:
		HarnessError: If the command is empty.
	"""
	argv = list(command)
	if not argv:
		raise HarnessError("no command configured")
	if shutil.which(argv[0]) is None:
		logger.warning("command not found or not executable: %s", argv[0])
	return argv


def _signal_name(return_code: int | None) -> str | None:
	if return_code is None or return_code >= 0:
		return None
	try:
		return signal.Signals(-return_code).name
	except ValueError:
		return f"signal {-return_code}"


def classify(return_code: int) -> TrialOutcome:
	"""Map a process return code to a trial outcome."""
	if return_code == 0:
		return TrialOutcome.SUCCESS
	return TrialOutcome.FAILURE


def _kill(proc: asyncio.subprocess.Process) -> None:
	"""Kill the child and everything in its process group."""
	try:
		if _USE_SESSIONS:
			os.killpg(proc.pid, signal.SIGKILL)
		else:
			proc.kill()
	except ProcessLookupError:
		# exited between the timeout firing and the kill
		pass


async def execute(
    command: Sequence[str],
    index: int = 1,
    timeout: float | None = None,
) -> TrialResult:
	"""
	Run the command once and wait for it to finish.

	Exactly one attempt is made; there are no retries.

	Parameters:
		command: Program followed by its arguments.
		index: 1-based trial index recorded on the result.
		timeout: Seconds to wait before killing the process; None waits
			indefinitely.

	Returns:
		TrialResult describing the outcome.

	Raises:
		HarnessError: If spawning fails for a reason unrelated to the
			target itself (e.g. EAGAIN or ENOMEM).
	"""
	# keep our own buffered output ahead of the child's
	sys.stdout.flush()
	sys.stderr.flush()
	started = time.monotonic()
	try:
		proc = await asyncio.create_subprocess_exec(
		    *command, start_new_session=_USE_SESSIONS)
	except OSError as exc:
		if exc.errno not in _LAUNCH_ERRNOS:
			raise HarnessError(f"unable to spawn process: {exc}") from exc
		logger.warning("trial %d failed to launch: %s", index, exc)
		return TrialResult(
		    index=index,
		    outcome=TrialOutcome.FAILURE,
		    error=str(exc),
		    duration_seconds=time.monotonic() - started,
		)

	try:
		return_code = await asyncio.wait_for(proc.wait(), timeout=timeout)
	except asyncio.TimeoutError:
		logger.warning("trial %d exceeded %ss, killing pid %d", index, timeout,
		               proc.pid)
		_kill(proc)
		await proc.wait()
		return TrialResult(
		    index=index,
		    outcome=TrialOutcome.TIMEOUT,
		    return_code=proc.returncode,
		    signal_name=_signal_name(proc.returncode),
		    duration_seconds=time.monotonic() - started,
		)
	except asyncio.CancelledError:
		_kill(proc)
		raise

	return TrialResult(
	    index=index,
	    outcome=classify(return_code),
	    return_code=return_code,
	    signal_name=_signal_name(return_code),
	    duration_seconds=time.monotonic() - started,
	)


__all__ = [
    "Executor",
    "HarnessError",
    "classify",
    "execute",
    "resolve_command",
]
