import pytest

_ENV_VARS = (
    "SOAK_TRIALS",
    "SOAK_COMMAND",
    "SOAK_TIMEOUT_SECONDS",
    "SOAK_FAIL_ON_FAILURE",
    "SOAK_SHOW_TABLE",
    "SOAK_RESULTS_FILE",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
	"""Isolate tests from the caller's environment and any local .env."""
	# set-then-delete so teardown also clears values loaded via dotenv
	for name in _ENV_VARS:
		monkeypatch.setenv(name, "")
		monkeypatch.delenv(name)
	monkeypatch.chdir(tmp_path)
