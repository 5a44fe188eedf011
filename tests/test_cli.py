"""
Tests for the demo command line.
"""
import json
import logging
import os
import tempfile

import pytest

from statebox.cli import main
from statebox.config import StoreConfig
from statebox.todos import DEMO_ACTIONS

FINAL_STATE = {
    "todos": [
        {"id": 0, "name": "Walk the dog", "complete": True},
        {"id": 2, "name": "Go to the gym", "complete": True},
    ],
    "goals": [{"id": 1, "name": "Lose 20 pounds"}],
}


pytestmark = pytest.mark.usefixtures("restore_logging")


def test_prints_every_state(capsys):
    """One line per dispatched action."""
    assert main(["--log-level", "WARNING"]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    assert len(lines) == len(DEMO_ACTIONS)
    assert all(line.startswith("The new state is: ") for line in lines)


def test_json_output(capsys):
    """--json prints machine-readable states ending in the final state."""
    assert main(["--json", "--log-level", "WARNING"]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    states = [json.loads(line) for line in lines]
    assert states[0] == {
        "todos": [{"id": 0, "name": "Walk the dog", "complete": False}],
        "goals": [],
    }
    assert states[-1] == FINAL_STATE


def test_quiet_prints_final_state_only(capsys):
    assert main(["--quiet", "--json", "--log-level", "WARNING"]) == 0

    lines = capsys.readouterr().out.strip().splitlines()
    assert [json.loads(line) for line in lines] == [FINAL_STATE]


def test_config_file(capsys):
    """Store settings are read from --config."""
    with tempfile.TemporaryDirectory() as d:
        path = os.path.join(d, "store.json")
        StoreConfig(name="from-file", log_level="ERROR").save(path)

        assert main(["--config", path, "--quiet", "--json"]) == 0

    assert json.loads(capsys.readouterr().out) == FINAL_STATE
    assert logging.getLogger().level == logging.ERROR


def test_missing_config_exits(capsys):
    with pytest.raises(SystemExit) as exc:
        main(["--config", "/nonexistent/store.json"])

    assert exc.value.code == 2
    assert "could not load config" in capsys.readouterr().err


def test_unknown_log_level_is_usage_error(capsys):
    """A misspelt --log-level exits through argparse, not a traceback."""
    with pytest.raises(SystemExit) as exc:
        main(["--log-level", "LOUD", "--quiet"])

    assert exc.value.code == 2
    assert "--log-level" in capsys.readouterr().err


def test_log_level_case_insensitive(capsys):
    assert main(["--log-level", "warning", "--quiet", "--json"]) == 0
    assert json.loads(capsys.readouterr().out) == FINAL_STATE


def test_config_with_bad_log_level_is_usage_error(capsys):
    with tempfile.TemporaryDirectory() as d:
        path = os.path.join(d, "store.json")
        with open(path, "w", encoding="utf-8") as f:
            json.dump({"log_level": "LOUD"}, f)

        with pytest.raises(SystemExit) as exc:
            main(["--config", path, "--quiet"])

    assert exc.value.code == 2
    assert "invalid config" in capsys.readouterr().err
