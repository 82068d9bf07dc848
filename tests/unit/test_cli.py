"""Tests for the purefp command-line interface."""

import json
import math

import pytest
from pydantic import ValidationError
from typer.testing import CliRunner

from purefp import cli
from purefp.parallel import CHUNKS_PER_WORKER

runner = CliRunner()

SETTINGS_ENV = (
    "PUREFP_MAX_WORKERS",
    "PUREFP_CHUNK_SIZE",
    "PUREFP_EXECUTOR",
    "PUREFP_TIMEOUT_SEC",
    "LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    for var in SETTINGS_ENV:
        monkeypatch.delenv(var, raising=False)


class TestFizzBuzzCommand:
    def test_default_hundred_lines(self):
        result = runner.invoke(cli.app, ["fizzbuzz"])
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert len(lines) == 100
        assert lines[:5] == ["1", "2", "fizz", "4", "buzz"]
        assert lines[14] == "fizzbuzz"
        assert lines[-1] == "buzz"

    def test_count(self):
        result = runner.invoke(cli.app, ["fizzbuzz", "--count", "15"])
        assert result.exit_code == 0
        assert result.output.splitlines()[-1] == "fizzbuzz"
        assert len(result.output.splitlines()) == 15

    def test_json(self):
        result = runner.invoke(cli.app, ["fizzbuzz", "-n", "3", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output) == {"count": 3, "lines": ["1", "2", "fizz"]}

    def test_negative_count_rejected(self):
        result = runner.invoke(cli.app, ["fizzbuzz", "--count", "-1"])
        assert result.exit_code != 0


class TestSquaresCommand:
    @pytest.mark.parametrize("strategy", ["sequential", "parallel"])
    def test_ordered_output(self, strategy):
        result = runner.invoke(
            cli.app, ["squares", "--upto", "5", "--strategy", strategy, "--chunk-size", "2"]
        )
        assert result.exit_code == 0
        assert result.output.splitlines() == ["1", "4", "9", "16", "25"]

    def test_json_report(self):
        result = runner.invoke(
            cli.app,
            ["squares", "-n", "4", "--strategy", "parallel", "--workers", "2", "--chunk-size", "3", "--json"],
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["function"] == "square"
        assert data["strategy"] == "parallel"
        assert data["executor"] == "thread"
        assert data["max_workers"] == 2
        assert data["chunk_size"] == 3
        assert data["inputs"] == [1, 2, 3, 4]
        assert data["outputs"] == [1, 4, 9, 16]

    def test_sequential_json_has_no_pool(self):
        result = runner.invoke(cli.app, ["squares", "-n", "2", "--json"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["executor"] is None
        assert data["outputs"] == [1, 4]

    def test_table(self):
        result = runner.invoke(cli.app, ["squares", "-n", "3", "--table"])
        assert result.exit_code == 0
        assert "Input" in result.output
        assert "9" in result.output

    def test_settings_from_environment(self, monkeypatch):
        monkeypatch.setenv("PUREFP_CHUNK_SIZE", "1")
        result = runner.invoke(cli.app, ["squares", "-n", "3", "--strategy", "parallel", "--json"])
        assert result.exit_code == 0
        assert json.loads(result.output)["chunk_size"] == 1

    def test_failure_reports_index(self, monkeypatch):
        def fail_on_three(x):
            if x == 3:
                raise ValueError("unscorable")
            return x

        monkeypatch.setattr(cli, "square", fail_on_three)
        result = runner.invoke(cli.app, ["squares", "-n", "5", "--strategy", "parallel"])
        assert result.exit_code == 1
        assert "index 2" in result.output

    def test_zero_upto(self):
        result = runner.invoke(cli.app, ["squares", "--upto", "0"])
        assert result.exit_code == 0
        assert result.output == ""

    def test_json_reports_heuristic_chunk_size(self):
        result = runner.invoke(
            cli.app, ["squares", "-n", "40", "--strategy", "parallel", "--workers", "2", "--json"]
        )
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["chunk_size"] == math.ceil(40 / (2 * CHUNKS_PER_WORKER))
        assert data["max_workers"] == 2


class TestEnvironmentSettings:
    @pytest.mark.parametrize(
        "var, value",
        [
            ("PUREFP_MAX_WORKERS", "zero"),
            ("PUREFP_EXECUTOR", "gpu"),
            ("LOG_LEVEL", "LOUD"),
        ],
    )
    def test_malformed_value_exits_cleanly(self, monkeypatch, var, value):
        monkeypatch.setenv(var, value)
        result = runner.invoke(cli.app, ["squares", "-n", "3"])
        assert result.exit_code == 2
        assert "invalid environment settings" in result.output
        assert not isinstance(result.exception, ValidationError)

    def test_malformed_value_names_the_field(self, monkeypatch):
        monkeypatch.setenv("PUREFP_MAX_WORKERS", "zero")
        result = runner.invoke(cli.app, ["fizzbuzz", "-n", "3"])
        assert result.exit_code == 2
        assert "max_workers" in result.output
