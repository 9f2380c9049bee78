"""Tests for the bintree library."""

import pytest
from click.testing import CliRunner

from bintree.bench import SCENARIOS, main, run_scenario


@pytest.mark.parametrize("name", list(SCENARIOS))
def test_run_scenario(name):
    assert run_scenario(name, number=10, repeat=2) > 0


def test_run_unknown_scenario():
    with pytest.raises(ValueError, match="unknown scenario"):
        run_scenario("rebalance")


def test_run_scenario_needs_iterations():
    with pytest.raises(ValueError):
        run_scenario("balanced", number=0)


def test_cli_runs_every_scenario_by_default():
    result = CliRunner().invoke(main, ["--number", "5", "--repeat", "1"])
    assert result.exit_code == 0, result.output
    assert "best of 1, 5 iterations each" in result.output
    for description, _ in SCENARIOS.values():
        assert description in result.output


def test_cli_selected_scenario():
    result = CliRunner().invoke(main, ["-n", "1", "-r", "1", "-s", "worst-case"])
    assert result.exit_code == 0, result.output
    assert "create 10 element worst case tree and clear" in result.output
    assert "balanced" not in result.output


@pytest.mark.parametrize(
    "args", [["--scenario", "rebalance"], ["--number", "0"], ["--repeat", "-1"]]
)
def test_cli_usage_errors(args):
    result = CliRunner().invoke(main, args)
    assert result.exit_code == 2
