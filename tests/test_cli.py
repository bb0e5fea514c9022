# SPDX-License-Identifier: MIT
# Copyright (c) 2026 LlamaIndex Inc.
"""Tests for the lrucache command line."""

from __future__ import annotations

import json

from click.testing import CliRunner
from lrucache.cli import cli


def test_run_replays_eviction_scenario() -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli,
        ["run", "-c", "2", "set:1=a", "set:2=b", "get:1", "set:3=c", "get:2", "keys"],
    )
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["a", "evicted 2", "<miss>", "3 1"]


def test_run_size_and_len() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "--capacity", "5", "set:k=v", "size", "len"])
    assert result.exit_code == 0, result.output
    assert result.output.splitlines() == ["5", "1"]


def test_run_delete_and_stats() -> None:
    runner = CliRunner()
    result = runner.invoke(
        cli, ["run", "-c", "2", "set:a=1", "del:a", "get:a", "stats"]
    )
    assert result.exit_code == 0, result.output
    lines = result.output.splitlines()
    assert lines[0] == "<miss>"
    assert json.loads(lines[1]) == {
        "hits": 0,
        "misses": 1,
        "evictions": 0,
        "size": 0,
        "capacity": 2,
    }


def test_run_capacity_from_env() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "size"], env={"LRUCACHE_CAPACITY": "7"})
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "7"


def test_run_rejects_zero_capacity() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "-c", "0", "size"])
    assert result.exit_code != 0
    assert "Capacity must be a positive integer" in result.output


def test_run_rejects_malformed_operation() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "set:novalue"])
    assert result.exit_code != 0
    assert "Expected set:KEY=VALUE" in result.output


def test_run_rejects_unknown_operation() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["run", "pop:1"])
    assert result.exit_code != 0
    assert "Unrecognized operation" in result.output
