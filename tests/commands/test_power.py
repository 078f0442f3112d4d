"""Tests for the power CLI command."""

from __future__ import annotations

import json

from click.testing import CliRunner

from zillion.cli import cli


class TestPowerCommand:
    def test_basic(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["power", "6"])
        assert result.exit_code == 0
        assert result.output == "One million\n"

    def test_small(self, cli_runner: CliRunner) -> None:
        for exponent, expected in [("0", "One"), ("1", "Ten"), ("2", "One hundred")]:
            result = cli_runner.invoke(cli, ["power", exponent])
            assert result.output == f"{expected}\n"

    def test_chained(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["power", "3003"])
        assert result.output == "One millinillion\n"

    def test_invalid(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["power", "abc"])
        assert result.exit_code == 1
        assert "Invalid exponent 'abc'" in result.output

    def test_negative_after_separator(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["power", "--", "-3"])
        assert result.exit_code == 1
        assert "non-negative" in result.output

    def test_stdin(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["power"], input="3\n6\n9\n")
        assert result.output == "One thousand\nOne million\nOne billion\n"

    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "power", "303"])
        data = json.loads(result.output)
        assert data["op"] == "power_of_ten"
        assert data["data"] == {
            "exponent": "303",
            "name": "One centillion",
            "scheme": "conway",
            "scale": "short",
        }

    def test_huge_exponent(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["-q", "power", "1" + "0" * 6000])
        assert result.exit_code == 0
        assert result.output.startswith("Ten ")
        assert result.output.endswith("illion\n")

    def test_examples(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["power", "--examples"], prog_name="zillion")
        assert result.exit_code == 0
        assert "  zillion power 6\n      One million\n" in result.output
        assert "  zillion power 3003\n      One millinillion\n" in result.output
