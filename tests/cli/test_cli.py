"""CLI tests using click.testing.CliRunner.

JABBERID_HOME is pointed at a per-test directory by the autouse fixture in
``tests/conftest.py``, so no user config file leaks in.
"""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from jabberid.cli.main import cli


@pytest.fixture
def runner():
    """Click CliRunner for CLI testing."""
    return CliRunner()


# ---------------------------------------------------------------------------
# test_cli_help / test_cli_version
# ---------------------------------------------------------------------------


def test_cli_help(runner: CliRunner):
    """--help shows all commands."""
    result = runner.invoke(cli, ["--help"])
    assert result.exit_code == 0
    for cmd in ("parse", "check", "bare", "sort"):
        assert cmd in result.output


def test_cli_version(runner: CliRunner):
    """--version prints version string."""
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output


def test_cli_bad_log_level(runner: CliRunner):
    result = runner.invoke(cli, ["--log-level", "LOUD", "check", "a@b"])
    assert result.exit_code == 1
    assert "Invalid log_level" in result.output


# ---------------------------------------------------------------------------
# jabberid parse
# ---------------------------------------------------------------------------


class TestParse:
    def test_text_output(self, runner: CliRunner):
        result = runner.invoke(cli, ["parse", "Alice@Wonderland.lit/tea"])
        assert result.exit_code == 0
        assert "JID:      Alice@wonderland.lit/tea" in result.output
        assert "Node:     Alice" in result.output
        assert "Domain:   wonderland.lit" in result.output
        assert "Resource: tea" in result.output

    def test_text_output_missing_parts(self, runner: CliRunner):
        result = runner.invoke(cli, ["parse", "wonderland.lit"])
        assert result.exit_code == 0
        assert "Node:     -" in result.output
        assert "Resource: -" in result.output

    def test_json_output(self, runner: CliRunner):
        result = runner.invoke(
            cli, ["--format", "json", "parse", "alice@wonderland.lit", "wonderland.lit/x"]
        )
        assert result.exit_code == 0
        lines = [json.loads(line) for line in result.output.splitlines()]
        assert lines[0] == {
            "jid": "alice@wonderland.lit",
            "node": "alice",
            "domain": "wonderland.lit",
            "resource": None,
        }
        assert lines[1]["resource"] == "x"
        assert lines[1]["node"] is None

    def test_json_from_env(self, runner: CliRunner, monkeypatch):
        monkeypatch.setenv("JABBERID_OUTPUT_FORMAT", "json")
        result = runner.invoke(cli, ["parse", "alice@wonderland.lit"])
        assert result.exit_code == 0
        assert json.loads(result.output)["node"] == "alice"

    def test_invalid_jid(self, runner: CliRunner):
        result = runner.invoke(cli, ["parse", "@wonderland.lit"])
        assert result.exit_code == 1
        assert "empty node" in result.output


# ---------------------------------------------------------------------------
# jabberid check
# ---------------------------------------------------------------------------


class TestCheck:
    def test_all_valid(self, runner: CliRunner):
        result = runner.invoke(cli, ["check", "alice@wonderland.lit", "wonderland.lit/tea"])
        assert result.exit_code == 0
        assert "alice@wonderland.lit: valid" in result.output
        assert "wonderland.lit/tea: valid" in result.output

    def test_reports_reason(self, runner: CliRunner):
        result = runner.invoke(cli, ["check", "alice@wonderland.lit", "alice@", "a b@c"])
        assert result.exit_code == 1
        assert "alice@wonderland.lit: valid" in result.output
        assert "alice@: invalid (empty_domain)" in result.output
        assert "a b@c: invalid (invalid_node_characters)" in result.output


# ---------------------------------------------------------------------------
# jabberid bare
# ---------------------------------------------------------------------------


class TestBare:
    def test_strips_resource(self, runner: CliRunner):
        result = runner.invoke(cli, ["bare", "alice@wonderland.lit/tea", "wonderland.lit"])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["alice@wonderland.lit", "wonderland.lit"]

    def test_invalid_jid(self, runner: CliRunner):
        result = runner.invoke(cli, ["bare", "wonderland.lit/"])
        assert result.exit_code == 1
        assert "empty resource" in result.output


# ---------------------------------------------------------------------------
# jabberid sort
# ---------------------------------------------------------------------------


class TestSort:
    def test_sorts_and_dedupes(self, runner: CliRunner):
        data = "bob@b.lit\nAlice@B.lit\n\nalice@b.lit\ncarol@a.lit\n"
        result = runner.invoke(cli, ["sort"], input=data)
        assert result.exit_code == 0
        assert result.output.splitlines() == ["Alice@b.lit", "bob@b.lit", "carol@a.lit"]

    def test_reads_file(self, runner: CliRunner, tmp_path):
        path = tmp_path / "jids.txt"
        path.write_text("b.lit\na.lit\n")
        result = runner.invoke(cli, ["sort", str(path)])
        assert result.exit_code == 0
        assert result.output.splitlines() == ["a.lit", "b.lit"]

    def test_invalid_line(self, runner: CliRunner):
        result = runner.invoke(cli, ["sort"], input="a.lit\n@b.lit\n")
        assert result.exit_code == 1
        assert "Error on line 2: empty node" in result.output

    def test_skip_invalid(self, runner: CliRunner):
        result = runner.invoke(cli, ["sort", "--skip-invalid"], input="b.lit\n@b.lit\na.lit\n")
        assert result.exit_code == 0
        assert result.output.splitlines() == ["a.lit", "b.lit"]
