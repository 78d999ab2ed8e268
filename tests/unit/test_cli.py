"""Unit tests for proclang.cli.main — tokens, check and version commands."""
from __future__ import annotations

import json
from pathlib import Path

import pytest
import yaml
from click.testing import CliRunner

from proclang.cli.main import cli


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture()
def source_file(tmp_path: Path, sample_source: str) -> Path:
    path = tmp_path / "greet.pl"
    path.write_text(sample_source, encoding="utf-8")
    return path


@pytest.fixture()
def broken_file(tmp_path: Path) -> Path:
    path = tmp_path / "broken.pl"
    path.write_text("x = ?\ny = 'a\\qb'\n", encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


def test_version_command_prints_version(expected_version: str) -> None:
    result = _make_runner().invoke(cli, ["version"])
    assert result.exit_code == 0
    assert expected_version in result.output


# ---------------------------------------------------------------------------
# tokens
# ---------------------------------------------------------------------------


class TestTokensCommand:
    def test_table_output(self, source_file: Path) -> None:
        result = _make_runner().invoke(cli, ["tokens", str(source_file)])
        assert result.exit_code == 0, result.output
        assert "KEYWORD" in result.output
        assert "token(s)" in result.output

    def test_json_output_to_file(self, source_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "tokens.json"
        result = _make_runner().invoke(
            cli, ["tokens", str(source_file), "--format", "json", "--output", str(out)]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(out.read_text(encoding="utf-8"))
        assert data[0] == {"kind": "COMMENT", "text": " greet the player", "offset": 0}

    def test_yaml_output_without_comments(self, source_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "tokens.yaml"
        result = _make_runner().invoke(
            cli,
            ["tokens", str(source_file), "--format", "yaml", "--no-comments", "-o", str(out)],
        )
        assert result.exit_code == 0, result.output
        data = yaml.safe_load(out.read_text(encoding="utf-8"))
        assert all(item["kind"] != "COMMENT" for item in data)
        assert data[0]["text"] == "proc"

    def test_json_to_stdout(self, source_file: Path) -> None:
        result = _make_runner().invoke(cli, ["tokens", str(source_file), "--format", "json"])
        assert result.exit_code == 0
        assert "IDENTIFIER" in result.output

    def test_show_source(self, source_file: Path) -> None:
        result = _make_runner().invoke(cli, ["tokens", str(source_file), "--show-source"])
        assert result.exit_code == 0
        assert "greet the player" in result.output

    def test_output_requires_serialized_format(self, source_file: Path, tmp_path: Path) -> None:
        result = _make_runner().invoke(
            cli, ["tokens", str(source_file), "--output", str(tmp_path / "x")]
        )
        assert result.exit_code != 0

    def test_lex_error_exits_non_zero(self, broken_file: Path) -> None:
        result = _make_runner().invoke(cli, ["tokens", str(broken_file)])
        assert result.exit_code == 1

    def test_ascii_identifiers_flag(self, tmp_path: Path) -> None:
        path = tmp_path / "u.pl"
        path.write_text("café\n", encoding="utf-8")
        assert _make_runner().invoke(cli, ["tokens", str(path)]).exit_code == 0
        result = _make_runner().invoke(cli, ["tokens", str(path), "--ascii-identifiers"])
        assert result.exit_code == 1

    def test_missing_file_exits_non_zero(self, tmp_path: Path) -> None:
        result = _make_runner().invoke(cli, ["tokens", str(tmp_path / "nope.pl")])
        assert result.exit_code == 1


# ---------------------------------------------------------------------------
# check
# ---------------------------------------------------------------------------


class TestCheckCommand:
    def test_clean_file_passes(self, source_file: Path) -> None:
        result = _make_runner().invoke(cli, ["check", str(source_file)])
        assert result.exit_code == 0
        assert "OK" in result.output

    def test_reports_every_error(self, broken_file: Path) -> None:
        result = _make_runner().invoke(cli, ["check", str(broken_file)])
        assert result.exit_code == 1
        assert "2 error(s)" in result.output

    def test_verbose_flag_accepted(self, source_file: Path) -> None:
        result = _make_runner().invoke(cli, ["--verbose", "check", str(source_file)])
        assert result.exit_code == 0
