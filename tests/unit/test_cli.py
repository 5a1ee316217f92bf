"""Tests for CLI commands."""

from pathlib import Path

import pytest
from click.testing import CliRunner

from tablewriter.cli import cli


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CLI runner."""
    return CliRunner()


@pytest.fixture
def csv_file(tmp_path: Path) -> Path:
    path = tmp_path / "ratings.csv"
    path.write_text("name,rating\nA,500\nB,288\n", encoding="utf-8")
    return path


class TestCLI:
    """Test CLI commands."""

    def test_cli_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "render tabular data as text grids" in result.output

    def test_render_help(self, runner: CliRunner) -> None:
        result = runner.invoke(cli, ["render", "--help"])
        assert result.exit_code == 0
        assert "--preset" in result.output
        assert "--no-header" in result.output
        assert "--max-width" in result.output

    def test_render(self, runner: CliRunner, csv_file: Path) -> None:
        result = runner.invoke(cli, ["render", str(csv_file)])
        assert result.exit_code == 0
        assert result.output == (
            "+------+--------+\n"
            "| NAME | RATING |\n"
            "+------+--------+\n"
            "| A    |    500 |\n"
            "| B    |    288 |\n"
            "+------+--------+\n"
        )

    def test_render_no_header(self, runner: CliRunner, csv_file: Path) -> None:
        result = runner.invoke(cli, ["render", str(csv_file), "--no-header"])
        assert result.exit_code == 0
        assert "| name | rating |" in result.output

    def test_render_markdown_preset(self, runner: CliRunner, csv_file: Path) -> None:
        result = runner.invoke(cli, ["render", str(csv_file), "--preset", "markdown"])
        assert result.exit_code == 0
        assert result.output.splitlines()[1] == "|------|--------|"

    def test_preset_from_env(self, runner: CliRunner, csv_file: Path) -> None:
        result = runner.invoke(
            cli, ["render", str(csv_file)], env={"TABLEWRITER_PRESET": "markdown"}
        )
        assert result.exit_code == 0
        assert not result.output.startswith("+")

    def test_border_overrides_preset(self, runner: CliRunner, csv_file: Path) -> None:
        result = runner.invoke(cli, ["render", str(csv_file), "--no-border"])
        assert result.exit_code == 0
        assert result.output.splitlines()[0] == "  NAME | RATING  "

    def test_alignment_and_row_line(self, runner: CliRunner, csv_file: Path) -> None:
        result = runner.invoke(
            cli, ["render", str(csv_file), "--align", "center", "--row-line"]
        )
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[3] == "|  A   |  500   |"
        assert lines.count("+------+--------+") == 4

    def test_max_width_from_env(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "words.csv"
        path.write_text("one two three\n", encoding="utf-8")
        result = runner.invoke(
            cli,
            ["render", str(path), "--no-header"],
            env={"TABLEWRITER_MAX_WIDTH": "7"},
        )
        assert result.exit_code == 0
        assert result.output.splitlines()[1:3] == ["| one two |", "| three   |"]

    def test_no_wrap(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "words.csv"
        path.write_text("one two three\n", encoding="utf-8")
        result = runner.invoke(
            cli, ["render", str(path), "--no-header", "--max-width", "3", "--no-wrap"]
        )
        assert result.exit_code == 0
        assert result.output.splitlines()[1] == "| one two three |"

    def test_caption_and_verbatim_header(self, runner: CliRunner, csv_file: Path) -> None:
        result = runner.invoke(
            cli, ["render", str(csv_file), "--no-auto-format", "--caption", "Ratings."]
        )
        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[1] == "| name | rating |"
        assert lines[-1] == "Ratings."

    def test_missing_file(self, runner: CliRunner, tmp_path: Path) -> None:
        result = runner.invoke(cli, ["render", str(tmp_path / "missing.csv")])
        assert result.exit_code == 2

    def test_unreadable_csv(self, runner: CliRunner, tmp_path: Path) -> None:
        path = tmp_path / "latin.csv"
        path.write_bytes(b"caf\xe9\n")
        result = runner.invoke(cli, ["render", str(path)])
        assert result.exit_code == 1
        assert "Cannot read CSV" in result.output

    def test_invalid_max_width(self, runner: CliRunner, csv_file: Path) -> None:
        result = runner.invoke(cli, ["render", str(csv_file), "--max-width", "0"])
        assert result.exit_code == 2
