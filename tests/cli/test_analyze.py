"""
Tests for analyze CLI.
"""

import json
from pathlib import Path
from unittest.mock import patch

from click.testing import CliRunner
from conftest import make_file

from filesense.cli.analyze import analyze, display_analysis
from filesense.cli.main import cli
from filesense.core.types import CategoryLabel, FileRecord, FolderAnalysis


class TestAnalyzeCLI:
    """Tests for the analyze command."""

    def test_table_output(self, downloads: Path) -> None:
        """Test the category table is printed."""
        runner = CliRunner()

        result = runner.invoke(analyze, [str(downloads)])

        assert result.exit_code == 0
        assert "Documents" in result.output
        assert "Images" in result.output
        assert "Total" in result.output

    def test_json_output(self, downloads: Path) -> None:
        """Test --json prints the analysis document."""
        runner = CliRunner()

        result = runner.invoke(analyze, [str(downloads), "--json"])

        assert result.exit_code == 0
        data = json.loads(result.output[result.output.index("{") :])
        assert data["total_files"] == 2
        assert data["categories"]["Documents"][0]["name"] == "report.pdf"

    def test_no_hidden(self, tmp_path: Path) -> None:
        """Test --no-hidden leaves dot-files out."""
        make_file(tmp_path / "box" / ".env.local")
        make_file(tmp_path / "box" / "a.txt")
        runner = CliRunner()

        result = runner.invoke(analyze, [str(tmp_path / "box"), "--json", "--no-hidden"])

        data = json.loads(result.output[result.output.index("{") :])
        assert data["total_files"] == 1

    def test_missing_folder(self, tmp_path: Path) -> None:
        """Test a missing folder exits with an error."""
        runner = CliRunner()

        result = runner.invoke(analyze, [str(tmp_path / "nope")])

        assert result.exit_code == 1
        assert "Error" in result.output

    def test_prompt_cancelled(self) -> None:
        """Test leaving the folder prompt empty cancels."""
        runner = CliRunner()

        with patch("filesense.cli.analyze.select_folder", return_value=""):
            result = runner.invoke(analyze, [])

        assert result.exit_code == 0
        assert "Cancelled" in result.output

    def test_prompt_answer_is_used(self, downloads: Path) -> None:
        """Test the prompted folder is analyzed."""
        runner = CliRunner()

        with patch(
            "filesense.cli.analyze.select_folder", return_value=str(downloads)
        ):
            result = runner.invoke(analyze, ["--json"])

        assert result.exit_code == 0
        assert '"total_files": 2' in result.output

    def test_through_main_group(self, downloads: Path) -> None:
        """Test the command is reachable from the main group."""
        runner = CliRunner()

        result = runner.invoke(cli, ["-q", "analyze", str(downloads)])

        assert result.exit_code == 0
        assert "Documents" in result.output


class TestDisplayAnalysis:
    """Tests for the analysis table."""

    def test_empty_analysis(self, tmp_path: Path) -> None:
        """Test an empty analysis renders."""
        display_analysis(FolderAnalysis(folder_path=tmp_path))

    def test_skips_empty_categories(self, tmp_path: Path, capsys) -> None:
        """Test only non-empty categories get a row."""
        analysis = FolderAnalysis(folder_path=tmp_path)
        analysis.add(
            CategoryLabel.AUDIO,
            FileRecord(name="s.mp3", path=tmp_path / "s.mp3", size=3, extension="mp3"),
        )

        display_analysis(analysis)

        output = capsys.readouterr().out
        assert "Audio" in output
        assert "Videos" not in output
