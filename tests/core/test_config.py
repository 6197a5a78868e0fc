"""Tests for engine settings."""

import pytest
from pydantic import ValidationError

from filesense.analysis.scanner import FolderScanner
from filesense.core.config import Settings, get_settings


class TestSettings:
    """Test settings defaults and environment overrides."""

    def test_defaults(self):
        """Test default values."""
        settings = Settings()
        assert settings.include_hidden is True
        assert settings.smart_categories is False
        assert settings.verify_copies is True
        assert settings.max_collision_attempts == 9999
        assert settings.progress_interval == 100

    def test_environment_override(self, monkeypatch):
        """Test FILESENSE_* variables override defaults."""
        monkeypatch.setenv("FILESENSE_INCLUDE_HIDDEN", "false")
        monkeypatch.setenv("FILESENSE_MAX_COLLISION_ATTEMPTS", "5")

        settings = get_settings()

        assert settings.include_hidden is False
        assert settings.max_collision_attempts == 5

    def test_env_file(self, tmp_path, monkeypatch):
        """Test values are read from .env in the working directory."""
        (tmp_path / ".env").write_text("FILESENSE_SMART_CATEGORIES=true\n")
        monkeypatch.chdir(tmp_path)

        assert get_settings().smart_categories is True

    def test_unrelated_variables_ignored(self, monkeypatch):
        """Test other variables do not break loading."""
        monkeypatch.setenv("FILESENSE_UNKNOWN_OPTION", "1")
        assert Settings().verify_copies is True

    @pytest.mark.parametrize(
        "variable", ["FILESENSE_PROGRESS_INTERVAL", "FILESENSE_MAX_COLLISION_ATTEMPTS"]
    )
    def test_zero_rejected(self, monkeypatch, variable):
        """Test counters must be at least 1."""
        monkeypatch.setenv(variable, "0")
        with pytest.raises(ValidationError):
            get_settings()

    def test_progress_interval_of_one(self, monkeypatch, tmp_path):
        """Test the smallest interval scans normally."""
        monkeypatch.setenv("FILESENSE_PROGRESS_INTERVAL", "1")
        (tmp_path / "a.txt").write_text("a")

        analysis = FolderScanner().analyze(tmp_path)

        assert analysis.total_files == 1
