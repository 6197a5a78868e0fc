"""Tests for core data models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from filesense.core.types import (
    CategoryLabel,
    FileRecord,
    FolderAnalysis,
    OrganizationPlan,
)


def record(name: str, size: int = 10) -> FileRecord:
    return FileRecord(name=name, path=Path("/data") / name, size=size, extension="")


class TestFileRecord:
    """Test the scanned file model."""

    def test_frozen(self):
        """Test records cannot be changed after scanning."""
        rec = record("a.txt")
        with pytest.raises(ValidationError):
            rec.size = 5

    def test_negative_size_rejected(self):
        """Test sizes are non-negative."""
        with pytest.raises(ValidationError):
            record("a.txt", size=-1)


class TestCategoryLabel:
    """Test category labels."""

    def test_folder_names(self):
        """Test labels are their folder names."""
        assert CategoryLabel.DOCUMENTS.value == "Documents"
        assert CategoryLabel("Work Documents") is CategoryLabel.WORK_DOCUMENTS
        assert CategoryLabel.OTHER == "Other"

    def test_other_is_last(self):
        """Test the fallback label sorts last."""
        assert list(CategoryLabel)[-1] is CategoryLabel.OTHER


class TestFolderAnalysis:
    """Test folder analysis results."""

    def test_starts_with_every_label(self):
        """Test a new analysis has an empty list per label."""
        analysis = FolderAnalysis(folder_path=Path("/data"))
        assert set(analysis.categories) == set(CategoryLabel)
        assert analysis.total_files == 0
        assert analysis.summary() == {}

    def test_add_and_summary(self):
        """Test adding records updates counts and sizes."""
        analysis = FolderAnalysis(folder_path=Path("/data"))
        analysis.add(CategoryLabel.DOCUMENTS, record("a.pdf", 100))
        analysis.add(CategoryLabel.DOCUMENTS, record("b.pdf", 50))
        analysis.add(CategoryLabel.IMAGES, record("c.png", 1))

        assert analysis.total_files == 3
        assert analysis.total_size == 151
        assert analysis.summary() == {"Documents": 2, "Images": 1}

    def test_json_dump(self):
        """Test the JSON shape uses label strings as keys."""
        analysis = FolderAnalysis(folder_path=Path("/data"))
        analysis.add(CategoryLabel.AUDIO, record("s.mp3"))

        data = analysis.model_dump(mode="json")

        assert data["folder_path"] == "/data"
        assert data["total_files"] == 1
        assert data["categories"]["Audio"][0]["path"] == "/data/s.mp3"
        assert data["categories"]["Images"] == []


class TestOrganizationPlan:
    """Test building organization plans."""

    def test_from_analysis_defaults_to_scanned_folder(self):
        """Test the scanned folder is the default target root."""
        analysis = FolderAnalysis(folder_path=Path("/data"))
        analysis.add(CategoryLabel.CODE, record("x.py"))

        plan = OrganizationPlan.from_analysis(analysis)

        assert plan.target_root == "/data"
        assert list(plan.categories) == [CategoryLabel.CODE]

    def test_from_analysis_with_target(self):
        """Test an explicit target root."""
        analysis = FolderAnalysis(folder_path=Path("/data"))
        plan = OrganizationPlan.from_analysis(analysis, "/elsewhere")
        assert plan.target_root == "/elsewhere"
        assert plan.categories == {}

    def test_unknown_category_rejected(self):
        """Test labels outside the fixed set fail validation."""
        with pytest.raises(ValidationError):
            OrganizationPlan.model_validate(
                {"target_root": "/data", "categories": {"Spreadsheets": []}}
            )
