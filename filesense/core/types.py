"""
Type definitions for folder analysis and organization.
"""

from enum import Enum
from pathlib import Path
from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CategoryLabel(str, Enum):
    """Category a file is sorted into. Values double as folder names."""

    DOCUMENTS = "Documents"
    IMAGES = "Images"
    VIDEOS = "Videos"
    AUDIO = "Audio"
    ARCHIVES = "Archives"
    CODE = "Code"
    SOFTWARE = "Software"
    WORK_DOCUMENTS = "Work Documents"
    PERSONAL_PHOTOS = "Personal Photos"
    SENSITIVE = "Sensitive"
    OTHER = "Other"


class MoveStatus(str, Enum):
    """Outcome of a single planned move."""

    PLANNED = "planned"
    SUCCEEDED = "succeeded"
    SKIPPED = "skipped"
    FAILED = "failed"


class FileRecord(BaseModel):
    """A top-level file as seen at scan time."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Base filename including extension")
    path: Path = Field(description="Absolute path at scan time")
    size: int = Field(ge=0, description="Size in bytes when scanned")
    extension: str = Field(
        default="", description="Lowercase extension without the leading dot"
    )


def _empty_categories() -> Dict[CategoryLabel, List[FileRecord]]:
    return {label: [] for label in CategoryLabel}


class FolderAnalysis(BaseModel):
    """Result of scanning a folder."""

    folder_path: Path
    total_files: int = 0
    categories: Dict[CategoryLabel, List[FileRecord]] = Field(
        default_factory=_empty_categories
    )

    @property
    def total_size(self) -> int:
        """Sum of the sizes of all scanned files."""
        return sum(f.size for files in self.categories.values() for f in files)

    def add(self, label: CategoryLabel, record: FileRecord) -> None:
        """Append a record to its category and bump the file count."""
        self.categories.setdefault(label, []).append(record)
        self.total_files += 1

    def summary(self) -> Dict[str, int]:
        """Per-category file counts, non-empty categories only."""
        return {
            label.value: len(files)
            for label, files in self.categories.items()
            if files
        }


class OrganizationPlan(BaseModel):
    """Target root plus the category grouping to organize into."""

    target_root: str = Field(description="Absolute directory to organize into")
    categories: Dict[CategoryLabel, List[FileRecord]] = Field(default_factory=dict)

    @classmethod
    def from_analysis(
        cls, analysis: FolderAnalysis, target_root: Optional[str] = None
    ) -> "OrganizationPlan":
        """
        Build a plan from a folder analysis.

        Args:
            analysis: Result of scanning a folder
            target_root: Directory to organize into (defaults to the scanned folder)

        Returns:
            Organization plan containing the non-empty categories
        """
        root = target_root if target_root is not None else str(analysis.folder_path)
        return cls(
            target_root=root,
            categories={
                label: list(files)
                for label, files in analysis.categories.items()
                if files
            },
        )


class MoveRecord(BaseModel):
    """One planned or executed relocation."""

    source_path: Path
    destination_path: Path
    category: CategoryLabel
    size: Optional[int] = Field(default=None, description="Size in bytes when planned")
    status: MoveStatus = MoveStatus.PLANNED
    renamed: bool = Field(
        default=False, description="Name was changed to avoid a collision"
    )
    error_code: Optional[str] = None
    error_message: Optional[str] = None

    @property
    def is_noop(self) -> bool:
        """True when the file is already where it belongs."""
        return self.source_path == self.destination_path

    def mark(
        self,
        status: MoveStatus,
        error_code: Optional[str] = None,
        error_message: Optional[str] = None,
    ) -> "MoveRecord":
        """Return a copy annotated with an outcome."""
        return self.model_copy(
            update={
                "status": status,
                "error_code": error_code,
                "error_message": error_message,
            }
        )
