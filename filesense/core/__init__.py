"""Core data model, errors and settings."""

from .config import Settings, get_settings
from .errors import (
    CopyVerificationError,
    DestinationCollisionError,
    FileSenseError,
    FolderNotFoundError,
    FolderPermissionError,
    InvalidPlanError,
    InvalidRootError,
    MoveFailedError,
    MoveItemError,
    NotAFolderError,
    SourceMissingError,
)
from .types import (
    CategoryLabel,
    FileRecord,
    FolderAnalysis,
    MoveRecord,
    MoveStatus,
    OrganizationPlan,
)

__all__ = [
    "Settings",
    "get_settings",
    "CategoryLabel",
    "FileRecord",
    "FolderAnalysis",
    "MoveRecord",
    "MoveStatus",
    "OrganizationPlan",
    "FileSenseError",
    "FolderNotFoundError",
    "NotAFolderError",
    "FolderPermissionError",
    "InvalidRootError",
    "InvalidPlanError",
    "MoveItemError",
    "SourceMissingError",
    "DestinationCollisionError",
    "MoveFailedError",
    "CopyVerificationError",
]
