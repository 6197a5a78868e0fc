"""
Folder scanner.

Lists the top-level files of a folder, builds a FileRecord for each and
groups them by category. Subdirectories are skipped, never descended into.
"""

import logging
import os
from pathlib import Path
from typing import List, Optional, Union

from ..core.config import Settings, get_settings
from ..core.errors import FolderNotFoundError, FolderPermissionError, NotAFolderError
from ..core.types import FileRecord, FolderAnalysis
from ..shared.file_utils import file_extension
from .classifier import classify_file

logger = logging.getLogger(__name__)


class FolderScanner:
    """Scan a folder and classify its files."""

    def __init__(
        self,
        include_hidden: Optional[bool] = None,
        smart: Optional[bool] = None,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the scanner.

        Args:
            include_hidden: Include dot-files (defaults to settings)
            smart: Refine categories from filename keywords (defaults to settings)
            settings: Settings to read defaults from
        """
        self.settings = settings or get_settings()
        self.include_hidden = (
            self.settings.include_hidden if include_hidden is None else include_hidden
        )
        self.smart = self.settings.smart_categories if smart is None else smart

    def analyze(self, folder_path: Union[str, Path]) -> FolderAnalysis:
        """
        Scan a folder and group its files by category.

        Args:
            folder_path: Directory to scan

        Returns:
            Analysis with every top-level regular file in exactly one category

        Raises:
            FolderNotFoundError: If the path does not exist
            NotAFolderError: If the path is not a directory
            FolderPermissionError: If the directory cannot be read
        """
        folder = _validate_folder(folder_path)
        logger.info(f"Starting analysis of folder: {folder}")

        analysis = FolderAnalysis(folder_path=folder)

        for record in self._collect_files(folder):
            label = classify_file(record.name, record.extension, smart=self.smart)
            analysis.add(label, record)

            if analysis.total_files % self.settings.progress_interval == 0:
                logger.info(f"Processed {analysis.total_files} files...")

        logger.info(f"Analysis complete: {analysis.total_files} files categorized")
        for category, count in analysis.summary().items():
            logger.debug(f"{category}: {count} files")

        return analysis

    def _collect_files(self, folder: Path) -> List[FileRecord]:
        """Build records for the regular files directly inside folder."""
        records: List[FileRecord] = []

        try:
            with os.scandir(folder) as entries:
                for entry in entries:
                    if not self.include_hidden and entry.name.startswith("."):
                        continue

                    try:
                        if not entry.is_file(follow_symlinks=False):
                            logger.debug(f"Skipping non-file entry: {entry.path}")
                            continue
                        size = entry.stat(follow_symlinks=False).st_size
                    except FileNotFoundError:
                        # Removed while we were listing
                        logger.warning(f"Entry disappeared during scan: {entry.path}")
                        continue

                    records.append(
                        FileRecord(
                            name=entry.name,
                            path=folder / entry.name,
                            size=size,
                            extension=file_extension(entry.name),
                        )
                    )
        except PermissionError as e:
            raise FolderPermissionError(f"Cannot read directory {folder}: {e}") from e

        return records


def _validate_folder(folder_path: Union[str, Path]) -> Path:
    if not str(folder_path).strip():
        raise FolderNotFoundError("No folder given")

    folder = Path(folder_path).expanduser().absolute()

    if not folder.exists():
        raise FolderNotFoundError(f"Folder does not exist: {folder}")
    if not folder.is_dir():
        raise NotAFolderError(f"Path is not a directory: {folder}")
    if not os.access(folder, os.R_OK | os.X_OK):
        raise FolderPermissionError(f"Cannot read directory: {folder}")

    return folder


def analyze(
    folder_path: Union[str, Path],
    include_hidden: Optional[bool] = None,
    smart: Optional[bool] = None,
) -> FolderAnalysis:
    """
    Scan a folder and group its files by category.

    Args:
        folder_path: Directory to scan
        include_hidden: Include dot-files (defaults to settings)
        smart: Refine categories from filename keywords (defaults to settings)

    Returns:
        Folder analysis
    """
    return FolderScanner(include_hidden=include_hidden, smart=smart).analyze(
        folder_path
    )
