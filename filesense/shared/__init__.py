"""
Shared utilities for FileSense.
"""

from .file_utils import (
    file_extension,
    format_bytes,
    is_empty_directory,
    relocate_file,
    setup_logging,
    split_name,
    suffixed_name,
    unique_path,
)

__all__ = [
    "file_extension",
    "format_bytes",
    "is_empty_directory",
    "relocate_file",
    "setup_logging",
    "split_name",
    "suffixed_name",
    "unique_path",
]
