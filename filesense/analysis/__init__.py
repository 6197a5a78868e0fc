"""
Analysis module: classify files by extension and scan folders.
"""

from .classifier import (
    EXTENSION_CATEGORIES,
    category_extensions,
    classify,
    classify_file,
)
from .scanner import FolderScanner, analyze

__all__ = [
    "EXTENSION_CATEGORIES",
    "category_extensions",
    "classify",
    "classify_file",
    "FolderScanner",
    "analyze",
]
