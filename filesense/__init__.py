"""
FileSense - folder analysis and organization.

Scans a folder, sorts its files into category subfolders and can put
everything back from the returned move log.
"""

from .api import analyze_folder, organize_files, preview_organization, undo_organize
from .version import __version__

__all__ = [
    "__version__",
    "analyze_folder",
    "organize_files",
    "preview_organization",
    "undo_organize",
]
