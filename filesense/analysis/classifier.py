"""
Extension-based file classification.

EXTENSION_CATEGORIES is the single table mapping categories to extensions;
everything that needs to know which category an extension belongs to goes
through classify().
"""

import re
from typing import Dict, FrozenSet, List

from ..core.types import CategoryLabel

EXTENSION_CATEGORIES: Dict[CategoryLabel, FrozenSet[str]] = {
    CategoryLabel.DOCUMENTS: frozenset(
        {
            "pdf",
            "doc",
            "docx",
            "txt",
            "rtf",
            "odt",
            # Spreadsheets & presentations
            "xls",
            "xlsx",
            "csv",
            "ods",
            "ppt",
            "pptx",
            "odp",
        }
    ),
    CategoryLabel.IMAGES: frozenset(
        {"jpg", "jpeg", "png", "gif", "bmp", "tiff", "svg", "webp", "heic"}
    ),
    CategoryLabel.VIDEOS: frozenset(
        {"mp4", "mov", "avi", "mkv", "webm", "wmv", "flv", "m4v"}
    ),
    CategoryLabel.AUDIO: frozenset({"mp3", "wav", "flac", "aac", "ogg", "wma", "m4a"}),
    CategoryLabel.ARCHIVES: frozenset({"zip", "rar", "7z", "tar", "gz", "bz2", "xz"}),
    CategoryLabel.CODE: frozenset(
        {
            "js",
            "ts",
            "jsx",
            "tsx",
            "py",
            "rs",
            "go",
            "c",
            "h",
            "cpp",
            "java",
            "html",
            "css",
            "php",
            "rb",
            "swift",
            "kt",
            "cs",
            "vb",
            "sql",
            "json",
            "xml",
            "yml",
            "yaml",
        }
    ),
    CategoryLabel.SOFTWARE: frozenset(
        {"exe", "msi", "dmg", "pkg", "deb", "rpm", "appx", "app"}
    ),
}

_CATEGORY_BY_EXTENSION: Dict[str, CategoryLabel] = {
    ext: label for label, extensions in EXTENSION_CATEGORIES.items() for ext in extensions
}

# Filename keywords used by smart classification
SENSITIVE_KEYWORDS = (
    "tax",
    "irs",
    "w2",
    "1099",
    "ssn",
    "social",
    "security",
    "bank",
    "account",
    "statement",
    "routing",
    "financial",
    "password",
    "credential",
    "key",
    "secret",
    "login",
    "auth",
    "medical",
    "health",
    "prescription",
    "doctor",
    "patient",
    "personal",
    "private",
    "confidential",
    "classified",
)

WORK_KEYWORDS = (
    "meeting",
    "presentation",
    "report",
    "proposal",
    "contract",
    "client",
    "project",
    "deadline",
    "invoice",
    "budget",
    "company",
    "corporate",
    "business",
    "professional",
    "quarterly",
    "annual",
    "fiscal",
    "revenue",
    "salary",
)

PERSONAL_PHOTO_KEYWORDS = (
    "vacation",
    "holiday",
    "trip",
    "travel",
    "family",
    "birthday",
    "wedding",
    "anniversary",
    "graduation",
    "photo",
    "pic",
    "img",
    "selfie",
    "camera",
)

_PHOTO_YEAR = re.compile(r"202[3-5]")


def classify(extension: str) -> CategoryLabel:
    """
    Map an extension to its category.

    Args:
        extension: Extension with or without a leading dot, any case

    Returns:
        The matching category, or OTHER for unknown or empty extensions
    """
    ext = extension.lower().lstrip(".")
    return _CATEGORY_BY_EXTENSION.get(ext, CategoryLabel.OTHER)


def classify_file(name: str, extension: str, smart: bool = False) -> CategoryLabel:
    """
    Classify a file, optionally refining the category from its name.

    With smart=False this is classify(extension). With smart=True, names
    containing sensitive keywords go to SENSITIVE, work-related documents
    to WORK_DOCUMENTS and personal-looking images to PERSONAL_PHOTOS.

    Args:
        name: Base filename
        extension: Lowercase extension without the dot
        smart: Apply filename keyword refinements

    Returns:
        Category for the file
    """
    label = classify(extension)
    if not smart:
        return label

    lowered = name.lower()
    if _contains_any(lowered, SENSITIVE_KEYWORDS):
        return CategoryLabel.SENSITIVE
    if label == CategoryLabel.DOCUMENTS and _contains_any(lowered, WORK_KEYWORDS):
        return CategoryLabel.WORK_DOCUMENTS
    if label == CategoryLabel.IMAGES and (
        _contains_any(lowered, PERSONAL_PHOTO_KEYWORDS) or _PHOTO_YEAR.search(lowered)
    ):
        return CategoryLabel.PERSONAL_PHOTOS
    return label


def _contains_any(text: str, keywords: tuple) -> bool:
    return any(keyword in text for keyword in keywords)


def category_extensions(label: CategoryLabel) -> List[str]:
    """Sorted extensions belonging to a category (empty for derived ones)."""
    return sorted(EXTENSION_CATEGORIES.get(label, frozenset()))
