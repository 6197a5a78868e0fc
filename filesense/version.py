"""
Version reporting.

The version is read from the installed distribution's metadata so it always
matches pyproject.toml. When running from a git checkout, the commit is
appended so development builds can be told apart.
"""

import logging
import subprocess
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)

DISTRIBUTION = "filesense"
UNKNOWN_VERSION = "0.0.0+unknown"
SOURCE_ROOT = Path(__file__).resolve().parent.parent


def installed_version() -> str:
    """Version of the installed filesense distribution."""
    try:
        return version(DISTRIBUTION)
    except PackageNotFoundError:
        return UNKNOWN_VERSION


__version__ = installed_version()


def checkout_revision(root: Path = SOURCE_ROOT) -> Optional[str]:
    """
    Describe the git commit of a source checkout.

    Args:
        root: Directory the package was loaded from

    Returns:
        Output of ``git describe --always --dirty``, or None for a regular
        install or when git is unavailable
    """
    if not (root / ".git").exists():
        return None

    try:
        result = subprocess.run(
            ["git", "describe", "--always", "--dirty"],
            cwd=root,
            capture_output=True,
            text=True,
            check=True,
            timeout=2,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug(f"Could not read git revision in {root}: {e}")
        return None

    return result.stdout.strip() or None


def get_version_string() -> str:
    """Version for --version: "0.2.0", or "0.2.0 (git:1a2b3c4-dirty)" in a checkout."""
    revision = checkout_revision()
    if revision:
        return f"{__version__} (git:{revision})"
    return __version__
