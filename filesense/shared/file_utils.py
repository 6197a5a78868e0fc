"""
File utilities for FileSense.

Name handling, collision-free naming, and the rename-or-copy relocation
used by both organizing and undoing.
"""

import errno
import logging
import os
import shutil
from pathlib import Path
from typing import AbstractSet, Optional, Tuple

from ..core.errors import (
    CopyVerificationError,
    DestinationCollisionError,
    MoveFailedError,
    SourceMissingError,
)

logger = logging.getLogger(__name__)


def split_name(name: str) -> Tuple[str, str]:
    """
    Split a filename into base and extension at the last dot.

    A leading dot belongs to the base, so ".bashrc" has no extension while
    ".config.json" has "json". A trailing dot yields an empty extension.

    Args:
        name: Base filename

    Returns:
        (base, extension) with the extension's case preserved and no dot
    """
    lead = "." if name.startswith(".") else ""
    rest = name[len(lead) :]
    if "." not in rest:
        return name, ""
    base, ext = rest.rsplit(".", 1)
    if not ext:
        return name, ""
    return lead + base, ext


def file_extension(name: str) -> str:
    """Lowercase extension of a filename, without the dot."""
    return split_name(name)[1].lower()


def suffixed_name(name: str, counter: int) -> str:
    """Insert ' (counter)' before the extension: report.pdf -> report (1).pdf."""
    base, ext = split_name(name)
    if ext:
        return f"{base} ({counter}).{ext}"
    return f"{base} ({counter})"


def unique_path(
    dest: Path,
    reserved: AbstractSet[Path] = frozenset(),
    max_attempts: int = 9999,
) -> Path:
    """
    Find a destination that neither exists on disk nor is reserved.

    If dest is taken, append ' (1)', ' (2)', ... before the extension.

    Args:
        dest: Preferred destination
        reserved: Paths already claimed by the current batch
        max_attempts: Highest counter to try

    Returns:
        A free path

    Raises:
        DestinationCollisionError: If no free name was found
    """
    if not _is_taken(dest, reserved):
        return dest

    for counter in range(1, max_attempts + 1):
        candidate = dest.parent / suffixed_name(dest.name, counter)
        if not _is_taken(candidate, reserved):
            return candidate

    raise DestinationCollisionError(f"Too many naming conflicts for {dest}")


def _is_taken(path: Path, reserved: AbstractSet[Path]) -> bool:
    # lexists so that dangling symlinks count as occupied
    return path in reserved or os.path.lexists(path)


def relocate_file(source: Path, destination: Path, verify: bool = True) -> None:
    """
    Move a file, atomically when possible.

    Tries a single rename first. When source and destination are on
    different devices, copies the file, checks the copy's size against the
    source and only then removes the source.

    Args:
        source: Existing file
        destination: Path that must not exist yet
        verify: Compare byte sizes before deleting the source after a copy

    Raises:
        SourceMissingError: If the source is gone
        MoveFailedError: If the destination is occupied or the OS refuses
        CopyVerificationError: If the copy does not match the source
    """
    if not os.path.lexists(source):
        raise SourceMissingError(f"Source no longer exists: {source}")
    if os.path.lexists(destination):
        raise MoveFailedError(f"Destination already exists: {destination}")

    try:
        os.rename(source, destination)
        return
    except OSError as e:
        if e.errno != errno.EXDEV:
            raise MoveFailedError(f"Failed to move {source}: {e}") from e

    logger.debug(f"Cross-device move, copying {source} → {destination}")
    _copy_then_delete(source, destination, verify)


def _copy_then_delete(source: Path, destination: Path, verify: bool) -> None:
    try:
        expected_size = source.stat().st_size
        shutil.copy2(source, destination)
    except OSError as e:
        _discard_partial(destination)
        raise MoveFailedError(f"Failed to copy {source}: {e}") from e

    if verify:
        actual_size = destination.stat().st_size
        if actual_size != expected_size:
            _discard_partial(destination)
            raise CopyVerificationError(
                f"Size mismatch after copying {source}: "
                f"expected {expected_size}, got {actual_size}"
            )

    try:
        source.unlink()
    except OSError as e:
        # The copy is complete; take it back so the file exists only once
        _discard_partial(destination)
        raise MoveFailedError(f"Failed to remove {source} after copy: {e}") from e


def _discard_partial(path: Path) -> None:
    try:
        if os.path.lexists(path):
            path.unlink()
    except OSError as e:
        logger.error(f"Could not remove partial copy {path}: {e}")


def is_empty_directory(path: Path) -> bool:
    """True if path is a directory with no entries."""
    try:
        return path.is_dir() and not any(path.iterdir())
    except PermissionError:
        return False


def format_bytes(size_bytes: int) -> str:
    """
    Format bytes in human-readable format.

    Args:
        size_bytes: Size in bytes

    Returns:
        Formatted string (e.g., "2.50 GB")
    """
    if size_bytes == 0:
        return "0 B"

    units = ["B", "KB", "MB", "GB", "TB", "PB"]
    unit_index = 0
    size = float(size_bytes)

    while size >= 1024.0 and unit_index < len(units) - 1:
        size /= 1024.0
        unit_index += 1

    return f"{size:.2f} {units[unit_index]}"


def setup_logging(
    verbose: bool = False, quiet: bool = False, handler: Optional[logging.Handler] = None
) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, set logging level to DEBUG
        quiet: If True, set logging level to WARNING
        handler: Optional handler to install instead of the default stream
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    if handler is not None:
        logging.basicConfig(level=level, format="%(message)s", handlers=[handler])
        return

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
