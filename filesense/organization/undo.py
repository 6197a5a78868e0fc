"""
Undo of organize runs.

Reverses a move log last-first. Entries that can no longer be reversed
safely are reported and skipped; the rest still go back.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, Field

from ..core.config import Settings, get_settings
from ..core.errors import (
    DestinationCollisionError,
    MoveFailedError,
    MoveItemError,
    SourceMissingError,
)
from ..core.types import MoveRecord, MoveStatus
from ..shared.file_utils import is_empty_directory, relocate_file
from .move_log import load_moves

logger = logging.getLogger(__name__)


class UndoResult(BaseModel):
    """Result of undoing a move log."""

    message: str = ""
    total: int = 0
    restored: int = 0
    already_restored: int = 0
    failed: int = 0
    errors: List[str] = Field(default_factory=list)
    results: List[MoveRecord] = Field(
        default_factory=list, description="Entries in the order they were undone"
    )


class MoveUndoer:
    """Move files back to where a move log says they came from."""

    def __init__(
        self, verify_copies: Optional[bool] = None, settings: Optional[Settings] = None
    ):
        settings = settings or get_settings()
        self.verify_copies = (
            settings.verify_copies if verify_copies is None else verify_copies
        )

    def undo(self, moves: Iterable[Union[MoveRecord, Dict[str, Any]]]) -> UndoResult:
        """
        Reverse a move log.

        Args:
            moves: Move log in the order the moves were made

        Returns:
            Undo result; SUCCEEDED entries were moved back, SKIPPED ones were
            already back in place, FAILED ones could not be reversed

        Raises:
            InvalidPlanError: If the moves cannot be read
        """
        log = load_moves(moves)
        result = UndoResult(total=len(log))

        logger.info(f"Undoing {len(log)} moves")

        for move in reversed(log):
            outcome = self._undo_move(move)
            result.results.append(outcome)

            if outcome.status == MoveStatus.SUCCEEDED:
                result.restored += 1
            elif outcome.status == MoveStatus.SKIPPED:
                result.already_restored += 1
            else:
                result.failed += 1
                result.errors.append(
                    f"{outcome.destination_path}: {outcome.error_message}"
                )

        result.message = _summarize(result)
        logger.info(result.message.splitlines()[0])
        return result

    def _undo_move(self, move: MoveRecord) -> MoveRecord:
        if move.is_noop:
            return move.mark(MoveStatus.SKIPPED)

        try:
            if self._already_restored(move):
                logger.debug(f"Already restored: {move.source_path}")
                return move.mark(MoveStatus.SKIPPED)
            self._move_back(move)
        except MoveItemError as e:
            logger.error(f"Error undoing {move.destination_path}: {e}")
            return move.mark(MoveStatus.FAILED, e.code, str(e))
        except OSError as e:
            logger.error(f"Error undoing {move.destination_path}: {e}")
            return move.mark(MoveStatus.FAILED, MoveFailedError.code, str(e))

        logger.info(f"Moved back: {move.destination_path} → {move.source_path}")
        return move.mark(MoveStatus.SUCCEEDED)

    @staticmethod
    def _already_restored(move: MoveRecord) -> bool:
        """
        True if the file is back at its source and gone from its destination.

        Raises:
            SourceMissingError: If the file is at neither location
            DestinationCollisionError: If an unrelated file sits at the source
        """
        if os.path.lexists(move.destination_path):
            return False

        if not os.path.lexists(move.source_path):
            raise SourceMissingError(
                f"File no longer exists at {move.destination_path}"
            )

        # Without a logged size the occupant cannot be told apart from the file
        if (
            move.size is None
            or os.path.islink(move.source_path)
            or move.source_path.stat().st_size != move.size
        ):
            raise DestinationCollisionError(
                f"Original location {move.source_path} holds a different file"
            )
        return True

    def _move_back(self, move: MoveRecord) -> None:
        source = move.source_path

        if os.path.lexists(source):
            raise DestinationCollisionError(
                f"Original location is occupied: {source}"
            )

        try:
            source.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MoveFailedError(f"Failed to create directory {source.parent}: {e}") from e

        relocate_file(move.destination_path, source, verify=self.verify_copies)


def _summarize(result: UndoResult) -> str:
    message = f"Restored {result.restored} of {result.total} files."
    if result.already_restored:
        message += f" {result.already_restored} already in place."
    if result.failed:
        message += f" {result.failed} could not be restored."
        message += "\n" + "\n".join(result.errors)
    return message


def undo(moves: Iterable[Union[MoveRecord, Dict[str, Any]]]) -> UndoResult:
    """Undo a move log with default settings."""
    return MoveUndoer().undo(moves)


def cleanup_empty_directories(
    moves: Iterable[Union[MoveRecord, Dict[str, Any]]]
) -> List[Path]:
    """
    Remove category directories left empty after an undo.

    Only the parent directories of the log's destinations are considered,
    and only if they contain nothing at all.

    Args:
        moves: Move log

    Returns:
        Directories that were removed
    """
    folders: List[Path] = []
    for move in load_moves(moves):
        parent = move.destination_path.parent
        if parent not in folders:
            folders.append(parent)

    removed: List[Path] = []
    for folder in folders:
        if not is_empty_directory(folder):
            continue
        try:
            folder.rmdir()
        except OSError as e:
            logger.warning(f"Could not remove {folder}: {e}")
            continue
        logger.info(f"Removed empty directory: {folder}")
        removed.append(folder)

    return removed
