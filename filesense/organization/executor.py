"""
Move execution.

Carries out planned moves one at a time and returns the log of the moves
that happened. Problems with individual files are recorded and reported,
never raised.
"""

import logging
import os
from pathlib import Path
from typing import AbstractSet, Any, Dict, Iterable, List, Optional, Union

from pydantic import BaseModel, Field
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeRemainingColumn,
)

from ..core.config import Settings, get_settings
from ..core.errors import MoveFailedError, MoveItemError, SourceMissingError
from ..core.types import MoveRecord, MoveStatus
from ..shared.file_utils import relocate_file, unique_path
from .move_log import load_moves

logger = logging.getLogger(__name__)


class ExecutionResult(BaseModel):
    """Result of executing a move plan."""

    message: str = ""
    moves: List[MoveRecord] = Field(
        default_factory=list, description="Move log: succeeded moves in order"
    )
    results: List[MoveRecord] = Field(
        default_factory=list, description="Every planned move with its outcome"
    )
    total: int = 0
    moved: int = 0
    unchanged: int = 0
    skipped: int = 0
    failed: int = 0
    errors: List[str] = Field(default_factory=list)


class MoveExecutor:
    """Execute planned moves against the filesystem."""

    def __init__(
        self,
        verify_copies: Optional[bool] = None,
        max_collision_attempts: Optional[int] = None,
        show_progress: bool = False,
        settings: Optional[Settings] = None,
    ):
        """
        Initialize the executor.

        Args:
            verify_copies: Check copy sizes on cross-device moves (defaults to settings)
            max_collision_attempts: Limit for renaming on late collisions
            show_progress: Display a progress bar
            settings: Settings to read defaults from
        """
        settings = settings or get_settings()
        self.verify_copies = (
            settings.verify_copies if verify_copies is None else verify_copies
        )
        self.max_collision_attempts = (
            settings.max_collision_attempts
            if max_collision_attempts is None
            else max_collision_attempts
        )
        self.show_progress = show_progress

    def execute(
        self, moves: Iterable[Union[MoveRecord, Dict[str, Any]]]
    ) -> ExecutionResult:
        """
        Execute moves in order.

        Args:
            moves: Planned moves

        Returns:
            Execution result holding the move log and a summary message

        Raises:
            InvalidPlanError: If the moves cannot be read
        """
        planned = load_moves(moves)
        result = ExecutionResult(total=len(planned))
        claimed = {m.destination_path for m in planned}

        logger.info(f"Executing {len(planned)} moves")

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            BarColumn(),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            TimeRemainingColumn(),
            disable=not self.show_progress,
        ) as progress:
            task = progress.add_task("Organizing files...", total=len(planned))

            for move in planned:
                outcome = self._process_move(move, claimed)
                result.results.append(outcome)
                self._tally(result, outcome)
                progress.advance(task)

        result.message = _summarize(result)
        logger.info(result.message.splitlines()[0])
        return result

    def _process_move(self, move: MoveRecord, claimed: AbstractSet[Path]) -> MoveRecord:
        if move.status == MoveStatus.FAILED:
            # Planning already gave up on this one
            return move

        if move.is_noop:
            logger.debug(f"Already in place: {move.source_path}")
            return move.mark(MoveStatus.SUCCEEDED)

        try:
            return self._move_file(move, claimed)
        except SourceMissingError as e:
            logger.warning(f"Skipping {move.source_path}: {e}")
            return move.mark(MoveStatus.SKIPPED, e.code, str(e))
        except MoveItemError as e:
            logger.error(f"Error moving {move.source_path}: {e}")
            return move.mark(MoveStatus.FAILED, e.code, str(e))
        except OSError as e:
            logger.error(f"Error moving {move.source_path}: {e}")
            return move.mark(MoveStatus.FAILED, MoveFailedError.code, str(e))

    def _move_file(self, move: MoveRecord, claimed: AbstractSet[Path]) -> MoveRecord:
        source = move.source_path
        destination = move.destination_path

        if not os.path.lexists(source):
            raise SourceMissingError(f"Source no longer exists: {source}")

        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MoveFailedError(
                f"Failed to create directory {destination.parent}: {e}"
            ) from e

        renamed = move.renamed
        if os.path.lexists(destination):
            # Something appeared there after planning; count on from the original name
            free = unique_path(
                destination.parent / source.name,
                claimed - {destination},
                self.max_collision_attempts,
            )
            logger.warning(f"{destination} appeared after planning, using {free.name}")
            destination = free
            renamed = True

        relocate_file(source, destination, verify=self.verify_copies)
        logger.info(f"Moved {source} → {destination}")

        return move.model_copy(
            update={
                "destination_path": destination,
                "renamed": renamed,
                "status": MoveStatus.SUCCEEDED,
                "error_code": None,
                "error_message": None,
            }
        )

    @staticmethod
    def _tally(result: ExecutionResult, outcome: MoveRecord) -> None:
        if outcome.status == MoveStatus.SUCCEEDED:
            result.moves.append(outcome)
            if outcome.is_noop:
                result.unchanged += 1
            else:
                result.moved += 1
        elif outcome.status == MoveStatus.SKIPPED:
            result.skipped += 1
            result.errors.append(f"{outcome.source_path}: {outcome.error_message}")
        else:
            result.failed += 1
            result.errors.append(f"{outcome.source_path}: {outcome.error_message}")


def _summarize(result: ExecutionResult) -> str:
    if not result.errors:
        message = f"Organized {result.moved} files successfully."
    else:
        message = (
            f"Moved {result.moved} of {result.total} files "
            f"({result.skipped} skipped, {result.failed} failed)."
        )
    if result.unchanged:
        message += f" {result.unchanged} already in place."
    if result.errors:
        message += "\n" + "\n".join(result.errors)
    return message


def execute(moves: Iterable[Union[MoveRecord, Dict[str, Any]]]) -> ExecutionResult:
    """Execute moves with default settings."""
    return MoveExecutor().execute(moves)
