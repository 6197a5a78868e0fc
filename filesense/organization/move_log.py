"""
Move log document.

The engine hands the list of completed moves back to its caller. MoveLog
wraps that list so callers such as the CLI can write it to disk and feed
it to undo later.
"""

import json
import logging
import uuid
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Union

from pydantic import BaseModel, Field, ValidationError

from ..core.errors import InvalidPlanError
from ..core.types import MoveRecord, MoveStatus

logger = logging.getLogger(__name__)


def load_moves(items: Iterable[Union[MoveRecord, Dict[str, Any]]]) -> List[MoveRecord]:
    """
    Validate a sequence of moves given as records or plain mappings.

    Args:
        items: MoveRecord instances or their JSON-style dicts

    Returns:
        List of MoveRecord

    Raises:
        InvalidPlanError: If any item is not a valid move
    """
    if items is None:
        raise InvalidPlanError("No moves given")

    try:
        return [
            item if isinstance(item, MoveRecord) else MoveRecord.model_validate(item)
            for item in items
        ]
    except (ValidationError, TypeError) as e:
        raise InvalidPlanError(f"Invalid move list: {e}") from e


class MoveLog(BaseModel):
    """Completed moves of one organize run."""

    log_id: str = Field(
        default_factory=lambda: str(uuid.uuid4()), description="Unique log ID"
    )
    target_root: str = Field(description="Directory that was organized")
    created_at: datetime = Field(
        default_factory=datetime.now, description="When the moves were made"
    )
    moves: List[MoveRecord] = Field(
        default_factory=list, description="Succeeded moves in execution order"
    )

    def succeeded(self) -> List[MoveRecord]:
        """Moves that actually happened."""
        return [m for m in self.moves if m.status == MoveStatus.SUCCEEDED]

    def undo_order(self) -> List[MoveRecord]:
        """Succeeded moves, last one first."""
        return list(reversed(self.succeeded()))

    def save(self, log_path: Path) -> None:
        """
        Save move log to file.

        Args:
            log_path: Path to save log file
        """
        log_path.parent.mkdir(parents=True, exist_ok=True)

        with open(log_path, "w", encoding="utf-8") as f:
            json.dump(self.model_dump(mode="json"), f, indent=2)

        logger.info(f"Saved move log to {log_path}")

    @classmethod
    def load(cls, log_path: Path) -> "MoveLog":
        """
        Load move log from file.

        Args:
            log_path: Path to log file

        Returns:
            Loaded move log

        Raises:
            InvalidPlanError: If the file is not a valid move log
        """
        try:
            with open(log_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            return cls.model_validate(data)
        except (json.JSONDecodeError, ValidationError) as e:
            raise InvalidPlanError(f"Invalid move log {log_path}: {e}") from e
