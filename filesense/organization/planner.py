"""
Move planning.

Turns a category grouping into an ordered list of moves into
``target_root/<category>/``, renaming destinations that would collide with
existing entries or with each other.
"""

import logging
from pathlib import Path
from typing import List, Optional, Set

from ..core.config import Settings, get_settings
from ..core.errors import DestinationCollisionError, InvalidRootError
from ..core.types import CategoryLabel, MoveRecord, MoveStatus, OrganizationPlan
from ..shared.file_utils import unique_path

logger = logging.getLogger(__name__)


class MovePlanner:
    """Compute collision-free destinations for an organization plan."""

    def __init__(
        self,
        max_collision_attempts: Optional[int] = None,
        settings: Optional[Settings] = None,
    ):
        settings = settings or get_settings()
        self.max_collision_attempts = (
            settings.max_collision_attempts
            if max_collision_attempts is None
            else max_collision_attempts
        )

    def plan(self, organization_plan: OrganizationPlan) -> List[MoveRecord]:
        """
        Build the move list for a plan.

        Categories are visited in CategoryLabel order and files in list
        order, so identical input against an identical filesystem always
        gives the same moves.

        Args:
            organization_plan: Target root and category grouping

        Returns:
            One MoveRecord per file. Files already in place get a no-op move;
            files whose name could not be made unique get a FAILED move.

        Raises:
            InvalidRootError: If target_root is empty or relative
        """
        root = self.get_target_root(organization_plan.target_root)

        moves: List[MoveRecord] = []
        reserved: Set[Path] = set()
        seen_sources: Set[Path] = set()

        for label in CategoryLabel:
            files = organization_plan.categories.get(label)
            if not files:
                continue

            target_dir = self.get_target_directory(root, label)

            for record in files:
                source = Path(record.path)
                if source in seen_sources:
                    logger.warning(f"Ignoring duplicate entry for {source}")
                    continue
                seen_sources.add(source)

                preferred = target_dir / record.name

                if source == preferred:
                    logger.debug(f"Already in place: {source}")
                    reserved.add(preferred)
                    moves.append(
                        MoveRecord(
                            source_path=source,
                            destination_path=preferred,
                            category=label,
                            size=record.size,
                        )
                    )
                    continue

                try:
                    destination = unique_path(
                        preferred, reserved, self.max_collision_attempts
                    )
                except DestinationCollisionError as e:
                    logger.error(str(e))
                    moves.append(
                        MoveRecord(
                            source_path=source,
                            destination_path=preferred,
                            category=label,
                            size=record.size,
                            status=MoveStatus.FAILED,
                            error_code=e.code,
                            error_message=str(e),
                        )
                    )
                    continue

                renamed = destination != preferred
                if renamed:
                    logger.info(f"Name conflict for {preferred}, using {destination.name}")

                reserved.add(destination)
                moves.append(
                    MoveRecord(
                        source_path=source,
                        destination_path=destination,
                        category=label,
                        size=record.size,
                        renamed=renamed,
                    )
                )

        logger.info(f"Planned {len(moves)} moves into {root}")
        return moves

    @staticmethod
    def get_target_root(target_root: str) -> Path:
        """
        Validate and return the target root.

        Raises:
            InvalidRootError: If target_root is empty or not absolute
        """
        if not target_root or not target_root.strip():
            raise InvalidRootError("Target root is empty")

        root = Path(target_root)
        if not root.is_absolute():
            raise InvalidRootError(f"Target root must be an absolute path: {target_root}")

        return root

    @staticmethod
    def get_target_directory(root: Path, label: CategoryLabel) -> Path:
        """Directory a category's files are moved into."""
        return root / label.value


def plan(organization_plan: OrganizationPlan) -> List[MoveRecord]:
    """Plan moves for an organization plan with default settings."""
    return MovePlanner().plan(organization_plan)
