"""
Request/response operations for front ends.

Everything here takes and returns plain data (strings, numbers, lists,
dicts) so it can sit behind any transport. No state is kept between calls;
the move list returned by organize_files is all undo_organize needs.
"""

import logging
from typing import Any, Dict, List, Union

from pydantic import ValidationError

from .analysis.scanner import FolderScanner
from .core.errors import InvalidPlanError
from .core.types import MoveRecord, OrganizationPlan
from .organization.executor import MoveExecutor
from .organization.planner import MovePlanner
from .organization.undo import MoveUndoer

logger = logging.getLogger(__name__)

PlanInput = Union[OrganizationPlan, Dict[str, Any]]


def analyze_folder(folder_path: str) -> Dict[str, Any]:
    """
    Scan a folder and group its files by category.

    Returns:
        {"folder_path", "total_files", "categories": {label: [file, ...]}}

    Raises:
        FolderNotFoundError, NotAFolderError, FolderPermissionError
    """
    analysis = FolderScanner().analyze(folder_path)
    return analysis.model_dump(mode="json")


def preview_organization(plan: PlanInput) -> List[Dict[str, Any]]:
    """Plan the moves for an organization plan without touching any file."""
    moves = MovePlanner().plan(_parse_plan(plan))
    return [m.model_dump(mode="json") for m in moves]


def organize_files(plan: PlanInput) -> Dict[str, Any]:
    """
    Plan and execute an organization.

    Returns:
        {"message": summary, "moves": [succeeded move, ...]}

    Raises:
        InvalidPlanError: If the plan cannot be read
        InvalidRootError: If the target root is empty or relative
    """
    moves = MovePlanner().plan(_parse_plan(plan))
    result = MoveExecutor().execute(moves)
    return {
        "message": result.message,
        "moves": [m.model_dump(mode="json") for m in result.moves],
    }


def undo_organize(moves: List[Union[MoveRecord, Dict[str, Any]]]) -> str:
    """Reverse a move list returned by organize_files; returns the summary."""
    return MoveUndoer().undo(moves).message


def _parse_plan(plan: PlanInput) -> OrganizationPlan:
    if isinstance(plan, OrganizationPlan):
        return plan
    if not isinstance(plan, dict):
        raise InvalidPlanError("Organization plan is not an object")

    if "categories" not in plan:
        # Flat form: {"target_root": ..., "<Category>": [files], ...}
        plan = {
            "target_root": plan.get("target_root"),
            "categories": {k: v for k, v in plan.items() if k != "target_root"},
        }

    if plan.get("target_root") is None:
        raise InvalidPlanError("Missing 'target_root' in organization plan")

    try:
        return OrganizationPlan.model_validate(plan)
    except ValidationError as e:
        raise InvalidPlanError(f"Invalid organization plan: {e}") from e
