"""
Organization module for moving files into category folders.

This module plans collision-free moves, executes them one at a time with a
verified copy fallback, and reverses them from the returned move log.
"""

from .executor import ExecutionResult, MoveExecutor, execute
from .move_log import MoveLog, load_moves
from .planner import MovePlanner, plan
from .undo import MoveUndoer, UndoResult, cleanup_empty_directories, undo

__all__ = [
    "ExecutionResult",
    "MoveExecutor",
    "execute",
    "MoveLog",
    "load_moves",
    "MovePlanner",
    "plan",
    "MoveUndoer",
    "UndoResult",
    "cleanup_empty_directories",
    "undo",
]
