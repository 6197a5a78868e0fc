"""
Exceptions raised by the analysis and organization engine.

Fatal errors abort an operation before anything on disk changes. Errors
derived from MoveItemError concern a single file: batches catch them,
record them on the move and carry on.
"""


class FileSenseError(Exception):
    """Base error for the project."""

    code = "Error"


class FolderNotFoundError(FileSenseError):
    code = "NotFound"


class NotAFolderError(FileSenseError):
    code = "NotADirectory"


class FolderPermissionError(FileSenseError):
    code = "PermissionDenied"


class InvalidRootError(FileSenseError):
    code = "InvalidRoot"


class InvalidPlanError(FileSenseError):
    code = "InvalidPlan"


class MoveItemError(FileSenseError):
    """A single move could not be carried out."""

    code = "MoveFailed"


class SourceMissingError(MoveItemError):
    code = "SourceMissing"


class DestinationCollisionError(MoveItemError):
    code = "DestinationCollisionUnresolved"


class MoveFailedError(MoveItemError):
    code = "MoveFailed"


class CopyVerificationError(MoveItemError):
    code = "CopyVerificationFailed"
