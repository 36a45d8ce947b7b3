"""Error kinds raised or reported during traversal."""

from .paths import AnyPath


class TraversalError(Exception):
    """A filesystem operation failed for one node of the tree.

    Attributes:
        path: Path of the node the operation was applied to
        cause: The underlying OSError
    """

    operation = "access"

    def __init__(self, path: AnyPath, cause: OSError):
        self.path = path
        self.cause = cause
        reason = cause.strerror or str(cause)
        super().__init__(f"Failed to {self.operation} {path!r}: {reason}")

    def __reduce__(self):
        return (self.__class__, (self.path, self.cause))


class ListDirectoryError(TraversalError):
    """Listing a directory's children failed."""

    operation = "list directory"


class StatError(TraversalError):
    """Fetching metadata for a path failed."""

    operation = "stat"
