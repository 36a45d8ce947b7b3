"""
Error handling policies for dirwalk.

A policy decides what happens when listing a directory or fetching
metadata fails: either the whole traversal stops, or the failure is
turned into an ErrorEntry and traversal continues with the rest of
the tree.
"""

import sys
from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .entries import ErrorEntry
from .errors import ListDirectoryError, StatError, TraversalError


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    A single policy instance is shared by every branch of a traversal,
    including concurrently running branches of the same event loop.
    """

    @abstractmethod
    def handle(self, error: TraversalError) -> ErrorEntry:
        """
        Handle a failed filesystem operation.

        Args:
            error: The failure, carrying the offending path and OS error

        Returns:
            An ErrorEntry to report in place of the node's result,
            or raises to stop the traversal.
        """
        pass


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately raises any error, stopping traversal.

    Selected by ``strict=True``. No partial results are returned.
    """

    def handle(self, error: TraversalError) -> ErrorEntry:
        """Raise the error, chained to the underlying OS error."""
        raise error from error.cause


class ContinueOnErrorsPolicy(ErrorPolicy):
    """
    Policy that reports errors inline and continues traversal.

    This is the default behavior. Errors are recorded for later
    inspection and every failure becomes an ErrorEntry in the results.
    """

    def __init__(self, verbose: bool = False):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        self.errors: List[TraversalError] = []
        self.skipped_paths: List[Any] = []
        self.verbose = verbose

    def handle(self, error: TraversalError) -> ErrorEntry:
        """Record the error and return its ErrorEntry."""
        self.errors.append(error)

        # A directory we could not list is skipped with all its children
        if isinstance(error, ListDirectoryError):
            self.skipped_paths.append(error.path)

        if self.verbose:
            if isinstance(error.cause, PermissionError):
                print(f"\nWARNING: Skipping inaccessible path {error.path!r}: {error.cause}",
                      file=sys.stderr)
            else:
                print(f"\nWARNING: {error}", file=sys.stderr)

        return ErrorEntry(path=error.path, error=error)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        return {
            'total_errors': len(self.errors),
            'list_errors': sum(1 for e in self.errors if isinstance(e, ListDirectoryError)),
            'stat_errors': sum(1 for e in self.errors if isinstance(e, StatError)),
            'permission_errors': sum(1 for e in self.errors if isinstance(e.cause, PermissionError)),
            'skipped_paths': len(self.skipped_paths),
            'errors': [
                {
                    'path': e.path,
                    'error_type': type(e).__name__,
                    'error_message': str(e),
                }
                for e in self.errors
            ],
        }

    def reset(self):
        """Forget all recorded errors."""
        self.errors.clear()
        self.skipped_paths.clear()
