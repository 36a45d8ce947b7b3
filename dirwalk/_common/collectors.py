"""Data collectors for traversal results.

Collectors consume Entry/ErrorEntry results one at a time and
aggregate them. They do no I/O, so the sync and aio helpers share them.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List

from .entries import Entry, ErrorEntry, Result


class DataCollector(ABC):
    """Abstract base class for result collectors."""

    def __init__(self):
        """Initialize collector with empty state."""
        self.reset()

    @abstractmethod
    def collect(self, result: Result) -> None:
        """Collect data from a single result."""
        pass

    @abstractmethod
    def reset(self):
        """Reset collector state."""
        pass

    @abstractmethod
    def get_result(self) -> Any:
        """Get final collected result."""
        pass


class PathCollector(DataCollector):
    """Collects paths of successful entries, optionally files only."""

    def __init__(self, files_only: bool = False):
        self.files_only = files_only
        super().__init__()

    def reset(self):
        self.paths: List[Any] = []

    def collect(self, result: Result) -> None:
        if not isinstance(result, Entry):
            return
        if self.files_only and result.is_directory:
            return
        self.paths.append(result.path)

    def get_result(self) -> List[Any]:
        return self.paths


class SizeCollector(DataCollector):
    """Collects and aggregates sizes from entries.

    Entries must carry stats (collect_stats=True) for sizes to count.
    Errors are counted but otherwise ignored.
    """

    def reset(self):
        """Reset size counters."""
        self.total_size = 0
        self.file_count = 0
        self.dir_count = 0
        self.error_count = 0
        self.largest_file = None
        self.largest_file_size = 0

    def collect(self, result: Result) -> None:
        if isinstance(result, ErrorEntry):
            self.error_count += 1
            return

        if result.is_directory:
            self.dir_count += 1
            return

        self.file_count += 1
        if result.stats is None:
            return

        size = result.stats.st_size
        self.total_size += size
        if self.largest_file is None or size > self.largest_file_size:
            self.largest_file = result.path
            self.largest_file_size = size

    def get_result(self) -> Dict[str, Any]:
        """Get size statistics.

        Returns:
            Dictionary with totals, counts and the largest file
        """
        return {
            'total_size': self.total_size,
            'file_count': self.file_count,
            'dir_count': self.dir_count,
            'error_count': self.error_count,
            'average_size': self.total_size / self.file_count if self.file_count > 0 else 0,
            'largest_file': self.largest_file,
            'largest_file_size': self.largest_file_size,
        }
