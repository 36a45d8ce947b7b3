"""Asynchronous implementation of dirwalk.

This package contains native async/await implementations for non-blocking
tree traversal. Filesystem calls run in worker threads.
"""

from .traverser import traverse, traverse_collect

# Configuration and results
from .._common import (
    TraversalConfig,
    PathEncoding,
    Entry,
    ErrorEntry,
)

# High-level API
from .api import (
    get_tree_paths_async,
    find_files_async,
    count_entries_async,
    calculate_size_async,
    parallel_traverse,
)

__all__ = [
    # Traversal
    'traverse',
    'traverse_collect',
    # Config
    'TraversalConfig',
    'PathEncoding',
    # Results
    'Entry',
    'ErrorEntry',
    # High-level API
    'get_tree_paths_async',
    'find_files_async',
    'count_entries_async',
    'calculate_size_async',
    'parallel_traverse',
]
