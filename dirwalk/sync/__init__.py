"""Synchronous implementation of dirwalk.

All components here operate in a blocking, synchronous manner on the
calling thread.
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
    get_tree_paths,
    find_files,
    count_entries,
    calculate_size,
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
    # API
    'get_tree_paths',
    'find_files',
    'count_entries',
    'calculate_size',
]
