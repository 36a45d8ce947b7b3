"""dirwalk - Recursive directory traversal.

dirwalk enumerates every file and directory under a root, with
include/exclude patterns, optional symlink following and optional
per-entry metadata.

Choose your implementation:
━━━━━━━━━━━━━━━━━━━━━━━━━━
Synchronous (blocking):
    from dirwalk.sync import traverse, traverse_collect

Asynchronous:
    from dirwalk.aio import traverse            # lazy, one call in flight
    from dirwalk.aio import traverse_collect    # eager, concurrent
━━━━━━━━━━━━━━━━━━━━━━━━━━

All strategies share one set of traversal rules and agree on which
entries a tree produces; they differ only in how the work is scheduled.
"""

__version__ = "0.1.0"

# Re-export submodules for convenient access
from . import sync
from . import aio

# Types shared by both implementations
from ._common import (
    TraversalConfig,
    PathEncoding,
    Entry,
    ErrorEntry,
    TraversalError,
    ListDirectoryError,
    StatError,
    ErrorPolicy,
    FailFastPolicy,
    ContinueOnErrorsPolicy,
)

# Users must explicitly choose their implementation
__all__ = [
    "__version__",
    "sync",
    "aio",
    "TraversalConfig",
    "PathEncoding",
    "Entry",
    "ErrorEntry",
    "TraversalError",
    "ListDirectoryError",
    "StatError",
    "ErrorPolicy",
    "FailFastPolicy",
    "ContinueOnErrorsPolicy",
]
