"""Configuration system for dirwalk.

This module defines how callers specify a traversal: error policy,
metadata collection, symlink handling, ordering and path filters.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from .matching import Patterns
from .paths import PathEncoding


@dataclass(frozen=True)
class TraversalConfig:
    """Options for one traversal call.

    Every field has a default, so a partial configuration is simply a
    TraversalConfig built with the fields the caller cares about.
    """

    # Error policy
    strict: bool = False                    # Fail on first error instead of reporting it

    # What to collect
    collect_stats: bool = False             # Attach os.stat_result to every Entry
    follow_symlinks: bool = False           # Resolve symlinks and descend into linked dirs

    # Ordering
    sort_entries: bool = False              # Visit each directory's children by name
    start_from: Optional[Any] = None        # Resume output at this path (needs sort_entries)

    # Path filtering
    include: Optional[Patterns] = None      # Only matching paths are emitted
    exclude: Optional[Patterns] = None      # Matching paths are skipped with their subtree
    match_dot: bool = True                  # Wildcards match dot-prefixed names

    # Representation
    path_encoding: Optional[PathEncoding] = None  # None = same as the root

    # Concurrency (eager concurrent strategy only)
    max_concurrent: Optional[int] = None    # None = unbounded

    # Custom error policy; overrides strict when given
    error_policy: Optional[Any] = field(default=None, compare=False, repr=False)
