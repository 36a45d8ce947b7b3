"""High-level async API for dirwalk.

This module provides simple, user-friendly async functions for common
tree questions. They use the concurrent strategy, so results that
depend on order (such as get_tree_paths_async) come back unordered.
"""

import asyncio
from typing import Any, Dict, List

from .._common.collectors import PathCollector, SizeCollector
from .._common.entries import Entry
from .traverser import ConfigLike, traverse_collect


async def get_tree_paths_async(root: Any, config: ConfigLike = None, **options: Any) -> List[Any]:
    """Get the paths of every entry under root.

    Args:
        root: Root directory
        config: TraversalConfig or mapping of its fields
        **options: Individual TraversalConfig fields

    Returns:
        List of paths, in no particular order
    """
    collector = PathCollector()
    for result in await traverse_collect(root, config, **options):
        collector.collect(result)
    return collector.get_result()


async def find_files_async(
    root: Any,
    pattern: Any = "*",
    config: ConfigLike = None,
    **options: Any
) -> List[Any]:
    """Find files (non-directories) matching a pattern.

    Args:
        root: Root directory to search
        pattern: Pattern or list of patterns, used as the include filter
        config: TraversalConfig or mapping of its fields
        **options: Individual TraversalConfig fields

    Returns:
        List of matching file paths
    """
    options = {**options, 'include': pattern}
    collector = PathCollector(files_only=True)
    for result in await traverse_collect(root, config, **options):
        collector.collect(result)
    return collector.get_result()


async def count_entries_async(root: Any, config: ConfigLike = None, **options: Any) -> int:
    """Count successful entries under root."""
    results = await traverse_collect(root, config, **options)
    return sum(1 for result in results if isinstance(result, Entry))


async def calculate_size_async(root: Any, config: ConfigLike = None, **options: Any) -> Dict[str, Any]:
    """Calculate total size of a directory tree.

    Args:
        root: Root directory
        config: TraversalConfig or mapping of its fields
        **options: Individual TraversalConfig fields (collect_stats is forced on)

    Returns:
        Dictionary with size statistics
    """
    options = {**options, 'collect_stats': True}
    collector = SizeCollector()
    for result in await traverse_collect(root, config, **options):
        collector.collect(result)
    return collector.get_result()


async def parallel_traverse(roots: List[Any], config: ConfigLike = None, **options: Any) -> Dict[Any, List[Any]]:
    """Traverse multiple trees in parallel.

    Args:
        roots: List of root directories
        config: TraversalConfig or mapping of its fields, used for every root
        **options: Individual TraversalConfig fields

    Returns:
        Dictionary mapping each root to its results
    """
    tasks = [traverse_collect(root, config, **options) for root in roots]
    results = await asyncio.gather(*tasks)

    return dict(zip(roots, results))
