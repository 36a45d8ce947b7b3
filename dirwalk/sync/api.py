"""High-level blocking API for dirwalk.

Simple functions for common questions about a directory tree, built on
the blocking traversal strategy.
"""

from typing import Any, Dict, List

from .._common.collectors import PathCollector, SizeCollector
from .._common.entries import Entry
from .traverser import ConfigLike, traverse


def get_tree_paths(root: Any, config: ConfigLike = None, **options: Any) -> List[Any]:
    """Get the paths of every entry under root.

    Errors are skipped (they are still reported to the error policy,
    so strict mode raises as usual).

    Args:
        root: Root directory
        config: TraversalConfig or mapping of its fields
        **options: Individual TraversalConfig fields

    Returns:
        List of paths in traversal order
    """
    collector = PathCollector()
    for result in traverse(root, config, **options):
        collector.collect(result)
    return collector.get_result()


def find_files(root: Any, pattern: Any = "*", config: ConfigLike = None, **options: Any) -> List[Any]:
    """Find files (non-directories) matching a pattern.

    Args:
        root: Root directory to search
        pattern: Pattern or list of patterns, used as the include filter
        config: TraversalConfig or mapping of its fields
        **options: Individual TraversalConfig fields

    Returns:
        List of matching file paths

    Example:
        >>> find_files("src", "*.py", sort_entries=True)
        ['src/app.py', 'src/pkg/__init__.py']
    """
    options = {**options, 'include': pattern}
    collector = PathCollector(files_only=True)
    for result in traverse(root, config, **options):
        collector.collect(result)
    return collector.get_result()


def count_entries(root: Any, config: ConfigLike = None, **options: Any) -> int:
    """Count successful entries under root."""
    return sum(1 for result in traverse(root, config, **options) if isinstance(result, Entry))


def calculate_size(root: Any, config: ConfigLike = None, **options: Any) -> Dict[str, Any]:
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
    for result in traverse(root, config, **options):
        collector.collect(result)
    return collector.get_result()
