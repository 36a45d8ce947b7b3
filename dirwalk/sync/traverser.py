"""Blocking traversal strategies.

Both functions run every filesystem operation inline on the calling
thread. No event loop or worker threads are involved, so they are safe
to use from inside other blocking code.
"""

from typing import Any, Iterator, List, Mapping, Optional, Union

from .._common.config import TraversalConfig
from .._common.core import Descend, Emit, TraversalCore, advance
from .._common.entries import Result
from .._common.options import resolve_options

ConfigLike = Optional[Union[TraversalConfig, Mapping[str, Any]]]


def traverse(root: Any, config: ConfigLike = None, **options: Any) -> Iterator[Result]:
    """Lazily walk a directory tree, depth-first.

    Options are resolved (and validated) immediately; the filesystem is
    only touched as the returned iterator is consumed. Stopping the
    iteration stops the traversal.

    Args:
        root: Root directory (str, bytes or path-like)
        config: TraversalConfig or mapping of its fields
        **options: Individual TraversalConfig fields

    Returns:
        Iterator of Entry and ErrorEntry objects

    Raises:
        TraversalError: During iteration, on the first failure when strict

    Example:
        >>> for entry in traverse("project", exclude="**/node_modules"):
        ...     print(entry.path)
    """
    core = TraversalCore(resolve_options(root, config, **options))
    return _run(core)


def traverse_collect(root: Any, config: ConfigLike = None, **options: Any) -> List[Result]:
    """Walk a directory tree and return every result at once.

    Same rules and ordering as traverse(); the calling thread is
    blocked for the whole walk.

    Args:
        root: Root directory (str, bytes or path-like)
        config: TraversalConfig or mapping of its fields
        **options: Individual TraversalConfig fields

    Returns:
        List of Entry and ErrorEntry objects

    Raises:
        TraversalError: On the first failure when strict
    """
    return list(traverse(root, config, **options))


def _run(core: TraversalCore) -> Iterator[Result]:
    """Drive the core's steps inline.

    Uses an explicit stack of per-directory step generators instead of
    recursion, so tree depth is not bounded by the interpreter stack.
    """
    stack = [core.walk()]
    reply = failure = None

    while stack:
        try:
            step = advance(stack[-1], reply, failure)
        except StopIteration:
            stack.pop()
            reply = failure = None
            continue
        reply = failure = None

        if isinstance(step, Emit):
            yield step.result
        elif isinstance(step, Descend):
            stack.append(core.walk_directory(step.path, step.ancestry))
        else:
            try:
                reply = step.perform()
            except OSError as exc:
                failure = exc
