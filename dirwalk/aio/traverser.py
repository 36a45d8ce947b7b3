"""Asynchronous traversal strategies.

Filesystem calls run in worker threads via asyncio.to_thread so the
event loop is never blocked.

- ``traverse``: lazy and sequential. One filesystem call is in flight
  at a time and each call is a suspension point.
- ``traverse_collect``: eager and concurrent. Siblings run as
  concurrent tasks and every descent fans out the same way, so I/O
  from different branches interleaves. A strict failure cancels the
  branches still running.
"""

import asyncio
from typing import Any, AsyncIterator, Awaitable, FrozenSet, List, Mapping, Optional, Union

from .._common.config import TraversalConfig
from .._common.core import Descend, Emit, Identity, Steps, TraversalCore, advance
from .._common.entries import DirectoryEntry, Result
from .._common.options import resolve_options
from .._common.paths import AnyPath

ConfigLike = Optional[Union[TraversalConfig, Mapping[str, Any]]]


def traverse(root: Any, config: ConfigLike = None, **options: Any) -> AsyncIterator[Result]:
    """Lazily walk a directory tree, depth-first.

    Options are resolved (and validated) immediately. Nothing touches
    the filesystem until the iterator is consumed; to cancel, simply
    stop iterating.

    Args:
        root: Root directory (str, bytes or path-like)
        config: TraversalConfig or mapping of its fields
        **options: Individual TraversalConfig fields

    Returns:
        Async iterator of Entry and ErrorEntry objects

    Raises:
        TraversalError: During iteration, on the first failure when strict

    Example:
        >>> async for entry in traverse("/data", sort_entries=True):
        ...     print(entry.path)
    """
    core = TraversalCore(resolve_options(root, config, **options))
    return _run_sequential(core)


async def traverse_collect(root: Any, config: ConfigLike = None, **options: Any) -> List[Result]:
    """Walk a directory tree concurrently and return every result.

    Sibling entries are visited concurrently, so the order of results
    across branches is not guaranteed, even with sort_entries. There is
    no limit on in-flight operations unless max_concurrent is set;
    very wide trees will create many pending tasks.

    Args:
        root: Root directory (str, bytes or path-like)
        config: TraversalConfig or mapping of its fields
        **options: Individual TraversalConfig fields

    Returns:
        List of Entry and ErrorEntry objects

    Raises:
        TraversalError: On the first failure when strict
    """
    core = TraversalCore(resolve_options(root, config, **options))
    collector = _ConcurrentCollector(core, core.config.max_concurrent)
    return await collector.collect()


async def _run_sequential(core: TraversalCore) -> AsyncIterator[Result]:
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
                reply = await asyncio.to_thread(step.perform)
            except OSError as exc:
                failure = exc


class _ConcurrentCollector:
    """Runs the core with concurrent fan-out across siblings.

    Each branch collects into its own list; a parent extends its list
    with its children's lists once they all finish.
    """

    def __init__(self, core: TraversalCore, max_concurrent: Optional[int] = None):
        """Initialize collector.

        Args:
            core: Traversal rules for this call
            max_concurrent: Maximum filesystem calls in flight (None = unbounded)
        """
        self.core = core
        self.semaphore = asyncio.Semaphore(max_concurrent) if max_concurrent else None

    async def collect(self) -> List[Result]:
        return await self._collect_directory(self.core.root, frozenset())

    async def _collect_directory(self, directory: AnyPath, ancestry: FrozenSet[Identity]) -> List[Result]:
        results: List[Result] = []
        children, ancestry = await self._run(
            self.core.list_directory(directory, ancestry), results
        )

        branches = await self._gather_branches([
            self._collect_child(directory, child, ancestry) for child in children
        ])
        for branch in branches:
            results.extend(branch)
        return results

    async def _gather_branches(self, branches: List[Awaitable[List[Result]]]) -> List[List[Result]]:
        """Run sibling branches concurrently, results in child order.

        On the first failure every other branch is cancelled and awaited
        before the failure is re-raised, so nothing keeps walking the
        tree after the call has failed.
        """
        if not branches:
            return []

        tasks = [asyncio.ensure_future(branch) for branch in branches]
        try:
            await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
        finally:
            for task in tasks:
                if not task.done():
                    task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)

        for task in tasks:
            if not task.cancelled() and task.exception() is not None:
                raise task.exception()
        return [task.result() for task in tasks]

    async def _collect_child(
        self,
        directory: AnyPath,
        child: DirectoryEntry,
        ancestry: FrozenSet[Identity],
    ) -> List[Result]:
        results: List[Result] = []
        await self._run(self.core.visit(directory, child, ancestry), results)
        return results

    async def _run(self, steps: Steps, results: List[Result]) -> Any:
        """Drive one step generator, returning its return value."""
        reply = failure = None
        while True:
            try:
                step = advance(steps, reply, failure)
            except StopIteration as stop:
                return stop.value
            reply = failure = None

            if isinstance(step, Emit):
                results.append(step.result)
            elif isinstance(step, Descend):
                results.extend(await self._collect_directory(step.path, step.ancestry))
            else:
                try:
                    reply = await self._perform(step)
                except OSError as exc:
                    failure = exc

    async def _perform(self, step) -> Any:
        if self.semaphore is None:
            return await asyncio.to_thread(step.perform)
        async with self.semaphore:
            return await asyncio.to_thread(step.perform)
