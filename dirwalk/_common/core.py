"""Shared recursion core for every traversal strategy.

The core holds all traversal rules (filtering, stat decisions, entry
building, recursion and error policy) but performs no I/O itself.
Its methods are generators that yield steps:

- ``ListDirectory`` / ``StatPath``: filesystem operations. The driver
  performs them and sends back the result, or throws the OSError.
- ``Emit``: a result for the caller.
- ``Descend``: a subdirectory to traverse with the same rules.

Drivers decide only *how* steps run: inline and blocking, awaited one
at a time, or awaited concurrently across siblings. This keeps the
lazy, concurrent and blocking strategies in exact agreement.
"""

import os
import stat as stat_module
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, FrozenSet, Generator, List, NamedTuple, Optional, Tuple

from .entries import DirectoryEntry, Result, build_entry
from .errors import ListDirectoryError, StatError
from .options import ResolvedTraversal, ResumePosition
from .paths import AnyPath

Identity = Tuple[int, int]  # (st_dev, st_ino)


class Listing(NamedTuple):
    """Children of a directory, plus its identity when tracked."""
    children: List[DirectoryEntry]
    identity: Optional[Identity]


@dataclass(frozen=True)
class ListDirectory:
    """Step: list a directory's children."""
    path: AnyPath
    identify: bool = False

    def perform(self) -> Listing:
        with os.scandir(self.path) as iterator:
            children = [DirectoryEntry.from_dir_entry(entry) for entry in iterator]
        identity = None
        if self.identify:
            info = os.stat(self.path)
            identity = (info.st_dev, info.st_ino)
        return Listing(children, identity)


@dataclass(frozen=True)
class StatPath:
    """Step: fetch metadata, following symlinks or not (stat vs lstat)."""
    path: AnyPath
    follow_symlinks: bool = False

    def perform(self) -> os.stat_result:
        return os.stat(self.path, follow_symlinks=self.follow_symlinks)


@dataclass(frozen=True)
class Emit:
    """Step: hand a result to the caller."""
    result: Result


@dataclass(frozen=True)
class Descend:
    """Step: traverse a subdirectory.

    Attributes:
        path: Directory to traverse
        ancestry: Identities of the directories above it on this branch
    """
    path: AnyPath
    ancestry: FrozenSet[Identity]


Step = Any
Steps = Generator[Step, Any, Any]


def advance(steps: Steps, reply: Any = None, failure: Optional[BaseException] = None) -> Step:
    """Resume a step generator with the previous step's outcome.

    Raises:
        StopIteration: When the generator is finished
    """
    if failure is not None:
        return steps.throw(failure)
    return steps.send(reply)


class TraversalCore:
    """Traversal rules for one resolved call.

    The resolved config, matchers and policy are shared by reference
    with every branch; nothing here mutates them.
    """

    def __init__(self, resolved: ResolvedTraversal):
        self.resolved = resolved
        self.config = resolved.config
        self.flavor = resolved.flavor
        self.matchers = resolved.matchers
        self.policy = resolved.policy
        self.resume = resolved.resume

    @property
    def root(self) -> AnyPath:
        return self.resolved.root

    def walk(self) -> Steps:
        """Steps for the whole tree, depth-first and sequential."""
        yield from self.walk_directory(self.root, frozenset())

    def walk_directory(self, directory: AnyPath, ancestry: FrozenSet[Identity]) -> Steps:
        """Steps for one directory: list it, then visit each child in turn."""
        children, ancestry = yield from self.list_directory(directory, ancestry)
        for child in children:
            yield from self.visit(directory, child, ancestry)

    def list_directory(self, directory: AnyPath, ancestry: FrozenSet[Identity]) -> Steps:
        """List a directory.

        Returns (via StopIteration) the children to visit and the
        ancestry to pass to them. A listing failure yields one error
        result for the directory and no children.
        """
        try:
            listing = yield ListDirectory(directory, identify=self.config.follow_symlinks)
        except OSError as exc:
            yield Emit(self.policy.handle(ListDirectoryError(directory, exc)))
            return [], ancestry

        children = listing.children
        if self.config.sort_entries:
            children = sorted(children, key=attrgetter("name"))
        if listing.identity is not None:
            ancestry = ancestry | {listing.identity}
        return children, ancestry

    def visit(self, directory: AnyPath, child: DirectoryEntry, ancestry: FrozenSet[Identity]) -> Steps:
        """Filter, emit and possibly descend into one child."""
        config = self.config
        path = self.flavor.join(directory, child.name)

        if self.matchers.is_excluded(path, child.is_dir):
            return

        emit = self.matchers.is_included(path, child.is_dir)
        if self.resume is not None:
            position = self.resume.position(path)
            if position is ResumePosition.BEFORE:
                return
            if position is ResumePosition.ANCESTOR:
                emit = False

        follow = config.follow_symlinks and child.is_symlink
        stats = None
        if follow or (emit and config.collect_stats):
            try:
                stats = yield StatPath(path, follow_symlinks=config.follow_symlinks)
            except OSError as exc:
                failure = self.policy.handle(StatError(path, exc))
                if emit:
                    yield Emit(failure)
                    emit = False

        if emit:
            yield Emit(build_entry(child, path, stats, config.collect_stats))

        if follow:
            if stats is None or not stat_module.S_ISDIR(stats.st_mode):
                return
            # Link back to a directory already open on this branch
            if (stats.st_dev, stats.st_ino) in ancestry:
                return
        elif not child.is_dir:
            return

        yield Descend(path, ancestry)
