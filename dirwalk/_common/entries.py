"""Traversal result records and the entry builder.

Every visited node produces exactly one of ``Entry`` or ``ErrorEntry``.
"""

import os
import stat as stat_module  # To avoid name collision with stat results
from dataclasses import dataclass
from typing import Optional, Union

from .errors import TraversalError
from .paths import AnyPath


@dataclass(frozen=True)
class DirectoryEntry:
    """Raw descriptor for one child, as reported by a directory listing.

    Type bits are read without following symbolic links.
    """
    name: AnyPath
    is_dir: bool
    is_symlink: bool

    @classmethod
    def from_dir_entry(cls, entry: os.DirEntry) -> "DirectoryEntry":
        """Capture the type bits of an os.scandir() entry."""
        return cls(
            name=entry.name,
            is_dir=entry.is_dir(follow_symlinks=False),
            is_symlink=entry.is_symlink(),
        )


@dataclass(frozen=True)
class Entry:
    """A successfully visited filesystem node.

    Attributes:
        path: Path of the node, in the traversal's representation
        is_directory: Whether the node is (or resolves to) a directory
        is_symlink: Whether the node is a symbolic link
        stats: Metadata block, only present when stats were collected
    """
    path: AnyPath
    is_directory: bool
    is_symlink: bool
    stats: Optional[os.stat_result] = None


@dataclass(frozen=True)
class ErrorEntry:
    """Placeholder for a node whose filesystem operation failed."""
    path: AnyPath
    error: TraversalError


Result = Union[Entry, ErrorEntry]


def build_entry(
    dirent: DirectoryEntry,
    path: AnyPath,
    stats: Optional[os.stat_result],
    collect_stats: bool,
) -> Entry:
    """Build the visible record for a child.

    When metadata was fetched it takes precedence over the raw
    descriptor, since for a followed symlink it describes the target.

    Args:
        dirent: Raw descriptor from the directory listing
        path: Full path of the child
        stats: Metadata from stat/lstat, or None if not fetched
        collect_stats: Whether to attach the metadata to the entry

    Returns:
        The Entry for this child
    """
    if stats is not None:
        is_directory = stat_module.S_ISDIR(stats.st_mode)
        is_symlink = stat_module.S_ISLNK(stats.st_mode)
    else:
        is_directory = dirent.is_dir
        is_symlink = dirent.is_symlink

    return Entry(
        path=path,
        is_directory=is_directory,
        is_symlink=is_symlink,
        stats=stats if collect_stats else None,
    )
