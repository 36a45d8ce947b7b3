"""Path representations used during traversal.

A traversal works on either text paths (``str``) or raw byte paths
(``bytes``) for its whole duration. Both are described by a
``PathFlavor`` so the traversal core can build child paths without
caring which representation it was given.
"""

import os
from enum import Enum
from typing import Optional, Union

AnyPath = Union[str, bytes]


class PathEncoding(Enum):
    """How paths are represented in traversal results."""
    TEXT = "text"    # str paths
    BYTES = "bytes"  # raw bytes paths, as returned by the OS


class PathFlavor:
    """Separator-aware path operations for one path representation.

    Attributes:
        encoding: The representation this flavor handles
        sep: Platform separator in this representation
        altsep: Alternative separator (Windows only), or None
        curdir: Current directory marker ('.' or b'.')
    """

    def __init__(
        self,
        encoding: PathEncoding,
        sep: AnyPath,
        altsep: Optional[AnyPath],
        curdir: AnyPath,
    ):
        self.encoding = encoding
        self.sep = sep
        self.altsep = altsep
        self.curdir = curdir
        self._separators = tuple(s for s in (sep, altsep) if s)

    def coerce(self, path) -> AnyPath:
        """Convert a str, bytes or path-like object to this representation.

        Raises:
            TypeError: If path is not a str, bytes or os.PathLike
        """
        path = os.fspath(path)
        if self.encoding is PathEncoding.BYTES:
            return os.fsencode(path)
        return os.fsdecode(path)

    def join(self, parent: AnyPath, name: AnyPath) -> AnyPath:
        """Join a directory path and a child name.

        Children of the current directory are returned as bare names,
        so walking '.' yields 'a.txt' rather than './a.txt'.
        """
        if parent == self.curdir:
            return name
        if parent.endswith(self._separators):
            return parent + name
        return parent + self.sep + name

    def strip_trailing_separator(self, path: AnyPath) -> AnyPath:
        """Remove one trailing separator, keeping a bare filesystem root."""
        if len(path) > 1 and path.endswith(self._separators):
            return path[:-1]
        return path

    def relative_to(self, path: AnyPath, root: AnyPath) -> AnyPath:
        """Strip the traversal root prefix from a path built by join()."""
        if root == self.curdir:
            return path
        prefix = root if root.endswith(self._separators) else root + self.sep
        if path.startswith(prefix):
            return path[len(prefix):]
        return path

    def to_text(self, path: AnyPath) -> str:
        """Decode to text with '/' separators, for pattern matching."""
        text = os.fsdecode(path)
        for separator in self._separators:
            separator = os.fsdecode(separator)
            if separator != "/":
                text = text.replace(separator, "/")
        return text

    def __repr__(self) -> str:
        return f"PathFlavor({self.encoding.value})"


TEXT_PATHS = PathFlavor(PathEncoding.TEXT, os.sep, os.altsep, os.curdir)
BYTES_PATHS = PathFlavor(
    PathEncoding.BYTES,
    os.fsencode(os.sep),
    os.fsencode(os.altsep) if os.altsep else None,
    os.fsencode(os.curdir),
)


def flavor_for(encoding: PathEncoding) -> PathFlavor:
    """Get the flavor for a path encoding."""
    if encoding is PathEncoding.BYTES:
        return BYTES_PATHS
    return TEXT_PATHS


def encoding_of(path) -> PathEncoding:
    """Detect the representation of a root path.

    Raises:
        TypeError: If path is not a str, bytes or os.PathLike
    """
    if isinstance(os.fspath(path), bytes):
        return PathEncoding.BYTES
    return PathEncoding.TEXT
