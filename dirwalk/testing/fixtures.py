"""Test fixtures for dirwalk consumers.

Helpers to lay out directory trees on disk and to make chosen
filesystem calls fail, without depending on file permissions (which
do not stop the root user).
"""

import errno
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Set
from unittest import mock

from .._common import core


@dataclass(frozen=True)
class Symlink:
    """A symbolic link in a tree layout.

    Attributes:
        target: Link target, relative to the link's directory or absolute
    """
    target: str


def build_tree(base: Path, layout: Dict[str, Any]) -> Path:
    """Create a directory tree from a nested layout.

    Layout values:
    - dict: a subdirectory with its own layout
    - str or bytes: a file with that content
    - None: an empty file
    - Symlink: a symbolic link

    Example:
        build_tree(tmp_path, {
            "a.txt": "hello",
            "b": {"c.txt": None},
            "d": Symlink("b"),
        })

    Returns:
        The base directory
    """
    base = Path(base)
    base.mkdir(parents=True, exist_ok=True)
    for name, value in layout.items():
        path = base / name
        if isinstance(value, dict):
            build_tree(path, value)
        elif isinstance(value, Symlink):
            os.symlink(value.target, path, target_is_directory=(path.parent / value.target).is_dir())
        elif isinstance(value, bytes):
            path.write_bytes(value)
        else:
            path.write_text(value or "")
    return base


class FailingFilesystem:
    """Make directory listings or stat calls fail for chosen paths.

    Patches the os functions used by the traversal core for the
    duration of a with-block. Other paths behave normally. Every
    directory listing attempt is recorded in ``listed``.

    Example:
        with FailingFilesystem(list_failures=[tmp_path / "locked"]):
            results = traverse_collect(tmp_path)
    """

    def __init__(
        self,
        list_failures: Optional[Iterable[Any]] = None,
        stat_failures: Optional[Iterable[Any]] = None,
        error_code: int = errno.EACCES,
    ):
        self.list_failures: Set[str] = {_key(p) for p in list_failures or ()}
        self.stat_failures: Set[str] = {_key(p) for p in stat_failures or ()}
        self.error_code = error_code
        self.listed: List[str] = []
        self._patches = []

    def _fail(self, path):
        # OSError picks the matching subclass (PermissionError for EACCES)
        raise OSError(self.error_code, os.strerror(self.error_code), path)

    def __enter__(self):
        real_scandir = os.scandir
        real_stat = os.stat

        def scandir(path=".", *args, **kwargs):
            key = _key(path)
            self.listed.append(key)
            if key in self.list_failures:
                self._fail(path)
            return real_scandir(path, *args, **kwargs)

        def stat(path, *args, **kwargs):
            if _key(path) in self.stat_failures:
                self._fail(path)
            return real_stat(path, *args, **kwargs)

        self._patches = [
            mock.patch.object(core.os, "scandir", scandir),
            mock.patch.object(core.os, "stat", stat),
        ]
        for patch in self._patches:
            patch.start()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        for patch in reversed(self._patches):
            patch.stop()
        self._patches = []
        return None


def _key(path) -> str:
    return os.fsdecode(os.fspath(path))
