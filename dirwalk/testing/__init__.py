"""Testing utilities for dirwalk consumers."""

from .fixtures import FailingFilesystem, Symlink, build_tree

__all__ = ['build_tree', 'Symlink', 'FailingFilesystem']
