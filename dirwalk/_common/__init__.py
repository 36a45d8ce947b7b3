"""Common components shared between sync and aio implementations.

This internal package contains non-I/O code that is identical between
both implementations. It should NOT be imported directly by users.

Components here include:
- Configuration (TraversalConfig) and its resolution
- Path representations, pattern matchers, result records
- The shared recursion core that every strategy drives

Important: This package must NEVER import from sync or aio to avoid
circular dependencies.
"""

from .config import TraversalConfig
from .core import TraversalCore
from .entries import DirectoryEntry, Entry, ErrorEntry, Result, build_entry
from .error_policies import ContinueOnErrorsPolicy, ErrorPolicy, FailFastPolicy
from .errors import ListDirectoryError, StatError, TraversalError
from .matching import Matchers, PathMatcher, build_matchers
from .options import ResolvedTraversal, resolve_options
from .paths import BYTES_PATHS, TEXT_PATHS, PathEncoding, PathFlavor

__all__ = [
    'TraversalConfig',
    'TraversalCore',
    'DirectoryEntry',
    'Entry',
    'ErrorEntry',
    'Result',
    'build_entry',
    'ErrorPolicy',
    'FailFastPolicy',
    'ContinueOnErrorsPolicy',
    'TraversalError',
    'ListDirectoryError',
    'StatError',
    'Matchers',
    'PathMatcher',
    'build_matchers',
    'ResolvedTraversal',
    'resolve_options',
    'PathEncoding',
    'PathFlavor',
    'TEXT_PATHS',
    'BYTES_PATHS',
]
