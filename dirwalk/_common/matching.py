"""Include/exclude pattern matching using pathspec.

Patterns use gitignore-style wildmatch syntax and are evaluated against
each path relative to the traversal root, with '/' as separator.
"""

from dataclasses import dataclass
from typing import Iterable, List, Optional, Union

import pathspec

from .paths import AnyPath, PathFlavor

Patterns = Union[str, Iterable[str]]


def _pattern_lines(patterns: Patterns) -> List[str]:
    """Normalize a single pattern or an iterable of patterns to a list."""
    if isinstance(patterns, (str, bytes)):
        patterns = [patterns]
    lines = []
    for pattern in patterns:
        if isinstance(pattern, bytes):
            pattern = pattern.decode()
        if pattern.strip():
            lines.append(pattern)
    return lines


class PathMatcher:
    """Compiled predicate deciding whether a path matches a pattern set.

    Attributes:
        spec: Compiled pathspec for the patterns
        root: Traversal root, stripped from paths before matching
        flavor: Path representation used by the traversal
        match_dot: Whether wildcards may match dot-prefixed names
    """

    def __init__(
        self,
        patterns: Patterns,
        root: AnyPath,
        flavor: PathFlavor,
        match_dot: bool = True,
    ):
        self.patterns = _pattern_lines(patterns)
        self.spec = pathspec.GitIgnoreSpec.from_lines(self.patterns)
        self.root = root
        self.flavor = flavor
        self.match_dot = match_dot

    def __call__(self, path: AnyPath, is_dir: bool = False) -> bool:
        """Check a path against the patterns.

        Args:
            path: Full path in the traversal's representation
            is_dir: Whether the path is a directory; directories are
                also tested with a trailing '/' so 'build/' matches them

        Returns:
            True if the path matches
        """
        relative = self.flavor.to_text(self.flavor.relative_to(path, self.root))

        if not self.match_dot and _has_hidden_part(relative):
            return False

        if self.spec.match_file(relative):
            return True
        return is_dir and self.spec.match_file(relative + "/")

    def __repr__(self) -> str:
        return f"PathMatcher({self.patterns!r})"


def _has_hidden_part(relative: str) -> bool:
    return any(
        part.startswith(".") and part not in (".", "..")
        for part in relative.split("/")
    )


@dataclass(frozen=True)
class Matchers:
    """Include and exclude predicates for one traversal.

    Either predicate may be None: no include predicate means every
    path is included, no exclude predicate means nothing is excluded.
    """
    include: Optional[PathMatcher] = None
    exclude: Optional[PathMatcher] = None

    def is_excluded(self, path: AnyPath, is_dir: bool = False) -> bool:
        return self.exclude is not None and self.exclude(path, is_dir)

    def is_included(self, path: AnyPath, is_dir: bool = False) -> bool:
        return self.include is None or self.include(path, is_dir)


def build_matchers(
    root: AnyPath,
    flavor: PathFlavor,
    include: Optional[Patterns] = None,
    exclude: Optional[Patterns] = None,
    match_dot: bool = True,
) -> Matchers:
    """Compile include and exclude pattern sets into predicates.

    Args:
        root: Normalized traversal root
        flavor: Path representation of the traversal
        include: Patterns a path must match to be emitted
        exclude: Patterns that remove a path and its subtree
        match_dot: Whether wildcards may match dot-prefixed names

    Returns:
        Matchers with a predicate for each non-empty pattern set
    """
    def compile_patterns(patterns: Optional[Patterns]) -> Optional[PathMatcher]:
        if patterns is None:
            return None
        lines = _pattern_lines(patterns)
        if not lines:
            return None
        return PathMatcher(lines, root, flavor, match_dot)

    return Matchers(
        include=compile_patterns(include),
        exclude=compile_patterns(exclude),
    )
