"""Options resolution for a traversal call.

``resolve_options`` runs once per top-level call. Its result is shared
read-only by every recursive step, so patterns are compiled once and a
single matcher instance serves the whole traversal.
"""

import dataclasses
import os
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Optional, Tuple, Union

from .config import TraversalConfig
from .error_policies import ContinueOnErrorsPolicy, ErrorPolicy, FailFastPolicy
from .matching import Matchers, build_matchers
from .paths import AnyPath, PathEncoding, PathFlavor, encoding_of, flavor_for


class ResumePosition(Enum):
    """Where a path lies relative to the resume point in sorted order."""
    BEFORE = "before"       # Skip, with its whole subtree
    ANCESTOR = "ancestor"   # Descend, but do not emit
    AT_OR_AFTER = "after"   # Emit normally


class ResumePoint:
    """Resume position for sorted traversals.

    Paths are compared component by component relative to the root,
    which matches the depth-first order produced with sort_entries.
    """

    def __init__(self, path: AnyPath, root: AnyPath, flavor: PathFlavor):
        self.path = path
        self.root = root
        self.flavor = flavor
        self.parts = self._split(path)

    def _split(self, path: AnyPath) -> Tuple[AnyPath, ...]:
        relative = self.flavor.relative_to(path, self.root)
        return tuple(part for part in relative.split(self.flavor.sep) if part)

    def position(self, path: AnyPath) -> ResumePosition:
        """Locate a path relative to the resume point."""
        parts = self._split(path)

        for part, target in zip(parts, self.parts):
            if part != target:
                return ResumePosition.BEFORE if part < target else ResumePosition.AT_OR_AFTER

        if len(parts) < len(self.parts):
            return ResumePosition.ANCESTOR
        return ResumePosition.AT_OR_AFTER

    def __repr__(self) -> str:
        return f"ResumePoint({self.path!r})"


@dataclass(frozen=True)
class ResolvedTraversal:
    """Everything a traversal needs, derived once from the caller's options.

    Attributes:
        root: Normalized root path in the traversal's representation
        config: Fully resolved configuration (path_encoding is set)
        flavor: Path operations for the chosen representation
        matchers: Compiled include/exclude predicates
        policy: Error policy shared by all branches
        resume: Resume point, or None to emit from the start
    """
    root: AnyPath
    config: TraversalConfig
    flavor: PathFlavor
    matchers: Matchers
    policy: ErrorPolicy
    resume: Optional[ResumePoint] = None


def resolve_options(
    root: Any,
    config: Optional[Union[TraversalConfig, Mapping[str, Any]]] = None,
    **overrides: Any,
) -> ResolvedTraversal:
    """Merge caller options with defaults and prepare a traversal.

    Args:
        root: Root directory (str, bytes or path-like)
        config: A TraversalConfig or a mapping of its field names
        **overrides: Individual TraversalConfig fields, applied last

    Returns:
        ResolvedTraversal for the call

    Raises:
        TypeError: For unknown option names or an unsupported root type
        ValueError: For inconsistent option values

    Example:
        >>> resolved = resolve_options("/data/", exclude="**/node_modules")
        >>> resolved.root
        '/data'
    """
    if config is None:
        config = TraversalConfig()
    elif not isinstance(config, TraversalConfig):
        config = TraversalConfig(**dict(config))
    if overrides:
        config = dataclasses.replace(config, **overrides)

    _validate(config)

    encoding = config.path_encoding
    if encoding is None:
        encoding = encoding_of(root)
    elif not isinstance(encoding, PathEncoding):
        encoding = PathEncoding(encoding)
    flavor = flavor_for(encoding)

    root = flavor.strip_trailing_separator(flavor.coerce(root))
    config = dataclasses.replace(config, path_encoding=encoding)

    matchers = build_matchers(
        root,
        flavor,
        include=config.include,
        exclude=config.exclude,
        match_dot=config.match_dot,
    )

    policy = config.error_policy
    if policy is None:
        policy = FailFastPolicy() if config.strict else ContinueOnErrorsPolicy()

    resume = None
    if config.start_from is not None:
        start_from = _normalize_start_from(config.start_from, root, flavor)
        # Resuming at the root itself means starting from the beginning
        if start_from != root:
            resume = ResumePoint(start_from, root, flavor)

    return ResolvedTraversal(
        root=root,
        config=config,
        flavor=flavor,
        matchers=matchers,
        policy=policy,
        resume=resume,
    )


def _normalize_start_from(start_from: Any, root: AnyPath, flavor: PathFlavor) -> AnyPath:
    """Bring start_from into the same form as the paths join() builds.

    Under a '.' root children are bare names, so './b' becomes 'b'.

    Raises:
        ValueError: If start_from is not the root or a path inside it
    """
    path = flavor.strip_trailing_separator(flavor.coerce(start_from))

    if root == flavor.curdir:
        path = os.path.normpath(path)
        pardir = flavor.coerce(os.pardir)
        if os.path.isabs(path) or path == pardir or path.startswith(pardir + flavor.sep):
            raise ValueError(f"start_from {start_from!r} is not inside root {root!r}")
        return path

    if path != root and flavor.relative_to(path, root) == path:
        raise ValueError(f"start_from {start_from!r} is not inside root {root!r}")
    return path


def _validate(config: TraversalConfig):
    if config.max_concurrent is not None and config.max_concurrent < 1:
        raise ValueError(
            f"max_concurrent must be a positive integer, got {config.max_concurrent!r}"
        )
    if config.start_from is not None and not config.sort_entries:
        raise ValueError("start_from requires sort_entries=True")
    if config.error_policy is not None and not isinstance(config.error_policy, ErrorPolicy):
        raise TypeError(
            f"error_policy must be an ErrorPolicy, got {type(config.error_policy).__name__}"
        )
