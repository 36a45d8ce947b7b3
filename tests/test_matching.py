"""Tests for include/exclude pattern matchers."""

import os
import warnings

from dirwalk._common.matching import PathMatcher, build_matchers
from dirwalk._common.paths import BYTES_PATHS, TEXT_PATHS

ROOT = os.path.join(os.sep, "srv", "data")


def under_root(*parts):
    return os.path.join(ROOT, *parts)


class TestBuildMatchers:

    def test_no_patterns_gives_no_predicates(self):
        matchers = build_matchers(ROOT, TEXT_PATHS)
        assert matchers.include is None
        assert matchers.exclude is None
        assert matchers.is_included(under_root("anything"))
        assert not matchers.is_excluded(under_root("anything"))

    def test_empty_pattern_sets_are_ignored(self):
        matchers = build_matchers(ROOT, TEXT_PATHS, include=[], exclude="")
        assert matchers.include is None
        assert matchers.exclude is None

    def test_single_string_pattern(self):
        matchers = build_matchers(ROOT, TEXT_PATHS, include="*.txt")
        assert isinstance(matchers.include, PathMatcher)
        assert matchers.include.patterns == ["*.txt"]


class TestPatternSemantics:

    def test_globstar_matches_at_any_depth(self):
        matcher = PathMatcher(["**/node_modules"], ROOT, TEXT_PATHS)
        assert matcher(under_root("node_modules"), is_dir=True)
        assert matcher(under_root("pkg", "node_modules"), is_dir=True)
        assert not matcher(under_root("node_modules_backup"), is_dir=True)

    def test_basename_pattern_matches_nested_files(self):
        matcher = PathMatcher(["*.txt"], ROOT, TEXT_PATHS)
        assert matcher(under_root("a.txt"))
        assert matcher(under_root("b", "c.txt"))
        assert not matcher(under_root("b"), is_dir=True)

    def test_patterns_are_relative_to_root(self):
        matcher = PathMatcher(["b/c.txt"], ROOT, TEXT_PATHS)
        assert matcher(under_root("b", "c.txt"))
        assert not matcher(under_root("x", "b", "c.txt"))

    def test_directory_pattern_matches_the_directory(self):
        matcher = PathMatcher(["build/"], ROOT, TEXT_PATHS)
        assert matcher(under_root("build"), is_dir=True)
        assert not matcher(under_root("build"), is_dir=False)

    def test_negation(self):
        matcher = PathMatcher(["*.txt", "!keep.txt"], ROOT, TEXT_PATHS)
        assert matcher(under_root("a.txt"))
        assert not matcher(under_root("keep.txt"))

    def test_dotfiles_match_by_default(self):
        matcher = PathMatcher(["*"], ROOT, TEXT_PATHS)
        assert matcher(under_root(".hidden"))

    def test_match_dot_disabled(self):
        matcher = PathMatcher(["*"], ROOT, TEXT_PATHS, match_dot=False)
        assert matcher(under_root("visible"))
        assert not matcher(under_root(".hidden"))
        assert not matcher(under_root(".git", "config"))

    def test_bytes_paths_are_decoded(self):
        root = os.fsencode(ROOT)
        matcher = PathMatcher(["*.txt"], root, BYTES_PATHS)
        assert matcher(BYTES_PATHS.join(root, b"a.txt"))
        assert not matcher(BYTES_PATHS.join(root, b"a.bin"))

    def test_current_directory_root(self):
        matcher = PathMatcher(["b/*.txt"], ".", TEXT_PATHS)
        assert matcher(os.path.join("b", "c.txt"))

    def test_predicate_is_pure(self):
        matcher = PathMatcher(["*.txt"], ROOT, TEXT_PATHS)
        path = under_root("a.txt")
        assert [matcher(path) for _ in range(3)] == [True, True, True]

    def test_compiling_patterns_does_not_warn(self):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            PathMatcher(["*.txt", "build/", "!keep.txt"], ROOT, TEXT_PATHS)
