"""
Tests for error kinds, error policies and the entry builder.
"""

import errno
import os
import pickle
import stat

import pytest

from dirwalk import (
    ContinueOnErrorsPolicy,
    Entry,
    ErrorEntry,
    FailFastPolicy,
    ListDirectoryError,
    StatError,
    TraversalError,
)
from dirwalk._common.entries import DirectoryEntry, build_entry


def denied(path="/locked"):
    return PermissionError(errno.EACCES, os.strerror(errno.EACCES), path)


class TestErrorKinds:

    def test_errors_carry_path_and_cause(self):
        cause = denied()
        error = ListDirectoryError("/locked", cause)
        assert isinstance(error, TraversalError)
        assert error.path == "/locked"
        assert error.cause is cause
        assert "list directory" in str(error)
        assert "/locked" in str(error)

    def test_stat_error_message(self):
        error = StatError(b"/gone", FileNotFoundError(errno.ENOENT, "No such file"))
        assert "stat" in str(error)
        assert "No such file" in str(error)

    def test_errors_pickle(self):
        error = StatError("/gone", FileNotFoundError(errno.ENOENT, "No such file"))
        copy = pickle.loads(pickle.dumps(error))
        assert type(copy) is StatError
        assert copy.path == "/gone"


class TestErrorPolicies:
    """Test individual error policy behaviors."""

    def test_fail_fast_policy(self):
        """FailFastPolicy should raise the error chained to its cause."""
        cause = denied()
        with pytest.raises(ListDirectoryError) as info:
            FailFastPolicy().handle(ListDirectoryError("/locked", cause))
        assert info.value.__cause__ is cause

    def test_continue_on_errors_policy(self):
        """ContinueOnErrorsPolicy should return an ErrorEntry and track errors."""
        policy = ContinueOnErrorsPolicy()
        error = ListDirectoryError("/locked", denied())

        result = policy.handle(error)

        assert result == ErrorEntry(path="/locked", error=error)
        assert policy.errors == [error]
        assert policy.skipped_paths == ["/locked"]

    def test_stat_errors_do_not_skip_paths(self):
        policy = ContinueOnErrorsPolicy()
        policy.handle(StatError("/gone", FileNotFoundError(errno.ENOENT, "missing")))
        assert policy.skipped_paths == []

    def test_statistics(self):
        policy = ContinueOnErrorsPolicy()
        policy.handle(ListDirectoryError("/locked", denied()))
        policy.handle(StatError("/gone", FileNotFoundError(errno.ENOENT, "missing")))

        stats = policy.get_statistics()
        assert stats['total_errors'] == 2
        assert stats['list_errors'] == 1
        assert stats['stat_errors'] == 1
        assert stats['permission_errors'] == 1
        assert stats['skipped_paths'] == 1
        assert [e['error_type'] for e in stats['errors']] == ['ListDirectoryError', 'StatError']

    def test_reset(self):
        policy = ContinueOnErrorsPolicy()
        policy.handle(ListDirectoryError("/locked", denied()))
        policy.reset()
        assert policy.get_statistics()['total_errors'] == 0

    def test_verbose_warnings(self, capsys):
        policy = ContinueOnErrorsPolicy(verbose=True)
        policy.handle(ListDirectoryError("/locked", denied()))
        policy.handle(StatError("/gone", FileNotFoundError(errno.ENOENT, "missing")))

        err = capsys.readouterr().err
        assert "Skipping inaccessible path '/locked'" in err
        assert "WARNING: Failed to stat '/gone'" in err

    def test_quiet_by_default(self, capsys):
        ContinueOnErrorsPolicy().handle(ListDirectoryError("/locked", denied()))
        assert capsys.readouterr().err == ""


class TestBuildEntry:

    def test_uses_descriptor_without_stats(self):
        dirent = DirectoryEntry("b", is_dir=True, is_symlink=False)
        assert build_entry(dirent, "/r/b", None, False) == Entry("/r/b", True, False, None)

    def test_metadata_overrides_descriptor(self):
        dirent = DirectoryEntry("d", is_dir=False, is_symlink=True)
        info = os.stat_result((stat.S_IFDIR | 0o755, 2, 1, 1, 0, 0, 0, 0, 0, 0))
        entry = build_entry(dirent, "/r/d", info, False)
        assert entry.is_directory is True
        assert entry.is_symlink is False
        assert entry.stats is None

    def test_stats_attached_when_collected(self):
        dirent = DirectoryEntry("d", is_dir=False, is_symlink=True)
        info = os.stat_result((stat.S_IFLNK | 0o777, 2, 1, 1, 0, 0, 5, 0, 0, 0))
        entry = build_entry(dirent, "/r/d", info, True)
        assert entry.is_symlink is True
        assert entry.stats is info
