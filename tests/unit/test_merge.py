"""Tests for the merge placeholder."""

import pytest

from minigit.core.errors import ErrorKind, UnsupportedError
from minigit.operations.merge import merge


def test_merge_unsupported(repo_with_commits):
    """Test merge always fails and changes nothing."""
    git = repo_with_commits
    head_before = git.repo.head_file.read_text()

    with pytest.raises(UnsupportedError) as exc_info:
        merge(git.repo, 'master')

    assert exc_info.value.kind is ErrorKind.UNSUPPORTED
    assert git.repo.head_file.read_text() == head_before


def test_merge_unsupported_for_unknown_branch(repo):
    """Test the outcome does not depend on the argument."""
    with pytest.raises(UnsupportedError):
        merge(repo, 'anything')
