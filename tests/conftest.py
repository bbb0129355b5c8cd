"""Shared pytest fixtures for MiniGit tests."""

import os
import pytest
import tempfile
import shutil
from pathlib import Path
from minigit.core.repository import Repository
from minigit.core.objects import Blob, Tree, Commit
from minigit.git import MiniGit


@pytest.fixture(autouse=True)
def isolated_config(tmp_path_factory, monkeypatch):
    """Keep tests away from the user's ~/.minigitconfig and MINIGIT_* variables."""
    home = tmp_path_factory.mktemp('home')
    monkeypatch.setattr('minigit.core.config.Config.GLOBAL_CONFIG_PATH', home / '.minigitconfig')
    for name in list(os.environ):
        if name.startswith('MINIGIT_'):
            monkeypatch.delenv(name)
    return home


@pytest.fixture
def temp_dir():
    """Create a temporary directory for tests."""
    tmpdir = tempfile.mkdtemp()
    yield Path(tmpdir).resolve()
    shutil.rmtree(tmpdir, ignore_errors=True)


@pytest.fixture
def repo(temp_dir):
    """Create an initialized repository."""
    repo = Repository(str(temp_dir))
    repo.init()
    return repo


@pytest.fixture
def git(repo):
    """Command facade over an initialized repository."""
    return MiniGit(str(repo.work_tree))


@pytest.fixture
def in_repo(repo, monkeypatch):
    """Run with the repository root as the current directory."""
    monkeypatch.chdir(repo.work_tree)
    return repo


@pytest.fixture
def sample_blob():
    """Create a sample blob object."""
    return Blob(b"Hello, World!\n")


@pytest.fixture
def sample_tree(repo, sample_blob):
    """Create a sample tree with one blob."""
    blob_hash = repo.objects.write_object(sample_blob)
    tree = Tree()
    tree.add_entry('blob', blob_hash, 'test.txt')
    return tree


@pytest.fixture
def sample_commit(repo, sample_tree):
    """Sample root commit."""
    tree_hash = repo.objects.write_object(sample_tree)
    return Commit.create(
        tree_hash=tree_hash,
        parent_hash='',
        author='Test User',
        message='Test commit',
    )


@pytest.fixture
def working_files(repo):
    """Create sample file structure in repository."""
    file1 = repo.work_tree / "test1.txt"
    file2 = repo.work_tree / "test2.txt"

    (repo.work_tree / "subdir").mkdir()
    file3 = repo.work_tree / "subdir" / "test3.txt"

    file1.write_text("Content 1")
    file2.write_text("Content 2")
    file3.write_text("Content 3")

    return {
        'file1': file1,
        'file2': file2,
        'file3': file3
    }


@pytest.fixture
def commit_file(git):
    """
    Helper that writes a file, stages it and commits it.

    Returns:
        Callable(name, content, message) -> commit hash
    """
    def _commit_file(name, content, message=None):
        path = git.repo.work_tree / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        git.add([name])
        git.commit(message or f"Add {name}")
        return git.repo.head.current_commit_hash()
    return _commit_file


@pytest.fixture
def repo_with_commits(git, commit_file):
    """Repository on master with two commits: a.txt, then b.txt."""
    first = commit_file('a.txt', 'aaa', 'first')
    second = commit_file('b.txt', 'bbb', 'second')
    git.first, git.second = first, second
    return git
