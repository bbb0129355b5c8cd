"""Tests for status, commit, reset and checkout."""

import pytest

from minigit.core.errors import InvalidOperationError, NotFoundError
from minigit.core.hash import hash_object
from minigit.operations.reconcile import Changes, ReconciliationEngine, classify


def test_classify():
    """Test new, modified and deleted classification."""
    current = {'new': 'n', 'same': 's', 'changed': 'c2'}
    base = {'same': 's', 'changed': 'c1', 'gone': 'g'}

    assert classify(current, base) == Changes(new=['new'], modified=['changed'], deleted=['gone'])


def test_classify_identical():
    """Test identical views produce no changes."""
    assert classify({'a': '1'}, {'a': '1'}).is_empty()


class TestStatus:
    """Tests for the three-way status."""

    def test_clean_empty_repository(self, repo):
        """Test a fresh repository is clean."""
        report = ReconciliationEngine(repo).status()
        assert report.branch == 'master'
        assert report.is_clean

    def test_untracked_file(self, repo):
        """Test a new working file is an unstaged addition."""
        (repo.work_tree / 'file.txt').write_text('aaa')
        report = ReconciliationEngine(repo).status()

        assert report.unstaged.new == ['file.txt']
        assert report.staged.is_empty()

    def test_staged_file(self, git):
        """Test an added file is a staged addition."""
        (git.repo.work_tree / 'file.txt').write_text('aaa')
        git.add(['file.txt'])
        report = git.engine.status()

        assert report.unstaged.is_empty()
        assert report.staged.new == ['file.txt']

    def test_modified_and_deleted(self, repo_with_commits):
        """Test changes against the index after a commit."""
        git = repo_with_commits
        (git.repo.work_tree / 'a.txt').write_text('changed')
        (git.repo.work_tree / 'b.txt').unlink()
        report = git.engine.status()

        assert report.unstaged.modified == ['a.txt']
        assert report.unstaged.deleted == ['b.txt']
        assert report.staged.is_empty()

    def test_staged_removal(self, repo_with_commits):
        """Test rm shows up as a staged deletion."""
        git = repo_with_commits
        git.rm(['b.txt'])
        report = git.engine.status()

        assert report.staged.deleted == ['b.txt']
        assert report.unstaged.new == ['b.txt']

    def test_detached(self, repo_with_commits):
        """Test status refuses a detached HEAD."""
        git = repo_with_commits
        git.repo.head.set_commit_detached(git.first)

        with pytest.raises(InvalidOperationError, match='Head is detached'):
            git.engine.status()


class TestCommit:
    """Tests for recording commits."""

    def test_commit_links_parent(self, repo_with_commits):
        """Test the new commit points at the previous one."""
        git = repo_with_commits
        commit = git.repo.objects.read_commit(git.second)

        assert commit.parent == git.first
        assert git.repo.objects.read_commit(git.first).parent == ''
        assert git.repo.head.branches.read('master') == git.second

    def test_commit_snapshot(self, repo_with_commits):
        """Test the tree holds every indexed path."""
        git = repo_with_commits
        assert git.repo.head.load_tree().children.keys() == {'a.txt', 'b.txt'}

    def test_empty_commit_allowed(self, git):
        """Test committing an empty index creates a root commit."""
        commit_hash = git.engine.commit('nothing')
        commit = git.repo.objects.read_commit(commit_hash)

        assert commit.parent == ''
        assert git.repo.objects.get('tree', commit.tree) == b''

    def test_author_from_config(self, git):
        """Test author defaults to user.name, then to 'minigit'."""
        first = git.engine.commit('one')
        git.repo.config.set('user', 'name', 'Jane Doe')
        second = git.engine.commit('two')
        third = git.engine.commit('three', author='explicit')

        assert git.repo.objects.read_commit(first).author == 'minigit'
        assert git.repo.objects.read_commit(second).author == 'Jane Doe'
        assert git.repo.objects.read_commit(third).author == 'explicit'

    def test_author_with_newline_keeps_history_readable(self, repo_with_commits):
        """Test a multi-line author does not corrupt the commit record."""
        git = repo_with_commits
        commit_hash = git.engine.commit('third', author='Jane\nDoe')

        assert git.repo.objects.read_commit(commit_hash).author == 'Jane\nDoe'
        assert git.repo.head.shifted_commit(1) == git.second
        assert git.log().count('Commit ') == 3
        assert git.engine.status().branch == 'master'

    def test_commit_on_detached_head(self, repo_with_commits):
        """Test a detached commit moves HEAD only."""
        git = repo_with_commits
        git.repo.head.set_commit_detached(git.first)
        new_hash = git.engine.commit('detached work')

        assert git.repo.head_file.read_text() == new_hash
        assert git.repo.head.branches.read('master') == git.second


class TestReset:
    """Tests for destructive reset."""

    def test_reset_to_commit(self, repo_with_commits):
        """Test reset moves the branch and rewrites index and tree."""
        git = repo_with_commits
        work = git.repo.work_tree
        (work / 'untracked.txt').write_text('lost')
        (work / 'a.txt').write_text('edited')

        git.engine.reset(git.first)

        assert git.repo.head_file.read_text() == 'ref master'
        assert git.repo.head.branches.read('master') == git.first
        assert git.repo.load_index().entries() == {'a.txt': hash_object(b'aaa')}
        assert sorted(p.name for p in work.iterdir()) == ['.mini-git', 'a.txt']
        assert (work / 'a.txt').read_text() == 'aaa'

    def test_reset_idempotent(self, repo_with_commits):
        """Test resetting twice to the same target changes nothing more."""
        git = repo_with_commits
        git.engine.reset(git.first)
        index = git.repo.index_file.read_text()
        files = sorted(p.name for p in git.repo.work_tree.iterdir())

        git.engine.reset(git.first)

        assert git.repo.index_file.read_text() == index
        assert sorted(p.name for p in git.repo.work_tree.iterdir()) == files

    def test_reset_to_branch_attaches(self, repo_with_commits):
        """Test a branch target attaches HEAD."""
        git = repo_with_commits
        git.repo.head.set_commit_detached(git.first)

        git.engine.reset('master')

        assert git.repo.head_file.read_text() == 'ref master'
        assert (git.repo.work_tree / 'b.txt').read_text() == 'bbb'

    def test_reset_unknown_target(self, repo_with_commits):
        """Test an unknown target leaves everything unchanged."""
        git = repo_with_commits
        with pytest.raises(NotFoundError, match="Neither commit, nor branch"):
            git.engine.reset('nope')
        assert (git.repo.work_tree / 'b.txt').exists()


class TestCheckout:
    """Tests for switching snapshots."""

    def test_checkout_commit_detaches(self, repo_with_commits):
        """Test a commit target detaches HEAD and removes newer files."""
        git = repo_with_commits
        git.engine.checkout(git.first)

        assert git.repo.head.is_detached()
        assert git.repo.head_file.read_text() == git.first
        assert not (git.repo.work_tree / 'b.txt').exists()
        assert git.repo.load_index().entries() == {'a.txt': hash_object(b'aaa')}

    def test_checkout_back_restores(self, repo_with_commits):
        """Test switching away and back restores the same files."""
        git = repo_with_commits
        work = git.repo.work_tree
        before = {p.name: p.read_bytes() for p in work.iterdir() if p.is_file()}

        git.engine.checkout(git.first)
        git.engine.checkout('master')

        after = {p.name: p.read_bytes() for p in work.iterdir() if p.is_file()}
        assert after == before
        assert git.repo.head_file.read_text() == 'ref master'

    def test_checkout_keeps_untracked(self, repo_with_commits):
        """Test files never tracked survive a checkout."""
        git = repo_with_commits
        (git.repo.work_tree / 'notes.txt').write_text('mine')

        git.engine.checkout(git.first)

        assert (git.repo.work_tree / 'notes.txt').read_text() == 'mine'

    def test_checkout_prunes_empty_directories(self, git, commit_file):
        """Test directories emptied by the switch are removed."""
        first = commit_file('a.txt', 'aaa')
        commit_file('dir/sub/b.txt', 'bbb')

        git.engine.checkout(first)

        assert not (git.repo.work_tree / 'dir').exists()
        assert git.repo.work_tree.exists()

    def test_checkout_file_replaced_by_directory(self, git, commit_file):
        """Test a path that changes from file to directory."""
        first = commit_file('x', 'file')
        (git.repo.work_tree / 'x').unlink()
        git.rm(['x'])
        second = commit_file('x/inner', 'nested')

        git.engine.checkout(first)
        assert (git.repo.work_tree / 'x').read_text() == 'file'

        git.engine.checkout(second)
        assert (git.repo.work_tree / 'x' / 'inner').read_text() == 'nested'

    def test_checkout_unknown(self, repo_with_commits):
        """Test an unknown target."""
        with pytest.raises(NotFoundError):
            repo_with_commits.engine.checkout('nope')


class TestCheckoutPaths:
    """Tests for restoring individual files."""

    def test_restore_modified_and_deleted(self, repo_with_commits):
        """Test files are rewritten from the current commit."""
        git = repo_with_commits
        work = git.repo.work_tree
        (work / 'a.txt').write_text('changed')
        (work / 'b.txt').unlink()

        assert git.engine.checkout_paths(['a.txt', './b.txt']) == ['a.txt', 'b.txt']

        assert (work / 'a.txt').read_text() == 'aaa'
        assert (work / 'b.txt').read_text() == 'bbb'
        assert git.repo.head_file.read_text() == 'ref master'

    def test_all_or_nothing(self, repo_with_commits):
        """Test an unknown path aborts before any file is written."""
        git = repo_with_commits
        work = git.repo.work_tree
        (work / 'a.txt').write_text('changed')

        with pytest.raises(NotFoundError, match="'missing.txt' is not recognized"):
            git.engine.checkout_paths(['a.txt', 'missing.txt'])

        assert (work / 'a.txt').read_text() == 'changed'

    def test_index_untouched(self, repo_with_commits):
        """Test restoring does not change the staging area."""
        git = repo_with_commits
        git.rm(['a.txt'])
        index = git.repo.index_file.read_text()

        git.engine.checkout_paths(['a.txt'])

        assert git.repo.index_file.read_text() == index

    def test_metadata_path_rejected(self, repo_with_commits):
        """Test repository metadata cannot be overwritten by a restore."""
        git = repo_with_commits
        (git.repo.work_tree / 'a.txt').write_text('changed')

        with pytest.raises(InvalidOperationError, match='repository metadata'):
            git.engine.checkout_paths(['a.txt', '.mini-git/HEAD'])

        assert git.repo.head_file.read_text() == 'ref master'
        assert (git.repo.work_tree / 'a.txt').read_text() == 'changed'
