"""Command facade.

``MiniGit`` exposes one method per command of the CLI. Every method returns
a human-readable status string or raises a ``MiniGitError``. Mutating
commands run under the repository's exclusive lock, read-only ones under
its shared lock.
"""

import contextlib
import functools
import logging
from typing import Iterator, List, Optional, Sequence, Tuple, Union

from minigit.core.errors import IOFailureError
from minigit.core.repository import Repository
from minigit.operations import branch as branch_ops
from minigit.operations import log as log_ops
from minigit.operations import merge as merge_ops
from minigit.operations.reconcile import Changes, ReconciliationEngine, StatusReport

logger = logging.getLogger(__name__)

# A branch name, a commit hash, or N for HEAD~N
Revision = Union[str, int]


def _command(shared: bool = False):
    """Run a facade method inside the repository lock, wrapping OSError."""
    def decorator(method):
        @functools.wraps(method)
        def wrapper(self, *args, **kwargs):
            self.repo.require_initialized()
            with self._locked(shared):
                return method(self, *args, **kwargs)
        return wrapper
    return decorator


def _format_changes(title: str, changes: Changes) -> str:
    if changes.is_empty():
        return ''
    lines = [title, '']
    for heading, paths in (('New files:', changes.new),
                           ('Modified files:', changes.modified),
                           ('Removed files:', changes.deleted)):
        if paths:
            lines.append(heading)
            lines.extend(f"\t{path}" for path in paths)
            lines.append('')
    return '\n'.join(lines) + '\n'


def format_status(report: StatusReport) -> str:
    """Render a status report."""
    text = f"Current branch is '{report.branch}'\n"
    text += _format_changes('Untracked files:', report.unstaged)
    text += _format_changes('Ready to commit:', report.staged)
    if report.is_clean:
        text += 'Everything up to date\n'
    return text


class MiniGit:
    """
    Repository commands.

    Example:
        git = MiniGit('/path/to/project')
        git.init()
        git.add(['file.txt'])
        git.commit('first')
    """

    def __init__(self, path: str = '.'):
        self.repo = Repository(path)
        self.engine = ReconciliationEngine(self.repo)

    @contextlib.contextmanager
    def _locked(self, shared: bool) -> Iterator[None]:
        lock = self.repo.lock
        try:
            with (lock.shared() if shared else lock.exclusive()):
                yield
        except OSError as e:
            raise IOFailureError.wrap(e) from e

    def init(self) -> str:
        try:
            self.repo.init()
        except OSError as e:
            raise IOFailureError.wrap(e) from e
        return 'Project initialized\n'

    @_command()
    def add(self, paths: Sequence[str]) -> str:
        index = self.repo.load_index()
        staged = index.add(paths)
        index.save()
        logger.debug("Staged %s", staged)
        return 'Add completed successful\n'

    @_command()
    def rm(self, paths: Sequence[str]) -> str:
        index = self.repo.load_index()
        removed = index.remove(paths)
        index.save()
        logger.debug("Unstaged %s", removed)
        return 'Rm completed successful\n'

    @_command(shared=True)
    def status(self) -> str:
        return format_status(self.engine.status())

    @_command()
    def commit(self, message: str, author: Optional[str] = None) -> str:
        self.engine.commit(message, author)
        return 'Files committed\n'

    def _resolve(self, revision: Revision) -> str:
        if isinstance(revision, int):
            return self.repo.head.shifted_commit(revision)
        return revision

    @_command()
    def reset(self, target: Revision) -> str:
        self.engine.reset(self._resolve(target))
        return 'Reset successful\n'

    @_command(shared=True)
    def log(self, revision: Optional[Revision] = None) -> str:
        if revision is not None:
            revision = self._resolve(revision)
        start = log_ops.resolve_start(self.repo, revision)
        history = log_ops.get_commit_history(self.repo, start)
        return ''.join(entry.format() + '\n' for entry in history)

    @_command()
    def checkout(self, target: Revision) -> str:
        self.engine.checkout(self._resolve(target))
        return 'Checkout completed successful\n'

    @_command()
    def checkout_files(self, paths: Sequence[str]) -> str:
        self.engine.checkout_paths(paths)
        return 'Checkout completed successful\n'

    @_command()
    def create_branch(self, name: str) -> str:
        branch_ops.create_branch(self.repo, name)
        return (
            f"Branch {name} created successfully\n"
            f"You can checkout it with 'checkout {name}'\n"
        )

    @_command()
    def remove_branch(self, name: str) -> str:
        branch_ops.remove_branch(self.repo, name)
        return f"Branch {name} removed successfully\n"

    @_command(shared=True)
    def list_branches(self) -> Tuple[List[str], str]:
        """
        Branch names together with the branch HEAD is attached to.

        Returns:
            (sorted names, current branch or '' when HEAD is detached)
        """
        return branch_ops.list_branches(self.repo), self.repo.head.attached_branch()

    def show_branches(self) -> str:
        names, _ = self.list_branches()
        return 'Available branches:\n' + ''.join(f"{name}\n" for name in names)

    @_command()
    def merge(self, branch: str) -> str:
        merge_ops.merge(self.repo, branch)
        return ''

    def __repr__(self) -> str:
        return f"MiniGit(path={self.repo.work_tree})"
