"""Shared plumbing for CLI commands."""

import re

import click

from minigit.core.errors import InvalidOperationError, MiniGitError
from minigit.core.repository import Repository
from minigit.git import MiniGit
from minigit.cli.output import error

HEAD_SHIFT = re.compile(r'^HEAD~(.*)$')


def find_git() -> MiniGit:
    """MiniGit for the enclosing repository, or for the current directory."""
    repo = Repository.find_repository()
    return MiniGit(str(repo.work_tree) if repo else '.')


def parse_head_shift(command: str, revision: str):
    """
    Parse a HEAD~N revision.

    Returns:
        N, or None if revision is not in HEAD~N form

    Raises:
        InvalidOperationError: If N is not a non-negative integer
    """
    match = HEAD_SHIFT.match(revision)
    if not match:
        return None
    shift = match.group(1)
    if not shift.isdigit():
        raise InvalidOperationError(
            f"Command '{command}' accepts argument in HEAD~N format with N being "
            f"non-negative integer, but got: '{shift}'"
        )
    return int(shift)


def parse_revision(command: str, revision: str):
    """
    Turn HEAD~N into the integer N; pass anything else through.

    The shift is resolved by the facade under the command's own lock.
    """
    shift = parse_head_shift(command, revision)
    return revision if shift is None else shift


def run(action, *args, **kwargs) -> str:
    """
    Run a facade call and echo its output.

    Domain errors are printed and abort the command with exit code 1.
    """
    try:
        output = action(*args, **kwargs)
    except MiniGitError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()
    if output:
        click.echo(output, nl=False)
    return output
