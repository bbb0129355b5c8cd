"""Merge command."""

import click

from minigit.cli.runner import find_git, run


@click.command('merge')
@click.argument('branch')
def merge_cmd(branch):
    """
    Merge BRANCH into the current branch (not supported).
    """
    git = find_git()
    run(git.merge, branch)
