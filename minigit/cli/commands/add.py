"""Add and rm commands - update the staging area."""

import click

from minigit.cli.runner import find_git, run


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
def add_cmd(paths):
    """
    Add file contents to the staging area.

    Directories are added recursively.

    Examples:
        minigit add file.txt
        minigit add src
        minigit add .
    """
    git = find_git()
    run(git.add, list(paths))


@click.command('rm')
@click.argument('paths', nargs=-1, required=True)
def rm_cmd(paths):
    """
    Remove files from the staging area.

    The files themselves are left in the working tree.

    Examples:
        minigit rm file.txt
    """
    git = find_git()
    run(git.rm, list(paths))
