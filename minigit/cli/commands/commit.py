"""Commit command - create a commit from staged changes."""

import click

from minigit.cli.runner import find_git, run


@click.command('commit')
@click.argument('message')
@click.option('--author', help='Author name (defaults to user.name)')
def commit_cmd(message, author):
    """
    Record the staging area as a new commit.

    Examples:
        minigit commit "Initial commit"
        minigit commit "Fix typo" --author jane
    """
    git = find_git()
    run(git.commit, message, author)
