"""Status command - show working tree status."""

import click

from minigit.core.errors import MiniGitError
from minigit.cli.output import colorize_status, error
from minigit.cli.runner import find_git


@click.command('status')
def status_cmd():
    """
    Show the working tree status.

    Displays:
    - Untracked files: working tree compared with the staging area
    - Ready to commit: staging area compared with the last commit
    """
    git = find_git()
    try:
        report = git.status()
    except MiniGitError as e:
        click.echo(error(f"Error while performing status: {e}"), err=True)
        raise click.Abort()
    click.echo(colorize_status(report))
