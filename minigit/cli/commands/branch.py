"""Branch commands - create, remove and list branches."""

import click
from colorama import Fore, Style

from minigit.core.errors import MiniGitError
from minigit.cli.output import error
from minigit.cli.runner import find_git, run


@click.command('branch-create')
@click.argument('name')
def branch_create_cmd(name):
    """
    Create a branch at the current commit and switch to it.

    Examples:
        minigit branch-create develop
    """
    git = find_git()
    run(git.create_branch, name)


@click.command('branch-remove')
@click.argument('name')
def branch_remove_cmd(name):
    """
    Delete a branch. The current branch cannot be removed.
    """
    git = find_git()
    run(git.remove_branch, name)


@click.command('show-branches')
def show_branches_cmd():
    """
    List all branches. The current branch is marked with *.
    """
    git = find_git()
    try:
        names, current = git.list_branches()
    except MiniGitError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()

    click.echo('Available branches:')
    for name in names:
        if name == current:
            click.echo(f"{Fore.GREEN}* {name}{Style.RESET_ALL}")
        else:
            click.echo(f"  {name}")
