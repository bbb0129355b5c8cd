"""Initialize a new MiniGit repository."""

import click
from pathlib import Path

from minigit.git import MiniGit
from minigit.cli.output import info
from minigit.cli.runner import run


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new MiniGit repository.

    Creates a .mini-git directory with an empty 'master' branch.

    Examples:
        minigit init                # Initialize in current directory
        minigit init my-project     # Initialize in my-project directory
    """
    repo_path = Path(path).resolve()
    if not repo_path.exists():
        repo_path.mkdir(parents=True)
        click.echo(info(f"Created directory {repo_path}"))

    run(MiniGit(str(repo_path)).init)
