"""Log command - show commit history."""

import click

from minigit.cli.runner import find_git, parse_revision, run


@click.command('log')
@click.argument('revision', required=False)
def log_cmd(revision):
    """
    Show commit history, newest first.

    Examples:
        minigit log
        minigit log HEAD~2
        minigit log develop
    """
    git = find_git()

    def action():
        start = parse_revision('log', revision) if revision else None
        return git.log(start)

    run(action)
