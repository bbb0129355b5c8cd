"""Reset command - move HEAD and overwrite the working tree."""

import click

from minigit.cli.runner import find_git, parse_revision, run


@click.command('reset')
@click.argument('revision')
def reset_cmd(revision):
    """
    Reset HEAD, the staging area and the working tree to REVISION.

    REVISION is a branch name, a commit hash or HEAD~N. Uncommitted
    changes are discarded.

    Examples:
        minigit reset HEAD~1
        minigit reset master
    """
    git = find_git()
    run(lambda: git.reset(parse_revision('reset', revision)))
