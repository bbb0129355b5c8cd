"""Checkout command - switch branches or restore files."""

import click

from minigit.cli.runner import find_git, parse_revision, run


class CheckoutCommand(click.Command):
    """Remembers whether arguments started with '--' before click drops it."""

    def parse_args(self, ctx, args):
        ctx.meta['restore_files'] = bool(args) and args[0] == '--'
        return super().parse_args(ctx, args)


@click.command('checkout', cls=CheckoutCommand)
@click.argument('args', nargs=-1, required=True)
@click.pass_context
def checkout_cmd(ctx, args):
    """
    Switch branches or restore working tree files.

    With one argument, checks out a branch (attached HEAD) or a commit
    (detached HEAD). With '--' followed by file names, restores those files
    from the current commit.

    Examples:
        minigit checkout master
        minigit checkout HEAD~1
        minigit checkout -- file.txt
    """
    git = find_git()

    if ctx.meta.get('restore_files'):
        run(git.checkout_files, list(args))
        return

    if len(args) > 1:
        raise click.UsageError(
            "Command 'checkout' with multiple arguments expects filenames "
            "enumeration starting with '--'"
        )

    run(lambda: git.checkout(parse_revision('checkout', args[0])))
