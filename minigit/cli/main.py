"""Main CLI entry point for MiniGit."""

import logging

import click
from colorama import init

from minigit import __version__
from minigit.cli.output import BANNER
from minigit.cli.commands import (init_cmd, add_cmd, rm_cmd, status_cmd, commit_cmd,
                                  reset_cmd, log_cmd, checkout_cmd, branch_create_cmd,
                                  branch_remove_cmd, show_branches_cmd, merge_cmd, config_cmd)

# Initialize colorama for cross-platform colored output
init(autoreset=True)


class MiniGitGroup(click.Group):
    """Custom Group class to display banner before help."""

    def format_help(self, ctx, formatter):
        """Override to add banner before help text."""
        click.echo(BANNER)
        super().format_help(ctx, formatter)


@click.group(cls=MiniGitGroup)
@click.version_option(version=__version__)
@click.option('-v', '--verbose', is_flag=True, help='Show debug logging')
def cli(verbose):
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format='%(levelname)s %(name)s: %(message)s',
    )


cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(rm_cmd)
cli.add_command(status_cmd)
cli.add_command(commit_cmd)
cli.add_command(reset_cmd)
cli.add_command(log_cmd)
cli.add_command(checkout_cmd)
cli.add_command(branch_create_cmd)
cli.add_command(branch_remove_cmd)
cli.add_command(show_branches_cmd)
cli.add_command(merge_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
