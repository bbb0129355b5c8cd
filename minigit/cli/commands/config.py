"""Config command - get and set configuration values."""

import click

from minigit.core.config import Config, split_key
from minigit.core.repository import Repository
from minigit.cli.output import error, success, info


@click.command('config')
@click.argument('key', required=False)
@click.argument('value', required=False)
@click.option('--global', 'use_global', is_flag=True, help='Use global config (~/.minigitconfig)')
@click.option('--list', 'list_all', is_flag=True, help='List all configuration values')
def config_cmd(key, value, use_global, list_all):
    """
    Get and set configuration values.

    Examples:
        minigit config user.name              # Show user name
        minigit config user.name "Jane Doe"   # Set in repository config
        minigit config --global user.name Jane
        minigit config --list
    """
    repo = Repository.find_repository()
    config = Config(repo.config_file if repo else None)

    if list_all:
        for section, values in config.list_all().items():
            for name, setting in values.items():
                click.echo(f"{section}.{name}={setting}")
        return

    if not key:
        raise click.UsageError("Missing configuration key")

    try:
        section, name = split_key(key)
    except ValueError as e:
        click.echo(error(str(e)), err=True)
        raise click.Abort()

    if value is None:
        current = config.get(section, name)
        if current is None:
            click.echo(info(f"{key} is not set"))
            raise SystemExit(1)
        click.echo(current)
        return

    if not use_global and not repo:
        click.echo(error("Not a mini-git repository (use --global)"), err=True)
        raise click.Abort()

    config.set(section, name, value, global_config=use_global)
    click.echo(success(f"Set {key} = {value}"))
