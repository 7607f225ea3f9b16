"""Config command - manage repository configuration."""

import click

from tinyvcs.core.config import get_config, split_key
from tinyvcs.core.repository import Repository
from tinyvcs.cli.output import success, error, info


def load_config(is_global: bool):
    """Config bound to the current repository, or global-only config."""
    if is_global:
        return get_config()

    repo = Repository.find_repository()
    if not repo:
        click.echo(error("Not in an initialized vcs directory. (use --global for global config)"), err=True)
        raise click.Abort()
    return get_config(repo)


@click.group('config')
def config_cmd():
    """Get and set repository or global options."""
    pass


@config_cmd.command('set')
@click.argument('key')
@click.argument('value')
@click.option('--global', 'is_global', is_flag=True, help='Set global config')
def config_set(key, value, is_global):
    """
    Set a config value.

    Examples:
        vcs config set color.ui false
        vcs config set --global core.loglevel INFO
    """
    section, option = split_key(key)
    load_config(is_global).set(section, option, value, global_config=is_global)

    scope = "global" if is_global else "repository"
    click.echo(success(f"Set {scope} config: {section}.{option} = {value}"))


@config_cmd.command('get')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Get global config only')
def config_get(key, is_global):
    """
    Get a config value.

    Environment variables (VCS_<SECTION>_<KEY>) take precedence.

    Examples:
        vcs config get color.ui
    """
    section, option = split_key(key)
    config = get_config() if is_global else get_config(Repository.find_repository())

    value = config.get(section, option)
    if value is None:
        click.echo(error(f"Config key not found: {section}.{option}"), err=True)
        raise click.Abort()
    click.echo(value)


@config_cmd.command('unset')
@click.argument('key')
@click.option('--global', 'is_global', is_flag=True, help='Unset global config')
def config_unset(key, is_global):
    """
    Remove a config value.

    Examples:
        vcs config unset color.ui
    """
    section, option = split_key(key)
    if not load_config(is_global).unset(section, option, global_config=is_global):
        click.echo(error(f"Config key not found: {section}.{option}"), err=True)
        raise click.Abort()
    click.echo(success(f"Unset {section}.{option}"))


@config_cmd.command('list')
@click.option('--global', 'is_global', is_flag=True, help='List global config only')
def config_list(is_global):
    """
    List all config values.

    Examples:
        vcs config list
        vcs config list --global
    """
    config = get_config() if is_global else get_config(Repository.find_repository())
    values = config.list_all(global_only=is_global)

    if not values:
        click.echo(info("No configuration set"))
        return

    for section in sorted(values):
        for key, value in sorted(values[section].items()):
            click.echo(f"{section}.{key}={value}")
