"""Main CLI entry point for tinyvcs."""

import logging

import click
from colorama import init

from tinyvcs import __version__
from tinyvcs.core.config import get_config
from tinyvcs.core.repository import Repository
from tinyvcs.logging_config import configure_logging
from tinyvcs.cli.output import set_color
from tinyvcs.cli.commands import (init_cmd, add_cmd, rm_cmd, commit_cmd, branch_cmd,
                                  checkout_cmd, log_cmd, status_cmd, config_cmd)

# Initialize colorama for cross-platform colored output
init()

logger = logging.getLogger('tinyvcs.cli')


@click.group()
@click.version_option(version=__version__, prog_name='vcs')
@click.option('-v', '--verbose', is_flag=True, help='Log debug output to stderr')
@click.option('--no-color', is_flag=True, help='Disable colored output')
def cli(verbose, no_color):
    """
    A tiny local version control system.

    Snapshots live in a .vcs directory at the repository root. Settings are
    read from .vcs/config, ~/.vcsconfig and VCS_<SECTION>_<KEY> variables.
    """
    config = get_config(Repository.find_repository())

    level = 'DEBUG' if verbose else config.get('core', 'loglevel', fallback='WARNING')
    try:
        configure_logging(level)
    except ValueError:
        raise click.ClickException(f"Invalid core.loglevel: {level}")

    try:
        use_color = config.get_bool('color', 'ui', fallback=True)
    except ValueError as e:
        logger.warning("%s, keeping colors on", e)
        use_color = True
    set_color(use_color and not no_color)


# Register commands
cli.add_command(init_cmd)
cli.add_command(add_cmd)
cli.add_command(rm_cmd)
cli.add_command(commit_cmd)
cli.add_command(branch_cmd)
cli.add_command(checkout_cmd)
cli.add_command(log_cmd)
cli.add_command(status_cmd)
cli.add_command(config_cmd)


def main():
    """Main entry point."""
    cli()


if __name__ == '__main__':
    main()
