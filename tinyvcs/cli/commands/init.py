"""Initialize a new tinyvcs repository."""

from pathlib import Path

import click

from tinyvcs.core.repository import VCS_DIR_NAME
from tinyvcs.operations import commands
from tinyvcs.cli.output import echo_result, success, info


@click.command('init')
@click.argument('path', default='.')
def init_cmd(path):
    """
    Initialize a new repository.

    Creates a .vcs directory holding the object store, the index, HEAD and
    the branch files, with branch main on the root commit. PATH is created
    if it does not exist.

    Examples:
        vcs init                    # Initialize in current directory
        vcs init my-project         # Initialize in my-project directory
    """
    result = commands.init(path)
    echo_result(result)

    click.echo(success(f"Initialized empty repository in {Path(path).resolve() / VCS_DIR_NAME}"))
    click.echo(info("You can now start tracking files with 'vcs add <file>'"))
