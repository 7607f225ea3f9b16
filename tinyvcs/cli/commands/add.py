"""Add command - stage files for commit."""

import click

from tinyvcs.operations import commands
from tinyvcs.cli.output import echo_result


@click.command('add')
@click.argument('paths', nargs=-1, required=True)
def add_cmd(paths):
    """
    Add file contents to the staging area.

    Staging a file whose content matches HEAD drops any pending change for
    it. Modified files must be added again to stage the new content.

    Examples:
        vcs add file.txt
        vcs add src/main.py README.md
    """
    for path in paths:
        echo_result(commands.add(path))
