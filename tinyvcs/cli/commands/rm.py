"""Rm command - stage files for removal."""

import click

from tinyvcs.operations import commands
from tinyvcs.cli.output import echo_result, warning


@click.command('rm')
@click.argument('paths', nargs=-1, required=True)
def rm_cmd(paths):
    """
    Remove files from the working tree and the next commit.

    A file tracked by HEAD is deleted and staged for removal. A file that
    is only staged is unstaged and left on disk.

    Examples:
        vcs rm old.txt
    """
    for path in paths:
        echo_result(commands.remove(path), style=warning)
