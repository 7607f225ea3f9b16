"""Commit command - record changes to the repository."""

import click

from tinyvcs.operations import commands
from tinyvcs.cli.output import echo_result, success


@click.command('commit')
@click.option('-m', '--message', default='', help='Commit message')
def commit_cmd(message):
    """
    Record staged changes as a new commit on the current branch.

    Examples:
        vcs commit -m "Initial commit"
    """
    result = commands.commit(message)
    echo_result(result)

    summary = message.split('\n')[0]
    click.echo(success(f"[{result.digest[:7]}] {summary}"))
