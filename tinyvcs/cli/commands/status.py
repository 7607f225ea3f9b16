"""Status command - show working tree status."""

import click

from tinyvcs.operations import commands
from tinyvcs.cli.output import echo_result, success, error


def colorize_status(report: str) -> str:
    """Color staged entries green, unstaged and untracked entries red."""
    lines = []
    color = None
    for line in report.split('\n'):
        if line.startswith('Changes to be committed'):
            color = success
        elif line.startswith(('Changes not staged', 'Untracked files')):
            color = error
        elif line.startswith('\t') and color is not None:
            line = '\t' + color(line[1:])
        lines.append(line)
    return '\n'.join(lines)


@click.command('status')
def status_cmd():
    """
    Show the working tree status.

    Lists staged changes (HEAD vs index), unstaged modifications and
    untracked files.

    Examples:
        vcs status
    """
    echo_result(commands.status(), style=colorize_status)
