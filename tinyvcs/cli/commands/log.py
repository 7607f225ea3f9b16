"""Log command - show commit history."""

import click

from tinyvcs.operations import commands
from tinyvcs.cli.output import echo_result, warning


def highlight_commits(history: str) -> str:
    lines = []
    for line in history.split('\n'):
        lines.append(warning(line) if line.startswith('Commit: ') else line)
    return '\n'.join(lines)


@click.command('log')
def log_cmd():
    """
    Show commit history of HEAD, newest first.

    Examples:
        vcs log
    """
    echo_result(commands.log(), style=highlight_commits)
