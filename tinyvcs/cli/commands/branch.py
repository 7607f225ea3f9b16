"""Branch command - manage branches."""

import click

from tinyvcs.operations import commands
from tinyvcs.cli.output import echo_result, success


def highlight_current(listing: str) -> str:
    """Color the line of the current branch."""
    lines = []
    for line in listing.split('\n'):
        lines.append(success(line) if line.endswith(' *') else line)
    return '\n'.join(lines)


@click.command('branch')
@click.option('-d', '--delete', 'delete_name', metavar='BRANCH', help='Delete a branch')
@click.argument('branch_name', required=False)
def branch_cmd(delete_name, branch_name):
    """
    List, create, or delete branches.

    With no arguments, lists all branches. The current branch is marked with *.
    With one argument, creates a new branch at HEAD.

    Examples:
        vcs branch                    # List branches
        vcs branch feature            # Create 'feature' branch at HEAD
        vcs branch -d feature         # Delete 'feature' branch
    """
    result = commands.branch(name=branch_name, delete=delete_name)

    if branch_name is None and delete_name is None:
        echo_result(result, style=highlight_current)
        return

    echo_result(result, style=success)
    if branch_name is not None:
        click.echo(success(f"Created branch {branch_name}"))
