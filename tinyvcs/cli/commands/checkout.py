"""Checkout command - switch branches or restore files."""

import click

from tinyvcs.exceptions import InvalidArgumentsError
from tinyvcs.operations import commands
from tinyvcs.operations.commands import CommandResult
from tinyvcs.cli.output import echo_result, success

PATHS_KEY = 'checkout.paths'


class CheckoutCommand(click.Command):
    """Command class that keeps the paths given after ``--`` apart from TARGET."""

    def parse_args(self, ctx, args):
        if '--' in args:
            split = args.index('--')
            ctx.meta[PATHS_KEY] = args[split + 1:]
            args = args[:split]
        return super().parse_args(ctx, args)


@click.command('checkout', cls=CheckoutCommand)
@click.argument('target', required=False)
@click.pass_context
def checkout_cmd(ctx, target):
    """
    Switch branches, or restore working tree files.

    TARGET is a branch name or a full commit digest. Checking out a commit
    detaches HEAD. Paths after ``--`` are restored from TARGET, or from HEAD
    when TARGET is omitted, without moving HEAD or touching the index.

    Examples:
        vcs checkout feature          # Switch to branch
        vcs checkout 3f2a...          # Detach HEAD at commit
        vcs checkout -- file.txt      # Restore file from HEAD
        vcs checkout 3f2a... -- a.txt # Restore file from commit
    """
    paths = ctx.meta.get(PATHS_KEY)

    if paths is None:
        echo_result(commands.checkout(target), style=success)
        return

    if not paths:
        echo_result(CommandResult(str(InvalidArgumentsError()), error=True))
    for path in paths:
        echo_result(commands.checkout(target, path=path))
