"""CLI commands for tinyvcs."""

from tinyvcs.cli.commands.init import init_cmd
from tinyvcs.cli.commands.add import add_cmd
from tinyvcs.cli.commands.rm import rm_cmd
from tinyvcs.cli.commands.commit import commit_cmd
from tinyvcs.cli.commands.branch import branch_cmd
from tinyvcs.cli.commands.checkout import checkout_cmd
from tinyvcs.cli.commands.log import log_cmd
from tinyvcs.cli.commands.status import status_cmd
from tinyvcs.cli.commands.config import config_cmd

__all__ = ['init_cmd', 'add_cmd', 'rm_cmd', 'commit_cmd', 'branch_cmd',
           'checkout_cmd', 'log_cmd', 'status_cmd', 'config_cmd']
