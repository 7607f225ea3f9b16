"""Operations module for high-level tinyvcs operations.

This module contains the business logic built on top of tinyvcs.core:
- Commit building
- Status computation
- Checkout logic
- History walking
- The command surface used by the CLI
"""

from tinyvcs.operations.commit import CommitBuilder
from tinyvcs.operations.status import StatusEngine, WorkingTreeStatus, format_status
from tinyvcs.operations.checkout import CheckoutEngine
from tinyvcs.operations.log import get_commit_history, format_timestamp
from tinyvcs.operations.commands import CommandResult

__all__ = [
    'CommitBuilder',
    'StatusEngine', 'WorkingTreeStatus', 'format_status',
    'CheckoutEngine',
    'get_commit_history', 'format_timestamp',
    'CommandResult',
]
