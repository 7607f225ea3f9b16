"""tinyvcs - a minimal local version control engine."""

__version__ = '0.1.0'

from tinyvcs.core.repository import Repository
from tinyvcs.core.objects import VcsObject, Blob, Tree, Commit

__all__ = [
    'Repository',
    'VcsObject',
    'Blob',
    'Tree',
    'Commit',
]
