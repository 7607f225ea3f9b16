"""Core functionality for tinyvcs.

This module contains the core data structures:
- Objects (Blob, Tree, Commit)
- Repository and object store
- Index/staging area
- Branch and HEAD management
- Configuration management
- Hashing utilities

For commit building, status and checkout, see tinyvcs.operations
"""

from tinyvcs.core.objects import VcsObject, Blob, Tree, Commit, NO_PARENT
from tinyvcs.core.repository import Repository
from tinyvcs.core.hash import hash_object, hash_text
from tinyvcs.core.index import Index, IndexEntry, RemoveOutcome
from tinyvcs.core.refs import RefManager, HeadState
from tinyvcs.core.config import Config, get_config

__all__ = [
    'VcsObject',
    'Blob',
    'Tree',
    'Commit',
    'NO_PARENT',
    'Repository',
    'Index',
    'IndexEntry',
    'RemoveOutcome',
    'RefManager',
    'HeadState',
    'Config',
    'get_config',
    'hash_object',
    'hash_text',
]
