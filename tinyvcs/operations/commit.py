"""Commit builder: turns the head tree plus staged changes into a commit."""

import logging
from typing import Dict, Optional

from tinyvcs.core.objects import Commit, Tree
from tinyvcs.exceptions import EmptyMessageError, NothingToCommitError

logger = logging.getLogger(__name__)


class CommitBuilder:
    """
    Builds tree and commit objects from an index.

    The new tree is always a complete snapshot: the parent's flattened
    tree with every staged add and removal applied.
    """

    def __init__(self, repo):
        """
        Initialize commit builder.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def apply_index(self, base_files: Dict[str, str], index) -> Dict[str, str]:
        """
        Apply staged entries to a flattened tree.

        Args:
            base_files: {path: digest} of the parent snapshot
            index: Index with pending changes

        Returns:
            New {path: digest} mapping; base_files is left untouched
        """
        files = dict(base_files)
        for entry in index.entries.values():
            if entry.is_removal:
                files.pop(entry.path, None)
            else:
                files[entry.path] = entry.digest
        return files

    def build_tree(self, files: Dict[str, str]) -> str:
        """Write a tree for the given {path: digest} mapping and return its digest."""
        tree = Tree()
        for path, digest in files.items():
            tree.add_blob(path, digest)
        return self.repo.write_object(tree)

    def build(self, parent_hash: str, index, message: str,
              timestamp: Optional[int] = None) -> str:
        """
        Create a commit on top of parent_hash.

        Args:
            parent_hash: Digest of the parent commit
            index: Index with pending changes
            message: Commit message
            timestamp: Seconds since the epoch (defaults to now)

        Returns:
            str: Digest of the new commit

        Raises:
            EmptyMessageError: If message is empty
            NothingToCommitError: If the index has no entries
        """
        if not message:
            raise EmptyMessageError()
        if len(index) == 0:
            raise NothingToCommitError()

        parent = self.repo.read_commit(parent_hash)
        files = self.apply_index(self.repo.tree_files(parent.tree), index)
        tree_hash = self.build_tree(files)

        commit = Commit.create(
            tree_hash=tree_hash,
            parent_hash=parent_hash,
            message=message,
            timestamp=timestamp
        )
        commit_hash = self.repo.write_object(commit)

        logger.info("Built commit %s (tree %s, %d file(s))",
                    commit_hash[:7], tree_hash[:7], len(files))
        return commit_hash
