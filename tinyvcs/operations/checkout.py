"""Checkout engine: materializes trees and commits into the working directory."""

import logging
from typing import Optional, Tuple

from tinyvcs.core.objects import Blob
from tinyvcs.core.worktree import file_digest, top_level_files
from tinyvcs.exceptions import CorruptObjectError, ReferenceNotFoundError

logger = logging.getLogger(__name__)


class CheckoutEngine:
    """
    Writes stored snapshots into the working directory and moves HEAD.

    Only files whose content differs from the target are rewritten. Files
    at the top of the work tree that the target does not track are removed;
    files inside sub-directories are left in place.
    """

    def __init__(self, repo):
        """
        Initialize checkout engine.

        Args:
            repo: Repository instance
        """
        self.repo = repo

    def _write_blob(self, rel_path: str, blob_hash: str) -> None:
        blob = self.repo.read_object(blob_hash)
        if not isinstance(blob, Blob):
            raise CorruptObjectError(f"Object {blob_hash} for {rel_path} is not a blob")

        full_path = self.repo.work_tree / rel_path
        full_path.parent.mkdir(parents=True, exist_ok=True)
        full_path.write_bytes(blob.data)

    def checkout_tree(self, tree_hash: str) -> Tuple[int, int]:
        """
        Make the working directory match a tree.

        Args:
            tree_hash: Digest of the target tree

        Returns:
            (files written, files removed)
        """
        target_files = self.repo.tree_files(tree_hash)
        stale = top_level_files(self.repo) - set(target_files)

        for name in sorted(stale):
            (self.repo.work_tree / name).unlink()

        written = 0
        for rel_path, blob_hash in sorted(target_files.items()):
            full_path = self.repo.work_tree / rel_path
            if full_path.is_file() and file_digest(full_path) == blob_hash:
                continue
            self._write_blob(rel_path, blob_hash)
            written += 1

        logger.info("Checked out tree %s: %d written, %d removed",
                    tree_hash[:7], written, len(stale))
        return written, len(stale)

    def lookup(self, tree_hash: str, path: str) -> Optional[str]:
        """
        Find the blob digest recorded for path inside a tree.

        The full path is looked up first. Failing that, the first path
        segment is looked up as a subtree and the rest of the path is
        resolved inside it.

        Returns:
            Blob digest, or None if the path does not exist in the tree
        """
        tree = self.repo.read_tree(tree_hash)
        if path in tree.blobs:
            return tree.blobs[path]

        head, sep, rest = path.partition('/')
        if sep and rest and head in tree.trees:
            return self.lookup(tree.trees[head], rest)
        return None

    def checkout_single_file(self, commit_hash: str, path: str) -> Optional[str]:
        """
        Restore one working file to its version in a commit.

        The file is written if the commit tracks it and deleted otherwise.
        The index is not touched.

        Returns:
            The blob digest written, or None if the commit does not track path
        """
        commit = self.repo.read_commit(commit_hash)
        blob_hash = self.lookup(commit.tree, path)

        full_path = self.repo.work_tree / path
        if blob_hash is None:
            if full_path.is_file():
                full_path.unlink()
            logger.debug("%s not in %s, removed from work tree", path, commit_hash[:7])
        else:
            self._write_blob(path, blob_hash)
            logger.debug("Restored %s from %s", path, commit_hash[:7])
        return blob_hash

    def checkout_branch(self, branch_name: str) -> Tuple[int, int]:
        """
        Attach HEAD to a branch and check out its commit.

        Raises:
            ReferenceNotFoundError: If the branch does not exist
        """
        refs = self.repo.refs
        if not refs.branch_exists(branch_name):
            raise ReferenceNotFoundError(f"{branch_name} does not exist.")

        commit_hash = refs.read_branch(branch_name)
        tree_hash = self.repo.read_commit(commit_hash).tree
        refs.set_head_branch(branch_name)
        return self.checkout_tree(tree_hash)

    def checkout_commit(self, commit_hash: str) -> Tuple[int, int]:
        """
        Detach HEAD at a commit and check it out.

        Raises:
            ReferenceNotFoundError: If no commit has this digest
        """
        if not self.repo.is_commit(commit_hash):
            raise ReferenceNotFoundError(f"No commit with ID {commit_hash} exists.")

        tree_hash = self.repo.read_commit(commit_hash).tree
        self.repo.refs.set_head_detached(commit_hash)
        return self.checkout_tree(tree_hash)
