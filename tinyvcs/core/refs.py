"""Reference management for tinyvcs."""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from tinyvcs.exceptions import (
    DetachedHeadError,
    InvalidArgumentsError,
    ReferenceNotFoundError,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HeadState:
    """
    Where HEAD points.

    ``branch`` is the current branch name, or None when HEAD is detached.
    ``commit`` is always the commit digest HEAD resolves to.
    """
    branch: Optional[str]
    commit: str

    @property
    def detached(self) -> bool:
        return self.branch is None

    def describe(self) -> str:
        if self.detached:
            return f"HEAD detached at {self.commit}"
        return f"On branch {self.branch}"


class RefManager:
    """
    Manages branches and HEAD.

    Handles:
    - Branch files (branches/<name>, one commit digest each)
    - HEAD attached to a branch (HEAD holds the branch name)
    - Detached HEAD (HEAD holds a raw commit digest)
    """

    def __init__(self, repo):
        """
        Initialize reference manager.

        Args:
            repo: Repository instance
        """
        self.repo = repo
        self.branches_dir = repo.branches_dir
        self.head_file = repo.head_file

    def _branch_path(self, branch_name: str):
        if (not branch_name or '/' in branch_name or '\\' in branch_name
                or branch_name.startswith('.') or branch_name.strip() != branch_name):
            raise InvalidArgumentsError(f"Invalid branch name: {branch_name!r}")
        return self.branches_dir / branch_name

    def branch_exists(self, branch_name: str) -> bool:
        try:
            return self._branch_path(branch_name).is_file()
        except InvalidArgumentsError:
            return False

    def read_branch(self, branch_name: str) -> str:
        """
        Read the commit digest a branch points to.

        Raises:
            ReferenceNotFoundError: If the branch does not exist
        """
        if not self.branch_exists(branch_name):
            raise ReferenceNotFoundError(f"Branch {branch_name} was not found.")
        return self._branch_path(branch_name).read_text().strip()

    def read_head(self) -> HeadState:
        """
        Read HEAD.

        HEAD is attached when its content names an existing branch, and
        detached otherwise.
        """
        content = self.head_file.read_text().strip()
        if self.branch_exists(content):
            return HeadState(content, self.read_branch(content))
        return HeadState(None, content)

    def resolve_head(self) -> str:
        """Resolve HEAD to a commit hash."""
        return self.read_head().commit

    def get_current_branch(self) -> Optional[str]:
        """
        Get the current branch name.

        Returns:
            Branch name or None if in detached HEAD state
        """
        return self.read_head().branch

    def is_detached_head(self) -> bool:
        return self.read_head().detached

    def require_attached(self) -> HeadState:
        """
        Return the HEAD state, refusing a detached HEAD.

        Raises:
            DetachedHeadError: If HEAD does not point at a branch
        """
        head = self.read_head()
        if head.detached:
            raise DetachedHeadError()
        return head

    def set_head_branch(self, branch_name: str) -> None:
        """Attach HEAD to an existing branch."""
        if not self.branch_exists(branch_name):
            raise ReferenceNotFoundError(f"{branch_name} does not exist.")
        self.head_file.write_text(branch_name)
        logger.debug("HEAD -> %s", branch_name)

    def set_head_detached(self, commit_hash: str) -> None:
        """Point HEAD directly at a commit."""
        if not self.repo.is_commit(commit_hash):
            raise ReferenceNotFoundError(f"No commit with ID {commit_hash} exists.")
        self.head_file.write_text(commit_hash)
        logger.debug("HEAD detached at %s", commit_hash[:7])

    def list_branches(self) -> List[Tuple[str, str]]:
        """
        List all branches.

        Returns:
            List of (branch_name, commit_hash) tuples, sorted by name
        """
        if not self.branches_dir.exists():
            return []

        branches = []
        for branch_file in self.branches_dir.iterdir():
            if branch_file.is_file():
                branches.append((branch_file.name, branch_file.read_text().strip()))

        return sorted(branches, key=lambda x: x[0])

    def create_branch(self, branch_name: str, commit_hash: str) -> bool:
        """
        Create a new branch.

        Returns:
            True if created, False if already exists
        """
        path = self._branch_path(branch_name)
        if path.exists():
            return False
        path.write_text(commit_hash)
        logger.info("Created branch %s at %s", branch_name, commit_hash[:7])
        return True

    def update_branch(self, branch_name: str, commit_hash: str) -> None:
        """
        Move an existing branch to a new commit.

        Raises:
            ReferenceNotFoundError: If the branch does not exist
        """
        if not self.branch_exists(branch_name):
            raise ReferenceNotFoundError(f"Branch {branch_name} was not found.")
        self._branch_path(branch_name).write_text(commit_hash)
        logger.debug("Branch %s -> %s", branch_name, commit_hash[:7])

    def delete_branch(self, branch_name: str) -> bool:
        """
        Delete a branch.

        The current branch is never deleted.

        Returns:
            True if deleted, False if not found or current
        """
        if self.get_current_branch() == branch_name:
            return False
        if not self.branch_exists(branch_name):
            return False
        self._branch_path(branch_name).unlink()
        logger.info("Deleted branch %s", branch_name)
        return True
